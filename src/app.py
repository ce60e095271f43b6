"""FoodOrder FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os

from catalogue.domain import catalogue
from ordering.domain import ordering
from shared.logging import configure_logging
from shared.web import create_app

configure_logging(log_dir=os.getenv("LOG_DIR") or None)

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# The catalogue goes first: order placement resolves prices through it.
catalogue.init()
ordering.init()

app = create_app()
