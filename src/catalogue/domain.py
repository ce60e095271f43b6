"""Catalogue bounded context — the menu of orderable foods and their categories.

Owns food descriptions, current prices and category membership. Ordering
reads current prices from here at order-placement time.
"""

import structlog
from protean.domain import Domain

catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
