"""Ordering bounded context — order placement and the order status workflow."""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
