"""Query methods for Order aggregates."""

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id, limit: int = 100) -> list[Order]:
        """A customer's own orders, newest first."""
        return self._dao.query.filter(customer_id=str(customer_id)).order_by("-created_at").limit(limit).all().items

    def recent(self, limit: int = 100) -> list[Order]:
        """All orders, newest first."""
        return self._dao.query.order_by("-created_at").limit(limit).all().items
