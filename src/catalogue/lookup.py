"""Price resolution for other bounded contexts.

Ordering never trusts prices sent by a client. Before an order is placed the
requested lines are resolved here against the live menu, and the resulting
name and price snapshots are what the order records.
"""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from catalogue.domain import catalogue
from catalogue.food.food import Food
from shared.errors import EmptyOrder, ItemNotFound

logger = structlog.get_logger(__name__)


def resolve_order_lines(lines) -> list[dict]:
    """Resolve ``[{"food_id", "quantity"}]`` into priced line snapshots.

    Raises ``EmptyOrder`` for an empty request and ``ItemNotFound`` for the
    first food that does not exist.
    """
    if not lines:
        raise EmptyOrder({"items": ["Order must contain at least one item"]})

    resolved = []
    with catalogue.domain_context():
        repo = catalogue.repository_for(Food)
        for line in lines:
            food_id = str(line["food_id"])
            quantity = line["quantity"]
            if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
                raise ValidationError({"quantity": [f"Quantity for {food_id} must be a positive integer"]})

            try:
                food = repo.get(food_id)
            except ObjectNotFoundError:
                logger.info("Ordered food not found", food_id=food_id)
                raise ItemNotFound(food_id) from None

            resolved.append(
                {
                    "food_id": food_id,
                    "food_name": food.name,
                    "quantity": quantity,
                    "unit_price": food.price,
                }
            )

    return resolved
