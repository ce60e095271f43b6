"""Order aggregate — the core of the ordering domain.

An order is created from priced line snapshots and then only ever moves
through its status workflow. Items and the total are fixed at placement.

Status workflow (7 states):
    Pending → Confirmed → Preparing → Ready → Out for Delivery → Delivered
    any → Cancelled

The workflow is driven by staff, so the transition table currently allows
every status to move to every other status. Tightening the workflow means
editing ``_VALID_TRANSITIONS``, not the aggregate.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged
from shared.errors import EmptyOrder, InvalidStatus


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PREPARING = "Preparing"
    READY = "Ready"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# State machine transition map
_VALID_TRANSITIONS = {status: set(OrderStatus) for status in OrderStatus}

# Orders in these states are finished. Not enforced by the transition map.
TERMINAL_STATES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})


def parse_status(value) -> OrderStatus:
    """Coerce a wire label (or an ``OrderStatus``) into a member.

    Raises ``InvalidStatus`` for anything outside the enumeration.
    """
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(status.value for status in OrderStatus)
        raise InvalidStatus({"status": [f"Invalid status '{value}'. Must be one of: {allowed}"]}) from None


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderLine:
    """A food, quantity and unit price captured when the order was placed.

    The name and price are snapshots; later menu edits never reach them.
    """

    food_id = Identifier(required=True)
    food_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderLine)
    total_price = Float(required=True, min_value=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, lines):
        """Create a new order in ``Pending`` from resolved line snapshots.

        Args:
            customer_id: The customer placing the order.
            lines: List of dicts with food_id, food_name, quantity and
                unit_price, already priced from the catalogue.
        """
        if not lines:
            raise EmptyOrder({"items": ["Order must contain at least one item"]})

        order_lines = [
            OrderLine(
                food_id=line["food_id"],
                food_name=line["food_name"],
                quantity=line["quantity"],
                unit_price=line["unit_price"],
            )
            for line in lines
        ]
        total_price = round(sum(line.line_total for line in order_lines), 2)

        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            total_price=total_price,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        for line in order_lines:
            order.add_items(line)

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=order.customer_id,
                items=json.dumps(
                    [
                        {
                            "food_id": str(line.food_id),
                            "food_name": line.food_name,
                            "quantity": line.quantity,
                            "unit_price": line.unit_price,
                        }
                        for line in order_lines
                    ]
                ),
                total_price=total_price,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate that the current state allows transition to target."""
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise InvalidStatus({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def transition_to(self, new_status):
        """Move the order to ``new_status``.

        Only the status and ``updated_at`` change. Re-applying the current
        status is accepted.
        """
        target = parse_status(new_status)
        self._assert_can_transition(target)

        previous = self.status
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=target.value,
                changed_at=now,
            )
        )

    @property
    def is_terminal(self) -> bool:
        return OrderStatus(self.status) in TERMINAL_STATES

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.items)

    def snapshot(self) -> dict:
        """Wire representation returned by the order endpoints."""
        return {
            "id": str(self.id),
            "customer_id": str(self.customer_id),
            "status": self.status,
            "items": [
                {
                    "id": str(line.id),
                    "food_id": str(line.food_id),
                    "food_name": line.food_name,
                    "quantity": line.quantity,
                    "unit_price": line.unit_price,
                }
                for line in self.items
            ],
            "total_price": self.total_price,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
