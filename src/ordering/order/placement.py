"""Order placement — command and handler.

The command carries lines that were already priced against the menu (see
``catalogue.lookup``); the handler never accepts client prices directly.
"""

import json

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from shared.principal import Principal

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    actor_id = Identifier(required=True)
    actor_role = String(max_length=20, default="customer")
    items = Text(required=True)  # JSON: list of resolved line dicts


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        principal = Principal.from_values(command.actor_id, command.actor_role)
        lines = json.loads(command.items) if isinstance(command.items, str) else command.items

        order = Order.place(customer_id=principal.user_id, lines=lines)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=principal.user_id,
            item_count=order.item_count,
            total_price=order.total_price,
        )
        return str(order.id)
