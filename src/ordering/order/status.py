"""Order status workflow — admin command and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order, parse_status
from shared.errors import OrderNotFound, UnauthorizedError
from shared.principal import Principal

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    actor_id = Identifier(required=True)
    actor_role = String(max_length=20, required=True)
    order_id = Identifier(required=True)
    # Membership is checked by the handler after the admin check
    status = Text()


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        principal = Principal.from_values(command.actor_id, command.actor_role)
        if not principal.is_admin:
            raise UnauthorizedError("Only admins can update order status")

        target = parse_status(command.status)

        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            raise OrderNotFound(str(command.order_id)) from None

        previous = order.status
        order.transition_to(target)
        repo.add(order)

        logger.info(
            "Order status updated",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
            actor_id=principal.user_id,
        )
        return str(order.id)
