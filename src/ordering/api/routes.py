"""FastAPI routes for the Ordering domain — customer orders and the admin workflow."""

import json

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.lookup import resolve_order_lines
from ordering.api.schemas import OrderResponse, PlaceOrderRequest, UpdateOrderStatusRequest
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from ordering.order.status import UpdateOrderStatus
from shared.errors import OrderNotFound, UnauthorizedError
from shared.principal import Principal, get_principal, require_admin


def _load_order(order_id: str) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id) from None


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, principal: Principal = Depends(get_principal)) -> OrderResponse:
    """Place an order for the caller.

    1. Resolve each line against the live menu (prices are never client-submitted)
    2. Create the order from the priced snapshots
    """
    lines = resolve_order_lines([line.model_dump() for line in body.items])

    command = PlaceOrder(
        actor_id=principal.user_id,
        actor_role=principal.role.value,
        items=json.dumps(lines),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse(**_load_order(order_id).snapshot())


@order_router.get("", response_model=list[OrderResponse])
async def list_my_orders(principal: Principal = Depends(get_principal)) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).for_customer(principal.user_id)
    return [OrderResponse(**order.snapshot()) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, principal: Principal = Depends(get_principal)) -> OrderResponse:
    order = _load_order(order_id)
    if not principal.is_admin and str(order.customer_id) != principal.user_id:
        raise UnauthorizedError("Order belongs to another customer")
    return OrderResponse(**order.snapshot())


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_order_router = APIRouter(prefix="/admin/orders", tags=["admin"])


@admin_order_router.get("", response_model=list[OrderResponse], dependencies=[Depends(require_admin)])
async def list_all_orders() -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).recent()
    return [OrderResponse(**order.snapshot()) for order in orders]


@admin_order_router.put("/{order_id}", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    principal: Principal = Depends(get_principal),
) -> OrderResponse:
    # The handler performs the admin check so direct callers get the same rules
    command = UpdateOrderStatus(
        actor_id=principal.user_id,
        actor_role=principal.role.value,
        order_id=order_id,
        status=body.status,
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse(**_load_order(order_id).snapshot())
