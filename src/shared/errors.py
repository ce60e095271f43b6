"""Error taxonomy for FoodOrder and its mapping onto HTTP responses.

Every failure that crosses the API boundary carries a stable ``kind``:

    ValidationError  400   malformed input (EmptyOrder, InvalidStatus, ...)
    NotFound         404   referenced food, category or order does not exist
    Unauthorized     401   actor lacks the required capability
    Conflict         409   uniqueness or concurrent-update conflicts

Responses have the shape ``{"error": <kind>, "messages": {<field>: [...]}}``.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class EmptyOrder(ValidationError):
    """An order was submitted without any line items."""

    kind = "EmptyOrder"


class InvalidStatus(ValidationError):
    """A status outside the fixed order status enumeration was requested."""

    kind = "InvalidStatus"


class FoodOrderError(Exception):
    """Base for non-validation domain errors with a stable ``kind``."""

    kind = "Error"
    field = "_entity"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def messages(self) -> dict[str, list[str]]:
        return {self.field: [self.message]}


class NotFoundError(FoodOrderError):
    kind = "NotFound"


class ItemNotFound(NotFoundError):
    """A catalogue item referenced by an order does not exist."""

    kind = "ItemNotFound"
    field = "food_id"

    def __init__(self, food_id: str):
        super().__init__(f"Food item {food_id} not found")
        self.food_id = food_id


class OrderNotFound(NotFoundError):
    kind = "OrderNotFound"
    field = "order_id"

    def __init__(self, order_id: str):
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class UnauthorizedError(FoodOrderError):
    """The acting principal lacks the capability required for the operation."""

    kind = "Unauthorized"
    field = "principal"


class ConflictError(FoodOrderError):
    kind = "Conflict"


def error_kind(exc: Exception) -> str:
    return getattr(exc, "kind", None) or type(exc).__name__


def _payload(exc: Exception, messages) -> dict:
    return {"error": error_kind(exc), "messages": messages}


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle domain validation failures raised by aggregates and handlers."""
    messages = getattr(exc, "messages", None) or {"_entity": [str(exc)]}
    logger.warning("Validation failed", path=request.url.path, kind=error_kind(exc), messages=messages)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_payload(exc, messages))


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, FoodOrderError):
        payload = _payload(exc, exc.messages)
    else:
        payload = {"error": NotFoundError.kind, "messages": {"_entity": [str(exc)]}}
    logger.info("Resource not found", path=request.url.path, kind=payload["error"])
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=payload)


async def unauthorized_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Access denied", path=request.url.path, reason=str(exc))
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=_payload(exc, exc.messages))


async def conflict_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Conflict", path=request.url.path, reason=str(exc))
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=_payload(exc, exc.messages))


def register_exception_handlers(app: FastAPI) -> None:
    """Register the domain error mapping with a FastAPI application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
