"""
Storefront API Client

HTTP client the storefront uses to browse the menu, fill the cart with
catalogue prices and check out.
"""

from typing import Any

import httpx
import structlog

from shared.principal import Principal
from storefront.cart.storage import FileStorage
from storefront.cart.store import CartStore
from storefront.settings import StorefrontSettings, get_settings

logger = structlog.get_logger(__name__)


class StorefrontError(Exception):
    """A storefront call failed. ``kind`` mirrors the server's error kind."""

    def __init__(self, kind: str, message: str = "", status_code: int | None = None, messages: dict | None = None):
        super().__init__(message or kind)
        self.kind = kind
        self.status_code = status_code
        self.messages = messages or {}


class CheckoutError(StorefrontError):
    """Placing the order failed; the cart was left untouched."""


class StorefrontClient:
    """
    Client for the FoodOrder API.

    Pass ``http_client`` to reuse an existing ``httpx.Client`` (for instance
    FastAPI's ``TestClient``); it must already carry the base URL.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        principal: Principal | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.principal = principal
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.Client(base_url=self.base_url, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: StorefrontSettings | None = None) -> "StorefrontClient":
        settings = settings or get_settings()
        principal = Principal.from_values(settings.user_id, settings.user_role) if settings.user_id else None
        return cls(base_url=settings.api_base_url, principal=principal, timeout=settings.timeout)

    def close(self) -> None:
        """Close HTTP client"""
        if self._owns_client:
            self._http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.principal is not None:
            headers.update(self.principal.headers())
        return headers

    def _request(self, method: str, path: str, body: Any = None, error_cls=StorefrontError) -> Any:
        try:
            response = self._http_client.request(method, path, headers=self._headers(), json=body)
        except httpx.HTTPError as exc:
            logger.warning("Storefront API unreachable", method=method, path=path, error=str(exc))
            raise error_cls("Unavailable", str(exc)) from exc

        if response.status_code >= 400:
            try:
                payload = response.json()
            except ValueError:
                payload = {}
            if not isinstance(payload, dict):
                payload = {}
            kind = payload.get("error", "ValidationError" if response.status_code == 422 else "Error")
            messages = payload.get("messages") or ({"detail": payload["detail"]} if "detail" in payload else {})
            logger.info("Storefront request failed", method=method, path=path, status_code=response.status_code, kind=kind)
            raise error_cls(kind, response.text, status_code=response.status_code, messages=messages)

        return response.json()

    # -------------------------------------------------------------------
    # Menu
    # -------------------------------------------------------------------
    def list_menu(self) -> list[dict]:
        return self._request("GET", "/foods")

    def get_food(self, food_id: str) -> dict:
        return self._request("GET", f"/foods/{food_id}")

    def add_to_cart(self, cart: CartStore, food_id: str):
        """Look up ``food_id`` and add it to ``cart`` at the current menu price."""
        food = self.get_food(food_id)
        return cart.add_item(food)

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def place_order(self, cart: CartStore) -> dict:
        """Submit the cart as an order.

        The server prices every line itself. On success the cart is cleared
        and the created order is returned; on any failure the cart is kept.
        """
        lines = cart.order_lines()
        if not lines:
            raise CheckoutError("EmptyOrder", "Cart is empty")

        order = self._request("POST", "/orders", body={"items": lines}, error_cls=CheckoutError)
        cart.clear()

        logger.info("Order submitted", order_id=order["id"], total_price=order["total_price"])
        return order

    def list_orders(self) -> list[dict]:
        return self._request("GET", "/orders")


def open_cart(settings: StorefrontSettings | None = None) -> CartStore:
    """Open the persisted cart configured for this machine."""
    settings = settings or get_settings()
    return CartStore(FileStorage(settings.cart_dir), slot=settings.cart_slot)
