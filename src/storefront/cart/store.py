"""Client-side cart with write-through persistence.

The cart is an ordered collection of ``CartEntry`` with at most one entry
per item id. Every mutation is saved to its storage slot straight away, and
the slot is read once when the store is created. Storage trouble never
reaches the caller: a bad slot loads as an empty cart, and a failed write
or an entry that cannot be encoded turns the store into an in-memory cart
for the rest of its life.
"""

import json
from collections.abc import Iterator, Mapping

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from storefront.cart.entry import CartEntry
from storefront.cart.storage import DEFAULT_SLOT, CartStorage, MemoryStorage

logger = structlog.get_logger(__name__)


def _descriptor(item) -> dict:
    """Normalize a catalogue item (mapping, pydantic model or plain object) to a dict."""
    if isinstance(item, Mapping):
        data = dict(item)
    elif isinstance(item, BaseModel):
        data = item.model_dump(by_alias=True)
    else:
        data = {key: value for key, value in vars(item).items() if not key.startswith("_")}
    data.pop("quantity", None)
    data["id"] = str(data["id"])
    return data


class CartStore:
    def __init__(self, storage: CartStorage | None = None, slot: str = DEFAULT_SLOT):
        self.storage = storage if storage is not None else MemoryStorage()
        self.slot = slot
        self.persistent = True
        self._entries: list[CartEntry] = []
        self.load()

    # -------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------
    def add_item(self, item) -> CartEntry:
        """Add one unit of ``item``.

        A new entry snapshots the item's current price. Adding an item that
        is already in the cart only bumps its quantity; the first price
        snapshot is kept.
        """
        data = _descriptor(item)
        entry = self.get(data["id"])
        if entry is not None:
            entry.quantity += 1
        else:
            entry = CartEntry.model_validate({**data, "quantity": 1})
            self._entries.append(entry)
        self.save()
        return entry

    def update_quantity(self, item_id, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(item_id)
            return

        entry = self.get(item_id)
        if entry is None:
            return
        entry.quantity = quantity
        self.save()

    def remove_item(self, item_id) -> None:
        entry = self.get(item_id)
        if entry is None:
            return
        self._entries.remove(entry)
        self.save()

    def clear(self) -> None:
        self._entries = []
        self.save()

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def total_price(self) -> float:
        return sum(entry.line_total for entry in self._entries)

    def total_item_count(self) -> int:
        return sum(entry.quantity for entry in self._entries)

    def get(self, item_id) -> CartEntry | None:
        item_id = str(item_id)
        for entry in self._entries:
            if entry.id == item_id:
                return entry
        return None

    @property
    def entries(self) -> list[CartEntry]:
        return list(self._entries)

    def order_lines(self) -> list[dict]:
        """Checkout payload: ids and quantities only, prices are resolved by the server."""
        return [{"food_id": entry.id, "quantity": entry.quantity} for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CartEntry]:
        return iter(list(self._entries))

    def __contains__(self, item_id) -> bool:
        return self.get(item_id) is not None

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    def save(self) -> None:
        if not self.persistent:
            return

        try:
            data = json.dumps([entry.to_wire() for entry in self._entries])
            self.storage.write(self.slot, data)
        except (OSError, TypeError, ValueError) as exc:
            self.persistent = False
            logger.warning("Cart storage unavailable, keeping cart in memory", slot=self.slot, error=str(exc))

    def load(self) -> None:
        self._entries = []
        try:
            raw = self.storage.read(self.slot)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read stored cart", slot=self.slot, error=str(exc))
            return

        if raw is None:
            return

        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise ValueError("stored cart is not a list")
            entries = [CartEntry.model_validate(record) for record in records]
        except (ValueError, TypeError, PydanticValidationError) as exc:
            logger.warning("Discarding malformed stored cart", slot=self.slot, error=str(exc))
            return

        for entry in entries:
            if self.get(entry.id) is None:
                self._entries.append(entry)
