"""A single line in the client-side cart."""

from pydantic import BaseModel, ConfigDict, Field


class CartEntry(BaseModel):
    """A menu item the customer picked, with the price seen when it was added.

    Unknown display fields (``category_name`` and the like) are kept as-is
    so they survive a save/load cycle.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    name: str = ""
    description: str = ""
    price: float = Field(ge=0)
    image_url: str | None = Field(None, alias="imageUrl")
    quantity: int = Field(1, ge=1)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
