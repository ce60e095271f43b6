"""Food aggregate root — a single orderable menu item."""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text

from catalogue.domain import catalogue

# Sentinel sent by the admin food form for "no category"
NO_CATEGORY = "no-category"


def _clean(value):
    if value is None:
        return None
    return value.strip() or None


@catalogue.aggregate
class Food:
    """A dish on the menu with its current price.

    The price here is the live catalogue price. Carts snapshot it when an
    item is added and orders re-resolve it at placement time, so changing
    it never rewrites an existing order.
    """

    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    image_url: String(max_length=500)
    category_id: Identifier()
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def name_and_description_must_not_be_blank(self):
        if not (self.name or "").strip() or not (self.description or "").strip():
            raise ValidationError({"name": ["Name and description are required"]})

    @classmethod
    def create(cls, name, description, price, image_url=None, category_id=None):
        from catalogue.food.events import FoodAdded

        now = datetime.now(UTC)
        food = cls(
            name=(name or "").strip(),
            description=(description or "").strip(),
            price=price,
            image_url=_clean(image_url),
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        food.raise_(
            FoodAdded(
                food_id=food.id,
                name=food.name,
                price=food.price,
                category_id=food.category_id,
            )
        )
        return food

    def update_details(self, name, description, price, image_url=None, category_id=None, clear_category=False):
        """Replace the food's details.

        ``image_url=None`` leaves the image untouched while an empty string
        removes it. ``category_id`` is only applied when given, unless
        ``clear_category`` is set.
        """
        from catalogue.food.events import FoodDetailsUpdated, FoodPriceChanged

        previous_price = self.price

        with atomic_change(self):
            self.name = (name or "").strip()
            self.description = (description or "").strip()
            self.price = price
            if image_url is not None:
                self.image_url = _clean(image_url)
            if clear_category:
                self.category_id = None
            elif category_id is not None:
                self.category_id = category_id
        self.updated_at = datetime.now(UTC)

        self.raise_(
            FoodDetailsUpdated(
                food_id=self.id,
                name=self.name,
                description=self.description,
                category_id=self.category_id,
            )
        )
        if previous_price != self.price:
            self.raise_(
                FoodPriceChanged(
                    food_id=self.id,
                    previous_price=previous_price,
                    new_price=self.price,
                )
            )

    def menu_entry(self, category_name=None):
        """Wire representation shared by the menu endpoints and the storefront cart."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "imageUrl": self.image_url,
            "category_id": str(self.category_id) if self.category_id else None,
            "category_name": category_name,
        }
