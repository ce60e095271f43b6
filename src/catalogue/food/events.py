"""Domain events for the Food aggregate."""

from protean.fields import Float, Identifier, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Food")
class FoodAdded:
    """A new dish was added to the menu."""

    food_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    category_id: Identifier()


@catalogue.event(part_of="Food")
class FoodDetailsUpdated:
    food_id: Identifier(required=True)
    name: String(required=True)
    description: Text()
    category_id: Identifier()


@catalogue.event(part_of="Food")
class FoodPriceChanged:
    """The live catalogue price changed. Existing orders keep their snapshot."""

    food_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)
