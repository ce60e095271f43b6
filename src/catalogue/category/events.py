"""Domain events for the FoodCategory aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="FoodCategory")
class CategoryCreated:
    """A new category was added to the menu."""

    category_id: Identifier(required=True)
    name: String(required=True)


@catalogue.event(part_of="FoodCategory")
class CategoryDetailsUpdated:
    """A category's name, description or visibility was changed."""

    category_id: Identifier(required=True)
    name: String(required=True)
    description: Text()
    is_active: Boolean()


@catalogue.event(part_of="FoodCategory")
class CategoryDeactivated:
    """A category was deactivated and hidden from the storefront."""

    category_id: Identifier(required=True)
    deactivated_at: DateTime(required=True)
