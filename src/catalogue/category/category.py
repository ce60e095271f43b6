"""FoodCategory aggregate root for grouping menu items."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from catalogue.domain import catalogue


@catalogue.aggregate
class FoodCategory:
    """A named grouping of foods on the menu (e.g. Burgers, Desserts).

    Categories are never hard-deleted: deactivation hides them from the
    storefront while keeping historic references intact.
    """

    name: String(required=True, min_length=2, max_length=100)
    description: Text()
    image_url: String(max_length=500)
    is_active: Boolean(default=True)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, name, description=None, image_url=None):
        from catalogue.category.events import CategoryCreated

        now = datetime.now(UTC)
        category = cls(
            name=name.strip(),
            description=(description or "").strip() or None,
            image_url=(image_url or "").strip() or None,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
            )
        )
        return category

    def update_details(self, name, description=None, image_url=None, is_active=None):
        from catalogue.category.events import CategoryDetailsUpdated

        self.name = name.strip()
        self.description = description
        self.image_url = image_url
        if is_active is not None:
            self.is_active = is_active
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryDetailsUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
                is_active=self.is_active,
            )
        )

    def deactivate(self):
        from catalogue.category.events import CategoryDeactivated

        if not self.is_active:
            raise ValidationError({"status": ["Category is already inactive"]})

        self.is_active = False
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            CategoryDeactivated(
                category_id=self.id,
                deactivated_at=now,
            )
        )
