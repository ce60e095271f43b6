"""Query methods for Food aggregates."""

from catalogue.domain import catalogue
from catalogue.food.food import Food


@catalogue.repository(part_of=Food)
class FoodRepository:
    def menu(self, limit: int = 100) -> list[Food]:
        """Foods for the menu page, newest first."""
        return self._dao.query.order_by("-created_at").limit(limit).all().items

    def in_category(self, category_id) -> list[Food]:
        return self._dao.query.filter(category_id=str(category_id)).all().items
