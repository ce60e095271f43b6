"""Query methods for FoodCategory aggregates."""

from catalogue.category.category import FoodCategory
from catalogue.domain import catalogue


@catalogue.repository(part_of=FoodCategory)
class FoodCategoryRepository:
    def find_by_name(self, name: str) -> FoodCategory | None:
        """Find a category by name, ignoring case."""
        wanted = name.strip().lower()
        for category in self._dao.query.all().items:
            if category.name.lower() == wanted:
                return category
        return None

    def newest_first(self, limit: int = 100) -> list[FoodCategory]:
        return self._dao.query.order_by("-created_at").limit(limit).all().items
