"""Category management — commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import FoodCategory
from catalogue.domain import catalogue
from shared.errors import ConflictError


@catalogue.command(part_of="FoodCategory")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()
    image_url: String(max_length=500)


@catalogue.command(part_of="FoodCategory")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: Text()
    image_url: String(max_length=500)
    is_active: Boolean()


@catalogue.command(part_of="FoodCategory")
class DeactivateCategory:
    category_id: Identifier(required=True)


@catalogue.command_handler(part_of=FoodCategory)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(FoodCategory)
        if repo.find_by_name(command.name) is not None:
            raise ConflictError("A category with this name already exists")

        category = FoodCategory.create(
            name=command.name,
            description=command.description,
            image_url=command.image_url,
        )
        repo.add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(FoodCategory)
        category = repo.get(command.category_id)

        existing = repo.find_by_name(command.name)
        if existing is not None and str(existing.id) != str(category.id):
            raise ConflictError("Category name already exists")

        category.update_details(
            name=command.name,
            description=command.description,
            image_url=command.image_url,
            is_active=True if command.is_active is None else command.is_active,
        )
        repo.add(category)

    @handle(DeactivateCategory)
    def deactivate_category(self, command):
        from catalogue.food.food import Food

        repo = current_domain.repository_for(FoodCategory)
        category = repo.get(command.category_id)

        if current_domain.repository_for(Food).in_category(category.id):
            raise ValidationError({"category_id": ["Cannot delete category with associated food items"]})

        category.deactivate()
        repo.add(category)
