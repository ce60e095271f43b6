"""Menu management — commands and handler for adding, editing and removing foods."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import FoodCategory
from catalogue.domain import catalogue
from catalogue.food.food import NO_CATEGORY, Food

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Food")
class CreateFood:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True)
    image_url: String(max_length=500)
    category_id: String(max_length=255)


@catalogue.command(part_of="Food")
class UpdateFood:
    food_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True)
    image_url: String(max_length=500)
    category_id: String(max_length=255)
    clear_category: Boolean(default=False)


@catalogue.command(part_of="Food")
class RemoveFood:
    food_id: Identifier(required=True)


def _category_exists(category_id) -> bool:
    try:
        current_domain.repository_for(FoodCategory).get(category_id)
    except ObjectNotFoundError:
        return False
    return True


def _validate_price(price):
    if price is None or price < 0:
        raise ValidationError({"price": ["Price must be a valid positive number"]})


@catalogue.command_handler(part_of=Food)
class ManageFoodHandler:
    @handle(CreateFood)
    def create_food(self, command):
        _validate_price(command.price)

        category_id = (command.category_id or "").strip() or None
        if category_id == NO_CATEGORY:
            category_id = None
        if category_id and not _category_exists(category_id):
            logger.info("Category not found, creating food without category", category_id=category_id)
            category_id = None

        food = Food.create(
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            category_id=category_id,
        )
        current_domain.repository_for(Food).add(food)

        logger.info("Food added to menu", food_id=str(food.id), name=food.name, price=food.price)
        return str(food.id)

    @handle(UpdateFood)
    def update_food(self, command):
        _validate_price(command.price)

        repo = current_domain.repository_for(Food)
        food = repo.get(command.food_id)

        clear_category = bool(command.clear_category) or command.category_id in ("", NO_CATEGORY)
        category_id = None if clear_category else command.category_id
        if category_id and not _category_exists(category_id):
            raise ValidationError({"category_id": ["Invalid category selected"]})

        food.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            category_id=category_id,
            clear_category=clear_category,
        )
        repo.add(food)

    @handle(RemoveFood)
    def remove_food(self, command):
        repo = current_domain.repository_for(Food)
        food = repo.get(command.food_id)
        repo._dao.delete(food)

        logger.info("Food removed from menu", food_id=str(command.food_id))
