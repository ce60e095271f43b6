"""Application tests for menu management handlers."""

import pytest
from catalogue.category.management import CreateCategory
from catalogue.food.food import Food
from catalogue.food.management import CreateFood, RemoveFood, UpdateFood
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _create_category(name="Burgers"):
    return current_domain.process(CreateCategory(name=name), asynchronous=False)


def _create_food(**overrides):
    defaults = {
        "name": "Classic Burger",
        "description": "Juicy beef patty",
        "price": 12.99,
    }
    defaults.update(overrides)
    return current_domain.process(CreateFood(**defaults), asynchronous=False)


def _update_food(food_id, **overrides):
    food = current_domain.repository_for(Food).get(food_id)
    values = {
        "food_id": food_id,
        "name": food.name,
        "description": food.description,
        "price": food.price,
    }
    values.update(overrides)
    current_domain.process(UpdateFood(**values), asynchronous=False)
    return current_domain.repository_for(Food).get(food_id)


class TestCreateFoodHandler:
    def test_create_food(self):
        food_id = _create_food()
        food = current_domain.repository_for(Food).get(food_id)
        assert food.name == "Classic Burger"
        assert food.price == 12.99

    def test_create_with_category(self):
        category_id = _create_category()
        food = current_domain.repository_for(Food).get(_create_food(category_id=category_id))
        assert food.category_id == category_id

    def test_unknown_category_is_dropped(self):
        food = current_domain.repository_for(Food).get(_create_food(category_id="missing-category"))
        assert food.category_id is None

    def test_no_category_sentinel(self):
        food = current_domain.repository_for(Food).get(_create_food(category_id="no-category"))
        assert food.category_id is None

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _create_food(price=-0.5)
        assert "price" in exc.value.messages

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            _create_food(name="")


class TestUpdateFoodHandler:
    def test_update_price(self):
        food = _update_food(_create_food(), price=15.0)
        assert food.price == 15.0

    def test_category_untouched_when_not_given(self):
        category_id = _create_category()
        food = _update_food(_create_food(category_id=category_id), name="Renamed")
        assert food.category_id == category_id

    def test_move_to_other_category(self):
        first = _create_category("Burgers")
        second = _create_category("Grill")
        food = _update_food(_create_food(category_id=first), category_id=second)
        assert food.category_id == second

    @pytest.mark.parametrize("cleared", ["", "no-category"])
    def test_clear_category(self, cleared):
        category_id = _create_category()
        food = _update_food(_create_food(category_id=category_id), category_id=cleared)
        assert food.category_id is None

    def test_clear_category_flag(self):
        category_id = _create_category()
        food = _update_food(_create_food(category_id=category_id), clear_category=True)
        assert food.category_id is None

    def test_unknown_category_rejected(self):
        food_id = _create_food()
        with pytest.raises(ValidationError) as exc:
            _update_food(food_id, category_id="missing-category")
        assert exc.value.messages == {"category_id": ["Invalid category selected"]}

    def test_unknown_food(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateFood(food_id="missing", name="X", description="Y", price=1.0),
                asynchronous=False,
            )


class TestRemoveFoodHandler:
    def test_remove_food(self):
        food_id = _create_food()
        current_domain.process(RemoveFood(food_id=food_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Food).get(food_id)

    def test_remove_food_leaves_rest_of_menu(self):
        kept_id = _create_food(name="Veggie Burger")
        removed_id = _create_food()

        current_domain.process(RemoveFood(food_id=removed_id), asynchronous=False)

        menu = current_domain.repository_for(Food).menu()
        assert [food.id for food in menu] == [kept_id]

    def test_remove_unknown_food(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(RemoveFood(food_id="missing"), asynchronous=False)
