"""Tests for the starter menu loader."""

from catalogue.food.food import Food
from catalogue.seed import STARTER_MENU, seed_menu
from protean.utils.globals import current_domain


class TestSeedMenu:
    def test_seeds_starter_menu(self):
        created = seed_menu()

        assert len(created) == 8
        menu = {food.name: food.price for food in current_domain.repository_for(Food).menu()}
        assert menu["Classic Burger"] == 12.99
        assert menu["Vegetable Stir Fry"] == 9.99
        assert set(menu) == {item["name"] for item in STARTER_MENU}

    def test_seeding_twice_adds_nothing(self):
        seed_menu()
        assert seed_menu() == []
        assert len(current_domain.repository_for(Food).menu()) == 8
