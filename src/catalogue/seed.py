"""Starter menu loaded by ``manage.py seed``."""

import structlog

from catalogue.domain import catalogue
from catalogue.food.food import Food
from catalogue.food.management import CreateFood

logger = structlog.get_logger(__name__)

_IMAGE = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=500"

STARTER_MENU = [
    {
        "name": "Classic Burger",
        "description": "Juicy beef patty with lettuce, tomato, onion, and our special sauce",
        "price": 12.99,
        "image_url": _IMAGE.format(1639557, 1639557),
    },
    {
        "name": "Margherita Pizza",
        "description": "Fresh tomatoes, mozzarella cheese, and basil on crispy crust",
        "price": 15.99,
        "image_url": _IMAGE.format(2619967, 2619967),
    },
    {
        "name": "Chicken Caesar Salad",
        "description": "Grilled chicken breast on fresh romaine lettuce with Caesar dressing",
        "price": 10.99,
        "image_url": _IMAGE.format(2097090, 2097090),
    },
    {
        "name": "Fish & Chips",
        "description": "Beer-battered cod with crispy fries and tartar sauce",
        "price": 14.99,
        "image_url": _IMAGE.format(1885057, 1885057),
    },
    {
        "name": "Pasta Carbonara",
        "description": "Creamy pasta with bacon, eggs, and parmesan cheese",
        "price": 13.99,
        "image_url": _IMAGE.format(4518843, 4518843),
    },
    {
        "name": "Chocolate Brownie",
        "description": "Rich chocolate brownie served with vanilla ice cream",
        "price": 6.99,
        "image_url": _IMAGE.format(887853, 887853),
    },
    {
        "name": "Grilled Chicken Sandwich",
        "description": "Grilled chicken breast with avocado, lettuce, and chipotle mayo",
        "price": 11.99,
        "image_url": _IMAGE.format(1633578, 1633578),
    },
    {
        "name": "Vegetable Stir Fry",
        "description": "Fresh vegetables stir-fried with garlic and soy sauce, served with rice",
        "price": 9.99,
        "image_url": _IMAGE.format(1640777, 1640777),
    },
]


def seed_menu() -> list[str]:
    """Add the starter menu, skipping dishes that are already on it.

    Returns the ids of the foods that were created.
    """
    created = []
    with catalogue.domain_context():
        existing = {food.name for food in catalogue.repository_for(Food).menu(limit=1000)}
        for item in STARTER_MENU:
            if item["name"] in existing:
                continue
            created.append(catalogue.process(CreateFood(**item), asynchronous=False))

    logger.info("Starter menu seeded", created=len(created), skipped=len(STARTER_MENU) - len(created))
    return created
