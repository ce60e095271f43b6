"""FastAPI endpoints for the Catalogue domain.

Reading the menu is public. Every write, and listing categories including
inactive ones, requires an admin principal.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    CategoryIdResponse,
    CategoryResponse,
    CreateCategoryRequest,
    FoodIdResponse,
    FoodRequest,
    FoodResponse,
    StatusResponse,
    UpdateCategoryRequest,
)
from catalogue.category.category import FoodCategory
from catalogue.category.management import CreateCategory, DeactivateCategory, UpdateCategory
from catalogue.food.food import NO_CATEGORY, Food
from catalogue.food.management import CreateFood, RemoveFood, UpdateFood
from shared.errors import NotFoundError
from shared.principal import require_admin

food_router = APIRouter(prefix="/foods", tags=["foods"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


def _category_names() -> dict[str, str]:
    categories = current_domain.repository_for(FoodCategory).newest_first()
    return {str(category.id): category.name for category in categories}


def _category_response(category: FoodCategory) -> CategoryResponse:
    return CategoryResponse(
        id=str(category.id),
        name=category.name,
        description=category.description,
        image_url=category.image_url,
        is_active=category.is_active,
        created_at=category.created_at,
    )


# --- Food endpoints ---


@food_router.get("", response_model=list[FoodResponse])
async def list_foods() -> list[FoodResponse]:
    names = _category_names()
    foods = current_domain.repository_for(Food).menu()
    return [FoodResponse(**food.menu_entry(names.get(str(food.category_id)))) for food in foods]


@food_router.get("/{food_id}", response_model=FoodResponse)
async def get_food(food_id: str) -> FoodResponse:
    food = current_domain.repository_for(Food).get(food_id)
    return FoodResponse(**food.menu_entry(_category_names().get(str(food.category_id))))


@food_router.post("", status_code=201, response_model=FoodIdResponse, dependencies=[Depends(require_admin)])
async def create_food(body: FoodRequest) -> FoodIdResponse:
    command = CreateFood(
        name=body.name,
        description=body.description,
        price=body.price,
        image_url=body.image_url,
        category_id=body.category_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return FoodIdResponse(food_id=result)


@food_router.put("/{food_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def update_food(food_id: str, body: FoodRequest) -> StatusResponse:
    # An absent category leaves it alone; null, "" or "no-category" clears it
    clear_category = "category_id" in body.model_fields_set and body.category_id in (None, "", NO_CATEGORY)
    command = UpdateFood(
        food_id=food_id,
        name=body.name,
        description=body.description,
        price=body.price,
        image_url=body.image_url,
        category_id=None if clear_category else body.category_id,
        clear_category=clear_category,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@food_router.delete("/{food_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def remove_food(food_id: str) -> StatusResponse:
    current_domain.process(RemoveFood(food_id=food_id), asynchronous=False)
    return StatusResponse()


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse], dependencies=[Depends(require_admin)])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(FoodCategory).newest_first()
    return [_category_response(category) for category in categories]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    category = current_domain.repository_for(FoodCategory).get(category_id)
    if not category.is_active:
        raise NotFoundError(f"Category {category_id} not found")
    return _category_response(category)


@category_router.post("", status_code=201, response_model=CategoryIdResponse, dependencies=[Depends(require_admin)])
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(
        name=body.name,
        description=body.description,
        image_url=body.image_url,
    )
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.put("/{category_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
        image_url=body.image_url,
        is_active=body.is_active,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def deactivate_category(category_id: str) -> StatusResponse:
    current_domain.process(DeactivateCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()
