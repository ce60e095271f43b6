"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# --- Food Schemas ---


class FoodRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Classic Burger",
                    "description": "Juicy beef patty with lettuce, tomato, and cheese",
                    "price": 12.99,
                    "imageUrl": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd",
                    "category_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                }
            ]
        },
    )

    name: str = Field(..., max_length=255)
    description: str
    price: float
    image_url: str | None = Field(None, alias="imageUrl", max_length=500)
    category_id: str | None = None


class FoodResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: float
    image_url: str | None = Field(None, alias="imageUrl")
    category_id: str | None = None
    category_name: str | None = None


class FoodIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"food_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    food_id: str


# --- Category Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Desserts", "description": "Sweet treats", "image_url": None}]}
    }

    name: str = Field(..., max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)


class UpdateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Desserts & Cakes", "description": "Sweet treats", "is_active": True}]}
    }

    name: str = Field(..., max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    is_active: bool | None = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    image_url: str | None = None
    is_active: bool
    created_at: datetime | None = None


class CategoryIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"category_id": "c3d4e5f6-a7b8-9012-cdef-123456789012"}]}}

    category_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
