"""
Food Ordering API — Food item schemas
"""
from datetime import datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

from foodorder.core.money import from_cents
from foodorder.schemas.common import ApiModel
from foodorder.schemas.records import FoodRecord, RestaurantRecord, SpiceLevel
from foodorder.schemas.restaurant import LowerStr, RestaurantBrief


def _split_ingredients(value):
    # Form submissions send ingredients as one comma-separated string.
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


Ingredients = Annotated[list[str], BeforeValidator(_split_ingredients)]


class FoodCreate(ApiModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)
    price: float = Field(..., ge=0)
    category: LowerStr
    restaurant_id: str | None = None
    image_url: str | None = None
    preparation_time: int = Field(15, ge=1)
    ingredients: Ingredients = Field(default_factory=list)
    is_vegetarian: bool = False
    is_vegan: bool = False
    spice_level: SpiceLevel = SpiceLevel.MILD


class FoodUpdate(ApiModel):
    name: str | None = Field(None, min_length=2, max_length=100)
    description: str | None = Field(None, min_length=10, max_length=500)
    price: float | None = Field(None, ge=0)
    category: LowerStr | None = None
    image_url: str | None = None
    available: bool | None = None
    preparation_time: int | None = Field(None, ge=1)
    ingredients: Ingredients | None = None
    is_vegetarian: bool | None = None
    is_vegan: bool | None = None
    spice_level: SpiceLevel | None = None


class FoodOut(ApiModel):
    id: str
    restaurant: RestaurantBrief | str
    name: str
    description: str
    price: float
    category: str
    image_url: str | None
    available: bool
    preparation_time: int
    ingredients: list[str]
    is_vegetarian: bool
    is_vegan: bool
    spice_level: str
    rating: float
    total_reviews: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, food: FoodRecord, restaurant: RestaurantRecord | None = None) -> "FoodOut":
        data = food.model_dump(exclude={"restaurant_id"})
        data.update(
            restaurant=RestaurantBrief.from_record(restaurant) if restaurant else food.restaurant_id,
            price=from_cents(food.price),
        )
        return cls.model_validate(data)
