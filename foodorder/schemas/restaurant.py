"""
Food Ordering API — Restaurant schemas
"""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, Field, StringConstraints

from foodorder.core.money import from_cents
from foodorder.schemas.auth import UserBrief
from foodorder.schemas.common import ApiModel
from foodorder.schemas.records import WEEKDAYS, RestaurantRecord, UserRecord


class CoordinatesIn(ApiModel):
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)


class AddressIn(ApiModel):
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    coordinates: CoordinatesIn | None = None


class DayHoursIn(ApiModel):
    open: str | None = Field(None, pattern=r"^\d{1,2}:\d{2}$")
    close: str | None = Field(None, pattern=r"^\d{1,2}:\d{2}$")
    is_open: bool = True


def _check_weekdays(value: dict[str, DayHoursIn]) -> dict[str, DayHoursIn]:
    unknown = sorted(set(value) - set(WEEKDAYS))
    if unknown:
        raise ValueError(f"Unknown weekday(s): {', '.join(unknown)}")
    return value


OpeningHours = Annotated[dict[str, DayHoursIn], AfterValidator(_check_weekdays)]
LowerStr = Annotated[str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1, max_length=64)]


class RestaurantCreate(ApiModel):
    name: str = Field(..., min_length=2, max_length=100)
    address: AddressIn
    cuisine: LowerStr
    description: str | None = Field(None, max_length=500)
    opening_hours: OpeningHours = Field(default_factory=dict)
    image_url: str | None = None
    delivery_fee: float = Field(0, ge=0)
    minimum_order: float = Field(0, ge=0)


class RestaurantUpdate(ApiModel):
    name: str | None = Field(None, min_length=2, max_length=100)
    address: AddressIn | None = None
    cuisine: LowerStr | None = None
    description: str | None = Field(None, max_length=500)
    opening_hours: OpeningHours | None = None
    image_url: str | None = None
    delivery_fee: float | None = Field(None, ge=0)
    minimum_order: float | None = Field(None, ge=0)


class RestaurantBrief(ApiModel):
    id: str
    name: str
    address: AddressIn

    @classmethod
    def from_record(cls, restaurant: RestaurantRecord) -> "RestaurantBrief":
        return cls(id=restaurant.id, name=restaurant.name, address=restaurant.address.model_dump())


class RestaurantOut(ApiModel):
    id: str
    name: str
    owner: UserBrief | str
    address: AddressIn
    cuisine: str
    description: str | None
    opening_hours: dict[str, DayHoursIn]
    avg_rating: float
    total_reviews: int
    image_url: str | None
    is_active: bool
    delivery_fee: float
    minimum_order: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, restaurant: RestaurantRecord, owner: UserRecord | None = None) -> "RestaurantOut":
        data = restaurant.model_dump(exclude={"owner_id"})
        data.update(
            owner=UserBrief.from_record(owner) if owner else restaurant.owner_id,
            delivery_fee=from_cents(restaurant.delivery_fee),
            minimum_order=from_cents(restaurant.minimum_order),
        )
        return cls.model_validate(data)
