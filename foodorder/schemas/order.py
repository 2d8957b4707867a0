"""
Food Ordering API — Order schemas
"""
from datetime import datetime

from pydantic import Field

from foodorder.core.money import from_cents
from foodorder.schemas.auth import PHONE_PATTERN, UserBrief
from foodorder.schemas.common import ApiModel
from foodorder.schemas.records import (
    OrderRecord,
    OrderStatus,
    PaymentMethod,
    RestaurantRecord,
    UserRecord,
)
from foodorder.schemas.restaurant import RestaurantBrief


class OrderItemRequest(ApiModel):
    food_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    special_instructions: str | None = Field(None, max_length=200)


class DeliveryAddressIn(ApiModel):
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    phone: str = Field(..., pattern=PHONE_PATTERN)
    instructions: str | None = Field(None, max_length=200)


class OrderRequest(ApiModel):
    items: list[OrderItemRequest] = Field(..., min_length=1)
    payment_method: PaymentMethod
    delivery_address: DeliveryAddressIn
    notes: str | None = Field(None, max_length=300)


class StatusUpdateRequest(ApiModel):
    status: OrderStatus


class OrderLineOut(ApiModel):
    food: str
    name: str
    price: float
    quantity: int
    special_instructions: str


class OrderOut(ApiModel):
    id: str
    user: UserBrief | str
    restaurant: RestaurantBrief | str
    items: list[OrderLineOut]
    subtotal: float
    delivery_fee: float
    tax: float
    total: float
    status: str
    payment_status: str
    payment_method: str
    delivery_address: DeliveryAddressIn
    notes: str | None
    estimated_delivery_time: datetime | None
    actual_delivery_time: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(
        cls,
        order: OrderRecord,
        restaurant: RestaurantRecord | None = None,
        user: UserRecord | None = None,
    ) -> "OrderOut":
        data = order.model_dump(exclude={"user_id", "restaurant_id", "items"})
        data.update(
            user=UserBrief.from_record(user) if user else order.user_id,
            restaurant=RestaurantBrief.from_record(restaurant) if restaurant else order.restaurant_id,
            items=[
                OrderLineOut(
                    food=line.food_id,
                    name=line.name,
                    price=from_cents(line.price),
                    quantity=line.quantity,
                    special_instructions=line.special_instructions,
                )
                for line in order.items
            ],
            subtotal=from_cents(order.subtotal),
            delivery_fee=from_cents(order.delivery_fee),
            tax=from_cents(order.tax),
            total=from_cents(order.total),
        )
        return cls.model_validate(data)
