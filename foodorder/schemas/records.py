"""
Food Ordering API — Stored documents

These are the shapes the repositories hand out, whatever the backend.
Money fields are integer cents. Embedded documents (addresses, opening
hours, order lines) are nested models and travel as JSON in the SQL store.
"""
import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class Role(str, Enum):
    CUSTOMER = "customer"
    RESTAURANT = "restaurant"
    ADMIN = "admin"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    WALLET = "wallet"


class SpiceLevel(str, Enum):
    MILD = "mild"
    MEDIUM = "medium"
    HOT = "hot"
    EXTRA_HOT = "extra-hot"


WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class Record(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


# ── Embedded documents ────────────────────────────────────────────────────────

class Coordinates(Record):
    latitude: float | None = None
    longitude: float | None = None


class Address(Record):
    street: str
    city: str
    state: str
    zip_code: str
    coordinates: Coordinates | None = None


class DayHours(Record):
    open: str | None = None
    close: str | None = None
    is_open: bool = True


class DeliveryAddress(Record):
    street: str
    city: str
    state: str
    zip_code: str
    phone: str
    instructions: str | None = None


class OrderLine(Record):
    """Food snapshot taken when the order was placed."""
    food_id: str
    name: str
    price: int
    quantity: int
    special_instructions: str = ""


# ── Collections ───────────────────────────────────────────────────────────────

class UserRecord(Record):
    id: str = Field(default_factory=new_id)
    name: str
    email: str
    password_hash: str
    phone: str | None = None
    role: Role = Role.CUSTOMER
    addresses: list[str] = Field(default_factory=list)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class RestaurantRecord(Record):
    id: str = Field(default_factory=new_id)
    owner_id: str
    name: str
    address: Address
    cuisine: str
    description: str | None = None
    opening_hours: dict[str, DayHours] = Field(default_factory=dict)
    avg_rating: float = 0
    total_reviews: int = 0
    image_url: str | None = None
    is_active: bool = True
    delivery_fee: int = 0
    minimum_order: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class FoodRecord(Record):
    id: str = Field(default_factory=new_id)
    restaurant_id: str
    name: str
    description: str
    price: int
    category: str
    image_url: str | None = None
    available: bool = True
    preparation_time: int = 15
    ingredients: list[str] = Field(default_factory=list)
    is_vegetarian: bool = False
    is_vegan: bool = False
    spice_level: SpiceLevel = SpiceLevel.MILD
    rating: float = 0
    total_reviews: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class OrderRecord(Record):
    id: str = Field(default_factory=new_id)
    user_id: str
    restaurant_id: str
    items: list[OrderLine]
    subtotal: int
    delivery_fee: int = 0
    tax: int = 0
    total: int
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: PaymentMethod
    delivery_address: DeliveryAddress
    notes: str | None = None
    estimated_delivery_time: datetime | None = None
    actual_delivery_time: datetime | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
