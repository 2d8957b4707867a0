"""
Food Ordering API — Order placement, pricing and status lifecycle

Placement is validate-then-write: every food, the restaurant and the minimum
order are checked before the single insert, so a rejected cart never leaves
anything behind. Line items copy the food's name and price at this moment;
the order never looks at the live menu again.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from foodorder.core.config import get_settings
from foodorder.core.errors import (
    BelowMinimum,
    CrossRestaurantOrder,
    ItemNotFound,
    NotFound,
    Unavailable,
)
from foodorder.core.money import format_amount, percent_of
from foodorder.core.policy import authorize
from foodorder.db.repositories import Store
from foodorder.schemas.order import OrderRequest
from foodorder.schemas.records import (
    DeliveryAddress,
    OrderLine,
    OrderRecord,
    OrderStatus,
    PaymentStatus,
    RestaurantRecord,
    UserRecord,
    utcnow,
)

settings = get_settings()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pricing:
    subtotal: int
    delivery_fee: int
    tax: int
    total: int


def price_order(lines: list[OrderLine], restaurant: RestaurantRecord, tax_rate_percent: int | None = None) -> Pricing:
    """Totals in cents. Tax is rounded half up to a whole currency unit."""
    rate = settings.TAX_RATE_PERCENT if tax_rate_percent is None else tax_rate_percent
    subtotal = sum(line.price * line.quantity for line in lines)
    delivery_fee = restaurant.delivery_fee or 0
    tax = percent_of(subtotal, rate)
    return Pricing(subtotal=subtotal, delivery_fee=delivery_fee, tax=tax, total=subtotal + delivery_fee + tax)


async def place_order(store: Store, user: UserRecord, payload: OrderRequest, now: datetime | None = None) -> OrderRecord:
    now = now or utcnow()
    lines: list[OrderLine] = []
    restaurant_id: str | None = None

    for item in payload.items:
        food = await store.foods.get(item.food_id)
        if food is None:
            raise ItemNotFound(f"Food item {item.food_id} not found or unavailable")
        if not food.available:
            raise Unavailable(f"Food item {item.food_id} not found or unavailable")

        if restaurant_id is None:
            restaurant_id = food.restaurant_id
        elif food.restaurant_id != restaurant_id:
            raise CrossRestaurantOrder("All items must be from the same restaurant")

        lines.append(OrderLine(
            food_id=food.id,
            name=food.name,
            price=food.price,
            quantity=item.quantity,
            special_instructions=item.special_instructions or "",
        ))

    restaurant = await store.restaurants.get(restaurant_id)
    if restaurant is None or not restaurant.is_active:
        raise NotFound("Restaurant not found")

    pricing = price_order(lines, restaurant)

    if restaurant.minimum_order > 0 and pricing.subtotal < restaurant.minimum_order:
        raise BelowMinimum(f"Minimum order amount is ${format_amount(restaurant.minimum_order)}")

    order = OrderRecord(
        user_id=user.id,
        restaurant_id=restaurant.id,
        items=lines,
        subtotal=pricing.subtotal,
        delivery_fee=pricing.delivery_fee,
        tax=pricing.tax,
        total=pricing.total,
        status=OrderStatus.PENDING,
        payment_status=PaymentStatus.PENDING,
        payment_method=payload.payment_method,
        delivery_address=DeliveryAddress(**payload.delivery_address.model_dump()),
        notes=payload.notes,
        estimated_delivery_time=now + timedelta(minutes=settings.ESTIMATED_DELIVERY_MINUTES),
        created_at=now,
        updated_at=now,
    )
    saved = await store.orders.add(order)
    logger.info(
        "Order %s placed by %s at %s: %d line(s), total %s",
        saved.id, user.id, restaurant.id, len(lines), format_amount(saved.total),
    )
    return saved


async def update_status(
    store: Store,
    caller: UserRecord,
    order_id: str,
    status: OrderStatus | str,
    now: datetime | None = None,
) -> OrderRecord:
    """
    Set an order's status. Any enum value is accepted from any current state;
    only the owner of the order's restaurant or an admin may do it.
    Reaching `delivered` stamps actual_delivery_time.
    """
    order = await store.orders.get(order_id)
    if order is None:
        raise NotFound("Order not found")

    restaurant = await store.restaurants.get(order.restaurant_id)
    authorize(
        caller,
        owner_id=restaurant.owner_id if restaurant else None,
        message="Access denied. Only restaurant owners and admins can update order status",
    )

    status = OrderStatus(status)
    changes: dict = {"status": status.value}
    if status is OrderStatus.DELIVERED:
        changes["actual_delivery_time"] = now or utcnow()

    updated = await store.orders.update(order_id, changes)
    logger.info("Order %s status %s -> %s by %s", order_id, order.status, status.value, caller.id)
    return updated
