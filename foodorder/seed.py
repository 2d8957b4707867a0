"""
Food Ordering API — Demo data

    python -m foodorder.seed

Wipes the configured store and loads three accounts, four restaurants with
their menus and two sample orders. Passwords for the demo accounts are
logged at the end.
"""
import asyncio
import logging
from datetime import timedelta

from foodorder.core.config import get_settings
from foodorder.core.money import to_cents
from foodorder.core.security import hash_password
from foodorder.db.repositories import Store
from foodorder.schemas.records import (
    WEEKDAYS,
    Address,
    DayHours,
    DeliveryAddress,
    FoodRecord,
    OrderLine,
    OrderRecord,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    RestaurantRecord,
    Role,
    UserRecord,
    utcnow,
)
from foodorder.services.ordering import price_order

settings = get_settings()
logger = logging.getLogger(__name__)

ACCOUNTS = [
    ("Admin User", "admin@foodorder.com", "Admin@123", "+1234567890", Role.ADMIN,
     "123 Admin Street, Admin City, AC 12345"),
    ("Restaurant Owner", "owner@restaurant.com", "Owner@123", "+1234567891", Role.RESTAURANT,
     "456 Owner Avenue, Owner City, OC 67890"),
    ("John Customer", "customer@example.com", "Customer@123", "+1234567892", Role.CUSTOMER,
     "789 Customer Lane, Customer City, CC 54321"),
]


def _hours(weekday: tuple[str, str], friday: tuple[str, str], sunday: tuple[str, str]) -> dict[str, DayHours]:
    spans = {day: weekday for day in WEEKDAYS}
    spans.update(friday=friday, saturday=friday, sunday=sunday)
    return {day: DayHours(open=o, close=c, is_open=True) for day, (o, c) in spans.items()}


# name, street, zip, (lat, lng), cuisine, description, hours, rating, reviews, fee, minimum
RESTAURANTS = [
    ("Pizza Palace", "123 Pizza Street", "10001", (40.7128, -74.0060), "italian",
     "Authentic Italian pizza made with fresh ingredients",
     _hours(("10:00", "22:00"), ("10:00", "23:00"), ("12:00", "21:00")), 4.5, 150, 2.99, 15.00),
    ("Burger Bistro", "456 Burger Boulevard", "10002", (40.7589, -73.9851), "american",
     "Gourmet burgers with premium ingredients",
     _hours(("11:00", "23:00"), ("11:00", "24:00"), ("12:00", "22:00")), 4.2, 89, 3.50, 20.00),
    ("Sushi Zen", "789 Sushi Street", "10003", (40.7505, -73.9934), "japanese",
     "Fresh sushi and traditional Japanese cuisine",
     _hours(("17:00", "22:00"), ("17:00", "23:00"), ("17:00", "21:00")), 4.8, 67, 4.99, 25.00),
    ("Taco Fiesta", "321 Taco Lane", "10004", (40.7614, -73.9776), "mexican",
     "Authentic Mexican tacos and burritos",
     _hours(("11:00", "22:00"), ("11:00", "23:00"), ("12:00", "21:00")), 4.3, 45, 2.50, 12.00),
]

# restaurant -> [(name, description, price, category, prep minutes, ingredients, vegetarian, vegan)]
MENUS = {
    "Pizza Palace": [
        ("Margherita Pizza", "Classic tomato sauce, mozzarella, and fresh basil", 14.99, "pizza", 15,
         ["Tomato sauce", "Mozzarella", "Fresh basil", "Olive oil"], True, False),
        ("Pepperoni Pizza", "Spicy pepperoni with mozzarella and tomato sauce", 16.99, "pizza", 15,
         ["Tomato sauce", "Mozzarella", "Pepperoni"], False, False),
        ("Caesar Salad", "Fresh romaine lettuce with caesar dressing and croutons", 8.99, "salad", 10,
         ["Romaine lettuce", "Caesar dressing", "Croutons", "Parmesan"], True, False),
        ("Quattro Stagioni Pizza", "Four seasons pizza with artichokes, mushrooms, ham, and olives", 18.99,
         "pizza", 18, ["Tomato sauce", "Mozzarella", "Artichokes", "Mushrooms", "Ham", "Olives"], False, False),
        ("Garlic Bread", "Crispy bread with garlic butter and herbs", 6.99, "appetizer", 8,
         ["Bread", "Garlic butter", "Herbs", "Parmesan"], True, False),
    ],
    "Burger Bistro": [
        ("Classic Cheeseburger", "Beef patty with cheese, lettuce, tomato, and special sauce", 12.99, "burger", 12,
         ["Beef patty", "Cheese", "Lettuce", "Tomato", "Onion", "Special sauce"], False, False),
        ("BBQ Bacon Burger", "Beef patty with BBQ sauce, crispy bacon, and onion rings", 15.99, "burger", 15,
         ["Beef patty", "BBQ sauce", "Bacon", "Onion rings", "Cheese"], False, False),
        ("Veggie Burger", "Plant-based patty with fresh vegetables and vegan mayo", 11.99, "burger", 10,
         ["Plant-based patty", "Lettuce", "Tomato", "Onion", "Vegan mayo"], True, True),
        ("French Fries", "Crispy golden fries with sea salt", 4.99, "side", 8,
         ["Potatoes", "Sea salt", "Vegetable oil"], True, True),
        ("Chicken Wings", "Spicy buffalo wings with ranch dipping sauce", 9.99, "appetizer", 12,
         ["Chicken wings", "Buffalo sauce", "Ranch dressing"], False, False),
        ("Onion Rings", "Crispy beer-battered onion rings", 5.99, "side", 10,
         ["Onions", "Beer batter", "Vegetable oil"], True, False),
    ],
    "Sushi Zen": [
        ("California Roll", "Crab, avocado, and cucumber roll with sesame seeds", 8.99, "sushi", 8,
         ["Crab", "Avocado", "Cucumber", "Sesame seeds", "Rice"], False, False),
        ("Salmon Nigiri", "Fresh salmon over seasoned rice", 6.99, "sushi", 5,
         ["Fresh salmon", "Seasoned rice", "Wasabi"], False, False),
        ("Vegetable Tempura", "Assorted vegetables in light tempura batter", 9.99, "appetizer", 12,
         ["Mixed vegetables", "Tempura batter", "Dipping sauce"], True, False),
        ("Miso Soup", "Traditional Japanese soup with tofu and seaweed", 3.99, "soup", 5,
         ["Miso paste", "Tofu", "Seaweed", "Green onions"], True, False),
        ("Dragon Roll", "Eel and cucumber roll topped with avocado and eel sauce", 12.99, "sushi", 10,
         ["Eel", "Cucumber", "Avocado", "Eel sauce", "Rice"], False, False),
        ("Spicy Tuna Roll", "Fresh tuna with spicy mayo and cucumber", 10.99, "sushi", 8,
         ["Fresh tuna", "Spicy mayo", "Cucumber", "Rice"], False, False),
    ],
    "Taco Fiesta": [
        ("Beef Tacos", "Three soft tacos with seasoned beef, lettuce, and cheese", 9.99, "tacos", 10,
         ["Soft tortillas", "Seasoned beef", "Lettuce", "Cheese", "Salsa"], False, False),
        ("Chicken Burrito", "Large burrito with grilled chicken, rice, beans, and cheese", 11.99, "burrito", 12,
         ["Large tortilla", "Grilled chicken", "Rice", "Beans", "Cheese", "Salsa"], False, False),
        ("Churros", "Sweet fried dough sticks with cinnamon sugar", 5.99, "dessert", 8,
         ["Dough", "Cinnamon", "Sugar", "Oil"], True, False),
        ("Fish Tacos", "Grilled fish with cabbage slaw and chipotle mayo", 10.99, "tacos", 12,
         ["Grilled fish", "Cabbage slaw", "Chipotle mayo", "Soft tortillas"], False, False),
        ("Quesadilla", "Grilled tortilla with cheese, chicken, and vegetables", 8.99, "mexican", 10,
         ["Tortilla", "Cheese", "Chicken", "Bell peppers", "Onions"], False, False),
        ("Nachos Supreme", "Crispy tortilla chips with cheese, jalapeños, and sour cream", 7.99, "appetizer", 8,
         ["Tortilla chips", "Cheese", "Jalapeños", "Sour cream", "Salsa"], True, False),
    ],
}

SAMPLE_ADDRESS = DeliveryAddress(
    street="123 Customer Street", city="New York", state="NY", zip_code="10001", phone="+1234567890",
)


async def seed(store: Store) -> dict[str, int]:
    """Load the demo data into `store` and return how many of each record were written."""
    users: dict[Role, UserRecord] = {}
    for name, email, password, phone, role, address in ACCOUNTS:
        users[role] = await store.users.add(UserRecord(
            name=name,
            email=email,
            password_hash=hash_password(password),
            phone=phone,
            role=role,
            addresses=[address],
        ))
    owner = users[Role.RESTAURANT]

    restaurants: dict[str, RestaurantRecord] = {}
    for name, street, zip_code, (lat, lng), cuisine, description, hours, rating, reviews, fee, minimum in RESTAURANTS:
        restaurants[name] = await store.restaurants.add(RestaurantRecord(
            owner_id=owner.id,
            name=name,
            address=Address(
                street=street, city="New York", state="NY", zip_code=zip_code,
                coordinates={"latitude": lat, "longitude": lng},
            ),
            cuisine=cuisine,
            description=description,
            opening_hours=hours,
            avg_rating=rating,
            total_reviews=reviews,
            delivery_fee=to_cents(fee),
            minimum_order=to_cents(minimum),
        ))

    foods: dict[str, FoodRecord] = {}
    for restaurant_name, items in MENUS.items():
        for name, description, price, category, prep, ingredients, vegetarian, vegan in items:
            foods[name] = await store.foods.add(FoodRecord(
                restaurant_id=restaurants[restaurant_name].id,
                name=name,
                description=description,
                price=to_cents(price),
                category=category,
                preparation_time=prep,
                ingredients=ingredients,
                is_vegetarian=vegetarian,
                is_vegan=vegan,
            ))

    now = utcnow()
    samples = [
        ("Pizza Palace", [("Margherita Pizza", 1, "Extra cheese please"), ("Caesar Salad", 1, "Dressing on the side")],
         OrderStatus.DELIVERED, PaymentMethod.CARD, "Sample completed order"),
        ("Burger Bistro", [("Classic Cheeseburger", 2, "No onions")],
         OrderStatus.PREPARING, PaymentMethod.UPI, "Current order in progress"),
    ]
    for restaurant_name, picks, status, method, notes in samples:
        restaurant = restaurants[restaurant_name]
        lines = [
            OrderLine(food_id=foods[n].id, name=n, price=foods[n].price, quantity=q, special_instructions=s)
            for n, q, s in picks
        ]
        pricing = price_order(lines, restaurant)
        delivered = status is OrderStatus.DELIVERED
        await store.orders.add(OrderRecord(
            user_id=users[Role.CUSTOMER].id,
            restaurant_id=restaurant.id,
            items=lines,
            subtotal=pricing.subtotal,
            delivery_fee=pricing.delivery_fee,
            tax=pricing.tax,
            total=pricing.total,
            status=status,
            payment_status=PaymentStatus.PAID,
            payment_method=method,
            delivery_address=SAMPLE_ADDRESS,
            notes=notes,
            estimated_delivery_time=None if delivered else now + timedelta(minutes=30),
            actual_delivery_time=now - timedelta(hours=2) if delivered else None,
        ))

    return {
        "users": len(users),
        "restaurants": len(restaurants),
        "foods": len(foods),
        "orders": len(samples),
    }


async def _seed_sql() -> dict[str, int]:
    from sqlalchemy import delete

    from foodorder.db.database import AsyncSessionLocal, Base, engine
    from foodorder.db.sql import create_sql_store
    from foodorder.models import Food, Order, Restaurant, User

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        for table in (Order, Food, Restaurant, User):
            await conn.execute(delete(table))
    logger.info("Cleared existing data")

    try:
        async with AsyncSessionLocal() as session:
            return await seed(create_sql_store(session))
    finally:
        await engine.dispose()


async def main() -> None:
    if settings.use_memory_store:
        from foodorder.db.memory import create_memory_store

        logger.warning("STORE_BACKEND=memory: demo data only lives for this process")
        counts = await seed(create_memory_store())
    else:
        counts = await _seed_sql()

    logger.info(
        "Seeded %(users)d users, %(restaurants)d restaurants, %(foods)d food items, %(orders)d orders",
        counts,
    )
    for _, email, password, _, role, _ in ACCOUNTS:
        logger.info("  %-10s %s / %s", role.value, email, password)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)s %(message)s")
    asyncio.run(main())
