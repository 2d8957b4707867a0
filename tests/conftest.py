"""
Shared fixtures: the app runs on a fresh in-memory store per test, with login
rate limiting and metrics switched off unless a test turns them back on.
"""
import os

os.environ["STORE_BACKEND"] = "memory"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["METRICS_ENABLED"] = "false"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from foodorder.core.money import to_cents  # noqa: E402
from foodorder.core.security import hash_password, issue_tokens  # noqa: E402
from foodorder.db.memory import create_memory_store  # noqa: E402
from foodorder.db.store import get_store  # noqa: E402
from foodorder.main import app  # noqa: E402
from foodorder.schemas.records import (  # noqa: E402
    Address,
    FoodRecord,
    RestaurantRecord,
    Role,
    UserRecord,
)

PASSWORD = "secret123"
DELIVERY = {
    "street": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "zipCode": "62701",
    "phone": "+15555550100",
}


def auth_headers(user: UserRecord) -> dict[str, str]:
    return {"Authorization": f"Bearer {issue_tokens(user.id, user.role)['access_token']}"}


@pytest.fixture
def store():
    store = create_memory_store()
    app.dependency_overrides[get_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(store):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture(scope="session")
def password_hash():
    return hash_password(PASSWORD)


@pytest.fixture
def make_user(store, password_hash):
    counter = {"n": 0}

    async def _make(role: Role = Role.CUSTOMER, email: str | None = None, **fields) -> UserRecord:
        counter["n"] += 1
        return await store.users.add(UserRecord(
            name=fields.pop("name", f"{role.value.title()} {counter['n']}"),
            email=email or f"{role.value}{counter['n']}@example.com",
            password_hash=password_hash,
            role=role,
            **fields,
        ))
    return _make


@pytest.fixture
def make_restaurant(store):
    async def _make(owner: UserRecord, name: str = "Pizza Palace", delivery_fee: float = 3.00,
                    minimum_order: float = 0, **fields) -> RestaurantRecord:
        return await store.restaurants.add(RestaurantRecord(
            owner_id=owner.id,
            name=name,
            address=fields.pop("address", Address(
                street="123 Pizza Street", city="New York", state="NY", zip_code="10001",
            )),
            cuisine=fields.pop("cuisine", "italian"),
            delivery_fee=to_cents(delivery_fee),
            minimum_order=to_cents(minimum_order),
            **fields,
        ))
    return _make


@pytest.fixture
def make_food(store):
    async def _make(restaurant: RestaurantRecord, name: str = "Margherita", price: float = 10.00,
                    category: str = "pizza", **fields) -> FoodRecord:
        return await store.foods.add(FoodRecord(
            restaurant_id=restaurant.id,
            name=name,
            description=fields.pop("description", f"{name} made fresh to order"),
            price=to_cents(price),
            category=category,
            **fields,
        ))
    return _make


@pytest_asyncio.fixture
async def customer(make_user):
    return await make_user(Role.CUSTOMER)


@pytest_asyncio.fixture
async def owner(make_user):
    return await make_user(Role.RESTAURANT)


@pytest_asyncio.fixture
async def admin(make_user):
    return await make_user(Role.ADMIN)


@pytest_asyncio.fixture
async def menu(owner, make_restaurant, make_food):
    """Pizza Palace ($3.00 delivery) with a $10.00 pizza and a $5.00 salad."""
    restaurant = await make_restaurant(owner)
    pizza = await make_food(restaurant, "Margherita", 10.00)
    salad = await make_food(restaurant, "Caesar Salad", 5.00, category="salad")
    return restaurant, pizza, salad
