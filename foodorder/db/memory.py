"""
Food Ordering API — In-memory store

Backs the API when STORE_BACKEND=memory and is what the test-suite runs on.
Records are copied on the way in and out so callers can never mutate stored
state by holding on to a returned object.
"""
from typing import Any, Generic, TypeVar

from foodorder.db.repositories import (
    FoodRepository,
    OrderRepository,
    RestaurantRepository,
    Store,
    UserRepository,
)
from foodorder.schemas.records import (
    FoodRecord,
    OrderRecord,
    Record,
    RestaurantRecord,
    UserRecord,
    utcnow,
)

R = TypeVar("R", bound=Record)


def _contains(value: str | None, needle: str) -> bool:
    return needle.lower() in (value or "").lower()


def _newest_first(records: list[R]) -> list[R]:
    # reversed() first so equal timestamps keep most-recent-insert first
    return sorted(reversed(records), key=lambda r: r.created_at, reverse=True)


def _page(records: list[R], skip: int, limit: int) -> tuple[list[R], int]:
    return [r.model_copy(deep=True) for r in records[skip:skip + limit]], len(records)


class _Collection(Generic[R]):
    record_type: type[R]

    def __init__(self):
        self._docs: dict[str, R] = {}

    async def get(self, doc_id: str) -> R | None:
        doc = self._docs.get(doc_id)
        return doc.model_copy(deep=True) if doc else None

    async def add(self, doc: R) -> R:
        self._docs[doc.id] = doc.model_copy(deep=True)
        return doc.model_copy(deep=True)

    async def update(self, doc_id: str, changes: dict[str, Any]) -> R | None:
        current = self._docs.get(doc_id)
        if current is None:
            return None
        merged = {**current.model_dump(), **changes, "updated_at": utcnow()}
        self._docs[doc_id] = self.record_type.model_validate(merged)
        return self._docs[doc_id].model_copy(deep=True)

    def _all(self) -> list[R]:
        return list(self._docs.values())


class MemoryUserRepository(_Collection[UserRecord], UserRepository):
    record_type = UserRecord

    async def get_by_email(self, email: str) -> UserRecord | None:
        for user in self._docs.values():
            if user.email == email.lower():
                return user.model_copy(deep=True)
        return None

    async def list_active(self, skip: int = 0, limit: int = 10) -> tuple[list[UserRecord], int]:
        users = [u for u in self._all() if u.is_active]
        return _page(_newest_first(users), skip, limit)


class MemoryRestaurantRepository(_Collection[RestaurantRecord], RestaurantRepository):
    record_type = RestaurantRecord

    async def search(self, cuisine=None, text=None, city=None, skip=0, limit=10):
        found = [r for r in self._all() if r.is_active]
        if cuisine:
            found = [r for r in found if _contains(r.cuisine, cuisine)]
        if text:
            found = [r for r in found if _contains(r.name, text) or _contains(r.description, text)]
        if city:
            found = [r for r in found if _contains(r.address.city, city)]
        found = sorted(_newest_first(found), key=lambda r: r.avg_rating, reverse=True)
        return _page(found, skip, limit)

    async def list_by_owner(self, owner_id: str, active_only: bool = True) -> list[RestaurantRecord]:
        owned = [
            r for r in self._all()
            if r.owner_id == owner_id and (r.is_active or not active_only)
        ]
        return [r.model_copy(deep=True) for r in _newest_first(owned)]


class MemoryFoodRepository(_Collection[FoodRecord], FoodRepository):
    record_type = FoodRecord

    async def delete(self, food_id: str) -> bool:
        return self._docs.pop(food_id, None) is not None

    async def search(
        self,
        text=None,
        category=None,
        min_price=None,
        max_price=None,
        restaurant_ids=None,
        available=True,
        skip=0,
        limit=20,
    ):
        found = self._all()
        if available is not None:
            found = [f for f in found if f.available == available]
        if text:
            found = [f for f in found if _contains(f.name, text) or _contains(f.description, text)]
        if category:
            found = [f for f in found if f.category == category.lower()]
        if min_price is not None:
            found = [f for f in found if f.price >= min_price]
        if max_price is not None:
            found = [f for f in found if f.price <= max_price]
        if restaurant_ids is not None:
            found = [f for f in found if f.restaurant_id in restaurant_ids]
        return _page(_newest_first(found), skip, limit)

    async def menu(self, restaurant_id: str) -> list[FoodRecord]:
        items = [f for f in self._all() if f.restaurant_id == restaurant_id and f.available]
        items.sort(key=lambda f: (f.category, f.name))
        return [f.model_copy(deep=True) for f in items]

    async def categories(self) -> list[str]:
        return sorted({f.category for f in self._all() if f.available})


class MemoryOrderRepository(_Collection[OrderRecord], OrderRepository):
    record_type = OrderRecord

    async def search(self, user_id=None, restaurant_ids=None, status=None, skip=0, limit=10):
        found = self._all()
        if user_id is not None:
            found = [o for o in found if o.user_id == user_id]
        if restaurant_ids is not None:
            found = [o for o in found if o.restaurant_id in restaurant_ids]
        if status:
            found = [o for o in found if o.status == status]
        return _page(_newest_first(found), skip, limit)


def create_memory_store() -> Store:
    return Store(
        users=MemoryUserRepository(),
        restaurants=MemoryRestaurantRepository(),
        foods=MemoryFoodRepository(),
        orders=MemoryOrderRepository(),
    )
