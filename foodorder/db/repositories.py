"""
Food Ordering API — Repository interfaces

One repository per collection. Route handlers and services only ever talk to
these; the concrete backend (SQL or in-memory) is picked by get_store().
List methods return (page, total) where total ignores skip/limit.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from foodorder.schemas.records import FoodRecord, OrderRecord, RestaurantRecord, UserRecord


class UserRepository(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> UserRecord | None: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> UserRecord | None: ...

    @abstractmethod
    async def add(self, user: UserRecord) -> UserRecord: ...

    @abstractmethod
    async def update(self, user_id: str, changes: dict[str, Any]) -> UserRecord | None: ...

    @abstractmethod
    async def list_active(self, skip: int = 0, limit: int = 10) -> tuple[list[UserRecord], int]: ...


class RestaurantRepository(ABC):
    @abstractmethod
    async def get(self, restaurant_id: str) -> RestaurantRecord | None: ...

    @abstractmethod
    async def add(self, restaurant: RestaurantRecord) -> RestaurantRecord: ...

    @abstractmethod
    async def update(self, restaurant_id: str, changes: dict[str, Any]) -> RestaurantRecord | None: ...

    @abstractmethod
    async def search(
        self,
        cuisine: str | None = None,
        text: str | None = None,
        city: str | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[RestaurantRecord], int]:
        """Active restaurants, best rated first, then newest."""

    @abstractmethod
    async def list_by_owner(self, owner_id: str, active_only: bool = True) -> list[RestaurantRecord]: ...


class FoodRepository(ABC):
    @abstractmethod
    async def get(self, food_id: str) -> FoodRecord | None: ...

    @abstractmethod
    async def add(self, food: FoodRecord) -> FoodRecord: ...

    @abstractmethod
    async def update(self, food_id: str, changes: dict[str, Any]) -> FoodRecord | None: ...

    @abstractmethod
    async def delete(self, food_id: str) -> bool: ...

    @abstractmethod
    async def search(
        self,
        text: str | None = None,
        category: str | None = None,
        min_price: int | None = None,
        max_price: int | None = None,
        restaurant_ids: list[str] | None = None,
        available: bool | None = True,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[FoodRecord], int]:
        """Newest first. available=None disables the availability filter."""

    @abstractmethod
    async def menu(self, restaurant_id: str) -> list[FoodRecord]:
        """Available items of one restaurant, by category then name."""

    @abstractmethod
    async def categories(self) -> list[str]: ...


class OrderRepository(ABC):
    @abstractmethod
    async def get(self, order_id: str) -> OrderRecord | None: ...

    @abstractmethod
    async def add(self, order: OrderRecord) -> OrderRecord: ...

    @abstractmethod
    async def update(self, order_id: str, changes: dict[str, Any]) -> OrderRecord | None: ...

    @abstractmethod
    async def search(
        self,
        user_id: str | None = None,
        restaurant_ids: list[str] | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[OrderRecord], int]:
        """Newest first."""


@dataclass
class Store:
    users: UserRepository
    restaurants: RestaurantRepository
    foods: FoodRepository
    orders: OrderRepository
