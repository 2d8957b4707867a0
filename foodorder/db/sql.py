"""
Food Ordering API — SQLAlchemy-backed repositories

Each write commits immediately; a request touches at most one row per write,
so there is no multi-statement transaction to coordinate.
"""
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, distinct, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from foodorder.db.database import Base
from foodorder.db.repositories import (
    FoodRepository,
    OrderRepository,
    RestaurantRepository,
    Store,
    UserRepository,
)
from foodorder.models import Food, Order, Restaurant, User
from foodorder.schemas.records import (
    FoodRecord,
    OrderRecord,
    Record,
    RestaurantRecord,
    UserRecord,
    utcnow,
)


R = TypeVar("R", bound=Record)


def _like(value: str) -> str:
    return f"%{value}%"


class _Table(Generic[R]):
    model: type[Base]
    record_type: type[R]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, doc_id: str) -> R | None:
        row = await self.db.get(self.model, doc_id)
        return self.record_type.model_validate(row) if row else None

    async def add(self, doc: R) -> R:
        row = self.model(**doc.model_dump())
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        return self.record_type.model_validate(row)

    async def update(self, doc_id: str, changes: dict[str, Any]) -> R | None:
        row = await self.db.get(self.model, doc_id)
        if row is None:
            return None
        # Validate through the record type so embedded documents land as plain JSON.
        merged = self.record_type.model_validate({
            **self.record_type.model_validate(row).model_dump(), **changes,
        }).model_dump()
        for key in changes:
            if key in merged:
                setattr(row, key, merged[key])
        row.updated_at = utcnow()
        await self.db.commit()
        await self.db.refresh(row)
        return self.record_type.model_validate(row)

    async def _page(self, query: Select, skip: int, limit: int) -> tuple[list[R], int]:
        total = await self.db.scalar(select(func.count()).select_from(query.order_by(None).subquery()))
        rows = (await self.db.execute(query.offset(skip).limit(limit))).scalars().all()
        return [self.record_type.model_validate(r) for r in rows], total or 0


class SqlUserRepository(_Table[UserRecord], UserRepository):
    model = User
    record_type = UserRecord

    async def get_by_email(self, email: str) -> UserRecord | None:
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        row = result.scalar_one_or_none()
        return UserRecord.model_validate(row) if row else None

    async def list_active(self, skip: int = 0, limit: int = 10) -> tuple[list[UserRecord], int]:
        query = select(User).where(User.is_active.is_(True)).order_by(User.created_at.desc())
        return await self._page(query, skip, limit)


class SqlRestaurantRepository(_Table[RestaurantRecord], RestaurantRepository):
    model = Restaurant
    record_type = RestaurantRecord

    async def search(self, cuisine=None, text=None, city=None, skip=0, limit=10):
        query = select(Restaurant).where(Restaurant.is_active.is_(True))
        if cuisine:
            query = query.where(Restaurant.cuisine.ilike(_like(cuisine)))
        if text:
            query = query.where(or_(
                Restaurant.name.ilike(_like(text)),
                Restaurant.description.ilike(_like(text)),
            ))
        if city:
            query = query.where(Restaurant.address["city"].as_string().ilike(_like(city)))
        query = query.order_by(Restaurant.avg_rating.desc(), Restaurant.created_at.desc())
        return await self._page(query, skip, limit)

    async def list_by_owner(self, owner_id: str, active_only: bool = True) -> list[RestaurantRecord]:
        query = select(Restaurant).where(Restaurant.owner_id == owner_id)
        if active_only:
            query = query.where(Restaurant.is_active.is_(True))
        rows = (await self.db.execute(query.order_by(Restaurant.created_at.desc()))).scalars().all()
        return [RestaurantRecord.model_validate(r) for r in rows]


class SqlFoodRepository(_Table[FoodRecord], FoodRepository):
    model = Food
    record_type = FoodRecord

    async def delete(self, food_id: str) -> bool:
        row = await self.db.get(Food, food_id)
        if row is None:
            return False
        await self.db.delete(row)
        await self.db.commit()
        return True

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
        query = select(Food)
        if available is not None:
            query = query.where(Food.available.is_(available))
        if text:
            query = query.where(or_(Food.name.ilike(_like(text)), Food.description.ilike(_like(text))))
        if category:
            query = query.where(Food.category == category.lower())
        if min_price is not None:
            query = query.where(Food.price >= min_price)
        if max_price is not None:
            query = query.where(Food.price <= max_price)
        if restaurant_ids is not None:
            query = query.where(Food.restaurant_id.in_(restaurant_ids))
        return await self._page(query.order_by(Food.created_at.desc()), skip, limit)

    async def menu(self, restaurant_id: str) -> list[FoodRecord]:
        query = (
            select(Food)
            .where(Food.restaurant_id == restaurant_id, Food.available.is_(True))
            .order_by(Food.category, Food.name)
        )
        rows = (await self.db.execute(query)).scalars().all()
        return [FoodRecord.model_validate(r) for r in rows]

    async def categories(self) -> list[str]:
        query = select(distinct(Food.category)).where(Food.available.is_(True)).order_by(Food.category)
        return list((await self.db.execute(query)).scalars().all())


class SqlOrderRepository(_Table[OrderRecord], OrderRepository):
    model = Order
    record_type = OrderRecord

    async def search(self, user_id=None, restaurant_ids=None, status=None, skip=0, limit=10):
        query = select(Order)
        if user_id is not None:
            query = query.where(Order.user_id == user_id)
        if restaurant_ids is not None:
            query = query.where(Order.restaurant_id.in_(restaurant_ids))
        if status:
            query = query.where(Order.status == status)
        return await self._page(query.order_by(Order.created_at.desc()), skip, limit)


def create_sql_store(db: AsyncSession) -> Store:
    return Store(
        users=SqlUserRepository(db),
        restaurants=SqlRestaurantRepository(db),
        foods=SqlFoodRepository(db),
        orders=SqlOrderRepository(db),
    )
