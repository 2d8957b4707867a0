"""
Food Ordering API — Food item routes
"""
import logging

from fastapi import APIRouter, Depends, Query

from foodorder.api.deps import require_roles
from foodorder.core.errors import NotFound
from foodorder.core.money import to_cents
from foodorder.core.policy import authorize
from foodorder.db.repositories import Store
from foodorder.db.store import get_store
from foodorder.schemas.common import Pagination, ok
from foodorder.schemas.food import FoodCreate, FoodOut, FoodUpdate
from foodorder.schemas.records import FoodRecord, Role, UserRecord

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/foods", tags=["foods"])

OWNER_ROLES = (Role.RESTAURANT, Role.ADMIN)


async def present(store: Store, food: FoodRecord) -> FoodOut:
    return FoodOut.from_record(food, await store.restaurants.get(food.restaurant_id))


async def load_owned_food(store: Store, food_id: str, user: UserRecord, action: str) -> FoodRecord:
    """The food, provided the caller owns its restaurant or is an admin."""
    food = await store.foods.get(food_id)
    if food is None:
        raise NotFound("Food item not found")
    restaurant = await store.restaurants.get(food.restaurant_id)
    authorize(
        user,
        owner_id=restaurant.owner_id if restaurant else None,
        message=f"Access denied. You can only {action} food from your own restaurant.",
    )
    return food


@router.get("")
async def list_foods(
    search: str | None = Query(None),
    category: str | None = Query(None),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    restaurant: str | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    store: Store = Depends(get_store),
):
    """Available food items, newest first."""
    foods, total = await store.foods.search(
        text=search,
        category=category,
        min_price=to_cents(min_price) if min_price is not None else None,
        max_price=to_cents(max_price) if max_price is not None else None,
        restaurant_ids=[restaurant] if restaurant else None,
        skip=(page - 1) * limit,
        limit=limit,
    )
    return ok({
        "foods": [await present(store, f) for f in foods],
        "pagination": Pagination.build(page, limit, total),
    })


@router.get("/categories")
async def food_categories(store: Store = Depends(get_store)):
    return ok({"categories": await store.foods.categories()})


@router.get("/my-foods")
async def my_foods(
    status: str | None = Query(None, pattern="^(available|unavailable)$"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user: UserRecord = Depends(require_roles(*OWNER_ROLES)),
    store: Store = Depends(get_store),
):
    """Food items across every restaurant the caller owns."""
    owned = await store.restaurants.list_by_owner(user.id, active_only=False)
    if not owned:
        return ok({"foods": [], "pagination": Pagination.build(page, limit, 0)})

    foods, total = await store.foods.search(
        restaurant_ids=[r.id for r in owned],
        available=(status == "available") if status else None,
        skip=(page - 1) * limit,
        limit=limit,
    )
    return ok({
        "foods": [await present(store, f) for f in foods],
        "pagination": Pagination.build(page, limit, total),
    })


@router.get("/{food_id}")
async def get_food(food_id: str, store: Store = Depends(get_store)):
    food = await store.foods.get(food_id)
    if food is None:
        raise NotFound("Food item not found")
    return ok({"food": await present(store, food)})


@router.post("", status_code=201)
async def create_food(
    payload: FoodCreate,
    user: UserRecord = Depends(require_roles(*OWNER_ROLES)),
    store: Store = Depends(get_store),
):
    """
    Add a menu item. Without restaurantId the item goes to the caller's
    first active restaurant.
    """
    restaurant_id = payload.restaurant_id
    if not restaurant_id:
        owned = await store.restaurants.list_by_owner(user.id)
        if not owned:
            raise NotFound("No restaurant found for this user. Please create a restaurant first.")
        restaurant_id = owned[0].id

    restaurant = await store.restaurants.get(restaurant_id)
    if restaurant is None:
        raise NotFound("Restaurant not found")
    authorize(user, owner_id=restaurant.owner_id,
              message="Access denied. You can only add food to your own restaurant.")

    data = payload.model_dump(exclude={"restaurant_id"})
    data["price"] = to_cents(data["price"])
    food = await store.foods.add(FoodRecord(restaurant_id=restaurant.id, **data))
    logger.info("Food %s added to restaurant %s by %s", food.id, restaurant.id, user.id)
    return ok({"food": FoodOut.from_record(food, restaurant)}, message="Food item created successfully")


@router.put("/{food_id}")
async def update_food(
    food_id: str,
    payload: FoodUpdate,
    user: UserRecord = Depends(require_roles(*OWNER_ROLES)),
    store: Store = Depends(get_store),
):
    await load_owned_food(store, food_id, user, "update")
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "price" in changes:
        changes["price"] = to_cents(changes["price"])
    updated = await store.foods.update(food_id, changes)
    return ok({"food": await present(store, updated)}, message="Food item updated successfully")


@router.put("/{food_id}/toggle")
async def toggle_food_availability(
    food_id: str,
    user: UserRecord = Depends(require_roles(*OWNER_ROLES)),
    store: Store = Depends(get_store),
):
    food = await load_owned_food(store, food_id, user, "update")
    updated = await store.foods.update(food_id, {"available": not food.available})
    state = "enabled" if updated.available else "disabled"
    return ok({"food": await present(store, updated)}, message=f"Food item {state} successfully")


@router.delete("/{food_id}")
async def delete_food(
    food_id: str,
    user: UserRecord = Depends(require_roles(*OWNER_ROLES)),
    store: Store = Depends(get_store),
):
    """Physical delete; placed orders keep their own copy of name and price."""
    await load_owned_food(store, food_id, user, "delete")
    await store.foods.delete(food_id)
    return ok(message="Food item deleted successfully")
