"""
Food Ordering API — Restaurant routes
"""
import logging

from fastapi import APIRouter, Depends, Query

from foodorder.api.deps import PageParams, get_current_user, require_roles
from foodorder.core.errors import NotFound
from foodorder.core.money import to_cents
from foodorder.core.policy import authorize
from foodorder.db.repositories import Store
from foodorder.db.store import get_store
from foodorder.schemas.common import Pagination, ok
from foodorder.schemas.food import FoodOut
from foodorder.schemas.records import RestaurantRecord, Role, UserRecord
from foodorder.schemas.restaurant import RestaurantCreate, RestaurantOut, RestaurantUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/restaurants", tags=["restaurants"])

OWNER_ROLES = (Role.RESTAURANT, Role.ADMIN)
MONEY_FIELDS = ("delivery_fee", "minimum_order")


async def present(store: Store, restaurant: RestaurantRecord) -> RestaurantOut:
    owner = await store.users.get(restaurant.owner_id)
    return RestaurantOut.from_record(restaurant, owner)


async def load_restaurant(store: Store, restaurant_id: str) -> RestaurantRecord:
    restaurant = await store.restaurants.get(restaurant_id)
    if restaurant is None:
        raise NotFound("Restaurant not found")
    return restaurant


@router.get("")
async def list_restaurants(
    paging: PageParams = Depends(),
    cuisine: str | None = Query(None),
    search: str | None = Query(None),
    city: str | None = Query(None),
    store: Store = Depends(get_store),
):
    """Active restaurants, best rated first."""
    restaurants, total = await store.restaurants.search(
        cuisine=cuisine, text=search, city=city, skip=paging.skip, limit=paging.limit,
    )
    return ok({
        "restaurants": [await present(store, r) for r in restaurants],
        "pagination": Pagination.build(paging.page, paging.limit, total),
    })


@router.get("/my-restaurants")
async def my_restaurants(
    user: UserRecord = Depends(require_roles(*OWNER_ROLES)),
    store: Store = Depends(get_store),
):
    restaurants = await store.restaurants.list_by_owner(user.id)
    return ok({"restaurants": [RestaurantOut.from_record(r, user) for r in restaurants]})


@router.get("/{restaurant_id}")
async def get_restaurant(restaurant_id: str, store: Store = Depends(get_store)):
    """Restaurant with its currently available menu."""
    restaurant = await store.restaurants.get(restaurant_id)
    if restaurant is None or not restaurant.is_active:
        raise NotFound("Restaurant not found")
    menu = await store.foods.menu(restaurant_id)
    return ok({
        "restaurant": await present(store, restaurant),
        "menuItems": [FoodOut.from_record(f) for f in menu],
    })


@router.post("", status_code=201)
async def create_restaurant(
    payload: RestaurantCreate,
    user: UserRecord = Depends(require_roles(*OWNER_ROLES)),
    store: Store = Depends(get_store),
):
    data = payload.model_dump()
    for field in MONEY_FIELDS:
        data[field] = to_cents(data[field])
    restaurant = await store.restaurants.add(RestaurantRecord(owner_id=user.id, **data))
    logger.info("Restaurant %s created by %s", restaurant.id, user.id)
    return ok(
        {"restaurant": RestaurantOut.from_record(restaurant, user)},
        message="Restaurant created successfully",
    )


@router.put("/{restaurant_id}")
async def update_restaurant(
    restaurant_id: str,
    payload: RestaurantUpdate,
    user: UserRecord = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    restaurant = await load_restaurant(store, restaurant_id)
    authorize(user, owner_id=restaurant.owner_id,
              message="Access denied. You can only update your own restaurant")

    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    for field in MONEY_FIELDS:
        if field in changes:
            changes[field] = to_cents(changes[field])
    updated = await store.restaurants.update(restaurant_id, changes)
    return ok({"restaurant": await present(store, updated)}, message="Restaurant updated successfully")


@router.delete("/{restaurant_id}")
async def delete_restaurant(
    restaurant_id: str,
    user: UserRecord = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Soft delete: orders keep pointing at the restaurant."""
    restaurant = await load_restaurant(store, restaurant_id)
    authorize(user, owner_id=restaurant.owner_id,
              message="Access denied. You can only delete your own restaurant")
    await store.restaurants.update(restaurant_id, {"is_active": False})
    logger.info("Restaurant %s deactivated by %s", restaurant_id, user.id)
    return ok(message="Restaurant deleted successfully")
