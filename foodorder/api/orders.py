"""
Food Ordering API — Orders API

Flow for POST /order:
  1. Caller resolved from the JWT (get_current_user)
  2. Cart validated and priced (services.ordering.place_order)
  3. Order persisted with status=pending, returned with restaurant and user expanded
"""
from fastapi import APIRouter, Depends, Query, status

from foodorder.api.deps import PageParams, get_current_user, require_roles
from foodorder.core.errors import NotFound
from foodorder.core.policy import authorize, is_admin
from foodorder.db.repositories import Store
from foodorder.db.store import get_store
from foodorder.schemas.common import Pagination, ok
from foodorder.schemas.order import OrderOut, OrderRequest, StatusUpdateRequest
from foodorder.schemas.records import OrderRecord, OrderStatus, Role, UserRecord
from foodorder.services.ordering import place_order, update_status

router = APIRouter(prefix="/order", tags=["orders"])


async def present(store: Store, order: OrderRecord, with_user: bool = True) -> OrderOut:
    restaurant = await store.restaurants.get(order.restaurant_id)
    user = await store.users.get(order.user_id) if with_user else None
    return OrderOut.from_record(order, restaurant=restaurant, user=user)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderRequest,
    user: UserRecord = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    order = await place_order(store, user, payload)
    return ok({"order": await present(store, order)}, message="Order created successfully")


@router.get("/my")
async def my_orders(
    paging: PageParams = Depends(),
    order_status: OrderStatus | None = Query(None, alias="status"),
    user: UserRecord = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """The caller's own orders, newest first."""
    orders, total = await store.orders.search(
        user_id=user.id,
        status=order_status.value if order_status else None,
        skip=paging.skip,
        limit=paging.limit,
    )
    return ok({
        "orders": [await present(store, o, with_user=False) for o in orders],
        "pagination": Pagination.build(paging.page, paging.limit, total),
    })


@router.get("/restaurant")
async def restaurant_orders(
    paging: PageParams = Depends(),
    order_status: OrderStatus | None = Query(None, alias="status"),
    user: UserRecord = Depends(require_roles(Role.RESTAURANT, Role.ADMIN)),
    store: Store = Depends(get_store),
):
    """Incoming orders for the caller's restaurants; admins see every order."""
    restaurant_ids = None
    if not is_admin(user):
        owned = await store.restaurants.list_by_owner(user.id, active_only=False)
        restaurant_ids = [r.id for r in owned]

    orders, total = await store.orders.search(
        restaurant_ids=restaurant_ids,
        status=order_status.value if order_status else None,
        skip=paging.skip,
        limit=paging.limit,
    )
    return ok({
        "orders": [await present(store, o) for o in orders],
        "pagination": Pagination.build(paging.page, paging.limit, total),
    })


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    user: UserRecord = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    order = await store.orders.get(order_id)
    if order is None:
        raise NotFound("Order not found")
    authorize(user, owner_id=order.user_id)
    return ok({"order": await present(store, order)})


@router.put("/{order_id}/status")
async def change_order_status(
    order_id: str,
    payload: StatusUpdateRequest,
    user: UserRecord = Depends(require_roles(Role.RESTAURANT, Role.ADMIN)),
    store: Store = Depends(get_store),
):
    order = await update_status(store, user, order_id, payload.status)
    return ok({"order": await present(store, order)}, message="Order status updated successfully")
