"""
Order routes: placement, listing, visibility and status updates.
"""
import pytest

from foodorder.schemas.records import Role
from tests.conftest import DELIVERY, auth_headers


def _cart(*items, **extra):
    return {
        "items": [{"foodId": food_id, "quantity": qty} for food_id, qty in items],
        "paymentMethod": "cash",
        "deliveryAddress": DELIVERY,
        **extra,
    }


async def _place(client, user, *items, **extra):
    return await client.post("/api/order", json=_cart(*items, **extra), headers=auth_headers(user))


@pytest.mark.asyncio
async def test_place_order(client, customer, menu):
    restaurant, pizza, salad = menu

    resp = await _place(client, customer, (pizza.id, 2), (salad.id, 1), notes="Ring twice")

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Order created successfully"
    order = body["data"]["order"]
    assert order["subtotal"] == 25.0
    assert order["deliveryFee"] == 3.0
    assert order["tax"] == 3.0
    assert order["total"] == 31.0
    assert order["status"] == "pending"
    assert order["paymentStatus"] == "pending"
    assert order["restaurant"]["id"] == restaurant.id
    assert order["user"]["id"] == customer.id
    assert order["items"][0] == {
        "food": pizza.id,
        "name": "Margherita",
        "price": 10.0,
        "quantity": 2,
        "specialInstructions": "",
    }
    assert order["estimatedDeliveryTime"] is not None


@pytest.mark.asyncio
async def test_place_order_requires_login(client, menu):
    _, pizza, _ = menu
    resp = await client.post("/api/order", json=_cart((pizza.id, 1)))
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_place_order_rejections(client, store, customer, owner, menu, make_restaurant, make_food):
    _, pizza, _ = menu
    other = await make_restaurant(owner, "Sushi Zen")
    roll = await make_food(other, "California Roll", 8.99)

    mixed = await _place(client, customer, (pizza.id, 1), (roll.id, 1))
    assert mixed.status_code == 400
    assert mixed.json() == {
        "success": False,
        "message": "All items must be from the same restaurant",
        "error": "CrossRestaurantOrder",
    }

    unknown = await _place(client, customer, ("nope", 1))
    assert unknown.status_code == 400
    assert unknown.json()["error"] == "NotFound"

    empty = await client.post("/api/order", json=_cart(), headers=auth_headers(customer))
    assert empty.status_code == 400

    zero = await _place(client, customer, (pizza.id, 0))
    assert zero.status_code == 400

    _, total = await store.orders.search()
    assert total == 0


@pytest.mark.asyncio
async def test_place_order_below_minimum(client, customer, owner, make_restaurant, make_food):
    restaurant = await make_restaurant(owner, minimum_order=15)
    pizza = await make_food(restaurant, "Margherita", 10.00)

    resp = await _place(client, customer, (pizza.id, 1))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Minimum order amount is $15.00"
    assert resp.json()["error"] == "BelowMinimum"


@pytest.mark.asyncio
async def test_my_orders(client, customer, menu, make_user):
    _, pizza, salad = menu
    other = await make_user(Role.CUSTOMER)
    await _place(client, customer, (pizza.id, 1))
    await _place(client, customer, (salad.id, 1))
    await _place(client, other, (pizza.id, 1))

    resp = await client.get("/api/order/my", headers=auth_headers(customer))
    data = resp.json()["data"]
    assert data["pagination"]["total"] == 2
    assert [o["items"][0]["name"] for o in data["orders"]] == ["Caesar Salad", "Margherita"]

    none_confirmed = await client.get("/api/order/my", params={"status": "confirmed"}, headers=auth_headers(customer))
    assert none_confirmed.json()["data"]["orders"] == []


@pytest.mark.asyncio
async def test_get_order_visibility(client, customer, admin, menu, make_user):
    _, pizza, _ = menu
    order_id = (await _place(client, customer, (pizza.id, 1))).json()["data"]["order"]["id"]
    snoop = await make_user(Role.CUSTOMER)

    own = await client.get(f"/api/order/{order_id}", headers=auth_headers(customer))
    assert own.status_code == 200

    denied = await client.get(f"/api/order/{order_id}", headers=auth_headers(snoop))
    assert denied.status_code == 403
    assert denied.json()["message"] == "Access denied"

    by_admin = await client.get(f"/api/order/{order_id}", headers=auth_headers(admin))
    assert by_admin.status_code == 200

    missing = await client.get("/api/order/nope", headers=auth_headers(customer))
    assert missing.status_code == 404
    assert missing.json()["message"] == "Order not found"


@pytest.mark.asyncio
async def test_restaurant_orders(client, customer, owner, admin, menu, make_user, make_restaurant, make_food):
    _, pizza, _ = menu
    rival = await make_user(Role.RESTAURANT)
    rival_food = await make_food(await make_restaurant(rival, "Rival Grill"), "Steak", 20.00)
    await _place(client, customer, (pizza.id, 1))
    await _place(client, customer, (rival_food.id, 1))

    mine = await client.get("/api/order/restaurant", headers=auth_headers(owner))
    assert [o["restaurant"]["name"] for o in mine.json()["data"]["orders"]] == ["Pizza Palace"]

    everything = await client.get("/api/order/restaurant", headers=auth_headers(admin))
    assert everything.json()["data"]["pagination"]["total"] == 2

    customers_cant = await client.get("/api/order/restaurant", headers=auth_headers(customer))
    assert customers_cant.status_code == 403


@pytest.mark.asyncio
async def test_update_status(client, customer, owner, menu, make_user):
    _, pizza, _ = menu
    order_id = (await _place(client, customer, (pizza.id, 1))).json()["data"]["order"]["id"]

    by_customer = await client.put(
        f"/api/order/{order_id}/status", json={"status": "confirmed"}, headers=auth_headers(customer),
    )
    assert by_customer.status_code == 403

    rival = await make_user(Role.RESTAURANT)
    by_rival = await client.put(
        f"/api/order/{order_id}/status", json={"status": "confirmed"}, headers=auth_headers(rival),
    )
    assert by_rival.status_code == 403
    assert by_rival.json()["message"] == "Access denied. Only restaurant owners and admins can update order status"

    invalid = await client.put(
        f"/api/order/{order_id}/status", json={"status": "teleported"}, headers=auth_headers(owner),
    )
    assert invalid.status_code == 400

    delivered = await client.put(
        f"/api/order/{order_id}/status", json={"status": "delivered"}, headers=auth_headers(owner),
    )
    assert delivered.status_code == 200
    assert delivered.json()["message"] == "Order status updated successfully"
    order = delivered.json()["data"]["order"]
    assert order["status"] == "delivered"
    assert order["actualDeliveryTime"] is not None
