"""
Food item routes.
"""
import pytest

from foodorder.schemas.records import Role
from tests.conftest import auth_headers

NEW_FOOD = {
    "name": "Pepperoni Pizza",
    "description": "Spicy pepperoni with mozzarella and tomato sauce",
    "price": 16.99,
    "category": "Pizza",
    "ingredients": "Tomato sauce, Mozzarella , Pepperoni",
    "spiceLevel": "medium",
}


@pytest.mark.asyncio
async def test_create_food_defaults_to_first_restaurant(client, store, owner, menu):
    restaurant, _, _ = menu

    resp = await client.post("/api/foods", json=NEW_FOOD, headers=auth_headers(owner))

    assert resp.status_code == 201
    food = resp.json()["data"]["food"]
    assert food["restaurant"]["id"] == restaurant.id
    assert food["category"] == "pizza"
    assert food["price"] == 16.99
    assert food["ingredients"] == ["Tomato sauce", "Mozzarella", "Pepperoni"]
    assert food["available"] is True
    assert (await store.foods.get(food["id"])).price == 1699


@pytest.mark.asyncio
async def test_create_food_without_restaurant(client, owner):
    resp = await client.post("/api/foods", json=NEW_FOOD, headers=auth_headers(owner))
    assert resp.status_code == 404
    assert resp.json()["message"] == "No restaurant found for this user. Please create a restaurant first."


@pytest.mark.asyncio
async def test_create_food_for_someone_elses_restaurant(client, menu, make_user):
    restaurant, _, _ = menu
    stranger = await make_user(Role.RESTAURANT)

    resp = await client.post(
        "/api/foods", json={**NEW_FOOD, "restaurantId": restaurant.id}, headers=auth_headers(stranger),
    )
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_customer_cannot_create_food(client, customer, menu):
    resp = await client.post("/api/foods", json=NEW_FOOD, headers=auth_headers(customer))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_list_foods_filters(client, menu):
    _, pizza, salad = menu

    resp = await client.get("/api/foods")
    data = resp.json()["data"]
    assert data["pagination"] == {"current": 1, "pages": 1, "total": 2, "limit": 20}

    cheap = await client.get("/api/foods", params={"maxPrice": 6})
    assert [f["id"] for f in cheap.json()["data"]["foods"]] == [salad.id]

    searched = await client.get("/api/foods", params={"search": "marg"})
    assert [f["id"] for f in searched.json()["data"]["foods"]] == [pizza.id]

    categories = await client.get("/api/foods/categories")
    assert categories.json()["data"]["categories"] == ["pizza", "salad"]


@pytest.mark.asyncio
async def test_get_food(client, menu):
    _, pizza, _ = menu

    resp = await client.get(f"/api/foods/{pizza.id}")
    assert resp.status_code == 200
    assert resp.json()["data"]["food"]["restaurant"]["name"] == "Pizza Palace"

    missing = await client.get("/api/foods/nope")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Food item not found"


@pytest.mark.asyncio
async def test_toggle_and_my_foods(client, owner, menu):
    _, pizza, _ = menu
    headers = auth_headers(owner)

    resp = await client.put(f"/api/foods/{pizza.id}/toggle", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Food item disabled successfully"
    assert resp.json()["data"]["food"]["available"] is False

    unavailable = await client.get("/api/foods/my-foods", params={"status": "unavailable"}, headers=headers)
    assert [f["id"] for f in unavailable.json()["data"]["foods"]] == [pizza.id]

    everything = await client.get("/api/foods/my-foods", headers=headers)
    assert everything.json()["data"]["pagination"]["total"] == 2

    public = await client.get("/api/foods")
    assert pizza.id not in [f["id"] for f in public.json()["data"]["foods"]]

    again = await client.put(f"/api/foods/{pizza.id}/toggle", headers=headers)
    assert again.json()["message"] == "Food item enabled successfully"


@pytest.mark.asyncio
async def test_update_food_price(client, store, owner, menu, make_user):
    _, pizza, _ = menu

    resp = await client.put(f"/api/foods/{pizza.id}", json={"price": 11.5}, headers=auth_headers(owner))
    assert resp.status_code == 200
    assert resp.json()["data"]["food"]["price"] == 11.5
    assert (await store.foods.get(pizza.id)).price == 1150

    stranger = await make_user(Role.RESTAURANT)
    denied = await client.put(f"/api/foods/{pizza.id}", json={"price": 1}, headers=auth_headers(stranger))
    assert denied.status_code == 403


@pytest.mark.asyncio
async def test_delete_food(client, store, owner, menu):
    _, pizza, _ = menu

    resp = await client.delete(f"/api/foods/{pizza.id}", headers=auth_headers(owner))
    assert resp.status_code == 200
    assert await store.foods.get(pizza.id) is None
