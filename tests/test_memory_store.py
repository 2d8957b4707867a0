"""
In-memory repositories: copy isolation, partial updates, filtering and ordering.
"""
import pytest

from foodorder.schemas.records import Role


@pytest.mark.asyncio
async def test_returned_records_are_copies(store, make_user):
    user = await make_user(Role.CUSTOMER, name="Original")
    user.name = "Mutated"

    stored = await store.users.get(user.id)
    assert stored.name == "Original"


@pytest.mark.asyncio
async def test_update_merges_changes_and_touches_updated_at(store, make_user):
    user = await make_user(Role.CUSTOMER, phone="+15555550123")

    updated = await store.users.update(user.id, {"name": "Renamed"})

    assert updated.name == "Renamed"
    assert updated.phone == "+15555550123"
    assert updated.updated_at >= user.updated_at
    assert await store.users.update("missing", {"name": "x"}) is None


@pytest.mark.asyncio
async def test_get_by_email_is_case_insensitive(store, make_user):
    user = await make_user(Role.CUSTOMER, email="jane@example.com")
    found = await store.users.get_by_email("JANE@example.com")
    assert found.id == user.id


@pytest.mark.asyncio
async def test_list_active_skips_deactivated(store, make_user):
    kept = await make_user(Role.CUSTOMER)
    gone = await make_user(Role.CUSTOMER)
    await store.users.update(gone.id, {"is_active": False})

    users, total = await store.users.list_active()
    assert total == 1
    assert [u.id for u in users] == [kept.id]


@pytest.mark.asyncio
async def test_restaurant_search_filters_and_rating_order(store, owner, make_restaurant):
    await make_restaurant(owner, "Pizza Palace", avg_rating=4.5)
    await make_restaurant(owner, "Sushi Zen", cuisine="japanese", avg_rating=4.8)
    closed = await make_restaurant(owner, "Closed Diner", avg_rating=5.0)
    await store.restaurants.update(closed.id, {"is_active": False})

    found, total = await store.restaurants.search()
    assert total == 2
    assert [r.name for r in found] == ["Sushi Zen", "Pizza Palace"]

    found, _ = await store.restaurants.search(cuisine="JAPAN")
    assert [r.name for r in found] == ["Sushi Zen"]

    found, _ = await store.restaurants.search(text="palace", city="new york")
    assert [r.name for r in found] == ["Pizza Palace"]


@pytest.mark.asyncio
async def test_list_by_owner_active_only(store, owner, make_restaurant):
    first = await make_restaurant(owner, "First")
    second = await make_restaurant(owner, "Second")
    await store.restaurants.update(first.id, {"is_active": False})

    assert [r.id for r in await store.restaurants.list_by_owner(owner.id)] == [second.id]
    everything = await store.restaurants.list_by_owner(owner.id, active_only=False)
    assert {r.id for r in everything} == {first.id, second.id}


@pytest.mark.asyncio
async def test_food_search_price_range_and_availability(store, menu, make_food):
    restaurant, pizza, salad = menu
    hidden = await make_food(restaurant, "Secret Special", 7.50, available=False)

    found, total = await store.foods.search(min_price=600, max_price=1000)
    assert total == 1
    assert found[0].id == pizza.id

    found, _ = await store.foods.search(available=None, restaurant_ids=[restaurant.id])
    assert {f.id for f in found} == {pizza.id, salad.id, hidden.id}

    found, _ = await store.foods.search(category="SALAD")
    assert [f.id for f in found] == [salad.id]


@pytest.mark.asyncio
async def test_menu_and_categories(store, menu, make_food):
    restaurant, pizza, salad = menu
    await make_food(restaurant, "Tiramisu", 6.00, category="dessert", available=False)

    assert [f.name for f in await store.foods.menu(restaurant.id)] == ["Margherita", "Caesar Salad"]
    assert await store.foods.categories() == ["pizza", "salad"]


@pytest.mark.asyncio
async def test_food_delete(store, menu):
    _, pizza, _ = menu
    assert await store.foods.delete(pizza.id) is True
    assert await store.foods.get(pizza.id) is None
    assert await store.foods.delete(pizza.id) is False
