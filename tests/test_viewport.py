"""Tests for selecting restaurants and navigating back."""

import asyncio

import pytest

from conftest import MARGHERITA, PIZZA, SALMON_ROLL, SUSHI
from quickbite.errors import MenuLoadError
from quickbite.state import ViewState


@pytest.mark.asyncio
async def test_select_loads_menu(storefront, fake_client):
    await storefront.catalog.load()

    await storefront.viewport.select(PIZZA)

    state = storefront.state
    assert state.view is ViewState.VIEWING
    assert state.active == PIZZA
    assert [item.id for item in state.menu] == ["i1", "i2"]
    assert ("GET", "/restaurants/r1/menu") in fake_client.calls


@pytest.mark.asyncio
async def test_scenario_d_switching_restaurant_empties_cart(storefront):
    await storefront.catalog.load()
    await storefront.viewport.select(PIZZA)
    storefront.add_to_cart(MARGHERITA)
    storefront.add_to_cart(MARGHERITA)

    await storefront.viewport.select(SUSHI)

    assert not storefront.state.cart
    assert storefront.state.active == SUSHI


@pytest.mark.asyncio
async def test_menu_failure_keeps_restaurant_selected(storefront, fake_client):
    await storefront.catalog.load()
    fake_client.menu_errors["r2"] = MenuLoadError("timeout")

    await storefront.viewport.select(SUSHI)

    state = storefront.state
    assert state.view is ViewState.VIEWING
    assert state.active == SUSHI
    assert state.menu == ()
    assert state.banner == "Failed to load menu"


@pytest.mark.asyncio
async def test_back_keeps_cart(storefront):
    await storefront.catalog.load()
    await storefront.viewport.select(PIZZA)
    storefront.add_to_cart(MARGHERITA)

    storefront.viewport.back()

    assert storefront.state.view is ViewState.BROWSING
    assert storefront.state.active is None
    assert storefront.state.cart.get("i1").quantity == 1


@pytest.mark.asyncio
async def test_latest_selection_wins_over_slow_earlier_fetch(storefront, fake_client):
    await storefront.catalog.load()
    gate = asyncio.Event()
    fake_client.menu_gates["r1"] = gate

    slow = asyncio.create_task(storefront.viewport.select(PIZZA))
    await asyncio.sleep(0)
    assert storefront.state.view is ViewState.SELECTING

    await storefront.viewport.select(SUSHI)
    gate.set()
    await slow

    state = storefront.state
    assert state.active == SUSHI
    assert state.menu == (SALMON_ROLL,)


@pytest.mark.asyncio
async def test_back_during_fetch_discards_result(storefront, fake_client):
    await storefront.catalog.load()
    gate = asyncio.Event()
    fake_client.menu_gates["r1"] = gate

    pending = asyncio.create_task(storefront.viewport.select(PIZZA))
    await asyncio.sleep(0)
    storefront.viewport.back()
    gate.set()
    await pending

    assert storefront.state.view is ViewState.BROWSING
    assert storefront.state.active is None
