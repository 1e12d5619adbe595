"""Smoke tests driving the Textual app through its pilot."""

from decimal import Decimal

import pytest

from quickbite.errors import CatalogLoadError
from quickbite.order_modal import OrderPlacedModal
from quickbite.state import ViewState
from quickbite.storefront_app import QuickBiteApp


async def settle(app, pilot) -> None:
    await app.workers.wait_for_complete()
    await pilot.pause()


@pytest.mark.asyncio
async def test_browse_add_and_checkout(fake_client):
    fake_client.order_total = Decimal("21.50")
    app = QuickBiteApp(client=fake_client)

    async with app.run_test() as pilot:
        await settle(app, pilot)
        assert app.storefront.state.view is ViewState.BROWSING

        await pilot.press("enter")
        await settle(app, pilot)
        assert app.storefront.state.view is ViewState.VIEWING
        assert app.storefront.state.active.id == "r1"

        await pilot.press("enter", "enter", "down", "enter")
        cart = app.storefront.state.cart
        assert [(line.item_id, line.quantity) for line in cart] == [("i1", 2), ("i2", 1)]

        await pilot.press("ctrl+s")
        await settle(app, pilot)
        assert isinstance(app.screen, OrderPlacedModal)
        assert app.screen.total == Decimal("21.50")
        assert not app.storefront.state.cart

        await pilot.press("enter")
        await pilot.pause()
        assert not isinstance(app.screen, OrderPlacedModal)


@pytest.mark.asyncio
async def test_remove_and_back_keyboard(fake_client):
    app = QuickBiteApp(client=fake_client)

    async with app.run_test() as pilot:
        await settle(app, pilot)
        await pilot.press("enter")
        await settle(app, pilot)

        await pilot.press("enter", "down", "enter", "j", "d")
        assert [line.item_id for line in app.storefront.state.cart] == ["i2"]

        await pilot.press("b")
        await pilot.pause()
        assert app.storefront.state.view is ViewState.BROWSING
        assert [line.item_id for line in app.storefront.state.cart] == ["i2"]

        # Checkout needs the cart's restaurant to be open again.
        await pilot.press("ctrl+s")
        await settle(app, pilot)
        assert ("POST", "/orders") not in fake_client.calls


@pytest.mark.asyncio
async def test_catalog_failure_then_seed_recovers(fake_client):
    fake_client.catalog_error = CatalogLoadError("down")
    app = QuickBiteApp(client=fake_client)

    async with app.run_test() as pilot:
        await settle(app, pilot)
        assert app.storefront.state.view is ViewState.ERROR
        assert app.storefront.state.error == "Failed to load restaurants"

        fake_client.catalog_error = None
        await pilot.press("s")
        await settle(app, pilot)
        assert app.storefront.state.view is ViewState.BROWSING
        assert ("POST", "/seed") in fake_client.calls
