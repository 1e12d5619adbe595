"""Shared pytest fixtures: sample catalog data and an in-memory backend."""

from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from quickbite.models import MenuItem, OrderRequest, Restaurant
from quickbite.storefront import Storefront

PIZZA = Restaurant(id="r1", name="Slice House", cuisine="Pizza", rating=4.5, delivery_time_min=25)
SUSHI = Restaurant(id="r2", name="Tokyo Roll", cuisine="Japanese", rating=4.8, delivery_time_min=35)

MARGHERITA = MenuItem(id="i1", name="Margherita", price=Decimal("9.00"), restaurant_id="r1")
GARLIC_BREAD = MenuItem(id="i2", name="Garlic Bread", price=Decimal("3.50"), restaurant_id="r1")
SALMON_ROLL = MenuItem(id="s1", name="Salmon Roll", price=Decimal("7.25"), restaurant_id="r2")


class FakeClient:
    """Stands in for StorefrontClient and records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.restaurants = [PIZZA, SUSHI]
        self.menus = {"r1": [MARGHERITA, GARLIC_BREAD], "r2": [SALMON_ROLL]}
        self.catalog_error: Exception | None = None
        self.menu_errors: dict[str, Exception] = {}
        self.order_error: Exception | None = None
        self.seed_error: Exception | None = None
        self.order_total = Decimal("0")
        self.orders: list[OrderRequest] = []
        self.menu_gates: dict[str, asyncio.Event] = {}
        self.order_gate: asyncio.Event | None = None
        self.closed = False

    async def list_restaurants(self) -> list[Restaurant]:
        self.calls.append(("GET", "/restaurants"))
        if self.catalog_error is not None:
            raise self.catalog_error
        return list(self.restaurants)

    async def get_menu(self, restaurant_id: str) -> list[MenuItem]:
        self.calls.append(("GET", f"/restaurants/{restaurant_id}/menu"))
        gate = self.menu_gates.get(restaurant_id)
        if gate is not None:
            await gate.wait()
        if restaurant_id in self.menu_errors:
            raise self.menu_errors[restaurant_id]
        return list(self.menus.get(restaurant_id, []))

    async def place_order(self, order: OrderRequest) -> Decimal:
        self.calls.append(("POST", "/orders"))
        self.orders.append(order)
        if self.order_gate is not None:
            await self.order_gate.wait()
        if self.order_error is not None:
            raise self.order_error
        return self.order_total

    async def seed(self) -> None:
        self.calls.append(("POST", "/seed"))
        if self.seed_error is not None:
            raise self.seed_error

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def storefront(fake_client: FakeClient) -> Storefront:
    return Storefront(client=fake_client)

