"""Wires the store, the backend client and the ordering components together."""

from __future__ import annotations

from quickbite.api import StorefrontClient
from quickbite.catalog import RestaurantCatalog
from quickbite.checkout import CheckoutCoordinator
from quickbite.models import MenuItem
from quickbite.state import ItemAdded, ItemDecremented, ItemRemoved, StorefrontState
from quickbite.store import Store
from quickbite.viewport import MenuViewport


class Storefront:
    """The single coordinating unit the GUI talks to."""

    def __init__(self, client: StorefrontClient | None = None, store: Store | None = None) -> None:
        self.client = client if client is not None else StorefrontClient()
        self.store = store if store is not None else Store()
        self.catalog = RestaurantCatalog(self.store, self.client)
        self.viewport = MenuViewport(self.store, self.client)
        self.checkout = CheckoutCoordinator(self.store, self.client)

    @property
    def state(self) -> StorefrontState:
        return self.store.state

    def add_to_cart(self, item: MenuItem) -> None:
        self.store.dispatch(ItemAdded(item))

    def remove_from_cart(self, item_id: str) -> None:
        self.store.dispatch(ItemRemoved(item_id))

    def decrement_in_cart(self, item_id: str) -> None:
        self.store.dispatch(ItemDecremented(item_id))

    async def aclose(self) -> None:
        await self.client.aclose()
