"""Menu viewport: moves between the restaurant list and one restaurant's menu."""

from __future__ import annotations

from loguru import logger

from quickbite.api import StorefrontClient
from quickbite.constant import MENU_LOAD_FAILED
from quickbite.errors import MenuLoadError
from quickbite.models import Restaurant
from quickbite.state import BackRequested, MenuFailed, MenuLoaded, SelectionStarted, ViewState
from quickbite.store import Store


class MenuViewport:
    def __init__(self, store: Store, client: StorefrontClient) -> None:
        self._store = store
        self._client = client

    async def select(self, restaurant: Restaurant) -> None:
        """
        Open a restaurant and fetch its menu.

        Each call takes a new selection token. When the fetch completes, the
        result is applied only if no later selection or back-navigation has
        happened in the meantime. A successful fetch clears the cart.
        """
        state = self._store.dispatch(SelectionStarted(restaurant))
        if state.view is not ViewState.SELECTING or state.pending is not restaurant:
            return
        token = state.select_token

        try:
            items = await self._client.get_menu(restaurant.id)
        except MenuLoadError as exc:
            logger.warning("menu load failed restaurant={} token={}: {}", restaurant.id, token, exc)
            self._store.dispatch(MenuFailed(token, MENU_LOAD_FAILED))
            return

        logger.info("menu loaded restaurant={} items={} token={}", restaurant.id, len(items), token)
        self._store.dispatch(MenuLoaded(token, tuple(items)))

    def back(self) -> None:
        self._store.dispatch(BackRequested())
