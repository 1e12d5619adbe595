"""Restaurant catalog: the fetched restaurant list."""

from __future__ import annotations

from loguru import logger

from quickbite.api import StorefrontClient
from quickbite.constant import CATALOG_LOAD_FAILED
from quickbite.errors import CatalogLoadError, SeedError
from quickbite.state import CatalogFailed, CatalogLoaded, LoadStarted
from quickbite.store import Store


class RestaurantCatalog:
    def __init__(self, store: Store, client: StorefrontClient) -> None:
        self._store = store
        self._client = client

    async def load(self) -> None:
        """Fetch the restaurant list once and move to browsing, or to the error view."""
        self._store.dispatch(LoadStarted())
        try:
            restaurants = await self._client.list_restaurants()
        except CatalogLoadError as exc:
            logger.warning("catalog load failed: {}", exc)
            self._store.dispatch(CatalogFailed(CATALOG_LOAD_FAILED))
            return

        logger.info("catalog loaded restaurants={}", len(restaurants))
        self._store.dispatch(CatalogLoaded(tuple(restaurants)))

    async def seed_and_reload(self) -> None:
        """Ask the backend to seed demo data, then reload whatever the seed outcome."""
        try:
            await self._client.seed()
        except SeedError as exc:
            logger.warning("seed failed, reloading anyway: {}", exc)
        await self.load()
