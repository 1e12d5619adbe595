"""HTTP client for the restaurant / menu / order service."""

from __future__ import annotations

from decimal import Decimal
from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from quickbite.config import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from quickbite.errors import CatalogLoadError, MenuLoadError, OrderSubmitError, SeedError
from quickbite.models import MenuItem, OrderRequest, Restaurant, parse_price

# Raised by malformed payloads while parsing responses.
_PAYLOAD_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class StorefrontClient:
    """
    Async client for the backend service.

    Every public method issues exactly one request and raises the typed
    ``StorefrontError`` subclass for its operation on any failure: transport
    errors, non-2xx statuses and malformed bodies alike.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, *, decode: bool = True, **kwargs: Any) -> Any:
        try:
            resp = await self._http.request(method, path, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("backend error [{} {}]: {}", method, path, exc)
            raise
        logger.debug("backend ok [{} {}] status={}", method, path, resp.status_code)
        if not decode or not resp.content:
            return None
        return resp.json()

    async def list_restaurants(self) -> list[Restaurant]:
        try:
            data = await self._request("GET", "/restaurants")
            return [Restaurant.from_json(raw) for raw in data]
        except (httpx.HTTPError, *_PAYLOAD_ERRORS) as exc:
            raise CatalogLoadError(str(exc) or type(exc).__name__) from exc

    async def get_menu(self, restaurant_id: str) -> list[MenuItem]:
        try:
            data = await self._request("GET", f"/restaurants/{quote(restaurant_id, safe='')}/menu")
            return [MenuItem.from_json(raw) for raw in data]
        except (httpx.HTTPError, *_PAYLOAD_ERRORS) as exc:
            raise MenuLoadError(str(exc) or type(exc).__name__) from exc

    async def place_order(self, order: OrderRequest) -> Decimal | None:
        """
        Submit an order and return the total the service computed.

        Only a transport error or a non-2xx status is a failed order. A 2xx
        whose body has no usable total means the order was accepted, so the
        total comes back as None rather than inviting a duplicate retry.
        """
        try:
            data = await self._request("POST", "/orders", json=order.to_payload())
        except httpx.HTTPError as exc:
            raise OrderSubmitError(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            logger.warning("order accepted but response is not JSON: {}", exc)
            return None

        try:
            return parse_price(data["total"])
        except _PAYLOAD_ERRORS as exc:
            logger.warning("order accepted but total unusable: {!r}", exc)
            return None

    async def seed(self) -> None:
        try:
            await self._request("POST", "/seed", decode=False)
        except httpx.HTTPError as exc:
            raise SeedError(str(exc) or type(exc).__name__) from exc
