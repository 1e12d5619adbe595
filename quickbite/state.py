"""View state container and the pure transition function that drives it."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum

from loguru import logger

from quickbite.cart import CartLedger
from quickbite.models import MenuItem, Restaurant


class ViewState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    BROWSING = "browsing"
    SELECTING = "selecting"
    VIEWING = "viewing"


@dataclass(frozen=True)
class StorefrontState:
    """Everything the storefront shows, in one immutable value."""

    view: ViewState = ViewState.LOADING
    error: str | None = None
    banner: str | None = None
    restaurants: tuple[Restaurant, ...] | None = None
    pending: Restaurant | None = None
    active: Restaurant | None = None
    menu: tuple[MenuItem, ...] | None = None
    cart: CartLedger = field(default_factory=CartLedger)
    select_token: int = 0
    submitting: bool = False


@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class CatalogLoaded:
    restaurants: tuple[Restaurant, ...]


@dataclass(frozen=True)
class CatalogFailed:
    message: str


@dataclass(frozen=True)
class SelectionStarted:
    restaurant: Restaurant


@dataclass(frozen=True)
class MenuLoaded:
    token: int
    items: tuple[MenuItem, ...]


@dataclass(frozen=True)
class MenuFailed:
    token: int
    message: str


@dataclass(frozen=True)
class BackRequested:
    pass


@dataclass(frozen=True)
class ItemAdded:
    item: MenuItem


@dataclass(frozen=True)
class ItemRemoved:
    item_id: str


@dataclass(frozen=True)
class ItemDecremented:
    item_id: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class OrderPlaced:
    """
    The service accepted the order.

    total is what the service charged, or None when the acceptance carried no
    usable total. restaurant_id and items describe what was submitted, so the
    acknowledgment settles only those lines.
    """

    total: Decimal | None
    restaurant_id: str
    items: tuple[tuple[str, int], ...]


@dataclass(frozen=True)
class OrderFailed:
    reason: str


OrderOutcome = OrderPlaced | OrderFailed

Event = (
    LoadStarted
    | CatalogLoaded
    | CatalogFailed
    | SelectionStarted
    | MenuLoaded
    | MenuFailed
    | BackRequested
    | ItemAdded
    | ItemRemoved
    | ItemDecremented
    | SubmitStarted
    | OrderPlaced
    | OrderFailed
)

_SELECTABLE_VIEWS = {ViewState.BROWSING, ViewState.SELECTING, ViewState.VIEWING}


def order_placed_banner(total: Decimal | None) -> str:
    if total is None:
        return "Order placed!"
    return f"Order placed! Total: ${total:.2f}"


def can_checkout(state: StorefrontState) -> bool:
    """Checkout needs an active restaurant, a non-empty cart scoped to it, and nothing in flight."""
    if state.active is None or not state.cart or state.submitting:
        return False
    return state.cart.restaurant_id == state.active.id


def reduce(state: StorefrontState, event: Event) -> StorefrontState:
    """
    Apply one event to the state.

    Events that are not legal in the current view return the same state object,
    so callers can detect a no-op with an identity check.
    """
    if isinstance(event, LoadStarted):
        if state.view is ViewState.LOADING and state.error is None and state.banner is None:
            return state
        return replace(state, view=ViewState.LOADING, error=None, banner=None)

    if isinstance(event, CatalogLoaded):
        return replace(
            state,
            view=ViewState.BROWSING,
            error=None,
            restaurants=tuple(event.restaurants),
            pending=None,
            active=None,
            menu=None,
        )

    if isinstance(event, CatalogFailed):
        return replace(state, view=ViewState.ERROR, error=event.message, pending=None, active=None, menu=None)

    if isinstance(event, SelectionStarted):
        if state.view not in _SELECTABLE_VIEWS:
            logger.debug("select ignored view={} restaurant={}", state.view.value, event.restaurant.id)
            return state
        return replace(
            state,
            view=ViewState.SELECTING,
            banner=None,
            pending=event.restaurant,
            select_token=state.select_token + 1,
        )

    if isinstance(event, (MenuLoaded, MenuFailed)):
        if state.view is not ViewState.SELECTING or event.token != state.select_token:
            logger.debug("stale menu result discarded token={} latest={}", event.token, state.select_token)
            return state
        restaurant = state.pending
        if isinstance(event, MenuFailed):
            # The cart keeps its own scope, so a cart from another restaurant cannot be checked out here.
            return replace(
                state,
                view=ViewState.VIEWING,
                banner=event.message,
                pending=None,
                active=restaurant,
                menu=(),
            )
        return replace(
            state,
            view=ViewState.VIEWING,
            pending=None,
            active=restaurant,
            menu=tuple(event.items),
            cart=state.cart.scoped_to(restaurant.id),
        )

    if isinstance(event, BackRequested):
        if state.view not in {ViewState.SELECTING, ViewState.VIEWING}:
            return state
        # The cart survives back-navigation; only a successful new selection clears it.
        return replace(state, view=ViewState.BROWSING, banner=None, pending=None, active=None, menu=None)

    if isinstance(event, ItemAdded):
        if state.view is not ViewState.VIEWING or state.active is None:
            return state
        if state.cart.restaurant_id != state.active.id:
            return state
        if not any(item.id == event.item.id for item in state.menu or ()):
            logger.debug("add ignored item={} not on menu of {}", event.item.id, state.active.id)
            return state
        return replace(state, cart=state.cart.add(event.item))

    if isinstance(event, ItemRemoved):
        cart = state.cart.remove(event.item_id)
        return state if cart is state.cart else replace(state, cart=cart)

    if isinstance(event, ItemDecremented):
        cart = state.cart.decrement(event.item_id)
        return state if cart is state.cart else replace(state, cart=cart)

    if isinstance(event, SubmitStarted):
        return replace(state, submitting=True, banner=None)

    if isinstance(event, OrderPlaced):
        cart = state.cart
        # Lines added after submission, or a cart for another restaurant, stay put.
        if cart.restaurant_id == event.restaurant_id:
            for item_id, quantity in event.items:
                cart = cart.deduct(item_id, quantity)
        return replace(state, submitting=False, cart=cart, banner=order_placed_banner(event.total))

    if isinstance(event, OrderFailed):
        return replace(state, submitting=False, banner=event.reason)

    raise TypeError(f"unknown event: {event!r}")
