"""Checkout: turns the cart into an order request and reconciles the result."""

from __future__ import annotations

from loguru import logger

from quickbite.api import StorefrontClient
from quickbite.cart import CartLedger
from quickbite.constant import GUEST_CUSTOMER, ORDER_SUBMIT_FAILED
from quickbite.errors import OrderSubmitError
from quickbite.models import OrderLine, OrderRequest, Restaurant
from quickbite.state import OrderFailed, OrderOutcome, OrderPlaced, SubmitStarted, can_checkout
from quickbite.store import Store


def build_order_request(restaurant: Restaurant, cart: CartLedger) -> OrderRequest:
    """Flatten the cart into an order for the given restaurant, as the guest customer."""
    return OrderRequest(
        restaurant_id=restaurant.id,
        customer_name=GUEST_CUSTOMER["customer_name"],
        address=GUEST_CUSTOMER["address"],
        phone=GUEST_CUSTOMER["phone"],
        items=tuple(
            OrderLine(menu_item_id=line.item_id, name=line.name, quantity=line.quantity, price=line.price)
            for line in cart
        ),
    )


class CheckoutCoordinator:
    def __init__(self, store: Store, client: StorefrontClient) -> None:
        self._store = store
        self._client = client

    async def submit(self) -> OrderOutcome | None:
        """
        Submit the cart for the active restaurant.

        Returns None without touching the network or the state when checkout is
        unavailable (no active restaurant, empty cart, cart scoped to another
        restaurant, or a submission already in flight). On success the submitted
        lines are settled out of the cart; on failure it is kept so the user can
        retry.
        """
        state = self._store.state
        if not can_checkout(state):
            logger.debug(
                "checkout unavailable active={} lines={} submitting={}",
                state.active.id if state.active else None,
                len(state.cart),
                state.submitting,
            )
            return None

        order = build_order_request(state.active, state.cart)
        self._store.dispatch(SubmitStarted())
        try:
            total = await self._client.place_order(order)
        except OrderSubmitError as exc:
            logger.warning("order submit failed restaurant={}: {}", order.restaurant_id, exc)
            outcome: OrderOutcome = OrderFailed(ORDER_SUBMIT_FAILED)
        else:
            logger.info("order placed restaurant={} lines={} total={}", order.restaurant_id, len(order.items), total)
            outcome = OrderPlaced(
                total=total,
                restaurant_id=order.restaurant_id,
                items=tuple((line.menu_item_id, line.quantity) for line in order.items),
            )

        self._store.dispatch(outcome)
        return outcome
