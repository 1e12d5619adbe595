"""Single owner of the storefront state."""

from __future__ import annotations

from typing import Callable

from loguru import logger

from quickbite.state import Event, StorefrontState, reduce

Listener = Callable[[StorefrontState], None]


class Store:
    """Holds the current state, applies events, and notifies listeners on change."""

    def __init__(self, state: StorefrontState | None = None) -> None:
        self.state = state if state is not None else StorefrontState()
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def dispatch(self, event: Event) -> StorefrontState:
        previous = self.state
        self.state = reduce(previous, event)
        if self.state is previous:
            return self.state

        logger.debug(
            "dispatch event={} view={}->{} cart_lines={}",
            type(event).__name__,
            previous.view.value,
            self.state.view.value,
            len(self.state.cart),
        )
        for listener in list(self._listeners):
            listener(self.state)
        return self.state
