"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from quickbite.api import StorefrontClient
from quickbite.constant import EMPTY_CART, EMPTY_MENU, LOADING_RESTAURANTS, NO_RESTAURANTS
from quickbite.models import MenuItem, Restaurant
from quickbite.order_modal import OrderPlacedModal
from quickbite.rendering import (
    format_cart_line,
    format_menu_row,
    format_price,
    format_restaurant_header,
    format_restaurant_label,
    format_view_badge,
)
from quickbite.state import OrderPlaced, StorefrontState, ViewState, can_checkout
from quickbite.storefront import Storefront


class QuickBiteApp(App):
    """A Textual storefront for browsing restaurants and placing an order."""

    TITLE = "QuickBite"
    SUB_TITLE = "Restaurants / Menu / Cart"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #browse-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: auto;
        min-height: 3;
    }

    #browse-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-total {
        margin-top: 1;
        text-style: bold;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    browse_index = reactive(0)
    cart_index = reactive(None)

    BINDINGS = [
        ("tab", "cycle_browse(1)", "Next"),
        ("up", "cycle_browse(-1)", "Previous"),
        ("down", "cycle_browse(1)", "Next"),
        ("enter", "open_selected", "Open / Add"),
        ("escape", "back", "Back"),
        Binding("ctrl+s", "checkout", "Checkout", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, client: StorefrontClient | None = None) -> None:
        super().__init__()
        self.storefront = Storefront(client)
        self._restaurant_index = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="browse-pane"):
                yield Static(id="status-bar")
                yield Static(id="browse-list")
            with Vertical(id="cart-pane"):
                yield Static("Your Cart", classes="pane-title")
                yield Static(id="cart-from")
                yield Static(EMPTY_CART, id="cart-list")
                yield Static(id="cart-total")

    def on_mount(self) -> None:
        self.storefront.store.subscribe(self._on_state_change)
        self._refresh_all()
        self.run_worker(self.storefront.catalog.load(), group="catalog")

    async def on_unmount(self) -> None:
        await self.storefront.aclose()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, OrderPlacedModal):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key == "j":
            self._move_cart_selection(1)
        elif key == "k":
            self._move_cart_selection(-1)
        elif key == "d":
            self._remove_selected_line()
        elif key == "x":
            self._decrement_selected_line()
        elif key == "b":
            self.action_back()
        elif key == "s":
            self.run_worker(self.storefront.catalog.seed_and_reload(), group="catalog")
        elif key == "r":
            self.run_worker(self.storefront.catalog.load(), group="catalog")
        else:
            return
        event.stop()

    def action_cycle_browse(self, delta: int) -> None:
        if isinstance(self.screen, OrderPlacedModal):
            return

        rows = self._browse_rows()
        if not rows:
            self.browse_index = 0
            return
        self.browse_index = (self.browse_index + delta) % len(rows)
        self._refresh_browse()

    def action_open_selected(self) -> None:
        if isinstance(self.screen, OrderPlacedModal):
            return

        state = self.storefront.state
        rows = self._browse_rows()
        if not rows or not (0 <= self.browse_index < len(rows)):
            return

        row = rows[self.browse_index]
        if state.view is ViewState.BROWSING and isinstance(row, Restaurant):
            self._restaurant_index = self.browse_index
            self.browse_index = 0
            self.run_worker(self.storefront.viewport.select(row), group="menu")
            return

        if state.view is ViewState.VIEWING and isinstance(row, MenuItem):
            self.storefront.add_to_cart(row)
            self.cart_index = len(self.storefront.state.cart) - 1
            self._refresh_cart()

    def action_back(self) -> None:
        if isinstance(self.screen, OrderPlacedModal):
            return
        if self.storefront.state.view not in {ViewState.SELECTING, ViewState.VIEWING}:
            return

        self.storefront.viewport.back()
        self.browse_index = self._restaurant_index
        self._refresh_browse()

    def action_checkout(self) -> None:
        if isinstance(self.screen, OrderPlacedModal):
            return
        if not can_checkout(self.storefront.state):
            return
        self.run_worker(self._submit_order(), group="checkout")

    async def _submit_order(self) -> None:
        outcome = await self.storefront.checkout.submit()
        if isinstance(outcome, OrderPlaced):
            self.cart_index = None
            self.push_screen(OrderPlacedModal(outcome.total))

    def _on_state_change(self, state: StorefrontState) -> None:
        self._refresh_all()

    def _browse_rows(self) -> list[Restaurant] | list[MenuItem]:
        state = self.storefront.state
        if state.view is ViewState.BROWSING:
            return list(state.restaurants or ())
        if state.view is ViewState.VIEWING:
            return list(state.menu or ())
        return []

    def _refresh_all(self) -> None:
        self._refresh_status()
        self._refresh_browse()
        self._refresh_cart()

    def _move_cart_selection(self, delta: int) -> None:
        lines = self.storefront.state.cart.lines
        if not lines:
            return

        if self.cart_index is None:
            self.cart_index = 0 if delta > 0 else len(lines) - 1
        else:
            self.cart_index = (self.cart_index + delta) % len(lines)
        self._refresh_cart()

    def _selected_line_id(self) -> str | None:
        lines = self.storefront.state.cart.lines
        if self.cart_index is None or not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index].item_id

    def _remove_selected_line(self) -> None:
        item_id = self._selected_line_id()
        if item_id is None:
            return
        self.storefront.remove_from_cart(item_id)

    def _decrement_selected_line(self) -> None:
        item_id = self._selected_line_id()
        if item_id is None:
            return
        self.storefront.decrement_in_cart(item_id)

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _render_window(self, labels: list[Text], widget: Static, selected: int | None) -> Text:
        start, end = self._window_bounds(len(labels), self._visible_rows(widget), selected)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append("➤ " if idx == selected else "  ")
            lines.append_text(labels[idx])

        if end < len(labels):
            lines.append("\n⋮", style="dim")
        return lines

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        state = self.storefront.state
        text = format_view_badge(state.view)
        text.append(" ")
        if state.view is ViewState.LOADING:
            text.append(LOADING_RESTAURANTS)
        elif state.view is ViewState.ERROR:
            text.append(state.error or "", style="bold #ff6b6b")
            text.append("\nPress R to retry or S to load demo data.")
        elif state.view is ViewState.SELECTING and state.pending is not None:
            text.append(f"Loading menu for {state.pending.name}...")
        elif state.view is ViewState.VIEWING and state.active is not None:
            text.append_text(format_restaurant_header(state.active))
            text.append("\nEnter add item. Esc/B back. Ctrl+S checkout.", style="dim")
        else:
            text.append("Enter open restaurant. S demo data. R reload. Ctrl+Q quit.", style="dim")

        if state.banner:
            style = "bold #5fbf72" if state.banner.startswith("Order placed") else "bold #ff6b6b"
            text.append(f"\n{state.banner}", style=style)
        bar.update(text)

    def _refresh_browse(self) -> None:
        try:
            browse_widget = self.query_one("#browse-list", Static)
        except NoMatches:
            return

        state = self.storefront.state
        rows = self._browse_rows()
        if not rows:
            self.browse_index = 0
            if state.view is ViewState.BROWSING:
                browse_widget.update(NO_RESTAURANTS)
            elif state.view is ViewState.VIEWING:
                browse_widget.update(EMPTY_MENU)
            else:
                browse_widget.update("")
            return

        if self.browse_index >= len(rows):
            self.browse_index = len(rows) - 1

        if state.view is ViewState.BROWSING:
            labels = [format_restaurant_label(restaurant) for restaurant in rows]
        else:
            labels = [format_menu_row(item) for item in rows]
        browse_widget.update(self._render_window(labels, browse_widget, self.browse_index))

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
            from_widget = self.query_one("#cart-from", Static)
            total_widget = self.query_one("#cart-total", Static)
        except NoMatches:
            return

        state = self.storefront.state
        cart = state.cart
        restaurant = next((r for r in state.restaurants or () if r.id == cart.restaurant_id), None)
        from_widget.update(f"From: {restaurant.name}" if restaurant is not None else "")

        if not cart:
            self.cart_index = None
            cart_widget.update(EMPTY_CART)
            total_widget.update("")
            return

        if self.cart_index is not None and self.cart_index >= len(cart):
            self.cart_index = len(cart) - 1

        labels = [format_cart_line(line) for line in cart]
        cart_widget.update(self._render_window(labels, cart_widget, self.cart_index))

        total = Text(f"Total  {format_price(cart.total())}")
        if state.submitting:
            total.append("\nPlacing order...", style="dim")
        elif can_checkout(state):
            total.append("\nJ/K select, D remove, X one less, Ctrl+S checkout", style="dim")
        else:
            total.append("\nOpen this cart's restaurant to check out", style="dim")
        total_widget.update(total)
