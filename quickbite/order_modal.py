"""Order placed acknowledgment modal."""

from __future__ import annotations

from decimal import Decimal

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from quickbite.rendering import format_price


class OrderPlacedModal(ModalScreen[None]):
    """Blocks the storefront until the user acknowledges the placed order."""

    BINDINGS = [
        ("enter", "close", "Close"),
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
    ]

    CSS = """
    OrderPlacedModal {
        align: center middle;
        background: $background 60%;
    }

    #order-placed-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #order-placed-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #order-placed-total {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #order-placed-help {
        color: #dddddd;
    }
    """

    def __init__(self, total: Decimal | None) -> None:
        super().__init__()
        self.total = total

    def compose(self) -> ComposeResult:
        with Container(id="order-placed-dialog"):
            yield Static("Order placed!", id="order-placed-title")
            shown = format_price(self.total) if self.total is not None else "confirmed, amount not reported"
            yield Static(f"Total: {shown}", id="order-placed-total")
            yield Static("Enter / Esc / q to close.", id="order-placed-help")

    def action_close(self) -> None:
        self.dismiss(None)
