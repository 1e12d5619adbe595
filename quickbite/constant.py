"""Editable static strings and placeholder order fields."""

from __future__ import annotations

# Identity and payment collection are out of scope; every order goes out as this guest.
GUEST_CUSTOMER: dict[str, str] = {
    "customer_name": "Guest",
    "address": "123 Main St",
    "phone": "555-1234",
}

CATALOG_LOAD_FAILED = "Failed to load restaurants"
MENU_LOAD_FAILED = "Failed to load menu"
ORDER_SUBMIT_FAILED = "Failed to place order"

LOADING_RESTAURANTS = "Loading restaurants..."
NO_RESTAURANTS = 'No restaurants yet. Press S to load demo data.'
EMPTY_CART = "No items yet"
EMPTY_MENU = "(no menu items)"

VIEW_STATE_LABELS: dict[str, str] = {
    "loading": "LOADING",
    "error": "ERROR",
    "browsing": "BROWSE",
    "selecting": "MENU...",
    "viewing": "MENU",
}
