"""Rendering helpers for restaurants, menu rows and cart lines."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from quickbite.constant import VIEW_STATE_LABELS
from quickbite.models import CartLine, MenuItem, Restaurant
from quickbite.state import ViewState


def badge_style(view: ViewState) -> str:
    """Return a consistent badge style for the current view."""
    if view is ViewState.ERROR:
        return "bold #ffffff on #b23a48"
    if view in {ViewState.LOADING, ViewState.SELECTING}:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_view_badge(view: ViewState) -> Text:
    text = Text()
    text.append(f" {VIEW_STATE_LABELS[view.value]} ", style=badge_style(view))
    return text


def format_price(amount: Decimal) -> str:
    return f"${amount:.2f}"


def format_restaurant_label(restaurant: Restaurant) -> Text:
    """Render name, rating badge and cuisine / delivery time on one line."""
    text = Text()
    text.append(restaurant.name, style="bold")
    text.append(" ")
    text.append(f"★ {restaurant.rating:g}", style="#0b1f0f on #c8e6c9")
    text.append(f"  {restaurant.cuisine} • {restaurant.delivery_time_min} min", style="dim")
    return text


def format_restaurant_header(restaurant: Restaurant) -> Text:
    text = Text()
    text.append(restaurant.name, style="bold")
    text.append(f"\n{restaurant.cuisine} • ★ {restaurant.rating:g} • {restaurant.delivery_time_min} min", style="dim")
    if restaurant.description:
        text.append(f"\n{restaurant.description}")
    return text


def format_menu_row(item: MenuItem) -> Text:
    text = Text()
    text.append(item.name)
    text.append(f"  {format_price(item.price)}", style="bold")
    if item.description:
        text.append(f"  {item.description}", style="dim")
    return text


def format_cart_line(line: CartLine) -> Text:
    text = Text()
    text.append(line.name)
    text.append(f"  {format_price(line.price)} × {line.quantity}", style="dim")
    return text
