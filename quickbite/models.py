"""Domain models for the storefront client."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any


def _wire_id(raw: dict[str, Any]) -> str:
    # The service is Mongo-backed and sends `_id`; plain `id` is accepted too.
    value = raw.get("_id", raw.get("id"))
    if value is None or value == "":
        raise KeyError("_id")
    return str(value)


def parse_price(value: Any) -> Decimal:
    """Parse a wire price into a non-negative Decimal."""
    if isinstance(value, bool):
        raise ValueError(f"invalid price: {value!r}")
    try:
        price = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"invalid price: {value!r}") from exc
    if not price.is_finite() or price < 0:
        raise ValueError(f"invalid price: {value!r}")
    return price


@dataclass(frozen=True)
class Restaurant:
    """A restaurant listed by the backend."""

    id: str
    name: str
    cuisine: str = ""
    rating: float = 0.0
    delivery_time_min: int = 0
    description: str | None = None
    image: str | None = None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> Restaurant:
        return cls(
            id=_wire_id(raw),
            name=str(raw["name"]),
            cuisine=str(raw.get("cuisine") or ""),
            rating=float(raw.get("rating") or 0),
            delivery_time_min=int(raw.get("delivery_time_min") or 0),
            description=raw.get("description") or None,
            image=raw.get("image") or None,
        )


@dataclass(frozen=True)
class MenuItem:
    """An orderable item on one restaurant's menu."""

    id: str
    name: str
    price: Decimal
    description: str | None = None
    image: str | None = None
    restaurant_id: str | None = None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> MenuItem:
        restaurant_id = raw.get("restaurant_id")
        return cls(
            id=_wire_id(raw),
            name=str(raw["name"]),
            price=parse_price(raw["price"]),
            description=raw.get("description") or None,
            image=raw.get("image") or None,
            restaurant_id=str(restaurant_id) if restaurant_id is not None else None,
        )


@dataclass(frozen=True)
class CartLine:
    """A menu item in the cart, with the price captured when it was added."""

    item_id: str
    name: str
    price: Decimal
    quantity: int = 1

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class OrderLine:
    menu_item_id: str
    name: str
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class OrderRequest:
    """The body sent to POST /orders."""

    restaurant_id: str
    customer_name: str
    address: str
    phone: str
    items: tuple[OrderLine, ...]

    def to_payload(self) -> dict[str, Any]:
        return {
            "restaurant_id": self.restaurant_id,
            "customer_name": self.customer_name,
            "address": self.address,
            "phone": self.phone,
            "items": [
                {
                    "menu_item_id": line.menu_item_id,
                    "name": line.name,
                    "quantity": line.quantity,
                    # JSON has no decimal type; the service expects a number.
                    "price": float(line.price),
                }
                for line in self.items
            ],
        }
