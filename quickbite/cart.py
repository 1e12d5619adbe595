"""Cart ledger: the lines of the order being assembled for one restaurant."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from quickbite.models import CartLine, MenuItem


@dataclass(frozen=True)
class CartLedger:
    """
    Ordered cart lines scoped to a single restaurant.

    Every operation returns a new ledger. At most one line exists per item id,
    and every line has a quantity of at least 1.
    """

    restaurant_id: str | None = None
    lines: tuple[CartLine, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for line in self.lines:
            if line.item_id in seen:
                raise ValueError(f"duplicate cart line for item {line.item_id!r}")
            if line.quantity < 1:
                raise ValueError(f"cart line {line.item_id!r} has quantity {line.quantity}")
            seen.add(line.item_id)

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)

    def __iter__(self):
        return iter(self.lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def get(self, item_id: str) -> CartLine | None:
        for line in self.lines:
            if line.item_id == item_id:
                return line
        return None

    def add(self, item: MenuItem) -> CartLedger:
        """Add one unit of item, bumping the existing line in place if present."""
        if self.get(item.id) is None:
            line = CartLine(item_id=item.id, name=item.name, price=item.price, quantity=1)
            return replace(self, lines=(*self.lines, line))

        lines = tuple(
            replace(line, quantity=line.quantity + 1) if line.item_id == item.id else line
            for line in self.lines
        )
        return replace(self, lines=lines)

    def remove(self, item_id: str) -> CartLedger:
        """Drop the whole line for item_id. Unknown ids leave the ledger unchanged."""
        if self.get(item_id) is None:
            return self
        return replace(self, lines=tuple(line for line in self.lines if line.item_id != item_id))

    def decrement(self, item_id: str) -> CartLedger:
        """Take one unit off a line, removing it when it would reach zero."""
        return self.deduct(item_id, 1)

    def deduct(self, item_id: str, quantity: int) -> CartLedger:
        """Take up to quantity units off a line, removing it when nothing is left."""
        line = self.get(item_id)
        if line is None or quantity <= 0:
            return self
        if line.quantity <= quantity:
            return self.remove(item_id)
        lines = tuple(
            replace(current, quantity=current.quantity - quantity) if current.item_id == item_id else current
            for current in self.lines
        )
        return replace(self, lines=lines)

    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0"))

    def clear(self) -> CartLedger:
        return replace(self, lines=())

    def scoped_to(self, restaurant_id: str) -> CartLedger:
        """Return an empty ledger for a newly selected restaurant."""
        return CartLedger(restaurant_id=restaurant_id)
