"""A customer order built from stock items, and its payment."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .inventory import Inventory
from .models import Medicine


class OrderError(ValueError):
    """Raised when an order line cannot be added or removed."""


@dataclass(frozen=True)
class OrderLine:
    """One ordered product: a snapshot of the medicine, the amount and its cost."""

    medicine: Medicine
    quantity: int
    total_price: int

    def unit_price(self) -> int:
        """Return the price of a single unit on this line."""
        return self.total_price // self.quantity


class Order:
    """The lines of an order in the sequence they were added."""

    def __init__(self) -> None:
        self._lines: list[OrderLine] = []

    def __iter__(self) -> Iterator[OrderLine]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def has_id(self, item_id: int) -> bool:
        """Return True if a product with this ID is already on the order."""
        return any(line.medicine.item_id == item_id for line in self._lines)

    def add(self, medicine: Medicine, quantity: int) -> OrderLine:
        """Add a quantity of a stock medicine; stock is not touched until payment."""
        if self.has_id(medicine.item_id):
            raise OrderError(f"product already on the order: {medicine.item_id}")
        if quantity <= 0:
            raise OrderError(f"quantity must be positive: {quantity}")
        if quantity > medicine.quantity:
            raise OrderError(
                f"not enough quantity: {quantity} requested, {medicine.quantity} in stock"
            )
        line = OrderLine(
            medicine=medicine.with_quantity(quantity),
            quantity=quantity,
            total_price=quantity * medicine.price,
        )
        self._lines.append(line)
        return line

    def remove(self, index: int) -> OrderLine:
        """Remove and return the line at a zero-based position."""
        if not 0 <= index < len(self._lines):
            raise OrderError(f"no order line {index}")
        return self._lines.pop(index)

    def total(self) -> int:
        """Return the cost of the whole order."""
        return sum(line.total_price for line in self._lines)

    def pay(self, inventory: Inventory) -> int:
        """Take the ordered quantities out of stock, empty the order and return its total."""
        stock = [inventory.find_by_id(line.medicine.item_id) for line in self._lines]
        paid = self.total()
        for med, line in zip(stock, self._lines):
            med.quantity -= line.quantity
        self._lines.clear()
        return paid