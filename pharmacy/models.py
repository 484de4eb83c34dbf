"""Core data types for medicines held in stock or placed on an order."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class MedicineType(str, Enum):
    """The form a medicine is dispensed in."""

    TABLET = "TABLET"
    LIQUID = "LIQUID"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExpiryDate:
    """A calendar date, shown as day/month/year without padding."""

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass
class Medicine:
    """A medicine product with its stock quantity and unit price."""

    company: str
    name: str
    quantity: int
    item_id: int
    price: int
    kind: MedicineType
    expiry: ExpiryDate

    def with_quantity(self, quantity: int) -> Medicine:
        """Return a copy of this medicine holding a different quantity."""
        return dataclasses.replace(self, quantity=quantity)