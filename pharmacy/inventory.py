"""The stock of medicines, with lookup, editing and file persistence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from .models import ExpiryDate, Medicine, MedicineType
from .validation import normalize_name

_FIELDS_PER_RECORD = 9


class DuplicateIdError(ValueError):
    """Raised when adding a medicine whose ID is already in stock."""


class MedicineNotFoundError(LookupError):
    """Raised when no medicine matches a lookup."""


class Inventory:
    """An ordered collection of medicines keyed by their unique IDs."""

    def __init__(self, items: Iterable[Medicine] | None = None) -> None:
        self._items: list[Medicine] = list(items or ())

    def __iter__(self) -> Iterator[Medicine]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def has_id(self, item_id: int) -> bool:
        """Return True if a medicine with this ID is in stock."""
        return any(med.item_id == item_id for med in self._items)

    def add(self, medicine: Medicine) -> None:
        """Add a medicine, refusing a duplicate ID."""
        if self.has_id(medicine.item_id):
            raise DuplicateIdError(f"ID already exists: {medicine.item_id}")
        self._items.append(medicine)

    def find_by_id(self, item_id: int) -> Medicine:
        """Return the medicine with the given ID."""
        for med in self._items:
            if med.item_id == item_id:
                return med
        raise MedicineNotFoundError(f"no medicine with ID {item_id}")

    def find_by_name(self, name: str) -> Medicine:
        """Return the first medicine whose name matches, ignoring ASCII case."""
        wanted = normalize_name(name)
        for med in self._items:
            if med.name == wanted:
                return med
        raise MedicineNotFoundError(f"no medicine named {name!r}")

    def remove(self, item_id: int) -> Medicine:
        """Remove and return the medicine with the given ID."""
        med = self.find_by_id(item_id)
        self._items.remove(med)
        return med

    def sort_by_name(self) -> None:
        """Order the stock by medicine name."""
        self._items.sort(key=lambda med: med.name)


def save_inventory(inventory: Inventory, path: str | PathLike[str]) -> None:
    """Write the stock to a text file, one field per line."""
    lines: list[str] = []
    for med in inventory:
        lines.extend(
            [
                med.name,
                med.company,
                str(med.item_id),
                str(med.quantity),
                str(med.price),
                med.kind.value,
                str(med.expiry.day),
                str(med.expiry.month),
                str(med.expiry.year),
            ]
        )
    Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")


def load_inventory(path: str | PathLike[str]) -> Inventory:
    """Read stock written by save_inventory; a missing file gives empty stock."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return Inventory()
    lines = text.splitlines()
    if len(lines) % _FIELDS_PER_RECORD:
        raise ValueError(f"truncated inventory file: {path}")
    items = []
    for start in range(0, len(lines), _FIELDS_PER_RECORD):
        name, company, item_id, quantity, price, kind, day, month, year = lines[
            start : start + _FIELDS_PER_RECORD
        ]
        items.append(
            Medicine(
                company=company,
                name=name,
                quantity=int(quantity),
                item_id=int(item_id),
                price=int(price),
                kind=MedicineType.TABLET if kind == "TABLET" else MedicineType.LIQUID,
                expiry=ExpiryDate(int(day), int(month), int(year)),
            )
        )
    return Inventory(items)