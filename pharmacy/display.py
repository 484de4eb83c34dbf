"""Plain-text tables for stock listings, orders and receipts."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Medicine
from .orders import Order

NO_ENTRY = "No Entry Found"
RECEIPT_RULE = "_" * 120
RECEIPT_TOTAL_COLUMN = 103

_STOCK_HEADER = (
    (0, "Medicine Name"),
    (20, "Company Name"),
    (40, "ID"),
    (50, "Price"),
    (65, "Quantity"),
    (80, "Type"),
    (95, "Expiry Date"),
)

_ORDER_HEADER = (
    (0, "Medicine Name"),
    (20, "Company Name"),
    (40, "ID"),
    (50, "Expiry Date"),
    (66, "Quantity"),
    (79, "Type"),
    (90, "Price"),
    (103, "Total Price"),
)

_SUMMARY_HEADER = (
    (0, "S#"),
    (5, "Medicine"),
    (25, "Price/1"),
    (37, "Quantity"),
    (49, "Total Price"),
)


def _row(cells: Iterable[tuple[int, str]]) -> str:
    line = ""
    for column, text in cells:
        if line and len(line) >= column:
            line += " "
        else:
            line = line.ljust(column)
        line += text
    return line.rstrip()


def _table(header: tuple[tuple[int, str], ...], rows: list[list[str]]) -> str:
    columns = [column for column, _ in header]
    lines = [_row(header), ""]
    lines.extend(_row(zip(columns, row)) for row in rows)
    return "\n".join(lines)


def format_stock_table(medicines: Iterable[Medicine]) -> str:
    """Render medicines as a stock table, or a notice when there are none."""
    rows = [
        [
            med.name,
            med.company,
            str(med.item_id),
            f"Rs.{med.price}",
            str(med.quantity),
            med.kind.value,
            str(med.expiry),
        ]
        for med in medicines
    ]
    if not rows:
        return NO_ENTRY
    return _table(_STOCK_HEADER, rows)


def format_order_table(order: Order) -> str:
    """Render every order line with unit and total prices."""
    rows = [
        [
            line.medicine.name,
            line.medicine.company,
            str(line.medicine.item_id),
            str(line.medicine.expiry),
            str(line.quantity),
            line.medicine.kind.value,
            f"Rs.{line.unit_price()}",
            f"Rs.{line.total_price}",
        ]
        for line in order
    ]
    if not rows:
        return NO_ENTRY
    return _table(_ORDER_HEADER, rows)


def format_order_summary(order: Order) -> str:
    """Render a short numbered list of order lines; empty when the order is."""
    rows = [
        [
            str(index),
            line.medicine.name,
            f"Rs.{line.unit_price()}",
            str(line.quantity),
            f"Rs.{line.total_price}",
        ]
        for index, line in enumerate(order)
    ]
    if not rows:
        return ""
    return _table(_SUMMARY_HEADER, rows)


def format_receipt(order: Order) -> str:
    """Render the order table followed by a rule and the grand total."""
    return "\n".join(
        [
            format_order_table(order),
            RECEIPT_RULE,
            "",
            _row([(RECEIPT_TOTAL_COLUMN, f"Rs.{order.total()}")]),
        ]
    )