from pharmacy.display import (
    format_order_summary,
    format_order_table,
    format_receipt,
    format_stock_table,
)
from pharmacy.models import ExpiryDate, Medicine, MedicineType
from pharmacy.orders import Order


def _med(item_id=1, name="ASPIRIN", company="ACME", quantity=10, price=7):
    return Medicine(
        company=company,
        name=name,
        quantity=quantity,
        item_id=item_id,
        price=price,
        kind=MedicineType.LIQUID,
        expiry=ExpiryDate(3, 4, 2030),
    )


def test_empty_stock_table():
    assert format_stock_table([]) == "No Entry Found"


def test_stock_table_row_contents():
    lines = format_stock_table([_med()]).splitlines()
    assert "Company Name" in lines[0]
    assert lines[1] == ""
    row = lines[2]
    assert row.startswith("ASPIRIN")
    assert row.index("ACME") == 20
    assert row.index("Rs.7") == 50
    assert "LIQUID" in row
    assert row.endswith("3/4/2030")


def test_stock_table_one_row_per_medicine():
    meds = [_med(1, "A"), _med(2, "B"), _med(3, "C")]
    lines = format_stock_table(meds).splitlines()
    assert [line.split()[0] for line in lines[2:]] == ["A", "B", "C"]


def test_long_name_still_separated():
    row = format_stock_table([_med(name="X" * 25)]).splitlines()[2]
    assert row.startswith("X" * 25 + " ACME")


def test_empty_order_views():
    order = Order()
    assert format_order_table(order) == "No Entry Found"
    assert format_order_summary(order) == ""


def test_order_table_prices():
    order = Order()
    line = order.add(_med(price=7), 3)
    row = format_order_table(order).splitlines()[2]
    assert f"Rs.{line.unit_price()}" in row
    assert row.endswith(f"Rs.{line.total_price}")


def test_order_summary_numbers_lines_from_zero():
    order = Order()
    order.add(_med(1, "A"), 1)
    order.add(_med(2, "B"), 1)
    rows = format_order_summary(order).splitlines()[2:]
    assert [row.split()[:2] for row in rows] == [["0", "A"], ["1", "B"]]


def test_receipt_ends_with_total():
    order = Order()
    order.add(_med(1, price=7), 2)
    order.add(_med(2, price=3), 1)
    lines = format_receipt(order).splitlines()
    assert "_" * 120 in lines
    total = f"Rs.{order.total()}"
    assert lines[-1].strip() == total
    assert lines[-1].index(total) == 103