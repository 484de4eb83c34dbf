"""Interactive menus for managing stock and taking orders."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

from .display import (
    format_order_summary,
    format_order_table,
    format_receipt,
    format_stock_table,
)
from .inventory import (
    Inventory,
    MedicineNotFoundError,
    load_inventory,
    save_inventory,
)
from .models import ExpiryDate, Medicine, MedicineType
from .orders import Order, OrderError
from .validation import InvalidInputError, normalize_name, parse_date, parse_int

Reader = Callable[[str], str]
Writer = Callable[[str], None]

TITLE = "Pharamacy Management System"


class _Session:
    def __init__(self, inventory: Inventory, read: Reader, write: Writer) -> None:
        self.inventory = inventory
        self.read = read
        self.write = write
        self.needs_sort = False

    def _choice(self, prompt: str = "Select Option: ") -> str:
        return self.read(prompt).strip()

    def _menu(self, *entries: str) -> None:
        for entry in entries:
            self.write(entry)

    def _pause(self) -> None:
        self.read("Press Enter to continue...")

    def _ask_int(self, prompt: str) -> int:
        while True:
            try:
                return parse_int(self.read(prompt).strip())
            except InvalidInputError:
                self.write("Not Valid Input, Retry...")

    def _ask_date(self) -> ExpiryDate:
        while True:
            try:
                return parse_date(self.read("Enter Date (DD/MM/YYYY): ").strip())
            except InvalidInputError:
                self.write("Invalid Date")

    def _sort_if_needed(self) -> None:
        if self.needs_sort:
            self.inventory.sort_by_name()
            self.needs_sort = False

    def loop(self) -> bool:
        while True:
            self.write(TITLE)
            self._menu("1. Product Managing", "2. Product List", "3. Order", "0. Exit")
            choice = self._choice()
            if choice == "1":
                self._manage()
            elif choice == "2":
                self._sort_if_needed()
                self.write(format_stock_table(self.inventory))
                self._pause()
            elif choice == "3":
                self._order_menu()
            elif choice == "0":
                answer = self.read("Save Record (Y/N): ").strip()
                if answer[:1] in ("Y", "y"):
                    self._sort_if_needed()
                    return True
                return False
            else:
                self.write("Wrong Input, Please Try Again")

    def _manage(self) -> None:
        self._menu("1. Add Product", "2. Search/Edit Product", "0. Back To Main Menu")
        choice = self._choice()
        if choice == "1":
            self._menu("1. Tablet", "2. Liquid", "0. Back To Main Menu")
            kind_choice = self._choice()
            if kind_choice == "1":
                self._entry(MedicineType.TABLET)
            elif kind_choice == "2":
                self._entry(MedicineType.LIQUID)
            elif kind_choice != "0":
                self.write("Wrong Input, Back to Main Menu...")
        elif choice == "2":
            found = self._search("Main Menu")
            if found is not None:
                self.write(format_stock_table([found]))
                self._edit(found)
        elif choice != "0":
            self.write("Wrong Input, Back to Main Menu...")

    def _entry(self, kind: MedicineType) -> None:
        company = self.read("Enter Company Name: ")
        name = self.read("Enter Medicine Name: ")
        while True:
            item_id = abs(self._ask_int("Enter ID: "))
            if not self.inventory.has_id(item_id):
                break
            self.write("Error : ID Already Exists")
        quantity = abs(self._ask_int("Enter Quantity: "))
        price = abs(self._ask_int("Price: "))
        expiry = self._ask_date()
        self.inventory.add(
            Medicine(
                company=normalize_name(company),
                name=normalize_name(name),
                quantity=quantity,
                item_id=item_id,
                price=price,
                kind=kind,
                expiry=expiry,
            )
        )
        self.needs_sort = True

    def _search(self, back_to: str) -> Medicine | None:
        self._menu(
            "1. Search by ID: ",
            "2. Search by Medicine Name: ",
            f"0. Back To {back_to}",
        )
        choice = self._choice()
        if choice == "1":
            item_id = self._ask_int("Enter ID You Wanna Search: ")
            try:
                return self.inventory.find_by_id(item_id)
            except MedicineNotFoundError:
                self.write("No Medicine With Given ID was found....")
        elif choice == "2":
            name = self.read("Enter Medicine Name You Wanna Search: ")
            try:
                return self.inventory.find_by_name(name)
            except MedicineNotFoundError:
                self.write("No Medicine With Given Name was Found.....")
        elif choice != "0":
            self.write(f"Wrong Input, Back to {back_to}...")
        return None

    def _edit(self, med: Medicine) -> None:
        self._menu(
            "1. Edit Quantity",
            "2. Edit Price",
            "3. Delete Product",
            "0. Back To Main Menu",
        )
        choice = self._choice()
        if choice == "1":
            med.quantity = self._ask_int("Change Quantity: ")
        elif choice == "2":
            med.price = self._ask_int("Change Price: ")
        elif choice == "3":
            self.inventory.remove(med.item_id)
        elif choice != "0":
            self.write("Wrong Input, Back to Main Menu...")

    def _order_menu(self) -> None:
        order = Order()
        while True:
            self._menu(
                "1. Add Order",
                "2. Delete Order",
                "3. Order List",
                "4. Recipt",
                "0. Back to Main Menu",
            )
            summary = format_order_summary(order)
            if summary:
                self.write(summary)
            choice = self._choice("Selection Option: ")
            if choice == "1":
                self._take_order(order)
            elif choice == "2":
                self._delete_order(order)
            elif choice == "3":
                self.write(format_order_table(order))
                self._pause()
            elif choice == "4":
                self._receipt(order)
            elif choice == "0":
                return
            else:
                self.write("Wrong Input, Back to Order Menu...")

    def _take_order(self, order: Order) -> None:
        found = self._search("Order Menu")
        if found is None:
            return
        if order.has_id(found.item_id):
            self.write("Product Already Exist")
            return
        self.write(format_stock_table([found]))
        while True:
            quantity = abs(self._ask_int("Enter Quantity: "))
            if quantity == 0:
                return
            try:
                order.add(found, quantity)
            except OrderError:
                self.write("Not Enough Quantity, Retry..")
            else:
                return

    def _delete_order(self, order: Order) -> None:
        if not order:
            self.write("Order Menu Is Empty")
            return
        self.write(format_order_summary(order))
        index = abs(self._ask_int("Enter S#: "))
        if index >= len(order):
            self.write("No Entry Found")
            return
        if self.read("Confirm Y/N: ").strip()[:1] in ("Y", "y"):
            order.remove(index)

    def _receipt(self, order: Order) -> None:
        self.write(format_receipt(order))
        if self.read("Bill Paid (Y/N): ").strip() in ("Y", "y"):
            order.pay(self.inventory)
        else:
            self.write("Back to Order Menu...")


def run(inventory: Inventory, read: Reader, write: Writer) -> bool:
    """Drive the menus until the user exits; return True if the stock should be saved."""
    try:
        return _Session(inventory, read, write).loop()
    except EOFError:
        return False


def main(argv: list[str] | None = None) -> int:
    """Load the stock file, run the menus and save on request."""
    parser = argparse.ArgumentParser(prog="pharmacy", description=TITLE)
    parser.add_argument(
        "--data", type=Path, default=Path("data.bin"), help="stock file to load and save"
    )
    args = parser.parse_args(argv)
    inventory = load_inventory(args.data)
    if run(inventory, input, print):
        save_inventory(inventory, args.data)
    return 0