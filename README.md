# pharmacy

A small menu-driven console program for running a pharmacy counter. It keeps
a stock of medicines (tablets and liquids) and lets you search and edit them.
It also builds a customer order, prints a receipt and takes the sold
quantities out of stock.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
pharmacy
pharmacy --data stock.txt
```

The program loads its stock from `data.bin` in the current directory. Use
`--data PATH` to name a different file. A missing file gives an empty stock.
The main menu offers these choices:

1. **Product Managing**
   - Add a tablet or liquid product.
   - Find a product by ID or by name, then change its quantity or price, or
     delete it.
2. **Product List** – show the whole stock. If products were added since the
   last sort, the stock is sorted by medicine name first.
3. **Order**
   - Add products to an order and delete order lines.
   - View the order and print the receipt.
   - Confirming that the bill is paid removes the sold quantities from stock.
0. **Exit** – answer `Y` to save the stock back to the data file, sorted by
   name if needed.

If the input ends, the program quits without saving.

When a product is added, its company and medicine names are stored in upper
case. The ID, quantity and price are stored as whole numbers without a sign,
because a leading `-` is dropped. IDs must be unique. Expiry dates are entered
as `DD/MM/YYYY` and must be real calendar dates between the years 1800 and
9999. Searching by name ignores the case of ASCII letters.

The data file is plain text. Each product takes nine lines, in this order:

1. name
2. company
3. ID
4. quantity
5. price
6. type
7. day
8. month
9. year

## Using it as a library

```python
from pharmacy.models import ExpiryDate, Medicine, MedicineType
from pharmacy.inventory import Inventory, save_inventory, load_inventory
from pharmacy.orders import Order
from pharmacy.display import format_receipt, format_stock_table

stock = Inventory()
stock.add(Medicine(company="ACME", name="ASPIRIN", quantity=50, item_id=1,
                   price=10, kind=MedicineType.TABLET,
                   expiry=ExpiryDate(1, 6, 2030)))

order = Order()
order.add(stock.find_by_id(1), 5)
print(format_receipt(order))
order.pay(stock)          # stock now holds 45 ASPIRIN
print(format_stock_table(stock))

save_inventory(stock, "data.bin")
stock = load_inventory("data.bin")
```

### Modules

- **`pharmacy.models`** – `Medicine`, `MedicineType` and `ExpiryDate`.
- **`pharmacy.inventory`**
  - `Inventory` has `add`, `has_id`, `find_by_id`, `find_by_name`, `remove`
    and `sort_by_name`.
  - `save_inventory` and `load_inventory` write and read the data file.
  - `DuplicateIdError` and `MedicineNotFoundError` report failed additions
    and lookups.
- **`pharmacy.orders`**
  - `Order` has `add`, `remove`, `total` and `pay`.
  - Each `OrderLine` holds a medicine snapshot, the quantity and the total
    price.
  - `OrderError` is raised for a duplicate product, a quantity that is not
    positive or is more than the stock holds, or a bad line index.
- **`pharmacy.display`** – `format_stock_table`, `format_order_table`,
  `format_order_summary` and `format_receipt` render plain-text tables.
- **`pharmacy.validation`**
  - `parse_int`, `parse_date`, `is_valid_date`, `is_leap` and
    `normalize_name` handle entered text.
  - They raise `InvalidInputError` on bad input.
- **`pharmacy.cli`**
  - `run(inventory, read, write)` drives the menus with any input and output
    functions. It returns whether the stock should be saved.
  - `main` is the `pharmacy` command.

## Limitations

- Orders exist only while the order menu is open. They are not saved.
- Nothing is kept of past sales other than the reduced stock quantities.