# cinemadesk

A small console tool for keeping a cinema's records in plain text files:

- **Show schedule** (`LichChieu.txt`): show time, film title and ticket price.
- **Staff** (`NhanVien.txt`): ID card number, name and salary.
- **Customers** (`KhachHang.txt`): phone number, name and gender.

Each record list can be searched, extended, edited and shown. Every change is
written back to its file at once. A missing file is treated as an empty list.
Files are read and written as UTF-8.

## Installation

```
pip install .
```

## Running

```
cinemadesk
cinemadesk --data-dir /path/to/records
```

The main menu offers:

- `a`: the show schedule
- `d`: staff
- `e`: customers
- `0`: quit

Any other entry prints an error and shows the main menu again. The program
also stops when its input ends.

Picking a section shows that section's menu once: `1` search, `2` add,
`3` delete, `4` edit, `5` show all. Any other entry goes back to the main
menu. After one action you are back at the main menu.

The data files live in the directory given by `--data-dir`, which defaults
to the current directory.

## Validation rules

- Phone numbers have ten digits and start with `0`.
- Gender is one of `Nam`, `Nu` or `Khac`.
- Show times have the form `hh:mm-dd/mm/yyyy` and must name a real time and
  date. Leap years count.
- Ticket prices are positive whole numbers written without a leading zero.
- ID card numbers have exactly twelve digits.
- Salaries are whole numbers written without a leading zero. A plain `0` is
  allowed.

A search matches records where any one field equals the search text exactly.

## Library use

Each section is also a class that can be used from Python:

- `cinemadesk.customers.CustomerBook`, holding `Customer` records
- `cinemadesk.schedules.Schedule`, holding `Showing` records
- `cinemadesk.staff.StaffRoster`, holding `Employee` records

Each one takes the file path, loads it at once, and offers `add`, `remove`,
`update`, `search`, `load`, `save`, iteration and `len()`.

```python
from cinemadesk.customers import CustomerBook, DuplicateCustomerError

book = CustomerBook("KhachHang.txt")
try:
    book.add("0000000001", "An", "Nam")
except DuplicateCustomerError:
    pass
for customer in book.search("Nam"):
    print(customer)
```

A failed operation raises an error instead of printing a message. Each
module has a base error class (`CustomerError`, `ScheduleError`,
`StaffError`) and, under it, errors for bad input (`InvalidCustomerError`,
`InvalidShowingError`, `InvalidEmployeeError`, also `ValueError`s),
duplicates (`DuplicateCustomerError`, `DuplicateShowingError`,
`DuplicateEmployeeError`) and missing records (`CustomerNotFoundError`,
`ShowingNotFoundError`, `EmployeeNotFoundError`, also `LookupError`s).
`CustomerBook.update` with an unchanged phone number for a customer that does
not exist changes nothing and returns `None`.

The text format can be handled directly with `parse_customers` /
`format_customers`, `parse_showings` / `format_showings` and
`parse_employees` / `format_employees`. The validators (`is_valid_phone`,
`is_valid_gender`, `is_valid_show_time`, `is_valid_price`, `is_leap_year`,
`is_valid_id_number`, `is_valid_salary`) are public as well.

The menus can be driven with any text streams: `run(data_dir, stdin, stdout)`
in `cinemadesk.app`, and `manage_customers`, `manage_schedule` and
`manage_staff` for one round of a single section.

## What it does not do

cinemadesk keeps only the show schedule, staff and customers. It has no
records for seats, services, tickets, invoices, reviews, costs or revenue,
and it does not check tickets against seats or schedules.

## Tests

```
pip install .[test]
pytest
```