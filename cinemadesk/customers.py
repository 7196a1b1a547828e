"""Customer records kept in a plain-text file, with an interactive menu."""

from __future__ import annotations

import sys
from dataclasses import astuple, dataclass, replace
from operator import attrgetter
from pathlib import Path
from typing import Callable, Generic, Iterable, Iterator, TextIO, TypeVar

DEFAULT_FILE = "KhachHang.txt"
GENDERS = ("Nam", "Nu", "Khac")
_DIGITS = frozenset("0123456789")
_INVALID = "Thong tin khong hop le. Vui long kiem tra lai."
_MENU_VERBS = ("Tim", "Them", "Xoa", "Sua", "Xem")

R = TypeVar("R")


class _MessageError(Exception):
    """An error that carries a default user-facing message."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class _RecordFile(Generic[R]):
    """Shared bookkeeping for a list of records mirrored in a text file."""

    _key: Callable[[R], str]

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._records: list[R] = []

    def _read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    def _write_text(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")

    def save(self) -> None:  # overridden by subclasses
        self._write_text("")

    def _position(self, key: str) -> int | None:
        return next((i for i, r in enumerate(self._records) if self._key(r) == key), None)

    def _append(self, record: R) -> R:
        self._records.append(record)
        self.save()
        return record

    def _pop(self, key: str, missing: Exception) -> R:
        position = self._position(key)
        if position is None:
            raise missing
        record = self._records.pop(position)
        self.save()
        return record

    def _put(self, position: int, record: R) -> R:
        self._records[position] = record
        self.save()
        return record

    def _matching(self, query: str) -> list[R]:
        return [r for r in self._records if query in astuple(r)]


class _Console:
    """Prompting and reporting over a pair of text streams."""

    def __init__(self, stdin: TextIO | None, stdout: TextIO | None) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def say(self, message: str) -> None:
        self.write(message + "\n\n")

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        return self.stdin.readline().rstrip("\n")

    def ask_all(self, *prompts: str) -> list[str]:
        return [self.ask(prompt) for prompt in prompts]

    def menu(self, title: str, noun: str, leave: str) -> str:
        items = "".join(f"{n}. {verb} {noun}\n" for n, verb in enumerate(_MENU_VERBS, 1))
        self.write(f"{title}\n{items}{leave}\n")
        return self.ask("Chon chuc nang: ")

    def listing(self, records: list[R], render: Callable[[R], str], empty: str) -> None:
        if records:
            self.write("".join(render(r) for r in records))
        else:
            self.say(empty)


@dataclass(frozen=True)
class Customer:
    """One customer: phone number, name and gender."""

    phone: str
    name: str
    gender: str


class CustomerError(_MessageError):
    """Base class for customer book errors."""


class InvalidCustomerError(CustomerError, ValueError):
    """The phone number or gender is malformed."""

    default_message = _INVALID


class DuplicateCustomerError(CustomerError):
    """A customer with that phone number already exists."""

    default_message = "Khach hang da ton tai."


class CustomerNotFoundError(CustomerError, LookupError):
    """No customer has the given phone number."""

    default_message = "Khong tim thay khach hang."


def is_valid_phone(phone: str) -> bool:
    """A phone number is ten ASCII digits starting with 0."""
    return len(phone) == 10 and phone[0] == "0" and all(c in _DIGITS for c in phone[1:])


def is_valid_gender(gender: str) -> bool:
    """Gender must be one of Nam, Nu or Khac."""
    return gender in GENDERS


def _field(line: str, label: str) -> str:
    if label not in line:
        return ""
    return line[line.find(":") + 2:]


def parse_customers(text: str) -> list[Customer]:
    """Read customers from the stored text form."""
    lines = iter(text.splitlines())
    customers = []
    for line in lines:
        if not line:
            continue
        phone = _field(line, "So DT:")
        name = _field(next(lines, ""), "Ten:")
        gender = _field(next(lines, ""), "Gioi tinh:")
        customers.append(Customer(phone, name, gender))
        next(lines, None)  # separator line
    return customers


def format_customers(customers: Iterable[Customer]) -> str:
    """Render customers in the stored text form."""
    return "".join(
        f"So DT: {c.phone}\nTen: {c.name}\nGioi tinh: {c.gender}\n\n" for c in customers
    )


def format_customer(customer: Customer) -> str:
    """Render one customer for display."""
    return (
        f"So DT    : {customer.phone}\n"
        f"Ten      : {customer.name}\n"
        f"Gioi tinh: {customer.gender}\n\n"
    )


class CustomerBook(_RecordFile[Customer]):
    """Customers loaded from and saved to a text file."""

    _key = attrgetter("phone")

    def __init__(self, path: str | Path = DEFAULT_FILE) -> None:
        super().__init__(path)
        self.load()

    def load(self) -> None:
        """Replace the in-memory list with the file's contents."""
        self._records = parse_customers(self._read_text())

    def save(self) -> None:
        """Write all customers to the file."""
        self._write_text(format_customers(self._records))

    def search(self, query: str) -> list[Customer]:
        """Customers whose phone, name or gender equals the query."""
        return self._matching(query)

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    @staticmethod
    def _check(phone: str, gender: str) -> None:
        if not (is_valid_phone(phone) and is_valid_gender(gender)):
            raise InvalidCustomerError()

    def add(self, phone: str, name: str, gender: str) -> Customer:
        """Add a new customer and save."""
        self._check(phone, gender)
        if self._position(phone) is not None:
            raise DuplicateCustomerError()
        return self._append(Customer(phone, name, gender))

    def remove(self, phone: str) -> Customer:
        """Remove the customer with this phone number and save."""
        return self._pop(phone, CustomerNotFoundError())

    def update(self, old_phone: str, new_phone: str, name: str, gender: str) -> Customer | None:
        """Change a customer's details and save.

        When the phone number is unchanged and no such customer exists,
        nothing happens and None is returned.
        """
        self._check(new_phone, gender)
        if old_phone == new_phone:
            position = self._position(old_phone)
            if position is None:
                return None
            updated = replace(self._records[position], name=name, gender=gender)
        else:
            if self._position(new_phone) is not None:
                raise DuplicateCustomerError("So dien thoai moi da ton tai trong danh sach!")
            position = self._position(old_phone)
            if position is None:
                raise CustomerNotFoundError("Khong tim thay khach hang cu.")
            updated = Customer(new_phone, name, gender)
        return self._put(position, updated)


def manage_customers(
    path: str | Path = DEFAULT_FILE,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run one round of the customer menu."""
    console = _Console(stdin, stdout)
    book = CustomerBook(path)
    choice = console.menu("Quan ly khach hang", "khach hang", "Nhap bat ki de quay lai")
    try:
        if choice == "1":
            query = console.ask("Tim khach hang theo (so DT/ten/gioi tinh): ")
            console.listing(book.search(query), format_customer, "Khong tim thay khach hang.")
        elif choice == "2":
            book.add(*console.ask_all("Them so DT: ", "Them ten: ", "Them gioi tinh (Nam, Nu, Khac): "))
            console.say("Da them khach hang thanh cong!")
        elif choice == "3":
            book.remove(console.ask("Nhap so DT muon xoa: "))
            console.say("Da xoa khach hang thanh cong!")
        elif choice == "4":
            old_phone, new_phone, name, gender = console.ask_all(
                "Nhap so DT cu: ",
                "Nhap so DT moi: ",
                "Nhap ten moi: ",
                "Nhap gioi tinh moi (Nam, Nu, Khac): ",
            )
            unchanged = old_phone == new_phone
            if unchanged and is_valid_phone(new_phone) and is_valid_gender(gender):
                console.say("So dien thoai moi khong thay doi, chi sua ten va gioi tinh!")
            if book.update(old_phone, new_phone, name, gender) is not None:
                console.say(
                    "Da sua ten va gioi tinh thanh cong!"
                    if unchanged
                    else "Da sua khach hang thanh cong!"
                )
        elif choice == "5":
            console.listing(list(book), format_customer, "Danh sach khach hang rong!")
        else:
            console.write("\n")
    except CustomerError as exc:
        console.say(str(exc))