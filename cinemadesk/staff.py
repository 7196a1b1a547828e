"""Employee records kept in a plain-text file, with an interactive menu."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, TextIO

DEFAULT_FILE = "NhanVien.txt"
ID_LENGTH = 12
_DIGITS = frozenset("0123456789")

_MENU = (
    "Quan li nhan vien\n"
    "1. Tim nhan vien\n"
    "2. Them nhan vien\n"
    "3. Xoa nhan vien\n"
    "4. Sua nhan vien\n"
    "5. Xem nhan vien\n"
    "Nhap bat ky de quay lai\n"
)


@dataclass(frozen=True)
class Employee:
    """One employee: citizen id number, name and salary."""

    id_number: str
    name: str
    salary: str


class StaffError(Exception):
    """Base class for staff roster errors."""


class InvalidEmployeeError(StaffError, ValueError):
    """The id number or salary is malformed."""

    def __init__(self, message: str = "Sai dinh dang nhan vien.") -> None:
        super().__init__(message)


class DuplicateEmployeeError(StaffError):
    """An employee with that id number already exists."""

    def __init__(self, message: str = "Da ton tai nhan vien.") -> None:
        super().__init__(message)


class EmployeeNotFoundError(StaffError, LookupError):
    """No employee has the given id number."""

    def __init__(self, message: str = "Khong tim thay nhan vien.") -> None:
        super().__init__(message)


def is_valid_id_number(id_number: str) -> bool:
    """An id number is exactly twelve ASCII digits."""
    return len(id_number) == ID_LENGTH and all(c in _DIGITS for c in id_number)


def is_valid_salary(salary: str) -> bool:
    """A salary is a non-empty run of digits with no leading zero (except "0")."""
    if not salary or (len(salary) > 1 and salary[0] == "0"):
        return False
    return all(c in _DIGITS for c in salary)


def _value_after_colon(line: str) -> str:
    position = line.find(":")
    return line[position + 2:] if position >= 0 else line[1:]


def parse_employees(text: str) -> list[Employee]:
    """Read employees from the stored text form."""
    lines = iter(text.splitlines())
    employees = []
    for line in lines:
        if not line:
            continue
        id_number = _value_after_colon(line)
        name = _value_after_colon(next(lines, ""))
        salary = _value_after_colon(next(lines, ""))
        employees.append(Employee(id_number, name, salary))
    return employees


def format_employee(employee: Employee) -> str:
    """Render one employee; the same layout is used on screen and on disk."""
    return (
        f"CCCD         : {employee.id_number}\n"
        f"Ten nhan vien: {employee.name}\n"
        f"Luong        : {employee.salary}\n\n"
    )


def format_employees(employees: Iterable[Employee]) -> str:
    """Render employees in the stored text form."""
    return "".join(format_employee(e) for e in employees)


class StaffRoster:
    """Employees loaded from and saved to a text file."""

    def __init__(self, path: str | Path = DEFAULT_FILE) -> None:
        self.path = Path(path)
        self._employees: list[Employee] = []
        self.load()

    def load(self) -> None:
        """Replace the in-memory list with the file's contents."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        self._employees = parse_employees(text)

    def save(self) -> None:
        """Write all employees to the file."""
        self.path.write_text(format_employees(self._employees), encoding="utf-8")

    def _position(self, id_number: str) -> int | None:
        return next(
            (i for i, e in enumerate(self._employees) if e.id_number == id_number), None
        )

    def add(self, id_number: str, name: str, salary: str) -> Employee:
        """Add a new employee and save."""
        if not (is_valid_id_number(id_number) and is_valid_salary(salary)):
            raise InvalidEmployeeError()
        if self._position(id_number) is not None:
            raise DuplicateEmployeeError()
        employee = Employee(id_number, name, salary)
        self._employees.append(employee)
        self.save()
        return employee

    def remove(self, id_number: str) -> Employee:
        """Remove the employee with this id number and save."""
        position = self._position(id_number)
        if position is None:
            raise EmployeeNotFoundError()
        employee = self._employees.pop(position)
        self.save()
        return employee

    def update(self, old_id_number: str, new_id_number: str, name: str, salary: str) -> Employee:
        """Replace the employee with the old id number and save."""
        if not (is_valid_id_number(new_id_number) and is_valid_salary(salary)):
            raise InvalidEmployeeError()
        if new_id_number != old_id_number and self._position(new_id_number) is not None:
            raise DuplicateEmployeeError()
        position = self._position(old_id_number)
        if position is None:
            raise EmployeeNotFoundError()
        updated = Employee(new_id_number, name, salary)
        self._employees[position] = updated
        self.save()
        return updated

    def search(self, query: str) -> list[Employee]:
        """Employees whose id number, name or salary equals the query."""
        return [e for e in self._employees if query in (e.id_number, e.name, e.salary)]

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))

    def __len__(self) -> int:
        return len(self._employees)


def _read_line(stream: TextIO) -> str:
    return stream.readline().rstrip("\n")


def manage_staff(
    path: str | Path = DEFAULT_FILE,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run one round of the staff menu."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    roster = StaffRoster(path)

    def ask(prompt: str) -> str:
        stdout.write(prompt)
        return _read_line(stdin)

    def say(message: str) -> None:
        stdout.write(message + "\n\n")

    stdout.write(_MENU)
    choice = ask("Chon chuc nang: ")
    try:
        if choice == "1":
            found = roster.search(ask("Tim nhan vien theo (CCCD/Ten/Luong): "))
            if found:
                stdout.write(format_employees(found))
            else:
                say("Khong tim thay nhan vien.")
        elif choice == "2":
            id_number = ask("Them CCCD (XXXXXXXXXXXX): ")
            name = ask("Them ten nhan vien: ")
            salary = ask("Them luong: ")
            roster.add(id_number, name, salary)
            say("Da them thanh cong nhan vien.")
        elif choice == "3":
            roster.remove(ask("Nhap CCCD cua nhan vien muon xoa: "))
            say("Da xoa nhan vien thanh cong.")
        elif choice == "4":
            old_id = ask("Nhap CCCD cua nhan vien muon sua: ")
            new_id = ask("Nhap CCCD moi sua: ")
            name = ask("Nhap ten nhan vien moi sua: ")
            salary = ask("Nhap luong moi sua: ")
            roster.update(old_id, new_id, name, salary)
            say("Da sua thanh cong nhan vien.")
        elif choice == "5":
            if len(roster) == 0:
                say("Danh sach nhan vien rong!")
            else:
                stdout.write(format_employees(roster))
        else:
            stdout.write("\n")
    except StaffError as exc:
        say(str(exc))