"""Film showings kept in a plain-text file, with an interactive menu."""

from __future__ import annotations

import re
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from .customers import _Console, _MessageError, _RecordFile

DEFAULT_FILE = "LichChieu.txt"
_DIGITS = frozenset("0123456789")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FIELD_SPANS = ((0, 2), (3, 5), (6, 8), (9, 11), (12, 16))


@dataclass(frozen=True)
class Showing:
    """One showing: time (hh:mm-dd/mm/yyyy), film title and ticket price."""

    show_time: str
    title: str
    price: str


class ScheduleError(_MessageError):
    """Base class for schedule errors."""


class InvalidShowingError(ScheduleError, ValueError):
    """The show time or price is malformed."""

    default_message = "Thong tin khong hop le. Vui long kiem tra lai."


class DuplicateShowingError(ScheduleError):
    """A showing at that time already exists."""

    default_message = "Lich chieu da ton tai."


class ShowingNotFoundError(ScheduleError, LookupError):
    """No showing exists at the given time."""

    default_message = "Khong tim thay lich chieu."


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def is_valid_show_time(value: str) -> bool:
    """Check the form hh:mm-dd/mm/yyyy and that time and date exist."""
    if len(value) != 16 or (value[2], value[5], value[8], value[11]) != (":", "-", "/", "/"):
        return False
    hour, minute, day, month, year = (_leading_int(value[a:b]) for a, b in _FIELD_SPANS)
    if hour is None or minute is None or not (0 <= hour <= 23 and 0 <= minute <= 59):
        return False
    if day is None or month is None or year is None or not 1 <= month <= 12:
        return False
    days_in_month = (31, 29 if is_leap_year(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    return 1 <= day <= days_in_month[month - 1]


def is_valid_price(value: str) -> bool:
    """A price is a non-empty run of digits not starting with 0."""
    return bool(value) and value[0] != "0" and all(c in _DIGITS for c in value)


def _value_after_colon(line: str) -> str:
    position = line.find(":")
    return line[position + 2:] if position >= 0 else line[1:]


def parse_showings(text: str) -> list[Showing]:
    """Read showings from the stored text form."""
    lines = iter(text.splitlines())
    return [
        Showing(
            _value_after_colon(line),
            _value_after_colon(next(lines, "")),
            _value_after_colon(next(lines, "")),
        )
        for line in lines
        if line
    ]


def format_showing(showing: Showing) -> str:
    """Render one showing; the same layout is used on screen and on disk."""
    return (
        f"Gio chieu    : {showing.show_time}\n"
        f"Ten phim    : {showing.title}\n"
        f"Gia ve      : {showing.price}\n\n"
    )


def format_showings(showings: Iterable[Showing]) -> str:
    """Render showings in the stored text form."""
    return "".join(format_showing(s) for s in showings)


class Schedule(_RecordFile[Showing]):
    """Showings loaded from and saved to a text file."""

    _key = attrgetter("show_time")

    def __init__(self, path: str | Path = DEFAULT_FILE) -> None:
        super().__init__(path)
        self.load()

    def load(self) -> None:
        """Replace the in-memory list with the file's contents."""
        self._records = parse_showings(self._read_text())

    def save(self) -> None:
        """Write all showings to the file."""
        self._write_text(format_showings(self._records))

    def search(self, query: str) -> list[Showing]:
        """Showings whose time, title or price equals the query."""
        return self._matching(query)

    def __iter__(self) -> Iterator[Showing]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    @staticmethod
    def _check(show_time: str, price: str) -> None:
        if not (is_valid_show_time(show_time) and is_valid_price(price)):
            raise InvalidShowingError()

    def add(self, show_time: str, title: str, price: str) -> Showing:
        """Add a new showing and save."""
        self._check(show_time, price)
        if self._position(show_time) is not None:
            raise DuplicateShowingError()
        return self._append(Showing(show_time, title, price))

    def remove(self, show_time: str) -> Showing:
        """Remove the showing at this time and save."""
        return self._pop(show_time, ShowingNotFoundError())

    def update(self, old_show_time: str, new_show_time: str, title: str, price: str) -> Showing:
        """Replace the showing at the old time and save."""
        self._check(new_show_time, price)
        if new_show_time != old_show_time and self._position(new_show_time) is not None:
            raise DuplicateShowingError("Lich chieu moi da ton tai!")
        position = self._position(old_show_time)
        if position is None:
            raise ShowingNotFoundError(
                f"Khong tim thay lich chieu co gio chieu cu: {old_show_time}"
            )
        return self._put(position, Showing(new_show_time, title, price))


def manage_schedule(
    path: str | Path = DEFAULT_FILE,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run one round of the schedule menu."""
    console = _Console(stdin, stdout)
    schedule = Schedule(path)
    choice = console.menu("Quan ly lich chieu", "lich chieu", "Nhap bat ky de quay lai")
    try:
        if choice == "1":
            query = console.ask("Tim lich chieu theo (Gio chieu/Ten phim/Gia ve): ")
            console.listing(schedule.search(query), format_showing, "Khong tim thay lich chieu.")
        elif choice == "2":
            schedule.add(
                *console.ask_all(
                    "Them gio chieu (hh:mm-dd/mm/yyyy): ", "Them ten phim: ", "Them gia ve: "
                )
            )
            console.say("Da them lich chieu thanh cong!")
        elif choice == "3":
            schedule.remove(console.ask("Nhap gio chieu cua lich chieu muon xoa: "))
            console.say("Da xoa lich chieu thanh cong!")
        elif choice == "4":
            schedule.update(
                *console.ask_all(
                    "Nhap gio chieu cu: ",
                    "Nhap gio chieu moi: ",
                    "Nhap ten phim moi: ",
                    "Nhap gia ve moi: ",
                )
            )
            console.say("Da sua lich chieu thanh cong!")
        elif choice == "5":
            console.listing(list(schedule), format_showing, "Danh sach lich chieu rong!")
        else:
            console.write("\n")
    except ScheduleError as exc:
        console.say(str(exc))