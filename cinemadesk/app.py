"""Top-level cinema management menu."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from cinemadesk import customers, schedules, staff

_MENU = (
    "Quan li rap chieu phim\n"
    "a. Quan li lich chieu\n"
    "d. Quan li nhan vien\n"
    "e. Quan li khach hang\n"
    "0. Thoat\n"
)


def run(
    data_dir: str | Path = ".",
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Show the main menu repeatedly until the user chooses 0 or input ends."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    data_dir = Path(data_dir)
    handlers = {
        "a": (schedules.manage_schedule, schedules.DEFAULT_FILE),
        "d": (staff.manage_staff, staff.DEFAULT_FILE),
        "e": (customers.manage_customers, customers.DEFAULT_FILE),
    }

    while True:
        stdout.write(_MENU)
        stdout.write("Chon quan li: ")
        raw = stdin.readline()
        if not raw:
            break
        choice = raw.rstrip("\n")
        if choice == "0":
            break
        handler = handlers.get(choice)
        if handler is not None:
            manage, filename = handler
            stdout.write("\n")
            manage(data_dir / filename, stdin, stdout)
        else:
            stdout.write("Lua chon khong hop le, vui long thu lai.\n\n")
    stdout.write("Thoat chuong trinh...")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Cinema management menu.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the data files (default: current directory)",
    )
    args = parser.parse_args(argv)
    run(args.data_dir)
    return 0