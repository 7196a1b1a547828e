import io

import pytest

from cinemadesk.staff import (
    DuplicateEmployeeError,
    Employee,
    EmployeeNotFoundError,
    InvalidEmployeeError,
    StaffRoster,
    format_employee,
    format_employees,
    is_valid_id_number,
    is_valid_salary,
    manage_staff,
    parse_employees,
)

ID_A = "000000000001"
ID_B = "000000000002"
ID_C = "000000000003"
AN = Employee(ID_A, "An", "500")


@pytest.fixture
def roster(tmp_path):
    return StaffRoster(tmp_path / "NhanVien.txt")


def _fill(roster, *employees):
    for e in employees:
        roster.add(e.id_number, e.name, e.salary)
    return roster


@pytest.mark.parametrize(
    "value, expected",
    [
        (ID_A, True),
        ("00000000000", False),
        ("0000000000001", False),
        ("00000000000a", False),
        ("", False),
    ],
)
def test_is_valid_id_number(value, expected):
    assert is_valid_id_number(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("0", True), ("500", True), ("05", False), ("", False), ("12a", False), ("-5", False)],
)
def test_is_valid_salary(value, expected):
    assert is_valid_salary(value) is expected


def test_format_employee_layout():
    assert format_employee(AN) == f"CCCD         : {ID_A}\nTen nhan vien: An\nLuong        : 500\n\n"


@pytest.mark.parametrize(
    "employees", [[], [AN, Employee(ID_B, "Binh", "0")]]
)
def test_parse_format_round_trip(employees):
    assert parse_employees(format_employees(employees)) == employees


def test_add_persists(roster):
    assert roster.add(ID_A, "An", "500") == AN
    assert list(StaffRoster(roster.path)) == [AN]


@pytest.mark.parametrize("id_number, salary", [("123", "500"), (ID_A, "0500")])
def test_add_invalid_raises(roster, id_number, salary):
    with pytest.raises(InvalidEmployeeError):
        roster.add(id_number, "An", salary)
    assert len(roster) == 0


def test_add_duplicate_raises(roster):
    _fill(roster, AN)
    with pytest.raises(DuplicateEmployeeError) as info:
        roster.add(ID_A, "Other", "600")
    assert str(info.value) == "Da ton tai nhan vien."
    assert len(roster) == 1


def test_remove(roster):
    _fill(roster, AN, Employee(ID_B, "Binh", "600"))
    assert roster.remove(ID_A).id_number == ID_A
    assert [e.id_number for e in StaffRoster(roster.path)] == [ID_B]


def test_remove_missing_raises(roster):
    with pytest.raises(EmployeeNotFoundError):
        roster.remove(ID_A)


@pytest.mark.parametrize(
    "new_id, name, salary",
    [(ID_C, "Chi", "700"), (ID_A, "An2", "800")],
)
def test_update_changes_fields(roster, new_id, name, salary):
    _fill(roster, AN)
    updated = roster.update(ID_A, new_id, name, salary)
    assert updated == Employee(new_id, name, salary)
    assert list(StaffRoster(roster.path)) == [updated]


@pytest.mark.parametrize(
    "existing, args, error",
    [
        ((AN, Employee(ID_B, "Binh", "600")), (ID_A, ID_B, "X", "1"), DuplicateEmployeeError),
        ((), (ID_A, ID_B, "X", "1"), EmployeeNotFoundError),
        ((AN,), (ID_A, ID_A, "X", ""), InvalidEmployeeError),
    ],
)
def test_update_errors(roster, existing, args, error):
    _fill(roster, *existing)
    with pytest.raises(error):
        roster.update(*args)
    assert list(roster) == list(existing)


def test_search_matches_any_field(roster):
    _fill(roster, AN, Employee(ID_B, "Binh", "500"))
    assert [e.id_number for e in roster.search("500")] == [ID_A, ID_B]
    assert [e.name for e in roster.search("Binh")] == ["Binh"]
    assert roster.search("nobody") == []


@pytest.mark.parametrize(
    "entered, message",
    [
        (f"2\n{ID_A}\nAn\n500\n", "Da them thanh cong nhan vien.\n\n"),
        ("2\n1\nAn\n500\n", "Sai dinh dang nhan vien.\n\n"),
        ("5\n", "Danh sach nhan vien rong!\n\n"),
        ("1\nAn\n", "Khong tim thay nhan vien.\n\n"),
    ],
)
def test_manage_staff_messages(tmp_path, entered, message):
    out = io.StringIO()
    manage_staff(tmp_path / "NhanVien.txt", io.StringIO(entered), out)
    assert message in out.getvalue()


def test_manage_staff_add_persists(tmp_path):
    path = tmp_path / "NhanVien.txt"
    manage_staff(path, io.StringIO(f"2\n{ID_A}\nAn\n500\n"), io.StringIO())
    assert list(StaffRoster(path)) == [AN]