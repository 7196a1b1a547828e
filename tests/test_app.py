import io

from cinemadesk.app import main, run
from cinemadesk.customers import Customer, CustomerBook
from cinemadesk.schedules import Schedule, Showing
from cinemadesk.staff import Employee, StaffRoster


def _run(tmp_path, text):
    out = io.StringIO()
    run(tmp_path, io.StringIO(text), out)
    return out.getvalue()


def test_exit_immediately(tmp_path):
    output = _run(tmp_path, "0\n")
    assert output.startswith("Quan li rap chieu phim\n")
    assert output.endswith("Thoat chuong trinh...")
    assert output.count("Chon quan li: ") == 1


def test_invalid_choice_repeats_menu(tmp_path):
    output = _run(tmp_path, "z\n0\n")
    assert "Lua chon khong hop le, vui long thu lai.\n\n" in output
    assert output.count("Chon quan li: ") == 2


def test_end_of_input_stops(tmp_path):
    output = _run(tmp_path, "")
    assert output.endswith("Thoat chuong trinh...")


def test_staff_menu_adds_employee(tmp_path):
    output = _run(tmp_path, "d\n2\n000000000001\nAn\n500\n0\n")
    assert "Da them thanh cong nhan vien." in output
    roster = StaffRoster(tmp_path / "NhanVien.txt")
    assert list(roster) == [Employee("000000000001", "An", "500")]


def test_customer_menu_adds_customer(tmp_path):
    output = _run(tmp_path, "e\n2\n0000000001\nLan\nNu\n0\n")
    assert "Da them khach hang thanh cong!" in output
    book = CustomerBook(tmp_path / "KhachHang.txt")
    assert list(book) == [Customer("0000000001", "Lan", "Nu")]


def test_schedule_menu_adds_showing(tmp_path):
    output = _run(tmp_path, "a\n2\n20:30-15/06/2024\nPhim\n90000\n0\n")
    assert "Da them lich chieu thanh cong!" in output
    schedule = Schedule(tmp_path / "LichChieu.txt")
    assert list(schedule) == [Showing("20:30-15/06/2024", "Phim", "90000")]


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("d\n5\n0\n"))
    assert main(["--data-dir", str(tmp_path)]) == 0
    captured = capsys.readouterr().out
    assert "Danh sach nhan vien rong!" in captured
    assert captured.endswith("Thoat chuong trinh...")