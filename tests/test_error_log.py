import io

import error_log
from error_log import ErrorLog, default_log_path
from file_io_controller import read_csv_text


def test_default_path_name(qt_app):
    assert default_log_path().name == "CSVDisplay-Error.txt"


def test_write_appends_block(tmp_path):
    log_path = tmp_path / "CSVDisplay-Error.txt"
    log = ErrorLog(log_path)

    assert log.write("first", OSError("disk gone"))
    assert log.write("second", "plain message")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "-" * 46
    assert lines[2] == "ERROR: first"
    assert lines[3] == "disk gone"
    assert lines[4] == "-" * 46
    assert lines[7] == "ERROR: second"
    assert lines[8] == "plain message"
    assert len(lines) == 10


def test_write_falls_back_to_console(tmp_path):
    stream = io.StringIO()
    log = ErrorLog(tmp_path / "missing-dir" / "log.txt", stream=stream)

    assert log.write("summary", ValueError("boom")) is False

    output = stream.getvalue()
    assert "ERROR: Could not write to error log file" in output
    assert "ERROR: summary" in output
    assert "boom" in output


def test_write_failure_uses_summary_and_message(tmp_path):
    log_path = tmp_path / "log.txt"
    failure = read_csv_text(tmp_path / "absent.csv").failure

    ErrorLog(log_path).write_failure(failure)

    content = log_path.read_text(encoding="utf-8")
    assert f"ERROR: Failed to read the file {tmp_path / 'absent.csv'}:" in content
    assert failure.message in content


def _fake_home(monkeypatch, tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    return home


def test_log_goes_to_home_without_desktop_folder(qt_app, monkeypatch, tmp_path):
    home = _fake_home(monkeypatch, tmp_path)

    log = ErrorLog()

    assert log.path == home / "CSVDisplay-Error.txt"
    assert log.write("summary", OSError("x"))
    assert "ERROR: summary" in log.path.read_text(encoding="utf-8")


def test_log_goes_to_desktop_when_present(qt_app, monkeypatch, tmp_path):
    home = _fake_home(monkeypatch, tmp_path)
    (home / "Desktop").mkdir()

    assert default_log_path() == home / "Desktop" / "CSVDisplay-Error.txt"


def test_nonexistent_desktop_location_falls_back_to_home(monkeypatch, tmp_path):
    home = _fake_home(monkeypatch, tmp_path)

    class MissingDesktopPaths:
        StandardLocation = error_log.QStandardPaths.StandardLocation

        @staticmethod
        def writableLocation(location):
            return str(tmp_path / "no-such-desktop")

    monkeypatch.setattr(error_log, "QStandardPaths", MissingDesktopPaths)

    assert default_log_path() == home / "CSVDisplay-Error.txt"
