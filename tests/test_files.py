import os
import time

import pytest

from treni.files import (
    create_file,
    open_file,
    read_int,
    read_text,
    write_int,
    write_text,
    write_time,
)


def test_write_and_read_text_round_trip(tmp_path):
    path = tmp_path / "itinerary"
    with create_file(path) as handle:
        write_text(handle, "S1, MA1, MA2\n")
    with open_file(path) as handle:
        assert read_text(handle) == "S1, MA1, MA2"


def test_read_text_returns_first_non_empty_line(tmp_path):
    path = tmp_path / "lines"
    path.write_bytes(b"\n\nfirst\nsecond\n")
    with open_file(path) as handle:
        assert read_text(handle) == "first"


def test_read_text_of_empty_file_is_empty(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    with open_file(path) as handle:
        assert read_text(handle) == ""


def test_write_int_round_trip(tmp_path):
    with create_file(tmp_path / "counter") as handle:
        for number in (0, 1, 2, 9):
            write_int(handle, number)
            assert read_int(handle) == number


def test_write_int_overwrites_first_character_only(tmp_path):
    path = tmp_path / "track"
    with create_file(path) as handle:
        write_text(handle, "0")
        write_int(handle, 1)
    assert path.read_bytes() == b"1"


def test_write_int_rejects_unrepresentable_number(tmp_path):
    with create_file(tmp_path / "counter") as handle:
        with pytest.raises(ValueError):
            write_int(handle, 1000)


def test_read_int_of_empty_file_raises(tmp_path):
    with create_file(tmp_path / "empty") as handle:
        with pytest.raises(ValueError):
            read_int(handle)


def test_create_file_truncates_existing(tmp_path):
    path = tmp_path / "log"
    path.write_bytes(b"old content")
    with create_file(path) as handle:
        write_text(handle, "new")
    assert path.read_bytes() == b"new"


def test_create_file_grants_full_permissions(tmp_path):
    path = tmp_path / "shared"
    with create_file(path):
        pass
    assert os.stat(path).st_mode & 0o777 == 0o777


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_file(tmp_path / "missing")


def test_write_time_appends_parseable_asctime_line(tmp_path):
    path = tmp_path / "log"
    with create_file(path) as handle:
        write_text(handle, "[Treno: T1] ")
        write_time(handle)
    content = path.read_text()
    assert content.startswith("[Treno: T1] ")
    assert content.endswith("\n")
    stamp = content[len("[Treno: T1] "):].strip()
    parsed = time.strptime(stamp, "%a %b %d %H:%M:%S %Y")
    assert abs(time.mktime(parsed) - time.time()) < 120