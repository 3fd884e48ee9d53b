"""Small helpers around the occupancy and log files used by the simulation."""

from __future__ import annotations

import os
import stat
import time
from pathlib import Path
from typing import BinaryIO

_FULL_PERMISSIONS = stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO
_DIGIT_ZERO = ord("0")


def create_file(path: str | os.PathLike[str]) -> BinaryIO:
    """Create (or truncate) a file open for reading and writing, readable by everyone."""
    path = Path(path)
    handle = open(path, "w+b")
    try:
        # Applied explicitly so that the process umask does not restrict it.
        os.chmod(path, _FULL_PERMISSIONS)
    except OSError:
        handle.close()
        raise
    return handle


def open_file(path: str | os.PathLike[str]) -> BinaryIO:
    """Open an existing file for reading."""
    return open(Path(path), "rb")


def write_text(handle: BinaryIO, text: str) -> None:
    """Write text at the current position of the file."""
    handle.write(text.encode())
    handle.flush()


def write_int(handle: BinaryIO, number: int) -> None:
    """Store a number as a single character at the start of the file."""
    code = number + _DIGIT_ZERO
    if not 0 <= code <= 0xFF:
        raise ValueError(f"number {number} cannot be stored as a single character")
    handle.seek(0)
    handle.write(bytes([code]))
    handle.flush()


def write_time(handle: BinaryIO) -> None:
    """Write the current local time, in asctime format, followed by a newline."""
    write_text(handle, time.asctime(time.localtime()) + "\n")


def read_text(handle: BinaryIO) -> str:
    """Return the first non-empty line of the file."""
    handle.seek(0)
    content = handle.read().decode()
    return next((line for line in content.split("\n") if line), "")


def read_int(handle: BinaryIO) -> int:
    """Return the number stored as the first character of the file."""
    handle.seek(0)
    first = handle.read(1)
    if not first:
        raise ValueError("file is empty, no number to read")
    return first[0] - _DIGIT_ZERO