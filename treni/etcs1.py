"""Signalling level 1: every train checks the occupancy files of the tracks itself."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from treni.files import read_int
from treni.railway import build_railway
from treni.tracks import find_track
from treni.train import Train, new_train

TRAIN_NAMES: tuple[str, ...] = ("T1", "T2", "T3", "T4", "T5")
DEFAULT_PAUSE = 3.0

# The occupancy files are shared by every train: one movement at a time.
_move_lock = threading.Lock()


def move_etcs1(train: Train) -> bool:
    """Advance the train by one step; return False once its journey is over."""
    if train.position is None:
        train.start()
        return True
    if not train.itinerary:
        raise ValueError(f"train {train.name} has no track left in its itinerary")
    upcoming = train.itinerary[0]
    # The next track must be a neighbour of the current one.
    find_track(train.position.near, upcoming.name)
    if len(train.itinerary) == 1:
        train.stop()
        return False
    if read_int(upcoming.handle) == 0:
        train.move()
    else:
        train.lock()
    return True


def _drive(train: Train, pause: float, cancel: threading.Event | None) -> None:
    try:
        running = True
        while running:
            with _move_lock:
                running = move_etcs1(train)
            if cancel is None:
                time.sleep(pause)
            elif cancel.wait(pause):
                return
    finally:
        train.close()


def train_loop(train: Train, pause: float = DEFAULT_PAUSE) -> None:
    """Run the whole journey of the train, pausing after every step, then close it."""
    _drive(train, pause, None)


def _run_concurrently(
    trains: Sequence[Train], drive: Callable[[Train, threading.Event], None]
) -> None:
    cancel = threading.Event()
    errors: list[BaseException] = []

    def worker(train: Train) -> None:
        try:
            drive(train, cancel)
        except BaseException as error:  # noqa: BLE001 - re-raised by the caller
            errors.append(error)
            cancel.set()

    threads = [threading.Thread(target=worker, args=(train,), name=train.name) for train in trains]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]


def run_etcs1(base_dir: str | os.PathLike[str] = "file", pause: float = DEFAULT_PAUSE) -> None:
    """Build the railway and run every train concurrently until all have arrived."""
    base = Path(base_dir)
    with build_railway(base / "binari") as railway:
        trains: list[Train] = []
        try:
            for name in TRAIN_NAMES:
                trains.append(new_train(name, railway, base))
        except BaseException:
            for train in trains:
                train.close()
            raise
        _run_concurrently(trains, lambda train, cancel: _drive(train, pause, cancel))