"""Signalling level 2: every movement of a train is authorised by the RBC."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from treni.channel import DEFAULT_SOCKET_PATH, connect, recv_int, recv_text, send_int, send_text
from treni.railway import build_railway
from treni.rbc import GO
from treni.tracks import find_track
from treni.train import Train, new_train

TRAIN_NAMES: tuple[str, ...] = ("T1", "T2", "T3", "T4", "T5")
DEFAULT_PAUSE = 3.0

_move_lock = threading.Lock()


def move_etcs2(train: Train) -> bool:
    """Advance an authorised train by one step; return False once it has arrived."""
    if train.position is None:
        train.start()
        return True
    if not train.itinerary:
        raise ValueError(f"train {train.name} has no track left in its itinerary")
    upcoming = train.itinerary[0]
    find_track(train.position.near, upcoming.name)
    if len(train.itinerary) == 1:
        train.stop()
        return False
    train.move()
    return True


def send_itinerary(
    train: Train, socket_path: str | os.PathLike[str] = DEFAULT_SOCKET_PATH
) -> None:
    """Send the names of the tracks of the train's path, one acknowledged message each."""
    with connect(socket_path) as sock:
        for track in train.path:
            send_text(sock, track.name)
            recv_text(sock)


def _drive(
    train: Train,
    socket_path: str | os.PathLike[str],
    pause: float,
    cancel: threading.Event | None,
) -> None:
    try:
        running = True
        while running:
            with connect(socket_path) as sock:
                send_text(sock, train.name)
                if recv_int(sock) == GO:
                    with _move_lock:
                        running = move_etcs2(train)
                    send_int(sock, GO)
                else:
                    train.lock()
            if cancel is None:
                time.sleep(pause)
            elif cancel.wait(pause):
                return
    finally:
        train.close()


def train_loop(
    train: Train,
    socket_path: str | os.PathLike[str] = DEFAULT_SOCKET_PATH,
    pause: float = DEFAULT_PAUSE,
) -> None:
    """Ask the RBC for every step of the journey, pausing after each, then close the train."""
    _drive(train, socket_path, pause, None)


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


def run_etcs2(
    base_dir: str | os.PathLike[str] = "file",
    socket_path: str | os.PathLike[str] = DEFAULT_SOCKET_PATH,
    pause: float = DEFAULT_PAUSE,
) -> None:
    """Send every itinerary to the RBC, then run all trains concurrently."""
    base = Path(base_dir)
    with build_railway(base / "binari") as railway:
        trains: list[Train] = []
        try:
            for name in TRAIN_NAMES:
                trains.append(new_train(name, railway, base))
            for train in trains:
                send_itinerary(train, socket_path)
        except BaseException:
            for train in trains:
                train.close()
            raise
        _run_concurrently(
            trains, lambda train, cancel: _drive(train, socket_path, pause, cancel)
        )