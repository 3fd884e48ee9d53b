"""Trains following an itinerary across the railway."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from treni.files import create_file, open_file, read_int, read_text, write_int, write_text, write_time
from treni.railway import Railway
from treni.tracks import Track, show_tracks

_SEPARATORS = re.compile(r"[, ]+")


@dataclass(eq=False)
class Train:
    """A train with its full path, the part still to run, and its log file."""

    name: str
    log: BinaryIO | None = None
    position: Track | None = None
    path: list[Track] = field(default_factory=list)
    itinerary: list[Track] = field(default_factory=list)

    def _next_track(self) -> Track:
        if not self.itinerary:
            raise ValueError(f"train {self.name} has no track left in its itinerary")
        return self.itinerary[0]

    def _current_track(self) -> Track:
        if self.position is None:
            raise ValueError(f"train {self.name} is not on the railway")
        return self.position

    def start(self) -> None:
        """Put the train on the first track of its itinerary."""
        target = self._next_track()
        write_int(target.handle, read_int(target.handle) + 1)
        self.position = target
        self.itinerary = self.itinerary[1:]
        self.write_log("START--->")

    def move(self) -> None:
        """Move the train from its track to the next one of its itinerary."""
        current = self._current_track()
        target = self._next_track()
        write_int(current.handle, 0)
        write_int(target.handle, 1)
        self.position = target
        self.itinerary = self.itinerary[1:]
        self.write_log("MOVE---->")

    def stop(self) -> None:
        """Move the train onto the last track of its itinerary and end the journey."""
        current = self._current_track()
        target = self._next_track()
        write_int(target.handle, read_int(target.handle) + 1)
        write_int(current.handle, 0)
        self.position = target
        self.itinerary = []
        self.write_log("STOP---->")

    def lock(self) -> None:
        """Record that the train stayed where it is."""
        self.write_log("LOCK---->")

    def close(self) -> None:
        """Close the log file and drop the path."""
        if self.log is not None:
            self.log.close()
        self.path = []
        self.itinerary = []

    def write_log(self, action: str) -> None:
        """Append the action, the current and next track and the time to the log."""
        if self.log is None:
            return
        current = self.position.name if self.position is not None else "---"
        upcoming = self.itinerary[0].name if self.itinerary else "---"
        write_text(self.log, f"{action}  [Attuale: {current}]\t[Prossima: {upcoming}]  \t")
        write_time(self.log)

    def status(self) -> str:
        """Describe the train, its position, remaining itinerary and full path."""
        log_desc = self.log.name if self.log is not None else "---"
        position = self.position.name if self.position is not None else "NULL"
        return (
            f"Nome: {self.name}\tLogFile: {log_desc} \tPosizione: {position}"
            f"\tCammino: {show_tracks(self.itinerary)}\tItinerario: {show_tracks(self.path)}"
        )

    def __enter__(self) -> Train:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_itinerary(path: str | os.PathLike[str], railway: Railway) -> list[Track]:
    """Read the comma or space separated track names in the file and resolve them."""
    with open_file(path) as handle:
        line = read_text(handle)
    return [railway.find(name) for name in _SEPARATORS.split(line) if name]


def new_train(name: str, railway: Railway, base_dir: str | os.PathLike[str]) -> Train:
    """Create a train with its log under log/ and its itinerary read from itinerari/."""
    base = Path(base_dir)
    path = load_itinerary(base / "itinerari" / name, railway)
    log = create_file(base / "log" / f"{name}.log")
    return Train(name=name, log=log, path=path, itinerary=list(path))


def new_virtual_train(name: str) -> Train:
    """Create a train with no log and no itinerary yet."""
    return Train(name=name)