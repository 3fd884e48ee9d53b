"""Track sections of the railway and helpers over collections of them."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from treni.files import create_file, write_text


class TrackNotFoundError(LookupError):
    """Raised when a track with the requested name is not in a collection."""


@dataclass(eq=False)
class Track:
    """A section of track, optionally backed by an occupancy file."""

    name: str
    handle: BinaryIO | None = None
    near: list[Track] = field(default_factory=list, repr=False)
    occupancy: int = 0

    def link(self, other: Track) -> None:
        """Make this track and the other one neighbours of each other."""
        self.near.append(other)
        other.near.append(self)

    def close(self) -> None:
        """Close the occupancy file, if any, and forget the neighbours."""
        if self.handle is not None:
            self.handle.close()
        self.near.clear()

    def status(self) -> str:
        """Describe the track, its file and its neighbours."""
        file_desc = self.handle.name if self.handle is not None else "---"
        return f"Nome: {self.name}\tFile: {file_desc} \tVicini: {show_tracks(self.near)}"

    def __enter__(self) -> Track:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def new_track(name: str, directory: str | os.PathLike[str]) -> Track:
    """Create a track whose occupancy file in the directory starts at zero."""
    handle = create_file(Path(directory) / name)
    write_text(handle, "0")
    return Track(name=name, handle=handle)


def find_track(tracks: Iterable[Track], name: str) -> Track:
    """Return the first track with the given name."""
    for track in tracks:
        if track.name == name:
            return track
    raise TrackNotFoundError(f"track {name!r} not found")


def show_tracks(tracks: Iterable[Track]) -> str:
    """Return the names of the tracks separated by spaces, or NULL if none."""
    names = [track.name for track in tracks]
    return " ".join(names) if names else "NULL"


def status_tracks(tracks: Iterable[Track]) -> str:
    """Return the status of every track, one per line."""
    return "\n".join(track.status() for track in tracks)