"""The fixed railway layout, either backed by occupancy files or purely virtual."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field

from treni.tracks import Track, find_track, new_track

TRACK_NAMES: tuple[str, ...] = (
    "S1", "S2", "S3", "S4", "S5", "S6", "S7", "S8",
    "MA1", "MA2", "MA3", "MA4", "MA5", "MA6", "MA7", "MA8",
    "MA9", "MA10", "MA11", "MA12", "MA13", "MA14", "MA15", "MA16",
)

LINKS: tuple[tuple[str, str], ...] = (
    ("S1", "MA1"),
    ("MA1", "MA2"),
    ("MA2", "MA3"),
    ("MA3", "MA4"),
    ("MA4", "S5"),
    ("S2", "MA5"),
    ("MA5", "MA6"),
    ("MA6", "MA7"),
    ("MA7", "MA3"),
    ("MA3", "MA8"),
    ("MA8", "S6"),
    ("S3", "MA9"),
    ("MA9", "MA10"),
    ("MA10", "MA11"),
    ("MA11", "MA12"),
    ("MA12", "MA13"),
    ("MA13", "S7"),
    ("S4", "MA14"),
    ("MA14", "MA15"),
    ("MA15", "MA16"),
    ("MA16", "MA12"),
    ("MA12", "S8"),
)


@dataclass
class Railway:
    """All the tracks of the layout, in a fixed order."""

    tracks: list[Track] = field(default_factory=list)

    def find(self, name: str) -> Track:
        """Return the track with the given name, raising TrackNotFoundError if absent."""
        return find_track(self.tracks, name)

    def close(self) -> None:
        """Close every track of the railway."""
        for track in self.tracks:
            track.close()

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __len__(self) -> int:
        return len(self.tracks)

    def __enter__(self) -> Railway:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _link_all(railway: Railway) -> Railway:
    for first, second in LINKS:
        railway.find(first).link(railway.find(second))
    return railway


def build_railway(directory: str | os.PathLike[str]) -> Railway:
    """Build the layout with an occupancy file for every track in the directory."""
    railway = Railway()
    try:
        for name in TRACK_NAMES:
            railway.tracks.append(new_track(name, directory))
    except OSError:
        railway.close()
        raise
    return _link_all(railway)


def build_virtual_railway() -> Railway:
    """Build the layout with in-memory occupancy counters only."""
    return _link_all(Railway([Track(name=name) for name in TRACK_NAMES]))