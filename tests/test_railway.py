import pytest

from treni.files import read_int
from treni.railway import TRACK_NAMES, build_railway, build_virtual_railway
from treni.tracks import TrackNotFoundError


def test_virtual_railway_has_all_tracks_in_order():
    railway = build_virtual_railway()
    assert [track.name for track in railway] == list(TRACK_NAMES)
    assert len(railway) == 24


def test_virtual_tracks_start_free_without_files():
    railway = build_virtual_railway()
    assert all(track.occupancy == 0 and track.handle is None for track in railway)


def test_neighbours_of_junctions():
    railway = build_virtual_railway()
    assert [t.name for t in railway.find("MA3").near] == ["MA2", "MA4", "MA7", "MA8"]
    assert [t.name for t in railway.find("MA12").near] == ["MA11", "MA13", "MA16", "S8"]


def test_links_are_symmetric():
    railway = build_virtual_railway()
    for track in railway:
        for other in track.near:
            assert track in other.near


def test_find_unknown_track_raises():
    railway = build_virtual_railway()
    with pytest.raises(TrackNotFoundError):
        railway.find("MA99")


def test_real_railway_creates_zeroed_files(tmp_path):
    with build_railway(tmp_path) as railway:
        for track in railway:
            assert (tmp_path / track.name).exists()
            assert read_int(track.handle) == 0


def test_close_closes_files(tmp_path):
    railway = build_railway(tmp_path)
    railway.close()
    assert all(track.handle.closed for track in railway)


def test_build_railway_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        build_railway(tmp_path / "missing")