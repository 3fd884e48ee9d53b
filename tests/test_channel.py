import socket

import pytest

from treni.channel import (
    ChannelError,
    accept_connection,
    connect,
    open_server,
    recv_int,
    recv_text,
    send_int,
    send_text,
)


@pytest.fixture
def pair():
    first, second = socket.socketpair()
    with first, second:
        yield first, second


def test_int_round_trip(pair):
    first, second = pair
    send_int(first, 0)
    assert recv_int(second) == 0


def test_stop_is_sent_as_slash(pair):
    first, second = pair
    send_int(first, -1)
    assert recv_text(second) == "/"


def test_negative_round_trip(pair):
    first, second = pair
    send_int(first, -1)
    assert recv_int(second) == -1


def test_text_round_trip(pair):
    first, second = pair
    send_text(first, "MA12")
    assert recv_text(second) == "MA12"


def test_recv_text_reads_at_most_ten_bytes(pair):
    first, second = pair
    send_text(first, "ABCDEFGHIJKL")
    assert recv_text(second) == "ABCDEFGHIJ"
    assert recv_text(second) == "KL"


def test_recv_text_empty_after_close():
    first, second = socket.socketpair()
    with second:
        first.close()
        assert recv_text(second) == ""


def test_recv_int_after_close_raises():
    first, second = socket.socketpair()
    with second:
        first.close()
        with pytest.raises(ChannelError):
            recv_int(second)


def test_send_int_out_of_range(pair):
    first, _ = pair
    with pytest.raises(ValueError):
        send_int(first, 300)


def test_connect_to_missing_server(tmp_path):
    with pytest.raises(ChannelError):
        connect(tmp_path / "missing")


def test_server_client_exchange(tmp_path):
    path = tmp_path / "s"
    with open_server(path) as server:
        with connect(path) as client, accept_connection(server) as conn:
            send_text(client, "T3")
            assert recv_text(conn) == "T3"
            send_int(conn, 0)
            assert recv_int(client) == 0


def test_server_replaces_stale_file(tmp_path):
    path = tmp_path / "s"
    path.write_text("stale")
    with open_server(path) as server:
        with connect(path) as client, accept_connection(server) as conn:
            send_text(conn, "ok")
            assert recv_text(client) == "ok"


def test_channel_error_is_os_error(tmp_path):
    with pytest.raises(OSError):
        connect(tmp_path / "nothing")