"""Local stream sockets carrying the short messages exchanged with the RBC."""

from __future__ import annotations

import contextlib
import os
import socket
from pathlib import Path

DEFAULT_SOCKET_PATH = "SocketTrain"
MAX_LISTEN = 10
MESSAGE_SIZE = 10
_DIGIT_ZERO = ord("0")


class ChannelError(OSError):
    """Raised when a socket operation of the channel fails."""


def open_server(path: str | os.PathLike[str] = DEFAULT_SOCKET_PATH) -> socket.socket:
    """Bind a listening Unix stream socket at the path, replacing a stale one."""
    address = os.fspath(Path(path))
    with contextlib.suppress(FileNotFoundError):
        os.unlink(address)
    server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        server.bind(address)
        server.listen(MAX_LISTEN)
    except OSError as error:
        server.close()
        raise ChannelError(f"cannot open server socket at {address}: {error}") from error
    return server


def accept_connection(server: socket.socket) -> socket.socket:
    """Wait for a client and return the socket of the accepted connection."""
    try:
        connection, _ = server.accept()
    except OSError as error:
        raise ChannelError(f"cannot accept connection: {error}") from error
    return connection


def connect(path: str | os.PathLike[str] = DEFAULT_SOCKET_PATH) -> socket.socket:
    """Open a client socket connected to the server at the path."""
    address = os.fspath(Path(path))
    client = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        client.connect(address)
    except OSError as error:
        client.close()
        raise ChannelError(f"cannot connect to {address}: {error}") from error
    return client


def send_text(sock: socket.socket, text: str) -> None:
    """Send the text as it is, with no terminator."""
    try:
        sock.sendall(text.encode())
    except OSError as error:
        raise ChannelError(f"cannot write to socket: {error}") from error


def send_int(sock: socket.socket, number: int) -> None:
    """Send a number encoded as a single character offset from '0'."""
    code = number + _DIGIT_ZERO
    if not 0 <= code <= 0xFF:
        raise ValueError(f"number {number} cannot be sent as a single character")
    try:
        sock.sendall(bytes([code]))
    except OSError as error:
        raise ChannelError(f"cannot write number to socket: {error}") from error


def recv_text(sock: socket.socket) -> str:
    """Receive at most one message worth of text; empty if the peer closed."""
    try:
        data = sock.recv(MESSAGE_SIZE)
    except OSError as error:
        raise ChannelError(f"cannot read from socket: {error}") from error
    return data.decode()


def recv_int(sock: socket.socket) -> int:
    """Receive a number sent as a single character offset from '0'."""
    try:
        data = sock.recv(1)
    except OSError as error:
        raise ChannelError(f"cannot read number from socket: {error}") from error
    if not data:
        raise ChannelError("connection closed before a number was received")
    return data[0] - _DIGIT_ZERO