"""The Radio Block Centre: a server granting or refusing train movements."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from treni.channel import (
    DEFAULT_SOCKET_PATH,
    accept_connection,
    open_server,
    recv_int,
    recv_text,
    send_int,
    send_text,
)
from treni.files import create_file, write_text, write_time
from treni.railway import Railway, build_virtual_railway
from treni.tracks import Track
from treni.train import Train, new_virtual_train

GO = 0
STOP = -1
TRAIN_NAMES: tuple[str, ...] = ("T1", "T2", "T3", "T4", "T5")
ACK = "ok"


def _is_station(name: str) -> bool:
    return name.startswith("S")


@dataclass
class RadioBlockCentre:
    """Authorises the movements of virtual trains over a virtual railway."""

    trains: list[Train]
    log: BinaryIO | None = None
    station_requests: int = field(default=0)

    def train(self, name: str) -> Train:
        """Return the train with the given name."""
        for candidate in self.trains:
            if candidate.name == name:
                return candidate
        raise LookupError(f"train {name!r} unknown to the RBC")

    def handle_request(self, sock: socket.socket, train: Train) -> bool:
        """Answer a movement request; return False once every journey has ended."""
        if not train.itinerary:
            raise ValueError(f"train {train.name} has no track left to request")
        requested = train.itinerary[0]
        if _is_station(requested.name):
            self.write_log(train, GO)
            self.move(sock, train)
            self.station_requests += 1
        elif requested.occupancy == 0:
            self.write_log(train, GO)
            self.move(sock, train)
        else:
            self.write_log(train, STOP)
            send_int(sock, STOP)
        return self.station_requests != len(self.trains) * 2

    def move(self, sock: socket.socket, train: Train) -> None:
        """Grant the movement, wait for confirmation and update occupancies."""
        send_int(sock, GO)
        recv_int(sock)
        if train.position is not None:
            train.position.occupancy -= 1
        train.position = train.itinerary[0]
        train.position.occupancy += 1
        train.itinerary = train.itinerary[1:]

    def write_log(self, train: Train, state: int) -> None:
        """Record the request of the train and whether it was authorised."""
        if self.log is None:
            return
        current = train.position.name if train.position is not None else "---"
        requested = train.itinerary[0].name if train.itinerary else "---"
        granted = "SI" if state == GO else "NO"
        write_text(
            self.log,
            f"[Treno: {train.name}] [Attuale: {current}]\t[Richiesta: {requested}]"
            f" \t[Autorizzato: {granted}]\t",
        )
        write_time(self.log)


def receive_itinerary(sock: socket.socket, railway: Railway) -> list[Track]:
    """Receive track names, acknowledging each, until the second station arrives."""
    itinerary: list[Track] = []
    stations = 0
    while stations < 2:
        name = recv_text(sock)
        send_text(sock, ACK)
        if _is_station(name):
            stations += 1
        itinerary.append(railway.find(name))
    return itinerary


def run_rbc(
    base_dir: str | os.PathLike[str] = "file",
    socket_path: str | os.PathLike[str] = DEFAULT_SOCKET_PATH,
) -> None:
    """Serve the itineraries and movement requests of all trains until they arrive."""
    trains = [new_virtual_train(name) for name in TRAIN_NAMES]
    railway = build_virtual_railway()
    try:
        with open_server(socket_path) as server:
            for train in trains:
                with accept_connection(server) as connection:
                    train.path = receive_itinerary(connection, railway)
                    train.itinerary = list(train.path)
            with create_file(Path(base_dir) / "log" / "RBC.log") as log:
                centre = RadioBlockCentre(trains=trains, log=log)
                running = True
                while running:
                    with accept_connection(server) as connection:
                        name = recv_text(connection)
                        running = centre.handle_request(connection, centre.train(name))
    finally:
        railway.close()