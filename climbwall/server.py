"""TCP link to the menu client that drives the wall."""

from __future__ import annotations

import socket
from enum import IntEnum
from types import TracebackType

DEFAULT_PORT = 27015
DEFAULT_BUFLEN = 512


class MenuState(IntEnum):
    """Menu state, carried in the first byte of a client message."""

    EXIT = 0
    PLAY = 1
    AUTO_CALIBRATION = 2
    GAME_SELECTION = 3
    READY_TO_PLAY = 4
    MANUAL_CALIBRATION = 5


class GameId(IntEnum):
    """Selected game, carried in the second byte of a client message."""

    SMASH_IT = 0
    LABYRINTH = 1
    AEROHOCKEY = 2
    TIME_CLIMB = 3
    TERRITORY = 4


class Level(IntEnum):
    """Labyrinth level, carried in the fourth byte of a client message."""

    LEVEL_1 = 0
    LEVEL_2 = 1
    LEVEL_3 = 2
    LEVEL_4 = 3
    LEVEL_5 = 4


def decode_message(payload: bytes) -> list[int]:
    """Turn each received byte into its digit value (byte minus ``'0'``).

    Bytes above 127 count as negative, as signed characters do.
    """
    return [(b - 256 if b > 127 else b) - ord("0") for b in payload]


class GameServer:
    """Accepts one client and exchanges short digit messages with it."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT, bufsize: int = DEFAULT_BUFLEN) -> None:
        self.host = host
        self.port = port
        self._buffer = bytearray(bufsize)
        self._client: socket.socket | None = None
        self.peer: tuple | None = None

    def start(self) -> None:
        """Listen on the address and block until one client connects."""
        with socket.create_server((self.host, self.port)) as listener:
            self._client, self.peer = listener.accept()

    def get_data(self) -> list[int]:
        """Receive one chunk and decode it; empty when nothing could be read."""
        if self._client is None:
            return []
        try:
            received = self._client.recv_into(self._buffer)
        except OSError:
            return []
        if received <= 0:
            return []
        print(f"Bytes received: {received}")
        return decode_message(bytes(self._buffer[:received]))

    def send_data(self, data: int) -> int:
        """Send back the first ``data`` bytes of the receive buffer."""
        if self._client is None:
            raise ConnectionError("no client connected")
        if not 0 <= data <= len(self._buffer):
            raise ValueError(f"cannot send {data} bytes from a {len(self._buffer)}-byte buffer")
        try:
            sent = self._client.send(bytes(self._buffer[:data]))
        except OSError:
            self.close()
            raise
        print(f"Bytes sent: {sent}")
        return sent

    def close(self) -> None:
        """Close the client connection, if any."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GameServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()