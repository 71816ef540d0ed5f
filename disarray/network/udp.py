"""Non-blocking UDP socket and the message record it delivers."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Optional, Tuple, Union

__all__ = ["MAX_MESSAGE_DATA_SIZE", "Address", "Message", "UdpSocket"]

MAX_MESSAGE_DATA_SIZE = 5120

Address = Tuple[str, int]


@dataclass
class Message:
    """A received datagram and the address it came from."""

    data: bytes = b""
    sender_address: Optional[Address] = None
    parsed: bool = False

    @property
    def length(self) -> int:
        return len(self.data)


class UdpSocket:
    """An IPv4 UDP socket in non-blocking mode."""

    def __init__(self) -> None:
        self._sock: Optional[socket.socket] = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    @property
    def local_address(self) -> Address:
        """The address the socket is bound to."""
        host, port = self._require_open().getsockname()[:2]
        return host, port

    def _new_socket(self) -> socket.socket:
        self.shutdown()
        return socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)

    def _require_open(self) -> socket.socket:
        if self._sock is None:
            raise RuntimeError("socket is not open")
        return self._sock

    def open_as_server(self, port: int) -> None:
        """Bind to ``port`` on all interfaces; raise OSError on failure."""
        sock = self._new_socket()
        try:
            sock.bind(("", port))
            sock.setblocking(False)
        except OSError:
            sock.close()
            raise
        self._sock = sock

    def open_as_client(self) -> None:
        """Open an unbound socket for talking to a server."""
        sock = self._new_socket()
        try:
            sock.setblocking(False)
        except OSError:
            sock.close()
            raise
        self._sock = sock

    def get_data(self, size: int = MAX_MESSAGE_DATA_SIZE) -> Optional[Message]:
        """Return the next waiting datagram, or None if nothing was received."""
        sock = self._require_open()
        try:
            data, sender = sock.recvfrom(size)
        except OSError:
            return None
        if not data:
            return None
        return Message(data=data, sender_address=(sender[0], sender[1]))

    def send_data(self, data: Union[bytes, bytearray, memoryview], destination: Address) -> int:
        """Send ``data`` to ``destination``; return bytes sent, 0 if sending failed."""
        sock = self._require_open()
        try:
            return sock.sendto(bytes(data), destination)
        except OSError:
            return 0

    def shutdown(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "UdpSocket":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()