"""UDP client that keeps only the datagrams sent by its server."""

from __future__ import annotations

from typing import Optional, Union

from .udp import MAX_MESSAGE_DATA_SIZE, Address, Message, UdpSocket

__all__ = ["Client"]


class Client:
    """Talks to a single server and queues the packets it receives from it."""

    def __init__(self, server_address: Optional[Address] = None) -> None:
        self.server_address: Optional[Address] = server_address
        self.received_packets: list[Message] = []
        self._socket = UdpSocket()

    @property
    def is_open(self) -> bool:
        return self._socket.is_open

    @property
    def stored_packet_count(self) -> int:
        return len(self.received_packets)

    def open(self) -> None:
        """Open the client socket; raise OSError on failure."""
        self._socket.open_as_client()

    def get_data(self) -> Optional[Message]:
        """Receive one datagram; queue and return it if it came from the server."""
        message = self._socket.get_data(MAX_MESSAGE_DATA_SIZE)
        if message is None or message.sender_address != self.server_address:
            return None
        self.received_packets.append(message)
        return message

    def send_data(self, data: Union[bytes, bytearray, memoryview]) -> int:
        """Send ``data`` to the server; return the number of bytes sent."""
        if self.server_address is None:
            raise ValueError("no server address set")
        return self._socket.send_data(data, self.server_address)

    def shutdown(self) -> None:
        """Drop queued packets and close the socket."""
        self.received_packets.clear()
        self._socket.shutdown()

    def fetch_packet(self, idx: int) -> Optional[Message]:
        """Return the queued packet at ``idx``, or None if there is none."""
        if 0 <= idx < len(self.received_packets):
            return self.received_packets[idx]
        return None

    def discard_packet(self, idx: int) -> bool:
        """Remove the queued packet at ``idx``; return False if there was none."""
        if 0 <= idx < len(self.received_packets):
            del self.received_packets[idx]
            return True
        return False

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()