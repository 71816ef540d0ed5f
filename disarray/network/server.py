"""UDP server that collects datagrams and keeps a list of known clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .udp import MAX_MESSAGE_DATA_SIZE, Address, Message, UdpSocket

__all__ = ["ClientFootprint", "Server"]


@dataclass
class ClientFootprint:
    """What the server remembers about a connected client."""

    address: Address
    id: int = 0
    last_msg_timestamp: int = 0


class Server:
    """A non-blocking UDP server with a packet queue and a client list."""

    def __init__(self) -> None:
        self.clients: list[ClientFootprint] = []
        self.received_packets: list[Message] = []
        self._socket = UdpSocket()

    @property
    def is_running(self) -> bool:
        return self._socket.is_open

    @property
    def address(self) -> Address:
        """The local address the server is bound to."""
        return self._socket.local_address

    @property
    def client_count(self) -> int:
        return len(self.clients)

    @property
    def stored_packet_count(self) -> int:
        return len(self.received_packets)

    def launch(self, port: int) -> None:
        """Start listening on ``port``; raise OSError on failure."""
        self._socket.open_as_server(port)

    def shut_down(self) -> None:
        """Close the socket and forget packets and clients."""
        self._socket.shutdown()
        self.received_packets.clear()
        self.clients.clear()

    def get_data(self) -> Optional[Message]:
        """Receive one datagram; queue and return it, or None if nothing came."""
        message = self._socket.get_data(MAX_MESSAGE_DATA_SIZE)
        if message is not None:
            self.received_packets.append(message)
        return message

    def send_data(
        self, client_index: int, data: Union[bytes, bytearray, memoryview]
    ) -> int:
        """Send ``data`` to a known client; raise IndexError if there is no such client."""
        if not 0 <= client_index < len(self.clients):
            raise IndexError(f"client index {client_index} does not exist")
        return self._socket.send_data(data, self.clients[client_index].address)

    def add_client(self, footprint: ClientFootprint) -> None:
        self.clients.append(footprint)

    def remove_client(self, index: int) -> bool:
        """Forget the client at ``index``; return False if there was none."""
        if 0 <= index < len(self.clients):
            del self.clients[index]
            return True
        return False

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

    def find_client_by_address(self, address: Address) -> Optional[int]:
        """Return the index of the client with this host and port, or None."""
        host, port = address
        for index, client in enumerate(self.clients):
            if client.address[0] == host and client.address[1] == port:
                return index
        return None

    def __enter__(self) -> "Server":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.is_running:
            self.shut_down()