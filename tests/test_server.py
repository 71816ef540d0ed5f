import socket
import time

import pytest

from disarray.network.server import ClientFootprint, Server
from disarray.network.udp import Message


@pytest.fixture
def peer():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


def _poll(server, attempts=200):
    for _ in range(attempts):
        message = server.get_data()
        if message is not None:
            return message
        time.sleep(0.01)
    return None


def test_receive_and_reply(peer):
    with Server() as server:
        server.launch(0)
        assert server.is_running
        port = server.address[1]
        peer.sendto(b"hello", ("127.0.0.1", port))
        message = _poll(server)
        assert message is not None
        assert message.data == b"hello"
        assert message.length == len(b"hello")
        assert server.fetch_packet(0) is message

        server.add_client(ClientFootprint(address=message.sender_address, id=1))
        index = server.find_client_by_address(peer.getsockname())
        assert index == 0
        assert server.send_data(index, b"welcome") == len(b"welcome")
        data, _ = peer.recvfrom(64)
        assert data == b"welcome"
    assert server.is_running is False


def test_get_data_without_traffic_returns_none():
    server = Server()
    server.launch(0)
    try:
        assert server.get_data() is None
        assert server.stored_packet_count == 0
    finally:
        server.shut_down()


def test_send_to_unknown_client_raises():
    server = Server()
    server.launch(0)
    try:
        with pytest.raises(IndexError):
            server.send_data(0, b"x")
    finally:
        server.shut_down()


def test_client_bookkeeping():
    server = Server()
    server.add_client(ClientFootprint(address=("127.0.0.1", 5000), id=1))
    server.add_client(ClientFootprint(address=("127.0.0.1", 5001), id=2))
    assert server.client_count == 2
    assert server.find_client_by_address(("127.0.0.1", 5001)) == 1
    assert server.find_client_by_address(("127.0.0.2", 5001)) is None
    assert server.remove_client(0) is True
    assert server.find_client_by_address(("127.0.0.1", 5001)) == 0
    assert server.remove_client(3) is False
    assert server.client_count == 1


def test_packet_queue():
    server = Server()
    server.received_packets.extend([Message(data=b"a"), Message(data=b"b")])
    assert server.fetch_packet(1).data == b"b"
    assert server.fetch_packet(-1) is None
    assert server.discard_packet(0) is True
    assert server.fetch_packet(0).data == b"b"
    assert server.discard_packet(4) is False


def test_shut_down_forgets_everything():
    server = Server()
    server.launch(0)
    server.add_client(ClientFootprint(address=("127.0.0.1", 5000)))
    server.received_packets.append(Message(data=b"a"))
    server.shut_down()
    assert (server.client_count, server.stored_packet_count) == (0, 0)
    assert server.is_running is False