import time

import pytest

from disarray.network.udp import MAX_MESSAGE_DATA_SIZE, Message, UdpSocket


def _receive(sock, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        message = sock.get_data()
        if message is not None:
            return message
        time.sleep(0.01)
    return None


@pytest.fixture
def server():
    sock = UdpSocket()
    sock.open_as_server(0)
    yield sock
    sock.shutdown()


@pytest.fixture
def client():
    sock = UdpSocket()
    sock.open_as_client()
    yield sock
    sock.shutdown()


def _server_address(server):
    return ("127.0.0.1", server.local_address[1])


def test_client_to_server(server, client):
    sent = client.send_data(b"hello", _server_address(server))
    assert sent == 5
    message = _receive(server)
    assert message.data == b"hello"
    assert message.length == 5
    assert message.sender_address[0] == "127.0.0.1"
    assert message.parsed is False


def test_server_replies_to_sender(server, client):
    client.send_data(b"ping", _server_address(server))
    request = _receive(server)
    server.send_data(b"pong", request.sender_address)
    reply = _receive(client)
    assert reply.data == b"pong"
    assert reply.sender_address[1] == server.local_address[1]


def test_full_size_message(server, client):
    payload = bytes(range(256)) * (MAX_MESSAGE_DATA_SIZE // 256)
    client.send_data(payload, _server_address(server))
    assert _receive(server).data == payload


def test_nothing_waiting_returns_none(server):
    assert server.get_data() is None


def test_message_length_tracks_data():
    assert Message(data=b"abc").length == 3
    assert Message().length == 0


def test_closed_socket_raises():
    sock = UdpSocket()
    assert sock.is_open is False
    with pytest.raises(RuntimeError):
        sock.get_data()
    with pytest.raises(RuntimeError):
        sock.send_data(b"x", ("127.0.0.1", 9))


def test_shutdown_closes(server):
    assert server.is_open is True
    server.shutdown()
    server.shutdown()
    assert server.is_open is False


def test_context_manager_closes():
    with UdpSocket() as sock:
        sock.open_as_client()
        assert sock.is_open is True
    assert sock.is_open is False


def test_bind_to_taken_port_raises(server):
    other = UdpSocket()
    with pytest.raises(OSError):
        other.open_as_server(server.local_address[1])
    assert other.is_open is False