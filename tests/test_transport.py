import errno
import os
import shutil
import socket
import tempfile

import pytest

from xtrlog.protocol import (
    MAX_FRAME_SIZE,
    Error,
    LogLevel,
    Pattern,
    PatternType,
    SetLevel,
    SinkInfo,
    Success,
    decode_frame,
    encode_frame,
)
from xtrlog.transport import (
    SUN_PATH_SIZE,
    command_connect,
    command_recv,
    command_send,
)


@pytest.fixture
def pair():
    a, b = socket.socketpair(socket.AF_UNIX, socket.SOCK_SEQPACKET)
    yield a, b
    a.close()
    b.close()


@pytest.fixture
def short_dir():
    path = tempfile.mkdtemp(prefix="xt")
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def listener(short_dir):
    path = os.path.join(short_dir, "cmd")
    srv = socket.socket(socket.AF_UNIX, socket.SOCK_SEQPACKET)
    srv.bind(path)
    srv.listen(1)
    yield path, srv
    srv.close()


def test_send_returns_byte_count(pair):
    a, b = pair
    frame = encode_frame(Success())
    assert command_send(a, frame) == len(frame)
    assert command_recv(b) == frame


def test_frame_round_trip(pair):
    a, b = pair
    request = SetLevel(LogLevel.DEBUG, Pattern(PatternType.WILDCARD, True, "sink*"))
    command_send(a, encode_frame(request))
    assert decode_frame(command_recv(b), SetLevel) == request


def test_packet_boundaries_preserved(pair):
    a, b = pair
    infos = [SinkInfo(LogLevel.INFO, 4096, 0, 0, "one"),
             SinkInfo(LogLevel.ERROR, 8192, 1024, 3, "two")]
    for info in infos:
        command_send(a, encode_frame(info))
    received = [decode_frame(command_recv(b), SinkInfo) for _ in infos]
    assert received == infos


def test_recv_returns_empty_on_close(pair):
    a, b = pair
    a.close()
    assert command_recv(b) == b""


def test_recv_limits_packet_to_max_frame_size(pair):
    a, b = pair
    command_send(a, b"x" * (MAX_FRAME_SIZE + 100))
    assert len(command_recv(b)) == MAX_FRAME_SIZE


def test_send_to_closed_peer_raises(pair):
    a, b = pair
    b.close()
    with pytest.raises(OSError):
        command_send(a, encode_frame(Success()))


def test_connect_and_exchange(listener):
    path, srv = listener
    client = command_connect(path)
    try:
        conn, _ = srv.accept()
        with conn:
            command_send(client, encode_frame(Success()))
            assert decode_frame(command_recv(conn), Success) == Success()
            command_send(conn, encode_frame(Error("no such sink")))
            assert decode_frame(command_recv(client), Error).reason == "no such sink"
    finally:
        client.close()


def test_connect_type_is_seqpacket(listener):
    path, srv = listener
    with command_connect(path) as client:
        assert client.type == socket.SOCK_SEQPACKET
        assert client.family == socket.AF_UNIX


def test_connect_missing_path_raises(short_dir):
    with pytest.raises(OSError):
        command_connect(os.path.join(short_dir, "absent"))


def test_connect_path_too_long():
    with pytest.raises(OSError) as info:
        command_connect("/" + "a" * SUN_PATH_SIZE)
    assert info.value.errno == errno.ENAMETOOLONG


def test_connect_path_at_limit_too_long():
    with pytest.raises(OSError) as info:
        command_connect("a" * SUN_PATH_SIZE)
    assert info.value.errno == errno.ENAMETOOLONG