"""Sending and receiving command frames over a local sequenced-packet socket.

Each call to :func:`command_send` transmits one frame as one packet, and
each call to :func:`command_recv` returns exactly one packet, so frame
boundaries are preserved by the socket itself.
"""

import errno
import os
import socket
import sys
from typing import Union

from .protocol import MAX_FRAME_SIZE

PathLike = Union[str, bytes, "os.PathLike[str]"]

# Size of sockaddr_un.sun_path, including room for the terminating nul.
SUN_PATH_SIZE = 104 if sys.platform == "darwin" or "bsd" in sys.platform else 108

_SEND_FLAGS = getattr(socket, "MSG_NOSIGNAL", 0)


def command_connect(path: PathLike) -> socket.socket:
    """Connect to the command socket at ``path`` and return the socket.

    A path beginning with a nul byte names an abstract socket (Linux only).
    Raises ``OSError`` with ``ENAMETOOLONG`` if the path does not fit in a
    socket address, or the error from the failed connection attempt.
    """
    raw = os.fsencode(path)
    if len(raw) >= SUN_PATH_SIZE:
        raise OSError(
            errno.ENAMETOOLONG,
            f"{os.strerror(errno.ENAMETOOLONG)}: socket path of {len(raw)} bytes",
        )
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_SEQPACKET)
    try:
        sock.connect(raw)
    except BaseException:
        sock.close()
        raise
    return sock


def command_send(sock: socket.socket, data: Union[bytes, bytearray, memoryview]) -> int:
    """Send ``data`` as a single packet and return the number of bytes sent.

    The call never raises SIGPIPE; a closed peer is reported as an
    ``OSError`` instead. Interrupted calls are retried.
    """
    return sock.sendmsg([bytes(data)], [], _SEND_FLAGS)


def command_recv(sock: socket.socket) -> bytes:
    """Receive one packet of at most ``MAX_FRAME_SIZE`` bytes.

    Returns an empty bytes object once the peer has closed the connection.
    Interrupted calls are retried.
    """
    data, _, _, _ = sock.recvmsg(MAX_FRAME_SIZE)
    return data