"""Wire-level rules shared by the echo servers and clients."""

from __future__ import annotations

import enum
import socket

BUFFER_SIZE = 1024
STREAM_PORT = 20000
DATAGRAM_PORT = 9876
IPPROTO_MPTCP = getattr(socket, "IPPROTO_MPTCP", 262)
END_MESSAGE = b"end"


class Transport(enum.Enum):
    """The transports an echo session can run over."""

    TCP = "tcp"
    MPTCP = "mptcp"
    UDP = "udp"

    @property
    def socket_type(self) -> int:
        """Socket type used to open a socket for this transport."""
        if self is Transport.UDP:
            return socket.SOCK_DGRAM
        return socket.SOCK_STREAM

    @property
    def ip_protocol(self) -> int:
        """Protocol number passed when opening the socket (0 means default)."""
        if self is Transport.MPTCP:
            return IPPROTO_MPTCP
        return 0

    @property
    def default_port(self) -> int:
        """Port the server listens on by default."""
        if self is Transport.UDP:
            return DATAGRAM_PORT
        return STREAM_PORT

    @property
    def is_stream(self) -> bool:
        """True for connection-oriented transports."""
        return self.socket_type == socket.SOCK_STREAM


def _c_string(data: bytes) -> bytes:
    """Return data up to its first NUL byte."""
    return bytes(data).split(b"\0", 1)[0]


def strip_line(data: bytes) -> bytes:
    """Return data up to the first newline or NUL byte."""
    return _c_string(data).split(b"\n", 1)[0]


def to_uppercase(data: bytes) -> bytes:
    """Uppercase ASCII letters of a NUL-terminated message."""
    return _c_string(data).upper()


def ascii_uppercase(data: bytes) -> bytes:
    """Uppercase the ASCII letters a-z of the whole buffer, NUL bytes included."""
    return bytes(data).upper()


def is_end(data: bytes) -> bool:
    """True if the message asks to end the session."""
    return strip_line(data) == END_MESSAGE