"""Interactive echo clients that time each round trip."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple, Union

from echometer.metrics import RoundTrip, format_report, latency_microseconds
from echometer.protocol import BUFFER_SIZE, END_MESSAGE, Transport

Line = Union[str, bytes]


def _text(data: bytes) -> str:
    """Printable form of a reply, cut at its first NUL byte."""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _messages(lines: Iterable[Line]) -> Iterator[bytes]:
    """Split input lines into messages the way a fixed-size line reader does.

    Each read takes at most BUFFER_SIZE - 1 bytes and stops after a newline;
    the newline itself is not part of the message.
    """
    limit = BUFFER_SIZE - 1
    for line in lines:
        data = line.encode("utf-8") if isinstance(line, str) else bytes(line)
        while data:
            chunk, data = data[:limit], data[limit:]
            yield chunk.split(b"\n", 1)[0]


def _prompt(out: TextIO) -> None:
    out.write("> ")
    out.flush()


def connect_stream(
    transport: Transport = Transport.TCP,
    host: str = "127.0.0.1",
    port: Optional[int] = None,
) -> socket.socket:
    """Open a stream socket for the transport and connect it to the server."""
    if not transport.is_stream:
        raise ValueError(f"{transport.value} is not a stream transport")
    if port is None:
        port = transport.default_port
    sock = socket.socket(socket.AF_INET, transport.socket_type, transport.ip_protocol)
    try:
        sock.connect((host, port))
    except BaseException:
        sock.close()
        raise
    return sock


def run_stream_client(
    sock: socket.socket,
    lines: Iterable[Line],
    out: Optional[TextIO] = None,
) -> List[RoundTrip]:
    """Send each line over a connected stream socket and report each reply.

    Stops at the message "end", at the end of input, or on a failed send
    or read. Returns the timed exchanges.
    """
    out = out if out is not None else sys.stdout
    messages = _messages(lines)
    trips: List[RoundTrip] = []
    while True:
        _prompt(out)
        message = next(messages, None)
        if message is None:
            break
        start = time.monotonic_ns()
        try:
            sock.sendall(message)
        except OSError as exc:
            print(f"Send failed: {exc}", file=sys.stderr)
            break
        if message == END_MESSAGE:
            break
        try:
            reply = sock.recv(BUFFER_SIZE - 1)
        except OSError as exc:
            print(f"Read failed or connection closed: {exc}", file=sys.stderr)
            break
        if not reply:
            print("Read failed or connection closed", file=sys.stderr)
            break
        end = time.monotonic_ns()
        trip = RoundTrip(len(message), len(reply), latency_microseconds(start, end))
        trips.append(trip)
        out.write(format_report(_text(reply), trip))
        out.flush()
    return trips


def run_datagram_client(
    sock: socket.socket,
    address: Tuple[str, int],
    lines: Iterable[Line],
    out: Optional[TextIO] = None,
) -> List[RoundTrip]:
    """Send each line as a datagram to address and report each reply.

    Stops at the message "end", at the end of input, or on a failed send
    or receive. Returns the timed exchanges.
    """
    out = out if out is not None else sys.stdout
    messages = _messages(lines)
    trips: List[RoundTrip] = []
    while True:
        _prompt(out)
        message = next(messages, None)
        if message is None:
            break
        start = time.monotonic_ns()
        try:
            sent = sock.sendto(message, address)
        except OSError as exc:
            print(f"sendto failed: {exc}", file=sys.stderr)
            break
        if message == END_MESSAGE:
            out.write("Exiting.\n")
            out.flush()
            break
        try:
            reply, _ = sock.recvfrom(BUFFER_SIZE - 1)
        except OSError as exc:
            print(f"recvfrom failed: {exc}", file=sys.stderr)
            break
        end = time.monotonic_ns()
        trip = RoundTrip(sent, len(reply), latency_microseconds(start, end))
        trips.append(trip)
        out.write(format_report(_text(reply), trip, show_length=True))
        out.flush()
    return trips


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Echo client that measures round trips.")
    parser.add_argument(
        "--transport",
        choices=[t.value for t in Transport],
        default=Transport.TCP.value,
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run an interactive client on standard input; returns the exit status."""
    args = _parse_args(argv)
    transport = Transport(args.transport)
    port = args.port if args.port is not None else transport.default_port

    try:
        socket.inet_pton(socket.AF_INET, args.host)
    except OSError:
        print("Invalid address/ Address not supported", file=sys.stderr)
        return 1

    if transport.is_stream:
        try:
            sock = connect_stream(transport, args.host, port)
        except (OSError, OverflowError) as exc:
            print(f"Connection Failed: {exc}", file=sys.stderr)
            return 1
        with sock:
            run_stream_client(sock, sys.stdin)
        return 0

    try:
        sock = socket.socket(socket.AF_INET, transport.socket_type, transport.ip_protocol)
    except OSError as exc:
        print(f"socket creation failed: {exc}", file=sys.stderr)
        return 1
    with sock:
        run_datagram_client(sock, (args.host, port), sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())