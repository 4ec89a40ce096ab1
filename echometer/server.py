"""Echo servers that answer each message with its uppercase form."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Optional, Sequence, TextIO

from echometer.protocol import (
    BUFFER_SIZE,
    Transport,
    ascii_uppercase,
    is_end,
    strip_line,
    to_uppercase,
)


def _text(data: bytes) -> str:
    """Printable form of a message, cut at its first NUL byte."""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _say(out: TextIO, line: str) -> None:
    out.write(line + "\n")
    out.flush()


def handle_stream_message(data: bytes) -> Optional[bytes]:
    """Reply for one stream message, or None when the client asks to end."""
    if is_end(data):
        return None
    return to_uppercase(strip_line(data))


def handle_datagram(data: bytes) -> bytes:
    """Reply for one datagram: the same bytes with a-z uppercased."""
    return ascii_uppercase(data)


def open_stream_listener(
    transport: Transport = Transport.TCP,
    host: str = "",
    port: Optional[int] = None,
) -> socket.socket:
    """Open, bind and listen on a stream socket for the given transport."""
    if not transport.is_stream:
        raise ValueError(f"{transport.value} is not a stream transport")
    if port is None:
        port = transport.default_port
    listener = socket.socket(socket.AF_INET, transport.socket_type, transport.ip_protocol)
    try:
        listener.bind((host, port))
        listener.listen(3)
    except BaseException:
        listener.close()
        raise
    return listener


def serve_stream(listener: socket.socket, out: Optional[TextIO] = None) -> int:
    """Accept one client and echo its messages until it ends or disconnects.

    Returns the number of messages answered.
    """
    out = out if out is not None else sys.stdout
    _say(out, "Waiting for a connection...")
    connection, _ = listener.accept()
    _say(out, "New connection accepted.")
    answered = 0
    with connection:
        while True:
            try:
                data = connection.recv(BUFFER_SIZE)
            except OSError:
                break
            if not data:
                break
            reply = handle_stream_message(data)
            if reply is None:
                _say(out, "Bye")
                break
            _say(out, f"Message: {_text(strip_line(data))}")
            try:
                connection.sendall(reply)
            except OSError:
                break
            answered += 1
    return answered


def serve_datagrams(
    sock: socket.socket,
    out: Optional[TextIO] = None,
    limit: Optional[int] = None,
) -> int:
    """Echo datagrams on a bound socket, uppercased.

    Runs until ``limit`` datagrams have been handled, or forever when it is
    None. Returns the number of datagrams handled.
    """
    out = out if out is not None else sys.stdout
    _say(out, f"UDP Server listening on port {sock.getsockname()[1]}")
    handled = 0
    while limit is None or handled < limit:
        try:
            data, client = sock.recvfrom(BUFFER_SIZE - 1)
        except OSError as exc:
            print(f"recvfrom failed: {exc}", file=sys.stderr)
            if sock.fileno() == -1:
                break
            continue
        _say(
            out,
            f"Received message: {_text(data)} (length {len(data)}) "
            f"from {client[0]}:{client[1]}",
        )
        try:
            sock.sendto(handle_datagram(data), client)
        except OSError as exc:
            print(f"sendto failed: {exc}", file=sys.stderr)
        handled += 1
    return handled


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Uppercasing echo server.")
    parser.add_argument(
        "--transport",
        choices=[t.value for t in Transport],
        default=Transport.TCP.value,
    )
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run an echo server; returns the process exit status."""
    args = _parse_args(argv)
    transport = Transport(args.transport)
    port = args.port if args.port is not None else transport.default_port

    if transport.is_stream:
        try:
            listener = open_stream_listener(transport, args.host, port)
        except (OSError, OverflowError) as exc:
            print(f"Bind failed: {exc}", file=sys.stderr)
            return 1
        with listener:
            serve_stream(listener)
        return 0

    try:
        sock = socket.socket(socket.AF_INET, transport.socket_type, transport.ip_protocol)
    except OSError as exc:
        print(f"socket creation failed: {exc}", file=sys.stderr)
        return 1
    with sock:
        try:
            sock.bind((args.host, port))
        except (OSError, OverflowError) as exc:
            print(f"bind failed: {exc}", file=sys.stderr)
            return 1
        serve_datagrams(sock)
    return 0


if __name__ == "__main__":
    sys.exit(main())