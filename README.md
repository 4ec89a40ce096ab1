# echometer

Two command-line tools for measuring round-trip latency and throughput over
TCP, Multipath TCP (MPTCP) and UDP.

- **echometer-server** receives messages and sends each one back in upper case.
- **echometer-client** reads lines from standard input, sends each one to the
  server, and prints the reply, the round-trip time and an estimated
  transmission speed.

## Installation

```
pip install .
```

No third-party libraries are needed at run time. The MPTCP transport needs
an operating system whose kernel supports Multipath TCP.

## Usage

Start a server in one terminal:

```
echometer-server
```

Connect to it from another terminal:

```
echometer-client
```

Type a line at the `> ` prompt. For each reply the client prints lines like
these:

```
R: HELLO
Latency (RTT): 142 µs (0.000142 seconds)
Transmission speed: 70422.54 bytes/sec (68.77 KB/s)
```

Type `end` to close the session, or end the input (Ctrl-D).

### Options

Both commands take the same options:

- `--transport {tcp,mptcp,udp}`: the transport to use (default `tcp`).
- `--host HOST`: the address to bind to (server, default all interfaces) or
  to connect to (client, default `127.0.0.1`). The client accepts only an
  IPv4 address in dotted form.
- `--port PORT`: the port to use. Stream transports default to 20000 and UDP
  defaults to 9876.

Run either command with `--help` to see them.

## Behaviour

- The TCP and MPTCP servers listen with a backlog of 3, accept a single
  client and exit when that client sends `end` (printing `Bye`) or
  disconnects. Each message is cut at its first newline or NUL byte, logged
  as `Message: ...`, and sent back in upper case.
- The UDP server runs until it is stopped. For every datagram it logs the
  text, its length and the sender, upper-cases the ASCII letters `a` to `z`
  and sends the datagram back to the sender. Errors while receiving or
  sending are reported on standard error and the server carries on.
- The client splits long input lines into messages of at most 1023 bytes.
  It measures latency with a monotonic clock, from just before the send to
  just after the reply arrives. The speed figure is the bytes sent plus the
  bytes received, divided by that latency.
- Over UDP the client prints `Received msg: ... (length: N)` in place of
  `R: ...`, and prints `Exiting.` when it sends `end`. It waits for each
  reply without a timeout.
- The client stops at `end`, at the end of its input, or when a send or
  receive fails.

## Library use

The building blocks can also be imported:

- `echometer.protocol`: `Transport` (with `socket_type`, `ip_protocol`,
  `default_port` and `is_stream`), `strip_line`, `to_uppercase`,
  `ascii_uppercase`, `is_end`
- `echometer.metrics`: `RoundTrip` (with `latency_seconds`, `total_bytes`
  and `bytes_per_second`), `latency_microseconds`, `format_report`
- `echometer.server`: `open_stream_listener`, `serve_stream`,
  `serve_datagrams`, `handle_stream_message`, `handle_datagram`, `main`
- `echometer.client`: `connect_stream`, `run_stream_client`,
  `run_datagram_client`, `main`

`serve_datagrams` takes an optional `limit` on the number of datagrams to
handle, and the client functions return the list of timed `RoundTrip`
exchanges.

## What it does not do

The stream servers serve one client and then exit; there is no concurrent
or repeated serving. There is no IPv6 support.