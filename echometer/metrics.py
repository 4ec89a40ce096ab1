"""Round-trip timing and throughput reporting."""

from __future__ import annotations

from dataclasses import dataclass

_NS_PER_SECOND = 1_000_000_000


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def latency_microseconds(start_ns: int, end_ns: int) -> int:
    """Microseconds between two monotonic timestamps given in nanoseconds.

    Whole seconds and the nanosecond remainders are combined separately,
    the remainder difference being truncated toward zero.
    """
    start_sec, start_nsec = divmod(start_ns, _NS_PER_SECOND)
    end_sec, end_nsec = divmod(end_ns, _NS_PER_SECOND)
    return (end_sec - start_sec) * 1_000_000 + _trunc_div(end_nsec - start_nsec, 1000)


@dataclass(frozen=True)
class RoundTrip:
    """One request/reply exchange."""

    bytes_sent: int
    bytes_received: int
    latency_us: int

    @property
    def latency_seconds(self) -> float:
        """Round-trip time in seconds."""
        return self.latency_us / 1e6

    @property
    def total_bytes(self) -> int:
        """Bytes sent plus bytes received."""
        return self.bytes_sent + self.bytes_received

    @property
    def bytes_per_second(self) -> float:
        """Bytes moved per second of round-trip time."""
        seconds = self.latency_seconds
        if seconds == 0:
            if self.total_bytes == 0:
                return float("nan")
            return float("inf") if self.total_bytes > 0 else float("-inf")
        return self.total_bytes / seconds


def format_report(reply: str, trip: RoundTrip, show_length: bool = False) -> str:
    """Render the reply, latency and speed of one exchange."""
    if show_length:
        head = f"Received msg: {reply} (length: {trip.bytes_received})\n"
    else:
        head = f"R: {reply}\n"
    speed = trip.bytes_per_second
    return (
        head
        + f"Latency (RTT): {trip.latency_us} µs ({trip.latency_seconds:.6f} seconds)\n"
        + f"Transmission speed: {speed:.2f} bytes/sec ({speed / 1024:.2f} KB/s)\n\n"
    )