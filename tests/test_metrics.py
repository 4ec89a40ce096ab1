import pytest

from echometer.metrics import RoundTrip, format_report, latency_microseconds


def test_latency_zero():
    assert latency_microseconds(123_456_789, 123_456_789) == 0


@pytest.mark.parametrize("start", [0, 5_000, 2_000_000_000, 7_123_000_000])
def test_latency_within_second_matches_floor(start):
    end = start + 400_000
    assert latency_microseconds(start, end) == (end - start) // 1000


def test_latency_whole_seconds():
    start = 3 * 1_000_000_000
    assert latency_microseconds(start, start + 1_000_000_000) == 1_000_000


def test_latency_across_second_boundary_truncates_remainder():
    assert latency_microseconds(999_999_999, 1_000_000_000) == 1


def test_latency_monotonic():
    start = 10_000_000_000
    values = [latency_microseconds(start, start + d) for d in range(0, 5_000_000, 250_000)]
    assert values == sorted(values)


def test_roundtrip_derived_values():
    trip = RoundTrip(bytes_sent=5, bytes_received=5, latency_us=1_000_000)
    assert trip.total_bytes == 10
    assert trip.latency_seconds == 1.0
    assert trip.bytes_per_second == 10.0


def test_speed_scales_inverse_with_latency():
    fast = RoundTrip(bytes_sent=100, bytes_received=100, latency_us=500)
    slow = RoundTrip(bytes_sent=100, bytes_received=100, latency_us=1000)
    assert fast.bytes_per_second == pytest.approx(2 * slow.bytes_per_second)


def test_zero_latency_gives_infinite_speed():
    trip = RoundTrip(bytes_sent=3, bytes_received=3, latency_us=0)
    assert trip.bytes_per_second == float("inf")


def test_zero_latency_no_bytes_gives_nan():
    trip = RoundTrip(bytes_sent=0, bytes_received=0, latency_us=0)
    assert str(trip.bytes_per_second) == "nan"


def test_format_report_stream():
    trip = RoundTrip(bytes_sent=5, bytes_received=5, latency_us=1_000_000)
    report = format_report("HELLO", trip, show_length=False)
    assert report == (
        "R: HELLO\n"
        "Latency (RTT): 1000000 µs (1.000000 seconds)\n"
        "Transmission speed: 10.00 bytes/sec (0.01 KB/s)\n\n"
    )


def test_format_report_datagram_shows_length():
    trip = RoundTrip(bytes_sent=2, bytes_received=2, latency_us=250)
    report = format_report("HI", trip, show_length=True)
    assert report.startswith("Received msg: HI (length: 2)\n")
    assert report.endswith("\n\n")


def test_format_report_line_count():
    trip = RoundTrip(bytes_sent=1, bytes_received=1, latency_us=42)
    lines = format_report("X", trip).split("\n")
    assert lines[0] == "R: X"
    assert lines[1].startswith("Latency (RTT): 42 µs")
    assert lines[2].startswith("Transmission speed: ")
    assert lines[3:] == ["", ""]


def test_format_report_infinite_speed():
    trip = RoundTrip(bytes_sent=1, bytes_received=1, latency_us=0)
    assert "inf bytes/sec" in format_report("Y", trip)