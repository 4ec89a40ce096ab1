"""Uppercase echo servers and round-trip latency clients over TCP, MPTCP and UDP."""

__version__ = "0.1.0"
__all__ = ["client", "metrics", "protocol", "server"]