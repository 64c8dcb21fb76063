"""Blocking HTTP client, header and status types, and a thread-backed suspend/wait helper."""

__version__ = "0.1.0"
__all__ = ["cli", "client", "headers", "status", "suspend"]