"""Incremental Base64 encoding and decoding in chunks, with a command line tool."""

__version__ = "0.1.0"
__all__ = ["codec", "cli"]