"""Incremental Base64 encoding and decoding over byte sources.

Sources may be ``bytes``-like objects, strings (taken as UTF-8), binary or
text streams with a ``read`` method, or iterables of byte values or byte
chunks. Output is produced lazily and can be pulled in pieces of any size.

The encoder always ends its output with at least one ``=`` character: two
after a final group holding one byte, one otherwise. The decoder accepts the
standard and URL-safe alphabets, treats ``=`` as zero bits and always yields
three bytes for each group of four characters.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any, Generic, TypeVar

__all__ = ["ALPHABET", "Base64Error", "Decoder", "Encoder", "decode", "encode"]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

_PAD = "="
_PAD_BYTE = ord(_PAD)
_ZERO_BYTE = ord("A")
_CHUNK = 1024


def _build_decoding_table() -> tuple[int, ...]:
    table = [0] * 256
    for value, char in enumerate(ALPHABET):
        table[ord(char)] = value
    table[ord("-")] = 62
    table[ord(".")] = 62
    table[ord(",")] = 63
    table[ord("_")] = 63
    return tuple(table)


_DECODING_TABLE = _build_decoding_table()


class Base64Error(ValueError):
    """Raised when input cannot be encoded or decoded."""


def _chunks_to_bytes(chunks: Iterable[Any]) -> Iterator[int]:
    for item in chunks:
        if isinstance(item, int):
            if not 0 <= item <= 0xFF:
                raise ValueError(f"byte value out of range: {item}")
            yield item
        else:
            yield from _iter_bytes(item)


def _read_stream(read: Callable[[int], Any]) -> Iterator[int]:
    while chunk := read(_CHUNK):
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        yield from chunk


def _iter_bytes(source: Any) -> Iterator[int]:
    """Return an iterator over the byte values held by *source*."""
    if isinstance(source, str):
        return iter(source.encode("utf-8"))
    if isinstance(source, (bytes, bytearray, memoryview)):
        return iter(bytes(source))
    read = getattr(source, "read", None)
    if callable(read):
        return _read_stream(read)
    if isinstance(source, Iterable):
        return _chunks_to_bytes(source)
    raise TypeError(f"cannot read bytes from {type(source).__name__}")


def _encode_symbols(data: Iterator[int]) -> Iterator[str]:
    first = next(data, None)
    if first is None:
        raise Base64Error("cannot encode empty input")
    while True:
        group = [first, *islice(data, 2)]
        count = len(group)
        a, b, c = group + [0] * (3 - count)
        triplet = (a << 16) | (b << 8) | c
        for shift in (18, 12, 6, 0)[: count + 1]:
            yield ALPHABET[(triplet >> shift) & 0x3F]
        if count == 3:
            following = next(data, None)
            if following is not None:
                first = following
                continue
        yield from _PAD * (2 if count == 1 else 1)
        return


def _strict_digit(char: int) -> int:
    if char in (_ZERO_BYTE, _PAD_BYTE):
        return 0
    value = _DECODING_TABLE[char]
    if not value:
        raise Base64Error(f"invalid character {chr(char)!r}")
    return value


def _decode_octets(data: Iterator[int]) -> Iterator[int]:
    leading = next(data, None)
    if leading is None:
        raise Base64Error("unexpected end of input")
    digits = [_strict_digit(leading)]
    while True:
        for char in islice(data, 3):
            digits.append(_strict_digit(char))
        if len(digits) < 4:
            raise Base64Error("unexpected end of input")
        triplet = 0
        for digit in digits:
            triplet = (triplet << 6) | digit
        yield from triplet.to_bytes(3, "big")
        leading = next(data, None)
        if leading is None:
            return
        digits = [0 if leading == _PAD_BYTE else _DECODING_TABLE[leading]]


T = TypeVar("T")
R = TypeVar("R")


class _ChunkReader(Generic[T, R]):
    """Pulls transformed items out in pieces, remembering any failure."""

    def __init__(self, items: Iterator[T], join: Callable[[list[T]], R]) -> None:
        self._items = items
        self._join = join
        self._error: Base64Error | None = None

    def read(self, size: int = -1) -> R:
        """Return up to *size* items of output, everything if *size* is negative.

        An empty result means the output is exhausted. Output produced before
        an error is returned first; the error is raised on the next call.
        """
        if size == 0:
            raise ValueError("size must be non-zero")
        if self._error is not None:
            raise self._error
        source = self._items if size < 0 else islice(self._items, size)
        taken: list[T] = []
        try:
            for item in source:
                taken.append(item)
        except Base64Error as exc:
            self._error = exc
            if not taken:
                raise
        return self._join(taken)

    def __iter__(self) -> Iterator[R]:
        while chunk := self.read(_CHUNK):
            yield chunk


class Encoder(_ChunkReader[str, str]):
    """Encodes a byte source to Base64 text, piece by piece."""

    def __init__(self, source: Any) -> None:
        super().__init__(_encode_symbols(_iter_bytes(source)), "".join)

    def read(self, size: int = -1) -> str:
        """Return up to *size* characters of encoded text."""
        return super().read(size)

    def __iter__(self) -> Iterator[str]:
        return super().__iter__()


class Decoder(_ChunkReader[int, bytes]):
    """Decodes Base64 text from a source to bytes, piece by piece."""

    def __init__(self, source: Any) -> None:
        super().__init__(_decode_octets(_iter_bytes(source)), bytes)

    def read(self, size: int = -1) -> bytes:
        """Return up to *size* decoded bytes."""
        return super().read(size)

    def __iter__(self) -> Iterator[bytes]:
        return super().__iter__()


def encode(data: Any) -> str:
    """Encode all of *data* to Base64 text."""
    return "".join(_encode_symbols(_iter_bytes(data)))


def decode(text: Any) -> bytes:
    """Decode all of the Base64 *text* to bytes."""
    return bytes(_decode_octets(_iter_bytes(text)))