"""Command line interface: encode or decode files as Base64."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from contextlib import ExitStack
from typing import IO, Any

from chunkb64.codec import Base64Error, Decoder, Encoder

_DEMO_DECODED = b"hello world--"
_DEMO_ENCODED = "aGVsbG8gd29ybGQtLQ=="


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunkb64", description="Stream data to and from Base64."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, summary in (
        ("encode", "encode binary data to Base64 text"),
        ("decode", "decode Base64 text to binary data"),
    ):
        command = commands.add_parser(name, help=summary)
        command.add_argument(
            "input", nargs="?", help="file to read (default: standard input)"
        )
        command.add_argument(
            "-o", "--output", help="file to write (default: standard output)"
        )
    commands.add_parser("demo", help="encode and decode a sample string")
    return parser


def _pump(chunks: Iterable[Any], write: Callable[[Any], Any]) -> bool:
    try:
        for chunk in chunks:
            write(chunk)
    except Base64Error as exc:
        print(f"error: {exc}", file=sys.stderr)
        return False
    return True


def _demo() -> int:
    ok = True
    for chunks, render in (
        (Encoder(_DEMO_DECODED), str),
        (
            Decoder(_DEMO_ENCODED),
            lambda chunk: chunk.partition(b"\0")[0].decode("latin-1"),
        ),
    ):
        succeeded = _pump(chunks, lambda chunk: sys.stdout.write(render(chunk)))
        print()
        print("done" if succeeded else "error")
        ok = ok and succeeded
    return 0 if ok else 1


def _convert(command: str, input_path: str | None, output_path: str | None) -> int:
    encoding = command == "encode"
    with ExitStack() as stack:
        source: IO[bytes] = (
            stack.enter_context(open(input_path, "rb"))
            if input_path
            else sys.stdin.buffer
        )
        if output_path:
            target: IO[Any] = stack.enter_context(
                open(output_path, "w", encoding="ascii", newline="")
                if encoding
                else open(output_path, "wb")
            )
        else:
            target = sys.stdout if encoding else sys.stdout.buffer
        codec = Encoder(source) if encoding else Decoder(source)
        succeeded = _pump(codec, target.write)
        if encoding and not output_path:
            target.write("\n")
        target.flush()
    return 0 if succeeded else 1


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "demo":
        return _demo()
    try:
        return _convert(args.command, args.input, args.output)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())