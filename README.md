# chunkb64

Base64 encoding and decoding that produces its output lazily and hands it
back in pieces of whatever size you ask for. Input is taken from bytes,
strings, file-like objects or iterables, and is read as output is requested
(streams are read 1024 units at a time), so large files and slow streams
need not be held in memory.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Quick use

For data already in memory, use the one-shot helpers in `chunkb64.codec`:

```python
from chunkb64.codec import encode, decode

text = encode(b"hello world--")   # "aGVsbG8gd29ybGQtLQ=="
raw = decode(text)                # b"hello world--\x00"
```

## Sources

`encode`, `decode`, `Encoder` and `Decoder` all accept any of these:

- `bytes`, `bytearray` or `memoryview`;
- `str`, taken as UTF-8;
- an object with a `read` method, binary or text (text is encoded as UTF-8);
- an iterable of byte values (integers 0–255) or of any of the above.

Anything else raises `TypeError`; an integer outside 0–255 raises
`ValueError`.

## Streaming

`Encoder` and `Decoder` wrap a source and produce output on demand.

- `read(size)` returns at most `size` units of output (characters for
  `Encoder`, bytes for `Decoder`). A negative size (the default) returns
  everything that is left. An empty result means the output is exhausted.
  A size of `0` raises `ValueError`.
- Iterating over either object yields successive chunks of up to 1024 units.

If an error is met part way through a `read`, the output produced before it is
returned, and the error is raised on the next call.

```python
from chunkb64.codec import Encoder, Decoder, Base64Error

with open("picture.jpg", "rb") as src, open("picture.b64", "w") as dst:
    for chunk in Encoder(src):
        dst.write(chunk)

with open("picture.b64", "rb") as src, open("copy.jpg", "wb") as dst:
    try:
        for chunk in Decoder(src):
            dst.write(chunk)
    except Base64Error as exc:
        print("bad input:", exc)
```

`Base64Error` is a subclass of `ValueError`. The module also exposes
`ALPHABET`, the 64 characters used for encoding.

## How the format behaves

These rules differ from the standard library's `base64` module:

- **Encoding** always ends the text with at least one `=`: two after a final
  group holding one byte, and one otherwise, including when the input length
  is a multiple of three. Encoding an empty input raises `Base64Error`.
- **Decoding** accepts the standard alphabet and its URL-safe variants
  (`-` and `.` for 62, `_` and `,` for 63), reads `=` as zero bits, and always
  yields three bytes for each group of four characters, so padding turns into
  trailing zero bytes rather than being stripped.
- An empty input, or input that ends part way through a group of four, raises
  `Base64Error`. A character outside the accepted set raises `Base64Error`,
  except as the first character of a group after the first, where it is read
  as zero.

## Command line

The package installs a `chunkb64` command:

```
chunkb64 encode [INPUT] [-o OUTPUT]
chunkb64 decode [INPUT] [-o OUTPUT]
chunkb64 demo
```

`encode` and `decode` read `INPUT` (standard input when left out) and write
to `OUTPUT` (standard output when left out). When `encode` writes to standard
output it adds a final newline. `demo` encodes and decodes a short sample
string and prints `done` or `error` after each. The exit status is `0` on
success and `1` when the input is invalid or a file cannot be opened.
The same runs as `python -m chunkb64.cli`.

## What it does not do

- It does not wrap encoded text into lines, and the decoder does not skip
  whitespace or line breaks: text with a trailing newline, such as the output
  of `chunkb64 encode` to the terminal, must have the newline removed before
  it is decoded.
- It does not strip the zero bytes that padding decodes to, so a round trip
  may return the data with up to two extra zero bytes at the end.