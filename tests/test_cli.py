import base64

import pytest

from chunkb64.cli import main
from chunkb64.codec import decode, encode


def _sample(length):
    return bytes((i * 53 + 7) % 256 for i in range(length))


def test_demo_output(capsys):
    assert main(["demo"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["aGVsbG8gd29ybGQtLQ==", "done", "hello world--", "done"]


def test_encode_file_to_file(tmp_path):
    data = _sample(5000)
    source = tmp_path / "input.bin"
    source.write_bytes(data)
    target = tmp_path / "output.b64"
    assert main(["encode", str(source), "-o", str(target)]) == 0
    assert target.read_text(encoding="ascii") == encode(data)


def test_encode_to_stdout(tmp_path, capsys):
    source = tmp_path / "input.bin"
    source.write_bytes(b"hello world--")
    assert main(["encode", str(source)]) == 0
    assert capsys.readouterr().out == "aGVsbG8gd29ybGQtLQ==\n"


def test_decode_file_to_file(tmp_path):
    data = _sample(3000)
    source = tmp_path / "input.b64"
    source.write_bytes(base64.b64encode(data))
    target = tmp_path / "output.bin"
    assert main(["decode", str(source), "-o", str(target)]) == 0
    assert target.read_bytes() == data


def test_encode_then_decode_files(tmp_path):
    data = _sample(1000)
    original = tmp_path / "original.bin"
    original.write_bytes(data)
    encoded = tmp_path / "encoded.b64"
    restored = tmp_path / "restored.bin"
    assert main(["encode", str(original), "-o", str(encoded)]) == 0
    assert main(["decode", str(encoded), "-o", str(restored)]) == 0
    result = restored.read_bytes()
    assert result[: len(data)] == data
    assert result == decode(encoded.read_text(encoding="ascii"))


def test_decode_invalid_input_reports_error(tmp_path, capsys):
    source = tmp_path / "bad.b64"
    source.write_bytes(b"YWJjYW!j")
    target = tmp_path / "out.bin"
    assert main(["decode", str(source), "-o", str(target)]) == 1
    assert "error" in capsys.readouterr().err
    assert target.read_bytes() == base64.b64decode("YWJj")


def test_encode_empty_file_fails(tmp_path, capsys):
    source = tmp_path / "empty.bin"
    source.write_bytes(b"")
    target = tmp_path / "out.b64"
    assert main(["encode", str(source), "-o", str(target)]) == 1
    assert "error" in capsys.readouterr().err
    assert target.read_text(encoding="ascii") == ""


def test_missing_input_file(tmp_path, capsys):
    assert main(["encode", str(tmp_path / "absent.bin")]) == 1
    assert "error" in capsys.readouterr().err


def test_missing_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2