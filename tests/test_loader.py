# tests/test_loader.py
import pytest

from freqtab.errors import ReadError
from freqtab.loader import clean_bytes, read_file


def test_read_file_keeps_bytes(tmp_path):
    p = tmp_path / "a.txt"
    p.write_bytes(b"Hello\r\n\x00World")
    assert read_file(str(p), lowercase=False) == b"Hello\r\n\x00World"
    assert read_file(str(p), lowercase=True) == b"hello\r\n\x00world"


def test_read_file_missing(tmp_path):
    with pytest.raises(ReadError) as ei:
        read_file(str(tmp_path / "nope.txt"))
    assert isinstance(ei.value, OSError)


def test_clean_unescapes_html():
    assert clean_bytes(b"fish &amp; chips") == b"fish & chips"
    assert clean_bytes("caf\u00e9".encode("utf-8")) == b"caf\xe9"


def test_clean_replaces_non_latin1():
    assert clean_bytes("snow \u2603".encode("utf-8")) == b"snow ?"
