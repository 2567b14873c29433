# tests/test_windows.py
import pytest

from freqtab.errors import ReadError
from freqtab.freqhash import FrequencyMap
from freqtab.windows import extract_windows, extract_windows_bytes, iter_windows, iter_words


@pytest.mark.parametrize("text,expected", [
    (b"the quick brown fox", ["the", "quick", "brown", "fox"]),
    (b"Don't STOP", ["don't", "stop"]),
    (b"rock'n'", ["rock'n"]),
    (b"'tis", ["tis"]),
    (b"a''b", ["a''b"]),
    (b"dogs'' bark", ["dogs", "bark"]),
    (b"foo_bar-baz", ["foo", "bar", "baz"]),
    (b"COVID19 c3po", ["covid19", "c3po"]),
    (b"3.14", ["3", "14"]),
    (b"caf\xe9 au lait", ["caf", "au", "lait"]),
    (b"...", []),
    (b"", []),
])
def test_iter_words(text, expected):
    assert list(iter_words(text)) == expected


def test_two_word_windows():
    h = FrequencyMap()
    n = extract_windows_bytes(h, b"the quick brown fox", 2)
    assert n == 3
    assert {k: v for k, v in h.items()} == {"the quick": 1, "quick brown": 1, "brown fox": 1}


def test_windows_slide_one_word():
    assert list(iter_windows(b"a b c d e", 3)) == ["a b c", "b c d", "c d e"]
    assert list(iter_windows(b"a b", 1)) == ["a", "b"]


def test_partial_window_is_dropped():
    h = FrequencyMap()
    assert extract_windows_bytes(h, b"only two", 3) == 0
    assert h.count == 0
    # punctuation at the end does not produce a short window
    assert list(iter_windows(b"the quick.", 2)) == ["the quick"]


def test_repeated_windows_accumulate_multiplier():
    h = FrequencyMap()
    extract_windows_bytes(h, b"A b, a B.", 2, multiplier=5)
    assert h.get("a b") == 10
    assert h.get("b a") == 5
    assert h.count == 2


def test_word_count_must_be_positive():
    with pytest.raises(ValueError):
        extract_windows_bytes(FrequencyMap(), b"a b", 0)


def test_extract_windows_file(tmp_path):
    p = tmp_path / "w.txt"
    p.write_bytes(b"To be, or not to be.\n")
    h = FrequencyMap()
    assert extract_windows(h, str(p), 2, 1) == 5
    assert h.get("to be") == 2
    assert h.get("or not") == 1

    with pytest.raises(ReadError):
        extract_windows(h, str(tmp_path / "missing.txt"), 2, 1)
