"""
freqtab/windows.py

Counts sequences of N consecutive words ("n-grams"). This cannot be
expressed as a single pattern, so it has its own tokenizer.

A word starts at an ASCII letter or digit and runs over letters, digits and
apostrophes; trailing apostrophes are dropped:
    "don't"   -> don't
    "rock'n'" -> rock'n
    "'tis"    -> tis

Windows slide one word at a time, so "the quick brown fox" with N=2 gives
"the quick", "quick brown", "brown fox". A short window at the end of the
buffer is not counted.
"""

import re
from typing import Iterator

from freqtab.freqhash import FrequencyMap
from freqtab.loader import read_file
from freqtab.profkit import count, phase

_WORD = re.compile(rb"[a-z0-9][a-z0-9']*")


def iter_words(buffer: bytes) -> Iterator[str]:
    """Yield lower-cased words from a raw byte buffer."""
    for m in _WORD.finditer(buffer.lower()):
        yield m.group().rstrip(b"'").decode("ascii")


def iter_windows(buffer: bytes, word_count: int) -> Iterator[str]:
    """Yield every window of `word_count` consecutive words, joined by one space."""
    if word_count < 1:
        raise ValueError(f"word_count must be >= 1, got {word_count}")
    words = list(iter_words(buffer))
    for i in range(len(words) - word_count + 1):
        yield " ".join(words[i:i + word_count])


def extract_windows_bytes(fmap: FrequencyMap, buffer: bytes, word_count: int, multiplier: float = 1) -> int:
    """Increment fmap by `multiplier` for each window. Returns the number of windows."""
    n = 0
    with phase("windows.extract"):
        for words in iter_windows(buffer, word_count):
            fmap.increment(words, multiplier)
            n += 1
    count("windows.windows", n)
    return n


def extract_windows(fmap: FrequencyMap, filename: str, word_count: int, multiplier: float = 1,
                    *, clean: bool = False) -> int:
    """
    Find all sequences of `word_count` words in the file at `filename`,
    optionally repairing its text first.
    Raises ReadError if the file cannot be read.
    """
    buffer = read_file(filename, clean=clean)
    count("windows.files")
    return extract_windows_bytes(fmap, buffer, word_count, multiplier)
