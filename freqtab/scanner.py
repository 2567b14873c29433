"""
freqtab/scanner.py

Counts the weighted frequency of every pattern match in a file.

Pipeline per file:
  1) Compile the pattern (case-insensitive).
  2) Load the whole file and fold it to lower case.
  3) Pass one: count matches without touching any map.
  4) Pass two: same scan, each match adds multiplier / total to its key.

So every file contributes exactly `multiplier` to the map in total, no matter
how large it is. Use this to read several files and weight some more heavily
than others.

Overlap:
  Fixed-length patterns (letters, digraphs, ...) are scanned with overlap:
  the next search starts one byte past the previous match's start. Patterns
  with `+` or `*` (words, ...) restart at the previous match's end.

Key:
  If the pattern has a capturing group that matched something, the group is
  the key; otherwise the whole match is. Use this to e.g. count the first
  letter of every word: "([a-z])[a-z]*".
"""

from __future__ import annotations

import re
from typing import Optional

from freqtab.freqhash import FrequencyMap
from freqtab.loader import read_file
from freqtab.matcher import Match, Matcher, compile_pattern
from freqtab.paths import MAX_WORD_LEN
from freqtab.profkit import count, phase

_ILLEGAL = re.compile(rb"[^\x20-\x7e\n\t]")


class ScanContext:
    """Compiled pattern, overlap policy and the per-match weight for one file."""
    __slots__ = ("matcher", "overlap", "weight")

    def __init__(self, matcher: Matcher, overlap: bool, weight: float = 1.0):
        self.matcher = matcher
        self.overlap = overlap
        self.weight = weight


def overlap_p(pattern: str) -> bool:
    """Variable-length patterns (containing + or *) do not overlap."""
    return "+" not in pattern and "*" not in pattern


def legal_chars(sequence: bytes) -> bool:
    """Printable ASCII, newline and tab only."""
    return _ILLEGAL.search(sequence) is None


def _hash_inc(fmap: FrequencyMap, buffer: bytes, base: int, m: Match, value: float) -> None:
    s, e = m.key_span()
    sequence = buffer[base + s: base + e]
    if not legal_chars(sequence):
        return
    fmap.increment(sequence.decode("ascii"), value)


def scan_buffer(buffer: bytes, ctx: ScanContext, fmap: Optional[FrequencyMap] = None) -> int:
    """
    Walk `buffer` match by match and return the number of matches.

    With fmap=None nothing is recorded (counting pass); otherwise every legal
    key is incremented by ctx.weight. Each search only sees MAX_WORD_LEN bytes
    from the current position. A window without a match is skipped by half
    its width, so any match of up to MAX_WORD_LEN // 2 bytes starting in the
    skipped part would have been found inside it.
    """
    view = memoryview(buffer)
    length = len(buffer)
    matcher = ctx.matcher
    matches = 0
    i = 0

    while i < length:
        m = matcher.find(view[i: i + MAX_WORD_LEN])
        if m is None:
            if i + MAX_WORD_LEN >= length:
                break  # window reached the end of the buffer
            i += MAX_WORD_LEN // 2
            continue

        if fmap is not None:
            _hash_inc(fmap, buffer, i, m, ctx.weight)
        matches += 1

        if ctx.overlap:
            i += m.start + 1
        elif m.end > 0:
            i += m.end
        else:
            i += 1  # empty match at the window start

    return matches


def _scan(fmap: FrequencyMap, buffer: bytes, matcher: Matcher, multiplier: float) -> int:
    buffer = buffer.lower()
    ctx = ScanContext(matcher, overlap_p(matcher.text))

    with phase("scan.count_pass"):
        total = scan_buffer(buffer, ctx)
    count("scan.matches", total)
    if total == 0:
        return 0

    ctx.weight = multiplier / total

    # Accumulate privately so a failure part-way leaves fmap untouched.
    scratch = FrequencyMap()
    with phase("scan.weight_pass"):
        scan_buffer(buffer, ctx, scratch)
    fmap.merge(scratch)
    count("scan.keys", scratch.count)
    return total


def scan_bytes(fmap: FrequencyMap, buffer: bytes, pattern: str, multiplier: float = 1) -> int:
    """scan_file() on a buffer that is already in memory."""
    return _scan(fmap, buffer, compile_pattern(pattern), multiplier)


def scan_file(fmap: FrequencyMap, filename: str, pattern: str, multiplier: float = 1,
              *, clean: bool = False) -> int:
    """
    Reads the file at `filename`, finds all matches for `pattern` and adds
    their normalised frequency to `fmap`. With clean=True HTML entities and
    mojibake are repaired before scanning (see loader.clean_bytes).

    Returns:
        the number of matches in the file (0 leaves fmap unchanged)
    Raises:
        InvalidPattern: pattern does not compile
        ReadError: file cannot be read
        EngineOutOfResources: matcher ran out of memory; nothing was added
    """
    matcher = compile_pattern(pattern)
    buffer = read_file(filename, clean=clean)
    count("scan.files")
    return _scan(fmap, buffer, matcher, multiplier)
