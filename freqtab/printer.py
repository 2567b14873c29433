# freqtab/printer.py
"""
Printing ranked frequency tables.

Keys may contain newlines, tabs and other control bytes (e.g. from the
"chars" preset), so they are escaped before printing:
    \\n  newline      \\t  tab (ctrl_to_escape only)
    \\s  ASCII 14     \\b  backspace
    \\\\  backslash (ctrl_to_escape only)
"""

import sys
from typing import List, Sequence

from freqtab.freqhash import Pair
from freqtab.paths import CTRL_TO_ESCAPE

ASCII_SHIFT = "\x0e"

_ESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    ASCII_SHIFT: "\\s",
    "\b": "\\b",
    "\\": "\\\\",
}
_ESCAPES_MIN = {c: _ESCAPES[c] for c in ("\n", ASCII_SHIFT, "\b")}


def escape_sequence(sequence: str, ctrl_to_escape: bool = CTRL_TO_ESCAPE) -> str:
    table = _ESCAPES if ctrl_to_escape else _ESCAPES_MIN
    return "".join(table.get(c, c) for c in sequence)


def top_n(pairs: Sequence[Pair], n: int) -> List[Pair]:
    """First n pairs; n <= 0 keeps all of them."""
    if n > 0 and len(pairs) > n:
        return list(pairs[:n])
    return list(pairs)


def print_pairs(pairs: Sequence[Pair], file=None, ctrl_to_escape: bool = CTRL_TO_ESCAPE) -> None:
    """One `sequence weight` line per pair (weight truncated), then a blank line."""
    out = file or sys.stdout
    for p in pairs:
        print(f"{escape_sequence(p.key, ctrl_to_escape)} {int(p.value)}", file=out)
    print(file=out)


def print_pairs_short(pairs: Sequence[Pair], file=None) -> None:
    """Sequences only, space separated, on one line."""
    out = file or sys.stdout
    print("".join(f"{escape_sequence(p.key, True)} " for p in pairs), file=out)
