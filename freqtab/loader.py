# freqtab/loader.py
"""
Whole-file loader.

Files are read into memory in one go as raw bytes; every later stage works
on single-byte characters. Optional repair of dirty text:
    - HTML entities (&amp; &eacute; ...) -> characters
    - mojibake like Ã¢\\x80\\x93 -> the intended character (ftfy)
after which the text is stored back as latin-1, with '?' for anything
outside it.
"""

import html

from ftfy import fix_text

from freqtab.errors import ReadError
from freqtab.paths import CASE_SENSITIVE


def clean_bytes(raw: bytes) -> bytes:
    text = raw.decode("utf-8", errors="ignore")
    text = fix_text(html.unescape(text))
    return text.encode("latin-1", errors="replace")


def read_file(path: str, *, lowercase: bool = not CASE_SENSITIVE, clean: bool = False) -> bytes:
    """
    Read the file at `path` and return its bytes.

    Args:
        lowercase: fold ASCII letters to lower case
        clean: run clean_bytes() on the content first
    Raises:
        ReadError if the file cannot be opened or read
    """
    try:
        with open(path, "rb") as f:
            buf = f.read()
    except OSError as e:
        raise ReadError(f"cannot read {path}: {e.strerror or e}") from e

    if clean:
        buf = clean_bytes(buf)
    if lowercase:
        buf = buf.lower()
    return buf
