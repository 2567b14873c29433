# freqtab/patterns.py
"""
Named patterns for common frequency tables.

PATTERN TIPS
  - If the pattern contains a group, the first group (by opening paren) is
    what gets counted. Use this to e.g. count the first letter of words.
  - Patterns with `+` or `*` are scanned without overlap; everything else
    is scanned with overlap (every digraph in "abc": ab, bc).
  - Input is lower-cased before scanning, so write patterns in lower case.
"""

LETTER_CHARS = "[a-z]"
LETTER_DIGRAPHS = "[a-z]{2,2}"
LETTER_TRIGRAPHS = "[a-z]{3,3}"
MAIN30_CHARS = "[a-z.,;']"
MAIN30_DIGRAPHS = "[a-z.,;']{2,2}"
MAIN30_TRIGRAPHS = "[a-z.,;']{3,3}"
DIGRAPHS_NOSPC = "[^\n\t ]{2,2}"
CHARS = "."
DIGRAPHS = ".."
TRIGRAPHS = "..."

# a word cannot have ' at beginning or end
WORDS = "((([a-z])+('[a-z])?)+)"
NUMBERS = "(([+-])?[0-9]+([.][0-9]+)?([e][0-9]+)?)"

FIRST_LETTER = "([a-z])[a-z]*"
SECOND_LETTER = "[a-z]([a-z])[a-z]*"
THIRD_LETTER = "[a-z]{2,2}([a-z])[a-z]*"
LAST_LETTER = "[a-z]*([a-z])"
FIRST_DIGRAPH = "([a-z]{2,2})[a-z]*"
LAST_DIGRAPH = "[a-z]*([a-z]{2,2})"

PRESETS = {
    "letters": LETTER_CHARS,
    "digraphs": LETTER_DIGRAPHS,
    "trigraphs": LETTER_TRIGRAPHS,
    "main30": MAIN30_CHARS,
    "main30-digraphs": MAIN30_DIGRAPHS,
    "main30-trigraphs": MAIN30_TRIGRAPHS,
    "digraphs-nospace": DIGRAPHS_NOSPC,
    "chars": CHARS,
    "char-digraphs": DIGRAPHS,
    "char-trigraphs": TRIGRAPHS,
    "words": WORDS,
    "numbers": NUMBERS,
    "first-letter": FIRST_LETTER,
    "second-letter": SECOND_LETTER,
    "third-letter": THIRD_LETTER,
    "last-letter": LAST_LETTER,
    "first-digraph": FIRST_DIGRAPH,
    "last-digraph": LAST_DIGRAPH,
}


def resolve(name_or_pattern: str) -> str:
    """Preset name -> pattern; anything else is taken as a literal pattern."""
    return PRESETS.get(name_or_pattern, name_or_pattern)
