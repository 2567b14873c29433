# freqtab/main.py
"""
Command-line front end.

Examples:
    python -m freqtab.main --pattern letters                  # whole default corpus
    python -m freqtab.main --pattern digraphs --corpus no_prog --top 40
    python -m freqtab.main --pattern "([a-z])[a-z]*" --file notes.txt:3 --file mail.txt:1
    python -m freqtab.main --words 2 --file "000bigfiles/0 prose/shakespeare.txt"
    python -m freqtab.main --pattern words --workers 4 --quiet
    python -m freqtab.main --pattern words --clean --file scraped.html

--profile (or FREQTAB_PROF=1) prints phase timings and counters to stderr
at the end.
"""

from __future__ import annotations

import argparse
import sys

from freqtab import patterns, profkit
from freqtab.corpus import CORPORA, find_n_words, parse_file_spec, read_files
from freqtab.errors import FreqError
from freqtab.freqhash import FrequencyMap
from freqtab.paths import CTRL_TO_ESCAPE, MAX_TOKENS_TO_PRINT
from freqtab.printer import print_pairs, print_pairs_short, top_n


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Weighted frequency tables of pattern matches or word n-grams.")
    what = ap.add_mutually_exclusive_group(required=True)
    what.add_argument("--pattern", help=f"Preset ({', '.join(sorted(patterns.PRESETS))}) or a regular expression.")
    what.add_argument("--words", type=int, metavar="N", help="Count sequences of N consecutive words.")
    ap.add_argument("--corpus", choices=sorted(CORPORA), default=None,
                    help="Named corpus (default: all for --pattern, no_prog for --words).")
    ap.add_argument("--file", action="append", default=[], metavar="PATH[:MULT]",
                    help="Input file with optional multiplier; repeatable. Overrides --corpus.")
    ap.add_argument("--top", type=int, default=MAX_TOKENS_TO_PRINT, help="Print only the N most frequent (0 = all).")
    ap.add_argument("--short", action="store_true", help="Print sequences only, on one line.")
    ap.add_argument("--no-escape", action="store_true", help="Leave tabs and backslashes unescaped.")
    ap.add_argument("--tiebreak", action="store_true", help="Order equal weights by sequence.")
    ap.add_argument("--workers", type=int, default=1, help="Scan files in N processes.")
    ap.add_argument("--quiet", action="store_true", help="No per-file progress on stderr.")
    ap.add_argument("--clean", action="store_true", help="Repair HTML entities and mojibake before counting.")
    ap.add_argument("--profile", action="store_true", help="Print phase timings and counters to stderr.")
    return ap


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.profile:
        profkit.enable()

    if args.file:
        corpus = [parse_file_spec(s) for s in args.file]
    elif args.corpus:
        corpus = CORPORA[args.corpus]
    else:
        corpus = CORPORA["no_prog" if args.words is not None else "all"]

    fmap = FrequencyMap()
    try:
        if args.words is not None:
            find_n_words(fmap, args.words, corpus, workers=args.workers,
                         verbose=not args.quiet, clean=args.clean)
        else:
            read_files(fmap, patterns.resolve(args.pattern), corpus,
                       workers=args.workers, verbose=not args.quiet, clean=args.clean)
    except (FreqError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    pairs = top_n(fmap.export_sorted(tiebreak=args.tiebreak), args.top)
    if args.short:
        print_pairs_short(pairs)
    else:
        print_pairs(pairs, ctrl_to_escape=CTRL_TO_ESCAPE and not args.no_escape)

    if profkit.ENABLED:
        profkit.report()
    fmap.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())
