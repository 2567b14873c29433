# freqtab/corpus.py
"""
Corpus tables and multi-file drivers.

A corpus is a list of (path, multiplier). Every file contributes
`multiplier` in total to a pattern table (see scanner.py), so the
multipliers decide how much each kind of text counts, independent of
file size.

Drivers:
    read_files(fmap, pattern, corpus)        pattern frequency over a corpus
    find_n_words(fmap, word_count, corpus)   n-word windows over a corpus

Unreadable files are reported and skipped; a bad pattern aborts the run.

Parallel mode (workers > 1):
- Each file is scanned in its own process into its own FrequencyMap.
- The parent merges the per-file maps in corpus order, one at a time,
  so the shared map is only ever touched by one process.
"""

from __future__ import annotations

import sys
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, List, Sequence, Tuple

from freqtab.errors import EngineOutOfResources, ReadError
from freqtab.freqhash import FrequencyMap
from freqtab.paths import (
    C_PATH, CASUAL_PATH, FORMAL_PATH, JAVA_PATH, NET_PATH, NEWS_PATH,
    PERL_PATH, PROSE_PATH, RUBY_PATH, TEST_PATH,
)
from freqtab.scanner import scan_file
from freqtab.windows import extract_windows

Corpus = Sequence[Tuple[str, float]]

ALL: List[Tuple[str, float]] = [
    (PROSE_PATH, 18),
    (CASUAL_PATH, 25),
    (C_PATH, 4),
    (JAVA_PATH, 2),
    (PERL_PATH, 1),
    (RUBY_PATH, 1),
    (FORMAL_PATH, 15),
    (NEWS_PATH, 20),
]

NO_PROG: List[Tuple[str, float]] = [
    (PROSE_PATH, 18),
    (CASUAL_PATH, 25),
    (FORMAL_PATH, 15),
    (NEWS_PATH, 20),
]

PROGRAMMING: List[Tuple[str, float]] = [
    (C_PATH, 4),
    (JAVA_PATH, 2),
    (PERL_PATH, 1),
    (RUBY_PATH, 1),
]

TEST: List[Tuple[str, float]] = [
    (TEST_PATH, 4),
    (NET_PATH, 5),
]

CORPORA: Dict[str, List[Tuple[str, float]]] = {
    "all": ALL,
    "no_prog": NO_PROG,
    "programming": PROGRAMMING,
    "test": TEST,
}


def parse_file_spec(spec: str) -> Tuple[str, float]:
    """'path[:multiplier]' -> (path, multiplier); multiplier defaults to 1."""
    path, sep, mul = spec.rpartition(":")
    if not sep:
        return spec, 1.0
    try:
        return path, float(mul)
    except ValueError:
        # a colon that belongs to the path (e.g. C:\\data)
        return spec, 1.0


# ----------------------------
# per-file workers
# ----------------------------

def _scan_one(path: str, pattern: str, multiplier: float, clean: bool = False) -> FrequencyMap:
    fmap = FrequencyMap()
    scan_file(fmap, path, pattern, multiplier, clean=clean)
    return fmap


def _windows_one(path: str, word_count: int, multiplier: float, clean: bool = False) -> FrequencyMap:
    fmap = FrequencyMap()
    extract_windows(fmap, path, word_count, multiplier, clean=clean)
    return fmap


def _run(fmap: FrequencyMap, corpus: Corpus, job, arg, workers: int, verbose: bool,
         clean: bool = False) -> int:
    """
    Apply job(path, arg, multiplier, clean) -> FrequencyMap to every corpus file and
    merge the results into fmap in corpus order. Returns the number of files
    that contributed.
    """
    done = 0

    def collect(path, multiplier, get_result):
        nonlocal done
        try:
            part = get_result()
        except (ReadError, EngineOutOfResources) as e:
            print(f"[corpus] skip {path}: {e}", file=sys.stderr)
            return
        fmap.merge(part)
        done += 1
        if verbose:
            print(f"[corpus] done with {path} at {multiplier:g}", file=sys.stderr)

    if workers <= 1 or len(corpus) <= 1:
        for path, multiplier in corpus:
            collect(path, multiplier, lambda: job(path, arg, multiplier, clean))
        return done

    with ProcessPoolExecutor(max_workers=workers) as ex:
        futures = [(path, multiplier, ex.submit(job, path, arg, multiplier, clean))
                   for path, multiplier in corpus]
        for path, multiplier, fut in futures:
            collect(path, multiplier, fut.result)
    return done


def read_files(fmap: FrequencyMap, pattern: str, corpus: Corpus = ALL,
               *, workers: int = 1, verbose: bool = True, clean: bool = False) -> int:
    """
    Reads every file in `corpus` and adds the weighted frequency of each
    `pattern` match to `fmap`. Returns the number of files read.
    clean=True repairs HTML entities and mojibake in each file first.
    """
    return _run(fmap, corpus, _scan_one, pattern, workers, verbose, clean)


def find_n_words(fmap: FrequencyMap, word_count: int, corpus: Corpus = NO_PROG,
                 *, workers: int = 1, verbose: bool = True, clean: bool = False) -> int:
    """
    Finds all n-grams of `word_count` words. Defaults to every file except
    the programming ones.
    """
    if word_count < 1:
        raise ValueError(f"word_count must be >= 1, got {word_count}")
    return _run(fmap, corpus, _windows_one, word_count, workers, verbose, clean)
