# freqtab/profkit.py: per-phase timers and event counts for the scanning pipeline
# Off unless FREQTAB_PROF=1 or enable() is called (the CLI's --profile does that).
# Counts are per process: with --workers > 1 the scans run in children and
# only what the parent does is recorded.

import os
import sys
import time
from collections import defaultdict
from contextlib import contextmanager

ENABLED = os.getenv("FREQTAB_PROF", "0") == "1"
EVENTS = defaultdict(float)                    # event -> count
PHASES = defaultdict(lambda: [0, 0.0])         # phase -> [calls, total ms]


def enable(flag: bool = True):
    global ENABLED
    ENABLED = flag


def reset():
    EVENTS.clear()
    PHASES.clear()


def count(event: str, n: float = 1.0):
    """Add n to `event` (files read, matches found, ...)."""
    if ENABLED:
        EVENTS[event] += n


@contextmanager
def phase(name: str):
    """Time the enclosed block; repeated phases accumulate calls and ms."""
    if not ENABLED:
        yield
        return
    t0 = time.perf_counter()
    try:
        yield
    finally:
        rec = PHASES[name]
        rec[0] += 1
        rec[1] += (time.perf_counter() - t0) * 1000.0


def report(file=None):
    """
    Phases first (calls, total and mean ms), then events:
        [prof] scan.count_pass        3 calls      12.4 ms     4.1 ms/call
        [prof] scan.matches      10,482
    """
    file = file or sys.stderr
    for name in sorted(PHASES):
        calls, ms = PHASES[name]
        print(f"[prof] {name:<20} {calls:>6} calls {ms:>10,.1f} ms {ms / calls:>9,.2f} ms/call", file=file)
    for name in sorted(EVENTS):
        print(f"[prof] {name:<20} {EVENTS[name]:>10,.0f}", file=file)
