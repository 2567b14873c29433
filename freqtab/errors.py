# freqtab/errors.py
"""
Error taxonomy for the frequency pipeline.

Each error also subclasses the closest builtin so callers that only know
about OSError / ValueError / MemoryError still catch it.

    AllocationFailure     map or buffer storage could not be allocated (fatal)
    ReadError             file missing or unreadable (skip the file)
    InvalidPattern        pattern failed to compile (abort that scan)
    EngineOutOfResources  matcher ran out of working memory mid-scan
"""


class FreqError(Exception):
    """Base class for every error raised by freqtab."""


class AllocationFailure(FreqError, MemoryError):
    pass


class ReadError(FreqError, OSError):
    pass


class InvalidPattern(FreqError, ValueError):
    pass


class EngineOutOfResources(FreqError, RuntimeError):
    pass
