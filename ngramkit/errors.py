#!/usr/bin/env python3
"""
Exceptions
==========
Error types raised by ngramkit. All derive from ``ValueError`` so callers
that only care about "bad input" can catch that.
"""


class NGramKitError(ValueError):
    """Base class for ngramkit errors."""


class InvalidWordError(NGramKitError):
    """A word is empty or contains characters outside a-z."""

    def __init__(self, word: str, reason: str = "must be non-empty lowercase a-z"):
        self.word = word
        super().__init__(f"Invalid word {word!r}: {reason}")


class InvalidTopKError(NGramKitError):
    """The requested top-K count is outside the allowed range."""

    def __init__(self, top_k, low: int, high: int):
        self.top_k = top_k
        super().__init__(f"top_k must be an integer in [{low}, {high}], got {top_k!r}")


class DatasetError(NGramKitError):
    """A word dataset file could not be read or failed validation."""
