#!/usr/bin/env python3
"""
N-Gram Aggregator
=================
Accumulates word weights into per-length n-gram frequency tables.

Every word is normalized first; each contiguous n-gram of the normalized
symbol string then receives the word's full weight. Tables are indexed by
n-gram length, index 0 is unused and always empty.

Totals are accumulated in the same order as the table entries, so two runs
over the same input order give bit-identical results. A different input
order (or sharded aggregation, see ``merge``) may differ by floating-point
rounding.

Usage:
    aggregator = NGramAggregator()
    for word, weight in {"cat": 10, "can": 5}.items():
        aggregator.add(word, weight)

    aggregator.tables[1]   # {'c': 15.0, 'a': 15.0, 't': 10.0, 'n': 5.0}
    aggregator.totals[1]   # 30.0
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .alphabet import is_valid_word
from .errors import InvalidWordError
from .normalizer import normalize

logger = logging.getLogger(__name__)

NGramTable = Dict[str, float]


class NGramAggregator:
    """Builds per-length n-gram tables from (word, weight) pairs."""

    def __init__(
        self,
        progress_interval: int = 0,
        on_progress: Optional[Callable[[int], None]] = None,
        validate: bool = True,
    ):
        """
        Args:
            progress_interval: Log and report progress every N words (0 = never)
            on_progress: Called with the running word count at each interval
            validate: Reject words that are empty or not lowercase a-z
        """
        self.tables: List[NGramTable] = [{}]
        self.totals: List[float] = [0.0]
        self.word_count = 0
        self.progress_interval = progress_interval
        self.on_progress = on_progress
        self.validate = validate

    @property
    def max_length(self) -> int:
        """Longest normalized word seen so far."""
        return len(self.tables) - 1

    def _ensure_length(self, length: int):
        while len(self.tables) <= length:
            self.tables.append({})
            self.totals.append(0.0)

    def add(self, word: str, weight: float):
        """Add every n-gram of ``word`` with the given weight."""
        if self.validate and not is_valid_word(word):
            raise InvalidWordError(word)

        symbols = normalize(word)
        length = len(symbols)
        self._ensure_length(length)

        for n in range(1, length + 1):
            counts = self.tables[n]
            for i in range(length - n + 1):
                ngram = symbols[i:i + n]
                counts[ngram] = counts.get(ngram, 0.0) + weight
                self.totals[n] += weight

        self.word_count += 1
        if self.progress_interval and self.word_count % self.progress_interval == 0:
            logger.info(f"Processed {self.word_count} words...")
            if self.on_progress:
                self.on_progress(self.word_count)

    def add_all(self, pairs: Iterable[Tuple[str, float]]) -> "NGramAggregator":
        for word, weight in pairs:
            self.add(word, weight)
        return self

    def merge(self, other: "NGramAggregator") -> "NGramAggregator":
        """
        Fold another aggregator's tables into this one by per-key addition.

        Used to combine shards; the result equals sequential aggregation up
        to floating-point summation order.
        """
        self._ensure_length(other.max_length)
        for n in range(1, other.max_length + 1):
            counts = self.tables[n]
            for ngram, weight in other.tables[n].items():
                counts[ngram] = counts.get(ngram, 0.0) + weight
            self.totals[n] += other.totals[n]
        self.word_count += other.word_count
        return self


def aggregate(pairs: Iterable[Tuple[str, float]], **kwargs) -> NGramAggregator:
    """Convenience wrapper: aggregate ``pairs`` into a fresh aggregator."""
    return NGramAggregator(**kwargs).add_all(pairs)
