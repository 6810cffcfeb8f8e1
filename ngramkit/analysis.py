#!/usr/bin/env python3
"""
Analysis
========
Runs the full n-gram pass over a word source: normalize, aggregate, classify.

Usage:
    from ngramkit.analysis import analyze

    result = analyze({"cat": 10.0, "can": 5.0})
    result.tables[2]      # {'ca': 15.0, 'at': 10.0, 'an': 5.0}
    result.vowels         # {'a': 15.0}

Sharded mode (``workers > 1``) aggregates contiguous slices of the source
in separate processes and merges them in slice order by per-key addition.
Results match the sequential pass up to floating-point summation order.
"""

import logging
from collections.abc import Mapping
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from .aggregator import NGramAggregator
from .alphabet import is_valid_word
from .classifier import classify
from .errors import InvalidWordError
from .profiler import profile_stage
from .settings import get_setting

logger = logging.getLogger(__name__)

WordSource = Union[Mapping, Iterable[Tuple[str, float]]]


@dataclass
class AnalysisResult:
    """Everything the report builder needs, built once per pass."""
    tables: List[Dict[str, float]] = field(default_factory=lambda: [{}])
    totals: List[float] = field(default_factory=lambda: [0.0])
    vowels: Dict[str, float] = field(default_factory=dict)
    vowel_total: float = 0.0
    consonants: Dict[str, float] = field(default_factory=dict)
    consonant_total: float = 0.0
    word_count: int = 0

    @property
    def max_length(self) -> int:
        return len(self.tables) - 1

    @property
    def grand_total(self) -> float:
        """Sum of all per-length totals."""
        return sum(self.totals)

    def distinct_count(self, n: int) -> int:
        if n < 1 or n > self.max_length:
            return 0
        return len(self.tables[n])


def _pairs(source: WordSource) -> Iterable[Tuple[str, float]]:
    if isinstance(source, Mapping):
        return source.items()
    return source


def _aggregate_shard(pairs: List[Tuple[str, float]]) -> Tuple[list, list, int]:
    aggregator = NGramAggregator().add_all(pairs)
    return aggregator.tables, aggregator.totals, aggregator.word_count


def _aggregate_sharded(pairs: List[Tuple[str, float]], workers: int) -> NGramAggregator:
    shard_size = max(1, -(-len(pairs) // workers))
    shards = [pairs[i:i + shard_size] for i in range(0, len(pairs), shard_size)]

    merged = NGramAggregator()
    with ProcessPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order, so merge order is deterministic
        for index, (tables, totals, count) in enumerate(executor.map(_aggregate_shard, shards)):
            shard = NGramAggregator()
            shard.tables, shard.totals, shard.word_count = tables, totals, count
            merged.merge(shard)
            logger.info(f"Merged shard {index + 1}/{len(shards)} ({count} words)")
    return merged


def analyze(
    source: WordSource,
    workers: Optional[int] = None,
    progress_interval: Optional[int] = None,
    on_progress: Optional[Callable[[int], None]] = None,
) -> AnalysisResult:
    """
    Build n-gram tables and vowel/consonant subsets for a word source.

    Args:
        source: Mapping of word -> weight, or iterable of (word, weight) pairs
        workers: Process count for sharded aggregation (default from app.yaml)
        progress_interval: Progress cadence in words (default from app.yaml)
        on_progress: Callback receiving the running word count (sequential only)

    Returns:
        AnalysisResult

    Raises:
        InvalidWordError: If a word is empty or not lowercase a-z
        ValueError: If workers is less than 1
    """
    if workers is None:
        workers = int(get_setting("analysis.workers", 1) or 1)
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if progress_interval is None:
        progress_interval = int(get_setting("analysis.progress_interval", 10000) or 0)

    pairs = _pairs(source)

    with profile_stage("aggregate") as stage:
        if workers > 1:
            pair_list = list(pairs)
            for word, _ in pair_list:
                # Fail fast in the parent before spawning workers
                if not is_valid_word(word):
                    raise InvalidWordError(word)
            aggregator = _aggregate_sharded(pair_list, workers) if pair_list else NGramAggregator()
        else:
            aggregator = NGramAggregator(
                progress_interval=progress_interval,
                on_progress=on_progress,
            ).add_all(pairs)
        stage.items = aggregator.word_count

    logger.info(f"Aggregated {aggregator.word_count} words, max n-gram length {aggregator.max_length}")

    with profile_stage("classify", items=sum(len(table) for table in aggregator.tables)):
        classes = classify(aggregator.tables)

    return AnalysisResult(
        tables=aggregator.tables,
        totals=aggregator.totals,
        vowels=classes.vowels,
        vowel_total=classes.vowel_total,
        consonants=classes.consonants,
        consonant_total=classes.consonant_total,
        word_count=aggregator.word_count,
    )
