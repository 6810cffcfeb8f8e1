#!/usr/bin/env python3
"""
Analysis Profiler
=================
Stage timing for the n-gram pipeline. Each stage records how long it took
and how much it handled: words for ``load`` and ``aggregate``, n-grams for
``classify`` and ``render``. The item count is often only known once the
stage has run, so ``stage()`` yields a run record whose ``items`` can be
set from inside the block.

Usage:
    ngramkit analyze --subtlex SUBTLEX.csv --profiling
    ngramkit analyze --subtlex SUBTLEX.csv --profiling --profile-output profile.json
"""

import json
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

# Unit of work per pipeline stage, shown in the report
STAGE_UNITS = {
    "load": "words",
    "aggregate": "words",
    "classify": "n-grams",
    "render": "n-grams",
}


@dataclass
class StageRun:
    """One timed pass through a stage."""
    items: int = 0
    seconds: float = 0.0


@dataclass
class StageStats:
    """All runs of one stage."""
    name: str
    runs: List[StageRun] = field(default_factory=list)

    @property
    def seconds(self) -> float:
        return sum(run.seconds for run in self.runs)

    @property
    def items(self) -> int:
        return sum(run.items for run in self.runs)

    @property
    def unit(self) -> str:
        return STAGE_UNITS.get(self.name, "items")

    @property
    def rate(self) -> float:
        """Items handled per second; 0 when nothing was counted or timed."""
        if not self.items or not self.seconds:
            return 0.0
        return self.items / self.seconds

    def to_dict(self) -> dict:
        return {
            'total_seconds': self.seconds,
            'count': len(self.runs),
            'items': self.items,
            'unit': self.unit,
            'per_item_ms': self.seconds / self.items * 1000 if self.items else 0.0,
            'items_per_second': self.rate,
        }


class AnalysisProfiler:
    """
    Profiler for the load / aggregate / classify / render stages.

    Example:
        profiler = AnalysisProfiler(enabled=True)
        profiler.start()

        with profiler.stage("load") as run:
            words = importer.weights()
            run.items = len(words)

        print(profiler.report())
    """

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.stages: Dict[str, StageStats] = {}
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def start(self):
        if self.enabled:
            self.start_time = time.perf_counter()

    def stop(self):
        if self.enabled and self.end_time is None:
            self.end_time = time.perf_counter()

    @property
    def total_time(self) -> float:
        if not self.start_time:
            return 0
        end = self.end_time or time.perf_counter()
        return end - self.start_time

    @contextmanager
    def stage(self, name: str, items: int = 0) -> Iterator[StageRun]:
        """
        Time a stage.

        Args:
            name: Stage name (e.g., "load", "aggregate")
            items: Items handled, if known up front; may be set on the
                yielded run instead

        Yields:
            StageRun for this pass (recorded only when enabled)
        """
        run = StageRun(items=items)
        if not self.enabled:
            yield run
            return

        start = time.perf_counter()
        try:
            yield run
        finally:
            run.seconds = time.perf_counter() - start
            self.stages.setdefault(name, StageStats(name)).runs.append(run)

    def report(self) -> str:
        """Text table of stage timings, slowest first."""
        if not self.enabled or not self.stages:
            return ""

        self.stop()
        total = self.total_time

        lines = [
            "",
            "=" * 64,
            "PROFILING REPORT",
            "=" * 64,
            f"Total time: {total:.2f}s",
            "",
        ]

        header = f"{'Stage':<11} {'Time':>8} {'%':>6} {'Items':>10} {'Unit':<8} {'Rate/s':>12}"
        lines.append(header)
        lines.append("-" * len(header))

        for stats in sorted(self.stages.values(), key=lambda s: -s.seconds):
            pct = (stats.seconds / total) * 100 if total > 0 else 0
            rate = f"{stats.rate:,.0f}" if stats.rate else "-"
            lines.append(
                f"{stats.name:<11} {stats.seconds:>7.2f}s {pct:>5.1f}% "
                f"{stats.items:>10,} {stats.unit:<8} {rate:>12}"
            )

        overhead = total - sum(s.seconds for s in self.stages.values())
        if overhead > 0.01:
            lines.append(f"{'(overhead)':<11} {overhead:>7.2f}s {(overhead/total)*100:>5.1f}%")

        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        self.stop()
        return {
            'total_seconds': self.total_time,
            'stages': {name: stats.to_dict() for name, stats in self.stages.items()},
        }

    def save_json(self, path):
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


_profiler: Optional[AnalysisProfiler] = None


def get_profiler() -> Optional[AnalysisProfiler]:
    return _profiler


def set_profiler(profiler: Optional[AnalysisProfiler]):
    """Install (or clear with None) the profiler used by ``profile_stage``."""
    global _profiler
    _profiler = profiler


@contextmanager
def profile_stage(name: str, items: int = 0) -> Iterator[StageRun]:
    """
    Time a stage on the installed profiler, if any.

    Always yields a StageRun, so callers can set ``items`` unconditionally.

    Example:
        with profile_stage("classify", items=ngram_count):
            classes = classify(tables)
    """
    profiler = get_profiler()
    if profiler:
        with profiler.stage(name, items) as run:
            yield run
    else:
        yield StageRun(items=items)
