#!/usr/bin/env python3
"""
Report Builder
==============
Turns an AnalysisResult into a human-readable report or a structured
(JSON-ready) document.

Text report layout:

    Total words processed: 2
    Total 1-grams counted: 4
    Top 10 1-grams:
    c: 15 (50%)
    ...

    Total weight of n-grams processed: 75

Lengths with no n-grams are skipped. Entries are ranked by descending
weight; ties keep the table's insertion order (first-seen n-gram first),
since ``sorted`` is stable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from .analysis import AnalysisResult
from .errors import InvalidTopKError
from .settings import get_setting


class ReportFormat(Enum):
    """Output format for ``render``."""
    TEXT = "text"
    JSON = "json"


@dataclass
class RankedNGram:
    ngram: str
    weight: float
    percent: float


def top_k_bounds() -> tuple:
    low = int(get_setting("report.min_top_k", 1))
    high = int(get_setting("report.max_top_k", 100))
    return low, high


def validate_top_k(top_k) -> int:
    """
    Check that ``top_k`` is an int within the configured bounds.

    Raises:
        InvalidTopKError: If it is not (no clamping)
    """
    low, high = top_k_bounds()
    if isinstance(top_k, bool) or not isinstance(top_k, int) or not low <= top_k <= high:
        raise InvalidTopKError(top_k, low, high)
    return top_k


def percentage(weight: float, total: float) -> float:
    """Share of ``total`` in percent; 0 when the total is zero."""
    if total == 0:
        return 0.0
    return weight / total * 100


def format_number(value: float) -> str:
    return f"{value:g}"


def rank(table: Dict[str, float], total: float, top_k: Optional[int] = None) -> List[RankedNGram]:
    """Rank n-grams by descending weight, keeping at most ``top_k``."""
    ordered = sorted(table.items(), key=lambda item: item[1], reverse=True)
    if top_k is not None:
        ordered = ordered[:top_k]
    return [RankedNGram(ngram, weight, percentage(weight, total)) for ngram, weight in ordered]


def _entry_lines(entries: List[RankedNGram]) -> List[str]:
    return [
        f"{e.ngram}: {format_number(e.weight)} ({format_number(e.percent)}%)"
        for e in entries
    ]


def build_structured(result: AnalysisResult) -> dict:
    """All tables verbatim: no truncation, no percentages."""
    return {
        "ngrams": [dict(table) for table in result.tables],
        "vowels": dict(result.vowels),
        "consonants": dict(result.consonants),
    }


def build_text(result: AnalysisResult, top_k: int, include_classes: bool = False) -> str:
    lines = [f"Total words processed: {result.word_count}"]

    for n, table in enumerate(result.tables):
        if not table:
            continue
        lines.append(f"Total {n}-grams counted: {len(table)}")
        lines.append(f"Top {top_k} {n}-grams:")
        lines.extend(_entry_lines(rank(table, result.totals[n], top_k)))
        lines.append("")

    lines.append(f"Total weight of n-grams processed: {format_number(result.grand_total)}")

    if include_classes:
        for label, table, total in (
            ("vowel", result.vowels, result.vowel_total),
            ("consonant", result.consonants, result.consonant_total),
        ):
            lines.append("")
            lines.append(f"Total {label} n-grams counted: {len(table)} (weight {format_number(total)})")
            lines.append(f"Top {top_k} {label} n-grams:")
            lines.extend(_entry_lines(rank(table, total, top_k)))

    return "\n".join(lines) + "\n"


def render(
    result: AnalysisResult,
    top_k: Optional[int] = None,
    fmt: Union[ReportFormat, str] = ReportFormat.TEXT,
    include_classes: bool = False,
) -> Union[str, dict]:
    """
    Render an analysis result.

    Args:
        result: Output of ``analyze``
        top_k: Entries per length in the text report (default from app.yaml)
        fmt: ReportFormat.TEXT (returns str) or ReportFormat.JSON (returns dict)
        include_classes: Also list top vowel / consonant n-grams (text only)

    Raises:
        InvalidTopKError: If top_k is outside the allowed range
        ValueError: If fmt is not a known format
    """
    if top_k is None:
        top_k = get_setting("report.top_k", 10)
    top_k = validate_top_k(top_k)
    fmt = ReportFormat(fmt)

    if fmt is ReportFormat.JSON:
        return build_structured(result)
    return build_text(result, top_k, include_classes=include_classes)
