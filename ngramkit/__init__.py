#!/usr/bin/env python3
"""
ngramkit - Weighted N-gram Analysis
===================================

Counts every n-gram of a weighted lexicon after collapsing "qu", vowel-like
"y" and vowel-like "w" into synthetic symbols, then splits the n-grams into
pure-vowel and pure-consonant subsets.

Quick Start
-----------
    from ngramkit import analyze, render

    result = analyze({"cat": 10.0, "can": 5.0})
    print(render(result, top_k=5))

    # From a SUBTLEX-US file
    from ngramkit import SubtlexImporter
    result = analyze(SubtlexImporter("SUBTLEXus.csv").weights("SUBTLWF"))

Modules
-------
    ngramkit.normalizer  - Sequence normalization (qu -> Q, y -> Y, w -> W)
    ngramkit.aggregator  - Per-length n-gram tables
    ngramkit.classifier  - Vowel / consonant subsets
    ngramkit.report      - Text and structured reports
    ngramkit.sources     - SUBTLEX and word-list importers

CLI Usage
---------
    python -m ngramkit analyze --subtlex SUBTLEXus.csv -k 20
    python -m ngramkit normalize quick boy
"""

__version__ = "0.1.0"

from .alphabet import (
    VOWELS,
    CONSONANTS,
    Q_SYMBOL,
    Y_SYMBOL,
    W_SYMBOL,
)
from .normalizer import normalize
from .aggregator import NGramAggregator, aggregate
from .classifier import Classification, classify
from .analysis import AnalysisResult, analyze
from .report import ReportFormat, render
from .sources import DatasetImporter, SubtlexImporter, WordListImporter
from .errors import (
    NGramKitError,
    InvalidWordError,
    InvalidTopKError,
    DatasetError,
)

__all__ = [
    "__version__",
    "VOWELS",
    "CONSONANTS",
    "Q_SYMBOL",
    "Y_SYMBOL",
    "W_SYMBOL",
    "normalize",
    "NGramAggregator",
    "aggregate",
    "Classification",
    "classify",
    "AnalysisResult",
    "analyze",
    "ReportFormat",
    "render",
    "DatasetImporter",
    "SubtlexImporter",
    "WordListImporter",
    "NGramKitError",
    "InvalidWordError",
    "InvalidTopKError",
    "DatasetError",
]
