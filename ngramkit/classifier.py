#!/usr/bin/env python3
"""
Alphabet Classifier
===================
Splits aggregated n-grams into vowel-only and consonant-only tables.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable

from .alphabet import is_consonant_ngram, is_vowel_ngram


@dataclass
class Classification:
    """Vowel-only and consonant-only n-grams pooled across all lengths."""
    vowels: Dict[str, float] = field(default_factory=dict)
    consonants: Dict[str, float] = field(default_factory=dict)

    @property
    def vowel_total(self) -> float:
        return sum(self.vowels.values())

    @property
    def consonant_total(self) -> float:
        return sum(self.consonants.values())


def classify(tables: Iterable[Dict[str, float]]) -> Classification:
    """
    Pool vowel-only and consonant-only n-grams from every length table.

    Weights are assigned, not accumulated: a key seen again overwrites the
    earlier value. Totals are taken from the final table contents.

    Args:
        tables: Per-length frequency tables (index order is processing order)

    Returns:
        Classification with the two derived tables
    """
    result = Classification()
    for table in tables:
        for ngram, weight in table.items():
            if is_vowel_ngram(ngram):
                result.vowels[ngram] = weight
            elif is_consonant_ngram(ngram):
                result.consonants[ngram] = weight
    return result
