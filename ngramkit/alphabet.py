#!/usr/bin/env python3
"""
Alphabets
=========
Fixed symbol alphabets used for normalization and classification.

Normalized words use the 26 lowercase ASCII letters plus three synthetic
symbols. The synthetic symbols are uppercase so they can never collide with
a plain letter:

    Q   "qu"
    Y   "y" acting as a vowel (after a, e, o, u or a consonant)
    W   "w" acting as a vowel (after a, e, o)
"""

import re

Q_SYMBOL = 'Q'
Y_SYMBOL = 'Y'
W_SYMBOL = 'W'

SYNTHETIC_SYMBOLS = (Q_SYMBOL, Y_SYMBOL, W_SYMBOL)

# Ordered by frequency in English
VOWEL_ORDER = "eoaiu" + Y_SYMBOL + W_SYMBOL
CONSONANT_ORDER = "tnhsrldymwgcfbpkvjxzq" + Q_SYMBOL

VOWELS = frozenset(VOWEL_ORDER)
CONSONANTS = frozenset(CONSONANT_ORDER)

# Vowels that turn a following 'y' / 'w' into a synthetic symbol
Y_TRIGGER_VOWELS = frozenset("aeou")
W_TRIGGER_VOWELS = frozenset("aeo")

WORD_PATTERN = re.compile(r'[a-z]+')


def is_valid_word(word: str) -> bool:
    """True if ``word`` is a non-empty string of lowercase ASCII letters."""
    return isinstance(word, str) and WORD_PATTERN.fullmatch(word) is not None


def is_vowel_ngram(ngram: str) -> bool:
    return bool(ngram) and all(symbol in VOWELS for symbol in ngram)


def is_consonant_ngram(ngram: str) -> bool:
    return bool(ngram) and all(symbol in CONSONANTS for symbol in ngram)


__all__ = [
    "Q_SYMBOL",
    "Y_SYMBOL",
    "W_SYMBOL",
    "SYNTHETIC_SYMBOLS",
    "VOWELS",
    "CONSONANTS",
    "VOWEL_ORDER",
    "CONSONANT_ORDER",
    "Y_TRIGGER_VOWELS",
    "W_TRIGGER_VOWELS",
    "is_valid_word",
    "is_vowel_ngram",
    "is_consonant_ngram",
]
