#!/usr/bin/env python3
"""
Sequence Normalizer
===================
Collapses two-letter sequences into synthetic symbols before n-gram counting.

Rules, checked left to right with one character of lookahead:

    qu          -> Q          (the 'q' is replaced, the 'u' dropped)
    [aeou]y     -> [aeou]Y    ('y' after a, e, o, u)
    <cons>y     -> <cons>Y    ('y' after any consonant)
    [aeo]w      -> [aeo]W     ('w' after a, e, o)

The letter before a merged 'y' / 'w' is kept; only the 'y' / 'w' itself
becomes the synthetic symbol. A consumed character is never looked at again,
so "yyy" becomes "yYy".
"""

from .alphabet import (
    CONSONANTS,
    Q_SYMBOL,
    W_SYMBOL,
    Y_SYMBOL,
    W_TRIGGER_VOWELS,
    Y_TRIGGER_VOWELS,
)


def normalize(word: str) -> str:
    """
    Normalize a lowercase word into its symbol string.

    Parameters
    ----------
    word : str
        Lowercase ASCII word (validated upstream)

    Returns
    -------
    str
        Symbol string, never longer than ``word``
    """
    result = []
    length = len(word)
    i = 0
    while i < length:
        c0 = word[i]
        i += 1

        # The current character is always emitted; the next one decides the rest
        result.append(c0)

        if i >= length:
            break

        c1 = word[i]
        if c0 == 'q' and c1 == 'u':
            result[-1] = Q_SYMBOL
            i += 1
        elif c1 == 'y' and (c0 in Y_TRIGGER_VOWELS or c0 in CONSONANTS):
            result.append(Y_SYMBOL)
            i += 1
        elif c1 == 'w' and c0 in W_TRIGGER_VOWELS:
            result.append(W_SYMBOL)
            i += 1

    return ''.join(result)
