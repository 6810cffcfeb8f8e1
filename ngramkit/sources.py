#!/usr/bin/env python3
"""
Word Sources
============
Importers that turn word dataset files into a ``word -> weight`` mapping.

Every importer lowercases words, rejects empty or non-alphabetic words and
rejects duplicates, so the analysis core can trust its input.

Supported formats:
    SubtlexImporter   - SUBTLEX-US CSV (typed columns, strict header)
    WordListImporter  - flat text, "word [weight]" per line
"""

import csv
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .alphabet import is_valid_word
from .errors import DatasetError, InvalidWordError
from .settings import get_setting

logger = logging.getLogger(__name__)

Value = Union[int, float, str]


# =============================================================================
# Base Importer
# =============================================================================

class DatasetImporter(ABC):
    """Common interface for word datasets with per-word column values."""

    @abstractmethod
    def get(self, column: str) -> Dict[str, Value]:
        """
        Return the value of ``column`` for each word.

        Returns an empty dict if the column does not exist.
        """
        pass

    @property
    @abstractmethod
    def default_column(self) -> str:
        pass

    def weights(self, column: Optional[str] = None) -> Dict[str, float]:
        """
        Return ``word -> weight`` for a numeric column.

        Raises:
            DatasetError: If the column is unknown or not numeric
        """
        column = column or self.default_column
        values = self.get(column)
        if not values and column not in self.columns:
            raise DatasetError(f"Unknown column: {column}")
        weights = {}
        for word, value in values.items():
            if isinstance(value, str):
                raise DatasetError(f"Column '{column}' is not numeric")
            weights[word] = float(value)
        return weights

    @property
    @abstractmethod
    def columns(self) -> List[str]:
        pass

    def __len__(self) -> int:
        return len(self.get(self.default_column))


def _check_word(raw: str, seen: set) -> str:
    word = raw.lower()
    if not is_valid_word(word):
        raise InvalidWordError(word)
    if word in seen:
        raise DatasetError(f"Duplicate word in data: {word}")
    seen.add(word)
    return word


# =============================================================================
# SUBTLEX-US
# =============================================================================

# Column name -> value type
SUBTLEX_COLUMNS = {
    "Word": str,
    "FREQcount": int,               # Raw token count in the subtitle corpus
    "CDcount": int,                 # Number of subtitles containing the word
    "FREQlow": int,                 # Count of lowercase occurrences only
    "Cdlow": int,                   # CDcount for lowercase occurrences
    "SUBTLWF": float,               # Frequency per million words
    "Lg10WF": float,                # log10(FREQcount + 1)
    "SUBTLCD": float,               # Contextual diversity, percent of subtitles
    "Lg10CD": float,                # log10(CDcount + 1)
    "Dom_PoS_SUBTLEX": str,         # Dominant part of speech
    "Freq_dom_PoS_SUBTLEX": int,
    "Percentage_dom_PoS": float,
    "All_PoS_SUBTLEX": str,
    "All_freqs_SUBTLEX": str,
    "Zipf-value": float,
}


def _validate_header(names: List[str]):
    if len(names) != len(SUBTLEX_COLUMNS):
        raise DatasetError("CSV header has incorrect number of columns.")
    for key in SUBTLEX_COLUMNS:
        if key not in names:
            raise DatasetError(f"Missing required column: {key}")
    for name in names:
        if name not in SUBTLEX_COLUMNS:
            raise DatasetError(f"Unexpected column in CSV: {name}")


def _parse_value(value: str, column: str) -> Value:
    kind = SUBTLEX_COLUMNS[column]
    try:
        return kind(value)
    except ValueError as e:
        raise DatasetError(f"Failed to parse value '{value}' for column '{column}': {e}") from e


class SubtlexImporter(DatasetImporter):
    """
    Loads a SUBTLEX-US CSV file with typed columns.

    Example:
        importer = SubtlexImporter("SUBTLEXus.csv")
        freqs = importer.weights("SUBTLWF")
    """

    def __init__(self, path: Union[str, Path]):
        path = Path(path)
        if not path.is_file():
            raise DatasetError(f"Cannot open file: {path}")

        with path.open(newline='', encoding='utf-8') as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                raise DatasetError(f"File is empty: {path}")

            header = [name.strip() for name in header]
            _validate_header(header)
            self._column_indices = {name: i for i, name in enumerate(header)}
            word_idx = self._column_indices["Word"]

            seen = set()
            self._rows: List[List[Any]] = []
            for raw in reader:
                if not raw:
                    continue
                if len(raw) != len(header):
                    raise DatasetError(f"Row {reader.line_num} has incorrect number of columns.")
                raw[word_idx] = _check_word(raw[word_idx], seen)
                self._rows.append([_parse_value(v, header[i]) for i, v in enumerate(raw)])

        logger.info(f"Loaded {len(self._rows)} words from SUBTLEX file {path}")

    @property
    def columns(self) -> List[str]:
        return list(self._column_indices)

    @property
    def default_column(self) -> str:
        return get_setting("sources.subtlex.weight_column", "SUBTLWF")

    def get(self, column: str) -> Dict[str, Value]:
        col_idx = self._column_indices.get(column)
        if col_idx is None:
            return {}
        word_idx = self._column_indices["Word"]
        return {row[word_idx]: row[col_idx] for row in self._rows}


# =============================================================================
# Flat Word List
# =============================================================================

class WordListImporter(DatasetImporter):
    """
    Loads a flat word list: one word per line, optionally followed by a weight.

        # comment
        the 1501908
        cat 10.5
        dog

    Lines without a weight get ``sources.word_list.default_weight``.
    """

    WORD_COLUMN = "word"
    WEIGHT_COLUMN = "weight"

    def __init__(self, path: Union[str, Path], default_weight: Optional[float] = None):
        path = Path(path)
        if not path.is_file():
            raise DatasetError(f"Cannot open file: {path}")
        if default_weight is None:
            default_weight = float(get_setting("sources.word_list.default_weight", 1.0))

        seen = set()
        self._weights: Dict[str, float] = {}
        with path.open(encoding='utf-8') as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                parts = line.split()
                if len(parts) > 2:
                    raise DatasetError(f"Line {line_num}: expected 'word [weight]', got {line!r}")
                word = _check_word(parts[0], seen)
                if len(parts) == 2:
                    try:
                        weight = float(parts[1])
                    except ValueError as e:
                        raise DatasetError(f"Line {line_num}: invalid weight {parts[1]!r}") from e
                else:
                    weight = default_weight
                self._weights[word] = weight

        logger.info(f"Loaded {len(self._weights)} words from word list {path}")

    @property
    def columns(self) -> List[str]:
        return [self.WORD_COLUMN, self.WEIGHT_COLUMN]

    @property
    def default_column(self) -> str:
        return self.WEIGHT_COLUMN

    def get(self, column: str) -> Dict[str, Value]:
        if column == self.WEIGHT_COLUMN:
            return dict(self._weights)
        if column == self.WORD_COLUMN:
            return {word: word for word in self._weights}
        return {}
