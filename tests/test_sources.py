"""
Tests for Word Sources
======================
Tests for SubtlexImporter and WordListImporter in ngramkit/sources.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ngramkit.sources import SubtlexImporter, WordListImporter, SUBTLEX_COLUMNS
from ngramkit.errors import DatasetError, InvalidWordError


HEADER = list(SUBTLEX_COLUMNS)


def subtlex_row(word, freq=100, subtlwf=29.449, pos="Article", zipf=7.468):
    values = {
        "Word": word,
        "FREQcount": str(freq),
        "CDcount": "50",
        "FREQlow": "90",
        "Cdlow": "45",
        "SUBTLWF": str(subtlwf),
        "Lg10WF": "2.0043",
        "SUBTLCD": "99.5",
        "Lg10CD": "1.7076",
        "Dom_PoS_SUBTLEX": pos,
        "Freq_dom_PoS_SUBTLEX": "100",
        "Percentage_dom_PoS": "1.0",
        "All_PoS_SUBTLEX": f"{pos}.Noun",
        "All_freqs_SUBTLEX": "100.3",
        "Zipf-value": str(zipf),
    }
    return [values[name] for name in HEADER]


def write_csv(path, header, rows):
    lines = [",".join(header)] + [",".join(row) for row in rows]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def subtlex_file(tmp_path):
    return write_csv(tmp_path / "subtlex.csv", HEADER, [
        subtlex_row("the", freq=1501908, subtlwf=29449.18),
        subtlex_row("cat", freq=1206, subtlwf=23.65, pos="Noun"),
        subtlex_row("quick", freq=2405, subtlwf=47.16, pos="Adjective"),
    ])


class TestSubtlexLoading:
    """Tests for loading valid SUBTLEX files."""

    def test_weights_default_column(self, subtlex_file):
        importer = SubtlexImporter(subtlex_file)
        weights = importer.weights()

        assert weights == {"the": 29449.18, "cat": 23.65, "quick": 47.16}
        assert len(importer) == 3

    def test_int_column(self, subtlex_file):
        values = SubtlexImporter(subtlex_file).get("FREQcount")

        assert values["cat"] == 1206
        assert isinstance(values["cat"], int)

    def test_int_column_as_weights(self, subtlex_file):
        weights = SubtlexImporter(subtlex_file).weights("FREQcount")
        assert weights["the"] == 1501908.0
        assert isinstance(weights["the"], float)

    def test_string_column(self, subtlex_file):
        values = SubtlexImporter(subtlex_file).get("Dom_PoS_SUBTLEX")
        assert values == {"the": "Article", "cat": "Noun", "quick": "Adjective"}

    def test_word_column(self, subtlex_file):
        values = SubtlexImporter(subtlex_file).get("Word")
        assert values == {"the": "the", "cat": "cat", "quick": "quick"}

    def test_unknown_column_get(self, subtlex_file):
        assert SubtlexImporter(subtlex_file).get("Nope") == {}

    def test_unknown_column_weights(self, subtlex_file):
        with pytest.raises(DatasetError):
            SubtlexImporter(subtlex_file).weights("Nope")

    def test_non_numeric_column_weights(self, subtlex_file):
        with pytest.raises(DatasetError):
            SubtlexImporter(subtlex_file).weights("Dom_PoS_SUBTLEX")

    def test_reordered_columns(self, tmp_path):
        header = list(reversed(HEADER))
        row = list(reversed(subtlex_row("dog", subtlwf=12.5)))
        path = write_csv(tmp_path / "rev.csv", header, [row])

        assert SubtlexImporter(path).weights() == {"dog": 12.5}

    def test_header_only(self, tmp_path):
        path = write_csv(tmp_path / "header.csv", HEADER, [])
        importer = SubtlexImporter(path)

        assert importer.weights() == {}
        assert len(importer) == 0

    def test_negative_and_zero_values(self, tmp_path):
        path = write_csv(tmp_path / "neg.csv", HEADER, [
            subtlex_row("cat", freq=-5, subtlwf=-1.5),
            subtlex_row("dog", freq=0, subtlwf=0.0),
        ])
        importer = SubtlexImporter(path)

        assert importer.get("FREQcount") == {"cat": -5, "dog": 0}
        assert importer.weights() == {"cat": -1.5, "dog": 0.0}

    def test_uppercase_lowercased(self, tmp_path):
        path = write_csv(tmp_path / "case.csv", HEADER, [
            subtlex_row("The"),
            subtlex_row("QUICK"),
        ])
        assert set(SubtlexImporter(path).weights()) == {"the", "quick"}


class TestSubtlexErrors:
    """Tests for SUBTLEX validation failures."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="Cannot open"):
            SubtlexImporter(tmp_path / "missing.csv")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(DatasetError, match="empty"):
            SubtlexImporter(path)

    def test_missing_column(self, tmp_path):
        header = HEADER[:-1]
        path = write_csv(tmp_path / "short.csv", header, [])
        with pytest.raises(DatasetError):
            SubtlexImporter(path)

    def test_extra_column(self, tmp_path):
        path = write_csv(tmp_path / "extra.csv", HEADER + ["Extra"], [])
        with pytest.raises(DatasetError):
            SubtlexImporter(path)

    def test_duplicate_column(self, tmp_path):
        header = HEADER[:-1] + ["Word"]
        path = write_csv(tmp_path / "dup.csv", header, [])
        with pytest.raises(DatasetError, match="Missing required column"):
            SubtlexImporter(path)

    def test_renamed_column(self, tmp_path):
        header = HEADER[:-1] + ["Zipf"]
        path = write_csv(tmp_path / "renamed.csv", header, [])
        with pytest.raises(DatasetError):
            SubtlexImporter(path)

    def test_row_wrong_field_count(self, tmp_path):
        path = write_csv(tmp_path / "row.csv", HEADER, [subtlex_row("cat")[:-1]])
        with pytest.raises(DatasetError, match="incorrect number of columns"):
            SubtlexImporter(path)

    def test_invalid_int(self, tmp_path):
        row = subtlex_row("cat")
        row[HEADER.index("FREQcount")] = "abc"
        path = write_csv(tmp_path / "int.csv", HEADER, [row])
        with pytest.raises(DatasetError, match="FREQcount"):
            SubtlexImporter(path)

    def test_invalid_float(self, tmp_path):
        row = subtlex_row("cat")
        row[HEADER.index("SUBTLWF")] = "1.2.3"
        path = write_csv(tmp_path / "float.csv", HEADER, [row])
        with pytest.raises(DatasetError, match="SUBTLWF"):
            SubtlexImporter(path)

    def test_duplicate_word(self, tmp_path):
        path = write_csv(tmp_path / "dupword.csv", HEADER, [
            subtlex_row("cat"), subtlex_row("dog"), subtlex_row("cat"),
        ])
        with pytest.raises(DatasetError, match="Duplicate word"):
            SubtlexImporter(path)

    def test_case_duplicates(self, tmp_path):
        path = write_csv(tmp_path / "dupcase.csv", HEADER, [
            subtlex_row("Cat"), subtlex_row("cat"),
        ])
        with pytest.raises(DatasetError, match="Duplicate word"):
            SubtlexImporter(path)

    @pytest.mark.parametrize("word", ["", "don't", "a1", "ice-cream", "two words", "under_score", "hi!"])
    def test_invalid_word(self, tmp_path, word):
        path = write_csv(tmp_path / "bad.csv", HEADER, [subtlex_row(word)])
        with pytest.raises(InvalidWordError):
            SubtlexImporter(path)


class TestWordList:
    """Tests for flat word lists."""

    def test_weights_and_defaults(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# lexicon\nthe 29449.18\n\ncat 10\ndog\n")
        importer = WordListImporter(path)

        assert importer.weights() == {"the": 29449.18, "cat": 10.0, "dog": 1.0}
        assert len(importer) == 3

    def test_custom_default_weight(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\n")
        assert WordListImporter(path, default_weight=2.5).weights() == {"cat": 2.5, "dog": 2.5}

    def test_lowercased(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("Cat 3\n")
        assert WordListImporter(path).weights() == {"cat": 3.0}

    def test_columns(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat 3\n")
        importer = WordListImporter(path)

        assert importer.get("word") == {"cat": "cat"}
        assert importer.get("other") == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError):
            WordListImporter(tmp_path / "missing.txt")

    def test_bad_weight(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat lots\n")
        with pytest.raises(DatasetError, match="invalid weight"):
            WordListImporter(path)

    def test_too_many_fields(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat 1 2\n")
        with pytest.raises(DatasetError):
            WordListImporter(path)

    def test_duplicate(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat 1\nCAT 2\n")
        with pytest.raises(DatasetError, match="Duplicate word"):
            WordListImporter(path)

    def test_invalid_word(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("can't 1\n")
        with pytest.raises(InvalidWordError):
            WordListImporter(path)
