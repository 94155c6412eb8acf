"""Tests for file utilities."""

import pytest

from lexilookup.exceptions import SetupError
from lexilookup.utils import read_inputs_file


class TestReadInputsFile:
    """Tests for read_inputs_file."""

    def test_text_file_one_per_line(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("apple\n\n  give up  \n# comment\nI love you, really.\n", encoding="utf-8")

        assert read_inputs_file(path) == ["apple", "give up", "I love you, really."]

    def test_csv_splits_on_commas(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text("apple, banana,,cherry\n사랑\n", encoding="utf-8")

        assert read_inputs_file(path) == ["apple", "banana", "cherry", "사랑"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SetupError, match="not found"):
            read_inputs_file(tmp_path / "missing.txt")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "words.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(SetupError, match="Unsupported"):
            read_inputs_file(path)
