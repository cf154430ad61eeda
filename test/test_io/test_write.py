"""Test that the writer classes work as intended."""

import os

import pytest

from nusel.io.write import *


@pytest.fixture(name="csv_output")
def fixture_csv_output(tmp_path):
    """Create a dummy output path for a CSV file.

    Parameters
    ----------
    tmp_path : str
       Generic pytest fixture used to handle temporary test files
    """
    return os.path.join(tmp_path, "dummy.csv")


def read_lines(file_name):
    """Reads the lines of a text file, stripped of their line breaks."""
    with open(file_name, "r", encoding="utf-8") as in_file:
        return in_file.read().splitlines()


def test_csv_writer(csv_output):
    """Tests writing a few rows to a CSV file."""
    with CSVWriter(csv_output) as writer:
        writer.append({"index": 0, "tag": "SIGNAL", "value": 1.5})
        writer.append({"index": 1, "tag": "SELECTED", "value": -9999})
        assert writer.is_open

    assert not writer.is_open
    assert read_lines(csv_output) == [
        "index,tag,value",
        "0,SIGNAL,1.5",
        "1,SELECTED,-9999",
    ]


def test_csv_writer_flush(csv_output):
    """Tests that rows are available before the writer is closed."""
    writer = CSVWriter(csv_output)
    writer.append({"a": 1})
    assert read_lines(csv_output) == ["a", "1"]

    writer.close()
    writer.close()


def test_csv_writer_exists(csv_output):
    """Tests that existing files are only overwritten if requested."""
    with CSVWriter(csv_output) as writer:
        writer.append({"a": 1})

    with pytest.raises(FileExistsError):
        CSVWriter(csv_output)

    with CSVWriter(csv_output, overwrite=True) as writer:
        writer.append({"a": 2})

    assert read_lines(csv_output) == ["a", "2"]


def test_csv_writer_append(csv_output):
    """Tests appending rows to an existing file."""
    with pytest.raises(FileNotFoundError):
        CSVWriter(csv_output, append=True)

    with CSVWriter(csv_output) as writer:
        writer.append({"a": 1, "b": 2})

    with CSVWriter(csv_output, append=True) as writer:
        assert writer.result_keys == ["a", "b"]
        writer.append({"a": 3, "b": 4})

    assert read_lines(csv_output) == ["a,b", "1,2", "3,4"]


def test_csv_writer_keys(csv_output):
    """Tests the checks on the consistency of the keys of each row."""
    with CSVWriter(csv_output) as writer:
        writer.append({"a": 1, "b": 2})

        with pytest.raises(AssertionError):
            writer.append({"a": 1, "b": 2, "c": 3})

        with pytest.raises(AssertionError):
            writer.append({"a": 1})

    with CSVWriter(csv_output, overwrite=True, accept_missing=True) as writer:
        writer.append({"a": 1, "b": 2})
        writer.append({"b": 5})

    assert read_lines(csv_output) == ["a,b", "1,2", "-1,5"]
