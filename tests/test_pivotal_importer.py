"""
Unit tests for writing Pivotal Tracker CSV files
"""
import csv
import os
import stat

import pytest

from importers import csv_value_safe, write_pivotal_csv


def read_rows(path):
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.reader(f))


class TestCsvValueSafe:

    def test_replaces_semicolons(self):
        assert csv_value_safe("a; b; c") == "a. b. c"

    def test_non_strings(self):
        assert csv_value_safe(0) == "0"


class TestWritePivotalCsv:

    def test_writes_header_and_rows(self, tmp_path):
        path = str(tmp_path / "out.csv")
        header = ["Title", "Task", "Task Status", "Task", "Task Status"]
        rows = [["Card, with comma", "A", "Completed", "", ""]]

        written = write_pivotal_csv(path, header, rows)

        assert written == 1
        assert read_rows(path) == [header, rows[0]]

    def test_multiline_values_are_quoted(self, tmp_path):
        path = str(tmp_path / "out.csv")

        write_pivotal_csv(path, ["Description"], [["line one\n\nline two"]])

        assert read_rows(path)[1] == ["line one\n\nline two"]

    def test_sanitize_semicolons(self, tmp_path):
        path = str(tmp_path / "out.csv")

        write_pivotal_csv(path, ["Title"], [["a;b"]], sanitize=True)
        assert read_rows(path)[1] == ["a.b"]

        write_pivotal_csv(path, ["Title"], [["a;b"]], sanitize=False)
        assert read_rows(path)[1] == ["a;b"]

    def test_failure_leaves_no_partial_file(self, tmp_path):
        """A failing row source must not leave a CSV or a temporary file behind"""
        path = str(tmp_path / "out.csv")

        def rows():
            yield ["first"]
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            write_pivotal_csv(path, ["Title"], rows())

        assert os.listdir(tmp_path) == []

    def test_failure_keeps_existing_target(self, tmp_path):
        path = tmp_path / "out.csv"
        path.write_text("previous\n", encoding="utf-8")

        def rows():
            raise RuntimeError("boom")
            yield

        with pytest.raises(RuntimeError):
            write_pivotal_csv(str(path), ["Title"], rows())

        assert path.read_text(encoding="utf-8") == "previous\n"
        assert os.listdir(tmp_path) == ["out.csv"]

    def test_missing_directory(self, tmp_path):
        path = str(tmp_path / "missing" / "out.csv")

        with pytest.raises(OSError):
            write_pivotal_csv(path, ["Title"], [])

    def test_target_gets_umask_mode(self, tmp_path):
        """The CSV is readable like any file created under the current umask, not 0600"""
        path = tmp_path / "out.csv"
        previous = os.umask(0o022)
        try:
            write_pivotal_csv(str(path), ["Title"], [["Card"]])
        finally:
            os.umask(previous)

        assert stat.S_IMODE(os.stat(path).st_mode) == 0o644

    def test_rows_end_with_newline(self, tmp_path):
        path = tmp_path / "out.csv"

        write_pivotal_csv(str(path), ["Title", "Estimate"], [["Card", "0"]])

        assert path.read_bytes() == b"Title,Estimate\nCard,0\n"
