"""
Tests for PDF discovery and JSON persistence.
"""

import json
import os

import pytest

from pdf_digest.errors import ConfigError
from pdf_digest.utils.io import find_pdf_files, write_json


class TestFindPdfFiles:
    """Test non-recursive, case-insensitive discovery."""

    def test_filters_by_extension(self, tmp_path):
        for name in ["a.pdf", "B.PDF", "c.Pdf", "notes.txt", "pdf"]:
            (tmp_path / name).write_bytes(b"x")
        sub = tmp_path / "nested.pdf"
        sub.mkdir()
        (sub / "inner.pdf").write_bytes(b"x")

        found = [os.path.basename(p) for p in find_pdf_files(str(tmp_path))]
        assert sorted(found) == ["B.PDF", "a.pdf", "c.Pdf"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigError):
            find_pdf_files(str(tmp_path / "nope"))


class TestWriteJson:
    """Test the results writer."""

    def test_two_space_indent_and_overwrite(self, tmp_path):
        path = tmp_path / "out" / "results.json"
        path.parent.mkdir()
        path.write_text("old content that is much longer than the new one")

        write_json(str(path), {"subject_groups": []})

        raw = path.read_text(encoding="utf-8")
        assert json.loads(raw) == {"subject_groups": []}
        assert raw.startswith('{\n  "subject_groups"')

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "results.json"
        write_json(str(path), {"k": 1})
        assert json.loads(path.read_text()) == {"k": 1}

    def test_bare_filename(self, tmp_path, monkeypatch):
        """A path without a directory part writes to the working directory."""
        monkeypatch.chdir(tmp_path)
        write_json("results.json", {"k": 2})
        assert json.loads((tmp_path / "results.json").read_text()) == {"k": 2}
