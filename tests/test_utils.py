"""Unit tests for utility functions (tfgen.utils).

Tests cover:
- load_json_list / save_json (use tmp_path)
- make_executable
- Rich output helpers, including markup escaping
"""

from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest

from tfgen import utils
from tfgen.utils import (
    load_json_list,
    make_executable,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    save_json,
)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


class TestJsonIO:
    @pytest.mark.unit
    def test_missing_file_is_empty_list(self, tmp_path: Path):
        assert load_json_list(tmp_path / "missing.json") == []

    @pytest.mark.unit
    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "deep" / "data.json"
        save_json([{"name": "Order"}], path)
        assert load_json_list(path) == [{"name": "Order"}]

    @pytest.mark.unit
    def test_object_is_wrapped(self, tmp_path: Path):
        path = tmp_path / "obj.json"
        path.write_text('{"a": 1}')
        assert load_json_list(path) == [{"a": 1}]

    @pytest.mark.unit
    def test_save_is_pretty_with_trailing_newline(self, tmp_path: Path):
        path = tmp_path / "out.json"
        save_json({"name": "Café"}, path)
        text = path.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert "Café" in text
        assert json.loads(text) == {"name": "Café"}

    @pytest.mark.unit
    def test_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("[1,")
        with pytest.raises(ValueError):
            load_json_list(path)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


class TestFileHelpers:
    @pytest.mark.unit
    def test_make_executable(self, tmp_path: Path):
        script = tmp_path / "run.sh"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o644)
        make_executable(script)
        mode = script.stat().st_mode
        assert mode & stat.S_IXUSR
        assert mode & stat.S_IXGRP
        assert mode & stat.S_IXOTH
        assert mode & stat.S_IRUSR


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self):
        # Should not raise
        print_summary_table({"Written": 3, "Failed": 0}, title="Generation Summary")

    @pytest.mark.unit
    def test_print_helpers(self):
        print_success("Project created successfully!")
        print_error("Error: something failed")
        print_warning("Warning: Template x skipped")
        print_info("Generated: go.mod")

    @pytest.mark.unit
    def test_markup_is_escaped(self, monkeypatch):
        recorded: list[str] = []
        monkeypatch.setattr(utils.console, "print", lambda text, *a, **k: recorded.append(text))
        print_warning("field [bold] stays literal")
        assert recorded == ["[bold yellow]field \\[bold] stays literal[/bold yellow]"]
