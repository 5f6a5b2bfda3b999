"""Unit tests for utility functions (entity_scaffold.utils).

Tests cover:
- camelize / lower_camelize
- make_path_relative
- save_json
- Rich output helpers (write_section, write_generator_summary, etc.)
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from entity_scaffold.utils import (
    camelize,
    lower_camelize,
    make_path_relative,
    print_error,
    print_summary_table,
    print_warning,
    save_json,
    write_generator_summary,
    write_section,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


class TestCamelize:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("created_by", "CreatedBy"),
            ("description", "Description"),
            ("is_active_user", "IsActiveUser"),
            ("foo.bar_baz", "Foo_BarBaz"),
            ("already", "Already"),
        ],
    )
    def test_camelize(self, name, expected):
        assert camelize(name) == expected

    @pytest.mark.parametrize(
        "name, expected",
        [("created_by", "createdBy"), ("description", "description"), ("has_x", "hasX")],
    )
    def test_lower_camelize(self, name, expected):
        assert lower_camelize(name) == expected

    def test_empty(self):
        assert lower_camelize("") == ""


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


class TestMakePathRelative:
    def test_inside_base(self, tmp_path):
        target = tmp_path / "src" / "Entity" / "Post.php"
        assert make_path_relative(target, tmp_path) == str(Path("src/Entity/Post.php"))

    def test_outside_base_unchanged(self, tmp_path):
        other = Path("/somewhere/else.php")
        assert make_path_relative(other, tmp_path) == str(other)

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert make_path_relative(tmp_path / "a.json") == "a.json"


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------


class TestSaveJson:
    def test_creates_parents_and_writes(self, tmp_path):
        path = save_json({"b": 1, "a": [1, 2]}, tmp_path / "x" / "y.json")
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"b": 1, "a": [1, 2]}

    def test_non_serialisable_values_stringified(self, tmp_path):
        path = save_json({"path": tmp_path}, tmp_path / "p.json")
        assert json.loads(path.read_text(encoding="utf-8"))["path"] == str(tmp_path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.fixture
    def recorded(self):
        recorder = Console(record=True, width=120)
        with patch("entity_scaffold.utils.console", recorder):
            yield recorder

    def test_write_section(self, recorded):
        write_section("Entity generation")
        assert "Entity generation" in recorded.export_text()

    def test_summary_all_clear(self, recorded):
        write_generator_summary([])
        assert "Everything is OK! Now get to work :)." in recorded.export_text()

    def test_summary_lists_errors(self, recorded):
        write_generator_summary(["Register the bundle"])
        text = recorded.export_text()
        assert "not able to configure everything" in text
        assert "- Register the bundle" in text

    def test_print_helpers(self, recorded):
        print_error("bad [thing]")
        print_warning("careful")
        text = recorded.export_text()
        assert "bad [thing]" in text
        assert "careful" in text

    def test_summary_table(self, recorded):
        print_summary_table({"Entity": "Post"}, title="Generated")
        text = recorded.export_text()
        assert "Generated" in text
        assert "Post" in text
