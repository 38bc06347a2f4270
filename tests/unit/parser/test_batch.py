"""
test_batch.py
-------------
Unit tests for folio.parser.batch.

Tests concurrent parsing of many units: input ordering, isolation
between units, fail-fast behavior and reading from disk.
"""
from unittest.mock import MagicMock

import pytest

from folio.configs.formats import ParserSettings
from folio.core.exceptions import MissingHeaderError, UnreadableUnitError
from folio.parser.batch import parse_path, parse_units


def numbered_unit(n):
    """One well-formed entry titled 'Post n'."""
    return f"+++\ntitle = 'Post {n}'\ndate = 2021-01-{n % 28 + 1:02d}\ndraft = false\n+++\n\nBody {n}\n"


class TestParseUnits:
    """Test parse_units."""

    @pytest.mark.parametrize("workers", [None, 1, 4])
    def test_input_order_preserved(self, workers):
        """Test results follow input order whatever the worker count."""
        units = [(f"u{n}.md", numbered_unit(n)) for n in range(40)]
        report = parse_units(units, settings=ParserSettings(max_workers=workers))

        assert [r.unit for r in report.units] == [f"u{n}.md" for n in range(40)]
        assert [e.title for e in report.entries] == [f"Post {n}" for n in range(40)]

    def test_units_isolated(self, three_segment_unit, toml_entry_content):
        """Test a bad unit does not affect other units."""
        units = [
            ("bundle.md", three_segment_unit),
            ("post.md", toml_entry_content),
        ]
        report = parse_units(units, settings=ParserSettings(max_workers=2))
        assert report.units[0].segment_count == 3
        assert len(report.units[0].errors) == 1
        assert report.units[1].ok
        assert len(report.entries) == 3

    def test_empty_input(self):
        report = parse_units([])
        assert report.units == []
        assert not report.has_errors

    def test_fail_fast_raises(self, three_segment_unit, toml_entry_content):
        units = [("post.md", toml_entry_content), ("bundle.md", three_segment_unit)]
        with pytest.raises(MissingHeaderError) as exc_info:
            parse_units(units, fail_fast=True)
        assert exc_info.value.unit == "bundle.md"

    def test_fail_fast_sequential(self, three_segment_unit):
        with pytest.raises(MissingHeaderError):
            parse_units(
                [("bundle.md", three_segment_unit)],
                settings=ParserSettings(max_workers=1),
                fail_fast=True,
            )

    def test_custom_separator_passed_through(self, toml_entry_content, draft_entry_content):
        text = f"{toml_entry_content}===8<===\n{draft_entry_content}"
        report = parse_units([("a.md", text)], settings=ParserSettings(separator="===8<==="))
        assert len(report.entries) == 2

    def test_logger_used(self, toml_entry_content):
        logger = MagicMock()
        parse_units([("post.md", toml_entry_content)], logger=logger)
        logger.log_operation.assert_called_once()
        assert logger.log_info.call_args.args[0] == "Batch parsed"


class TestParsePath:
    """Test parse_path."""

    def test_directory(self, content_dir):
        report = parse_path(content_dir)
        assert [r.unit for r in report.units] == [
            "bundle.md",
            "drafts/flags.md",
            "modular-monolith.md",
            "pubsub.md",
        ]
        assert len(report.entries) == 5
        assert len(report.errors) == 1
        assert report.errors[0].unit == "bundle.md"

    def test_pattern(self, content_dir):
        report = parse_path(content_dir, settings=ParserSettings(pattern="*.md"))
        assert "drafts/flags.md" not in [r.unit for r in report.units]
        assert len(report.units) == 3

    def test_single_file(self, content_dir):
        report = parse_path(content_dir / "pubsub.md")
        assert len(report.units) == 1
        assert report.entries[0].title == "Publish-Subscribe in Go"

    def test_missing_path(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            parse_path(tmp_dir / "missing")

    def test_unreadable_unit_isolated(self, tmp_dir, toml_entry_content):
        """Test a file that is not UTF-8 fails alone, in listing order."""
        (tmp_dir / "a.md").write_text(toml_entry_content, encoding="utf-8")
        (tmp_dir / "b.md").write_bytes(b"+++\ntitle = '\xff'\n+++\n")
        (tmp_dir / "c.md").write_text(toml_entry_content, encoding="utf-8")

        report = parse_path(tmp_dir, settings=ParserSettings(max_workers=2))

        assert [r.unit for r in report.units] == ["a.md", "b.md", "c.md"]
        assert len(report.entries) == 2
        error = report.errors[0]
        assert (error.unit, error.segment_index, error.kind) == ("b.md", 0, "UnreadableUnitError")
        assert "UTF-8" in error.message

    def test_unreadable_unit_fail_fast(self, tmp_dir, toml_entry_content):
        (tmp_dir / "a.md").write_text(toml_entry_content, encoding="utf-8")
        (tmp_dir / "b.md").write_bytes(b"\xff")
        with pytest.raises(UnreadableUnitError) as exc_info:
            parse_path(tmp_dir, fail_fast=True)
        assert exc_info.value.unit == "b.md"

    def test_unreadable_unit_logged(self, tmp_dir):
        (tmp_dir / "b.md").write_bytes(b"\xff")
        logger = MagicMock()
        report = parse_path(tmp_dir, logger=logger)
        logger.log_segment_error.assert_called_once_with(report.errors[0])
