"""
test_txt_utils.py
-----------------
Unit tests for folio.utils.txt module.

Tests prose extraction and word-count/reading-time metrics.
"""
import pytest

from folio.utils.txt import WORDS_PER_MINUTE, compute_metrics, prose_lines


class TestProseLines:
    """Test prose_lines function."""

    def test_no_fences(self):
        assert prose_lines(["a", "b"]) == ["a", "b"]

    def test_fenced_code_removed(self):
        lines = ["Intro", "```go", "x := 1", "```", "Outro"]
        assert prose_lines(lines) == ["Intro", "Outro"]

    def test_unclosed_fence_swallows_rest(self):
        assert prose_lines(["Intro", "```", "code", "more"]) == ["Intro"]


class TestComputeMetrics:
    """Test compute_metrics function."""

    def test_empty(self):
        assert compute_metrics([]) == (0, 0.0)

    def test_blank_lines_only(self):
        assert compute_metrics(["", "   "]) == (0, 0.0)

    def test_simple_count(self):
        wc, rt = compute_metrics(["one two three"])
        assert wc == 3
        assert rt == pytest.approx(3 / WORDS_PER_MINUTE)

    def test_code_not_counted(self):
        """Test fenced code does not inflate the word count."""
        prose = ["Publishers never know their subscribers."]
        with_code = prose + ["```go", "bus.Publish(orders, msg) and more words", "```"]
        assert compute_metrics(with_code)[0] == compute_metrics(prose)[0]

    def test_lines_joined(self):
        """Test words across line breaks are counted separately."""
        assert compute_metrics(["one", "two"])[0] == 2
