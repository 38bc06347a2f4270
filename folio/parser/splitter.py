#!/usr/bin/env python3
"""
splitter.py
-----------
Split a raw unit into article segments.

Several articles may be concatenated in one source file, joined by a line
holding exactly the separator literal. Splitting never fails: a unit with
no separator is a single segment.

Lines that merely resemble the separator (different case, spacing or
dashes) are NOT split on. They stay in the body and are reported as
SeparatorNotice so an author can fix them.

Separator lines inside fenced code blocks are body text, unless the fence
is never closed before the next segment.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# --- Local imports ---
from folio.configs.formats import NEAR_SEPARATOR_PATTERN, SEGMENT_SEPARATOR
from folio.utils.md import FenceTracker


@dataclass(frozen=True)
class SeparatorNotice:
    """
    A suspicious separator line.

    Either a separator-like line that was kept as body text, or an exact
    separator that cut off a code fence which was never closed.

    Attributes:
        unit: Identifier of the unit containing the line
        line_number: 1-based line number in the unit
        text: The offending line
        unclosed_fence: True when the separator ended an open fence
    """

    unit: Optional[str]
    line_number: int
    text: str
    unclosed_fence: bool = False

    @property
    def message(self) -> str:
        if self.unclosed_fence:
            return (
                f"Line {self.line_number} splits entries inside a code fence "
                f"that is never closed"
            )
        return (
            f"Line {self.line_number} looks like an entry separator "
            f"but is not exact: {self.text.strip()!r}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unit": self.unit,
            "line_number": self.line_number,
            "text": self.text,
            "unclosed_fence": self.unclosed_fence,
        }


def _squash(text: str) -> str:
    return re.sub(r"\s+", "", text).lower()


def is_separator(line: str, separator: str = SEGMENT_SEPARATOR) -> bool:
    """True if line is exactly the separator (trailing whitespace ignored)."""
    return line.rstrip() == separator


def looks_like_separator(line: str, separator: str = SEGMENT_SEPARATOR) -> bool:
    """True if line resembles the separator without being it."""
    if is_separator(line, separator) or not line.strip():
        return False
    if _squash(line) == _squash(separator):
        return True
    return separator == SEGMENT_SEPARATOR and bool(NEAR_SEPARATOR_PATTERN.match(line))


def _fence_closes(lines: List[str], start: int, fence: str, separator: str) -> bool:
    """True if the open fence closes before the next exact separator."""
    tracker = FenceTracker(fence)
    for line in lines[start:]:
        if is_separator(line, separator):
            return False
        tracker.feed(line)
        if not tracker.inside:
            return True
    return False


def _split_points(lines: List[str], separator: str) -> Dict[int, bool]:
    """
    Locate the separator lines a unit is split on.

    A separator inside a code fence is body text only while that fence
    closes before the next segment. Otherwise the fence is abandoned at
    the separator so it cannot swallow the following segments.

    Returns:
        Line index of each split point mapped to True when the
        separator ended an unclosed fence
    """
    points: Dict[int, bool] = {}
    tracker = FenceTracker()
    for index, line in enumerate(lines):
        if tracker.feed(line) or not is_separator(line, separator):
            continue
        if not tracker.inside:
            points[index] = False
        elif not _fence_closes(lines, index + 1, tracker.fence, separator):
            points[index] = True
            tracker = FenceTracker()
    return points


def split(raw_unit: str, separator: str = SEGMENT_SEPARATOR) -> List[str]:
    """
    Split a raw unit on the separator line.

    Args:
        raw_unit: Full text of one unit
        separator: Exact separator literal

    Returns:
        List of raw segments. Without a separator, [raw_unit]. With
        separators, blank segments (e.g. after a trailing separator)
        are dropped.

    Examples:
        >>> split("a\\n<!-- entry-break -->\\nb\\n")
        ['a\\n', 'b\\n']
        >>> split("no separator here")
        ['no separator here']
    """
    raw_lines = raw_unit.splitlines(keepends=True)
    points = _split_points([line.rstrip("\r\n") for line in raw_lines], separator)
    if not points:
        return [raw_unit]

    segments: List[str] = []
    current: List[str] = []
    for index, line in enumerate(raw_lines):
        if index in points:
            segments.append("".join(current))
            current = []
            continue
        current.append(line)
    segments.append("".join(current))
    return [segment for segment in segments if segment.strip()]


def find_near_separators(
    raw_unit: str,
    separator: str = SEGMENT_SEPARATOR,
    unit: Optional[str] = None,
) -> List[SeparatorNotice]:
    """
    Report separator-like lines outside code fences.

    Exact separators that cut off an unclosed code fence are reported
    too, since the fence most likely lacks its closing line.

    Args:
        raw_unit: Full text of one unit
        separator: Exact separator literal
        unit: Unit identifier recorded on each notice

    Returns:
        One SeparatorNotice per suspicious line, in line order
    """
    lines = raw_unit.splitlines()
    points = _split_points(lines, separator)
    notices: List[SeparatorNotice] = []
    tracker = FenceTracker()
    for index, line in enumerate(lines):
        if index in points:
            if points[index]:
                notices.append(
                    SeparatorNotice(
                        unit=unit, line_number=index + 1, text=line, unclosed_fence=True
                    )
                )
                tracker = FenceTracker()
            continue
        if tracker.feed(line) or tracker.inside:
            continue
        if looks_like_separator(line, separator):
            notices.append(SeparatorNotice(unit=unit, line_number=index + 1, text=line))
    return notices
