"""
parser package
--------------
Turns raw article sources into Entry records.

- splitter: split a unit on the separator line, report near-misses
- segment: parse one segment (header + body) into an Entry
- unit: parse every segment of a unit with per-segment isolation
- batch: parse many units concurrently
- results: SegmentError, UnitResult, BatchReport

Usage:
    from folio.parser import parse_unit

    result = parse_unit(text, unit="posts/patterns.md")
    for entry in result.entries:
        print(entry.title)
    for error in result.errors:
        print(error)
"""
from folio.parser.batch import parse_path, parse_units
from folio.parser.results import BatchReport, SegmentError, UnitResult
from folio.parser.segment import parse_segment
from folio.parser.splitter import SeparatorNotice, find_near_separators, split
from folio.parser.unit import parse_unit

__all__ = [
    "BatchReport",
    "SegmentError",
    "SeparatorNotice",
    "UnitResult",
    "find_near_separators",
    "parse_path",
    "parse_segment",
    "parse_unit",
    "parse_units",
    "split",
]
