#!/usr/bin/env python3
"""
results.py
----------
Result containers for unit and batch parsing.

A unit's outcome is an ordered list holding, per segment, either the
parsed Entry or a SegmentError. Errors never replace or merge sibling
entries, and no partial Entry is ever recorded.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

# --- Local imports ---
from folio.core.exceptions import EntryParseError, MalformedFieldError
from folio.dataclasses.entry import Entry
from folio.parser.splitter import SeparatorNotice


@dataclass(frozen=True)
class SegmentError:
    """
    A segment that could not be parsed.

    Attributes:
        unit: Identifier of the originating unit
        segment_index: 0-based position of the segment in its unit
        error: The EntryParseError raised for it
    """

    unit: Optional[str]
    segment_index: int
    error: EntryParseError

    @property
    def kind(self) -> str:
        """Exception class name, e.g. 'MissingHeaderError'."""
        return type(self.error).__name__

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def field_name(self) -> Optional[str]:
        if isinstance(self.error, MalformedFieldError):
            return self.error.field_name
        return None

    def __str__(self) -> str:
        unit = self.unit or "<input>"
        return f"{unit} segment {self.segment_index}: {self.kind}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unit": self.unit,
            "segment_index": self.segment_index,
            "kind": self.kind,
            "field": self.field_name,
            "message": self.message,
        }


Outcome = Union[Entry, SegmentError]


@dataclass
class UnitResult:
    """
    Everything parsed from one unit.

    Attributes:
        unit: Unit identifier
        outcomes: Per-segment Entry or SegmentError, in segment order
        notices: Suspicious separator lines of the unit
    """

    unit: Optional[str]
    outcomes: List[Outcome] = field(default_factory=list)
    notices: List[SeparatorNotice] = field(default_factory=list)

    @property
    def entries(self) -> List[Entry]:
        return [o for o in self.outcomes if isinstance(o, Entry)]

    @property
    def errors(self) -> List[SegmentError]:
        return [o for o in self.outcomes if isinstance(o, SegmentError)]

    @property
    def segment_count(self) -> int:
        return len(self.outcomes)

    @property
    def ok(self) -> bool:
        """True when every segment parsed."""
        return not self.errors

    def raise_first(self) -> None:
        """Re-raise the first segment error, if any."""
        errors = self.errors
        if errors:
            raise errors[0].error


@dataclass
class BatchReport:
    """
    Results of parsing many units.

    Attributes:
        units: One UnitResult per input unit, in input order
        started_at: When the batch started
    """

    units: List[UnitResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)

    @property
    def entries(self) -> List[Entry]:
        return [entry for result in self.units for entry in result.entries]

    @property
    def errors(self) -> List[SegmentError]:
        return [error for result in self.units for error in result.errors]

    @property
    def notices(self) -> List[SeparatorNotice]:
        return [notice for result in self.units for notice in result.notices]

    @property
    def has_errors(self) -> bool:
        return any(not result.ok for result in self.units)

    def to_dict(self) -> Dict[str, Any]:
        """Summary counts plus every error and notice."""
        return {
            "units": len(self.units),
            "entries": len(self.entries),
            "errors": [error.to_dict() for error in self.errors],
            "notices": [notice.to_dict() for notice in self.notices],
        }
