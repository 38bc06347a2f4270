#!/usr/bin/env python3
"""
unit.py
-------
Parse every segment of one raw unit.

Failures are isolated per segment: a missing or malformed header in one
segment is recorded as a SegmentError and parsing continues with the
next segment. Callers who prefer to halt on the first error pass
strict=True.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Local imports ---
from folio.configs.formats import SEGMENT_SEPARATOR
from folio.core.exceptions import EntryParseError
from folio.core.logging_manager import FolioLogger, safe_logger
from folio.parser.results import SegmentError, UnitResult
from folio.parser.segment import parse_segment
from folio.parser.splitter import find_near_separators, split


def parse_unit(
    raw_unit: str,
    unit: Optional[str] = None,
    separator: str = SEGMENT_SEPARATOR,
    strict: bool = False,
    logger: Optional[FolioLogger] = None,
) -> UnitResult:
    """
    Split a unit and parse each segment independently.

    Args:
        raw_unit: Full text of the unit (already read by the caller)
        unit: Unit identifier (usually a relative file path)
        separator: Exact separator literal
        strict: Raise the first EntryParseError instead of collecting it
        logger: Optional FolioLogger

    Returns:
        UnitResult with one outcome per segment, in order

    Raises:
        EntryParseError: Only when strict=True
    """
    log = safe_logger(logger)
    result = UnitResult(unit=unit)

    result.notices = find_near_separators(raw_unit, separator, unit)
    for notice in result.notices:
        log.log_notice(notice)

    for index, segment in enumerate(split(raw_unit, separator)):
        try:
            entry = parse_segment(segment, unit=unit, segment_index=index)
        except EntryParseError as e:
            if strict:
                raise
            error = SegmentError(unit=unit, segment_index=index, error=e)
            log.log_segment_error(error)
            result.outcomes.append(error)
        else:
            result.outcomes.append(entry)

    log.log_unit(result)
    return result
