#!/usr/bin/env python3
"""
batch.py
--------
Parse many independent units concurrently.

Units share nothing, so each one is parsed in its own worker with no
synchronization beyond collecting results. Results are put back in input
order regardless of completion order.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

# --- Local imports ---
from folio.configs.formats import ParserSettings
from folio.core.exceptions import UnreadableUnitError
from folio.core.logging_manager import FolioLogger, safe_logger
from folio.parser.results import BatchReport, SegmentError, UnitResult
from folio.parser.unit import parse_unit
from folio.utils.fs import read_units


def parse_units(
    units: Iterable[Tuple[str, str]],
    settings: Optional[ParserSettings] = None,
    fail_fast: bool = False,
    logger: Optional[FolioLogger] = None,
) -> BatchReport:
    """
    Parse (unit_id, raw_text) pairs with a thread pool.

    Args:
        units: Units already read into memory
        settings: Separator and worker count (defaults if None)
        fail_fast: Raise the first segment error instead of collecting it
        logger: Optional FolioLogger

    Returns:
        BatchReport with one UnitResult per unit, in input order

    Raises:
        EntryParseError: Only when fail_fast=True
    """
    settings = settings or ParserSettings()
    log = safe_logger(logger)
    report = BatchReport()
    pending = list(units)

    log.log_operation(
        "parse_units",
        {"units": len(pending), "workers": settings.max_workers, "fail_fast": fail_fast},
    )

    def _parse(unit_id: str, text: str) -> UnitResult:
        return parse_unit(
            text,
            unit=unit_id,
            separator=settings.separator,
            strict=fail_fast,
            logger=logger,
        )

    if settings.max_workers == 1:
        # Sequential path: first error in input order, easier to debug
        report.units = [_parse(unit_id, text) for unit_id, text in pending]
    else:
        results: List[Optional[UnitResult]] = [None] * len(pending)
        executor = ThreadPoolExecutor(max_workers=settings.max_workers)
        try:
            future_map: Dict[Future, int] = {
                executor.submit(_parse, unit_id, text): idx
                for idx, (unit_id, text) in enumerate(pending)
            }
            for future in as_completed(future_map):
                # Put result back to original index to keep output ordering stable
                results[future_map[future]] = future.result()
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

        if any(r is None for r in results):
            raise RuntimeError("Parse results incomplete")
        report.units = [r for r in results if r is not None]

    log.log_info(
        "Batch parsed",
        {
            "units": len(report.units),
            "entries": len(report.entries),
            "errors": len(report.errors),
        },
    )
    return report


def _unreadable(unit_id: str, error: Exception) -> UnreadableUnitError:
    if isinstance(error, UnicodeDecodeError):
        message = f"Not valid UTF-8 text (byte {error.start}): {error.reason}"
    else:
        message = f"Cannot read file: {error}"
    return UnreadableUnitError(message, unit=unit_id, segment_index=0)


def parse_path(
    path: str | Path,
    settings: Optional[ParserSettings] = None,
    fail_fast: bool = False,
    logger: Optional[FolioLogger] = None,
) -> BatchReport:
    """
    Read a file or directory and parse every unit in it.

    A file that cannot be read becomes a unit with a single
    UnreadableUnitError at its place in the listing; its siblings are
    still parsed.

    Raises:
        FileNotFoundError: If path does not exist
        EntryParseError: Only when fail_fast=True
    """
    settings = settings or ParserSettings()
    log = safe_logger(logger)
    failures: List[Tuple[int, str, Exception]] = []
    units = read_units(path, settings.pattern, failures=failures)
    log.log_info(
        "Read units",
        {"path": str(path), "count": len(units), "unreadable": len(failures)},
    )

    unreadable: List[Tuple[int, UnitResult]] = []
    for position, unit_id, error in failures:
        parse_error = _unreadable(unit_id, error)
        if fail_fast:
            raise parse_error from error
        segment_error = SegmentError(unit=unit_id, segment_index=0, error=parse_error)
        log.log_segment_error(segment_error)
        unreadable.append((position, UnitResult(unit=unit_id, outcomes=[segment_error])))

    report = parse_units(units, settings=settings, fail_fast=fail_fast, logger=logger)
    # Positions ascend, so each insert lands at its place in the full listing
    for position, result in unreadable:
        report.units.insert(position, result)
    return report
