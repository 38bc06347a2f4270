#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Folio commands.

Functions:
    setup_logger: Initialize FolioLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ParseStats: For parsing runs (parse, check, index, export)
    SplitStats: For the split migration command

Usage:
    from folio.core.cli import setup_logger, ParseStats

    logger = setup_logger(log_dir, "folio")
    stats = ParseStats()
    stats.files_processed += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from folio.core.logging_manager import FolioLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str, verbose: bool = False) -> FolioLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a FolioLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'folio')
        verbose: Echo INFO records to the console

    Returns:
        Configured FolioLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return FolioLogger(operations_log_dir, component_name=component_name, verbose=verbose)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of units processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Human-readable summary of operation statistics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ParseStats(OperationStats):
    """
    Statistics for parsing runs.

    Attributes:
        entries_parsed: Entries parsed successfully
        drafts: How many of those are drafts
        separator_notices: Separator-like lines left as body text
    """
    entries_parsed: int = 0
    drafts: int = 0
    separator_notices: int = 0

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        super().__post_init__()
        if self.entries_parsed < 0:
            raise ValueError(f"entries_parsed must be non-negative, got {self.entries_parsed}")
        if self.drafts < 0:
            raise ValueError(f"drafts must be non-negative, got {self.drafts}")

    @classmethod
    def from_report(cls, report: Any) -> ParseStats:
        """Build from a BatchReport."""
        return cls(
            files_processed=len(report.units),
            errors=len(report.errors),
            entries_parsed=len(report.entries),
            drafts=sum(1 for e in report.entries if e.draft),
            separator_notices=len(report.notices),
            start_time=report.started_at,
        )

    def summary(self) -> str:
        """Get formatted summary with entry metrics."""
        parts = [
            f"{self.files_processed} files processed",
            f"{self.entries_parsed} entries",
            f"{self.drafts} drafts",
            f"{self.errors} errors",
        ]
        if self.separator_notices:
            parts.append(f"{self.separator_notices} separator notices")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with entry metrics."""
        d = super().to_dict()
        d.update({
            "entries_parsed": self.entries_parsed,
            "drafts": self.drafts,
            "separator_notices": self.separator_notices,
        })
        return d


@dataclass
class SplitStats(OperationStats):
    """
    Statistics for the split command.

    Attributes:
        files_created: Entry files written
        files_skipped: Entry files left alone (already existed)
    """
    files_created: int = 0
    files_skipped: int = 0

    def summary(self) -> str:
        """Get formatted summary with file metrics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.files_created} files created, "
            f"{self.files_skipped} skipped, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "files_created": self.files_created,
            "files_skipped": self.files_skipped,
        })
        return d
