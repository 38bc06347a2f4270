#!/usr/bin/env python3
"""
store.py
--------
The content entry store: parsed entries of a batch and their groupings.

The store never mutates entries. Draft entries are kept (and reported)
but never appear in the published index.

Usage:
    from folio.store import EntryStore

    store = EntryStore.from_path("content")
    for entry in store.published():
        print(entry.date, entry.title)
    for name, entries in store.series().items():
        print(name, [e.title for e in entries])
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

# --- Local imports ---
from folio.configs.formats import ParserSettings
from folio.core.logging_manager import FolioLogger
from folio.dataclasses.entry import Entry
from folio.parser.batch import parse_path
from folio.parser.results import BatchReport, SegmentError
from folio.parser.splitter import SeparatorNotice
from folio.serializer import to_dict


class EntryStore:
    """
    Read-only collection of parsed entries.

    Attributes:
        entries: Every parsed entry (drafts included) in source order
        errors: Segment errors collected while parsing
        notices: Separator-like lines kept as body text
    """

    def __init__(
        self,
        entries: Iterable[Entry] = (),
        errors: Iterable[SegmentError] = (),
        notices: Iterable[SeparatorNotice] = (),
    ) -> None:
        self.entries: tuple[Entry, ...] = tuple(entries)
        self.errors: tuple[SegmentError, ...] = tuple(errors)
        self.notices: tuple[SeparatorNotice, ...] = tuple(notices)

    @classmethod
    def from_report(cls, report: BatchReport) -> EntryStore:
        return cls(report.entries, report.errors, report.notices)

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        settings: Optional[ParserSettings] = None,
        logger: Optional[FolioLogger] = None,
    ) -> EntryStore:
        """Parse a file or directory into a store."""
        return cls.from_report(parse_path(path, settings=settings, logger=logger))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    # ---- Views ----
    def published(self) -> List[Entry]:
        """Non-draft entries, newest first."""
        return sorted(
            (e for e in self.entries if e.is_published),
            key=lambda e: e.date,
            reverse=True,
        )

    def drafts(self) -> List[Entry]:
        """Draft entries, newest first."""
        return sorted(
            (e for e in self.entries if e.draft),
            key=lambda e: e.date,
            reverse=True,
        )

    def series(self, include_drafts: bool = False) -> Dict[str, List[Entry]]:
        """
        Group entries by series, each series oldest first.

        Series appear in order of their first entry's date.
        """
        pool = self.entries if include_drafts else self.published()
        groups: Dict[str, List[Entry]] = {}
        for entry in sorted(pool, key=lambda e: e.date):
            if entry.series is not None:
                groups.setdefault(entry.series, []).append(entry)
        return groups

    def tags(self, include_drafts: bool = False) -> Dict[str, List[Entry]]:
        """
        Group entries by tag, each tag newest first.

        An entry listing the same tag twice appears once under it.
        """
        pool = self.entries if include_drafts else self.published()
        groups: Dict[str, List[Entry]] = {}
        for entry in sorted(pool, key=lambda e: e.date, reverse=True):
            for tag in dict.fromkeys(entry.tags):
                groups.setdefault(tag, []).append(entry)
        return dict(sorted(groups.items()))

    def index(self, include_drafts: bool = False) -> List[dict]:
        """JSON-ready published index (optionally with drafts)."""
        entries = (
            sorted(self.entries, key=lambda e: e.date, reverse=True)
            if include_drafts
            else self.published()
        )
        return [to_dict(entry) for entry in entries]
