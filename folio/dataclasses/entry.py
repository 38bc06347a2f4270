#!/usr/bin/env python3
"""
entry.py
-------------------
Dataclasses representing blog articles parsed from Markdown sources.

An article is a metadata header (TOML or YAML front matter) followed by a
Markdown body. Parsed articles are immutable: a new authoring event is a
new version of the source file, never an in-place edit of an Entry.

Classes:
    PublishDate: Publication timestamp (UTC instant + original offset)
    Entry: One article with its header fields and body
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

# --- Local imports ---
from folio.configs.formats import TOML
from folio.utils.md import extract_code_blocks
from folio.utils.slugify import slugify
from folio.utils.txt import compute_metrics


@dataclass(frozen=True, order=True)
class PublishDate:
    """
    Publication timestamp normalized to a UTC instant.

    The original UTC offset is kept so the value can be displayed (and
    written back) exactly as the author wrote it. Date-only values are
    midnight UTC with `date_only` set.

    Attributes:
        instant: Timezone-aware datetime in UTC
        offset: Offset of the original value from UTC
        date_only: True when the source value had no time component

    Examples:
        >>> d = PublishDate.parse("2021-03-03T13:58:28Z")
        >>> d.isoformat()
        '2021-03-03T13:58:28Z'
        >>> PublishDate.parse("2021-03-03").isoformat()
        '2021-03-03'
    """

    instant: datetime
    offset: timedelta = timedelta(0)
    date_only: bool = False

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise ValueError("PublishDate.instant must be timezone-aware")
        if self.instant.utcoffset() != timedelta(0):
            object.__setattr__(self, "instant", self.instant.astimezone(timezone.utc))

    # ---- Construction ----
    @classmethod
    def from_datetime(cls, value: datetime) -> PublishDate:
        """Build from a datetime; naive values are taken as UTC."""
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=timezone.utc)
        offset = value.utcoffset() or timedelta(0)
        return cls(instant=value.astimezone(timezone.utc), offset=offset)

    @classmethod
    def from_date(cls, value: date) -> PublishDate:
        """Build a date-only value (midnight UTC)."""
        return cls(
            instant=datetime(value.year, value.month, value.day, tzinfo=timezone.utc),
            date_only=True,
        )

    @classmethod
    def parse(cls, text: str) -> PublishDate:
        """
        Parse an ISO-8601 string.

        Accepts 'YYYY-MM-DD' and full timestamps with 'Z', '+HH:MM'
        or no offset. A space may replace the 'T' separator.

        Raises:
            ValueError: If the string is not ISO-8601
        """
        text = text.strip()
        if len(text) == 10:
            return cls.from_date(date.fromisoformat(text))
        return cls.from_datetime(datetime.fromisoformat(text))

    # ---- Views ----
    @property
    def local(self) -> datetime:
        """The timestamp in its original offset."""
        return self.instant.astimezone(timezone(self.offset))

    def isoformat(self) -> str:
        """Render as written: date-only, 'Z' for UTC, or '+HH:MM'."""
        if self.date_only:
            return self.instant.date().isoformat()
        text = self.local.isoformat()
        if self.offset == timedelta(0) and text.endswith("+00:00"):
            text = text[: -len("+00:00")] + "Z"
        return text

    def native(self) -> date | datetime:
        """Value as a native date/datetime for TOML/YAML emitters."""
        if self.date_only:
            return self.instant.date()
        return self.local

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class Entry:
    """
    One article parsed from a Markdown source.

    Equality covers the header fields and body only; where the entry
    came from (unit, segment index, header flavour) does not affect it.

    Attributes:
        title: Human-readable title
        date: Publication timestamp
        draft: True for unpublished entries
        body: Markdown body (leading/trailing blank lines removed)
        series: Optional named sequence this entry belongs to
        tags: Ordered tags (duplicates kept)
        extra: Other header keys, preserved for re-serialization
        header_format: 'toml' or 'yaml'
        source: Identifier of the originating unit
        segment_index: 0-based position in the originating unit
    """

    title: str
    date: PublishDate
    draft: bool
    body: str = ""
    series: Optional[str] = None
    tags: Tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)
    header_format: str = field(default=TOML.name, compare=False)
    source: Optional[str] = field(default=None, compare=False)
    segment_index: Optional[int] = field(default=None, compare=False)

    @property
    def is_published(self) -> bool:
        """True unless the entry is a draft."""
        return not self.draft

    @property
    def slug(self) -> str:
        """Filesystem/URL-safe name derived from the title."""
        return slugify(self.title) or "untitled"

    @property
    def body_lines(self) -> List[str]:
        return self.body.splitlines()

    @property
    def duplicate_tags(self) -> List[str]:
        """Tags that appear more than once, in first-seen order."""
        counts = Counter(self.tags)
        return [tag for tag in dict.fromkeys(self.tags) if counts[tag] > 1]

    @property
    def word_count(self) -> int:
        return compute_metrics(self.body_lines)[0]

    @property
    def reading_time(self) -> float:
        """Estimated minutes to read the body."""
        return compute_metrics(self.body_lines)[1]

    @property
    def code_languages(self) -> List[str]:
        """Language hints of fenced code blocks, first-seen order."""
        languages = [b["language"] for b in extract_code_blocks(self.body) if b["language"]]
        return list(dict.fromkeys(languages))

    def header_fields(self) -> Dict[str, Any]:
        """
        Header fields in canonical order.

        Optional fields are omitted when unset; extras follow the
        known fields in their original order.
        """
        fields: Dict[str, Any] = {
            "title": self.title,
            "date": self.date,
            "draft": self.draft,
        }
        if self.series is not None:
            fields["series"] = self.series
        if self.tags:
            fields["tags"] = list(self.tags)
        for key, value in self.extra.items():
            fields.setdefault(key, value)
        return fields
