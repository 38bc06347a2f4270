"""
test_entry.py
-------------
Unit tests for folio.dataclasses.entry.

Tests PublishDate parsing, normalization and rendering, and the
Entry dataclass's equality, derived properties and header fields.
"""
from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pytest

from folio.dataclasses.entry import Entry, PublishDate


def make_entry(**overrides):
    """Build an Entry with sensible defaults."""
    values = {
        "title": "Prototype Pattern",
        "date": PublishDate.parse("2021-03-03T13:58:28Z"),
        "draft": False,
        "body": "Clone objects instead of building them.",
    }
    values.update(overrides)
    return Entry(**values)


class TestPublishDate:
    """Test PublishDate."""

    def test_parse_utc(self):
        value = PublishDate.parse("2021-03-03T13:58:28Z")
        assert value.instant == datetime(2021, 3, 3, 13, 58, 28, tzinfo=timezone.utc)
        assert value.offset == timedelta(0)
        assert value.isoformat() == "2021-03-03T13:58:28Z"

    def test_parse_offset(self):
        """Test offsets are normalized to UTC but kept for display."""
        value = PublishDate.parse("2022-05-10T09:30:00+02:00")
        assert value.instant == datetime(2022, 5, 10, 7, 30, tzinfo=timezone.utc)
        assert value.isoformat() == "2022-05-10T09:30:00+02:00"
        assert value.local.hour == 9

    def test_parse_date_only(self):
        value = PublishDate.parse("2021-03-03")
        assert value.date_only
        assert value.instant == datetime(2021, 3, 3, tzinfo=timezone.utc)
        assert value.isoformat() == "2021-03-03"
        assert value.native() == date(2021, 3, 3)

    def test_parse_naive_is_utc(self):
        value = PublishDate.parse("2021-03-03T13:58:28")
        assert value.isoformat() == "2021-03-03T13:58:28Z"

    def test_parse_space_separator(self):
        assert PublishDate.parse("2021-03-03 13:58:28Z").isoformat() == "2021-03-03T13:58:28Z"

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            PublishDate.parse("March 3rd")

    def test_naive_instant_rejected(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            PublishDate(instant=datetime(2021, 3, 3))

    def test_instant_converted_to_utc(self):
        local = datetime(2021, 3, 3, 15, 0, tzinfo=timezone(timedelta(hours=2)))
        assert PublishDate(instant=local).instant.tzinfo == timezone.utc

    def test_ordering_across_offsets(self):
        """Test ordering follows the UTC instant, not the wall clock."""
        earlier = PublishDate.parse("2021-03-03T10:00:00+05:00")  # 05:00Z
        later = PublishDate.parse("2021-03-03T06:00:00Z")
        assert earlier < later

    def test_native_keeps_offset(self):
        value = PublishDate.parse("2022-05-10T09:30:00+02:00")
        assert value.native().utcoffset() == timedelta(hours=2)

    def test_str(self):
        assert str(PublishDate.parse("2021-03-03")) == "2021-03-03"


class TestEntry:
    """Test Entry dataclass."""

    def test_defaults(self):
        entry = Entry(title="X", date=PublishDate.parse("2021-03-03"), draft=True)
        assert entry.body == ""
        assert entry.series is None
        assert entry.tags == ()
        assert entry.extra == {}

    def test_frozen(self):
        entry = make_entry()
        with pytest.raises(FrozenInstanceError):
            entry.title = "Other"

    def test_equality_ignores_origin(self):
        """Test source, segment index and header format do not affect equality."""
        a = make_entry(source="a.md", segment_index=0, header_format="toml")
        b = make_entry(source="b.md", segment_index=3, header_format="yaml")
        assert a == b

    def test_equality_covers_fields(self):
        assert make_entry(tags=("a",)) != make_entry(tags=("b",))
        assert make_entry(draft=True) != make_entry(draft=False)

    def test_is_published(self):
        assert make_entry(draft=False).is_published
        assert not make_entry(draft=True).is_published

    def test_slug(self):
        assert make_entry(title="Modular Monolith vs. Microservices").slug == (
            "modular-monolith-vs-microservices"
        )

    def test_slug_fallback(self):
        assert make_entry(title="???").slug == "untitled"

    def test_duplicate_tags(self):
        entry = make_entry(tags=("go", "design", "go", "design", "go"))
        assert entry.duplicate_tags == ["go", "design"]
        assert make_entry(tags=("go",)).duplicate_tags == []

    def test_word_count_and_reading_time(self):
        entry = make_entry(body="one two three four")
        assert entry.word_count == 4
        assert entry.reading_time > 0

    def test_empty_body_metrics(self):
        entry = make_entry(body="")
        assert entry.word_count == 0
        assert entry.reading_time == 0.0

    def test_code_languages(self):
        body = "Intro\n\n```go\na\n```\n\n```python\nb\n```\n\n```go\nc\n```\n\n```\nd\n```"
        assert make_entry(body=body).code_languages == ["go", "python"]

    def test_header_fields_order(self):
        entry = make_entry(
            series="Design Patterns",
            tags=("creational",),
            extra={"aliases": ["/old"], "weight": 3},
        )
        assert list(entry.header_fields()) == [
            "title",
            "date",
            "draft",
            "series",
            "tags",
            "aliases",
            "weight",
        ]

    def test_header_fields_omit_unset_optionals(self):
        assert list(make_entry().header_fields()) == ["title", "date", "draft"]

    def test_extra_cannot_shadow_known_fields(self):
        entry = make_entry(extra={"title": "Shadow"})
        assert entry.header_fields()["title"] == "Prototype Pattern"
