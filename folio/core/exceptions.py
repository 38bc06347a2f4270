#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Folio project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions while reading content entries.

Exception Hierarchy:
    Exception (built-in)
    └── FolioError - Base for all project errors
        ├── ValidationError - Value coercion failures
        ├── EntryParseError - A segment could not become an Entry
        │   ├── MissingHeaderError - No header delimiters in the segment
        │   ├── MalformedFieldError - Required field absent or untypeable
        │   └── UnreadableUnitError - Source text could not be read
        └── SerializationError - Entry cannot be written back to text

Usage:
    from folio.core.exceptions import EntryParseError, MalformedFieldError

    try:
        entry = parse_segment(text)
    except MalformedFieldError as e:
        logger.log_error(e, {"field": e.field_name})
    except EntryParseError as e:
        logger.log_error(e, {"unit": e.unit})
"""
from __future__ import annotations

from typing import Optional


class FolioError(Exception):
    """
    Base exception for all Folio errors.

    Catch this to handle any project error, or catch specific
    subclasses for more granular error handling.
    """

    pass


class ValidationError(FolioError):
    """
    Exception for value validation failures.

    Raised by DataValidator when a header value cannot be coerced
    to its semantic type:
    - Unparseable timestamps
    - Non-boolean draft flags
    - Lists where a scalar is expected

    Examples:
        >>> raise ValidationError("Cannot convert 'maybe' to boolean")
        >>> raise ValidationError("Invalid timestamp: '2021-13-45'")
    """

    pass


class EntryParseError(FolioError):
    """
    Exception for segment parsing failures.

    Scoped to one segment of one unit. Carries enough context
    (unit identifier and segment index) to allow manual correction.

    Attributes:
        unit: Identifier of the originating unit (usually a file path)
        segment_index: 0-based position of the segment inside its unit
    """

    def __init__(
        self,
        message: str,
        unit: Optional[str] = None,
        segment_index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.unit = unit
        self.segment_index = segment_index

    @property
    def location(self) -> str:
        """Human-readable position, e.g. 'posts/a.md#2'."""
        unit = self.unit or "<input>"
        if self.segment_index is None:
            return unit
        return f"{unit}#{self.segment_index}"

    def __str__(self) -> str:
        if self.unit is None and self.segment_index is None:
            return self.message
        return f"{self.location}: {self.message}"


class MissingHeaderError(EntryParseError):
    """
    Exception for segments without a metadata header.

    Raised when neither a TOML (+++) nor a YAML (---) delimiter pair
    opens the segment, or when the opening marker is never closed.

    Examples:
        >>> raise MissingHeaderError("No header found (must start with +++ or ---)")
        >>> raise MissingHeaderError("Header opened with +++ is never closed")
    """

    pass


class MalformedFieldError(EntryParseError):
    """
    Exception for header fields that are absent or untypeable.

    Raised when a required field (title, date, draft) is missing or
    cannot be coerced, when an optional field has an unusable type,
    or when the header text itself is not a valid mapping.

    Attributes:
        field_name: Offending field, or None when the whole header is bad

    Examples:
        >>> raise MalformedFieldError("Missing required field 'date'", field_name="date")
        >>> raise MalformedFieldError("Header is not valid TOML: ...")
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        unit: Optional[str] = None,
        segment_index: Optional[int] = None,
    ) -> None:
        super().__init__(message, unit=unit, segment_index=segment_index)
        self.field_name = field_name


class SerializationError(FolioError):
    """
    Exception for entries that cannot be rendered back to header text.

    Raised when an extra header value has no representation in the
    requested header format (e.g. None for TOML output, which has no null).

    Examples:
        >>> raise SerializationError("Cannot write NoneType value as inline TOML")
    """

    pass


class UnreadableUnitError(EntryParseError):
    """
    Exception for units whose raw text cannot be loaded.

    Raised for a source file that is not valid UTF-8 or cannot be
    opened. It is recorded against segment 0 of that unit so the other
    units of a batch are still parsed.

    Examples:
        >>> raise UnreadableUnitError("Not valid UTF-8 text: ...", unit="b.md", segment_index=0)
    """

    pass
