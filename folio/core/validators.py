#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for header values.

Provides type-safe conversion of raw TOML/YAML values into the semantic
types of an Entry. Every failure raises ValidationError; the parser maps
it to MalformedFieldError with the offending field name.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Tuple

from folio.core.exceptions import ValidationError
from folio.dataclasses.entry import PublishDate


class DataValidator:
    """Centralized validation for header fields."""

    @staticmethod
    def normalize_timestamp(value: Any) -> PublishDate:
        """
        Normalize date inputs to a PublishDate.

        Args:
            value: Native date/datetime (from TOML/YAML) or ISO-8601 string

        Returns:
            PublishDate (date-only values flagged as such)

        Raises:
            ValidationError: If value is not a date or ISO-8601 string
        """
        if isinstance(value, datetime):
            return PublishDate.from_datetime(value)
        if isinstance(value, date):
            return PublishDate.from_date(value)
        if isinstance(value, str):
            try:
                return PublishDate.parse(value)
            except ValueError as e:
                raise ValidationError(f"Invalid timestamp: {value!r}") from e
        raise ValidationError(
            f"Cannot convert {type(value).__name__} to timestamp"
        )

    @staticmethod
    def normalize_string(value: Any) -> str:
        """
        Convert a scalar to a non-empty, stripped string.

        Raises:
            ValidationError: For empty strings, containers and booleans
        """
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValidationError(
                f"Expected a string, got {type(value).__name__}"
            )
        text = str(value).strip()
        if not text:
            raise ValidationError("Expected a non-empty string")
        return text

    @staticmethod
    def normalize_bool(value: Any) -> bool:
        """
        Convert various inputs to boolean.

        Accepts booleans, 0/1 and the usual true/false words.

        Raises:
            ValidationError: If conversion fails
        """
        if isinstance(value, bool):
            return value
        elif isinstance(value, (int, float)):
            if value == 0:
                return False
            elif value == 1:
                return True
            else:
                raise ValidationError(f"Cannot convert numeric '{value}' to boolean")
        elif isinstance(value, str):
            if value.strip().lower() in ("true", "1", "yes", "on"):
                return True
            elif value.strip().lower() in ("false", "0", "no", "off"):
                return False
            else:
                raise ValidationError(f"Cannot convert '{value}' to boolean")
        raise ValidationError(f"Cannot convert {type(value).__name__} to boolean")

    @staticmethod
    def normalize_series(value: Any) -> Optional[str]:
        """
        Normalize the series field.

        A single-item list is accepted (some generators write series
        as a taxonomy list).

        Raises:
            ValidationError: For lists of several series or non-scalars
        """
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            if len(value) == 0:
                return None
            if len(value) > 1:
                raise ValidationError(
                    f"An entry belongs to at most one series, got {len(value)}"
                )
            value = value[0]
        return DataValidator.normalize_string(value)

    @staticmethod
    def normalize_tags(value: Any) -> Tuple[str, ...]:
        """
        Normalize tags to an ordered tuple of strings.

        Order and duplicates are preserved. A single string becomes a
        one-tag tuple.

        Raises:
            ValidationError: For mappings or non-scalar items
        """
        if value is None:
            return ()
        if isinstance(value, str):
            return (DataValidator.normalize_string(value),)
        if not isinstance(value, (list, tuple)):
            raise ValidationError(
                f"Tags must be a list of strings, got {type(value).__name__}"
            )
        tags = []
        for i, item in enumerate(value):
            try:
                tags.append(DataValidator.normalize_string(item))
            except ValidationError as e:
                raise ValidationError(f"Invalid tag at position {i}: {e}") from e
        return tuple(tags)
