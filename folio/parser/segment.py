#!/usr/bin/env python3
"""
segment.py
----------
Parse one raw segment into an Entry.

A segment is a header block delimited by a fixed marker pair followed by
the Markdown body:

    +++                                 ---
    title = 'Prototype Pattern'         title: Prototype Pattern
    date = 2021-03-03T13:58:28Z   or    date: 2021-03-03T13:58:28Z
    draft = false                       draft: false
    +++                                 ---

    Body...                             Body...

TOML headers are read with tomllib, YAML headers with PyYAML safe_load.
Required fields are title, date and draft; series and tags are optional.
Parsing is a pure transform: no I/O, no shared state.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import tomllib
from typing import Any, Dict, Optional, Sequence

# --- Third party imports ---
import yaml

# --- Local imports ---
from folio.configs.formats import (
    FIELD_ORDER,
    HEADER_FORMATS,
    REQUIRED_FIELDS,
    TOML,
    HeaderFormat,
)
from folio.core.exceptions import (
    MalformedFieldError,
    MissingHeaderError,
    ValidationError,
)
from folio.core.validators import DataValidator
from folio.dataclasses.entry import Entry
from folio.utils.md import detect_header_format, split_frontmatter

logger = logging.getLogger(__name__)


def load_header(
    fmt: HeaderFormat,
    header_text: str,
    unit: Optional[str] = None,
    segment_index: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Load header text into a mapping.

    Raises:
        MalformedFieldError: If the text is not valid TOML/YAML or not a mapping
    """
    if fmt.name == TOML.name:
        try:
            metadata: Any = tomllib.loads(header_text)
        except tomllib.TOMLDecodeError as e:
            raise MalformedFieldError(
                f"Header is not valid TOML: {e}",
                unit=unit,
                segment_index=segment_index,
            ) from e
    else:
        try:
            metadata = yaml.safe_load(header_text)
        except yaml.YAMLError as e:
            raise MalformedFieldError(
                f"Header is not valid YAML: {e}",
                unit=unit,
                segment_index=segment_index,
            ) from e
        if metadata is None:
            metadata = {}

    if not isinstance(metadata, dict):
        raise MalformedFieldError(
            f"Header must be a mapping, got {type(metadata).__name__}",
            unit=unit,
            segment_index=segment_index,
        )
    return {str(key): value for key, value in metadata.items()}


def parse_segment(
    raw_segment: str,
    unit: Optional[str] = None,
    segment_index: Optional[int] = None,
    formats: Sequence[HeaderFormat] = HEADER_FORMATS,
) -> Entry:
    """
    Parse a single article segment.

    Args:
        raw_segment: Text of one article (header + body)
        unit: Identifier of the originating unit, used in errors
        segment_index: Position of the segment in its unit, used in errors
        formats: Header formats to recognise

    Returns:
        Validated Entry tagged with its origin

    Raises:
        MissingHeaderError: No header delimiters found (or never closed)
        MalformedFieldError: Required field missing/untypeable, optional
            field unusable, or header not a valid mapping
    """
    fmt, header_text, body_lines = split_frontmatter(raw_segment, formats)

    if fmt is None:
        opened, _ = detect_header_format(raw_segment.splitlines(), formats)
        if opened is not None:
            raise MissingHeaderError(
                f"Header opened with {opened.delimiter} is never closed",
                unit=unit,
                segment_index=segment_index,
            )
        delimiters = " or ".join(f.delimiter for f in formats)
        raise MissingHeaderError(
            f"No header found (must start with {delimiters})",
            unit=unit,
            segment_index=segment_index,
        )

    metadata = load_header(fmt, header_text, unit, segment_index)

    for name in REQUIRED_FIELDS:
        if metadata.get(name) is None:
            raise MalformedFieldError(
                f"Missing required field '{name}'",
                field_name=name,
                unit=unit,
                segment_index=segment_index,
            )

    def coerce(name: str, converter):
        try:
            return converter(metadata.get(name))
        except ValidationError as e:
            raise MalformedFieldError(
                f"Invalid '{name}': {e}",
                field_name=name,
                unit=unit,
                segment_index=segment_index,
            ) from e

    entry = Entry(
        title=coerce("title", DataValidator.normalize_string),
        date=coerce("date", DataValidator.normalize_timestamp),
        draft=coerce("draft", DataValidator.normalize_bool),
        body="\n".join(body_lines),
        series=coerce("series", DataValidator.normalize_series),
        tags=coerce("tags", DataValidator.normalize_tags),
        extra={k: v for k, v in metadata.items() if k not in FIELD_ORDER},
        header_format=fmt.name,
        source=unit,
        segment_index=segment_index,
    )

    logger.debug(
        "Parsed %s#%s: %r (%s header, %d body lines)",
        unit or "<input>",
        segment_index,
        entry.title,
        fmt.name,
        len(body_lines),
    )
    return entry
