#!/usr/bin/env python3
"""
formats.py
----------

Declarative configuration for entry source files.

Defines the header formats a segment may open with, the literal line
that separates concatenated entries, and the parser settings the CLI
passes down to the batch parser.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class HeaderFormat:
    """
    A front matter flavour identified by its delimiter line.

    Attributes:
        name: Format key ('toml' or 'yaml')
        delimiter: Line that both opens and closes the header block
    """

    name: str
    delimiter: str


TOML = HeaderFormat(name="toml", delimiter="+++")
YAML = HeaderFormat(name="yaml", delimiter="---")

HEADER_FORMATS: Tuple[HeaderFormat, ...] = (TOML, YAML)


def get_header_format(name: str) -> HeaderFormat:
    """Look up a header format by name ('toml' or 'yaml')."""
    for fmt in HEADER_FORMATS:
        if fmt.name == name:
            return fmt
    raise KeyError(f"Unknown header format: {name!r}")


# ----- Segments -----
SEGMENT_SEPARATOR = "<!-- entry-break -->"

# Lines resembling the separator that must NOT split (case, spacing, dashes)
NEAR_SEPARATOR_PATTERN = re.compile(
    r"^\s*<!-{2,3}\s*entry[\s_-]*break\s*-{2,3}>\s*$", re.IGNORECASE
)

FENCE_PATTERN = re.compile(r"^\s{0,3}(`{3,}|~{3,})")


# ----- Fields -----
REQUIRED_FIELDS: Tuple[str, ...] = ("title", "date", "draft")
OPTIONAL_FIELDS: Tuple[str, ...] = ("series", "tags")
FIELD_ORDER: Tuple[str, ...] = REQUIRED_FIELDS + OPTIONAL_FIELDS


@dataclass(frozen=True)
class ParserSettings:
    """
    Runtime settings for reading and parsing units.

    Attributes:
        separator: Exact separator line between concatenated entries
        pattern: Glob used to discover units inside a directory
        max_workers: Thread pool size for batch parsing (None = executor default)
    """

    separator: str = SEGMENT_SEPARATOR
    pattern: str = "**/*.md"
    max_workers: Optional[int] = None
