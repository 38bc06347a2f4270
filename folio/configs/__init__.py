#!/usr/bin/env python3
"""
Configuration modules.

This package contains declarative configuration for parsing entry sources:
- formats: header delimiters, segment separator, field order, parser settings
"""

from folio.configs.formats import (
    FIELD_ORDER,
    HEADER_FORMATS,
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    SEGMENT_SEPARATOR,
    TOML,
    YAML,
    HeaderFormat,
    ParserSettings,
    get_header_format,
)

__all__ = [
    "FIELD_ORDER",
    "HEADER_FORMATS",
    "OPTIONAL_FIELDS",
    "REQUIRED_FIELDS",
    "SEGMENT_SEPARATOR",
    "TOML",
    "YAML",
    "HeaderFormat",
    "ParserSettings",
    "get_header_format",
]
