"""
Utilities package for the Folio project.

This package provides commonly-used utilities organized by domain:
- md: Front matter splitting and TOML/YAML formatting
- fs: File discovery and unit loading
- slugify: Filesystem-safe names for entries
- txt: Word counts and reading time

Import commonly-used utilities directly from this package:
    from folio.utils import split_frontmatter, read_units, slugify
"""

from .md import (
    detect_header_format,
    split_frontmatter,
    trim_blank_lines,
    FenceTracker,
    quote_string,
    toml_line,
    toml_value,
    yaml_line,
    yaml_value,
    extract_code_blocks,
)

from .fs import (
    find_markdown_files,
    read_units,
)

from .slugify import slugify, generate_entry_filename

from .txt import compute_metrics, prose_lines

__all__ = [
    # Markdown/front matter
    "detect_header_format",
    "split_frontmatter",
    "trim_blank_lines",
    "FenceTracker",
    "quote_string",
    "toml_line",
    "toml_value",
    "yaml_line",
    "yaml_value",
    "extract_code_blocks",
    # Filesystem
    "find_markdown_files",
    "read_units",
    # Names
    "slugify",
    "generate_entry_filename",
    # Text
    "compute_metrics",
    "prose_lines",
]
