#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for the Folio project.

Provides functions for splitting Markdown articles into front matter and
body, and for formatting header values as TOML or YAML text:
- Header detection (+++ TOML / --- YAML delimiter pairs)
- Inline TOML and YAML formatting helpers
- Fenced code block extraction (markdown-it-py)

This module handles Markdown structure but delegates type conversion
and validation to DataValidator.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date, datetime, time
from typing import Any, Dict, List, Optional, Sequence, Tuple

# --- Third party imports ---
from markdown_it import MarkdownIt

# --- Local imports ---
from folio.configs.formats import FENCE_PATTERN, HEADER_FORMATS, HeaderFormat
from folio.core.exceptions import SerializationError


# ----- Front Matter Parsing -----
def detect_header_format(
    lines: Sequence[str], formats: Sequence[HeaderFormat] = HEADER_FORMATS
) -> Tuple[Optional[HeaderFormat], int]:
    """
    Find the header format opening the given lines.

    The opening delimiter must be the first non-blank line.

    Returns:
        Tuple of (format or None, index of the opening line)
    """
    for i, line in enumerate(lines):
        if not line.strip():
            continue
        stripped = line.strip()
        for fmt in formats:
            if stripped == fmt.delimiter:
                return fmt, i
        return None, i
    return None, len(lines)


def split_frontmatter(
    content: str, formats: Sequence[HeaderFormat] = HEADER_FORMATS
) -> Tuple[Optional[HeaderFormat], str, List[str]]:
    """
    Split markdown content into front matter and body.

    Expected format (TOML):
        +++
        title = 'X'
        +++

        Body content here...

    or the same with '---' delimiters around YAML.

    Args:
        content: Full markdown text of one article
        formats: Header formats to recognise

    Returns:
        Tuple of (format, frontmatter_text, body_lines)
        - format: Detected HeaderFormat, None if no closed header was found
        - frontmatter_text: Header content as string (empty if none)
        - body_lines: Body lines (all lines when no header)

    Examples:
        >>> fmt, fm, body = split_frontmatter("+++\\ntitle = 'X'\\n+++\\n\\nBody")
        >>> fmt.name, fm, body
        ('toml', "title = 'X'", ['Body'])
    """
    lines = content.splitlines()
    fmt, start = detect_header_format(lines, formats)
    if fmt is None:
        return None, "", lines

    header_end = None
    for i in range(start + 1, len(lines)):
        if lines[i].strip() == fmt.delimiter:
            header_end = i
            break

    if header_end is None:
        return None, "", lines

    frontmatter_lines = lines[start + 1 : header_end]
    body_lines = trim_blank_lines(lines[header_end + 1 :])

    return fmt, "\n".join(frontmatter_lines), body_lines


def trim_blank_lines(lines: List[str]) -> List[str]:
    """Drop blank lines at both ends of a block."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


# ----- Fenced Code Blocks -----
class FenceTracker:
    """
    Tracks whether successive lines fall inside a fenced code block.

    Only a fence of the same character, at least as long as the
    opening one, closes the block.

    Examples:
        >>> tracker = FenceTracker()
        >>> [tracker.feed(l) for l in ["```go", "x := 1", "```"]]
        [True, False, True]
    """

    def __init__(self, fence: Optional[str] = None) -> None:
        self.fence: Optional[str] = fence

    @property
    def inside(self) -> bool:
        return self.fence is not None

    def feed(self, line: str) -> bool:
        """Consume a line; True when it opens or closes a fence."""
        match = FENCE_PATTERN.match(line)
        if not match:
            return False
        marker = match.group(1)
        if self.fence is None:
            self.fence = marker
            return True
        # A closing fence carries no info string
        if (
            marker[0] == self.fence[0]
            and len(marker) >= len(self.fence)
            and not line[match.end():].strip()
        ):
            self.fence = None
            return True
        return False


# ----- Scalar Formatting -----
_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def quote_string(value: str) -> str:
    """
    Double-quote a string, escaping what TOML and YAML both require.

    Examples:
        >>> quote_string('He said "hi"')
        '"He said \\\\"hi\\\\""'
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def format_datetime(value: date | datetime) -> str:
    """ISO-8601 rendering with 'Z' for UTC offsets."""
    if isinstance(value, datetime):
        text = value.isoformat()
        if text.endswith("+00:00"):
            text = text[: -len("+00:00")] + "Z"
        return text
    return value.isoformat()


# ----- TOML Formatting -----
def toml_key(key: str) -> str:
    """Bare key when possible, quoted otherwise."""
    return key if _BARE_KEY.match(key) else quote_string(key)


def toml_value(value: Any) -> str:
    """
    Format a value as inline TOML.

    Supports strings, booleans, numbers, dates, times, lists, and
    mappings as inline tables.

    Raises:
        SerializationError: For None and other values TOML cannot hold

    Examples:
        >>> toml_value(["design", "patterns"])
        '["design", "patterns"]'
        >>> toml_value(False)
        'false'
    """
    if hasattr(value, "native") and callable(value.native):
        value = value.native()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, (datetime, date)):
        return format_datetime(value)
    if isinstance(value, time):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return f"[{', '.join(toml_value(item) for item in value)}]"
    if isinstance(value, dict):
        pairs = ", ".join(toml_line(str(k), v) for k, v in value.items())
        return f"{{ {pairs} }}" if pairs else "{}"
    raise SerializationError(
        f"Cannot write {type(value).__name__} value as inline TOML"
    )


def toml_line(key: str, value: Any) -> str:
    """Format one `key = value` line."""
    return f"{toml_key(key)} = {toml_value(value)}"


# ----- YAML Formatting -----
def yaml_value(value: Any) -> str:
    """
    Format a scalar or flat list as inline YAML.

    Strings are always double-quoted so values like 'true' or '2021'
    keep their type when read back.

    Raises:
        SerializationError: For mappings and nested structures

    Examples:
        >>> yaml_value(["a b", "c"])
        '["a b", "c"]'
        >>> yaml_value(True)
        'true'
    """
    if hasattr(value, "native") and callable(value.native):
        value = value.native()
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, (datetime, date)):
        return format_datetime(value)
    if isinstance(value, (list, tuple)):
        if any(isinstance(item, (list, tuple, dict)) for item in value):
            raise SerializationError("Cannot write nested list as inline YAML")
        return f"[{', '.join(yaml_value(item) for item in value)}]"
    raise SerializationError(
        f"Cannot write {type(value).__name__} value as inline YAML"
    )


def yaml_line(key: str, value: Any) -> str:
    """Format one `key: value` line."""
    return f"{key}: {yaml_value(value)}"


# ----- Body Structure -----
_md_parser = MarkdownIt("commonmark")


def extract_code_blocks(text: str) -> List[Dict[str, Any]]:
    """
    Extract fenced code blocks from a Markdown body.

    Code embedded in articles is illustrative; it is collected for
    indexing (languages used) and never executed.

    Args:
        text: Markdown body

    Returns:
        List of dicts with keys: language (None if no info string),
        line (0-based start line), content

    Examples:
        >>> extract_code_blocks("```go\\nfmt.Println()\\n```")
        [{'language': 'go', 'line': 0, 'content': 'fmt.Println()\\n'}]
    """
    blocks: List[Dict[str, Any]] = []
    for token in _md_parser.parse(text):
        if token.type != "fence":
            continue
        info = token.info.strip()
        blocks.append({
            "language": info.split()[0] if info else None,
            "line": token.map[0] if token.map else 0,
            "content": token.content,
        })
    return blocks
