#!/usr/bin/env python3
"""
serializer.py
-------------
Render Entry records back to text and to JSON-ready dictionaries.

Header fields are written in canonical order (title, date, draft, series,
tags) followed by any extra keys, using the entry's original header format
unless another one is requested. Re-parsing the output yields an equal
Entry.

Nested extras keep their shape: TOML gets [a.b] tables and [[a]] arrays
of tables, YAML gets block mappings and sequences from yaml.safe_dump.

Functions:
    to_header: Delimited header block
    to_document: Header + body
    join_documents: Several documents joined by the separator line
    to_dict: JSON-serializable view of an entry
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, Iterable, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from folio.configs.formats import FIELD_ORDER, SEGMENT_SEPARATOR, TOML, get_header_format
from folio.core.exceptions import SerializationError
from folio.dataclasses.entry import Entry
from folio.utils.md import toml_key, toml_line, yaml_line


def _is_table_array(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and all(isinstance(item, dict) for item in value)
    )


def _toml_table(path: List[str], table: Dict[str, Any]) -> List[str]:
    """
    Lines of one TOML table: its key/value pairs first, then sub-tables
    as [path.key] and lists of tables as [[path.key]].
    """
    lines = [
        toml_line(str(key), value)
        for key, value in table.items()
        if not isinstance(value, dict) and not _is_table_array(value)
    ]
    for key, value in table.items():
        sub_path = [*path, toml_key(str(key))]
        name = ".".join(sub_path)
        if isinstance(value, dict):
            lines += ["", f"[{name}]", *_toml_table(sub_path, value)]
        elif _is_table_array(value):
            for item in value:
                lines += ["", f"[[{name}]]", *_toml_table(sub_path, item)]
    return lines


def _yaml_lines(fields: Dict[str, Any]) -> List[str]:
    lines = [yaml_line(key, value) for key, value in fields.items() if key in FIELD_ORDER]
    extras = {key: value for key, value in fields.items() if key not in FIELD_ORDER}
    if extras:
        try:
            dumped = yaml.safe_dump(
                extras, default_flow_style=False, allow_unicode=True, sort_keys=False
            )
        except yaml.YAMLError as e:
            raise SerializationError(f"Cannot write extra fields as YAML: {e}") from e
        lines += dumped.rstrip("\n").splitlines()
    return lines


def to_header(entry: Entry, fmt: Optional[str] = None) -> str:
    """
    Render the entry's header block, delimiters included.

    Args:
        entry: Entry to render
        fmt: 'toml' or 'yaml'; defaults to the entry's original format

    Raises:
        SerializationError: If an extra value cannot be represented

    Examples:
        >>> print(to_header(entry))
        +++
        title = "X"
        date = 2021-03-03T13:58:28Z
        draft = false
        series = "Design Architectures"
        +++
    """
    header_format = get_header_format(fmt or entry.header_format)
    fields = entry.header_fields()

    if header_format.name == TOML.name:
        lines = _toml_table([], fields)
    else:
        lines = _yaml_lines(fields)

    return "\n".join([header_format.delimiter, *lines, header_format.delimiter])


def to_document(entry: Entry, fmt: Optional[str] = None) -> str:
    """Render header and body as one Markdown document."""
    header = to_header(entry, fmt)
    if entry.body:
        return f"{header}\n\n{entry.body}\n"
    return f"{header}\n"


def join_documents(
    entries: Iterable[Entry],
    separator: str = SEGMENT_SEPARATOR,
    fmt: Optional[str] = None,
) -> str:
    """Concatenate several entries into one unit."""
    return f"{separator}\n".join(to_document(entry, fmt) for entry in entries)


def to_dict(entry: Entry, include_body: bool = False) -> Dict[str, Any]:
    """
    JSON-ready view of an entry.

    Args:
        entry: Entry to convert
        include_body: Add the Markdown body under 'body'

    Returns:
        Dictionary of plain JSON types (extras may need default=str)
    """
    data: Dict[str, Any] = {
        "title": entry.title,
        "slug": entry.slug,
        "date": entry.date.isoformat(),
        "date_utc": entry.date.instant.isoformat(),
        "draft": entry.draft,
        "series": entry.series,
        "tags": list(entry.tags),
        "word_count": entry.word_count,
        "reading_time": round(entry.reading_time, 2),
        "code_languages": entry.code_languages,
        "source": entry.source,
        "segment_index": entry.segment_index,
    }
    if entry.extra:
        data["extra"] = dict(entry.extra)
    if include_body:
        data["body"] = entry.body
    return data
