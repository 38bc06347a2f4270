#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for reading units.

Reading raw text is the caller's job: the parser only ever sees text that
has already been loaded. These helpers are that caller-side I/O.

Functions:
    find_markdown_files: Discover markdown files by glob pattern
    read_units: Load a file or directory as (unit_id, text) pairs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Tuple


def find_markdown_files(directory: Path, pattern: str = "**/*.md") -> List[Path]:
    """Find all markdown files matching pattern, sorted by path."""
    if not directory.exists():
        return []
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def read_units(
    path: str | Path,
    pattern: str = "**/*.md",
    failures: Optional[List[Tuple[int, str, Exception]]] = None,
) -> List[Tuple[str, str]]:
    """
    Read one file, or every file under a directory matching pattern.

    Unit identifiers are paths relative to the given directory (or the
    file path itself when a single file is given).

    Args:
        path: File or directory
        pattern: Glob for directory reads
        failures: When given, files that cannot be read as UTF-8 text are
            skipped and appended as (position, unit_id, error), position
            being the file's place in the full listing. Otherwise the
            error propagates.

    Raises:
        FileNotFoundError: If path does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Path not found: {path}")

    if path.is_file():
        files = [(str(path), path)]
    else:
        files = [
            (str(file_path.relative_to(path)), file_path)
            for file_path in find_markdown_files(path, pattern)
        ]

    units: List[Tuple[str, str]] = []
    for position, (unit_id, file_path) in enumerate(files):
        try:
            units.append((unit_id, file_path.read_text(encoding="utf-8")))
        except (UnicodeDecodeError, OSError) as e:
            if failures is None:
                raise
            failures.append((position, unit_id, e))
    return units
