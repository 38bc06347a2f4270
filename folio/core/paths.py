#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Folio project.

All paths are Path objects relative to the project root. The root is the
repository checkout (this file lives at ROOT/folio/core/paths.py) unless
the FOLIO_ROOT environment variable points somewhere else.

The project structure:
    ROOT/
    ├── folio/         # Package code
    ├── content/       # Article sources (one or more entries per file)
    └── logs/          # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Returns:
        FOLIO_ROOT if set, otherwise two levels above this package
    """
    override = os.environ.get("FOLIO_ROOT")
    if override:
        return Path(override).expanduser().resolve()

    # paths.py -> core/ -> folio/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()

# ---- Content ----
CONTENT_DIR = ROOT / "content"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
