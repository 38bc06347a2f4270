#!/usr/bin/env python3
"""
slugify.py
----------
String slugification utilities for generating filesystem-safe filenames.

Converts article titles into URL-safe, filesystem-friendly slugs used for
index entries and for the files written by `folio split`.

Usage:
    from folio.utils.slugify import slugify, generate_entry_filename

    slug = slugify("Modular Monolith vs. Microservices")
    # "modular-monolith-vs-microservices"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata
from datetime import date


def slugify(text: str, max_length: int = 200) -> str:
    """
    Convert text to filesystem-safe slug.

    Applies transformations to make text safe for filenames and URLs:
    - Lowercase
    - Normalize accents (Café → cafe)
    - Remove apostrophes (author's → authors)
    - Replace spaces, slashes and brackets with hyphens
    - Collapse multiple hyphens

    Args:
        text: Input text to slugify
        max_length: Maximum slug length (default 200)

    Returns:
        Slugified string safe for filenames

    Examples:
        >>> slugify("Publish–Subscribe in Go")
        'publishsubscribe-in-go'
        >>> slugify("gRPC & Protocol Buffers")
        'grpc-and-protocol-buffers'
        >>> slugify("Feature Flags (Part 2)")
        'feature-flags-part-2'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = text.replace("'", "")
    text = re.sub(r"[(){}\[\]]", " ", text)
    text = text.replace("&", "and")
    text = text.replace("/", "-")
    text = re.sub(r"[\s_.]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    text = text.strip("-")

    if len(text) > max_length:
        text = text[:max_length].rstrip("-")

    return text


def generate_entry_filename(
    entry_date: date, title: str, suffix: str = ".md", copy: int = 1
) -> str:
    """
    Generate the filename for one article.

    Format: {YYYY-MM-DD}-{title-slug}.md, or {YYYY-MM-DD}-{title-slug}-{copy}.md
    for the later of several articles sharing date and title.

    Examples:
        >>> generate_entry_filename(date(2021, 3, 3), "Prototype Pattern")
        '2021-03-03-prototype-pattern.md'
        >>> generate_entry_filename(date(2021, 3, 3), "Prototype Pattern", copy=2)
        '2021-03-03-prototype-pattern-2.md'
    """
    slug = slugify(title) or "untitled"
    if copy > 1:
        slug = f"{slug}-{copy}"
    return f"{entry_date.isoformat()}-{slug}{suffix}"
