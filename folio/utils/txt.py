"""
txt.py
-------------------
Text metrics for article bodies.

Word counts skip fenced code blocks: snippets embedded in an article are
illustrative and should not inflate its reading time.
"""

from __future__ import annotations

# --- Standard library imports ---
from typing import List, Tuple

# --- Third-party library imports ---
from textstat import lexicon_count  # type: ignore

# --- Local imports ---
from .md import FenceTracker

WORDS_PER_MINUTE = 260


def prose_lines(lines: List[str]) -> List[str]:
    """Lines outside fenced code blocks (fence lines excluded)."""
    tracker = FenceTracker()
    out: List[str] = []
    for line in lines:
        if tracker.feed(line) or tracker.inside:
            continue
        out.append(line)
    return out


# ----- Word-count & ~reading time -----
def compute_metrics(lines: List[str]) -> Tuple[int, float]:
    """
    input: lines, body lines of an article
    output: (word_count, reading_time_min)
    process: counts words outside code fences, reading time at 260 WPM
    """
    text = " ".join(line.strip() for line in prose_lines(lines))
    if not text.strip():
        return (0, 0.0)
    wc: int = lexicon_count(text, removepunct=True)
    # textstat.reading_time gives inflated results; use a fixed WPM
    rt: float = wc / WORDS_PER_MINUTE
    return (wc, rt)
