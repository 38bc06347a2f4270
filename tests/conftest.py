"""
conftest.py
-----------
Shared pytest fixtures for Folio tests.

Provides fixtures for:
- Temporary directories
- Sample article content (TOML and YAML headers)
- Multi-entry units, including malformed segments
- Content directories written to disk
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from folio.configs.formats import SEGMENT_SEPARATOR


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Article Fixtures -----

@pytest.fixture
def toml_entry_content():
    """Article with a TOML header (the canonical example)."""
    return """+++
title = 'X'
date = 2021-03-03T13:58:28Z
draft = false
series = "Design Architectures"
+++

# Modular Monolith vs. Microservices

A modular monolith keeps one deployable unit with strict module boundaries.
"""


@pytest.fixture
def yaml_entry_content():
    """Article with a YAML header, tags and a fenced code block."""
    return """---
title: Publish-Subscribe in Go
date: 2022-05-10T09:30:00+02:00
draft: false
tags:
  - go
  - messaging
  - patterns
---

Publishers never know their subscribers.

```go
bus.Publish("orders", msg)
```
"""


@pytest.fixture
def draft_entry_content():
    """Unpublished article."""
    return """+++
title = "Feature Flags (work in progress)"
date = 2023-01-20
draft = true
tags = ["feature-flags"]
+++

Notes for later.
"""


@pytest.fixture
def missing_header_content():
    """Segment without header delimiters."""
    return """title = "No delimiters"
date = 2021-01-01
draft = false

Body without a header block.
"""


@pytest.fixture
def three_segment_unit(toml_entry_content, missing_header_content, draft_entry_content):
    """Three articles where the middle one has no header delimiters."""
    return (
        f"{toml_entry_content}"
        f"{SEGMENT_SEPARATOR}\n"
        f"{missing_header_content}"
        f"{SEGMENT_SEPARATOR}\n"
        f"{draft_entry_content}"
    )


# ----- Content Directory Fixtures -----

@pytest.fixture
def content_dir(
    tmp_dir,
    toml_entry_content,
    yaml_entry_content,
    draft_entry_content,
    three_segment_unit,
):
    """
    Directory of sources:
        modular-monolith.md  one TOML entry
        pubsub.md            one YAML entry
        drafts/flags.md      one draft entry
        bundle.md            three segments, the second malformed
    """
    root = tmp_dir / "content"
    (root / "drafts").mkdir(parents=True)
    (root / "modular-monolith.md").write_text(toml_entry_content, encoding="utf-8")
    (root / "pubsub.md").write_text(yaml_entry_content, encoding="utf-8")
    (root / "drafts" / "flags.md").write_text(draft_entry_content, encoding="utf-8")
    (root / "bundle.md").write_text(three_segment_unit, encoding="utf-8")
    return root
