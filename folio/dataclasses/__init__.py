"""
dataclasses package
-------------------
Dataclass definitions for parsed blog articles.

- PublishDate: Publication timestamp (UTC instant + original offset)
- Entry: One article (header fields + Markdown body)
"""
from folio.dataclasses.entry import Entry, PublishDate

__all__ = ["Entry", "PublishDate"]
