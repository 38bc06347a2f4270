"""
Folio
=====

Content entry store for a Markdown blog.

Articles are Markdown documents with a TOML (+++) or YAML (---) header
holding title, date, draft, series and tags. Several articles may share
one source file, joined by a separator line. Folio splits and parses
those sources into immutable Entry records, isolates failures per
segment, and builds the published index and series/tag groupings.

Packages:
    core: exceptions, logging, validation, paths, CLI plumbing
    configs: header formats, separator, parser settings
    dataclasses: Entry and PublishDate
    parser: split/parse segments, units and batches
    utils: front matter, filesystem, slug and text helpers
"""

__version__ = "0.1.0"
