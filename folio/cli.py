#!/usr/bin/env python3
"""
cli.py
------
Command line interface for the Folio content entry store.

Commands:
    parse   Parse sources and summarize entries/errors per unit
    check   Validate sources; exit 1 when any segment fails
    index   Write the published index (drafts excluded) as JSON
    series  List series and their entries in reading order
    split   Write every entry of multi-entry units to its own file
    export  Dump every entry (drafts included) as JSON

Usage:
    folio parse content/
    folio check content/posts.md --fail-fast
    folio index content/ -o public/index.json
    folio split content/bundle.md -o content/posts --format toml
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Any, Optional, Set

# --- Third party imports ---
import click

# --- Local imports ---
from folio.configs.formats import ParserSettings
from folio.core.cli import ParseStats, SplitStats
from folio.core.cli_decorators import folio_cli_group
from folio.core.cli_options import (
    dry_run_option,
    fail_fast_option,
    force_option,
    format_option,
    json_option,
    output_option,
    pattern_option,
    separator_option,
    workers_option,
)
from folio.core.exceptions import FolioError, SerializationError
from folio.core.logging_manager import handle_cli_error
from folio.core.paths import CONTENT_DIR
from folio.parser.batch import parse_path
from folio.parser.results import BatchReport
from folio.serializer import to_dict, to_document
from folio.store import EntryStore
from folio.utils.slugify import generate_entry_filename

path_argument = click.argument(
    "path", type=click.Path(exists=True), default=str(CONTENT_DIR)
)


def _load(
    ctx: click.Context,
    path: str,
    pattern: str,
    separator: str,
    workers: Optional[int],
    operation: str,
    fail_fast: bool = False,
) -> BatchReport:
    """Parse PATH or exit through handle_cli_error."""
    logger = ctx.obj["logger"]
    settings = ParserSettings(separator=separator, pattern=pattern, max_workers=workers)
    logger.log_operation(f"{operation}_start", {"path": path, "pattern": pattern})
    try:
        return parse_path(path, settings=settings, fail_fast=fail_fast, logger=logger)
    except (FolioError, OSError) as e:
        handle_cli_error(ctx, e, operation, {"path": path})
        raise  # unreachable, handle_cli_error exits


def _emit_json(data: Any, output: Optional[str]) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        click.echo(f"💾 Wrote {out_path}")
    else:
        click.echo(text)


@folio_cli_group("folio")
def cli(ctx: click.Context) -> None:
    """folio - Parse, validate and index blog entries."""
    pass


# ═══════════════════════════════════════════════════════════════════════════
# PARSE / CHECK
# ═══════════════════════════════════════════════════════════════════════════

@cli.command("parse")
@path_argument
@pattern_option
@separator_option
@workers_option
@json_option
@click.pass_context
def parse_cmd(
    ctx: click.Context,
    path: str,
    pattern: str,
    separator: str,
    workers: Optional[int],
    as_json: bool,
) -> None:
    """Parse PATH and summarize entries and errors per unit."""
    report = _load(ctx, path, pattern, separator, workers, "parse")
    stats = ParseStats.from_report(report)

    if as_json:
        data = report.to_dict()
        data["stats"] = stats.to_dict()
        data["entries"] = [to_dict(entry) for entry in report.entries]
        _emit_json(data, None)
        return

    for result in report.units:
        icon = "✅" if result.ok else "❌"
        click.echo(
            f"{icon} {result.unit}: "
            f"{len(result.entries)}/{result.segment_count} segments parsed"
        )
        for entry in result.entries:
            draft = " (draft)" if entry.draft else ""
            click.echo(f"   • [{entry.segment_index}] {entry.date} {entry.title}{draft}")
        for error in result.errors:
            click.echo(f"   ❌ [{error.segment_index}] {error.kind}: {error.message}")

    click.echo(f"\n{stats.summary()}")
    ctx.obj["logger"].log_operation("parse_complete", stats.to_dict())


@cli.command()
@path_argument
@pattern_option
@separator_option
@workers_option
@fail_fast_option
@click.pass_context
def check(
    ctx: click.Context,
    path: str,
    pattern: str,
    separator: str,
    workers: Optional[int],
    fail_fast: bool,
) -> None:
    """
    Validate every segment under PATH.

    Reports malformed segments (with unit and segment index),
    separator-like lines that were not split on, and duplicate tags.
    Exits with status 1 when any segment fails.
    """
    click.echo(f"🔍 Checking entries in {path}\n")
    report = _load(ctx, path, pattern, separator, workers, "check", fail_fast=fail_fast)
    stats = ParseStats.from_report(report)

    for error in report.errors:
        click.echo(f"❌ {error}")
    for notice in report.notices:
        click.echo(f"⚠️  {notice.unit}: {notice.message}")
    for entry in report.entries:
        if entry.duplicate_tags:
            click.echo(
                f"⚠️  {entry.source} segment {entry.segment_index}: "
                f"duplicate tags {', '.join(entry.duplicate_tags)}"
            )

    click.echo(f"\n{stats.summary()}")
    ctx.obj["logger"].log_operation("check_complete", stats.to_dict())

    if report.has_errors:
        raise click.ClickException(f"Found {len(report.errors)} malformed segment(s)")
    click.echo("✅ All segments parsed")


# ═══════════════════════════════════════════════════════════════════════════
# INDEXES
# ═══════════════════════════════════════════════════════════════════════════

@cli.command()
@path_argument
@output_option(help_text="Write the index to this file instead of stdout")
@click.option("--include-drafts", is_flag=True, help="Include draft entries")
@pattern_option
@separator_option
@workers_option
@click.pass_context
def index(
    ctx: click.Context,
    path: str,
    output: Optional[str],
    include_drafts: bool,
    pattern: str,
    separator: str,
    workers: Optional[int],
) -> None:
    """Write the published index of PATH as JSON, newest first."""
    report = _load(ctx, path, pattern, separator, workers, "index")
    store = EntryStore.from_report(report)
    items = store.index(include_drafts=include_drafts)
    _emit_json(items, output)

    if store.errors:
        click.echo(f"⚠️  {len(store.errors)} segment(s) could not be parsed", err=True)
    ctx.obj["logger"].log_operation(
        "index_complete", {"entries": len(items), "errors": len(store.errors)}
    )


@cli.command()
@path_argument
@click.option("--include-drafts", is_flag=True, help="Include draft entries")
@json_option
@pattern_option
@separator_option
@workers_option
@click.pass_context
def series(
    ctx: click.Context,
    path: str,
    include_drafts: bool,
    as_json: bool,
    pattern: str,
    separator: str,
    workers: Optional[int],
) -> None:
    """List every series under PATH with its entries in reading order."""
    report = _load(ctx, path, pattern, separator, workers, "series")
    groups = EntryStore.from_report(report).series(include_drafts=include_drafts)

    if as_json:
        _emit_json(
            {name: [to_dict(entry) for entry in entries] for name, entries in groups.items()},
            None,
        )
        return

    if not groups:
        click.echo("No series found")
        return

    for name, entries in groups.items():
        click.echo(f"📚 {name} ({len(entries)})")
        for position, entry in enumerate(entries, 1):
            click.echo(f"   {position}. {entry.date} {entry.title}")


@cli.command()
@path_argument
@output_option(help_text="Write the entries to this file instead of stdout")
@pattern_option
@separator_option
@workers_option
@click.pass_context
def export(
    ctx: click.Context,
    path: str,
    output: Optional[str],
    pattern: str,
    separator: str,
    workers: Optional[int],
) -> None:
    """Export every entry under PATH (drafts included) as JSON."""
    report = _load(ctx, path, pattern, separator, workers, "export")
    data = report.to_dict()
    data["entries"] = [to_dict(entry, include_body=True) for entry in report.entries]
    _emit_json(data, output)


# ═══════════════════════════════════════════════════════════════════════════
# MIGRATION
# ═══════════════════════════════════════════════════════════════════════════

@cli.command()
@path_argument
@output_option(required=True, help_text="Directory for the per-entry files")
@format_option
@dry_run_option
@force_option
@pattern_option
@separator_option
@workers_option
@click.pass_context
def split(
    ctx: click.Context,
    path: str,
    output: str,
    header_format: Optional[str],
    dry_run: bool,
    force: bool,
    pattern: str,
    separator: str,
    workers: Optional[int],
) -> None:
    """
    Write each entry under PATH to its own file in OUTPUT.

    Files are named YYYY-MM-DD-title-slug.md, with -2, -3... appended
    when entries share date and title. Source files are never
    modified. Malformed segments are reported and skipped.
    """
    logger = ctx.obj["logger"]
    report = _load(ctx, path, pattern, separator, workers, "split")
    stats = SplitStats(files_processed=len(report.units), errors=len(report.errors))
    out_dir = Path(output)

    for error in report.errors:
        click.echo(f"❌ {error}")

    written: Set[Path] = set()
    for entry in report.entries:
        entry_date = entry.date.local.date()
        copy = 1
        target = out_dir / generate_entry_filename(entry_date, entry.title)
        # Entries sharing date and title must not overwrite each other
        while target in written:
            copy += 1
            target = out_dir / generate_entry_filename(entry_date, entry.title, copy=copy)
        written.add(target)
        if copy > 1:
            click.echo(
                f"⚠️  {entry.source} segment {entry.segment_index}: "
                f"date and title already used in this run, naming it {target.name}"
            )

        if target.exists() and not force:
            click.echo(f"⏭️  {target} exists (use --force to overwrite)")
            stats.files_skipped += 1
            continue
        try:
            document = to_document(entry, header_format)
        except SerializationError as e:
            logger.log_error(e, {"unit": entry.source, "segment": entry.segment_index})
            click.echo(f"❌ {entry.source} segment {entry.segment_index}: {e}")
            stats.errors += 1
            continue

        if dry_run:
            click.echo(f"📝 Would write {target}")
        else:
            out_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(document, encoding="utf-8")
            click.echo(f"📝 Wrote {target}")
        stats.files_created += 1

    click.echo(f"\n{stats.summary()}")
    logger.log_operation("split_complete", {**stats.to_dict(), "dry_run": dry_run})


if __name__ == "__main__":
    cli()
