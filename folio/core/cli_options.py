#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from folio.core.cli_options import pattern_option, workers_option

    @cli.command()
    @pattern_option
    @workers_option
    def my_command(pattern, workers):
        pass
"""
import click

from folio.configs.formats import SEGMENT_SEPARATOR


# ═══════════════════════════════════════════════════════════════════════════
# FILE OPERATION OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

force_option = click.option(
    "-f", "--force",
    is_flag=True,
    help="Force overwrite existing files"
)

dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Preview changes without executing (no files modified)"
)


def output_option(default=None, required=False, help_text="Output directory or file"):
    """
    Factory function for output path option.

    Does NOT validate existence (output paths may not exist yet).

    Args:
        default: Default path value (optional)
        required: Whether the option is required (default: False)
        help_text: Custom help text

    Returns:
        Click option decorator
    """
    kwargs = {"type": click.Path(), "required": required, "help": help_text}
    # An explicit default=None defeats required=True on newer click releases
    if default is not None:
        kwargs["default"] = str(default)
    return click.option("-o", "--output", **kwargs)


# ═══════════════════════════════════════════════════════════════════════════
# PARSING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

pattern_option = click.option(
    "-p", "--pattern",
    default="**/*.md",
    help="File pattern to match using glob syntax (default: **/*.md - all Markdown files)"
)

separator_option = click.option(
    "--separator",
    default=SEGMENT_SEPARATOR,
    show_default=True,
    help="Exact line separating concatenated entries"
)

workers_option = click.option(
    "-w", "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of parser threads (default: executor default)"
)

fail_fast_option = click.option(
    "--fail-fast",
    is_flag=True,
    help="Stop at the first malformed segment"
)


# ═══════════════════════════════════════════════════════════════════════════
# OUTPUT FORMAT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output in JSON format"
)

format_option = click.option(
    "--format",
    "header_format",
    type=click.Choice(["toml", "yaml"], case_sensitive=False),
    default=None,
    help="Header format for written entries (default: keep original)"
)
