#!/usr/bin/env python3
"""
cli_decorators.py
-------------------
Click group factory for the folio command line.

Every folio group shares the same root options and context:

    --log-dir PATH   where operation and error logs go
    -v, --verbose    INFO records on the console and tracebacks on errors
    --version        installed folio version

Usage:
    from folio.core.cli_decorators import folio_cli_group

    @folio_cli_group("folio")
    def cli(ctx):
        '''folio - Parse and index blog entries'''
"""
from functools import wraps
from pathlib import Path
from typing import Callable

import click

from folio.core.cli import setup_logger
from folio.core.paths import LOG_DIR


def folio_cli_group(component_name: str) -> Callable:
    """
    Decorator factory turning a function into the folio click group.

    Subcommands find in ctx.obj:
        "log_dir": Path of the log directory
        "verbose": bool
        "logger": FolioLogger named after component_name, closed when
            the command finishes so its log files are released
    """
    def decorator(f: Callable) -> Callable:
        @click.group()
        @click.version_option(package_name="folio")
        @click.option(
            "--log-dir",
            type=click.Path(file_okay=False),
            default=str(LOG_DIR),
            help="Directory for log files"
        )
        @click.option(
            "-v", "--verbose",
            is_flag=True,
            help="Show progress on the console and tracebacks on errors"
        )
        @click.pass_context
        @wraps(f)
        def wrapper(ctx: click.Context, log_dir: str, verbose: bool):
            ctx.ensure_object(dict)
            logger = setup_logger(Path(log_dir), component_name, verbose=verbose)
            ctx.call_on_close(logger.close)
            ctx.obj.update(log_dir=Path(log_dir), verbose=verbose, logger=logger)
            return f(ctx)

        return wrapper
    return decorator
