#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for parsing runs and the folio CLI.

Each logger writes two rotating files under its log directory:

    <component>.log   operations, unit summaries, skipped segments, notices
    errors.log        failures only, each with its unit and segment

A malformed segment is a problem in the content, not in the program: it is
recorded with its location and never carries a traceback. Unexpected
exceptions raised while a command runs are logged with their traceback.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

# --- Third party imports ---
import click

if TYPE_CHECKING:
    from folio.parser.results import SegmentError, UnitResult
    from folio.parser.splitter import SeparatorNotice


def _as_json(details: Dict[str, Any]) -> str:
    return json.dumps(details, default=str, ensure_ascii=False)


class FolioLogger:
    """
    Structured logger for entry parsing.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        verbose: Echo INFO records to the console, not only warnings
        main_logger: Logger for the component log
        error_logger: Logger for errors.log
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "folio",
        verbose: bool = False,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Name of the component log (e.g. 'folio')
            verbose: Lower the console threshold from WARNING to INFO
            max_bytes: Size at which a log file rotates (default: 10MB)
            backup_count: Rotated files kept per log (default: 5)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.verbose = verbose
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"{self.component_name}.operations")
        self.main_logger.setLevel(logging.DEBUG)
        # Replace handlers left by an earlier logger for the same component
        self.main_logger.handlers = []

        self.error_logger = logging.getLogger(f"{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.handlers = []

        self._create_file_handler(
            self.main_logger,
            self.log_dir / f"{self.component_name}.log",
            logging.DEBUG,
        )
        self._create_file_handler(
            self.error_logger,
            self.log_dir / "errors.log",
            logging.ERROR,
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO if self.verbose else logging.WARNING)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)s - %(message)s")
        )
        self.main_logger.addHandler(console_handler)

    def _create_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    def close(self) -> None:
        """Close and detach all handlers (releases log files)."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def _emit(
        self, level: int, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        tag = logging.getLevelName(level)
        if details:
            self.main_logger.log(level, f"{tag} - {message}: {_as_json(details)}")
        else:
            self.main_logger.log(level, f"{tag} - {message}")

    # ----- General records -----
    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record the start or outcome of a command or batch."""
        self.main_logger.info(f"OPERATION - {operation}: {_as_json(details or {})}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, message, details)

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self._emit(logging.WARNING, message, details)

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an exception to errors.log.

        The traceback is included only when the error is currently being
        handled, so errors collected earlier are logged without noise.

        Args:
            error: Exception that occurred
            context: Optional key/value context (operation, path, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        if sys.exc_info()[1] is error:
            self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    # ----- Parsing records -----
    def log_segment_error(self, error: "SegmentError") -> None:
        """
        Record a segment that could not be parsed.

        A warning goes to the component log and a located record to
        errors.log. Parsing of the other segments continues.
        """
        self._emit(logging.WARNING, "Segment skipped", error.to_dict())
        self.error_logger.error(f"SEGMENT - {error}")

    def log_notice(self, notice: "SeparatorNotice") -> None:
        """Record a suspicious separator line of a unit."""
        self._emit(logging.WARNING, notice.message, notice.to_dict())

    def log_unit(self, result: "UnitResult") -> None:
        """Record the per-unit summary once all segments were parsed."""
        self._emit(
            logging.DEBUG,
            "Parsed unit",
            {
                "unit": result.unit,
                "segments": result.segment_count,
                "entries": len(result.entries),
                "errors": len(result.errors),
                "notices": len(result.notices),
            },
        )

    # ----- CLI -----
    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error that ends a command and format it for the terminal.

        Returns:
            The terminal message, with the traceback when show_traceback

        Examples:
            >>> logger.log_cli_error(FileNotFoundError("Path not found: posts"))
            '❌ FileNotFoundError: Path not found: posts'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    End a folio command because of error.

    Logs the error with the failed operation, prints a one-line message
    to stderr (plus the traceback with --verbose) and exits.

    Args:
        ctx: Click context holding the logger and the verbose flag
        error: Exception that occurred
        operation: Command that failed (e.g., 'index', 'split')
        additional_context: Extra context such as the input path
        exit_code: Exit status (default: 1)

    Note:
        Never returns
    """
    obj = ctx.obj or {}
    logger: Optional[FolioLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)
    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    FolioLogger stand-in that records nothing.

    Lets the parser run without a log directory.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_segment_error(self, error: "SegmentError") -> None:
        pass

    def log_notice(self, notice: "SeparatorNotice") -> None:
        pass

    def log_unit(self, result: "UnitResult") -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[FolioLogger]) -> FolioLogger:
    """Return logger, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
