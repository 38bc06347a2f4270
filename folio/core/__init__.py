"""
Core infrastructure shared by every Folio module.

- exceptions: error hierarchy (FolioError and subclasses)
- logging_manager: FolioLogger, NullLogger, safe_logger, handle_cli_error
- validators: DataValidator for header value coercion
- paths: project path constants
- cli / cli_options / cli_decorators: click plumbing and run statistics
"""
