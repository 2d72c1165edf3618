from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(app_name: str = "weikio-mcp", log_level: str = "DEBUG", use_console: bool = True) -> logging.Logger:
    """Configure logging for the MCP server.

    Handlers always write to stderr; stdout carries the MCP stdio transport.

    Args:
        app_name: Name reported in the startup debug line.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Falls back to INFO on invalid values.
        use_console: Attach a stderr stream handler.
    """
    root_logger = logging.getLogger()

    normalized = log_level.upper()
    level = logging.getLevelNamesMapping().get(normalized, logging.INFO)
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    if use_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console)

    logging.getLogger(__name__).debug(f"Logging configured for {app_name} at {logging.getLevelName(level)}")
    return root_logger
