"""Package logger.

All output goes to stderr: stdout is reserved for the MCP stdio transport of
the server we launch.

Usage:
    from devtools_mcp.utils.log import log_debug, log_info

    log_info("Resolved settings")
    log_debug("Chatty detail", log_level=2)

Set ``DEVTOOLS_MCP_DEBUG=true`` to enable debug output, and
``DEVTOOLS_MCP_DEBUG_LEVEL=2`` to include level-2 debug lines.
"""

import logging
import os
import sys
from typing import Any

LOGGER_NAME = "devtools_mcp"
LOG_PREFIX = "[chrome-devtools-mcp-zed]"

_TRUTHY = {"1", "true", "yes", "on"}


def _build_logger() -> logging.Logger:
  _logger = logging.getLogger(LOGGER_NAME)
  if not _logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(f"{LOG_PREFIX} %(levelname)s %(message)s"))
    _logger.addHandler(handler)
  _logger.propagate = False
  debug_enabled = os.getenv("DEVTOOLS_MCP_DEBUG", "").strip().lower() in _TRUTHY
  _logger.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
  return _logger


logger: logging.Logger = _build_logger()

# Verbosity of debug output: level-2 lines are only emitted when this is >= 2.
debug_level: int = 1
try:
  debug_level = int(os.getenv("DEVTOOLS_MCP_DEBUG_LEVEL", "1"))
except ValueError:
  debug_level = 1


def set_log_level_to_debug(level: int = 1) -> None:
  """Enable debug output (``level=2`` also enables level-2 lines)."""
  global debug_level
  debug_level = level
  logger.setLevel(logging.DEBUG)


def set_log_level_to_info() -> None:
  logger.setLevel(logging.INFO)


def log_debug(msg: str, *args: Any, log_level: int = 1, **kwargs: Any) -> None:
  if log_level <= debug_level:
    logger.debug(msg, *args, **kwargs)


def log_info(msg: str, *args: Any, **kwargs: Any) -> None:
  logger.info(msg, *args, **kwargs)


def log_warning(msg: str, *args: Any, **kwargs: Any) -> None:
  logger.warning(msg, *args, **kwargs)


def log_error(msg: str, *args: Any, **kwargs: Any) -> None:
  logger.error(msg, *args, **kwargs)


def log_exception(msg: str, *args: Any, **kwargs: Any) -> None:
  logger.exception(msg, *args, **kwargs)
