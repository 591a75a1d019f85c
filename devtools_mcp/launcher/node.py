"""Locate the Node.js runtime used to run the MCP server."""

import os
import shutil
from typing import List, Optional

from devtools_mcp.launcher.errors import RuntimeNotFoundError
from devtools_mcp.utils.log import log_debug

# Common install locations checked when `node` is not on PATH.
NODE_FALLBACK_PATHS = (
  "/usr/local/bin/node",
  "/opt/homebrew/bin/node",
  "/usr/bin/node",
  "~/.volta/bin/node",
  "~/.local/bin/node",
)


def _is_executable(path: str) -> bool:
  return os.path.isfile(path) and os.access(path, os.X_OK)


def find_node_binary(explicit: Optional[str] = None) -> str:
  """Find the ``node`` executable.

  Search order: ``explicit`` (if given it must exist), PATH, then
  ``NODE_FALLBACK_PATHS``.

  Raises:
      RuntimeNotFoundError: If no executable is found.
  """
  if explicit:
    path = os.path.expanduser(explicit)
    if _is_executable(path):
      return path
    found = shutil.which(explicit)
    if found:
      return found
    raise RuntimeNotFoundError(f"Node.js runtime not found at '{explicit}'", searched=[explicit])

  found = shutil.which("node")
  if found:
    log_debug(f"Using Node.js from PATH: {found}", log_level=2)
    return found

  searched: List[str] = ["PATH"]
  for candidate in NODE_FALLBACK_PATHS:
    path = os.path.expanduser(candidate)
    searched.append(path)
    if _is_executable(path):
      log_debug(f"Using Node.js from {path}", log_level=2)
      return path

  raise RuntimeNotFoundError("Node.js runtime not found. Install Node.js 20+ or set the runtime path explicitly.", searched=searched)
