"""Server launch: runtime lookup, npm install/update and command assembly."""

from devtools_mcp.launcher.config import MCP_PACKAGE_NAME, MCP_SERVER_ENTRYPOINT, LauncherConfig
from devtools_mcp.launcher.errors import LaunchError, PackageManagerError, RuntimeNotFoundError, WorkingDirectoryError
from devtools_mcp.launcher.launcher import Command, DevtoolsMcpLauncher, run_command
from devtools_mcp.launcher.node import find_node_binary
from devtools_mcp.launcher.npm import NpmPackageManager, PackageManager, ensure_package

__all__ = [
  # Configuration
  "LauncherConfig",
  "MCP_PACKAGE_NAME",
  "MCP_SERVER_ENTRYPOINT",
  # Launcher
  "Command",
  "DevtoolsMcpLauncher",
  "run_command",
  # Collaborators
  "NpmPackageManager",
  "PackageManager",
  "ensure_package",
  "find_node_binary",
  # Errors
  "LaunchError",
  "PackageManagerError",
  "RuntimeNotFoundError",
  "WorkingDirectoryError",
]
