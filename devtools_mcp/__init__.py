"""
devtools-mcp: settings shim and launcher for the chrome-devtools-mcp server.

Reads project settings, validates them, translates them into
``chrome-devtools-mcp`` command-line flags and launches the server over stdio.

Quick Start:
    from devtools_mcp import DevtoolsMcpSettings, build_upstream_args, parse_or_default

    settings = parse_or_default({"headless": True, "channel": "Canary"})
    build_upstream_args(settings)
    # ['--headless', '--channel', 'canary']

Launching:
    from devtools_mcp import DevtoolsMcpLauncher

    async with DevtoolsMcpLauncher() as launcher:
        command = await launcher.context_server_command("/path/to/project")
    # command.argv() == ['/usr/bin/node', '.../build/src/index.js', '--headless', ...]

Host configuration:
    from devtools_mcp import context_server_configuration

    cfg = context_server_configuration()
    cfg.settings_schema  # JSON schema for the host settings UI
"""

__version__ = "0.1.0"

# Settings
from devtools_mcp.settings import (
  SERVER_ID,
  ChromeChannel,
  ContextServerConfiguration,
  DevtoolsMcpSettings,
  DictSettingsSource,
  JsonFileSettingsSource,
  SettingsSource,
  context_server_configuration,
  load_settings,
  parse_or_default,
  settings_json_schema,
)

# Translation
from devtools_mcp.args import build_upstream_args, find_conflicts

# Launch
from devtools_mcp.launcher import (
  Command,
  DevtoolsMcpLauncher,
  LauncherConfig,
  LaunchError,
  NpmPackageManager,
  PackageManager,
  PackageManagerError,
  RuntimeNotFoundError,
  WorkingDirectoryError,
  ensure_package,
  find_node_binary,
)

# Errors
from devtools_mcp.exceptions import DevtoolsMcpError

__all__ = [
  "__version__",
  # Settings
  "SERVER_ID",
  "ChromeChannel",
  "ContextServerConfiguration",
  "DevtoolsMcpSettings",
  "DictSettingsSource",
  "JsonFileSettingsSource",
  "SettingsSource",
  "context_server_configuration",
  "load_settings",
  "parse_or_default",
  "settings_json_schema",
  # Translation
  "build_upstream_args",
  "find_conflicts",
  # Launch
  "Command",
  "DevtoolsMcpLauncher",
  "LauncherConfig",
  "NpmPackageManager",
  "PackageManager",
  "ensure_package",
  "find_node_binary",
  # Errors
  "DevtoolsMcpError",
  "LaunchError",
  "PackageManagerError",
  "RuntimeNotFoundError",
  "WorkingDirectoryError",
]
