"""devtools-mcp command-line interface.

Examples:
    devtools-mcp                          # install/update, then run the server over stdio
    devtools-mcp --project ~/src/app      # use ~/src/app/.zed/settings.json
    devtools-mcp --settings s.json --print-args
    devtools-mcp --print-schema
"""

import argparse
import asyncio
import json
import os
import sys
from typing import List, Optional

from devtools_mcp import __version__
from devtools_mcp.args import build_upstream_args
from devtools_mcp.launcher import Command, DevtoolsMcpLauncher, LauncherConfig, LaunchError, run_command
from devtools_mcp.settings import JsonFileSettingsSource, settings_json_schema
from devtools_mcp.utils.log import log_error, set_log_level_to_debug


def arguments_parse(argv: Optional[List[str]] = None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(
    prog="devtools-mcp",
    description="Launch chrome-devtools-mcp over stdio with flags derived from project settings",
  )
  parser.add_argument("--version", action="version", version=f"devtools-mcp {__version__}")
  parser.add_argument(
    "--project",
    type=str,
    default=None,
    help="Project root; settings are read from <project>/.zed/settings.json (default: current directory)",
  )
  parser.add_argument("--settings", type=str, default=None, help="Settings file (overrides --project lookup)")
  parser.add_argument("--work-dir", type=str, default=None, help="Directory the npm package is installed into (default: current directory)")
  parser.add_argument("--node", type=str, default=None, help="Node.js executable (default: search PATH)")
  parser.add_argument("--no-update", action="store_true", help="Do not install or update the npm package")
  parser.add_argument("--debug", action="store_true", help="Enable debug logging (stderr)")

  output = parser.add_mutually_exclusive_group()
  output.add_argument("--print-args", action="store_true", help="Print the translated server arguments as JSON and exit")
  output.add_argument("--print-schema", action="store_true", help="Print the settings JSON schema and exit")
  return parser.parse_args(argv)


def launcher_build(args: argparse.Namespace) -> DevtoolsMcpLauncher:
  config = LauncherConfig(
    work_dir=args.work_dir,
    node_path=args.node,
    auto_update=not args.no_update,
  )
  return DevtoolsMcpLauncher(config, source=JsonFileSettingsSource(args.settings))


async def _command_build(launcher: DevtoolsMcpLauncher, project: str) -> Command:
  async with launcher:
    return await launcher.context_server_command(project)


def main(argv: Optional[List[str]] = None) -> int:
  args = arguments_parse(argv)
  if args.debug:
    set_log_level_to_debug()

  if args.print_schema:
    print(json.dumps(json.loads(settings_json_schema()), indent=2))
    return 0

  launcher = launcher_build(args)
  try:
    project = args.project or os.getcwd()
  except OSError as e:
    log_error(f"Cannot determine project directory: {e}")
    return 1

  if args.print_args:
    print(json.dumps(build_upstream_args(launcher.load_settings(project))))
    return 0

  try:
    command = asyncio.run(_command_build(launcher, project))
  except LaunchError as e:
    log_error(f"Cannot launch MCP server: {e}")
    return 1
  return run_command(command)


if __name__ == "__main__":
  sys.exit(main())
