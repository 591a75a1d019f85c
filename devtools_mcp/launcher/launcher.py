"""DevtoolsMcpLauncher: turns project settings into a server command.

Per launch:
  1. resolve settings for the project (never fails, see settings.resolver);
  2. make sure the npm package is installed at its latest version;
  3. locate Node.js and the package entrypoint;
  4. return ``node <entrypoint> <translated args>``.

The launcher builds the command; running and supervising the process is the
host's job (or ``run_command`` for the CLI).
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from devtools_mcp.args import build_upstream_args
from devtools_mcp.launcher.config import LauncherConfig
from devtools_mcp.launcher.errors import WorkingDirectoryError
from devtools_mcp.launcher.node import find_node_binary
from devtools_mcp.launcher.npm import NpmPackageManager, PackageManager, ensure_package
from devtools_mcp.settings.model import DevtoolsMcpSettings
from devtools_mcp.settings.resolver import SettingsSource, load_settings
from devtools_mcp.settings.schema import ContextServerConfiguration, context_server_configuration
from devtools_mcp.settings.sources import JsonFileSettingsSource
from devtools_mcp.utils.log import log_debug, log_info, log_warning


@dataclass(frozen=True)
class Command:
  """A fully resolved process invocation.

  Attributes:
    command: Executable (the Node.js binary).
    args: Arguments: the entrypoint script followed by the server flags.
    env: Extra environment variables (merged over the parent environment).
  """

  command: str
  args: List[str] = field(default_factory=list)
  env: Dict[str, str] = field(default_factory=dict)

  def argv(self) -> List[str]:
    return [self.command, *self.args]


class DevtoolsMcpLauncher:
  """Builds the chrome-devtools-mcp command for a project.

  Args:
    config: Launcher configuration.
    source: Settings source. Defaults to ``<project>/.zed/settings.json``.
    package_manager: Install/update collaborator. Defaults to npm in ``work_dir``.

  Example::

      launcher = DevtoolsMcpLauncher()
      command = await launcher.context_server_command("/path/to/project")
      subprocess.run(command.argv())
  """

  def __init__(
    self,
    config: Optional[LauncherConfig] = None,
    *,
    source: Optional[SettingsSource] = None,
    package_manager: Optional[PackageManager] = None,
  ) -> None:
    self.config = config or LauncherConfig()
    self.source: SettingsSource = source or JsonFileSettingsSource()
    self._package_manager = package_manager
    self._owns_package_manager = package_manager is None

  async def close(self) -> None:
    """Release the package manager's HTTP client, if this launcher created it."""
    if self._owns_package_manager and isinstance(self._package_manager, NpmPackageManager):
      await self._package_manager.close()
    if self._owns_package_manager:
      self._package_manager = None

  async def __aenter__(self) -> "DevtoolsMcpLauncher":
    return self

  async def __aexit__(self, *args: Any) -> None:
    await self.close()

  def load_settings(self, project: Any) -> DevtoolsMcpSettings:
    return load_settings(self.source, project, self.config.server_id)

  def resolve_work_dir(self) -> Path:
    """Directory the npm package lives in.

    Raises:
        WorkingDirectoryError: If the current directory cannot be determined.
    """
    if self.config.work_dir:
      return Path(self.config.work_dir).expanduser()
    try:
      return Path(os.getcwd())
    except OSError as e:
      raise WorkingDirectoryError(f"Cannot determine working directory: {e}", original_error=e)

  def _get_package_manager(self, work_dir: Path) -> PackageManager:
    if self._package_manager is None:
      self._package_manager = NpmPackageManager(
        work_dir,
        registry_url=self.config.registry_url,
        request_timeout=self.config.request_timeout,
        install_timeout=self.config.install_timeout,
      )
    return self._package_manager

  def resolve_entrypoint(self, work_dir: Path) -> Path:
    """Absolute entrypoint path. A missing file is logged, not raised."""
    entrypoint = work_dir / self.config.entrypoint
    if not entrypoint.exists():
      log_warning(f"expected MCP server entrypoint missing: {entrypoint}")
      log_warning(f"package layout/version may differ; expected {self.config.entrypoint}")
    else:
      log_info(f"launching MCP server entrypoint: {entrypoint}")
    return entrypoint

  async def context_server_command(self, project: Any = None) -> Command:
    """Build the command that starts the MCP server over stdio.

    Raises:
        LaunchError: Node.js missing, working directory unusable, or the
          package could not be installed.
    """
    settings = self.load_settings(project)
    work_dir = self.resolve_work_dir()

    if self.config.auto_update:
      await ensure_package(self._get_package_manager(work_dir), self.config.package_name)
    else:
      log_debug("Package auto-update disabled; using installed version")

    node = find_node_binary(self.config.node_path)
    entrypoint = self.resolve_entrypoint(work_dir)

    args = [str(entrypoint)]
    args.extend(build_upstream_args(settings))
    log_debug(f"Server command: {node} {' '.join(args)}")

    return Command(command=node, args=args, env=dict(self.config.env))

  def context_server_configuration(self) -> ContextServerConfiguration:
    return context_server_configuration()


def run_command(command: Command) -> int:
  """Run ``command`` with inherited stdio and return its exit code."""
  env = os.environ.copy()
  env.update(command.env)
  try:
    completed = subprocess.run(command.argv(), env=env, check=False)
  except KeyboardInterrupt:
    return 130
  return completed.returncode
