"""LauncherConfig: frozen configuration for DevtoolsMcpLauncher."""

from dataclasses import asdict, dataclass, field
from typing import Dict, Optional

from devtools_mcp.settings.resolver import SERVER_ID

MCP_PACKAGE_NAME = "chrome-devtools-mcp"

# The upstream package declares `"bin": "./build/src/index.js"`; npm installs it
# under node_modules/ in the working directory.
MCP_SERVER_ENTRYPOINT = "node_modules/chrome-devtools-mcp/build/src/index.js"

NPM_REGISTRY_URL = "https://registry.npmjs.org"


@dataclass(frozen=True)
class LauncherConfig:
  """Configuration for launching the upstream MCP server.

  Attributes:
    server_id: Context server identifier used to look up settings.
    package_name: npm package providing the server.
    entrypoint: Server script, relative to ``work_dir``.
    work_dir: Directory the package is installed into. ``None`` uses the
      current working directory at launch time.
    node_path: Explicit Node.js executable. ``None`` searches PATH.
    registry_url: npm registry base URL.
    request_timeout: Registry request timeout in seconds.
    install_timeout: ``npm install`` timeout in seconds.
    auto_update: Install/update the package before each launch.
    env: Extra environment variables for the server process.
  """

  server_id: str = SERVER_ID
  package_name: str = MCP_PACKAGE_NAME
  entrypoint: str = MCP_SERVER_ENTRYPOINT
  work_dir: Optional[str] = None
  node_path: Optional[str] = None
  registry_url: str = NPM_REGISTRY_URL
  request_timeout: float = 30.0
  install_timeout: float = 300.0
  auto_update: bool = True
  env: Dict[str, str] = field(default_factory=dict)

  def with_updates(self, **kwargs: object) -> "LauncherConfig":
    """Create a new config with updated values (immutable pattern).

    Args:
      **kwargs: Fields to update in the new config.

    Returns:
      New LauncherConfig instance with updated values.
    """
    current = asdict(self)
    current.update(kwargs)
    return self.__class__(**current)
