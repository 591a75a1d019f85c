"""npm package management for the upstream MCP server.

Keeps ``chrome-devtools-mcp`` installed at the latest published version
inside the launcher's working directory.
"""

import asyncio
import json
import shutil
from pathlib import Path
from typing import Any, List, Optional, Protocol, Union
from urllib.parse import quote

import httpx

from devtools_mcp.launcher.config import NPM_REGISTRY_URL
from devtools_mcp.launcher.errors import PackageManagerError
from devtools_mcp.utils.log import log_debug, log_info


class PackageManager(Protocol):
  """Installed/latest version bookkeeping for one install root."""

  async def latest_version(self, package_name: str) -> str: ...

  async def installed_version(self, package_name: str) -> Optional[str]: ...

  async def install(self, package_name: str, version: str) -> None: ...


class NpmPackageManager:
  """npm-backed PackageManager.

  Latest versions come from the registry's ``/<name>/latest`` document,
  installed versions from ``node_modules/<name>/package.json`` under
  ``work_dir``, and installs run ``npm install --prefix <work_dir>``.

  Example::

      manager = NpmPackageManager(work_dir="/path/to/extension")
      async with manager:
          await ensure_package(manager, "chrome-devtools-mcp")
  """

  def __init__(
    self,
    work_dir: Union[str, Path],
    *,
    registry_url: str = NPM_REGISTRY_URL,
    request_timeout: float = 30.0,
    install_timeout: float = 300.0,
    npm_path: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
  ) -> None:
    self._work_dir = Path(work_dir)
    self._registry_url = registry_url.rstrip("/")
    self._request_timeout = request_timeout
    self._install_timeout = install_timeout
    self._npm_path = npm_path
    self._client: Optional[httpx.AsyncClient] = client
    self._owns_client = client is None

  @property
  def work_dir(self) -> Path:
    return self._work_dir

  # --- Lifecycle ---

  def _get_client(self) -> httpx.AsyncClient:
    """Lazily create and return the httpx client."""
    if self._client is None:
      self._client = httpx.AsyncClient(timeout=self._request_timeout)
      self._owns_client = True
    return self._client

  async def close(self) -> None:
    """Close the underlying HTTP client (only if this manager created it)."""
    if self._client is not None and self._owns_client:
      await self._client.aclose()
      self._client = None

  async def __aenter__(self) -> "NpmPackageManager":
    return self

  async def __aexit__(self, *args: Any) -> None:
    await self.close()

  # --- Versions ---

  async def latest_version(self, package_name: str) -> str:
    """Fetch the latest published version from the registry.

    Raises:
        PackageManagerError: Registry unreachable, non-2xx, or no version in the response.
    """
    url = f"{self._registry_url}/{quote(package_name, safe='@')}/latest"
    log_debug(f"npm: GET {url}", log_level=2)
    try:
      response = await self._get_client().get(url, headers={"Accept": "application/json"})
      response.raise_for_status()
      data = response.json()
    except httpx.HTTPStatusError as e:
      raise PackageManagerError(
        f"npm registry returned {e.response.status_code} for '{package_name}'",
        package_name=package_name,
        original_error=e,
      )
    except (httpx.HTTPError, ValueError) as e:
      raise PackageManagerError(
        f"Failed to query npm registry for '{package_name}': {e}",
        package_name=package_name,
        original_error=e,
      )

    version = data.get("version") if isinstance(data, dict) else None
    if not isinstance(version, str) or not version:
      raise PackageManagerError(f"npm registry response for '{package_name}' has no version", package_name=package_name)
    return version

  def package_dir(self, package_name: str) -> Path:
    return self._work_dir / "node_modules" / package_name

  async def installed_version(self, package_name: str) -> Optional[str]:
    """Version recorded in the installed package.json, or None if not installed."""
    manifest = self.package_dir(package_name) / "package.json"
    try:
      data = json.loads(manifest.read_text(encoding="utf-8"))
    except FileNotFoundError:
      return None
    except (OSError, ValueError) as e:
      log_debug(f"npm: unreadable manifest {manifest}: {e}")
      return None
    version = data.get("version") if isinstance(data, dict) else None
    return version if isinstance(version, str) and version else None

  # --- Install ---

  def _npm_command(self) -> str:
    if self._npm_path:
      return self._npm_path
    found = shutil.which("npm")
    if not found:
      raise PackageManagerError("npm not found on PATH; install Node.js with npm")
    return found

  async def install(self, package_name: str, version: str) -> None:
    """Run ``npm install --prefix <work_dir> <name>@<version>``.

    Raises:
        PackageManagerError: npm missing, timed out, or exited non-zero.
    """
    cmd: List[str] = [
      self._npm_command(),
      "install",
      "--prefix",
      str(self._work_dir),
      "--no-audit",
      "--no-fund",
      f"{package_name}@{version}",
    ]
    log_debug(f"npm: {' '.join(cmd)}")

    try:
      process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(self._work_dir),
      )
    except FileNotFoundError as e:
      raise PackageManagerError(f"npm not found: {cmd[0]}", package_name=package_name, original_error=e)
    except PermissionError as e:
      raise PackageManagerError(f"Permission denied executing: {cmd[0]}", package_name=package_name, original_error=e)

    try:
      _, stderr = await asyncio.wait_for(process.communicate(), timeout=self._install_timeout)
    except asyncio.TimeoutError:
      process.kill()
      await process.wait()
      raise PackageManagerError(
        f"npm install {package_name}@{version} timed out after {self._install_timeout:.0f}s",
        package_name=package_name,
      )

    if process.returncode != 0:
      detail = stderr.decode("utf-8", errors="replace").strip()
      raise PackageManagerError(
        f"npm install {package_name}@{version} failed (exit {process.returncode}): {detail}",
        package_name=package_name,
      )


async def ensure_package(manager: PackageManager, package_name: str) -> str:
  """Install or update ``package_name`` when it differs from the latest version.

  Returns:
      The version that is installed afterwards.
  """
  latest = await manager.latest_version(package_name)
  installed = await manager.installed_version(package_name)

  log_info(f"npm package: {package_name} installed={installed!r} latest={latest}")

  if installed != latest:
    log_info(f"installing/updating npm package {package_name}@{latest}")
    await manager.install(package_name, latest)
  return latest
