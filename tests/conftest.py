"""
Root conftest: shared fixtures for the test suite.

Nothing here touches the network or spawns real processes: the npm
collaborator is replaced with FakePackageManager and the Node.js runtime with
an empty executable file.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

from devtools_mcp.settings.resolver import SERVER_ID
from devtools_mcp.utils import log


# ---------------------------------------------------------------------------
# Package manager double
# ---------------------------------------------------------------------------


class FakePackageManager:
  """In-memory PackageManager that records install calls."""

  def __init__(self, latest: str = "1.0.0", installed: Optional[str] = None) -> None:
    self.latest = latest
    self.installed = installed
    self.installs: List[Tuple[str, str]] = []

  async def latest_version(self, package_name: str) -> str:
    return self.latest

  async def installed_version(self, package_name: str) -> Optional[str]:
    return self.installed

  async def install(self, package_name: str, version: str) -> None:
    self.installs.append((package_name, version))
    self.installed = version


@pytest.fixture
def package_manager():
  """Fake package manager with nothing installed yet."""
  return FakePackageManager()


# ---------------------------------------------------------------------------
# Filesystem fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def node_binary(tmp_path):
  """An executable stand-in for the Node.js runtime."""
  path = tmp_path / "bin" / "node"
  path.parent.mkdir(parents=True)
  path.write_text("#!/bin/sh\n")
  os.chmod(path, 0o755)
  return str(path)


def write_project_settings(project: Path, settings: Any, server_id: str = SERVER_ID) -> Path:
  """Write host-style project settings to ``<project>/.zed/settings.json``."""
  path = project / ".zed" / "settings.json"
  path.parent.mkdir(parents=True, exist_ok=True)
  document: Dict[str, Any] = {"context_servers": {server_id: {"settings": settings}}}
  path.write_text(json.dumps(document))
  return path


@pytest.fixture
def project_factory(tmp_path):
  """Factory: create a project directory with the given server settings."""

  def _create(settings: Any, name: str = "project") -> Path:
    project = tmp_path / name
    project.mkdir(exist_ok=True)
    write_project_settings(project, settings)
    return project

  return _create


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture
def log_records(caplog):
  """caplog attached to the package logger at INFO (the logger does not propagate)."""
  level = log.logger.level
  log.logger.addHandler(caplog.handler)
  log.set_log_level_to_info()
  yield caplog
  log.logger.removeHandler(caplog.handler)
  log.logger.setLevel(level)
