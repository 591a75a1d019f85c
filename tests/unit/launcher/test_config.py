"""
Unit tests for LauncherConfig defaults and immutability.
"""

import dataclasses

import pytest

from devtools_mcp.launcher.config import MCP_PACKAGE_NAME, MCP_SERVER_ENTRYPOINT, LauncherConfig
from devtools_mcp.settings.resolver import SERVER_ID


@pytest.mark.unit
class TestLauncherConfig:
  def test_defaults(self):
    cfg = LauncherConfig()
    assert cfg.server_id == SERVER_ID == "chrome-devtools-mcp-zed"
    assert cfg.package_name == MCP_PACKAGE_NAME == "chrome-devtools-mcp"
    assert cfg.entrypoint == MCP_SERVER_ENTRYPOINT == "node_modules/chrome-devtools-mcp/build/src/index.js"
    assert cfg.work_dir is None
    assert cfg.node_path is None
    assert cfg.registry_url == "https://registry.npmjs.org"
    assert cfg.auto_update is True
    assert cfg.env == {}

  def test_frozen(self):
    cfg = LauncherConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
      cfg.auto_update = False  # type: ignore[misc]

  def test_with_updates_returns_new_instance(self):
    cfg = LauncherConfig()
    updated = cfg.with_updates(auto_update=False, node_path="/usr/bin/node")
    assert updated.auto_update is False
    assert updated.node_path == "/usr/bin/node"
    assert cfg.auto_update is True
    assert cfg.node_path is None

  def test_env_not_shared_between_instances(self):
    assert LauncherConfig().env is not LauncherConfig().env
