"""
Unit tests for DictSettingsSource and JsonFileSettingsSource.

Uses tmp_path only; no host integration.
"""

import json

import pytest

from devtools_mcp.settings.model import DevtoolsMcpSettings
from devtools_mcp.settings.resolver import SERVER_ID, load_settings
from devtools_mcp.settings.sources import DictSettingsSource, JsonFileSettingsSource
from tests.conftest import write_project_settings


@pytest.mark.unit
class TestDictSettingsSource:
  def test_returns_server_settings(self):
    source = DictSettingsSource({"context_servers": {SERVER_ID: {"settings": {"headless": True}}}})
    assert source.lookup(SERVER_ID, None) == {"headless": True}

  def test_missing_server_is_none(self):
    source = DictSettingsSource({"context_servers": {"other": {"settings": {}}}})
    assert source.lookup(SERVER_ID, None) is None

  def test_missing_settings_key_is_none(self):
    source = DictSettingsSource({"context_servers": {SERVER_ID: {"command": "x"}}})
    assert source.lookup(SERVER_ID, None) is None

  def test_empty_source_is_none(self):
    assert DictSettingsSource().lookup(SERVER_ID, None) is None


@pytest.mark.unit
class TestJsonFileSettingsSource:
  def test_project_settings_file(self, tmp_path):
    write_project_settings(tmp_path, {"viewport": "800x600"})
    assert JsonFileSettingsSource().lookup(SERVER_ID, tmp_path) == {"viewport": "800x600"}

  def test_explicit_path_wins_over_project(self, tmp_path):
    explicit = tmp_path / "custom.json"
    explicit.write_text(json.dumps({"context_servers": {SERVER_ID: {"settings": {"headless": True}}}}))
    write_project_settings(tmp_path, {"headless": False})
    assert JsonFileSettingsSource(explicit).lookup(SERVER_ID, tmp_path) == {"headless": True}

  def test_missing_file_is_none(self, tmp_path):
    assert JsonFileSettingsSource().lookup(SERVER_ID, tmp_path) is None

  def test_no_project_and_no_path_is_none(self):
    assert JsonFileSettingsSource().lookup(SERVER_ID, None) is None

  def test_invalid_json_raises(self, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
      JsonFileSettingsSource(path).lookup(SERVER_ID, None)

  def test_non_object_document_raises(self, tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError, match="JSON object"):
      JsonFileSettingsSource(path).lookup(SERVER_ID, None)

  def test_invalid_json_resolves_to_defaults(self, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert load_settings(JsonFileSettingsSource(path), None) == DevtoolsMcpSettings()


@pytest.mark.unit
class TestCommentedSettingsFile:
  COMMENTED = """// my settings
{
  "context_servers": {
    /* browser debugging */
    "chrome-devtools-mcp-zed": {
      "settings": {
        "headless": true, // no window
        "chrome_arg": ["--disable-gpu",],
      },
    },
  },
}
"""

  def test_comments_and_trailing_commas_accepted(self, tmp_path):
    project = tmp_path / "project"
    (project / ".zed").mkdir(parents=True)
    (project / ".zed" / "settings.json").write_text(self.COMMENTED)
    assert JsonFileSettingsSource().lookup(SERVER_ID, project) == {"headless": True, "chrome_arg": ["--disable-gpu"]}

  def test_commented_file_resolves_settings(self, tmp_path, log_records):
    path = tmp_path / "settings.json"
    path.write_text(self.COMMENTED)
    s = load_settings(JsonFileSettingsSource(path), None)
    assert s.headless is True
    assert s.chrome_arg == ("--disable-gpu",)
    assert log_records.records == []

  def test_unparseable_file_warns(self, tmp_path, log_records):
    path = tmp_path / "settings.json"
    path.write_text("// only a comment\n{oops")
    assert load_settings(JsonFileSettingsSource(path), None) == DevtoolsMcpSettings()
    assert [r.levelname for r in log_records.records] == ["WARNING"]
