"""Concrete settings sources.

Both sources expect host-style project settings:

    {
        "context_servers": {
            "chrome-devtools-mcp-zed": {
                "settings": {"headless": true, "channel": "canary"}
            }
        }
    }
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import json5

PROJECT_SETTINGS_PATH = Path(".zed") / "settings.json"


def _server_settings(data: Any, server_id: str) -> Optional[Any]:
  """Pick ``context_servers.<server_id>.settings`` out of a settings document."""
  if not isinstance(data, Mapping):
    raise ValueError(f"Settings document must be a JSON object, got {type(data).__name__}")
  servers = data.get("context_servers")
  if not isinstance(servers, Mapping):
    return None
  entry = servers.get(server_id)
  if not isinstance(entry, Mapping):
    return None
  return entry.get("settings")


class DictSettingsSource:
  """In-memory settings source.

  Example::

      source = DictSettingsSource({"context_servers": {"chrome-devtools-mcp-zed": {"settings": {...}}}})
  """

  def __init__(self, data: Optional[Dict[str, Any]] = None) -> None:
    self._data: Dict[str, Any] = data or {}

  def lookup(self, server_id: str, project: Any) -> Optional[Any]:
    return _server_settings(self._data, server_id)


class JsonFileSettingsSource:
  """Reads settings from a JSON-with-comments file.

  Host settings files are JSONC: ``//`` and ``/* */`` comments and trailing
  commas are accepted.

  When no explicit path is given, the file is looked up per project at
  ``<project>/.zed/settings.json``, where ``project`` is the project root.

  Missing files resolve to None. Unreadable files and invalid JSON raise, and
  the resolver turns that into default settings.
  """

  def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
    self._path: Optional[Path] = Path(path) if path is not None else None

  def settings_path(self, project: Any) -> Optional[Path]:
    if self._path is not None:
      return self._path
    if project is None:
      return None
    return Path(project) / PROJECT_SETTINGS_PATH

  def lookup(self, server_id: str, project: Any) -> Optional[Any]:
    path = self.settings_path(project)
    if path is None or not path.is_file():
      return None
    with path.open("r", encoding="utf-8") as f:
      data = json5.load(f)
    return _server_settings(data, server_id)
