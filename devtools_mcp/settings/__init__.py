"""Settings model, resolution and schema export."""

from devtools_mcp.settings.model import DevtoolsMcpSettings
from devtools_mcp.settings.resolver import SERVER_ID, SettingsSource, load_settings, parse_or_default
from devtools_mcp.settings.schema import ContextServerConfiguration, context_server_configuration, settings_json_schema
from devtools_mcp.settings.sources import DictSettingsSource, JsonFileSettingsSource
from devtools_mcp.settings.types import ChromeChannel, FrozenMapping

__all__ = [
  "ChromeChannel",
  "ContextServerConfiguration",
  "DevtoolsMcpSettings",
  "DictSettingsSource",
  "FrozenMapping",
  "JsonFileSettingsSource",
  "SERVER_ID",
  "SettingsSource",
  "context_server_configuration",
  "load_settings",
  "parse_or_default",
  "settings_json_schema",
]
