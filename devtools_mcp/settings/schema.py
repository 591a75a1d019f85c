"""Settings schema export for the host configuration UI.

Pure reflection over ``DevtoolsMcpSettings``; the argument translator does not
depend on anything in this module.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from devtools_mcp.settings.model import DevtoolsMcpSettings

# Bundled host-facing files
_CONFIGURATION_DIR = Path(__file__).parent.parent / "configuration"


@dataclass(frozen=True)
class ContextServerConfiguration:
  """Static configuration surface handed to the host.

  Attributes:
    installation_instructions: Markdown shown when the server is first added.
    default_settings: JSONC snippet the host pre-fills for the user.
    settings_schema: JSON schema (serialized) used to validate user settings.
  """

  installation_instructions: str
  default_settings: str
  settings_schema: str


def settings_schema_dict() -> Dict[str, Any]:
  """JSON schema for ``DevtoolsMcpSettings`` as a dict."""
  return DevtoolsMcpSettings.model_json_schema()


def settings_json_schema() -> str:
  """JSON schema for ``DevtoolsMcpSettings``, serialized."""
  return json.dumps(settings_schema_dict())


def read_configuration_file(name: str) -> str:
  """Read a packaged file from ``devtools_mcp/configuration``."""
  return (_CONFIGURATION_DIR / name).read_text(encoding="utf-8")


def context_server_configuration() -> ContextServerConfiguration:
  return ContextServerConfiguration(
    installation_instructions=read_configuration_file("installation_instructions.md"),
    default_settings=read_configuration_file("default_settings.jsonc"),
    settings_schema=settings_json_schema(),
  )
