"""Settings resolution: raw host configuration -> DevtoolsMcpSettings.

Resolution never fails. A missing configuration system, a missing entry, or
a value that does not validate all resolve to the all-defaults settings, so a
schema change on either side can never block the server from starting.
"""

from typing import Any, Optional, Protocol

from pydantic import ValidationError

from devtools_mcp.settings.model import DevtoolsMcpSettings
from devtools_mcp.utils.log import log_debug, log_warning

SERVER_ID = "chrome-devtools-mcp-zed"


class SettingsSource(Protocol):
  """Host capability that returns the raw settings value for a server."""

  def lookup(self, server_id: str, project: Any) -> Optional[Any]:
    """Return the raw (JSON-like) settings, or None when nothing is configured.

    May raise when the host has no configuration system or its state is
    malformed; callers treat that as "no configuration".
    """
    ...


def parse_or_default(raw: Optional[Any]) -> DevtoolsMcpSettings:
  """Validate a raw settings value, falling back to defaults on any failure.

  The fallback is all-or-nothing: one invalid field discards every other
  field of the value.

  Args:
      raw: Raw JSON-like value (usually a dict), or None.

  Returns:
      Validated settings, or ``DevtoolsMcpSettings()`` if ``raw`` is None or invalid.
  """
  if raw is None:
    return DevtoolsMcpSettings()
  try:
    return DevtoolsMcpSettings.model_validate(raw)
  except ValidationError as e:
    log_warning(f"Ignoring invalid settings ({e.error_count()} error(s)); using defaults")
    log_debug(f"Settings validation errors: {e}", log_level=2)
    return DevtoolsMcpSettings()


def load_settings(source: SettingsSource, project: Any, server_id: str = SERVER_ID) -> DevtoolsMcpSettings:
  """Fetch and validate the settings for ``server_id`` in ``project``."""
  try:
    raw = source.lookup(server_id, project)
  except Exception as e:
    log_warning(f"Cannot read settings for '{server_id}': {e}; using defaults")
    return DevtoolsMcpSettings()
  return parse_or_default(raw)
