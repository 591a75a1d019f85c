"""Translate DevtoolsMcpSettings into chrome-devtools-mcp command-line arguments.

The translation is a fixed, ordered pipeline of emission rules. Each rule looks
at one or more settings fields and returns the tokens it contributes (possibly
none). The order of ``EMISSION_RULES`` is the order of flags on the command
line, independent of the order fields appeared in the raw settings.

Conflicting options (e.g. ``browser_url`` together with ``ws_endpoint``) are
not rejected here: every set field is emitted and the upstream server decides.
"""

import json
from typing import Any, Callable, List, Optional, Tuple

from devtools_mcp.settings.model import DevtoolsMcpSettings
from devtools_mcp.settings.types import thaw_json
from devtools_mcp.utils.log import log_debug

EmissionRule = Callable[[DevtoolsMcpSettings], List[str]]

# Field pairs the upstream CLI declares as conflicting.
CONFLICTING_FIELDS: Tuple[Tuple[str, str], ...] = (
  ("auto_connect", "isolated"),
  ("auto_connect", "executable_path"),
  ("browser_url", "ws_endpoint"),
  ("user_data_dir", "browser_url"),
  ("user_data_dir", "ws_endpoint"),
  ("user_data_dir", "isolated"),
  ("channel", "browser_url"),
  ("channel", "ws_endpoint"),
  ("channel", "executable_path"),
)


def _clean(value: Optional[str]) -> Optional[str]:
  """Trim a string option; blank means absent."""
  if value is None:
    return None
  value = value.strip()
  return value or None


def _flag(enabled: Optional[bool], flag: str) -> List[str]:
  return [flag] if enabled is True else []


def _option(value: Optional[str], flag: str) -> List[str]:
  value = _clean(value)
  return [flag, value] if value is not None else []


def _compact_json(value: Any) -> Optional[str]:
  """Compact JSON text for a settings object, or None if it cannot be encoded.

  Keys keep their input order rather than being sorted. The server parses the
  value as a JSON object, so either order yields the same headers.
  """
  try:
    return json.dumps(thaw_json(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
  except (TypeError, ValueError) as e:
    log_debug(f"Skipping --wsHeaders: value is not JSON-serializable ({e})")
    return None


# ---------------------------------------------------------------------------
# Connection options
# ---------------------------------------------------------------------------


def _auto_connect(settings: DevtoolsMcpSettings) -> List[str]:
  return _flag(settings.auto_connect, "--autoConnect")


def _browser_url(settings: DevtoolsMcpSettings) -> List[str]:
  return _option(settings.browser_url, "--browserUrl")


def _ws_endpoint(settings: DevtoolsMcpSettings) -> List[str]:
  return _option(settings.ws_endpoint, "--wsEndpoint")


def _ws_headers(settings: DevtoolsMcpSettings) -> List[str]:
  # Upstream only honors --wsHeaders together with --wsEndpoint.
  if settings.ws_headers is None or _clean(settings.ws_endpoint) is None:
    return []
  encoded = _compact_json(settings.ws_headers)
  return ["--wsHeaders", encoded] if encoded is not None else []


# ---------------------------------------------------------------------------
# Chrome launch options
# ---------------------------------------------------------------------------


def _headless(settings: DevtoolsMcpSettings) -> List[str]:
  return _flag(settings.headless, "--headless")


def _executable_path(settings: DevtoolsMcpSettings) -> List[str]:
  return _option(settings.executable_path, "--executablePath")


def _isolated(settings: DevtoolsMcpSettings) -> List[str]:
  return _flag(settings.isolated, "--isolated")


def _user_data_dir(settings: DevtoolsMcpSettings) -> List[str]:
  return _option(settings.user_data_dir, "--userDataDir")


def _channel(settings: DevtoolsMcpSettings) -> List[str]:
  if settings.channel is None:
    return []
  return ["--channel", settings.channel.as_str()]


def _viewport(settings: DevtoolsMcpSettings) -> List[str]:
  return _option(settings.viewport, "--viewport")


def _chrome_args(settings: DevtoolsMcpSettings) -> List[str]:
  tokens: List[str] = []
  for arg in settings.chrome_arg:
    tokens.extend(_option(arg, "--chromeArg"))
  return tokens


# ---------------------------------------------------------------------------
# Network options
# ---------------------------------------------------------------------------


def _proxy_server(settings: DevtoolsMcpSettings) -> List[str]:
  return _option(settings.proxy_server, "--proxyServer")


def _accept_insecure_certs(settings: DevtoolsMcpSettings) -> List[str]:
  return _flag(settings.accept_insecure_certs, "--acceptInsecureCerts")


# ---------------------------------------------------------------------------
# Logging options
# ---------------------------------------------------------------------------


def _log_file(settings: DevtoolsMcpSettings) -> List[str]:
  return _option(settings.log_file, "--logFile")


# ---------------------------------------------------------------------------
# Tool categories: upstream enables all of them, so only `false` is emitted
# ---------------------------------------------------------------------------


def _categories(settings: DevtoolsMcpSettings) -> List[str]:
  tokens: List[str] = []
  for name, enabled in (
    ("emulation", settings.category_emulation),
    ("performance", settings.category_performance),
    ("network", settings.category_network),
  ):
    if enabled is False:
      tokens.append(f"--no-category-{name}")
  return tokens


# ---------------------------------------------------------------------------
# Passthrough
# ---------------------------------------------------------------------------


def _extra_args(settings: DevtoolsMcpSettings) -> List[str]:
  return list(settings.extra_args)


EMISSION_RULES: Tuple[EmissionRule, ...] = (
  _auto_connect,
  _browser_url,
  _ws_endpoint,
  _ws_headers,
  _headless,
  _executable_path,
  _isolated,
  _user_data_dir,
  _channel,
  _viewport,
  _chrome_args,
  _proxy_server,
  _accept_insecure_certs,
  _log_file,
  _categories,
  _extra_args,
)


def _is_set(settings: DevtoolsMcpSettings, field: str) -> bool:
  value = getattr(settings, field)
  if isinstance(value, str):
    return _clean(value) is not None
  if isinstance(value, bool):
    return value
  return value is not None


def find_conflicts(settings: DevtoolsMcpSettings) -> List[Tuple[str, str]]:
  """Return the declared-conflicting field pairs that are both set.

  Informational only; ``build_upstream_args`` still emits every set field.
  """
  return [(a, b) for a, b in CONFLICTING_FIELDS if _is_set(settings, a) and _is_set(settings, b)]


def build_upstream_args(settings: DevtoolsMcpSettings) -> List[str]:
  """Build the chrome-devtools-mcp argument vector for ``settings``.

  Args:
      settings: Resolved settings for this launch.

  Returns:
      Ordered argument tokens (without the entrypoint). Empty for default settings.
  """
  for a, b in find_conflicts(settings):
    log_debug(f"Settings '{a}' and '{b}' conflict upstream; passing both through")

  args: List[str] = []
  for rule in EMISSION_RULES:
    args.extend(rule(settings))
  return args
