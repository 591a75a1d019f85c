"""DevtoolsMcpSettings: typed, immutable settings for one server launch.

Every field mirrors an upstream ``chrome-devtools-mcp`` CLI option (see the
upstream ``src/cli.ts``). Anything not modeled here can be forwarded with
``extra_args``.

Scalars are validated strictly (a bool field only accepts a JSON boolean, a
string field only a JSON string). Unknown keys are ignored so host-side
settings written for a newer version never fail validation here.

Instances are immutable and hashable: ``ws_headers`` is held as a
``FrozenMapping`` and list fields as tuples.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_serializer, field_validator

from devtools_mcp.settings.types import ChromeChannel, freeze_json, thaw_json


class DevtoolsMcpSettings(BaseModel):
  """Settings for the chrome-devtools-mcp context server.

  All fields are optional. An absent field means "use the upstream default",
  so ``DevtoolsMcpSettings()`` produces no arguments at all.

  Example::

      settings = DevtoolsMcpSettings.model_validate({
          "browser_url": "http://127.0.0.1:9222",
          "channel": "canary",
          "chrome_arg": ["--disable-gpu"],
      })
  """

  model_config = ConfigDict(frozen=True, extra="ignore")

  # ---------------------------------------------------------------------------
  # Connection options
  # ---------------------------------------------------------------------------

  auto_connect: Optional[StrictBool] = Field(
    default=None,
    description=(
      "Upstream `--autoConnect`. Connect to a running Chrome (145+) whose user data directory is "
      "selected by `channel`. Remote debugging must be enabled at chrome://inspect/#remote-debugging. "
      "Conflicts with: isolated, executable_path."
    ),
  )
  browser_url: Optional[StrictStr] = Field(
    default=None,
    description="Upstream `--browserUrl`. Debuggable Chrome reachable over HTTP, e.g. http://127.0.0.1:9222. Conflicts with: ws_endpoint.",
  )
  ws_endpoint: Optional[StrictStr] = Field(
    default=None,
    description="Upstream `--wsEndpoint`. Chrome reachable over WebSocket, e.g. ws://127.0.0.1:9222/devtools/browser/<id>. Conflicts with: browser_url.",
  )
  ws_headers: Optional[Dict[str, Any]] = Field(
    default=None,
    description='Upstream `--wsHeaders`. Extra WebSocket headers, e.g. {"Authorization": "Bearer token"}. Ignored unless ws_endpoint is set.',
  )

  # ---------------------------------------------------------------------------
  # Chrome launch options
  # ---------------------------------------------------------------------------

  headless: Optional[StrictBool] = Field(
    default=None,
    description="Upstream `--headless`. Run Chrome without a UI. Default: false.",
  )
  executable_path: Optional[StrictStr] = Field(
    default=None,
    description="Upstream `--executablePath`. Custom Chrome executable. Conflicts with: browser_url, ws_endpoint.",
  )
  isolated: Optional[StrictBool] = Field(
    default=None,
    description="Upstream `--isolated`. Use a temporary user data directory removed when the browser closes. Conflicts with: auto_connect, user_data_dir.",
  )
  user_data_dir: Optional[StrictStr] = Field(
    default=None,
    description=(
      "Upstream `--userDataDir`. Chrome profile directory. "
      "Default: $HOME/.cache/chrome-devtools-mcp/chrome-profile$CHANNEL_SUFFIX_IF_NON_STABLE. "
      "Conflicts with: browser_url, ws_endpoint, isolated."
    ),
  )
  channel: Optional[ChromeChannel] = Field(
    default=None,
    description=(
      "Upstream `--channel`. One of stable, canary, beta, dev; matched case-insensitively, surrounding whitespace ignored. "
      "Default: stable. Conflicts with: browser_url, ws_endpoint, executable_path."
    ),
  )
  viewport: Optional[StrictStr] = Field(
    default=None,
    description='Upstream `--viewport`. Initial viewport as "WIDTHxHEIGHT", e.g. "1280x720". Headless mode caps it at 3840x2160.',
  )
  chrome_arg: Tuple[StrictStr, ...] = Field(
    default=(),
    description="Upstream `--chromeArg` (repeatable). Extra Chrome arguments, used only when the server launches Chrome itself.",
  )

  # ---------------------------------------------------------------------------
  # Network options
  # ---------------------------------------------------------------------------

  proxy_server: Optional[StrictStr] = Field(
    default=None,
    description="Upstream `--proxyServer`. Passed to Chrome as --proxy-server when it is launched.",
  )
  accept_insecure_certs: Optional[StrictBool] = Field(
    default=None,
    description="Upstream `--acceptInsecureCerts`. Ignore self-signed and expired certificate errors. Use with caution.",
  )

  # ---------------------------------------------------------------------------
  # Logging options
  # ---------------------------------------------------------------------------

  log_file: Optional[StrictStr] = Field(
    default=None,
    description="Upstream `--logFile`. Write debug logs to this file. Set DEBUG=* for verbose output.",
  )

  # ---------------------------------------------------------------------------
  # Tool categories (upstream defaults all of these to enabled)
  # ---------------------------------------------------------------------------

  category_emulation: Optional[StrictBool] = Field(
    default=None,
    description="Upstream `--categoryEmulation`. Set to false to exclude emulation tools. Default: true.",
  )
  category_performance: Optional[StrictBool] = Field(
    default=None,
    description="Upstream `--categoryPerformance`. Set to false to exclude performance tools. Default: true.",
  )
  category_network: Optional[StrictBool] = Field(
    default=None,
    description="Upstream `--categoryNetwork`. Set to false to exclude network tools. Default: true.",
  )

  # ---------------------------------------------------------------------------
  # Passthrough
  # ---------------------------------------------------------------------------

  extra_args: Tuple[StrictStr, ...] = Field(
    default=(),
    description="Arguments appended verbatim to the server command line, for options not modeled above.",
  )

  @field_validator("channel", mode="before")
  @classmethod
  def _parse_channel(cls, value: Any) -> Any:
    if isinstance(value, str) and not isinstance(value, ChromeChannel):
      return ChromeChannel.parse(value)
    return value

  @field_validator("ws_headers", mode="after")
  @classmethod
  def _freeze_ws_headers(cls, value: Optional[Dict[str, Any]]) -> Any:
    # frozen=True only blocks attribute assignment; the headers object itself must not change either.
    return freeze_json(value) if value is not None else None

  @field_serializer("ws_headers")
  def _dump_ws_headers(self, value: Any) -> Optional[Dict[str, Any]]:
    return thaw_json(value) if value is not None else None
