"""Value types used by the settings model."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterator, Optional


class FrozenMapping(Mapping):
  """Read-only, hashable mapping holding a JSON object.

  Nested objects are FrozenMapping as well and arrays are tuples (see
  ``freeze_json``), so the whole value is immutable and can be hashed.
  """

  def __init__(self, data: Optional[Mapping] = None) -> None:
    self._data: Dict[str, Any] = dict(data or {})

  def __getitem__(self, key: str) -> Any:
    return self._data[key]

  def __iter__(self) -> Iterator[str]:
    return iter(self._data)

  def __len__(self) -> int:
    return len(self._data)

  def __hash__(self) -> int:
    return hash(frozenset(self._data.items()))

  def __repr__(self) -> str:
    return f"FrozenMapping({self._data!r})"


def freeze_json(value: Any) -> Any:
  """Objects become FrozenMapping, arrays become tuples; key order is kept."""
  if isinstance(value, Mapping):
    return FrozenMapping({key: freeze_json(item) for key, item in value.items()})
  if isinstance(value, (list, tuple)):
    return tuple(freeze_json(item) for item in value)
  return value


def thaw_json(value: Any) -> Any:
  """Inverse of ``freeze_json``: plain dicts and lists, ready for ``json.dumps``."""
  if isinstance(value, Mapping):
    return {key: thaw_json(item) for key, item in value.items()}
  if isinstance(value, tuple):
    return [thaw_json(item) for item in value]
  return value


class ChromeChannel(str, Enum):
  """Chrome release channel accepted by the upstream ``--channel`` option."""

  STABLE = "stable"
  CANARY = "canary"
  BETA = "beta"
  DEV = "dev"

  @classmethod
  def parse(cls, value: str) -> "ChromeChannel":
    """Parse a channel token case-insensitively.

    Raises:
        ValueError: If the token is not one of the four known channels.
    """
    token = value.strip().lower()
    for channel in cls:
      if channel.value == token:
        return channel
    choices = ", ".join(c.value for c in cls)
    raise ValueError(f"Unknown Chrome channel {value!r} (expected one of: {choices})")

  def as_str(self) -> str:
    return self.value
