"""Base exception for devtools-mcp."""


class DevtoolsMcpError(Exception):
  """Base exception for all devtools-mcp errors.

  Attributes:
    message: Human-readable description.
    status_code: HTTP-style status code classifying the failure.
    type: Machine-readable error type.
    error_id: Stable identifier for the error class.
  """

  def __init__(self, message: str, status_code: int = 500):
    super().__init__(message)
    self.message = message
    self.status_code = status_code
    self.type = "devtools_mcp_error"
    self.error_id = "devtools_mcp_error"

  def __str__(self) -> str:
    return self.message
