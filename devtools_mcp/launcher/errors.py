"""Launch failures.

Anything that prevents building a launchable command is raised as one of
these; settings problems never are (they fall back to defaults).
"""

from typing import Optional

from devtools_mcp.exceptions import DevtoolsMcpError


class LaunchError(DevtoolsMcpError):
  """Base exception for failures while building the server command."""

  def __init__(self, message: str, status_code: int = 500):
    super().__init__(message, status_code)
    self.type = "launch_error"
    self.error_id = "launch_error"


class RuntimeNotFoundError(LaunchError):
  """Raised when no usable Node.js executable can be located."""

  def __init__(self, message: str, searched: Optional[list] = None):
    super().__init__(message, status_code=503)
    self.searched = searched or []
    self.type = "runtime_not_found_error"
    self.error_id = "runtime_not_found_error"


class WorkingDirectoryError(LaunchError):
  """Raised when the working directory (package install root) is unusable."""

  def __init__(self, message: str, original_error: Optional[Exception] = None):
    super().__init__(message, status_code=500)
    self.original_error = original_error
    self.type = "working_directory_error"
    self.error_id = "working_directory_error"


class PackageManagerError(LaunchError):
  """Raised when the npm registry lookup or package install fails.

  This can happen due to:
  - Registry unreachable or returning a non-2xx status
  - Registry response without a version
  - ``npm`` missing or ``npm install`` exiting non-zero
  """

  def __init__(
    self,
    message: str,
    package_name: Optional[str] = None,
    original_error: Optional[Exception] = None,
  ):
    super().__init__(message, status_code=502)
    self.package_name = package_name
    self.original_error = original_error
    self.type = "package_manager_error"
    self.error_id = "package_manager_error"
