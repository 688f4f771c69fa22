"""
Errors raised while exporting a service.
"""

from typing import Optional

class ExportError(Exception):
    """Base class for all export failures."""

class UsageError(ExportError):
    """Bad arguments or configuration, raised before any network access."""

class NotFoundError(ExportError):
    """The service does not exist or has no revision history."""

class UpstreamError(ExportError):
    """The serving API failed or returned something unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
