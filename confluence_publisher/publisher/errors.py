"""Typed exceptions raised by the publisher itself.

Remote failures come from confluence_client.errors; the errors here cover
invalid input and unreadable local content.
"""

import os
from typing import Optional

from ..confluence_client.errors import PublisherError


class PublisherConfigurationError(PublisherError):
    """Raised for invalid publish parameters, before any remote call is made."""

    def __init__(self, message: str):
        super().__init__(message)


class ContentReadError(PublisherError):
    """Raised when a page body or attachment file cannot be read."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        absolute_path = os.path.abspath(file_path)
        message = f"Could not read file [{file_path}]; absolute path is [{absolute_path}]"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.absolute_path = absolute_path
        self.reason = reason
