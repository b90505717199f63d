"""Exceptions raised while loading publish metadata."""

from typing import Optional

from ..confluence_client.errors import PublisherError


class MetadataError(PublisherError):
    """Raised when the metadata file is unreadable or invalid."""

    def __init__(self, message: str, metadata_field: Optional[str] = None):
        if metadata_field:
            full_message = f"Metadata error in field '{metadata_field}': {message}"
        else:
            full_message = f"Metadata error: {message}"
        super().__init__(full_message)
        self.metadata_field = metadata_field
        self.original_message = message
