"""Loading of the local page tree to publish."""

from .errors import MetadataError
from .loader import MetadataLoader

__all__ = [
    'MetadataError',
    'MetadataLoader',
]
