"""Publish a local page hierarchy to Confluence, writing only what changed."""

from .metadata import MetadataError, MetadataLoader
from .publisher import ConfluencePublisher, PublishingStrategy, publish

__version__ = "0.1.0"

__all__ = [
    'MetadataError',
    'MetadataLoader',
    'ConfluencePublisher',
    'PublishingStrategy',
    'publish',
]
