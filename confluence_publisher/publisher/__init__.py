"""Tree reconciliation engine publishing a local page hierarchy to Confluence.

Remote writes are gated by content hashes stored as Confluence content
properties, so re-running an unchanged publish writes nothing.
"""

from .content_hash import CONTENT_HASH_PROPERTY_KEY, attachment_hash_key, content_hash
from .errors import ContentReadError, PublisherConfigurationError
from .listener import PublisherListener
from .models import PageNode, PublishedPageInfo, PublisherMetadata, PublishResult
from .publisher import ConfluencePublisher, publish
from .reconciler import INITIAL_PAGE_VERSION, Reconciler
from .result_builder import PublishResultBuilder
from .strategy import PublishingStrategy

__all__ = [
    'CONTENT_HASH_PROPERTY_KEY',
    'INITIAL_PAGE_VERSION',
    'attachment_hash_key',
    'content_hash',
    'ContentReadError',
    'PublisherConfigurationError',
    'PublisherListener',
    'PageNode',
    'PublishedPageInfo',
    'PublisherMetadata',
    'PublishResult',
    'ConfluencePublisher',
    'publish',
    'Reconciler',
    'PublishResultBuilder',
    'PublishingStrategy',
]
