"""Top-level publish orchestration.

Validates the publish parameters, picks the strategy entry point, drives
the Reconciler over the whole tree and returns the immutable result.
"""

import logging
from typing import Optional

from ..confluence_client.remote_store import RemoteStore
from .errors import PublisherConfigurationError
from .listener import PublisherListener
from .models import PageNode, PublisherMetadata, PublishResult, is_blank
from .reconciler import Reconciler
from .result_builder import PublishResultBuilder
from .strategy import PublishingStrategy

logger = logging.getLogger(__name__)


class ConfluencePublisher:
    """Publishes a local page tree to Confluence.

    Usage:
        publisher = ConfluencePublisher(
            metadata=MetadataLoader.load("publish.yaml"),
            strategy=PublishingStrategy.APPEND_TO_ANCESTOR,
            store=APIWrapper(Authenticator()),
        )
        result = publisher.publish()
        print(f"Published {len(result.pages)} page(s) to {result.root_url}")
    """

    def __init__(
        self,
        metadata: PublisherMetadata,
        strategy: PublishingStrategy,
        store: RemoteStore,
        listener: Optional[PublisherListener] = None,
        version_message: Optional[str] = None,
        delete_orphans: bool = True,
    ):
        """Initialize the publisher.

        Args:
            metadata: Space, ancestor and the local page tree
            strategy: How root pages relate to the ancestor
            store: Remote store implementation
            listener: Optional observer for page events
            version_message: Message attached to every written version
            delete_orphans: Remove remote pages with no local counterpart

        Raises:
            PublisherConfigurationError: If metadata, strategy or store is None
        """
        for name, value in (("metadata", metadata), ("publishingStrategy", strategy), ("store", store)):
            if value is None:
                raise PublisherConfigurationError(f"{name} == null")
        self.metadata = metadata
        self.strategy = strategy
        self.store = store
        self.listener = listener
        self.version_message = version_message
        self.delete_orphans = delete_orphans

    def publish(self) -> PublishResult:
        """Run one complete, sequential publish.

        Returns:
            PublishResult listing every visited page in pre-order

        Raises:
            PublisherConfigurationError: Blank space key or ancestor id, unknown
                strategy, or several root pages under REPLACE_ANCESTOR. Raised
                before any remote call.
            ConfluenceError: Any remote failure; the run stops there
            ContentReadError: A page body or attachment cannot be read
        """
        space_key = self.metadata.space_key
        ancestor_id = self.metadata.ancestor_id

        if is_blank(space_key):
            raise PublisherConfigurationError("spaceKey must be set")
        if is_blank(ancestor_id):
            raise PublisherConfigurationError("ancestorId must be set")
        if not isinstance(self.strategy, PublishingStrategy):
            raise PublisherConfigurationError(
                f"Invalid publishing strategy '{self.strategy}'"
            )

        pages = list(self.metadata.pages)
        root_page = _single_root_page(self.strategy, pages) if self.strategy.is_replace_ancestor else None

        result_builder = (
            PublishResultBuilder()
            .set_root_url(self.store.root_url())
            .set_space_key(space_key)
            .set_ancestor_id(ancestor_id)
        )
        reconciler = Reconciler(
            self.store,
            result_builder,
            listener=self.listener,
            version_message=self.version_message,
            delete_orphans=self.delete_orphans,
        )

        logger.info(
            f"Publishing {len(pages)} root page(s) to space {space_key} "
            f"(ancestor {ancestor_id}, strategy {self.strategy})"
        )

        if self.strategy.is_append_to_ancestor:
            reconciler.publish_under_ancestor(pages, space_key, ancestor_id)
        elif root_page is not None:
            reconciler.publish_replacing_ancestor(root_page, space_key, ancestor_id)

        if self.listener is not None:
            self.listener.publish_completed()

        result = result_builder.build()
        logger.info(f"Publish completed: {len(result.pages)} page(s) visited")
        return result


def _single_root_page(strategy: PublishingStrategy, pages) -> Optional[PageNode]:
    if len(pages) > 1:
        titles = ", ".join(f"'{page.title}'" for page in pages)
        raise PublisherConfigurationError(
            f"Multiple root pages detected: {titles}, but '{strategy}' publishing "
            f"strategy only supports one single root page"
        )
    return pages[0] if pages else None


def publish(
    metadata: PublisherMetadata,
    strategy: PublishingStrategy,
    store: RemoteStore,
    version_message: Optional[str] = None,
    listener: Optional[PublisherListener] = None,
    delete_orphans: bool = True,
) -> PublishResult:
    """Publish metadata's page tree with the given strategy.

    Convenience wrapper around ConfluencePublisher(...).publish().
    """
    return ConfluencePublisher(
        metadata,
        strategy,
        store,
        listener=listener,
        version_message=version_message,
        delete_orphans=delete_orphans,
    ).publish()
