"""Recursive reconciliation of a local page tree against Confluence.

The Reconciler walks the local tree depth-first. At every level it first
removes remote orphans (when enabled), then for each local page resolves
its identity by (space, title), creates or updates it only when the stored
content hash or the title differ, reconciles its attachments and descends
into its children. Every call is sequential and blocking; any remote
failure propagates and aborts the run.
"""

import logging
from typing import Mapping, Optional, Sequence

from ..confluence_client.errors import MultipleMatchesError
from ..confluence_client.models import (
    Ambiguous,
    Found,
    NotFound,
    RemotePageSnapshot,
)
from ..confluence_client.remote_store import RemoteStore
from .content_hash import (
    CONTENT_HASH_PROPERTY_KEY,
    attachment_hash_key,
    content_hash,
    stream_hash,
)
from .errors import ContentReadError
from .listener import PublisherListener
from .models import PageNode
from .result_builder import PublishResultBuilder

logger = logging.getLogger(__name__)

INITIAL_PAGE_VERSION = 1


class Reconciler:
    """Synchronizes local PageNodes with the remote page tree.

    One Reconciler serves one run: it owns the result builder and the
    listener for the run's duration.

    Example:
        >>> reconciler = Reconciler(store, PublishResultBuilder(), listener=None)
        >>> reconciler.publish_under_ancestor(pages, "DOC", "123456")
    """

    def __init__(
        self,
        store: RemoteStore,
        result_builder: PublishResultBuilder,
        listener: Optional[PublisherListener] = None,
        version_message: Optional[str] = None,
        delete_orphans: bool = True,
    ):
        """Initialize the reconciler.

        Args:
            store: Remote store to read from and write to
            result_builder: Accumulator for visited pages
            listener: Optional observer for page events
            version_message: Message attached to created and updated versions
            delete_orphans: Remove remote pages with no local counterpart
        """
        self._store = store
        self._result_builder = result_builder
        self._listener = listener
        self._version_message = version_message
        self._delete_orphans = delete_orphans

    def publish_under_ancestor(
        self,
        pages: Sequence[PageNode],
        space_key: str,
        ancestor_id: str,
    ) -> None:
        """Publish pages (and their subtrees) as children of ancestor_id.

        Args:
            pages: Local pages expected directly under ancestor_id
            space_key: Space to publish to
            ancestor_id: Parent page id
        """
        if self._delete_orphans:
            self._delete_orphans_under(pages, ancestor_id)

        for page in pages:
            page_id = self._add_or_update_page(space_key, ancestor_id, page)
            self._result_builder.add_page(space_key, ancestor_id, page, page_id)

            self._reconcile_attachments(page_id, page.attachments)

            self.publish_under_ancestor(page.children, space_key, page_id)

    def publish_replacing_ancestor(
        self,
        root_page: PageNode,
        space_key: str,
        ancestor_id: str,
    ) -> None:
        """Write root_page over the ancestor page and publish its children below it.

        The ancestor must already exist; it is always updated, never created.
        """
        self._update_page(ancestor_id, None, root_page)
        self._result_builder.add_page(space_key, None, root_page, ancestor_id)

        self._reconcile_attachments(ancestor_id, root_page.attachments)

        self.publish_under_ancestor(root_page.children, space_key, ancestor_id)

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def _add_or_update_page(self, space_key: str, ancestor_id: str, page: PageNode) -> str:
        """Resolve page by title and update it, or create it if absent.

        Returns:
            The remote id of the page
        """
        lookup = self._store.find_page_id_by_title(space_key, page.title)

        if isinstance(lookup, Ambiguous):
            raise MultipleMatchesError("page", page.title, lookup.count)

        if isinstance(lookup, Found):
            self._update_page(lookup.value, ancestor_id, page)
            return lookup.value

        content = page.read_content()
        page_id = self._store.create_page(
            space_key, ancestor_id, page.title, content, self._version_message
        )
        self._store.set_property(page_id, CONTENT_HASH_PROPERTY_KEY, content_hash(content))
        logger.info(f"Created page '{page.title}' ({page_id}) under {ancestor_id}")

        if self._listener is not None:
            self._listener.page_added(
                RemotePageSnapshot(page_id, page.title, content, INITIAL_PAGE_VERSION)
            )
        return page_id

    def _update_page(self, page_id: str, ancestor_id: Optional[str], page: PageNode) -> None:
        """Update an existing page when its content hash or title changed."""
        content = page.read_content()
        existing_page = self._store.get_page_snapshot(page_id)
        existing_hash = self._store.get_property(page_id, CONTENT_HASH_PROPERTY_KEY)
        new_hash = content_hash(content)

        if existing_hash == new_hash and existing_page.title == page.title:
            logger.debug(f"Page '{page.title}' ({page_id}) is up to date")
            return

        self._store.delete_property(page_id, CONTENT_HASH_PROPERTY_KEY)
        new_version = existing_page.version + 1
        self._store.update_page(
            page_id, ancestor_id, page.title, content, new_version, self._version_message
        )
        self._store.set_property(page_id, CONTENT_HASH_PROPERTY_KEY, new_hash)
        logger.info(f"Updated page '{page.title}' ({page_id}) to version {new_version}")

        if self._listener is not None:
            self._listener.page_updated(
                existing_page,
                RemotePageSnapshot(page_id, page.title, content, new_version),
            )

    # ------------------------------------------------------------------
    # Orphans
    # ------------------------------------------------------------------

    def _delete_orphans_under(self, pages_to_keep: Sequence[PageNode], parent_id: str) -> None:
        """Delete remote children of parent_id whose title is not kept locally."""
        titles_to_keep = {page.title for page in pages_to_keep}

        for child in self._store.list_children(parent_id):
            if child.title not in titles_to_keep:
                logger.info(f"Removing orphan '{child.title}' ({child.page_id}) under {parent_id}")
                self._delete_subtree(child)

    def _delete_subtree(self, page: RemotePageSnapshot) -> None:
        """Delete page and all its descendants, deepest first."""
        for child in self._store.list_children(page.page_id):
            self._delete_subtree(child)

        self._store.delete_page(page.page_id)
        logger.info(f"Deleted page '{page.title}' ({page.page_id})")

        if self._listener is not None:
            self._listener.page_deleted(page)

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    def _reconcile_attachments(self, content_id: str, attachments: Mapping[str, str]) -> None:
        """Remove stale attachments, then add or refresh the local ones."""
        for remote_attachment in self._store.list_attachments(content_id):
            if remote_attachment.filename not in attachments:
                self._store.delete_property(content_id, attachment_hash_key(remote_attachment.filename))
                self._store.delete_attachment(remote_attachment.attachment_id)
                logger.info(
                    f"Deleted attachment '{remote_attachment.filename}' from page {content_id}"
                )

        for filename, file_path in attachments.items():
            self._add_or_update_attachment(content_id, filename, file_path)

    def _add_or_update_attachment(self, content_id: str, filename: str, file_path: str) -> None:
        new_hash = stream_hash(_open_binary(file_path))
        hash_key = attachment_hash_key(filename)

        lookup = self._store.find_attachment_by_filename(content_id, filename)

        if isinstance(lookup, Ambiguous):
            raise MultipleMatchesError("attachment", filename, lookup.count)

        if isinstance(lookup, NotFound):
            # A hash left behind by an attachment deleted outside the publisher
            self._store.delete_property(content_id, hash_key)
            self._store.create_attachment(content_id, filename, _read_binary(file_path))
            self._store.set_property(content_id, hash_key, new_hash)
            logger.info(f"Added attachment '{filename}' to page {content_id}")
            return

        existing_hash = self._store.get_property(content_id, hash_key)
        if existing_hash == new_hash:
            logger.debug(f"Attachment '{filename}' on page {content_id} is up to date")
            return

        if existing_hash is not None:
            self._store.delete_property(content_id, hash_key)
        self._store.update_attachment_content(
            content_id, lookup.value.attachment_id, _read_binary(file_path)
        )
        self._store.set_property(content_id, hash_key, new_hash)
        logger.info(f"Updated attachment '{filename}' on page {content_id}")


def _open_binary(file_path: str):
    try:
        return open(file_path, 'rb')
    except OSError as e:
        raise ContentReadError(file_path, str(e)) from e


def _read_binary(file_path: str) -> bytes:
    with _open_binary(file_path) as f:
        return f.read()
