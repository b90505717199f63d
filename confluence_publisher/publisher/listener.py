"""Observer protocol for publish progress.

A listener is optional. When the caller does not supply one the
publisher simply skips notification.
"""

from typing import Protocol

from ..confluence_client.models import RemotePageSnapshot


class PublisherListener(Protocol):
    """Receives page-level events; attachment changes are not reported."""

    def page_added(self, added_page: RemotePageSnapshot) -> None:
        ...

    def page_updated(self, existing_page: RemotePageSnapshot, updated_page: RemotePageSnapshot) -> None:
        ...

    def page_deleted(self, deleted_page: RemotePageSnapshot) -> None:
        ...

    def publish_completed(self) -> None:
        ...
