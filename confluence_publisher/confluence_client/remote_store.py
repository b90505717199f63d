"""Capability interface consumed by the publisher.

The publisher only talks to Confluence through this protocol. APIWrapper
is the production implementation; tests use an in-memory double.
"""

from typing import List, Optional, Protocol

from .models import LookupResult, RemoteAttachmentSnapshot, RemotePageSnapshot


class RemoteStore(Protocol):
    """Page, attachment and content property operations.

    All operations are synchronous and raise a ConfluenceError subclass
    on failure. Lookups return Found / NotFound / Ambiguous instead of
    raising for the expected "nothing there yet" case.
    """

    def root_url(self) -> str:
        ...

    def find_page_id_by_title(self, space_key: str, title: str) -> LookupResult[str]:
        ...

    def create_page(
        self,
        space_key: str,
        parent_id: str,
        title: str,
        body: str,
        version_message: Optional[str] = None,
    ) -> str:
        ...

    def update_page(
        self,
        page_id: str,
        parent_id: Optional[str],
        title: str,
        body: str,
        new_version: int,
        version_message: Optional[str] = None,
    ) -> None:
        ...

    def delete_page(self, page_id: str) -> None:
        ...

    def get_page_snapshot(self, page_id: str) -> RemotePageSnapshot:
        ...

    def list_children(self, page_id: str) -> List[RemotePageSnapshot]:
        ...

    def list_attachments(self, content_id: str) -> List[RemoteAttachmentSnapshot]:
        ...

    def find_attachment_by_filename(
        self, content_id: str, filename: str
    ) -> LookupResult[RemoteAttachmentSnapshot]:
        ...

    def create_attachment(self, content_id: str, filename: str, data: bytes) -> None:
        ...

    def update_attachment_content(
        self, content_id: str, attachment_id: str, data: bytes
    ) -> None:
        ...

    def delete_attachment(self, attachment_id: str) -> None:
        ...

    def get_property(self, content_id: str, key: str) -> Optional[str]:
        ...

    def set_property(self, content_id: str, key: str, value: str) -> None:
        ...

    def delete_property(self, content_id: str, key: str) -> None:
        ...
