"""Data models exchanged with the remote Confluence store.

Snapshots are immutable values: a write never mutates a snapshot, the
store hands out a new one on the next read.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class RemotePageSnapshot:
    """A page as seen on Confluence.

    Attributes:
        page_id: Confluence content id
        title: Page title
        body: Storage-format body (None when only identity/version was fetched)
        version: Version number, incremented by Confluence on each update
    """
    page_id: str
    title: str
    body: Optional[str]
    version: int


@dataclass(frozen=True)
class RemoteAttachmentSnapshot:
    """An attachment as seen on Confluence.

    Attributes:
        attachment_id: Confluence attachment id
        filename: Attachment file name (unique per page)
        download_ref: Relative download link
        version: Attachment version number
    """
    attachment_id: str
    filename: str
    download_ref: str
    version: int


@dataclass(frozen=True)
class Found(Generic[T]):
    """Lookup matched exactly one remote entity."""
    value: T


@dataclass(frozen=True)
class NotFound:
    """Lookup matched nothing."""


@dataclass(frozen=True)
class Ambiguous:
    """Lookup matched more than one remote entity."""
    count: int


LookupResult = Union[Found[T], NotFound, Ambiguous]
