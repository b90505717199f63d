"""Data models for the publisher.

PageNode describes the local tree to publish; PublishedPageInfo and
PublishResult record what a run touched. All models are frozen dataclasses:
nothing here changes while a run is in progress.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import ContentReadError, PublisherConfigurationError


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string and whitespace-only strings."""
    return value is None or not str(value).strip()


def require_not_blank(value: Optional[str], name: str) -> str:
    if is_blank(value):
        raise PublisherConfigurationError(f"{name} is null or blank (only whitespace)")
    return value  # type: ignore[return-value]


@dataclass(frozen=True)
class PageNode:
    """A local page and its subtree.

    Attributes:
        title: Page title, unique among its siblings
        content_file: Path to the storage-format (XHTML) body, read at publish time
        children: Child pages, in publish order
        attachments: Mapping of attachment file name to local file path
    """
    title: str
    content_file: str
    children: Tuple['PageNode', ...] = ()
    attachments: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'children', tuple(self.children))
        object.__setattr__(self, 'attachments', MappingProxyType(dict(self.attachments)))

    def __hash__(self):
        return hash((self.title, self.content_file, self.children, tuple(sorted(self.attachments.items()))))

    def read_content(self) -> str:
        """Read the page body as UTF-8.

        Universal newlines turn CRLF and CR into LF, and a single trailing
        line break is dropped, so an editor adding a final newline does not
        change the published body or its hash. Other characters, form
        feeds and Unicode line separators included, are kept as written.

        Raises:
            ContentReadError: If the file is missing or unreadable
        """
        try:
            with open(self.content_file, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ContentReadError(self.content_file, str(e)) from e
        return text[:-1] if text.endswith("\n") else text


@dataclass(frozen=True)
class PublisherMetadata:
    """Everything needed to publish one local tree.

    Attributes:
        space_key: Confluence space key (e.g., "~personalSpace")
        ancestor_id: Page id under which (or in place of which) to publish
        pages: Root pages of the local tree
    """
    space_key: Optional[str]
    ancestor_id: Optional[str]
    pages: Tuple[PageNode, ...] = ()


@dataclass(frozen=True)
class PublishedPageInfo:
    """One page visited during a run (created, updated or unchanged).

    Attributes:
        space_key: Space the page lives in
        ancestor_id: Parent id it was published under (None for a replaced ancestor)
        page: The local page
        page_id: Remote id of the page
    """
    space_key: str
    ancestor_id: Optional[str]
    page: PageNode
    page_id: str

    def __post_init__(self):
        require_not_blank(self.space_key, "spaceKey")
        if self.page is None:
            raise PublisherConfigurationError("page == null")
        require_not_blank(self.page_id, "contentId")

    @property
    def title(self) -> str:
        return self.page.title


@dataclass(frozen=True)
class PublishResult:
    """Immutable record of a completed run.

    Attributes:
        root_url: Confluence root URL published to
        space_key: Space key published to
        ancestor_id: Ancestor page id
        pages: Every visited page, parents before children, siblings in order
    """
    root_url: str
    space_key: str
    ancestor_id: str
    pages: Tuple[PublishedPageInfo, ...] = ()
