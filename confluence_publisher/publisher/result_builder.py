"""Accumulates the pages visited during a run into a PublishResult."""

from typing import List, Optional

from .models import PageNode, PublishResult, PublishedPageInfo, is_blank
from .errors import PublisherConfigurationError


class PublishResultBuilder:
    """Mutable accumulator owned by one run; build() freezes it.

    Example:
        >>> builder = PublishResultBuilder().set_root_url("https://wiki").set_space_key("DOC")
        >>> builder.set_ancestor_id("123").add_page("DOC", "123", page, "456")
        >>> result = builder.build()
    """

    def __init__(self):
        self._pages: List[PublishedPageInfo] = []
        self._root_url: Optional[str] = None
        self._space_key: Optional[str] = None
        self._ancestor_id: Optional[str] = None

    def set_root_url(self, root_url: str) -> 'PublishResultBuilder':
        self._root_url = root_url
        return self

    def set_space_key(self, space_key: str) -> 'PublishResultBuilder':
        self._space_key = space_key
        return self

    def set_ancestor_id(self, ancestor_id: str) -> 'PublishResultBuilder':
        self._ancestor_id = ancestor_id
        return self

    def add_page(
        self,
        space_key: str,
        ancestor_id: Optional[str],
        page: PageNode,
        page_id: str,
    ) -> 'PublishResultBuilder':
        self._pages.append(PublishedPageInfo(space_key, ancestor_id, page, page_id))
        return self

    def build(self) -> PublishResult:
        """Freeze the accumulated pages into a PublishResult.

        Raises:
            PublisherConfigurationError: If root URL, space key or ancestor id is blank
        """
        for name, value in (
            ("rootUrl", self._root_url),
            ("spaceKey", self._space_key),
            ("ancestorId", self._ancestor_id),
        ):
            if is_blank(value):
                raise PublisherConfigurationError(f"{name} must be set")

        return PublishResult(
            root_url=self._root_url,  # type: ignore[arg-type]
            space_key=self._space_key,  # type: ignore[arg-type]
            ancestor_id=self._ancestor_id,  # type: ignore[arg-type]
            pages=tuple(self._pages),
        )
