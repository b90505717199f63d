"""Publishing strategies.

APPEND_TO_ANCESTOR publishes every root page as a child of the ancestor.
REPLACE_ANCESTOR takes a single root page, writes it over the ancestor
itself and publishes that page's children under the ancestor.
"""

from enum import Enum

from .errors import PublisherConfigurationError


class PublishingStrategy(Enum):
    """How root pages relate to the configured ancestor.

    Example:
        >>> PublishingStrategy.from_name("replace-ancestor")
        <PublishingStrategy.REPLACE_ANCESTOR: 'replace_ancestor'>
    """
    APPEND_TO_ANCESTOR = "append_to_ancestor"
    REPLACE_ANCESTOR = "replace_ancestor"

    @property
    def is_append_to_ancestor(self) -> bool:
        return self is PublishingStrategy.APPEND_TO_ANCESTOR

    @property
    def is_replace_ancestor(self) -> bool:
        return self is PublishingStrategy.REPLACE_ANCESTOR

    @classmethod
    def from_name(cls, name: str) -> 'PublishingStrategy':
        """Parse a strategy name, accepting either '-' or '_' and any case.

        Raises:
            PublisherConfigurationError: If the name is not a known strategy
        """
        normalized = (name or "").strip().lower().replace('-', '_')
        for strategy in cls:
            if strategy.value == normalized:
                return strategy
        valid = ", ".join(strategy.value for strategy in cls)
        raise PublisherConfigurationError(
            f"Invalid publishing strategy '{name}' (expected one of: {valid})"
        )

    def __str__(self) -> str:
        return self.name
