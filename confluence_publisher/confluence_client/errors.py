"""Typed exception hierarchy for Confluence-related errors.

This module defines the exceptions raised by the Confluence store implementation.
All exceptions inherit from ConfluenceError and carry enough context (operation,
target id or title) to diagnose a failed publish without re-running it.
"""

from typing import List, Optional


class PublisherError(Exception):
    """Base exception for all confluence-publisher errors.

    Use this to catch any application-level error from the publisher.
    """
    pass


class ConfluenceError(PublisherError):
    """Base exception for all Confluence-related errors."""
    pass


class InvalidCredentialsError(ConfluenceError):
    """Raised when API credentials are missing, invalid or rejected."""

    def __init__(self, user: str, endpoint: str, missing: Optional[List[str]] = None):
        if missing:
            message = (
                f"Missing Confluence credentials: {', '.join(missing)} "
                f"(user: {user}, endpoint: {endpoint})"
            )
        else:
            message = f"API key is invalid (user: {user}, endpoint: {endpoint})"
        super().__init__(message)
        self.user = user
        self.endpoint = endpoint
        self.missing = missing or []


class PageNotFoundError(ConfluenceError):
    """Raised when a page addressed by id does not exist."""

    def __init__(self, page_id: str):
        super().__init__(f"Page {page_id} not found")
        self.page_id = page_id


class APIUnreachableError(ConfluenceError):
    """Raised when the Confluence API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(ConfluenceError):
    """Raised when a remote operation fails with a non-success response."""

    def __init__(
        self,
        message: str = "Confluence API failure (after 3 retries)",
        operation: Optional[str] = None,
        target: Optional[str] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.target = target


class MultipleMatchesError(ConfluenceError):
    """Raised when a lookup by title or filename is ambiguous.

    The remote tree cannot be reconciled safely when more than one
    page (or attachment) answers to the same identity.
    """

    def __init__(self, kind: str, key: str, count: int):
        super().__init__(
            f"Multiple {kind}s found for '{key}' ({count} matches)"
        )
        self.kind = kind
        self.key = key
        self.count = count
