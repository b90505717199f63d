"""Confluence client library for the publisher.

This package provides the RemoteStore protocol the publisher depends on and
its production implementation over the Confluence REST API.
"""

from .api_wrapper import APIWrapper
from .auth import Authenticator, Credentials
from .errors import (
    PublisherError,
    ConfluenceError,
    InvalidCredentialsError,
    PageNotFoundError,
    APIUnreachableError,
    APIAccessError,
    MultipleMatchesError,
)
from .models import (
    Ambiguous,
    Found,
    LookupResult,
    NotFound,
    RemoteAttachmentSnapshot,
    RemotePageSnapshot,
)
from .remote_store import RemoteStore

__all__ = [
    "APIWrapper",
    "Authenticator",
    "Credentials",
    "PublisherError",
    "ConfluenceError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
    "MultipleMatchesError",
    "Ambiguous",
    "Found",
    "LookupResult",
    "NotFound",
    "RemoteAttachmentSnapshot",
    "RemotePageSnapshot",
    "RemoteStore",
]
