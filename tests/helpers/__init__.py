"""Test helper modules for publisher testing.

- in_memory_store: Dictionary-backed RemoteStore recording every write
- page_files: Write page bodies and attachments to disk and build PageNodes
"""

from .in_memory_store import InMemoryRemoteStore, ROOT_URL
from .page_files import (
    SOME_CONFLUENCE_CONTENT,
    SOME_CONFLUENCE_CONTENT_SHA256_HASH,
    write_page,
)

__all__ = [
    'InMemoryRemoteStore',
    'ROOT_URL',
    'SOME_CONFLUENCE_CONTENT',
    'SOME_CONFLUENCE_CONTENT_SHA256_HASH',
    'write_page',
]
