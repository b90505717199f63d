"""Content fingerprints stored as Confluence content properties.

The stored hash is the only evidence of what was last published; page
version numbers are not used because other writers bump them too.
"""

import hashlib
from typing import BinaryIO, Union

CONTENT_HASH_PROPERTY_KEY = "content-hash"

_CHUNK_SIZE = 64 * 1024


def content_hash(content: Union[str, bytes]) -> str:
    """Return the lowercase SHA-256 hex digest of content (str is UTF-8 encoded)."""
    if isinstance(content, str):
        content = content.encode('utf-8')
    return hashlib.sha256(content).hexdigest()


def stream_hash(stream: BinaryIO) -> str:
    """Hash a binary stream to exhaustion, closing it afterwards."""
    digest = hashlib.sha256()
    with stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b''):
            digest.update(chunk)
    return digest.hexdigest()


def attachment_hash_key(filename: str) -> str:
    """Property key holding the hash of an attachment."""
    return f"{filename}-hash"
