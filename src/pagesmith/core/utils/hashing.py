"""SHA-256 content hashing for blob etags"""

import hashlib


def etag(content: str) -> str:
    """Return the hex SHA-256 of content; stable across processes, 64 chars."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
