"""SHA-256 content hashing so downstream publishers can skip unchanged posts"""

import hashlib


def sha256(content: str) -> str:
    """Return the hex SHA-256 digest of content encoded as UTF-8."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
