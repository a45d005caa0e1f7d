"""Query signatures for caching printed documents.

A signature is the SHA-256 digest of a node's printed form, so two trees
that print identically share a signature no matter how their source was
formatted.
"""

import hashlib
from typing import Any

from .printer import render


def _digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def query_signature(node: Any) -> str:
    """Return the hex SHA-256 digest of ``render(node)``."""
    return _digest(render(node))


class DocumentCache:
    """Cache of printed documents keyed by signature.

    Example:
        cache = DocumentCache()
        signature = cache.add(document)

        text = cache.get(signature)
    """

    def __init__(self):
        self._texts: dict[str, str] = {}

    def add(self, node: Any) -> str:
        """Render ``node``, store the text and return its signature."""
        text = render(node)
        signature = _digest(text)
        self._texts.setdefault(signature, text)
        return signature

    def get(self, signature: str) -> str | None:
        """Get the printed text for a signature, or None if not cached."""
        return self._texts.get(signature)

    def has(self, signature: str) -> bool:
        """Check if a signature is cached."""
        return signature in self._texts

    def __len__(self) -> int:
        return len(self._texts)
