"""Exceptions raised by the printer and the parser adapter."""

from typing import Any


class UnsupportedNodeError(TypeError):
    """Raised when a node has no renderer (or no AST counterpart).

    This signals a missing case in the printer, not bad input data.
    """

    def __init__(self, node: Any, message: str | None = None):
        self.node = node
        if message is None:
            message = f"Cannot render node of type {type(node).__name__}: {node!r}"
        self.message = message
        super().__init__(message)
