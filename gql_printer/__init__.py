"""Print GraphQL ASTs back into GraphQL source."""

from .core.parser import parse_document
from .core.printer import render

__all__ = ["parse_document", "render"]
