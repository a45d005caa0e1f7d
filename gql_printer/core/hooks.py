"""Render hooks for customizing printed output.

Provides protocols for pre- and post-render hooks that can modify the
document before it is printed or transform the printed text afterwards.

Example usage:
    from gql_printer.core.hooks import HookRunner, AddHeaderHook, FilterDefinitionsHook

    runner = HookRunner()
    runner.add_pre_hook(FilterDefinitionsHook(exclude_prefix="__"))
    runner.add_post_hook(AddHeaderHook("# Schema dump - do not edit"))

    document = runner.run_pre_hooks(document)
    text = runner.run_post_hooks(render(document))
"""

from dataclasses import replace
from typing import Protocol, runtime_checkable

from .nodes import Document


@runtime_checkable
class PreRenderHook(Protocol):
    """Protocol for pre-render hooks.

    Pre-render hooks receive the document before it is printed and return
    the document to print. Nodes are immutable, so hooks build a new
    document rather than editing the one they are given.
    """

    def pre_render(self, document: Document) -> Document:
        """Called before rendering.

        Args:
            document: The document about to be rendered

        Returns:
            The (possibly replaced) document to render
        """
        ...


@runtime_checkable
class PostRenderHook(Protocol):
    """Protocol for post-render hooks.

    Post-render hooks receive the printed text and can transform it
    before it's written out.
    """

    def post_render(self, text: str) -> str:
        """Called after rendering.

        Args:
            text: The printed GraphQL

        Returns:
            The (possibly transformed) text to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to printed output.

    Example:
        hook = AddHeaderHook("# Generated from schema.graphqls")
    """

    def __init__(self, header: str):
        self.header = header

    def post_render(self, text: str) -> str:
        """Add a header to the beginning of the text."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + text


class FilterDefinitionsHook:
    """Built-in hook to filter definitions by name prefix/suffix.

    Unnamed definitions (anonymous operations, schema blocks) are always kept.

    Example:
        # Remove introspection types
        hook = FilterDefinitionsHook(exclude_prefix="__")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str | None) -> bool:
        """Check if a definition should be included."""
        if name is None:
            return True
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_render(self, document: Document) -> Document:
        """Drop definitions whose names don't pass the filter."""
        definitions = tuple(
            d for d in document.definitions
            if self._should_include(getattr(d, "name", None))
        )
        return replace(document, definitions=definitions)


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreRenderHook] = []
        self.post_hooks: list[PostRenderHook] = []

    def add_pre_hook(self, hook: PreRenderHook):
        """Add a pre-render hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostRenderHook):
        """Add a post-render hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: Document) -> Document:
        """Run all pre-render hooks in order."""
        for hook in self.pre_hooks:
            document = hook.pre_render(document)
        return document

    def run_post_hooks(self, text: str) -> str:
        """Run all post-render hooks in order."""
        for hook in self.post_hooks:
            text = hook.post_render(text)
        return text
