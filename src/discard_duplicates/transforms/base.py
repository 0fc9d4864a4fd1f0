"""Base protocol for style tree transforms."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from discard_duplicates.model.nodes import Container


@runtime_checkable
class Transform(Protocol):
    """A tree-to-tree rewriting step."""

    def apply(self, tree: Container) -> Container: ...
