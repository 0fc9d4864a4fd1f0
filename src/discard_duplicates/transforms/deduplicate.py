"""Redundancy engine: resolve nested blocks first, then collapse each level."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TypeVar

from discard_duplicates.errors import UnknownNodeError
from discard_duplicates.model.nodes import Comment, Container, Declaration, Group, StyleRule
from discard_duplicates.options import DedupeOptions, resolve_options
from discard_duplicates.transforms.declarations import collapse_declarations
from discard_duplicates.transforms.nodes import collapse_nodes

logger = logging.getLogger("discard_duplicates")

TreeT = TypeVar("TreeT", bound=Container)


def _collapse(container: Container, options: DedupeOptions, log: logging.Logger) -> int:
    """Post-order pass over *container*; returns how many items were removed."""
    removed = 0
    for child in container.children():
        if isinstance(child, Group):
            if child.has_block:
                removed += _collapse(child, options, log)
        elif not isinstance(child, (StyleRule, Declaration, Comment)):
            raise UnknownNodeError(child)

    decls = collapse_declarations(container, options, log)
    nodes = collapse_nodes(container, options, log)
    if decls or nodes:
        log.debug(
            "Collapsed %s: %d declaration(s), %d node(s)",
            _label(container),
            len(decls),
            len(nodes),
        )
    return removed + len(decls) + len(nodes)


def _label(container: Container) -> str:
    if isinstance(container, Group):
        return f"@{container.name} {container.params}".rstrip()
    return type(container).__name__.lower()


class DeduplicateTransform:
    """Remove rules, groups and declarations made redundant by another occurrence.

    Nested blocks are fully resolved before their parent's children are
    compared, so two ``@media`` blocks that only differed by inner
    duplicates end up equal and collapse.  Matching is exact text, never
    normalised, and never crosses container boundaries.
    """

    def __init__(
        self,
        options: DedupeOptions | Mapping[str, object] | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.options = resolve_options(options)
        self.log = log or logger

    def apply(self, tree: TreeT) -> TreeT:
        removed = _collapse(tree, self.options, self.log)
        if removed:
            self.log.info("Discarded %d redundant item(s)", removed)
        return tree


def deduplicate(
    tree: TreeT,
    options: DedupeOptions | Mapping[str, object] | None = None,
    log: logging.Logger | None = None,
) -> TreeT:
    """Deduplicate *tree* in place and return it."""
    return DeduplicateTransform(options, log=log).apply(tree)
