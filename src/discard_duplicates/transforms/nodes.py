"""Node collapse: remove empty rules and whole sibling nodes that repeat."""

from __future__ import annotations

import logging

from discard_duplicates.model.keys import match_key
from discard_duplicates.model.nodes import Container, Declaration, Group, Node, StyleRule
from discard_duplicates.options import DedupeOptions

logger = logging.getLogger("discard_duplicates")


def _describe(node: Node) -> str:
    if isinstance(node, StyleRule):
        return f"rule {node.selector!r}"
    if isinstance(node, Group):
        return f"@{node.name} {node.params}".rstrip()
    if isinstance(node, Declaration):
        return f"declaration {node.prop}: {node.value}"
    return type(node).__name__.lower()


def _empty_rules(container: Container) -> list[StyleRule]:
    return [
        child
        for child in container.children()
        if isinstance(child, StyleRule) and not child.declarations()
    ]


def _duplicate_siblings(container: Container, reverse_removal: bool) -> list[Node]:
    """Return every sibling that has an equal sibling of the same kind.

    The survivor of each set of equals is the last one in document order,
    or the first with *reverse_removal*.  Comments never match anything.
    """
    children = list(container.children())
    scan = children if reverse_removal else reversed(children)
    seen: set = set()
    doomed: list[Node] = []
    for child in scan:
        key = match_key(child)
        if key is None:
            continue
        if key in seen:
            doomed.append(child)
        else:
            seen.add(key)
    if not reverse_removal:
        doomed.reverse()
    return doomed


def collapse_nodes(
    container: Container,
    options: DedupeOptions,
    log: logging.Logger | None = None,
) -> list[Node]:
    """Delete redundant direct children of *container*.

    First every StyleRule with no declarations left is dropped, then every
    rule, group or free-standing declaration that equals a sibling of the
    same kind is dropped.  Only siblings are ever compared.  Free-standing
    comments are never dropped on their own, but a rule holding nothing
    else is empty and goes together with its comments.

    Returns the removed nodes.
    """
    log = log or logger
    empty = _empty_rules(container)
    container.discard(empty)
    for rule in empty:
        log.debug("Removed empty rule %r", rule.selector)

    duplicates = _duplicate_siblings(container, options.reverse_removal)
    container.discard(duplicates)
    for node in duplicates:
        log.debug("Removed duplicate %s", _describe(node))

    return [*empty, *duplicates]
