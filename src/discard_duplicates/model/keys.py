"""Match keys: hashable reductions of style nodes used for equality.

Two nodes are redundant copies of each other iff their keys are equal.
Every key starts with a kind tag so nodes of different kinds never match.
Comments have no key and are skipped wherever keys are built.
"""

from __future__ import annotations

from collections.abc import Hashable

from discard_duplicates.errors import UnknownNodeError
from discard_duplicates.model.nodes import Comment, Declaration, Group, Node, StyleRule

DeclarationKey = tuple[str, str, str, bool]


def declaration_key(decl: Declaration) -> DeclarationKey:
    """Literal prop/value/importance triple; attached comments are ignored."""
    return ("decl", decl.prop, decl.value, decl.important)


def rule_key(rule: StyleRule) -> tuple[Hashable, ...]:
    """Selector plus the declaration multiset, order-insensitive."""
    decls = sorted(declaration_key(d) for d in rule.declarations())
    return ("rule", rule.selector, tuple(decls))


def group_key(group: Group) -> tuple[Hashable, ...]:
    """Name, params, and the child keys in document order."""
    if group.nodes is None:
        body = None
    else:
        body = tuple(k for k in map(match_key, group.nodes) if k is not None)
    return ("group", group.name, group.params, body)


def match_key(node: Node) -> Hashable | None:
    """Return the match key for *node*, or None for comments."""
    if isinstance(node, Declaration):
        return declaration_key(node)
    if isinstance(node, StyleRule):
        return rule_key(node)
    if isinstance(node, Group):
        return group_key(node)
    if isinstance(node, Comment):
        return None
    raise UnknownNodeError(node)


def nodes_equal(a: Node, b: Node) -> bool:
    """True when *a* and *b* are redundant copies of each other."""
    key = match_key(a)
    return key is not None and key == match_key(b)
