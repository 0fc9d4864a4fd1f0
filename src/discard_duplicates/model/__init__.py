from discard_duplicates.model.nodes import (
    Comment,
    Container,
    Declaration,
    Group,
    Node,
    Root,
    StyleRule,
)
from discard_duplicates.model.keys import match_key, nodes_equal

__all__ = [
    "Comment",
    "Container",
    "Declaration",
    "Group",
    "Node",
    "Root",
    "StyleRule",
    "match_key",
    "nodes_equal",
]
