"""Redundancy elimination for parsed style-sheet trees."""

from discard_duplicates.errors import DedupeError, OptionsError, UnknownNodeError
from discard_duplicates.model import (
    Comment,
    Container,
    Declaration,
    Group,
    Node,
    Root,
    StyleRule,
    match_key,
    nodes_equal,
)
from discard_duplicates.options import DedupeOptions, resolve_options
from discard_duplicates.transforms import DeduplicateTransform, deduplicate

__all__ = [
    "Comment",
    "Container",
    "Declaration",
    "DedupeError",
    "DedupeOptions",
    "DeduplicateTransform",
    "Group",
    "Node",
    "OptionsError",
    "Root",
    "StyleRule",
    "UnknownNodeError",
    "deduplicate",
    "match_key",
    "nodes_equal",
    "resolve_options",
]
