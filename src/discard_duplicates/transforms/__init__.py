from discard_duplicates.transforms.base import Transform
from discard_duplicates.transforms.declarations import collapse_declarations
from discard_duplicates.transforms.deduplicate import DeduplicateTransform, deduplicate
from discard_duplicates.transforms.nodes import collapse_nodes

__all__ = [
    "DeduplicateTransform",
    "Transform",
    "collapse_declarations",
    "collapse_nodes",
    "deduplicate",
]
