"""Style tree model: Root, StyleRule, Group, Declaration, and Comment.

The tree is produced by an external parser and printed by an external
printer.  Formatting that only the printer cares about (whitespace, the
exact text between tokens) lives in each node's ``raws`` dict and never
takes part in matching.

Nodes compare by identity (``eq=False``).  Structural equality for
redundancy detection is done through match keys, see
:mod:`discard_duplicates.model.keys`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


class Container:
    """Behaviour shared by every node that owns an ordered child list."""

    nodes: list | None

    def children(self) -> Iterator[Node]:
        """Yield the direct children in document order."""
        yield from self.nodes or ()

    def remove(self, node: Node) -> None:
        """Delete a single child, matched by identity."""
        self.discard([node])

    def discard(self, doomed: Iterable[Node]) -> int:
        """Delete every child in *doomed*, keeping the order of the rest.

        Returns the number of children actually removed.
        """
        if not self.nodes:
            return 0
        doomed_ids = {id(n) for n in doomed}
        if not doomed_ids:
            return 0
        before = len(self.nodes)
        self.nodes[:] = [n for n in self.nodes if id(n) not in doomed_ids]
        return before - len(self.nodes)


@dataclass(eq=False)
class Declaration:
    """A single ``prop: value [!important]`` assignment.

    ``comments`` carries comment text attached to this declaration; it is
    kept or dropped together with the declaration but never compared.
    """

    prop: str
    value: str
    important: bool = False
    comments: list[str] = field(default_factory=list)
    raws: dict[str, str] = field(default_factory=dict)


@dataclass(eq=False)
class Comment:
    """A free-standing comment.  Never matched and never removed on its own."""

    text: str
    raws: dict[str, str] = field(default_factory=dict)


@dataclass(eq=False)
class StyleRule(Container):
    """A selector paired with a declaration block."""

    selector: str
    nodes: list[Declaration | Comment] = field(default_factory=list)
    raws: dict[str, str] = field(default_factory=dict)

    def declarations(self) -> list[Declaration]:
        return [n for n in self.nodes if isinstance(n, Declaration)]


@dataclass(eq=False)
class Group(Container):
    """A named, parameterised at-rule such as ``@media print`` or ``@font-face``.

    ``nodes`` is None for statement at-rules without a block
    (``@charset "utf-8";``) and a list, possibly empty, otherwise.
    """

    name: str
    params: str = ""
    nodes: list[Node] | None = None
    raws: dict[str, str] = field(default_factory=dict)

    @property
    def has_block(self) -> bool:
        return self.nodes is not None


@dataclass(eq=False)
class Root(Container):
    """The document container.  Has no identity of its own."""

    nodes: list[Node] = field(default_factory=list)
    raws: dict[str, str] = field(default_factory=dict)


Node = StyleRule | Group | Declaration | Comment
