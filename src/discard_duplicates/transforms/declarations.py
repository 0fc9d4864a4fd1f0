"""Declaration collapse: prune repeated declarations across same-selector rules."""

from __future__ import annotations

import logging

from discard_duplicates.model.keys import declaration_key
from discard_duplicates.model.nodes import Container, Declaration, StyleRule
from discard_duplicates.options import DedupeOptions

logger = logging.getLogger("discard_duplicates")


def _rules_by_selector(container: Container) -> dict[str, list[StyleRule]]:
    groups: dict[str, list[StyleRule]] = {}
    for child in container.children():
        if isinstance(child, StyleRule):
            groups.setdefault(child.selector, []).append(child)
    return groups


def _mark_redundant(
    entries: list[tuple[Declaration, StyleRule]], reverse_removal: bool
) -> list[tuple[Declaration, StyleRule]]:
    """Return the entries superseded by an equal entry elsewhere in *entries*.

    By default the last occurrence of each declaration survives; with
    *reverse_removal* the first one does.
    """
    scan = entries if reverse_removal else reversed(entries)
    seen: set[tuple] = set()
    marked: list[tuple[Declaration, StyleRule]] = []
    for decl, rule in scan:
        key = declaration_key(decl)
        if key in seen:
            marked.append((decl, rule))
        else:
            seen.add(key)
    if not reverse_removal:
        marked.reverse()
    return marked


def collapse_declarations(
    container: Container,
    options: DedupeOptions,
    log: logging.Logger | None = None,
) -> list[Declaration]:
    """Remove duplicate declarations among the direct StyleRule children.

    Rules are grouped by exact selector text.  Within a group the
    declarations of every rule are read as one sequence in document order,
    duplicates are marked, and the marked declarations are then deleted
    from their owning rules in one batch.  Rules left empty are not removed
    here; see :func:`discard_duplicates.transforms.nodes.collapse_nodes`.

    Returns the removed declarations.
    """
    log = log or logger
    removed: list[Declaration] = []
    for selector, rules in _rules_by_selector(container).items():
        entries = [(d, rule) for rule in rules for d in rule.declarations()]
        marked = _mark_redundant(entries, options.reverse_removal)
        if not marked:
            continue

        doomed_by_rule: dict[int, list[Declaration]] = {}
        for decl, rule in marked:
            doomed_by_rule.setdefault(id(rule), []).append(decl)
        for rule in rules:
            doomed = doomed_by_rule.get(id(rule))
            if doomed:
                rule.discard(doomed)

        for decl, _ in marked:
            log.debug(
                "Removed duplicate declaration %s: %s in %r",
                decl.prop,
                decl.value,
                selector,
            )
        removed.extend(decl for decl, _ in marked)
    return removed
