"""Tests for declaration collapse across same-selector rules."""

from discard_duplicates.model import Comment, Declaration, Group, Root, StyleRule
from discard_duplicates.options import DedupeOptions
from discard_duplicates.transforms import collapse_declarations


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

DEFAULT = DedupeOptions()
REVERSE = DedupeOptions(reverse_removal=True)


def _d(text: str, **kwargs) -> Declaration:
    prop, value = text.split(":", 1)
    important = value.endswith("!important")
    if important:
        value = value[: -len("!important")]
    return Declaration(prop, value, important=important, **kwargs)


def _rule(selector: str, *decls: str) -> StyleRule:
    return StyleRule(selector, [_d(d) for d in decls])


def _props(rule: StyleRule) -> list[str]:
    return [f"{d.prop}:{d.value}" for d in rule.declarations()]


# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------


class TestDefaultDirection:
    def test_earlier_declaration_removed(self):
        first = _rule("h1", "color:red", "background:blue")
        second = _rule("h1", "color:red")
        root = Root([first, second])
        removed = collapse_declarations(root, DEFAULT)
        assert _props(first) == ["background:blue"]
        assert _props(second) == ["color:red"]
        assert len(removed) == 1
        assert removed[0].prop == "color"

    def test_duplicates_within_one_rule(self):
        rule = _rule("h1", "font-weight:bold", "font-weight:bold")
        survivor = rule.nodes[1]
        collapse_declarations(Root([rule]), DEFAULT)
        assert rule.nodes == [survivor]

    def test_last_occurrence_survives_over_three_rules(self):
        rules = [_rule("h1", "a:b") for _ in range(3)]
        last = rules[2].nodes[0]
        collapse_declarations(Root(rules), DEFAULT)
        assert [r.nodes for r in rules] == [[], [], [last]]

    def test_removed_in_document_order(self):
        root = Root([_rule("h1", "a:1", "b:2"), _rule("h1", "b:2", "a:1")])
        removed = collapse_declarations(root, DEFAULT)
        assert [d.prop for d in removed] == ["a", "b"]


class TestReverseDirection:
    def test_later_declaration_removed(self):
        first = _rule("h1", "color:red", "background:blue")
        second = _rule("h1", "color:red")
        collapse_declarations(Root([first, second]), REVERSE)
        assert _props(first) == ["color:red", "background:blue"]
        assert second.nodes == []

    def test_first_occurrence_survives_within_rule(self):
        rule = _rule("h1", "color:#000", "color:#000")
        survivor = rule.nodes[0]
        collapse_declarations(Root([rule]), REVERSE)
        assert rule.nodes == [survivor]


# ---------------------------------------------------------------------------
# Scope and exactness
# ---------------------------------------------------------------------------


class TestScope:
    def test_empty_rule_left_in_place(self):
        first = _rule("h1", "a:b")
        root = Root([first, _rule("h1", "a:b")])
        collapse_declarations(root, DEFAULT)
        assert root.nodes[0] is first
        assert first.nodes == []

    def test_different_selectors_untouched(self):
        root = Root([_rule("h1", "font-weight:bold"), _rule("h2", "font-weight:bold")])
        assert collapse_declarations(root, DEFAULT) == []

    def test_interleaved_selectors_grouped(self):
        first = _rule("h1", "color:#000")
        root = Root([first, _rule("h2", "color:#fff"), _rule("h1", "color:#000")])
        collapse_declarations(root, DEFAULT)
        assert first.nodes == []

    def test_nested_rules_not_compared(self):
        nested = _rule("h1", "display:block")
        root = Root([_rule("h1", "display:block"), Group("media", "print", [nested])])
        assert collapse_declarations(root, DEFAULT) == []
        assert _props(nested) == ["display:block"]

    def test_groups_and_bare_declarations_ignored(self):
        group = Group("font-face", "", [_d("font-family:x"), _d("font-family:x")])
        root = Root([group])
        assert collapse_declarations(root, DEFAULT) == []
        assert len(group.nodes) == 2

    def test_literal_values_only(self):
        rule = _rule("h1", "margin:10px 0 10px 0", "margin:10px 0")
        assert collapse_declarations(Root([rule]), DEFAULT) == []

    def test_importance_distinguishes(self):
        rule = _rule("h1", "color:red", "color:red!important")
        assert collapse_declarations(Root([rule]), DEFAULT) == []


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestComments:
    def test_free_comment_survives_neighbour_removal(self):
        note = Comment("note")
        first = StyleRule("h1", [note, _d("a:b")])
        collapse_declarations(Root([first, _rule("h1", "a:b")]), DEFAULT)
        assert first.nodes == [note]

    def test_attached_comment_travels_with_declaration(self):
        kept = _d("font-weight:bold", comments=["test"])
        first = StyleRule("h1", [_d("font-weight:bold", comments=["test"])])
        second = StyleRule("h1", [kept])
        collapse_declarations(Root([first, second]), DEFAULT)
        assert first.nodes == []
        assert second.nodes == [kept]
        assert kept.comments == ["test"]

    def test_attached_comment_does_not_block_match(self):
        first = StyleRule("h1", [_d("a:b", comments=["one"])])
        second = StyleRule("h1", [_d("a:b", comments=["two"])])
        removed = collapse_declarations(Root([first, second]), DEFAULT)
        assert [d.comments for d in removed] == [["one"]]
