"""Tests for the built-in rule transforms and predicates.

Covers:
- has_extension: case-insensitive, last dot only, path separators
- ignore_null, negate, regex, wildcard: match and non-match cases
- additional_properties: pruning and required keys, no input mutation
- nested_json / nested_html through a full comparison
"""

from __future__ import annotations

import json
import re

import pytest

from json_rule_diff.comparator import JsonDiff
from json_rule_diff.rules import builtin
from json_rule_diff.rules.chain import RuleChain
from json_rule_diff.tree.builder import TreeBuilder
from json_rule_diff.tree.nodes import TreeNode

_builder = TreeBuilder()
_engine = JsonDiff()


def _s(text: str) -> TreeNode:
    return TreeNode.string(text)


# ---------------------------------------------------------------------------
# has_extension
# ---------------------------------------------------------------------------


class TestHasExtension:
    @pytest.mark.parametrize(
        ("name", "matches"),
        [
            ("a.json", True),
            ("a.JSON", True),
            ("archive.tar.json", True),
            ("json", False),
            ("a.", False),
            ("", False),
            ("dir.json/file", False),
            ("dir.json\\file", False),
            ("a.jsonx", False),
        ],
    )
    def test_json_extension(self, name: str, matches: bool) -> None:
        predicate = builtin.has_extension(".json")
        assert predicate(_s(""), _s(""), name) is matches

    def test_several_extensions(self) -> None:
        predicate = builtin.has_extension(".html", ".htm")
        assert predicate(_s(""), _s(""), "index.htm")
        assert predicate(_s(""), _s(""), "index.HTML")
        assert not predicate(_s(""), _s(""), "index.txt")


# ---------------------------------------------------------------------------
# Scalar rules
# ---------------------------------------------------------------------------


class TestIgnoreNull:
    def test_null_expectation_accepts_anything(self) -> None:
        expected, actual = builtin.ignore_null(TreeNode.null(), _s("x"), "a", _engine)
        assert expected.is_null
        assert actual.is_null
        assert expected is not actual

    def test_non_null_expectation_untouched(self) -> None:
        e, a = TreeNode.number(1), TreeNode.number(2)
        assert builtin.ignore_null(e, a, "a", _engine) == (e, a)

    def test_both_null_untouched(self) -> None:
        e, a = TreeNode.null(), TreeNode.null()
        result = builtin.ignore_null(e, a, "a", _engine)
        assert result[0] is e
        assert result[1] is a


class TestNegate:
    def test_different_value_matches(self) -> None:
        expected, actual = builtin.negate(_s("!value"), _s("a value"), "", _engine)
        assert expected == actual == _s("a value")

    def test_same_value_fails(self) -> None:
        expected, actual = builtin.negate(_s("!value"), _s("value"), "", _engine)
        assert expected == _s("!value")
        assert actual == _s("value")

    def test_bare_bang_against_empty_string_fails(self) -> None:
        expected, _ = builtin.negate(_s("!"), _s(""), "", _engine)
        assert expected == _s("!")

    def test_non_string_actual_untouched(self) -> None:
        expected, _ = builtin.negate(_s("!1"), TreeNode.number(2), "", _engine)
        assert expected == _s("!1")


class TestRegex:
    def test_match(self) -> None:
        expected, actual = builtin.regex(_s("/^\\d+$/"), _s("123"), "", _engine)
        assert expected == actual == _s("123")

    def test_search_is_unanchored(self) -> None:
        expected, _ = builtin.regex(_s("/a/"), _s("xax"), "", _engine)
        assert expected == _s("xax")

    def test_no_match(self) -> None:
        expected, _ = builtin.regex(_s("/^\\d+$/"), _s("12a"), "", _engine)
        assert expected == _s("/^\\d+$/")

    def test_too_short_is_literal(self) -> None:
        expected, _ = builtin.regex(_s("//"), _s("anything"), "", _engine)
        assert expected == _s("//")

    def test_non_string_actual_untouched(self) -> None:
        expected, _ = builtin.regex(_s("/1/"), TreeNode.number(1), "", _engine)
        assert expected == _s("/1/")

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(re.error):
            builtin.regex(_s("/(/"), _s("x"), "", JsonDiff())


class TestWildcard:
    @pytest.mark.parametrize(
        ("pattern", "text", "matches"),
        [
            ("a*", "abc", True),
            ("a*", "a", True),
            ("*", "", True),
            ("a*c", "abbbc", True),
            ("a*", "ba", False),
            ("a.c*", "abcd", False),
            ("a*", "a\nb", False),
        ],
    )
    def test_match(self, pattern: str, text: str, matches: bool) -> None:
        expected, _ = builtin.wildcard(_s(pattern), _s(text), "", JsonDiff())
        assert (expected == _s(text)) is matches

    def test_no_star_untouched(self) -> None:
        expected, _ = builtin.wildcard(_s("abc"), _s("abc"), "", _engine)
        assert expected == _s("abc")


# ---------------------------------------------------------------------------
# Object rules
# ---------------------------------------------------------------------------


class TestAdditionalProperties:
    def test_extra_keys_dropped(self) -> None:
        transform = builtin.additional_properties()
        e = _builder.build({"a": 1})
        a = _builder.build({"a": 1, "b": 2})
        expected, actual = transform(e, a, "", _engine)
        assert expected is e
        assert list(actual.members) == ["a"]
        assert list(a.members) == ["a", "b"]

    def test_required_keys_kept(self) -> None:
        transform = builtin.additional_properties(lambda key: key == "b")
        e = _builder.build({"a": 1})
        a = _builder.build({"a": 1, "b": 2, "c": 3})
        _, actual = transform(e, a, "", _engine)
        assert list(actual.members) == ["a", "b"]

    def test_non_objects_untouched(self) -> None:
        transform = builtin.additional_properties()
        e, a = _builder.build([1]), _builder.build([1, 2])
        assert transform(e, a, "", _engine) == (e, a)


# ---------------------------------------------------------------------------
# Nested documents
# ---------------------------------------------------------------------------


class TestNestedJson:
    def test_formatting_differences_ignored(self) -> None:
        engine = JsonDiff(RuleChain().use_json())
        assert engine.diff({"doc.json": '{ "a": 1 }'}, {"doc.json": '{"a":1}'}) == ""

    def test_value_difference_shown_line_by_line(self) -> None:
        engine = JsonDiff(RuleChain().use_json())
        text = engine.diff({"doc.json": '{"a": 1}'}, {"doc.json": '{"a": 2}'})
        assert '-  \\"a\\": 1\n' in text
        assert '+  \\"a\\": 2\n' in text

    def test_predicate_gates_by_name(self) -> None:
        engine = JsonDiff(RuleChain().use_json())
        assert engine.diff({"doc": '{ "a": 1 }'}, {"doc": '{"a":1}'}) != ""

    def test_outer_engine_rules_apply_inside(self) -> None:
        engine = JsonDiff(RuleChain().use_json().use_wildcard())
        assert engine.diff({"x.json": '{"a": "v*"}'}, {"x.json": '{"a": "v1"}'}) == ""

    def test_explicit_nested_engine(self) -> None:
        inner = JsonDiff(RuleChain().use_wildcard())
        outer = JsonDiff(RuleChain().use_json(engine=inner))
        assert outer.diff({"x.json": '{"a": "v*"}'}, {"x.json": '{"a": "v1"}'}) == ""
        assert JsonDiff(RuleChain().use_json()).diff(
            {"x.json": '{"a": "v*"}'}, {"x.json": '{"a": "v1"}'}
        ) != ""

    def test_malformed_json_raises(self) -> None:
        engine = JsonDiff(RuleChain().use_json())
        with pytest.raises(json.JSONDecodeError):
            engine.diff({"x.json": "not json"}, {"x.json": "{}"})


class TestNestedHtml:
    def test_cosmetic_differences_ignored(self) -> None:
        engine = JsonDiff(RuleChain().use_html())
        expected = {"page.html": '<div class="a  b" id="x">text</div>'}
        actual = {"page.html": '<div id="x" class="a b">\n  text\n</div>'}
        assert engine.diff(expected, actual) == ""

    def test_text_difference_reported(self) -> None:
        engine = JsonDiff(RuleChain().use_html())
        text = engine.diff({"p.htm": "<div>text</div>"}, {"p.htm": "<div>text 2</div>"})
        assert "-  text\n" in text
        assert "+  text 2\n" in text
