"""Built-in rule transforms and predicates.

Each transform takes ``(expected, actual, name, engine)`` and returns a new
``(expected, actual)`` pair.  To turn a mismatch into a match a transform
rewrites expected to a copy of actual; to leave the pair alone it returns the
inputs unchanged.  No transform mutates the nodes it is given.

| Transform                  | Applies when                                   |
|----------------------------|------------------------------------------------|
| ``ignore_null``            | expected is null, actual is not                |
| ``negate``                 | both strings, expected starts with ``!``        |
| ``regex``                  | both strings, expected looks like ``/pattern/`` |
| ``wildcard``               | both strings, expected contains ``*``           |
| ``additional_properties``  | both objects                                   |
| ``nested_json``            | both strings (default predicate: ``*.json``)    |
| ``nested_html``            | both strings (default predicate: ``*.html``)    |
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from json_rule_diff.markup import canonicalize_html
from json_rule_diff.tree.builder import parse_json
from json_rule_diff.tree.nodes import TreeNode
from json_rule_diff.tree.render import render

if TYPE_CHECKING:
    from json_rule_diff.protocols import NormalizationEngine, Predicate, Transform

__all__ = [
    "additional_properties",
    "has_extension",
    "ignore_null",
    "negate",
    "nested_html",
    "nested_json",
    "regex",
    "wildcard",
]

logger = logging.getLogger(__name__)

Pair = tuple[TreeNode, TreeNode]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def has_extension(*extensions: str) -> Predicate:
    """Return a predicate matching property names that end in one of ``extensions``.

    The extension is the text from the last ``.`` of the name (``"a.json"`` ->
    ``".json"``), compared case-insensitively.  A name without a dot, or
    ending in a dot, has no extension.
    """
    wanted = frozenset(ext.lower() for ext in extensions)

    def predicate(expected: TreeNode, actual: TreeNode, name: str) -> bool:
        return _extension(name).lower() in wanted

    return predicate


def _extension(name: str) -> str:
    dot = name.rfind(".")
    if dot < 0 or dot == len(name) - 1 or "/" in name[dot:] or "\\" in name[dot:]:
        return ""
    return name[dot:]


# ---------------------------------------------------------------------------
# Scalar rules
# ---------------------------------------------------------------------------


def ignore_null(
    expected: TreeNode, actual: TreeNode, name: str, engine: NormalizationEngine
) -> Pair:
    """A null expectation accepts any actual value.

    Given the expectation ``{"a": null}``, ``{"a": "anything"}`` passes.
    """
    if expected.is_null and not actual.is_null:
        return expected, expected.clone()
    return expected, actual


def negate(
    expected: TreeNode, actual: TreeNode, name: str, engine: NormalizationEngine
) -> Pair:
    """``"!value"`` asserts the actual string is anything but ``value``.

    Given the expectation ``"!value"``, ``"a value"`` passes but ``"value"``
    fails.
    """
    if expected.is_string and actual.is_string:
        text = expected.as_string()
        if text.startswith("!") and text[1:] != actual.as_string():
            return actual.clone(), actual
    return expected, actual


def regex(
    expected: TreeNode, actual: TreeNode, name: str, engine: NormalizationEngine
) -> Pair:
    """``"/pattern/"`` asserts the actual string contains a match for ``pattern``.

    Given the expectation ``"/^a*$/"``, ``"a"`` passes but ``"b"`` fails.
    """
    if expected.is_string and actual.is_string:
        text = expected.as_string()
        if len(text) > 2 and text.startswith("/") and text.endswith("/"):
            pattern = engine.patterns.regex(text[1:-1])
            if pattern.search(actual.as_string()):
                return actual.clone(), actual
    return expected, actual


def wildcard(
    expected: TreeNode, actual: TreeNode, name: str, engine: NormalizationEngine
) -> Pair:
    """An expectation containing ``*`` is matched as an anchored wildcard.

    Given the expectation ``"a*"``, ``"aa"`` passes but ``"bb"`` fails.
    """
    if expected.is_string and actual.is_string:
        text = expected.as_string()
        if "*" in text and engine.patterns.wildcard(text).search(actual.as_string()):
            return actual.clone(), actual
    return expected, actual


# ---------------------------------------------------------------------------
# Object rules
# ---------------------------------------------------------------------------


def additional_properties(
    is_required_property: Callable[[str], bool] | None = None,
) -> Transform:
    """Return a transform that drops actual keys the expectation does not mention.

    Given the expectation ``{"a": 1}``, ``{"a": 1, "b": 1}`` passes.

    Args:
        is_required_property: Optional callback naming keys that must be kept
            (and so reported) even when expected lacks them.
    """

    def transform(
        expected: TreeNode, actual: TreeNode, name: str, engine: NormalizationEngine
    ) -> Pair:
        if not (expected.is_object and actual.is_object):
            return expected, actual

        pruned = actual.clone()
        for key in actual.members:
            if key in expected.members:
                continue
            if is_required_property is not None and is_required_property(key):
                continue
            del pruned.members[key]
        return expected, pruned

    return transform


# ---------------------------------------------------------------------------
# Nested document rules
# ---------------------------------------------------------------------------


def nested_json(nested_engine: NormalizationEngine | None = None) -> Transform:
    """Return a transform comparing two strings as JSON documents.

    Both strings are parsed, normalized with ``nested_engine`` (or the engine
    running the outer comparison) and rendered back to canonical text, so the
    outer diff shows the nested documents line by line.

    Given the expectation ``'{ "a": 1 }'``, ``'{"a":1}'`` passes but
    ``'{"a": 2}'`` fails.

    Raises:
        json.JSONDecodeError: From the transform, when either string is not JSON.
    """

    def transform(
        expected: TreeNode, actual: TreeNode, name: str, engine: NormalizationEngine
    ) -> Pair:
        if not (expected.is_string and actual.is_string):
            return expected, actual

        inner = nested_engine if nested_engine is not None else engine
        logger.debug("normalizing nested JSON in property %r", name)
        expected_norm, actual_norm = inner.normalize(
            parse_json(expected.as_string()), parse_json(actual.as_string())
        )
        return (
            TreeNode.string(render(expected_norm, inner.config)),
            TreeNode.string(render(actual_norm, inner.config)),
        )

    return transform


def nested_html(
    expected: TreeNode, actual: TreeNode, name: str, engine: NormalizationEngine
) -> Pair:
    """Compare two strings as HTML fragments, ignoring cosmetic differences.

    Given the expectation ``"<div>text</div>"``, ``"<div> text </div>"`` passes
    but ``"<div>text 2</div>"`` fails.
    """
    if not (expected.is_string and actual.is_string):
        return expected, actual

    logger.debug("canonicalizing nested HTML in property %r", name)
    return (
        TreeNode.string(canonicalize_html(expected.as_string())),
        TreeNode.string(canonicalize_html(actual.as_string())),
    )
