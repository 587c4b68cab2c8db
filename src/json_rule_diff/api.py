"""Public API functions for json-rule-diff.

Module-level shortcuts over ``JsonDiff``, the YAML converter and the HTML
canonicalizer.  Each comparison call creates a fresh ``JsonDiff`` so calls
never share state.
"""

from __future__ import annotations

from typing import IO, Any

from json_rule_diff.algorithm.config import DiffConfig
from json_rule_diff.comparator import JsonDiff
from json_rule_diff.markup import canonicalize_html
from json_rule_diff.rules.chain import RuleChain
from json_rule_diff.tree.nodes import TreeNode
from json_rule_diff.yaml_tree.converter import (
    DuplicateKeyCallback,
    NodeBuiltHook,
    convert,
)

__all__ = ["canonicalize_html", "diff", "load_yaml", "normalize", "verify"]


def diff(
    expected: Any,
    actual: Any,
    rules: RuleChain | None = None,
    config: DiffConfig | None = None,
) -> str:
    """Return the marked diff of two values, or ``""`` when they match.

    Args:
        expected: Expected TreeNode or JSON-compatible value.
        actual:   Actual TreeNode or JSON-compatible value.
        rules:    Rule chain to normalize with.  Defaults to no rules.
        config:   Rendering and diffing settings.  Defaults to ``DiffConfig()``.
    """
    return JsonDiff(rules, config).diff(expected, actual)


def verify(
    expected: Any,
    actual: Any,
    rules: RuleChain | None = None,
    summary: str | None = None,
    config: DiffConfig | None = None,
) -> None:
    """Raise ``DiffMismatchError`` unless the two values match.

    Args:
        expected: Expected TreeNode or JSON-compatible value.
        actual:   Actual TreeNode or JSON-compatible value.
        rules:    Rule chain to normalize with.  Defaults to no rules.
        summary:  Description carried by the raised error.
        config:   Rendering and diffing settings.  Defaults to ``DiffConfig()``.
    """
    JsonDiff(rules, config).verify(expected, actual, summary)


def normalize(
    expected: Any,
    actual: Any,
    rules: RuleChain | None = None,
) -> tuple[TreeNode, TreeNode]:
    """Return the normalized (expected, actual) pair without diffing it."""
    return JsonDiff(rules).normalize(expected, actual)


def load_yaml(
    stream: str | IO[str],
    on_duplicate_key: DuplicateKeyCallback | None = None,
    on_node_built: NodeBuiltHook | None = None,
) -> TreeNode | None:
    """Convert the first YAML document in ``stream`` to a TreeNode tree.

    Returns None for a stream without documents.
    """
    return convert(stream, on_duplicate_key, on_node_built)
