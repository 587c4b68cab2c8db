"""Recursive normalization of an (expected, actual) tree pair.

At every node the rule chain rewrites the pair first; only then does the
walk descend into matching containers.

- OBJECT/OBJECT: expected keys come first, in expected order.  Keys present on
  both sides are normalized recursively under their own name; keys missing
  from actual keep the raw expected value.  Keys only in actual are appended
  afterwards, in actual order, untouched.
- ARRAY/ARRAY: elements are paired by index up to the shorter length and
  normalized with an empty name.  Trailing elements of the longer array are
  copied as they are, without running any rule, so a length mismatch always
  shows up in the text diff.
- Anything else (scalars, or containers of different kinds) is returned as
  rewritten by the rules.

The inputs are never mutated.  Every node in the returned trees is a fresh
copy, and the two returned trees share no structure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_rule_diff.tree.nodes import NodeType, TreeNode

if TYPE_CHECKING:
    from json_rule_diff.protocols import NormalizationEngine
    from json_rule_diff.rules.chain import RuleChain

__all__ = ["normalize_pair"]


def normalize_pair(
    expected: TreeNode,
    actual: TreeNode,
    rules: RuleChain,
    engine: NormalizationEngine,
    name: str = "",
) -> tuple[TreeNode, TreeNode]:
    """Normalize an expected/actual pair under a rule chain.

    Args:
        expected: Expected tree (not modified).
        actual:   Actual tree (not modified).
        rules:    Rules applied, in order, at every visited node.
        engine:   Engine handed to each rule transform.
        name:     Property name of this pair within its parent object, or
                  ``""`` for the root and for array elements.

    Returns:
        ``(normalized_expected, normalized_actual)``.
    """
    expected, actual = rules.apply(expected, actual, name, engine)

    if expected.node_type == NodeType.OBJECT and actual.node_type == NodeType.OBJECT:
        return _normalize_objects(expected, actual, rules, engine)

    if expected.node_type == NodeType.ARRAY and actual.node_type == NodeType.ARRAY:
        return _normalize_arrays(expected, actual, rules, engine)

    return expected.clone(), actual.clone()


def _normalize_objects(
    expected: TreeNode,
    actual: TreeNode,
    rules: RuleChain,
    engine: NormalizationEngine,
) -> tuple[TreeNode, TreeNode]:
    expected_members: dict[str, TreeNode] = {}
    actual_members: dict[str, TreeNode] = {}

    for key, expected_value in expected.members.items():
        if key in actual.members:
            expected_members[key], actual_members[key] = normalize_pair(
                expected_value, actual.members[key], rules, engine, key
            )
        else:
            expected_members[key] = expected_value.clone()

    for key, actual_value in actual.members.items():
        if key not in expected.members:
            actual_members[key] = actual_value.clone()

    return TreeNode.object_of(expected_members), TreeNode.object_of(actual_members)


def _normalize_arrays(
    expected: TreeNode,
    actual: TreeNode,
    rules: RuleChain,
    engine: NormalizationEngine,
) -> tuple[TreeNode, TreeNode]:
    expected_result = expected.clone()
    actual_result = actual.clone()

    for i in range(min(len(expected.elements), len(actual.elements))):
        expected_result.elements[i], actual_result.elements[i] = normalize_pair(
            expected.elements[i], actual.elements[i], rules, engine
        )

    return expected_result, actual_result
