"""Structural protocols for the rule chain extension point.

Rules are plain callables; users plug in their own without inheriting from
any base class.  Any function with a conformant signature satisfies these
protocols.

Example::

    from json_rule_diff.protocols import Predicate, Transform

    def is_timestamp(expected, actual, name):
        return name.endswith("_at")

    def accept_any(expected, actual, name, engine):
        return actual, actual

    chain = RuleChain().use(accept_any, predicate=is_timestamp)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_rule_diff.algorithm.config import DiffConfig
    from json_rule_diff.cache import PatternCache
    from json_rule_diff.tree.nodes import TreeNode

__all__ = ["NormalizationEngine", "Predicate", "Transform"]


class Predicate(Protocol):
    """Decides whether a rule applies to an (expected, actual, name) triple.

    ``name`` is the property name when the pair are members of an object,
    otherwise the empty string.
    """

    def __call__(self, expected: TreeNode, actual: TreeNode, name: str) -> bool: ...


class Transform(Protocol):
    """Rewrites an (expected, actual) pair.

    Must return a new pair and must not mutate either input node or anything
    reachable from them.  ``engine`` is the engine running the normalization,
    available for rules that recurse into nested documents.
    """

    def __call__(
        self,
        expected: TreeNode,
        actual: TreeNode,
        name: str,
        engine: NormalizationEngine,
    ) -> tuple[TreeNode, TreeNode]: ...


@runtime_checkable
class NormalizationEngine(Protocol):
    """Structural protocol for the engine handed to every Transform.

    The engine must expose:
    - ``normalize(expected, actual)`` returning a normalized pair.
    - ``config``: the engine's DiffConfig (used to render nested documents).
    - ``patterns``: the engine's PatternCache.
    """

    config: DiffConfig
    patterns: PatternCache

    def normalize(
        self, expected: TreeNode, actual: TreeNode
    ) -> tuple[TreeNode, TreeNode]: ...
