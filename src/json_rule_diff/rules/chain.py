"""Rule and RuleChain: the ordered rewrite pipeline applied at every tree node.

A ``RuleChain`` is immutable.  Every ``use*`` method returns a *new* chain
with one more rule appended, so a chain built once can be shared freely
between engines, test suites and threads.

Example::

    from json_rule_diff.rules import RuleChain

    rules = (
        RuleChain()
        .use_ignore_null()
        .use_negate()
        .use_regex()
        .use_wildcard()
        .use_json()
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from json_rule_diff.rules import builtin

if TYPE_CHECKING:
    from json_rule_diff.protocols import NormalizationEngine, Predicate, Transform
    from json_rule_diff.tree.nodes import TreeNode

__all__ = ["Rule", "RuleChain"]


@dataclass(frozen=True, slots=True)
class Rule:
    """A transform guarded by an optional predicate.

    Attributes:
        transform: Rewrites the (expected, actual) pair.
        predicate: When set, the transform only runs for triples on which
            the predicate returns True.  When None, it always runs.
    """

    transform: Transform
    predicate: Predicate | None = None

    def apply(
        self,
        expected: TreeNode,
        actual: TreeNode,
        name: str,
        engine: NormalizationEngine,
    ) -> tuple[TreeNode, TreeNode]:
        if self.predicate is not None and not self.predicate(expected, actual, name):
            return expected, actual
        return self.transform(expected, actual, name, engine)


@dataclass(frozen=True, slots=True)
class RuleChain:
    """Ordered, immutable sequence of rules.

    Rules run in registration order at the same node; each one sees the pair
    produced by the one before it.

    Attributes:
        rules: The registered rules, first to last.
    """

    rules: tuple[Rule, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def apply(
        self,
        expected: TreeNode,
        actual: TreeNode,
        name: str,
        engine: NormalizationEngine,
    ) -> tuple[TreeNode, TreeNode]:
        """Run every rule in order on one (expected, actual, name) triple."""
        for rule in self.rules:
            expected, actual = rule.apply(expected, actual, name, engine)
        return expected, actual

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def use(
        self, transform: Transform, predicate: Predicate | None = None
    ) -> RuleChain:
        """Return a new chain with ``transform`` appended.

        Args:
            transform: Pair rewrite to run at each node.
            predicate: Optional guard; the transform is skipped where it is False.
        """
        return RuleChain((*self.rules, Rule(transform, predicate)))

    def use_ignore_null(self, predicate: Predicate | None = None) -> RuleChain:
        """Ignore the actual value wherever the expected value is null."""
        return self.use(builtin.ignore_null, predicate)

    def use_negate(self, predicate: Predicate | None = None) -> RuleChain:
        """Treat ``"!value"`` expectations as "anything but value"."""
        return self.use(builtin.negate, predicate)

    def use_regex(self, predicate: Predicate | None = None) -> RuleChain:
        """Treat ``"/pattern/"`` expectations as regular expressions."""
        return self.use(builtin.regex, predicate)

    def use_wildcard(self, predicate: Predicate | None = None) -> RuleChain:
        """Treat expectations containing ``*`` as anchored wildcards."""
        return self.use(builtin.wildcard, predicate)

    def use_additional_properties(
        self,
        predicate: Predicate | None = None,
        is_required_property: Callable[[str], bool] | None = None,
    ) -> RuleChain:
        """Ignore actual object keys that the expected object does not have.

        Args:
            predicate: Optional guard.
            is_required_property: Keys for which this returns True are still
                reported when they only appear in actual.
        """
        return self.use(builtin.additional_properties(is_required_property), predicate)

    def use_json(
        self,
        predicate: Predicate | None = None,
        engine: NormalizationEngine | None = None,
    ) -> RuleChain:
        """Compare string values as nested JSON documents.

        Args:
            predicate: Guard; defaults to property names ending in ``.json``.
            engine: Engine used for the nested documents; defaults to the
                engine running the outer comparison.
        """
        if predicate is None:
            predicate = builtin.has_extension(".json")
        return self.use(builtin.nested_json(engine), predicate)

    def use_html(self, predicate: Predicate | None = None) -> RuleChain:
        """Compare string values as HTML fragments.

        Args:
            predicate: Guard; defaults to property names ending in ``.html``
                or ``.htm``.
        """
        if predicate is None:
            predicate = builtin.has_extension(".html", ".htm")
        return self.use(builtin.nested_html, predicate)
