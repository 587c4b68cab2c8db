"""JsonDiff: engine that wires normalization, rendering and line diffing.

This is the central wiring layer between the rule chain and the public API.

Architecture:
- ``normalize()`` converts both inputs to trees (plain Python values go
  through ``TreeBuilder``) and walks them with ``normalize_pair`` under the
  engine's rule chain.  The caller's values are never mutated.
- ``diff_lines()`` renders both normalized trees to canonical text and runs
  the line differ, returning the structured ``DiffResult``.
- ``diff()`` flattens that into marked text (empty string means a match) and
  ``verify()`` raises ``DiffMismatchError`` when the text is not empty.

A JsonDiff holds only its immutable rule chain, its frozen config and a
thread-safe pattern cache, so one instance can serve many comparisons,
including concurrent ones.
"""

from __future__ import annotations

import logging
from typing import Any

from json_rule_diff.algorithm.config import DiffConfig
from json_rule_diff.algorithm.differ import diff_lines
from json_rule_diff.algorithm.normalizer import normalize_pair
from json_rule_diff.cache import PatternCache
from json_rule_diff.errors import DiffMismatchError
from json_rule_diff.result import DiffResult
from json_rule_diff.rules.chain import RuleChain
from json_rule_diff.tree.builder import TreeBuilder
from json_rule_diff.tree.nodes import TreeNode
from json_rule_diff.tree.render import render

__all__ = ["JsonDiff"]

logger = logging.getLogger(__name__)


class JsonDiff:
    """Semantic comparison of an expected value against an actual value.

    Example::

        from json_rule_diff import JsonDiff, RuleChain

        engine = JsonDiff(RuleChain().use_ignore_null().use_wildcard())
        engine.diff({"id": None, "name": "a*"}, {"id": 7, "name": "abc"})  # ""
        engine.verify({"name": "x"}, {"name": "y"}, "name check")
        # raises DiffMismatchError
    """

    def __init__(
        self,
        rules: RuleChain | None = None,
        config: DiffConfig | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            rules:  Rules applied at every node.  Defaults to an empty chain,
                which makes the comparison purely structural.
            config: Rendering and diffing settings.  Defaults to ``DiffConfig()``.
        """
        self.rules: RuleChain = rules if rules is not None else RuleChain()
        self.config: DiffConfig = config if config is not None else DiffConfig()
        self.patterns = PatternCache(max_size=self.config.pattern_cache_size)
        self._builder = TreeBuilder()

    def __repr__(self) -> str:
        return f"JsonDiff(rules={len(self.rules)}, config={self.config!r})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def normalize(self, expected: Any, actual: Any) -> tuple[TreeNode, TreeNode]:
        """Normalize an expected/actual pair under this engine's rules.

        Args:
            expected: Expected TreeNode or JSON-compatible value.
            actual:   Actual TreeNode or JSON-compatible value.

        Returns:
            ``(normalized_expected, normalized_actual)`` as fresh trees.
        """
        return normalize_pair(
            self._builder.build(expected),
            self._builder.build(actual),
            self.rules,
            self,
        )

    def diff_lines(self, expected: Any, actual: Any) -> DiffResult:
        """Return the line diff of the normalized, rendered pair."""
        expected_norm, actual_norm = self.normalize(expected, actual)
        expected_text = render(expected_norm, self.config)
        actual_text = render(actual_norm, self.config)

        result = diff_lines(
            expected_text, actual_text, ignore_whitespace=self.config.ignore_whitespace
        )
        logger.debug(
            "diffed %d expected / %d actual lines, has_diff=%s",
            expected_text.count("\n") + 1,
            actual_text.count("\n") + 1,
            result.has_diff,
        )
        return result

    def diff(self, expected: Any, actual: Any) -> str:
        """Return the marked diff text.

        Returns:
            An empty string if there is no difference; otherwise every line of
            the merged view prefixed with ``' '``, ``'+'`` or ``'-'``.
        """
        return self.diff_lines(expected, actual).to_text()

    def verify(self, expected: Any, actual: Any, summary: str | None = None) -> None:
        """Assert that actual matches expected under this engine's rules.

        Raises:
            DiffMismatchError: Carrying ``summary`` and the diff text, when the
                normalized values differ.
        """
        text = self.diff(expected, actual)
        if text:
            raise DiffMismatchError(summary, text)
