"""json-rule-diff - rule-driven semantic diffs of JSON and YAML trees."""

from __future__ import annotations

from json_rule_diff.algorithm.config import DiffConfig
from json_rule_diff.api import (
    canonicalize_html,
    diff,
    load_yaml,
    normalize,
    verify,
)
from json_rule_diff.comparator import JsonDiff
from json_rule_diff.errors import (
    DiffMismatchError,
    JsonDiffError,
    TypeMismatchError,
    UnsupportedConstructError,
)
from json_rule_diff.result import ChangeType, DiffLine, DiffResult
from json_rule_diff.rules.chain import Rule, RuleChain
from json_rule_diff.tree.nodes import NodeType, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChangeType",
    "DiffConfig",
    "DiffLine",
    "DiffMismatchError",
    "DiffResult",
    "JsonDiff",
    "JsonDiffError",
    "NodeType",
    "Rule",
    "RuleChain",
    "TreeNode",
    "TypeMismatchError",
    "UnsupportedConstructError",
    "canonicalize_html",
    "diff",
    "load_yaml",
    "normalize",
    "verify",
]
