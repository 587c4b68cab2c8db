"""Rules subpackage: the rule chain and its built-in rules.

- RuleChain / Rule: immutable, ordered (predicate, transform) pipeline
- builtin: the stock transforms and the ``has_extension`` predicate
"""

from json_rule_diff.rules.builtin import has_extension
from json_rule_diff.rules.chain import Rule, RuleChain

__all__ = ["Rule", "RuleChain", "has_extension"]
