"""YAML 1.1 resolution of plain scalars into typed tree nodes.

Only *plain* (unquoted, non-block) scalars are resolved; every other style
is always a string.  Candidates are tried in this order, first match wins:

    ""  ~  null (any case)                       -> null
    true | false (any case)                      -> bool
    [-+]? (0 | [1-9][0-9]*)                      -> int (base 10)
    [-+]? ([0-9]+ . [0-9]* | . [0-9]+) ([eE][-+]?[0-9]+)?
    [-+]? [0-9]+ [eE][-+]?[0-9]+                 -> float
    .nan (any case)                              -> float NaN
    .inf | +.inf (any case)                      -> float +Infinity
    -.inf (any case)                             -> float -Infinity
    anything else                                -> string, verbatim

Integers with a leading zero (``08``, ``0123``) match neither the int nor the
float grammar and stay strings.  Spellings such as ``nan`` or ``inf`` that
Python's ``float()`` would accept are not YAML floats and also stay strings.

Integers are unbounded: a plain ``123456789012345678901234567890`` stays an exact
``int`` rather than overflowing to a float, so it renders with every digit.
"""

from __future__ import annotations

import math
import re

from json_rule_diff.tree.nodes import TreeNode

__all__ = ["resolve_plain_scalar"]

_INT = re.compile(r"[-+]?(?:0|[1-9][0-9]*)")

_FLOAT = re.compile(
    r"[-+]?(?:(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|[0-9]+[eE][-+]?[0-9]+)"
)

_NULLS = frozenset({"", "~", "null"})


def resolve_plain_scalar(value: str) -> TreeNode:
    """Resolve the text of a plain YAML scalar to a typed TreeNode."""
    lowered = value.lower()

    if lowered in _NULLS:
        return TreeNode.null()
    if lowered == "true":
        return TreeNode.boolean(True)
    if lowered == "false":
        return TreeNode.boolean(False)
    if _INT.fullmatch(value):
        return TreeNode.number(int(value))
    if _FLOAT.fullmatch(value):
        number = float(value)
        if not math.isinf(number):
            return TreeNode.number(number)
    if lowered == ".nan":
        return TreeNode.number(math.nan)
    if lowered in (".inf", "+.inf"):
        return TreeNode.number(math.inf)
    if lowered == "-.inf":
        return TreeNode.number(-math.inf)
    return TreeNode.string(value)
