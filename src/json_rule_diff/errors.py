"""Exception hierarchy for json-rule-diff.

All library errors derive from ``JsonDiffError`` and additionally subclass the
built-in exception that best describes them, so callers can catch either.

- ``TypeMismatchError``         -> also a ``TypeError``
- ``UnsupportedConstructError`` -> also a ``ValueError``
- ``DiffMismatchError``         -> also an ``AssertionError`` (reads as a test failure)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_rule_diff.tree.nodes import NodeType

__all__ = [
    "DiffMismatchError",
    "JsonDiffError",
    "TypeMismatchError",
    "UnsupportedConstructError",
]


class JsonDiffError(Exception):
    """Base class for every error raised by json-rule-diff."""


class TypeMismatchError(JsonDiffError, TypeError):
    """A narrowing accessor was called on a node of a different kind."""

    def __init__(self, expected: NodeType | str, actual: NodeType) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} node, got {actual}")


class UnsupportedConstructError(JsonDiffError, ValueError):
    """The YAML converter met an event it cannot turn into a tree node."""

    def __init__(self, construct: str) -> None:
        self.construct = construct
        super().__init__(f"YAML node '{construct}' is not supported")


class DiffMismatchError(JsonDiffError, AssertionError):
    """Expected and actual values still differ after normalization.

    Attributes:
        summary: Optional caller-supplied description of the failed check.
        diff:    The marked, line-oriented diff text.
    """

    def __init__(self, summary: str | None, diff: str) -> None:
        self.summary = summary
        self.diff = diff
        message = f"{summary}\n{diff}" if summary else diff
        super().__init__(message)
