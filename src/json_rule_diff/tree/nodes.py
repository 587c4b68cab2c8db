"""TreeNode dataclass and NodeType StrEnum for the tree value model.

A ``TreeNode`` is a tagged variant over the six JSON value kinds.  Scalars keep
their Python value in ``value``; objects keep an insertion-ordered
``members`` dict; arrays keep an ``elements`` list.  Only the field matching
the node's tag is meaningful.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_rule_diff.errors import TypeMismatchError

__all__ = ["NodeType", "TreeNode"]


class NodeType(StrEnum):
    """Enumeration of the six value kinds in a tree.

    StrEnum values are the lowercased member names:
    - NULL   -> "null"
    - BOOL   -> "bool"
    - NUMBER -> "number" : int or float, the Python type is preserved
    - STRING -> "string"
    - OBJECT -> "object" : ordered mapping of unique keys to nodes
    - ARRAY  -> "array"  : ordered sequence of nodes
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()


_SCALAR_TYPES = frozenset(
    {NodeType.NULL, NodeType.BOOL, NodeType.NUMBER, NodeType.STRING}
)


@dataclass(slots=True, eq=False)
class TreeNode:
    """A node in the tree value model.

    Attributes:
        node_type: Which kind of value this node holds (see NodeType).
        value:     The Python scalar for NULL/BOOL/NUMBER/STRING nodes
                   (``None``, ``bool``, ``int``/``float``, ``str``).
        members:   Key -> child mapping for OBJECT nodes, in insertion order.
        elements:  Children of ARRAY nodes, in order.

    Equality is structural: two nodes are equal when they have the same kind
    and equal content.  Numbers only compare equal when both are ints or both
    are floats, so ``1`` and ``1.0`` differ just as they render differently.
    NaN equals NaN.
    """

    node_type: NodeType
    value: Any = None
    members: dict[str, TreeNode] = field(default_factory=dict)
    elements: list[TreeNode] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def null(cls) -> TreeNode:
        return cls(NodeType.NULL)

    @classmethod
    def boolean(cls, value: bool) -> TreeNode:
        return cls(NodeType.BOOL, value=value)

    @classmethod
    def number(cls, value: int | float) -> TreeNode:
        return cls(NodeType.NUMBER, value=value)

    @classmethod
    def string(cls, value: str) -> TreeNode:
        return cls(NodeType.STRING, value=value)

    @classmethod
    def object_of(cls, members: dict[str, TreeNode] | None = None) -> TreeNode:
        return cls(NodeType.OBJECT, members=dict(members) if members else {})

    @classmethod
    def array_of(cls, elements: list[TreeNode] | None = None) -> TreeNode:
        return cls(NodeType.ARRAY, elements=list(elements) if elements else [])

    # ------------------------------------------------------------------
    # Kind checks
    # ------------------------------------------------------------------

    @property
    def is_null(self) -> bool:
        return self.node_type == NodeType.NULL

    @property
    def is_string(self) -> bool:
        return self.node_type == NodeType.STRING

    @property
    def is_object(self) -> bool:
        return self.node_type == NodeType.OBJECT

    @property
    def is_array(self) -> bool:
        return self.node_type == NodeType.ARRAY

    @property
    def is_scalar(self) -> bool:
        return self.node_type in _SCALAR_TYPES

    # ------------------------------------------------------------------
    # Narrowing accessors
    # ------------------------------------------------------------------

    def as_object(self) -> dict[str, TreeNode]:
        """Return the members of an OBJECT node.

        Raises:
            TypeMismatchError: If this node is not an OBJECT.
        """
        if self.node_type != NodeType.OBJECT:
            raise TypeMismatchError(NodeType.OBJECT, self.node_type)
        return self.members

    def as_array(self) -> list[TreeNode]:
        """Return the elements of an ARRAY node.

        Raises:
            TypeMismatchError: If this node is not an ARRAY.
        """
        if self.node_type != NodeType.ARRAY:
            raise TypeMismatchError(NodeType.ARRAY, self.node_type)
        return self.elements

    def as_scalar(self) -> Any:
        """Return the Python value of a scalar node.

        Raises:
            TypeMismatchError: If this node is an OBJECT or ARRAY.
        """
        if self.node_type not in _SCALAR_TYPES:
            raise TypeMismatchError("scalar", self.node_type)
        return self.value

    def as_string(self) -> str:
        """Return the text of a STRING node.

        Raises:
            TypeMismatchError: If this node is not a STRING.
        """
        if self.node_type != NodeType.STRING:
            raise TypeMismatchError(NodeType.STRING, self.node_type)
        return str(self.value)

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    def clone(self) -> TreeNode:
        """Return a structurally identical copy sharing no containers with self."""
        if self.node_type == NodeType.OBJECT:
            return TreeNode(
                NodeType.OBJECT,
                members={key: child.clone() for key, child in self.members.items()},
            )
        if self.node_type == NodeType.ARRAY:
            return TreeNode(
                NodeType.ARRAY, elements=[child.clone() for child in self.elements]
            )
        return TreeNode(self.node_type, value=self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        if self.node_type != other.node_type:
            return False
        if self.node_type == NodeType.OBJECT:
            # Key order is not part of structural equality
            return self.members.keys() == other.members.keys() and all(
                child == other.members[key] for key, child in self.members.items()
            )
        if self.node_type == NodeType.ARRAY:
            return len(self.elements) == len(other.elements) and all(
                a == b for a, b in zip(self.elements, other.elements, strict=True)
            )
        if self.node_type == NodeType.NUMBER:
            return _numbers_equal(self.value, other.value)
        return bool(self.value == other.value)


def _numbers_equal(a: int | float, b: int | float) -> bool:
    if isinstance(a, float) != isinstance(b, float):
        return False
    if isinstance(a, float) and math.isnan(a):
        return isinstance(b, float) and math.isnan(b)
    return a == b
