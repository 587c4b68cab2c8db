"""TreeBuilder: converts JSON-compatible Python values to and from TreeNode trees.

Uses recursive dispatch to convert dicts, lists, and scalar values into a
tree of TreeNode objects.  Object key order and the int/float distinction
of numbers are preserved in both directions.

``parse_json`` parses JSON text straight into a tree; it is what the nested
JSON rule uses to read the documents embedded in string values.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from json_rule_diff.tree.nodes import NodeType, TreeNode

__all__ = ["JsonValue", "TreeBuilder", "parse_json"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any JSON-compatible Python value into a TreeNode tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    TreeNode inputs are passed through untouched, so callers may mix plain
    values and prebuilt trees.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"name": "John", "tags": ["a"]})
        builder.to_python(tree)  # {"name": "John", "tags": ["a"]}
    """

    def build(self, value: JsonValue | TreeNode) -> TreeNode:
        """Convert a JSON value to a TreeNode tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool,
                None), or an existing TreeNode.

        Returns:
            A TreeNode tree rooted at the appropriate node type.

        Raises:
            TypeError: If value (or anything nested in it) is not a valid
                JSON type, or an object key is not a string.
        """
        if isinstance(value, TreeNode):
            return value

        # CRITICAL: bool MUST be checked before int; bool subclasses int in Python
        if isinstance(value, bool):
            return TreeNode.boolean(value)

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return TreeNode.array_of([self.build(item) for item in value])

        if isinstance(value, (int, float)):
            return TreeNode.number(value)

        if isinstance(value, str):
            return TreeNode.string(value)

        if value is None:
            return TreeNode.null()

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: dict[Any, Any]) -> TreeNode:
        members: dict[str, TreeNode] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key)!r}")
            members[key] = self.build(val)
        return TreeNode.object_of(members)

    def to_python(self, node: TreeNode) -> Any:
        """Convert a TreeNode tree back into plain Python values.

        Args:
            node: Root of the tree to convert.

        Returns:
            dict / list / str / int / float / bool / None mirroring the tree.
        """
        if node.node_type == NodeType.OBJECT:
            return {key: self.to_python(child) for key, child in node.members.items()}
        if node.node_type == NodeType.ARRAY:
            return [self.to_python(child) for child in node.elements]
        return node.value


# Module-level builder (stateless, safe to share)
_builder = TreeBuilder()


def parse_json(text: str) -> TreeNode:
    """Parse JSON text into a TreeNode tree.

    Integers stay ints and fractional/exponent literals become floats.  When a
    key repeats within one object the last value wins.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
    """
    return _builder.build(json.loads(text))
