"""Tree subpackage for the tree value model.

Re-exports the public API for the tree module:
- TreeNode: tagged variant over null, bool, number, string, object and array
- NodeType: StrEnum of the six value kinds
- TreeBuilder: converts JSON-compatible Python values to and from TreeNode trees
- parse_json: parses JSON text into a TreeNode tree
- render: canonical, diff-friendly text for a tree
"""

from json_rule_diff.tree.builder import TreeBuilder, parse_json
from json_rule_diff.tree.nodes import NodeType, TreeNode
from json_rule_diff.tree.render import render

__all__ = ["NodeType", "TreeBuilder", "TreeNode", "parse_json", "render"]
