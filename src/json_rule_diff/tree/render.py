"""Canonical text rendering of TreeNode trees.

The canonical text is indented JSON tuned for line diffing:

- keys keep their insertion order;
- object members whose value is null are omitted (configurable);
- non-ASCII characters are written verbatim;
- escaped line breaks inside strings are expanded into real line breaks and
  carriage returns are dropped, so multi-line strings diff line by line;
- an empty object spans two lines so its braces pair with neighbouring lines.

Structurally identical trees always render to identical text.
"""

from __future__ import annotations

import json
from typing import Any

from json_rule_diff.algorithm.config import DiffConfig
from json_rule_diff.tree.nodes import NodeType, TreeNode

__all__ = ["render"]

_DEFAULT_CONFIG = DiffConfig()


def render(node: TreeNode, config: DiffConfig | None = None) -> str:
    """Render a tree to canonical text.

    Args:
        node:   Root of the tree to render.
        config: Rendering settings.  Defaults to ``DiffConfig()``.

    Returns:
        The canonical text, without a trailing newline.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG
    text = json.dumps(
        _to_renderable(node, cfg.omit_null_members),
        indent=cfg.indent,
        ensure_ascii=False,
    )
    return text.replace("\\r", "").replace("\\n", "\n").replace("{}", "{\n}")


def _to_renderable(node: TreeNode, omit_null_members: bool) -> Any:
    if node.node_type == NodeType.OBJECT:
        return {
            key: _to_renderable(child, omit_null_members)
            for key, child in node.members.items()
            if not (omit_null_members and child.is_null)
        }
    if node.node_type == NodeType.ARRAY:
        return [_to_renderable(child, omit_null_members) for child in node.elements]
    return node.value
