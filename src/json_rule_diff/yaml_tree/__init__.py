"""YAML subpackage: YAML event stream to TreeNode conversion.

- convert / YamlTreeConverter: build a tree from the first YAML document
- resolve_plain_scalar: YAML 1.1 typing of unquoted scalars
"""

from json_rule_diff.yaml_tree.converter import YamlTreeConverter, convert
from json_rule_diff.yaml_tree.resolver import resolve_plain_scalar

__all__ = ["YamlTreeConverter", "convert", "resolve_plain_scalar"]
