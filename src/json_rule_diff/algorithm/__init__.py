"""algorithm subpackage: normalization walk, line differ and configuration.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_rule_diff.algorithm import diff_lines

    result = diff_lines("a\\nb", "a\\nc")
    result.to_text()  # " a\\n-b\\n+c\\n"
"""

from __future__ import annotations

from json_rule_diff.algorithm.config import DiffConfig
from json_rule_diff.algorithm.differ import diff_lines
from json_rule_diff.algorithm.normalizer import normalize_pair

__all__ = ["DiffConfig", "diff_lines", "normalize_pair"]
