"""DiffConfig: immutable settings for rendering and line diffing.

DiffConfig is a frozen (immutable) dataclass.  It governs how normalized
trees are turned into text and how that text is compared; which values count
as equivalent is decided by the rule chain, not here.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiffConfig"]


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a JsonDiff engine.

    Attributes:
        indent: Spaces per nesting level in canonical text (>= 0).
        ignore_whitespace: When True, lines are compared with leading and
            trailing whitespace stripped.  Default True.
        omit_null_members: When True, object members whose value is null are
            left out of the canonical text.  Top-level nulls and null array
            elements are always rendered.  Default True.
        pattern_cache_size: Capacity of the compiled pattern cache used by the
            regex and wildcard rules (>= 1).
    """

    indent: int = 2
    ignore_whitespace: bool = True
    omit_null_members: bool = True
    pattern_cache_size: int = 256

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.pattern_cache_size < 1:
            msg = f"pattern_cache_size must be >= 1, got {self.pattern_cache_size}"
            raise ValueError(msg)
