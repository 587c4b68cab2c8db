"""DiffResult and related types for line diff output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ChangeType", "DiffLine", "DiffResult"]


class ChangeType(StrEnum):
    """How a rendered line relates the expected text to the actual text."""

    UNCHANGED = auto()
    INSERTED = auto()
    DELETED = auto()


_MARKERS = {
    ChangeType.UNCHANGED: " ",
    ChangeType.INSERTED: "+",
    ChangeType.DELETED: "-",
}


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One line of a line diff.

    Attributes:
        change: Whether the line is shared, only in actual, or only in expected.
        text:   The line as rendered (taken from actual for unchanged lines).
    """

    change: ChangeType
    text: str

    @property
    def marker(self) -> str:
        return _MARKERS[self.change]


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Line diff of expected text against actual text.

    Attributes:
        lines: Every line of the merged view, in order.
    """

    lines: tuple[DiffLine, ...]

    @property
    def has_diff(self) -> bool:
        """True when at least one line was inserted or deleted."""
        return any(line.change != ChangeType.UNCHANGED for line in self.lines)

    def to_text(self) -> str:
        """Return the marked diff, or the empty string when nothing differs.

        Each line is prefixed with ``' '``, ``'+'`` or ``'-'`` and terminated
        by a newline.
        """
        if not self.has_diff:
            return ""
        return "".join(f"{line.marker}{line.text}\n" for line in self.lines)

    def __str__(self) -> str:
        return self.to_text()
