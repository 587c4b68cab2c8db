"""Line differ: longest-common-subsequence diff of two texts.

Lines are compared by content (optionally ignoring leading and trailing
whitespace).  The common prefix and suffix are peeled off first; the LCS
table is only built for the differing middle section.  That table is
quadratic in the size of the middle section (about 128 MB for 8000 fully
differing lines on each side), which bounds how large a rewrite can be
diffed in memory.

The LCS table is filled one row at a time with numpy.  For row ``i``::

    c[j]      = max(L[i+1][j], L[i+1][j+1] + 1 if a[i] == b[j] else 0)
    L[i][j]   = max(c[j:])

which is the usual recurrence ``max(L[i+1][j], L[i][j+1], match)`` unrolled
into a reversed running maximum.
"""

from __future__ import annotations

import numpy as np

from json_rule_diff.result import ChangeType, DiffLine, DiffResult

__all__ = ["diff_lines"]


def diff_lines(
    expected_text: str,
    actual_text: str,
    ignore_whitespace: bool = True,
) -> DiffResult:
    """Diff two texts line by line.

    Within each changed block the deleted (expected-only) lines come first,
    followed by the inserted (actual-only) lines.  Unchanged lines carry the
    actual text.

    Args:
        expected_text:     The reference text.
        actual_text:       The text under test.
        ignore_whitespace: Compare lines with surrounding whitespace stripped.

    Returns:
        A DiffResult covering every line of both texts.
    """
    old = expected_text.splitlines()
    new = actual_text.splitlines()

    old_keys, new_keys = _line_ids(old, new, ignore_whitespace)

    # Peel off the common prefix and suffix
    start = 0
    limit = min(len(old), len(new))
    while start < limit and old_keys[start] == new_keys[start]:
        start += 1
    end_old, end_new = len(old), len(new)
    while (
        end_old > start
        and end_new > start
        and old_keys[end_old - 1] == new_keys[end_new - 1]
    ):
        end_old -= 1
        end_new -= 1

    lines = [DiffLine(ChangeType.UNCHANGED, text) for text in new[:start]]
    lines.extend(
        _diff_middle(
            old[start:end_old],
            new[start:end_new],
            old_keys[start:end_old],
            new_keys[start:end_new],
        )
    )
    lines.extend(DiffLine(ChangeType.UNCHANGED, text) for text in new[end_new:])
    return DiffResult(tuple(lines))


def _line_ids(
    old: list[str], new: list[str], ignore_whitespace: bool
) -> tuple[np.ndarray, np.ndarray]:
    """Map each distinct (possibly stripped) line to a small integer id."""
    ids: dict[str, int] = {}

    def encode(lines: list[str]) -> np.ndarray:
        keys = [line.strip() if ignore_whitespace else line for line in lines]
        codes = [ids.setdefault(key, len(ids)) for key in keys]
        return np.array(codes, dtype=np.int64)

    return encode(old), encode(new)


def _lcs_table(old_keys: np.ndarray, new_keys: np.ndarray) -> np.ndarray:
    """Return L where L[i, j] is the LCS length of old[i:] and new[j:].

    The table is dense, so memory is (m + 1) * (n + 1) cells.  Cells use the
    smallest unsigned type that holds min(m, n) + 1: one byte each below 255
    differing lines per side, two bytes below 65535.
    """
    m, n = len(old_keys), len(new_keys)
    dtype = np.min_scalar_type(min(m, n) + 1)
    table = np.zeros((m + 1, n + 1), dtype=dtype)
    for i in range(m - 1, -1, -1):
        below = table[i + 1]
        match = np.zeros(n + 1, dtype=dtype)
        match[:n] = np.where(new_keys == old_keys[i], below[1:] + 1, 0)
        candidates = np.maximum(below, match)
        table[i] = np.maximum.accumulate(candidates[::-1])[::-1]
    return table


def _diff_middle(
    old: list[str],
    new: list[str],
    old_keys: np.ndarray,
    new_keys: np.ndarray,
) -> list[DiffLine]:
    if not old:
        return [DiffLine(ChangeType.INSERTED, text) for text in new]
    if not new:
        return [DiffLine(ChangeType.DELETED, text) for text in old]

    table = _lcs_table(old_keys, new_keys)
    result: list[DiffLine] = []
    deleted: list[DiffLine] = []
    inserted: list[DiffLine] = []

    def flush() -> None:
        result.extend(deleted)
        result.extend(inserted)
        deleted.clear()
        inserted.clear()

    i = j = 0
    m, n = len(old), len(new)
    while i < m and j < n:
        if old_keys[i] == new_keys[j]:
            flush()
            result.append(DiffLine(ChangeType.UNCHANGED, new[j]))
            i += 1
            j += 1
        elif table[i + 1, j] >= table[i, j + 1]:
            deleted.append(DiffLine(ChangeType.DELETED, old[i]))
            i += 1
        else:
            inserted.append(DiffLine(ChangeType.INSERTED, new[j]))
            j += 1

    deleted.extend(DiffLine(ChangeType.DELETED, text) for text in old[i:])
    inserted.extend(DiffLine(ChangeType.INSERTED, text) for text in new[j:])
    flush()
    return result
