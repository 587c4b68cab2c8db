"""Tests for the LCS line differ.

Covers:
- Identical texts produce no diff
- Insertions, deletions and replacements, with deletions first in a block
- Whitespace-insensitive comparison (and the strict mode)
- Unchanged lines carry the actual text
- Empty inputs
- LCS table cell type sized to the input
"""

from __future__ import annotations

import numpy as np

from json_rule_diff.algorithm.differ import _lcs_table, diff_lines
from json_rule_diff.result import ChangeType


class TestNoDifference:
    def test_identical_texts(self) -> None:
        result = diff_lines("a\nb\nc", "a\nb\nc")
        assert not result.has_diff
        assert result.to_text() == ""
        assert [line.change for line in result.lines] == [ChangeType.UNCHANGED] * 3

    def test_both_empty(self) -> None:
        result = diff_lines("", "")
        assert result.lines == ()
        assert result.to_text() == ""


class TestChanges:
    def test_replacement(self) -> None:
        assert diff_lines("a\nb\nc", "a\nx\nc").to_text() == " a\n-b\n+x\n c\n"

    def test_append(self) -> None:
        assert diff_lines("a", "a\nb").to_text() == " a\n+b\n"

    def test_removal(self) -> None:
        assert diff_lines("a\nb", "b").to_text() == "-a\n b\n"

    def test_insert_into_empty(self) -> None:
        assert diff_lines("", "a").to_text() == "+a\n"

    def test_block_lists_deletions_before_insertions(self) -> None:
        text = diff_lines("a\nb\nc\nd", "a\nx\ny\nd").to_text()
        assert text == " a\n-b\n-c\n+x\n+y\n d\n"

    def test_shifted_sequence_keeps_common_lines(self) -> None:
        assert diff_lines("a\nb\nc", "b\nc\nd").to_text() == "-a\n b\n c\n+d\n"

    def test_repeated_lines(self) -> None:
        text = diff_lines("x\nx\nx", "x\nx").to_text()
        assert text.count("-x") == 1
        assert text.count(" x") == 2

    def test_change_types(self) -> None:
        result = diff_lines("a\nb", "a\nc")
        assert [line.change for line in result.lines] == [
            ChangeType.UNCHANGED,
            ChangeType.DELETED,
            ChangeType.INSERTED,
        ]


class TestWhitespace:
    def test_surrounding_whitespace_ignored_by_default(self) -> None:
        assert not diff_lines("a\n  b", "a\nb").has_diff

    def test_strict_mode_sees_whitespace(self) -> None:
        assert diff_lines("a\n  b", "a\nb", ignore_whitespace=False).has_diff

    def test_inner_whitespace_still_matters(self) -> None:
        assert diff_lines("a b", "a  b").has_diff

    def test_unchanged_lines_carry_actual_text(self) -> None:
        assert diff_lines("x\n a", "y\na").to_text() == "-x\n+y\n a\n"


class TestLcsTable:
    def test_lengths(self) -> None:
        table = _lcs_table(np.array([0, 1, 2]), np.array([1, 2, 3]))
        assert table[0, 0] == 2
        assert table.shape == (4, 4)

    def test_small_input_uses_one_byte_cells(self) -> None:
        table = _lcs_table(np.arange(10), np.arange(10))
        assert table.dtype == np.uint8
        assert table[0, 0] == 10

    def test_cell_type_holds_longest_match(self) -> None:
        keys = np.arange(255)
        table = _lcs_table(keys, keys)
        assert table.dtype == np.uint16
        assert table[0, 0] == 255

    def test_large_rewrite(self) -> None:
        old = "\n".join(f"old {i}" for i in range(300)) + "\nshared"
        new = "\n".join(f"new {i}" for i in range(300)) + "\nshared\ntail"
        result = diff_lines(old, new)
        changes = [line.change for line in result.lines]
        assert changes.count(ChangeType.DELETED) == 300
        assert changes.count(ChangeType.INSERTED) == 301
        assert changes[600] == ChangeType.UNCHANGED
