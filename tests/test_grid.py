"""Tests for grid chunking, row padding and rendering."""

import math

import pytest

from scoreboard.output.grid import SEPARATOR, chunk_boxes, pad_row, print_grid, render_grid


def _box(name, height, width=4):
    return [f"{name}{i}".ljust(width) for i in range(height)]


class TestChunkBoxes:
    @pytest.mark.parametrize("length,per_row", [(0, 3), (1, 3), (3, 3), (7, 3), (8, 2), (5, 1), (2, 5)])
    def test_row_count_and_last_row_size(self, length, per_row):
        boxes = [_box(str(i), 2) for i in range(length)]
        rows = chunk_boxes(boxes, per_row)
        assert len(rows) == math.ceil(length / per_row)
        if rows:
            expected_last = length % per_row or per_row
            assert len(rows[-1]) == expected_last
            assert all(len(row) == per_row for row in rows[:-1])

    def test_preserves_order(self):
        boxes = [_box(c, 1) for c in "abcde"]
        rows = chunk_boxes(boxes, 2)
        assert [box for row in rows for box in row] == boxes

    @pytest.mark.parametrize("per_row", [0, -1])
    def test_rejects_non_positive_row_size(self, per_row):
        with pytest.raises(ValueError):
            chunk_boxes([_box("a", 1)], per_row)


class TestPadRow:
    def test_pads_to_tallest_box(self):
        row = [_box("a", 2), _box("b", 5), _box("c", 3)]
        padded = pad_row(row)
        assert [len(box) for box in padded] == [5, 5, 5]

    def test_original_lines_kept_and_filler_appended(self):
        row = [_box("a", 1), _box("b", 3)]
        padded = pad_row(row, filler="....")
        assert padded[0] == ["a0  ", "....", "...."]
        assert padded[1] == row[1]

    def test_default_filler_matches_widest_line(self):
        padded = pad_row([["ab"], ["abcdef", "x"]])
        assert padded[0] == ["ab", "      "]

    def test_does_not_mutate_input(self):
        box = _box("a", 1)
        pad_row([box, _box("b", 2)])
        assert len(box) == 1

    def test_empty_row(self):
        assert pad_row([]) == []


class TestRenderGrid:
    def test_lines_joined_with_separator(self):
        boxes = [_box("a", 2), _box("b", 2), _box("c", 2)]
        lines = list(render_grid(boxes, 2, filler="    "))
        assert lines == [
            "a0  " + SEPARATOR + "b0  ",
            "a1  " + SEPARATOR + "b1  ",
            "",
            "c0  ",
            "c1  ",
            "",
        ]

    def test_ragged_row_is_padded(self):
        boxes = [_box("a", 1), _box("b", 3)]
        lines = list(render_grid(boxes, 2, filler="----"))
        assert lines[:3] == [
            "a0  " + SEPARATOR + "b0  ",
            "----" + SEPARATOR + "b1  ",
            "----" + SEPARATOR + "b2  ",
        ]
        assert lines[3] == ""

    def test_empty_input_renders_nothing(self):
        assert list(render_grid([], 3)) == []

    def test_print_grid_sends_every_line(self):
        out = []
        print_grid([_box("a", 2)], 3, out.append)
        assert out == ["a0  ", "a1  ", ""]
