"""
Grid Layout

USE: Prints game boxes side by side, N per row
HOW IT WORKS:
  - chunk_boxes() splits the boxes into consecutive rows of N (last may be short)
  - pad_row() appends filler lines so every box in a row is as tall as the
    tallest one
  - render_grid() zips the padded boxes line by line, joined by SEPARATOR, with
    a blank line after each row
"""

import logging
from typing import Callable, Iterator, List, Optional, Sequence

from .text_utils import visible_width

logger = logging.getLogger(__name__)

SEPARATOR = "  "

Box = List[str]


def chunk_boxes(boxes: Sequence[Box], per_row: int) -> List[List[Box]]:
    """Split `boxes` into rows of at most `per_row`."""
    if per_row < 1:
        raise ValueError(f"per_row must be at least 1, got {per_row}")
    return [list(boxes[i:i + per_row]) for i in range(0, len(boxes), per_row)]


def pad_row(row: Sequence[Box], filler: Optional[str] = None) -> List[Box]:
    """
    Pad every box in `row` to the height of the tallest one.

    Args:
        row: Boxes in one grid row
        filler: Line used for padding; defaults to spaces as wide as the
            widest line in the row

    Returns:
        New list of boxes, all with the same line count
    """
    if not row:
        return []
    height = max(len(box) for box in row)
    if filler is None:
        width = max((visible_width(line) for box in row for line in box), default=0)
        filler = ' ' * width
    return [list(box) + [filler] * (height - len(box)) for box in row]


def render_grid(boxes: Sequence[Box], per_row: int, filler: Optional[str] = None) -> Iterator[str]:
    """
    Yield the output lines of the grid.

    Each row contributes one line per box line followed by an empty line.
    """
    rows = chunk_boxes(boxes, per_row)
    logger.debug(f"Rendering {len(boxes)} boxes in {len(rows)} rows of {per_row}")
    for row in rows:
        padded = pad_row(row, filler)
        for lines in zip(*padded):
            yield SEPARATOR.join(lines)
        yield ""


def print_grid(boxes: Sequence[Box], per_row: int, echo: Callable[[str], None], filler: Optional[str] = None):
    """Send every grid line to `echo`."""
    for line in render_grid(boxes, per_row, filler):
        echo(line)
