"""
Text Helpers for Terminal Output

USE: Width-aware padding and indicator glyph rows for the game boxes
HOW IT WORKS:
  - Visible width is measured in terminal cells (rich.cells.cell_len) on
    click.unstyle()'d text, so ANSI color codes added with click.style() do
    not count, combining marks take no cell and wide characters take two
  - Padding only ever appends spaces; text is never truncated
"""

import click
from rich.cells import cell_len

FILLED = "●"
EMPTY = "○"
BASE_FILLED = "◆"
BASE_EMPTY = "◇"


def visible_width(text: str) -> int:
    """Terminal columns taken by `text`, ignoring ANSI escapes."""
    return cell_len(click.unstyle(text))


def pad_to_width(text: str, width: int) -> str:
    """Right-pad `text` with spaces to a visible width of at least `width`."""
    padding = max(0, width - visible_width(text))
    return text + " " * padding


def render_indicator(count: int, total: int, filled: str = FILLED, empty: str = EMPTY) -> str:
    """
    Row of `total` glyphs with the first `count` filled.

    `count` is clamped into [0, total], so 5 strikes of 3 renders as 3 filled.
    """
    total = max(0, total)
    count = min(max(0, count), total)
    return filled * count + empty * (total - count)


def render_bases(first: bool, second: bool, third: bool) -> str:
    """'1B ◆ 2B ◇ 3B ◇' style base occupancy row."""
    parts = []
    for label, occupied in (("1B", first), ("2B", second), ("3B", third)):
        glyph = render_indicator(1 if occupied else 0, 1, BASE_FILLED, BASE_EMPTY)
        parts.append(f"{label} {glyph}")
    return " ".join(parts)
