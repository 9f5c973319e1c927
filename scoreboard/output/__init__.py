# Output Formatting Package
#
# USE: Formats games for terminal display
# HOW IT WORKS: game_box turns each game into a framed block of colored lines,
#   grid lays the blocks out in rows, banner prints the title
# FITS IN PROJECT: Everything between parsed Game models and stdout

from .text_utils import pad_to_width, render_bases, render_indicator, visible_width
from .game_box import GameBoxFormatter, format_game_box
from .grid import chunk_boxes, pad_row, print_grid, render_grid
from .banner import render_banner

__all__ = [
    'GameBoxFormatter',
    'format_game_box',
    'chunk_boxes',
    'pad_row',
    'print_grid',
    'render_grid',
    'render_banner',
    'pad_to_width',
    'render_bases',
    'render_indicator',
    'visible_width',
]
