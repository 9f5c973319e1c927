"""
Game Box Formatter

USE: Turns one Game into a bordered, fixed-width block of colored text lines
WHAT IT RENDERS:
  - Header: matchup, colored status, inning
  - Line score: runs/hits/errors for away and home
  - One state-dependent block (live count and bases, final decisions,
    probable pitchers, or blank filler), always STATE_BLOCK_HEIGHT lines

HOW IT WORKS:
  - GameState picks the block renderer
  - Missing values come back from Game accessors as None and are replaced by
    PLACEHOLDER or UNKNOWN here
  - Every content line is padded to the column width and framed with '|'
"""

import logging
from typing import Callable, Dict, List, Optional

import click

from ..config import DEFAULT_COLUMN_WIDTH
from ..data.models import AWAY, HOME, PLACEHOLDER, UNKNOWN, Game, GameState
from .text_utils import pad_to_width, render_bases, render_indicator

logger = logging.getLogger(__name__)

STATE_BLOCK_HEIGHT = 6
MAX_BALLS = 4
MAX_STRIKES = 3
MAX_OUTS = 3

STATUS_COLORS: Dict[GameState, str] = {
    GameState.FINAL: 'red',
    GameState.LIVE: 'green',
    GameState.SCHEDULED: 'yellow',
    GameState.OTHER: 'yellow',
}


def _or(value: Optional[object], default: str) -> str:
    return default if value is None else str(value)


class GameBoxFormatter:
    """
    Formats games into boxes of a fixed column width.

    This class:
    - Builds header and line score lines for every game
    - Adds the block matching the game's state
    - Frames the result with dashed top/bottom borders and '|' sides
    """

    def __init__(self, column_width: int = DEFAULT_COLUMN_WIDTH):
        """
        Initialize formatter.

        Args:
            column_width: Visible width of the box interior
        """
        self.column_width = column_width
        self._blocks: Dict[GameState, Callable[[Game], List[str]]] = {
            GameState.LIVE: self._live_block,
            GameState.FINAL: self._final_block,
            GameState.SCHEDULED: self._scheduled_block,
            GameState.OTHER: self._other_block,
        }

    @property
    def box_width(self) -> int:
        """Visible width of a framed box, borders included."""
        return self.column_width + 2

    def border(self) -> str:
        return click.style('+' + '-' * self.column_width + '+', fg='white')

    def blank_line(self) -> str:
        """Unframed filler line as wide as a box."""
        return ' ' * self.box_width

    def format(self, game: Game) -> List[str]:
        """
        Format a single game.

        Args:
            game: Game to render

        Returns:
            Box lines, top border first
        """
        state = game.state
        logger.debug(f"Formatting game {game.game_pk} ({game.status_text!r} -> {state.value})")

        content = self._header(game, state) + self._line_score(game)
        block = self._blocks[state](game)
        block += [''] * (STATE_BLOCK_HEIGHT - len(block))
        content += block

        side = click.style('|', fg='white')
        framed = [side + pad_to_width(line, self.column_width) + side for line in content]
        return [self.border()] + framed + [self.border()]

    def _header(self, game: Game, state: GameState) -> List[str]:
        away = _or(game.away_abbr, UNKNOWN)
        home = _or(game.home_abbr, UNKNOWN)
        status = click.style(game.status_text, fg=STATUS_COLORS[state])
        return [
            click.style(f"{away} @ {home}", fg='white', bold=True),
            f"Status: {status}",
            f"Inning: {_or(game.inning_label(), PLACEHOLDER)}",
        ]

    def _line_score(self, game: Game) -> List[str]:
        lines = []
        for side, abbr in ((AWAY, game.away_abbr), (HOME, game.home_abbr)):
            team = game.line_team(side)
            runs = _or(team.runs if team else None, PLACEHOLDER)
            hits = _or(team.hits if team else None, PLACEHOLDER)
            errors = _or(team.errors if team else None, PLACEHOLDER)
            row = ' '.join([
                pad_to_width(_or(abbr, UNKNOWN), 6),
                pad_to_width(f"R:{runs}", 5),
                pad_to_width(f"H:{hits}", 5),
                pad_to_width(f"E:{errors}", 5),
            ])
            lines.append(click.style(row, fg='black', bg='white'))
        return lines

    def _live_block(self, game: Game) -> List[str]:
        balls, strikes, outs = game.count()
        return [
            click.style(f"P: {_or(game.pitcher_name, UNKNOWN)}", fg='cyan'),
            click.style(f"B: {_or(game.batter_name, UNKNOWN)}", fg='magenta'),
            f"Balls   {render_indicator(balls, MAX_BALLS)}",
            f"Strikes {render_indicator(strikes, MAX_STRIKES)}",
            f"Outs    {render_indicator(outs, MAX_OUTS)}",
            render_bases(*game.runners()),
        ]

    def _final_block(self, game: Game) -> List[str]:
        return [
            click.style(f"W: {_or(game.decision_name('winner'), UNKNOWN)}", fg='cyan'),
            click.style(f"L: {_or(game.decision_name('loser'), UNKNOWN)}", fg='magenta'),
            click.style(f"S: {_or(game.decision_name('save'), PLACEHOLDER)}", fg='yellow'),
        ]

    def _scheduled_block(self, game: Game) -> List[str]:
        lines = []
        for side, abbr in ((AWAY, game.away_abbr), (HOME, game.home_abbr)):
            pitcher = game.probable_pitcher(side)
            name = pitcher.full_name if pitcher else None
            hand = pitcher.hand if pitcher else None
            summary = pitcher.stats_summary if pitcher else None
            lines.append(click.style(f"{_or(abbr, UNKNOWN)} SP: {_or(name, UNKNOWN)}", fg='cyan'))
            lines.append(f"  {_or(hand, UNKNOWN)}HP {_or(summary, PLACEHOLDER)}")
        return lines

    def _other_block(self, game: Game) -> List[str]:
        return []


def format_game_box(game: Game, column_width: int = DEFAULT_COLUMN_WIDTH) -> List[str]:
    """
    Convenience function to format a single game.

    Args:
        game: Game to render
        column_width: Visible width of the box interior

    Returns:
        Box lines
    """
    return GameBoxFormatter(column_width).format(game)
