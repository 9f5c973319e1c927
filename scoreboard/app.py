"""
Scoreboard Runner

USE: One full render pass: fetch -> reorder -> format -> print
HOW IT WORKS:
  - The HTTP client, clock and output sink are passed in, so the whole pass
    runs in tests without network access or a terminal
  - An empty schedule prints NO_GAMES_MESSAGE and nothing else
"""

import logging
from datetime import date
from typing import Callable, List, Optional, Protocol

from .config import ScoreboardConfig
from .data.models import Game
from .data.ordering import pin_favorite_team
from .output.banner import render_banner
from .output.game_box import GameBoxFormatter
from .output.grid import SEPARATOR, print_grid

logger = logging.getLogger(__name__)

NO_GAMES_MESSAGE = "No Games found."


class GameSource(Protocol):
    def fetch_games(self, day: date) -> List[Game]:
        ...


def run_scoreboard(
    client: GameSource,
    echo: Callable[[str], None],
    clock: Callable[[], date] = date.today,
    favorite: Optional[str] = None,
    config: Optional[ScoreboardConfig] = None,
) -> int:
    """
    Fetch today's games and print them as a grid.

    Args:
        client: Anything with fetch_games(day) (normally a ScheduleClient)
        echo: Output sink, called once per line
        clock: Returns the local date to fetch
        favorite: Team abbreviation whose games are listed first
        config: Grid settings (defaults to ScoreboardConfig())

    Returns:
        Number of games rendered
    """
    config = config or ScoreboardConfig()
    games = client.fetch_games(clock())

    if not games:
        echo(NO_GAMES_MESSAGE)
        return 0

    if favorite:
        logger.info(f"Pinning games for {favorite.upper()} to the top")
    games = pin_favorite_team(games, favorite)

    formatter = GameBoxFormatter(config.column_width)
    boxes = [formatter.format(game) for game in games]

    per_row = min(config.games_per_row, len(boxes))
    banner_width = per_row * formatter.box_width + (per_row - 1) * len(SEPARATOR)
    for line in render_banner(banner_width):
        echo(line)

    print_grid(boxes, config.games_per_row, echo, filler=formatter.blank_line())
    return len(boxes)
