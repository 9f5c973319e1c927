# Schedule Data Package
#
# USE: Fetching and modelling the MLB schedule payload
# HOW IT WORKS: ScheduleClient performs the HTTP request, models.Game wraps
#   each game record with optional accessors, ordering pins a favorite team
# FITS IN PROJECT: Input side of the scoreboard; output lives in scoreboard.output

from .models import Game, GameState, PLACEHOLDER, UNKNOWN
from .schedule_client import ScheduleClient, ScheduleError, build_schedule_params, parse_games
from .ordering import pin_favorite_team

__all__ = [
    'Game',
    'GameState',
    'PLACEHOLDER',
    'UNKNOWN',
    'ScheduleClient',
    'ScheduleError',
    'build_schedule_params',
    'parse_games',
    'pin_favorite_team',
]
