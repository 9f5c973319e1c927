"""
MLB Schedule Client

USE: Fetches the day's MLB schedule (with live line scores) from the Stats API
WHAT IT DOES:
  - Builds the schedule query for a single local date
  - Performs one GET request
  - Parses dates[0].games into Game models

HOW IT WORKS:
  - Uses a requests.Session supplied by the caller (or creates one)
  - Non-2xx responses raise requests.HTTPError via raise_for_status()
  - A missing or empty dates/games list is returned as an empty list
  - Anything else that is not a schedule payload raises ScheduleError

FITS IN PROJECT:
  - The only network access in the program; called once per run
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests
from pydantic import ValidationError

from ..config import DEFAULT_SCHEDULE_URL
from .models import Game

logger = logging.getLogger(__name__)

SPORT_IDS = (1, 21, 51)
GAME_TYPES = ('E', 'S', 'R', 'F', 'D', 'L', 'W', 'A', 'C')
LEAGUE_IDS = (103, 104, 590, 160, 159, 420, 428, 431, 426, 427, 429, 430, 432)
HYDRATE = (
    "team,linescore(matchup,runners),xrefId,story,flags,statusFlags,"
    "broadcasts(all),venue(location),decisions,person,probablePitcher,stats,"
    "game(content(media(epg),summary),tickets),seriesStatus(useOverride=true)"
)
TIME_ZONE = "America/New_York"
SORT_BY = "gameDate,gameStatus,gameType"


class ScheduleError(Exception):
    """Raised when the schedule response cannot be understood."""


def build_schedule_params(day: date) -> List[Tuple[str, Any]]:
    """
    Query parameters for a single day's schedule.

    Returned as a list of pairs because sportId, gameType and leagueId repeat.
    """
    day_str = day.strftime("%Y-%m-%d")
    params: List[Tuple[str, Any]] = [('sportId', sport_id) for sport_id in SPORT_IDS]
    params += [
        ('startDate', day_str),
        ('endDate', day_str),
        ('timeZone', TIME_ZONE),
    ]
    params += [('gameType', game_type) for game_type in GAME_TYPES]
    params.append(('language', 'en'))
    params += [('leagueId', league_id) for league_id in LEAGUE_IDS]
    params += [
        ('hydrate', HYDRATE),
        ('sortBy', SORT_BY),
    ]
    return params


def parse_games(payload: Any) -> List[Game]:
    """
    Extract dates[0].games from a decoded schedule payload.

    Args:
        payload: Decoded JSON body

    Returns:
        Games in API order; empty list when there are no dates or no games

    Raises:
        ScheduleError: If the payload is not a schedule object or a game
            record does not validate
    """
    if not isinstance(payload, dict):
        raise ScheduleError(f"Expected a JSON object, got {type(payload).__name__}")

    dates = payload.get('dates') or []
    if not isinstance(dates, list):
        raise ScheduleError("'dates' is not a list")
    if not dates:
        return []

    first = dates[0]
    if not isinstance(first, dict):
        raise ScheduleError("'dates[0]' is not an object")
    raw_games: Sequence[Dict[str, Any]] = first.get('games') or []
    if not isinstance(raw_games, list):
        raise ScheduleError("'dates[0].games' is not a list")

    try:
        return [Game.model_validate(raw) for raw in raw_games]
    except ValidationError as e:
        logger.error(f"Invalid game record in schedule: {e}")
        raise ScheduleError(f"Invalid game record: {e}") from e


class ScheduleClient:
    """
    Thin client for the MLB Stats API schedule endpoint.

    This class:
    - Builds the schedule query for a date
    - Performs the GET request
    - Returns parsed Game models
    """

    def __init__(self, session: Optional[requests.Session] = None, base_url: str = DEFAULT_SCHEDULE_URL):
        """
        Initialize schedule client.

        Args:
            session: requests.Session to use (a new one is created if omitted)
            base_url: Schedule endpoint URL
        """
        self.session = session or requests.Session()
        self.base_url = base_url

    def fetch_games(self, day: date) -> List[Game]:
        """
        Fetch all games scheduled on `day`.

        Args:
            day: Local calendar date to fetch

        Returns:
            List of Game models (possibly empty)

        Raises:
            requests.RequestException: On network failure or non-2xx status
            ScheduleError: If the body is not a valid schedule payload
        """
        logger.info(f"Fetching MLB schedule for {day.isoformat()}")

        response = self.session.get(self.base_url, params=build_schedule_params(day))
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Schedule response is not JSON: {e}")
            raise ScheduleError("Schedule response is not valid JSON") from e

        games = parse_games(payload)
        logger.info(f"Found {len(games)} games for {day.isoformat()}")
        return games

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()
