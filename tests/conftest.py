"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the scoreboard package is importable from a source checkout
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scoreboard.data.models import Game  # noqa: E402


def make_game_payload(
    away: str = "NYY",
    home: str = "BOS",
    status: str = "Scheduled",
    game_pk: int = 1,
    linescore: dict | None = None,
    decisions: dict | None = None,
    away_probable: dict | None = None,
    home_probable: dict | None = None,
) -> dict:
    """Build a schedule game record shaped like the MLB Stats API."""
    payload = {
        "gamePk": game_pk,
        "gameDate": "2026-10-18T23:05:00Z",
        "status": {"abstractGameState": "Preview", "detailedState": status},
        "teams": {
            "away": {"team": {"id": 147, "name": "Away Club", "abbreviation": away}},
            "home": {"team": {"id": 111, "name": "Home Club", "abbreviation": home}},
        },
    }
    if away_probable is not None:
        payload["teams"]["away"]["probablePitcher"] = away_probable
    if home_probable is not None:
        payload["teams"]["home"]["probablePitcher"] = home_probable
    if linescore is not None:
        payload["linescore"] = linescore
    if decisions is not None:
        payload["decisions"] = decisions
    return payload


def make_game(**kwargs) -> Game:
    return Game.model_validate(make_game_payload(**kwargs))


@pytest.fixture
def live_payload():
    """In Progress game: 2-1 count, no outs, runner on second."""
    return make_game_payload(
        status="In Progress",
        linescore={
            "currentInning": 5,
            "inningHalf": "Top",
            "balls": 2,
            "strikes": 1,
            "outs": 0,
            "teams": {
                "home": {"runs": 3, "hits": 7, "errors": 0},
                "away": {"runs": 1, "hits": 4, "errors": 1},
            },
            "defense": {"pitcher": {"id": 10, "fullName": "Garrett Crochet"}},
            "offense": {
                "batter": {"id": 11, "fullName": "Aaron Judge", "lastName": "Judge"},
                "second": {"id": 12, "fullName": "Juan Soto"},
            },
        },
    )


@pytest.fixture
def final_payload():
    return make_game_payload(
        status="Final",
        linescore={
            "currentInning": 9,
            "inningHalf": "Bottom",
            "teams": {
                "home": {"runs": 2, "hits": 6, "errors": 1},
                "away": {"runs": 5, "hits": 9, "errors": 0},
            },
        },
        decisions={
            "winner": {"id": 1, "fullName": "A Pitcher"},
            "loser": {"id": 2, "fullName": "B Pitcher"},
        },
    )


@pytest.fixture
def scheduled_payload():
    return make_game_payload(
        status="Pre-Game",
        away_probable={
            "id": 20,
            "fullName": "Gerrit Cole",
            "pitchHand": {"code": "R", "description": "Right"},
            "stats": [
                {
                    "type": {"displayName": "statsSingleSeason"},
                    "group": {"displayName": "pitching"},
                    "stats": {"summary": "12-5 | 3.12 ERA"},
                },
            ],
        },
    )


@pytest.fixture
def schedule_payload(live_payload, final_payload, scheduled_payload):
    """Full schedule response with three games."""
    return {
        "totalGames": 3,
        "dates": [{"date": "2026-10-18", "games": [live_payload, final_payload, scheduled_payload]}],
    }


@pytest.fixture
def mock_session():
    """Create a mock requests session returning an empty schedule."""
    session = MagicMock()
    response = MagicMock(status_code=200)
    response.json.return_value = {"dates": []}
    session.get.return_value = response
    return session
