"""
Schedule Data Models

USE: Typed, read-only view of the MLB Stats API schedule payload
WHAT IT PROVIDES:
  - Pydantic models mirroring the camelCase API fields through aliases
  - GameState classification derived once from the free-text status
  - One accessor per optional field the box formatter needs

HOW IT WORKS:
  - Unknown API fields are ignored, every nested object is optional
  - Accessors return None for anything missing; the formatter decides the
    placeholder glyph (PLACEHOLDER or UNKNOWN) in a single place
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"
UNKNOWN = "?"

HOME = "home"
AWAY = "away"

NAME_SUFFIXES = frozenset({"Jr.", "Jr", "Sr.", "Sr", "II", "III", "IV", "V"})


class GameState(str, Enum):
    """Coarse game state used to pick the box layout."""
    LIVE = "live"
    FINAL = "final"
    SCHEDULED = "scheduled"
    OTHER = "other"

    @classmethod
    def classify(cls, status: Optional[str]) -> "GameState":
        """
        Classify a detailedState string.

        Rules are checked in order:
          - contains "In Progress"                        -> LIVE
          - starts with "Final" or "Completed Early",
            or is exactly "Game Over"                     -> FINAL
          - contains "Scheduled", "Pre-Game" or "Warmup"  -> SCHEDULED
          - anything else                                 -> OTHER
        """
        text = (status or "").strip()
        if "In Progress" in text:
            return cls.LIVE
        if text.startswith("Final") or text.startswith("Completed Early") or text == "Game Over":
            return cls.FINAL
        if any(marker in text for marker in ("Scheduled", "Pre-Game", "Warmup")):
            return cls.SCHEDULED
        return cls.OTHER


class _ApiModel(BaseModel):
    """Base for all payload models."""

    class Config:
        populate_by_name = True
        frozen = True
        extra = 'ignore'


class PitchHand(_ApiModel):
    code: Optional[str] = None
    description: Optional[str] = None


class StatEntry(_ApiModel):
    """One element of a hydrated person's `stats` list."""
    type: Optional[Dict[str, Any]] = None
    group: Optional[Dict[str, Any]] = None
    stats: Optional[Dict[str, Any]] = None

    @property
    def group_name(self) -> Optional[str]:
        return (self.group or {}).get('displayName')

    @property
    def summary(self) -> Optional[str]:
        return (self.stats or {}).get('summary')


class Person(_ApiModel):
    id: Optional[int] = None
    full_name: Optional[str] = Field(None, alias='fullName')
    last_name: Optional[str] = Field(None, alias='lastName')
    pitch_hand: Optional[PitchHand] = Field(None, alias='pitchHand')
    stats: List[StatEntry] = Field(default_factory=list)

    @property
    def short_name(self) -> Optional[str]:
        """Last name, falling back to the last non-suffix word of the full name."""
        if self.last_name:
            return self.last_name
        words = (self.full_name or "").split()
        while len(words) > 1 and words[-1] in NAME_SUFFIXES:
            words.pop()
        return words[-1] if words else None

    @property
    def hand(self) -> Optional[str]:
        return self.pitch_hand.code if self.pitch_hand else None

    @property
    def stats_summary(self) -> Optional[str]:
        """Summary string of the first pitching stat group that has one."""
        for entry in self.stats:
            if entry.group_name not in (None, 'pitching'):
                continue
            if entry.summary:
                return entry.summary
        return None


class TeamInfo(_ApiModel):
    id: Optional[int] = None
    name: Optional[str] = None
    abbreviation: Optional[str] = None


class GameTeam(_ApiModel):
    team: TeamInfo = Field(default_factory=TeamInfo)
    score: Optional[int] = None
    probable_pitcher: Optional[Person] = Field(None, alias='probablePitcher')


class GameTeams(_ApiModel):
    home: GameTeam = Field(default_factory=GameTeam)
    away: GameTeam = Field(default_factory=GameTeam)


class GameStatus(_ApiModel):
    detailed_state: Optional[str] = Field(None, alias='detailedState')
    abstract_game_state: Optional[str] = Field(None, alias='abstractGameState')


class LinescoreTeam(_ApiModel):
    runs: Optional[int] = None
    hits: Optional[int] = None
    errors: Optional[int] = None


class LinescoreTeams(_ApiModel):
    home: Optional[LinescoreTeam] = None
    away: Optional[LinescoreTeam] = None


class Defense(_ApiModel):
    pitcher: Optional[Person] = None


class Offense(_ApiModel):
    batter: Optional[Person] = None
    first: Optional[Person] = None
    second: Optional[Person] = None
    third: Optional[Person] = None


class Linescore(_ApiModel):
    current_inning: Optional[int] = Field(None, alias='currentInning')
    inning_half: Optional[str] = Field(None, alias='inningHalf')
    balls: Optional[int] = None
    strikes: Optional[int] = None
    outs: Optional[int] = None
    teams: Optional[LinescoreTeams] = None
    defense: Optional[Defense] = None
    offense: Optional[Offense] = None


class Decisions(_ApiModel):
    winner: Optional[Person] = None
    loser: Optional[Person] = None
    save: Optional[Person] = None


class Game(_ApiModel):
    """A single scheduled game as returned under dates[0].games."""
    game_pk: Optional[int] = Field(None, alias='gamePk')
    game_date: Optional[str] = Field(None, alias='gameDate')
    teams: GameTeams = Field(default_factory=GameTeams)
    status: GameStatus = Field(default_factory=GameStatus)
    linescore: Optional[Linescore] = None
    decisions: Optional[Decisions] = None

    # Header

    @property
    def home_abbr(self) -> Optional[str]:
        return self.teams.home.team.abbreviation

    @property
    def away_abbr(self) -> Optional[str]:
        return self.teams.away.team.abbreviation

    @property
    def status_text(self) -> str:
        return self.status.detailed_state or ""

    @property
    def state(self) -> GameState:
        return GameState.classify(self.status.detailed_state)

    def involves(self, team: str) -> bool:
        """True if `team` (case-insensitive abbreviation) plays in this game."""
        wanted = team.strip().upper()
        return any(
            abbr is not None and abbr.upper() == wanted
            for abbr in (self.home_abbr, self.away_abbr)
        )

    def inning_label(self) -> Optional[str]:
        """'Top 5' style label, None unless both half and number are known."""
        if not self.linescore:
            return None
        half = self.linescore.inning_half
        number = self.linescore.current_inning
        if half and number:
            return f"{half} {number}"
        return None

    # Line score

    def line_team(self, side: str) -> Optional[LinescoreTeam]:
        if not self.linescore or not self.linescore.teams:
            return None
        return getattr(self.linescore.teams, side)

    # Live state

    @property
    def pitcher_name(self) -> Optional[str]:
        if self.linescore and self.linescore.defense and self.linescore.defense.pitcher:
            return self.linescore.defense.pitcher.short_name
        return None

    @property
    def batter_name(self) -> Optional[str]:
        if self.linescore and self.linescore.offense and self.linescore.offense.batter:
            return self.linescore.offense.batter.short_name
        return None

    def count(self) -> Tuple[int, int, int]:
        """(balls, strikes, outs), each 0 when unknown."""
        if not self.linescore:
            return 0, 0, 0
        ls = self.linescore
        return ls.balls or 0, ls.strikes or 0, ls.outs or 0

    def runners(self) -> Tuple[bool, bool, bool]:
        """Occupancy of (first, second, third)."""
        offense = self.linescore.offense if self.linescore else None
        if not offense:
            return False, False, False
        return offense.first is not None, offense.second is not None, offense.third is not None

    # Final state

    def decision_name(self, role: str) -> Optional[str]:
        """Full name of the 'winner', 'loser' or 'save' pitcher."""
        if not self.decisions:
            return None
        person = getattr(self.decisions, role)
        return person.full_name if person else None

    # Scheduled state

    def probable_pitcher(self, side: str) -> Optional[Person]:
        return getattr(self.teams, side).probable_pitcher
