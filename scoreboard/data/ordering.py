"""Game ordering helpers."""

from typing import List, Optional, Sequence

from .models import Game


def pin_favorite_team(games: Sequence[Game], team: Optional[str]) -> List[Game]:
    """
    Move games involving `team` ahead of all others.

    Stable partition: games keep their original relative order inside both
    the matching and the non-matching group. With no team the list is
    returned as-is (as a new list).
    """
    if not team or not team.strip():
        return list(games)
    favorites = [game for game in games if game.involves(team)]
    others = [game for game in games if not game.involves(team)]
    return favorites + others
