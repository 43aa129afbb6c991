"""Stat entry - append one game's stats to a player's running totals."""

import logging
import math
from dataclasses import replace
from typing import Optional, Tuple

from src.league.models import League

logger = logging.getLogger(__name__)


def _increment(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value if math.isfinite(value) else 0


def record_game_stats(
    league: League,
    player_id: str,
    kills: float = 0,
    deaths: float = 0,
    assists: float = 0,
    creep_score: float = 0,
) -> Tuple[League, Optional[str]]:
    """Add one game's stats to *player_id* and count the game.

    Returns:
        (league, rejection). On rejection the input league is returned
        unchanged with the reason.
    """
    if league.draft.in_progress:
        return league, "Stats cannot be entered while the draft is in progress"

    player = league.get_player(player_id)
    if player is None:
        return league, f"Player {player_id} not found"

    # negative increments are corrections to an earlier game
    increments = [_increment(v) for v in (kills, deaths, assists, creep_score)]

    updated = replace(player, stats=player.stats.add_game(*increments))
    logger.info(
        "Recorded game %d for %s: %s/%s/%s, %s CS",
        updated.stats.games_played,
        player.name,
        *increments,
    )
    return league.with_player(updated), None
