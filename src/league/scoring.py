"""Fantasy points - always derived from stats, never stored.

Points are recomputed on every read from a player's running stat totals and
the league's current scoring weights, so changing a weight re-scores the
whole league at once.
"""

from decimal import ROUND_FLOOR, Decimal
from typing import Iterable, Union

from src.league.models import FantasyTeam, League, Player, PlayerStats, ScoringWeights

_CENT = Decimal("0.01")
_HALF_CENT = Decimal("0.005")


def _dec(value: float) -> Decimal:
    # str() keeps the shortest repr, so 0.01 stays 0.01 rather than its
    # binary expansion
    return Decimal(str(value))


def round_points(value: Union[Decimal, float]) -> float:
    """Round to 2 decimals, half-up on the cent boundary.

    Half-up means toward positive infinity: 1.005 -> 1.01, -1.005 -> -1.00.
    """
    if not isinstance(value, Decimal):
        value = _dec(value)
    rounded = (value + _HALF_CENT).quantize(_CENT, rounding=ROUND_FLOOR)
    return float(rounded)


def compute_points(
    player: Union[Player, PlayerStats], weights: ScoringWeights
) -> float:
    """Fantasy points for a player (or bare stat line) under *weights*.

    points = kills*kill + assists*assist + deaths*death + cs*creep_score
    """
    stats = player.stats if isinstance(player, Player) else player
    total = (
        _dec(stats.kills) * _dec(weights.kill)
        + _dec(stats.assists) * _dec(weights.assist)
        + _dec(stats.deaths) * _dec(weights.death)
        + _dec(stats.creep_score) * _dec(weights.creep_score)
    )
    return round_points(total)


def sum_points(points: Iterable[float]) -> float:
    return round_points(sum((_dec(p) for p in points), Decimal(0)))


def team_points(team: FantasyTeam, league: League) -> float:
    """Total points of a team's roster. Unknown player ids count as 0."""
    points = []
    for player_id in team.roster:
        player = league.get_player(player_id)
        if player is not None:
            points.append(compute_points(player, league.scoring))
    return sum_points(points)
