"""League setup - team, player and scoring edits outside a running draft."""

import logging
import math
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from src.league.config import REGIONS, ROLES
from src.league.migration import default_league
from src.league.models import FantasyTeam, League, Player, ScoringWeights, new_id

logger = logging.getLogger(__name__)


class LeagueSetupError(ValueError):
    """Raised when a setup edit is invalid."""


def _require_not_drafting(league: League, action: str):
    if league.draft.in_progress:
        raise LeagueSetupError(f"Cannot {action} while the draft is in progress")


def _require_not_started(league: League, action: str):
    # a finished draft must keep every roster full
    if league.draft.started:
        raise LeagueSetupError(f"Cannot {action} once the draft has started")


def _require_name(name: Optional[str], what: str) -> str:
    if name is None or not name.strip():
        raise LeagueSetupError(f"{what} name cannot be blank")
    return name.strip()


def _require_team(league: League, team_id: str) -> FantasyTeam:
    team = league.get_team(team_id)
    if team is None:
        raise LeagueSetupError(f"Team {team_id} not found")
    return team


def normalize_role(role: str) -> str:
    value = (role or "").strip().upper()
    if value not in ROLES:
        raise LeagueSetupError(
            f"Invalid role '{role}'. Must be one of: {', '.join(ROLES)}"
        )
    return value


def normalize_region(region: str) -> str:
    value = (region or "").strip().upper()
    if value not in REGIONS:
        raise LeagueSetupError(
            f"Invalid region '{region}'. Must be one of: {', '.join(REGIONS)}"
        )
    return value


def rename_league(league: League, name: str) -> League:
    return replace(league, name=_require_name(name, "League"))


def add_team(league: League, name: Optional[str] = None) -> League:
    """Append an empty team. Defaults to ``Team {n+1}``."""
    _require_not_started(league, "add a team")
    if name is None or not name.strip():
        name = f"Team {len(league.teams) + 1}"
    team = FantasyTeam(team_id=new_id(), name=name.strip())
    logger.info("Added team %s (%s)", team.name, team.team_id)
    return replace(league, teams=league.teams + (team,))


def rename_team(league: League, team_id: str, name: str) -> League:
    team = _require_team(league, team_id)
    return league.with_team(replace(team, name=_require_name(name, "Team")))


def remove_team(league: League, team_id: str) -> League:
    """Drop a team with an empty roster, including from the draft order."""
    _require_not_started(league, "remove a team")
    team = _require_team(league, team_id)
    if team.roster:
        raise LeagueSetupError(
            f"Cannot remove {team.name}: roster has {team.get_roster_count()} players"
        )
    teams = tuple(t for t in league.teams if t.team_id != team_id)
    order = tuple(tid for tid in league.draft.order if tid != team_id)
    logger.info("Removed team %s (%s)", team.name, team_id)
    return replace(league, teams=teams, draft=replace(league.draft, order=order))


def add_player(
    league: League,
    name: str,
    role: str,
    region: str,
    pro_team: Optional[str] = None,
) -> League:
    """Add one undrafted player with zeroed stats."""
    return add_players(league, [(name, role, region, pro_team)])


def add_players(
    league: League,
    players: Iterable[Tuple[str, str, str, Optional[str]]],
) -> League:
    """Add several players at once.

    Args:
        players: ``(name, role, region, pro_team)`` tuples. Role and region
            are case-insensitive.

    Raises:
        LeagueSetupError: If any entry is invalid; nothing is added then.
    """
    _require_not_drafting(league, "add players")
    new_players = []
    for name, role, region, pro_team in players:
        new_players.append(
            Player(
                player_id=new_id(),
                name=_require_name(name, "Player"),
                role=normalize_role(role),
                region=normalize_region(region),
                pro_team=pro_team.strip() if pro_team and pro_team.strip() else None,
            )
        )
    logger.info("Added %d players", len(new_players))
    return replace(league, players=league.players + tuple(new_players))


def set_scoring(
    league: League,
    kill: Optional[float] = None,
    assist: Optional[float] = None,
    death: Optional[float] = None,
    creep_score: Optional[float] = None,
) -> League:
    """Change any of the scoring weights. Points re-derive on next read."""
    current = league.scoring
    updates = {
        "kill": kill,
        "assist": assist,
        "death": death,
        "creep_score": creep_score,
    }
    values = {}
    for key, value in updates.items():
        if value is None:
            values[key] = getattr(current, key)
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise LeagueSetupError(f"Scoring weight '{key}' must be a finite number")
        values[key] = value
    return replace(league, scoring=ScoringWeights(**values))


def reset_league() -> League:
    """Brand new default league."""
    logger.info("League reset to defaults")
    return default_league()
