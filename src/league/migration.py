"""League snapshot migration - repairs any document into a valid League.

Snapshots come from disk, from user-supplied import files and from older
builds of the app whose document shape differed. Rather than rejecting a bad
document, every field is coerced independently: a broken roster does not
cost the player list, an invalid region does not cost the player.
"""

import json
import logging
import math
from typing import Any, Dict, List, Optional, Set, Tuple

from src.league.config import (
    DEFAULT_LEAGUE_NAME,
    DEFAULT_PLAYER_NAME,
    DEFAULT_REGION,
    DEFAULT_ROLE,
    DEFAULT_SCORING,
    REGIONS,
    ROLES,
    ROSTER_SIZE,
)
from src.league.models import (
    DraftState,
    FantasyTeam,
    League,
    Player,
    PlayerStats,
    ScoringWeights,
    new_id,
)

logger = logging.getLogger(__name__)


def _is_finite(value: Any) -> bool:
    """True for real ints/floats that are finite. JSON booleans don't count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _finite(value: Any, default: float = 0) -> float:
    return value if _is_finite(value) else default


def _whole(value: Any, default: int) -> int:
    """Integral finite number as int, else *default*."""
    if _is_finite(value) and float(value).is_integer():
        return int(value)
    return default


def _text(value: Any) -> Optional[str]:
    """Non-empty string or None."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _obj(value: Any) -> Dict:
    return value if isinstance(value, dict) else {}


def _id_list(value: Any) -> Tuple[str, ...]:
    """Ordered string ids; anything that isn't a list becomes empty."""
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def _unique_id(raw_id: Any, seen: Set[str]) -> str:
    """The raw id if usable and unseen, otherwise a fresh one."""
    candidate = _text(raw_id)
    if candidate is None or candidate in seen:
        candidate = new_id()
        while candidate in seen:
            candidate = new_id()
    seen.add(candidate)
    return candidate


def _decode(raw: Any) -> Optional[Dict]:
    """Turn a str/bytes/dict snapshot into a dict, or None if unusable."""
    if raw is None:
        return None
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Snapshot is not valid UTF-8; using defaults")
            return None
    if isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            raw = json.loads(raw)
        except ValueError as e:
            logger.warning("Snapshot is not valid JSON (%s); using defaults", e)
            return None
    if not isinstance(raw, dict):
        logger.warning(
            "Snapshot is a %s, not an object; using defaults", type(raw).__name__
        )
        return None
    return raw


def default_league() -> League:
    """Fresh league: two empty teams, no players, draft not started."""
    return League.create_new()


def _migrate_teams(raw_teams: Any) -> List[FantasyTeam]:
    if not isinstance(raw_teams, list):
        return []
    seen: Set[str] = set()
    teams = []
    for i, raw in enumerate(raw_teams):
        t = _obj(raw)
        # stored team points are never trusted; totals are derived on read
        teams.append(
            FantasyTeam(
                team_id=_unique_id(t.get("id"), seen),
                name=_text(t.get("name")) or f"Team {i + 1}",
                roster=_id_list(_obj(t.get("roster")).get("players")),
            )
        )
    return teams


def _migrate_stats(raw_stats: Any) -> PlayerStats:
    s = _obj(raw_stats)
    return PlayerStats(
        kills=_finite(s.get("kills")),
        deaths=_finite(s.get("deaths")),
        assists=_finite(s.get("assists")),
        creep_score=_finite(s.get("cs")),
        games_played=_whole(s.get("games"), 0),
    )


def _migrate_players(raw_players: Any, team_ids: Set[str]) -> List[Player]:
    if not isinstance(raw_players, list):
        return []
    seen: Set[str] = set()
    players = []
    for raw in raw_players:
        p = _obj(raw)
        role = p.get("role")
        region = p.get("region")
        drafted_by = p.get("draftedBy")
        players.append(
            Player(
                player_id=_unique_id(p.get("id"), seen),
                name=_text(p.get("name")) or DEFAULT_PLAYER_NAME,
                role=role if role in ROLES else DEFAULT_ROLE,
                region=region if region in REGIONS else DEFAULT_REGION,
                pro_team=_text(p.get("proTeam")),
                drafted_by=drafted_by if drafted_by in team_ids else None,
                stats=_migrate_stats(p.get("stats")),
            )
        )
    return players


def _migrate_draft(raw_draft: Any, raw_roster_size: Any) -> DraftState:
    d = _obj(raw_draft)
    total_rounds = _whole(d.get("totalRounds"), _whole(raw_roster_size, ROSTER_SIZE))
    return DraftState(
        started=bool(d.get("started")),
        finished=bool(d.get("finished")),
        order=_id_list(d.get("order")),
        current_round=_whole(d.get("currentRound"), 1),
        total_rounds=total_rounds,
        current_pick_index=_whole(d.get("currentPickIndex"), 0),
        snake=d.get("snake") is not False,
    )


def _migrate_scoring(raw_scoring: Any) -> ScoringWeights:
    s = _obj(raw_scoring)
    return ScoringWeights(
        kill=_finite(s.get("kill"), DEFAULT_SCORING["kill"]),
        assist=_finite(s.get("assist"), DEFAULT_SCORING["assist"]),
        death=_finite(s.get("death"), DEFAULT_SCORING["death"]),
        creep_score=_finite(s.get("csMultiplier"), DEFAULT_SCORING["creep_score"]),
    )


def migrate_league(raw: Any = None) -> League:
    """Normalize any snapshot into a structurally valid League.

    Never raises. *raw* may be None, a JSON string or bytes, or an already
    decoded object. Unusable input yields the default league; usable input
    is repaired field by field.

    The roster size is always the region count, whatever the input claims.
    """
    data = _decode(raw)
    if data is None:
        return default_league()

    teams = _migrate_teams(data.get("teams"))
    team_ids = {team.team_id for team in teams}
    players = _migrate_players(data.get("players"), team_ids)

    league = League(
        name=_text(data.get("leagueName")) or DEFAULT_LEAGUE_NAME,
        teams=tuple(teams),
        players=tuple(players),
        draft=_migrate_draft(data.get("draft"), data.get("rosterSize")),
        scoring=_migrate_scoring(data.get("scoring")),
        roster_size=ROSTER_SIZE,
    )

    logger.debug(
        "Migrated league '%s': %d teams, %d players, draft started=%s",
        league.name,
        len(league.teams),
        len(league.players),
        league.draft.started,
    )
    return league
