"""Leaderboards and standings - tabular views with derived points."""

import logging

import pandas as pd

from src.league.models import League
from src.league.scoring import compute_points, team_points

logger = logging.getLogger(__name__)

PLAYER_TABLE_COLUMNS = [
    "player_id", "name", "role", "region", "pro_team", "fantasy_team",
    "kills", "deaths", "assists", "cs", "games", "points",
]

STANDINGS_COLUMNS = ["rank", "team_id", "team", "roster", "points"]

ROSTER_COLUMNS = ["pick", "player_id", "name", "role", "region", "pro_team", "points"]


def player_table(league: League) -> pd.DataFrame:
    """One row per player, highest points first.

    Ties keep the order players were added in.
    """
    rows = []
    for player in league.players:
        owner = league.get_team(player.drafted_by)
        rows.append({
            "player_id": player.player_id,
            "name": player.name,
            "role": player.role,
            "region": player.region,
            "pro_team": player.pro_team or "",
            "fantasy_team": owner.name if owner is not None else "",
            "kills": player.stats.kills,
            "deaths": player.stats.deaths,
            "assists": player.stats.assists,
            "cs": player.stats.creep_score,
            "games": player.stats.games_played,
            "points": compute_points(player, league.scoring),
        })

    df = pd.DataFrame(rows, columns=PLAYER_TABLE_COLUMNS)
    return df.sort_values("points", ascending=False, kind="stable").reset_index(drop=True)


def team_standings(league: League) -> pd.DataFrame:
    """Teams ranked by total points (rank 1 = leader).

    Ties keep team insertion order and get consecutive ranks.
    """
    rows = [
        {
            "team_id": team.team_id,
            "team": team.name,
            "roster": f"{team.get_roster_count()}/{league.roster_size}",
            "points": team_points(team, league),
        }
        for team in league.teams
    ]

    df = pd.DataFrame(rows, columns=STANDINGS_COLUMNS[1:])
    df = df.sort_values("points", ascending=False, kind="stable").reset_index(drop=True)
    df.insert(0, "rank", range(1, len(df) + 1))

    if not df.empty:
        logger.debug("Standings leader: %s (%.2f)", df.at[0, "team"], df.at[0, "points"])
    return df


def team_roster_table(league: League, team_id: str) -> pd.DataFrame:
    """A team's roster in pick order. Unknown team -> empty table."""
    team = league.get_team(team_id)
    rows = []
    if team is not None:
        for pick, player_id in enumerate(team.roster, start=1):
            player = league.get_player(player_id)
            if player is None:
                continue
            rows.append({
                "pick": pick,
                "player_id": player.player_id,
                "name": player.name,
                "role": player.role,
                "region": player.region,
                "pro_team": player.pro_team or "",
                "points": compute_points(player, league.scoring),
            })
    return pd.DataFrame(rows, columns=ROSTER_COLUMNS)
