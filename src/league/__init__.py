from src.league.league_setup import LeagueSetupError
from src.league.migration import default_league, migrate_league
from src.league.models import (
    DraftState,
    FantasyTeam,
    League,
    Player,
    PlayerStats,
    ScoringWeights,
)
from src.league.scoring import compute_points, team_points
from src.league.state_persistence import LeagueImportError, StatePersistence
from src.league.stats_entry import record_game_stats

__all__ = [
    "DraftState",
    "FantasyTeam",
    "League",
    "LeagueImportError",
    "LeagueSetupError",
    "Player",
    "PlayerStats",
    "ScoringWeights",
    "StatePersistence",
    "compute_points",
    "default_league",
    "migrate_league",
    "record_game_stats",
    "team_points",
]
