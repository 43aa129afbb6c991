"""State persistence - save, load, import and export league snapshots."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from src.league.config import LEAGUES_DIR, STORAGE_KEY
from src.league.migration import default_league, migrate_league
from src.league.models import League
from src.league.scoring import compute_points, team_points

logger = logging.getLogger(__name__)


class LeagueImportError(Exception):
    """Raised when an import file cannot be read as JSON at all."""


def league_to_document(league: League) -> Dict:
    """Convert a League to its JSON-serializable snapshot document.

    Field names match the web app's export format so files move between the
    two. ``points`` values are derived for readability and ignored on load.
    """
    return {
        "leagueName": league.name,
        "teams": [
            {
                "id": team.team_id,
                "name": team.name,
                "roster": {"players": list(team.roster)},
                "points": team_points(team, league),
            }
            for team in league.teams
        ],
        "players": [
            {
                "id": player.player_id,
                "name": player.name,
                "role": player.role,
                "region": player.region,
                **({"proTeam": player.pro_team} if player.pro_team else {}),
                **({"draftedBy": player.drafted_by} if player.drafted_by else {}),
                "stats": {
                    "kills": player.stats.kills,
                    "deaths": player.stats.deaths,
                    "assists": player.stats.assists,
                    "cs": player.stats.creep_score,
                    "games": player.stats.games_played,
                    "points": compute_points(player, league.scoring),
                },
            }
            for player in league.players
        ],
        "draft": {
            "started": league.draft.started,
            "finished": league.draft.finished,
            "order": list(league.draft.order),
            "currentRound": league.draft.current_round,
            "totalRounds": league.draft.total_rounds,
            "currentPickIndex": league.draft.current_pick_index,
            "snake": league.draft.snake,
        },
        "scoring": {
            "kill": league.scoring.kill,
            "assist": league.scoring.assist,
            "death": league.scoring.death,
            "csMultiplier": league.scoring.creep_score,
        },
        "rosterSize": league.roster_size,
    }


class StatePersistence:
    """Handles saving and loading the league snapshot to/from JSON files.

    Anything read back goes through migrate_league, so a hand-edited or
    truncated snapshot degrades to a repaired league instead of an error.
    """

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = storage_dir or LEAGUES_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    @property
    def snapshot_path(self) -> Path:
        return self.storage_dir / f"{STORAGE_KEY}.json"

    def save_league(self, league: League) -> Path:
        """Write the league snapshot, replacing the previous one.

        Returns:
            Path to the saved file.
        """
        filepath = self.snapshot_path
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(league_to_document(league), f, indent=2)

        logger.debug(
            "Saved league '%s' (round %d, pick %d) to %s",
            league.name,
            league.draft.current_round,
            league.draft.current_pick_index + 1,
            filepath,
        )
        return filepath

    def load_league(self) -> League:
        """Load the stored league, or a fresh default league.

        Never raises for missing or corrupt snapshots.
        """
        filepath = self.snapshot_path
        if not filepath.exists():
            logger.info("No saved league at %s; starting fresh", filepath)
            return default_league()

        try:
            raw = filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unreadable league file %s: %s", filepath, e)
            return default_league()

        league = migrate_league(raw)
        logger.info("Loaded league '%s' from %s", league.name, filepath)
        return league

    @staticmethod
    def export_league(league: League, path: Path) -> Path:
        """Write the league document to *path* verbatim."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(league_to_document(league), f, indent=2)
        logger.info("Exported league '%s' to %s", league.name, path)
        return path

    @staticmethod
    def import_league(path: Path) -> League:
        """Read an externally supplied document and repair it.

        Raises:
            LeagueImportError: If the file is missing or not JSON. Malformed
                but parseable content is repaired, not rejected.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LeagueImportError(f"Invalid league file {path}: {e}") from e

        league = migrate_league(data)
        logger.info(
            "Imported league '%s' from %s (%d teams, %d players)",
            league.name,
            path,
            len(league.teams),
            len(league.players),
        )
        return league
