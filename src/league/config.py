from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
LEAGUES_DIR = DATA_DIR / "leagues"

# Snapshot file name (one league per storage directory)
STORAGE_KEY = "worlds25-fantasy-lol"

# Every completed roster holds exactly one player from each region
REGIONS = ("LCK", "LPL", "LEC", "LTA", "LCP")
ROLES = ("TOP", "JNG", "MID", "ADC", "SUP")

# Fallbacks used when repairing a snapshot
DEFAULT_REGION = "LCK"
DEFAULT_ROLE = "MID"
DEFAULT_PLAYER_NAME = "Player"
DEFAULT_LEAGUE_NAME = "Worlds 2025 Fantasy League"
DEFAULT_TEAM_COUNT = 2

# Locked to the region count, never read from a snapshot
ROSTER_SIZE = len(REGIONS)

# Points per stat (creep score: 0.5 per 50 CS)
DEFAULT_SCORING = {
    "kill": 1.0,
    "assist": 0.5,
    "death": -1.0,
    "creep_score": 0.01,
}
