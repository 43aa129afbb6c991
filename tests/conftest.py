"""Shared fixtures for the league and draft test suites."""

import pytest

from src.league.config import REGIONS
from src.league.models import FantasyTeam, League, Player


# ------------------------------------------------------------------
# In-memory leagues, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def draft_league():
    """Three teams (A, B, C) and three players per region, nobody drafted.

    Player ids are the lower-cased region plus a number: lck1, lck2, ...
    """
    teams = tuple(FantasyTeam(team_id=t, name=f"Team {t}") for t in ("A", "B", "C"))
    players = tuple(
        Player(
            player_id=f"{region.lower()}{i}",
            name=f"{region} Player {i}",
            role="MID",
            region=region,
        )
        for region in REGIONS
        for i in range(1, 4)
    )
    return League(name="Test League", teams=teams, players=players)


@pytest.fixture
def keep_order():
    """Shuffle collaborator that keeps the given order."""
    return lambda team_ids: tuple(team_ids)


@pytest.fixture
def storage_dir(tmp_path):
    """Provide a temporary directory for league snapshots."""
    return tmp_path / "leagues"
