"""League data models - immutable records that every transition replaces."""

import uuid
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple

from src.league.config import (
    DEFAULT_LEAGUE_NAME,
    DEFAULT_SCORING,
    DEFAULT_TEAM_COUNT,
    ROSTER_SIZE,
)


def new_id() -> str:
    """Short random identity for teams and players."""
    return uuid.uuid4().hex[:8]


@dataclass(frozen=True)
class PlayerStats:
    """Running stat totals for a player. Points are never stored here."""

    kills: float = 0
    deaths: float = 0
    assists: float = 0
    creep_score: float = 0
    games_played: int = 0

    def add_game(
        self, kills: float, deaths: float, assists: float, creep_score: float
    ) -> "PlayerStats":
        """Return totals with one more game's stats appended."""
        return PlayerStats(
            kills=self.kills + kills,
            deaths=self.deaths + deaths,
            assists=self.assists + assists,
            creep_score=self.creep_score + creep_score,
            games_played=self.games_played + 1,
        )


@dataclass(frozen=True)
class Player:
    """A real competitor that fantasy teams draft."""

    player_id: str
    name: str
    role: str
    region: str
    pro_team: Optional[str] = None
    drafted_by: Optional[str] = None  # team_id of the owner
    stats: PlayerStats = field(default_factory=PlayerStats)

    @property
    def is_drafted(self) -> bool:
        return self.drafted_by is not None


@dataclass(frozen=True)
class FantasyTeam:
    """A participant's team. Roster order is pick order."""

    team_id: str
    name: str
    roster: Tuple[str, ...] = ()

    def get_roster_count(self) -> int:
        return len(self.roster)

    def add_player(self, player_id: str) -> "FantasyTeam":
        return replace(self, roster=self.roster + (player_id,))

    def remove_last_player(self) -> "FantasyTeam":
        """Drop the most recent pick (for undo)."""
        return replace(self, roster=self.roster[:-1])


@dataclass(frozen=True)
class DraftState:
    """Draft pointer and flags. The per-round order is derived, not stored."""

    started: bool = False
    finished: bool = False
    order: Tuple[str, ...] = ()
    current_round: int = 1
    total_rounds: int = ROSTER_SIZE
    current_pick_index: int = 0
    snake: bool = True

    @property
    def in_progress(self) -> bool:
        return self.started and not self.finished


@dataclass(frozen=True)
class ScoringWeights:
    """Points awarded per unit of each stat. Weights may be negative."""

    kill: float = DEFAULT_SCORING["kill"]
    assist: float = DEFAULT_SCORING["assist"]
    death: float = DEFAULT_SCORING["death"]
    creep_score: float = DEFAULT_SCORING["creep_score"]


@dataclass(frozen=True)
class League:
    """Complete league state - single source of truth."""

    name: str
    teams: Tuple[FantasyTeam, ...] = ()
    players: Tuple[Player, ...] = ()
    draft: DraftState = field(default_factory=DraftState)
    scoring: ScoringWeights = field(default_factory=ScoringWeights)
    roster_size: int = ROSTER_SIZE

    @classmethod
    def create_new(
        cls, team_names: Optional[Iterable[str]] = None
    ) -> "League":
        """Factory for a fresh league with empty teams and no players."""
        if team_names is None:
            team_names = [f"Team {i + 1}" for i in range(DEFAULT_TEAM_COUNT)]
        teams = tuple(
            FantasyTeam(team_id=new_id(), name=name) for name in team_names
        )
        return cls(name=DEFAULT_LEAGUE_NAME, teams=teams)

    def get_team(self, team_id: Optional[str]) -> Optional[FantasyTeam]:
        for team in self.teams:
            if team.team_id == team_id:
                return team
        return None

    def get_player(self, player_id: Optional[str]) -> Optional[Player]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def team_ids(self) -> List[str]:
        return [team.team_id for team in self.teams]

    def is_roster_full(self, team: FantasyTeam) -> bool:
        return team.get_roster_count() >= self.roster_size

    def all_rosters_full(self) -> bool:
        return all(self.is_roster_full(team) for team in self.teams)

    def with_team(self, updated: FantasyTeam) -> "League":
        """Return a league with the team of the same id swapped out."""
        teams = tuple(
            updated if team.team_id == updated.team_id else team
            for team in self.teams
        )
        return replace(self, teams=teams)

    def with_player(self, updated: Player) -> "League":
        """Return a league with the player of the same id swapped out."""
        players = tuple(
            updated if player.player_id == updated.player_id else player
            for player in self.players
        )
        return replace(self, players=players)
