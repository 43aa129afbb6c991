"""Draft controller - orchestrates pick flow and state updates."""

import logging
from typing import Callable, Dict, List, Optional

from src.draft_manager import draft_engine
from src.draft_manager.draft_engine import DraftOutcome, Shuffler
from src.draft_manager.draft_order import order_for_round, shuffle_order
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.roster_validator import RosterValidator
from src.league.models import FantasyTeam, League, Player
from src.league.scoring import compute_points, team_points

logger = logging.getLogger(__name__)


class DraftController:
    """Main controller for draft orchestration.

    Holds the current League and swaps in the next one after every accepted
    transition. Rejections leave the held League as it was and are returned
    to the caller as a reason string.

    Args:
        league: Starting league (already migrated).
        on_change: Called with the new League after every accepted
            transition, e.g. to persist it.
        shuffle: Shuffle collaborator used when a base order is needed.
    """

    def __init__(
        self,
        league: League,
        on_change: Optional[Callable[[League], None]] = None,
        shuffle: Shuffler = shuffle_order,
    ):
        self.league = league
        self.on_change = on_change
        self.shuffle = shuffle

    def _commit(self, outcome: DraftOutcome, action: str) -> Optional[str]:
        if not outcome.ok:
            logger.warning("%s rejected: %s", action, outcome.rejection)
            return outcome.rejection
        self.league = outcome.league
        if self.on_change is not None:
            self.on_change(self.league)
        return None

    def start_draft(self) -> Optional[str]:
        """Start the draft. Returns a rejection reason, or None on success."""
        rejection = self._commit(
            draft_engine.start_draft(self.league, self.shuffle), "Start draft"
        )
        if rejection is None:
            names = [self._team_name(tid) for tid in self.league.draft.order]
            logger.info(
                "Draft started: %d teams, %d rounds, order %s",
                len(names),
                self.league.draft.total_rounds,
                " -> ".join(names),
            )
        return rejection

    def randomize_order(self) -> Optional[str]:
        """Reshuffle the base order before the draft starts."""
        rejection = self._commit(
            draft_engine.randomize_order(self.league, self.shuffle),
            "Randomize order",
        )
        if rejection is None:
            logger.info("Draft order randomized")
        return rejection

    def make_pick(self, player_id: str) -> Optional[str]:
        """Draft *player_id* to the team on the clock.

        Returns:
            None if the pick was made, else why it was rejected (wrong phase,
            unknown or already drafted player, region coverage violation).
        """
        draft = self.league.draft
        pick_round, pick_index = draft.current_round, draft.current_pick_index
        team = self.get_current_team()

        rejection = self._commit(
            draft_engine.make_pick(self.league, player_id), "Pick"
        )
        if rejection is None:
            player = self.league.get_player(player_id)
            logger.info(
                "Rd %d pick %d: %s selects %s (%s, %s)",
                pick_round,
                pick_index + 1,
                team.name,
                player.name,
                player.role,
                player.region,
            )
            if self.is_complete:
                logger.info("Draft complete")
        return rejection

    def undo_last_pick(self) -> Optional[str]:
        """Revert the most recent pick."""
        before = self.league
        rejection = self._commit(
            draft_engine.undo_last_pick(self.league), "Undo"
        )
        if rejection is None:
            released = [
                p.name
                for p in before.players
                if p.is_drafted and not self.league.get_player(p.player_id).is_drafted
            ]
            logger.info("Undid pick: %s released", ", ".join(released))
        return rejection

    @property
    def is_complete(self) -> bool:
        """Whether the draft is finished."""
        return self.league.draft.finished

    def get_current_team(self) -> Optional[FantasyTeam]:
        """Get the team currently on the clock."""
        return DraftRules(self.league).current_team()

    def get_round_order(self) -> List[FantasyTeam]:
        """Teams in pick order for the current round."""
        draft = self.league.draft
        teams = []
        for team_id in order_for_round(draft.order, draft.current_round, draft.snake):
            team = self.league.get_team(team_id)
            if team is not None:
                teams.append(team)
        return teams

    def get_available_players(
        self, role: Optional[str] = None, region: Optional[str] = None
    ) -> List[Player]:
        """Undrafted players, optionally filtered, sorted by name."""
        players = [
            p
            for p in self.league.players
            if not p.is_drafted
            and (role is None or p.role == role)
            and (region is None or p.region == region)
        ]
        return sorted(players, key=lambda p: p.name.lower())

    def get_region_progress(self, team_id: Optional[str] = None) -> Dict[str, bool]:
        """Region coverage of *team_id*, defaulting to the team on the clock."""
        team = (
            self.league.get_team(team_id)
            if team_id is not None
            else self.get_current_team()
        )
        if team is None:
            return {}
        return RosterValidator(self.league).region_progress(team)

    def get_team_roster(self, team_id: str) -> List[Player]:
        """Players on a team in pick order."""
        team = self.league.get_team(team_id)
        if team is None:
            return []
        roster = []
        for player_id in team.roster:
            player = self.league.get_player(player_id)
            if player is not None:
                roster.append(player)
        return roster

    def get_draft_summary(self) -> Dict:
        """Generate summary of draft results.

        Returns dict with "error" key if draft is not yet complete.
        """
        if not self.is_complete:
            return {"error": "Draft not complete"}

        validator = RosterValidator(self.league)
        summary = {
            "league_name": self.league.name,
            "total_picks": sum(t.get_roster_count() for t in self.league.teams),
            "teams": [],
        }

        for team in self.league.teams:
            is_valid, errors = validator.validate_final_roster(team)
            summary["teams"].append(
                {
                    "team_id": team.team_id,
                    "team_name": team.name,
                    "roster": [
                        {
                            "player_id": p.player_id,
                            "name": p.name,
                            "role": p.role,
                            "region": p.region,
                            "points": compute_points(p, self.league.scoring),
                        }
                        for p in self.get_team_roster(team.team_id)
                    ],
                    "points": team_points(team, self.league),
                    "roster_valid": is_valid,
                    "roster_errors": errors,
                }
            )

        return summary

    def _team_name(self, team_id: str) -> str:
        team = self.league.get_team(team_id)
        return team.name if team is not None else team_id
