"""Draft rule enforcement and pick validation."""

from typing import Optional, Tuple

from src.draft_manager.draft_order import order_for_round
from src.draft_manager.roster_validator import RosterValidator
from src.league.models import FantasyTeam, League


class DraftRules:
    """Enforces all draft rules against one league snapshot.

    Rule checks never raise: an illegal operation is reported as
    ``(False, reason)`` and the caller leaves the league untouched.
    """

    def __init__(self, league: League):
        self.league = league
        self.validator = RosterValidator(league)

    def current_team_id(self) -> Optional[str]:
        """Id of the team on the clock, or None outside an active draft."""
        draft = self.league.draft
        if not draft.in_progress:
            return None
        order = order_for_round(draft.order, draft.current_round, draft.snake)
        if not 0 <= draft.current_pick_index < len(order):
            return None
        return order[draft.current_pick_index]

    def current_team(self) -> Optional[FantasyTeam]:
        return self.league.get_team(self.current_team_id())

    def validate_start(self) -> Tuple[bool, Optional[str]]:
        if self.league.draft.started:
            return False, "Draft already started"
        return True, None

    def validate_randomize(self) -> Tuple[bool, Optional[str]]:
        if self.league.draft.started:
            return (
                False,
                "Draft order can only be randomized before the draft starts",
            )
        return True, None

    def validate_pick(self, player_id: str) -> Tuple[bool, Optional[str]]:
        """
        Validate if a pick is legal for the team on the clock.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        draft = self.league.draft

        # Check 1: Is a draft running?
        if not draft.started:
            return False, "Draft has not started"
        if draft.finished:
            return False, "Draft is already complete"

        # Check 2: Is anyone on the clock?
        team = self.current_team()
        if team is None:
            return False, "No team is on the clock"

        # Check 3: Does the player exist?
        player = self.league.get_player(player_id)
        if player is None:
            return False, f"Player {player_id} not found"

        # Check 4: Is the player still available?
        if player.is_drafted:
            return False, f"{player.name} has already been drafted"

        # Check 5: Region coverage must stay achievable
        violation = self.validator.region_violation(team, player)
        if violation:
            return False, violation

        return True, None

    def is_draft_complete(self) -> bool:
        """Check if every roster is full."""
        return self.league.all_rosters_full()
