"""Roster feasibility - every completed roster covers each region once."""

from typing import Dict, List, Optional, Set, Tuple

from src.league.config import REGIONS
from src.league.models import FantasyTeam, League, Player


class RosterValidator:
    """Validates region coverage of rosters against one league snapshot."""

    def __init__(self, league: League):
        self.league = league

    def regions_present(self, team: FantasyTeam) -> Set[str]:
        """Regions already on *team*'s roster. Unknown player ids are skipped."""
        present = set()
        for player_id in team.roster:
            player = self.league.get_player(player_id)
            if player is not None:
                present.add(player.region)
        return present

    def missing_regions(self, team: FantasyTeam) -> List[str]:
        """Regions the team still needs, in canonical region order."""
        present = self.regions_present(team)
        return [region for region in REGIONS if region not in present]

    def region_progress(self, team: FantasyTeam) -> Dict[str, bool]:
        """Map of region -> whether the team has filled it."""
        present = self.regions_present(team)
        return {region: region in present for region in REGIONS}

    def region_violation(
        self, team: FantasyTeam, candidate: Player
    ) -> Optional[str]:
        """
        Check whether drafting *candidate* keeps full region coverage possible.

        A pick is legal only if, after it, the regions still missing fit into
        the slots still open. Early on this leaves free choice; near the end
        of a roster only players from missing regions remain legal.

        Returns:
            A human-readable reason if the pick is blocked, else None.
        """
        roster_size = self.league.roster_size
        filled = team.get_roster_count()
        if filled >= roster_size:
            return f"Roster full ({roster_size})"

        present = self.regions_present(team)
        after = present | {candidate.region}
        missing_after = [region for region in REGIONS if region not in after]
        remaining_after = roster_size - (filled + 1)

        if len(missing_after) > remaining_after:
            needed = [region for region in REGIONS if region not in present]
            return f"Pick must be from a missing region now: {', '.join(needed)}"

        return None

    def validate_final_roster(self, team: FantasyTeam) -> Tuple[bool, List[str]]:
        """
        Validate that a completed roster has exactly one player per region.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if team.get_roster_count() != self.league.roster_size:
            errors.append(
                f"Roster has {team.get_roster_count()} players "
                f"(need {self.league.roster_size})"
            )

        counts = {region: 0 for region in REGIONS}
        for player_id in team.roster:
            player = self.league.get_player(player_id)
            if player is None:
                errors.append(f"Unknown player {player_id} on roster")
                continue
            counts[player.region] += 1

        for region, count in counts.items():
            if count == 0:
                errors.append(f"Missing {region}")
            elif count > 1:
                errors.append(f"Too many {region} players (have {count}, max 1)")

        return (len(errors) == 0, errors)
