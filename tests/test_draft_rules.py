"""Tests for pick legality checks."""

from dataclasses import replace

from src.draft_manager.draft_rules import DraftRules
from src.league.models import DraftState


def _started(league, order=("A", "B", "C"), **draft_fields):
    draft = DraftState(started=True, order=order, **draft_fields)
    return replace(league, draft=draft)


class TestCurrentTeam:
    def test_nobody_on_clock_before_start(self, draft_league):
        assert DraftRules(draft_league).current_team_id() is None
        assert DraftRules(draft_league).current_team() is None

    def test_first_team_on_clock_after_start(self, draft_league):
        league = _started(draft_league)
        assert DraftRules(league).current_team_id() == "A"
        assert DraftRules(league).current_team().name == "Team A"

    def test_even_round_runs_backwards(self, draft_league):
        league = _started(draft_league, current_round=2, current_pick_index=0)
        assert DraftRules(league).current_team_id() == "C"

    def test_linear_even_round(self, draft_league):
        league = _started(draft_league, current_round=2, snake=False)
        assert DraftRules(league).current_team_id() == "A"

    def test_nobody_on_clock_when_finished(self, draft_league):
        league = _started(draft_league, finished=True)
        assert DraftRules(league).current_team_id() is None

    def test_out_of_range_pointer(self, draft_league):
        league = _started(draft_league, current_pick_index=3)
        assert DraftRules(league).current_team_id() is None


class TestValidateStartAndRandomize:
    def test_start_allowed_before_draft(self, draft_league):
        assert DraftRules(draft_league).validate_start() == (True, None)

    def test_start_rejected_once_started(self, draft_league):
        league = _started(draft_league)
        assert DraftRules(league).validate_start() == (False, "Draft already started")

    def test_randomize_allowed_before_draft(self, draft_league):
        assert DraftRules(draft_league).validate_randomize() == (True, None)

    def test_randomize_rejected_once_started(self, draft_league):
        ok, reason = DraftRules(_started(draft_league)).validate_randomize()
        assert not ok
        assert "before the draft starts" in reason


class TestValidatePick:
    def test_legal_pick(self, draft_league):
        assert DraftRules(_started(draft_league)).validate_pick("lck1") == (True, None)

    def test_draft_not_started(self, draft_league):
        assert DraftRules(draft_league).validate_pick("lck1") == (
            False,
            "Draft has not started",
        )

    def test_draft_finished(self, draft_league):
        league = _started(draft_league, finished=True)
        assert DraftRules(league).validate_pick("lck1") == (
            False,
            "Draft is already complete",
        )

    def test_empty_order(self, draft_league):
        league = _started(draft_league, order=())
        assert DraftRules(league).validate_pick("lck1") == (
            False,
            "No team is on the clock",
        )

    def test_unknown_player(self, draft_league):
        assert DraftRules(_started(draft_league)).validate_pick("nobody") == (
            False,
            "Player nobody not found",
        )

    def test_already_drafted(self, draft_league):
        league = _started(draft_league)
        league = league.with_player(replace(league.get_player("lck1"), drafted_by="B"))
        assert DraftRules(league).validate_pick("lck1") == (
            False,
            "LCK Player 1 has already been drafted",
        )

    def test_region_violation(self, draft_league):
        league = _started(draft_league)
        team = league.get_team("A")
        league = league.with_team(replace(team, roster=("lck1",)))
        league = league.with_player(replace(league.get_player("lck1"), drafted_by="A"))
        ok, reason = DraftRules(league).validate_pick("lck2")
        assert not ok
        assert reason == "Pick must be from a missing region now: LPL, LEC, LTA, LCP"


class TestIsDraftComplete:
    def test_incomplete_with_empty_rosters(self, draft_league):
        assert not DraftRules(draft_league).is_draft_complete()

    def test_complete_when_every_roster_full(self, draft_league):
        league = draft_league
        for team_id, suffix in (("A", "1"), ("B", "2"), ("C", "3")):
            roster = tuple(f"{r}{suffix}" for r in ("lck", "lpl", "lec", "lta", "lcp"))
            league = league.with_team(replace(league.get_team(team_id), roster=roster))
        assert DraftRules(league).is_draft_complete()
