"""Tests for the command-line front end."""

from dataclasses import replace

import pytest

from src.league.models import DraftState
from src.league.state_persistence import StatePersistence
from src.run_league import run_command


@pytest.fixture
def persistence(storage_dir):
    return StatePersistence(storage_dir=storage_dir)


@pytest.fixture
def saved(persistence, draft_league):
    """Store the three-team league with a fixed A, B, C draft order."""
    league = replace(draft_league, draft=DraftState(order=("A", "B", "C")))
    persistence.save_league(league)
    return league


def _run(persistence, *argv):
    return run_command(list(argv), persistence=persistence)


# ── Dispatch ─────────────────────────────────────────────────────────


class TestDispatch:
    def test_no_command_prints_usage(self, persistence, capsys):
        assert _run(persistence) == 2
        assert "Usage:" in capsys.readouterr().out

    def test_unknown_command(self, persistence, capsys):
        assert _run(persistence, "teleport") == 2
        assert "Commands:" in capsys.readouterr().out

    def test_show_on_fresh_storage(self, persistence, capsys):
        assert _run(persistence, "show") == 0
        out = capsys.readouterr().out
        assert "Worlds 2025 Fantasy League" in out
        assert "Draft not started" in out
        assert not persistence.snapshot_path.exists()


# ── Setup ────────────────────────────────────────────────────────────


class TestSetupCommands:
    def test_add_team(self, persistence, saved, capsys):
        assert _run(persistence, "add-team", "Baron", "Stealers") == 0
        assert "Added Baron Stealers" in capsys.readouterr().out
        assert persistence.load_league().teams[-1].name == "Baron Stealers"

    def test_rename_league(self, persistence, saved):
        assert _run(persistence, "rename-league", "Worlds", "Pickem") == 0
        assert persistence.load_league().name == "Worlds Pickem"

    def test_add_player(self, persistence, saved):
        assert _run(persistence, "add-player", "Faker", "mid", "lck", "T1") == 0
        player = persistence.load_league().players[-1]
        assert (player.name, player.role, player.region, player.pro_team) == (
            "Faker", "MID", "LCK", "T1",
        )

    def test_add_player_invalid_region(self, persistence, saved, capsys):
        assert _run(persistence, "add-player", "Faker", "MID", "KR") == 1
        assert "Error: Invalid region" in capsys.readouterr().out
        assert persistence.load_league() == saved

    def test_missing_arguments(self, persistence, saved, capsys):
        assert _run(persistence, "rename-team", "A") == 1
        assert "usage: rename-team" in capsys.readouterr().out

    def test_bulk_add(self, persistence, saved, tmp_path, capsys):
        path = tmp_path / "players.csv"
        path.write_text("Faker,MID,T1,LCK\nCaps, mid, G2, lec\nbad line\n")
        assert _run(persistence, "bulk-add", str(path)) == 0
        assert "Added 2 players" in capsys.readouterr().out
        names = [p.name for p in persistence.load_league().players[-2:]]
        assert names == ["Faker", "Caps"]

    def test_bulk_add_nothing_valid(self, persistence, saved, tmp_path, capsys):
        path = tmp_path / "players.csv"
        path.write_text("nope\n")
        assert _run(persistence, "bulk-add", str(path)) == 1
        assert "Rejected: No valid player lines found" in capsys.readouterr().out

    def test_bulk_add_missing_file(self, persistence, saved, tmp_path, capsys):
        assert _run(persistence, "bulk-add", str(tmp_path / "nope.csv")) == 1
        assert "Error: Player file not found" in capsys.readouterr().out

    def test_scoring(self, persistence, saved):
        assert _run(persistence, "scoring", "2", "1", "-0.5", "0.02") == 0
        scoring = persistence.load_league().scoring
        assert (scoring.kill, scoring.assist, scoring.death, scoring.creep_score) == (
            2, 1, -0.5, 0.02,
        )

    def test_scoring_not_a_number(self, persistence, saved, capsys):
        assert _run(persistence, "scoring", "two", "1", "-1", "0.01") == 1
        assert "KILL must be a number" in capsys.readouterr().out

    def test_reset(self, persistence, saved):
        assert _run(persistence, "reset") == 0
        league = persistence.load_league()
        assert len(league.teams) == 2
        assert league.players == ()


# ── Draft ────────────────────────────────────────────────────────────


class TestDraftCommands:
    def test_start_and_pick(self, persistence, saved, capsys):
        assert _run(persistence, "start") == 0
        assert "Team A, Team B, Team C" in capsys.readouterr().out
        assert _run(persistence, "pick", "lck1") == 0
        out = capsys.readouterr().out
        assert "Team A drafts LCK Player 1 (MID, LCK)" in out
        assert "on the clock: Team B" in out
        assert "(needs LCK, LPL, LEC, LTA, LCP)" in out
        league = persistence.load_league()
        assert league.get_team("A").roster == ("lck1",)

    def test_pick_before_start_rejected(self, persistence, saved, capsys):
        assert _run(persistence, "pick", "lck1") == 1
        assert "Rejected: Draft has not started" in capsys.readouterr().out
        assert persistence.load_league() == saved

    def test_region_violation_rejected(self, persistence, saved, capsys):
        _run(persistence, "start")
        for player_id in ("lck1", "lpl1", "lec1", "lta1", "lcp1"):
            _run(persistence, "pick", player_id)
        capsys.readouterr()
        assert _run(persistence, "pick", "lck2") == 1
        assert "Pick must be from a missing region now" in capsys.readouterr().out

    def test_undo(self, persistence, saved, capsys):
        _run(persistence, "start")
        _run(persistence, "pick", "lck1")
        assert _run(persistence, "undo") == 0
        assert "Last pick undone" in capsys.readouterr().out
        assert persistence.load_league().get_player("lck1").drafted_by is None
        assert _run(persistence, "undo") == 1

    def test_randomize_after_start_rejected(self, persistence, saved):
        _run(persistence, "start")
        assert _run(persistence, "randomize") == 1

    def test_available_filters(self, persistence, saved, capsys):
        assert _run(persistence, "available", "lck") == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        assert all("LCK" in line for line in lines)

    def test_available_bad_filter(self, persistence, saved, capsys):
        assert _run(persistence, "available", "XYZ") == 1
        assert "neither a role nor a region" in capsys.readouterr().out

    def test_setup_blocked_during_draft(self, persistence, saved, capsys):
        _run(persistence, "start")
        assert _run(persistence, "add-team") == 1
        assert "once the draft has started" in capsys.readouterr().out


# ── Stats and tables ─────────────────────────────────────────────────


class TestStatsAndTables:
    def test_stats(self, persistence, saved):
        assert _run(persistence, "stats", "lck1", "4", "1", "7", "312") == 0
        stats = persistence.load_league().get_player("lck1").stats
        assert (stats.kills, stats.deaths, stats.assists, stats.creep_score) == (4, 1, 7, 312)
        assert stats.games_played == 1

    def test_stats_unknown_player(self, persistence, saved, capsys):
        assert _run(persistence, "stats", "ghost", "1", "0", "0", "0") == 1
        assert "Rejected: Player ghost not found" in capsys.readouterr().out

    def test_stats_negative_correction(self, persistence, saved):
        _run(persistence, "stats", "lck1", "3", "0", "0", "0")
        assert _run(persistence, "stats", "lck1", "-1", "0", "0", "0") == 0
        assert persistence.load_league().get_player("lck1").stats.kills == 2

    def test_players_table(self, persistence, saved, capsys):
        _run(persistence, "stats", "lpl2", "9", "0", "0", "0")
        capsys.readouterr()
        assert _run(persistence, "players") == 0
        lines = capsys.readouterr().out.splitlines()
        assert "lpl2" in lines[1]

    def test_standings(self, persistence, saved, capsys):
        assert _run(persistence, "standings") == 0
        out = capsys.readouterr().out
        for name in ("Team A", "Team B", "Team C"):
            assert name in out

    def test_roster_unknown_team(self, persistence, saved, capsys):
        assert _run(persistence, "roster", "Z") == 1
        assert "Rejected: Team Z not found" in capsys.readouterr().out

    def test_roster_empty(self, persistence, saved, capsys):
        assert _run(persistence, "roster", "A") == 0
        assert "(none)" in capsys.readouterr().out

    def test_roster_region_progress(self, persistence, saved, capsys):
        _run(persistence, "start")
        _run(persistence, "pick", "lck1")
        capsys.readouterr()
        assert _run(persistence, "roster", "A") == 0
        out = capsys.readouterr().out
        assert "LCK Player 1" in out
        assert "Regions: LCK x  LPL -  LEC -  LTA -  LCP -" in out


# ── Import and export ────────────────────────────────────────────────


class TestImportExportCommands:
    def test_export_then_import(self, persistence, saved, tmp_path):
        path = tmp_path / "backup.json"
        assert _run(persistence, "export", str(path)) == 0
        _run(persistence, "reset")
        assert _run(persistence, "import", str(path)) == 0
        assert persistence.load_league() == saved

    def test_import_invalid_file(self, persistence, saved, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{{{")
        assert _run(persistence, "import", str(path)) == 1
        assert "Error: Invalid league file" in capsys.readouterr().out
        assert persistence.load_league() == saved
