"""Command-line front end for the Worlds fantasy league.

Loads the saved league, applies one command, prints the result and saves
the league back if it changed.

Usage:
    python -m src.run_league <command> [args...]

Examples:
    python -m src.run_league add-team "Baron Stealers"
    python -m src.run_league bulk-add players.csv
    python -m src.run_league start
    python -m src.run_league available MID LCK
    python -m src.run_league pick 3f9a0c1d
    python -m src.run_league stats 3f9a0c1d 4 1 7 312
    python -m src.run_league standings
"""

import logging
import sys
from typing import Callable, Dict, List, Optional, Tuple

from src.draft_manager.draft_controller import DraftController
from src.draft_manager.roster_validator import RosterValidator
from src.league.config import REGIONS, ROLES
from src.league.ingestion import players_from_frame, read_player_file
from src.league.league_setup import (
    LeagueSetupError,
    add_player,
    add_players,
    add_team,
    remove_team,
    rename_league,
    rename_team,
    reset_league,
    set_scoring,
)
from src.league.models import League
from src.league.standings import player_table, team_roster_table, team_standings
from src.league.state_persistence import LeagueImportError, StatePersistence
from src.league.stats_entry import record_game_stats
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)

Result = Tuple[League, Optional[str]]

USAGE = """Usage: python -m src.run_league [-v] <command> [args...]

  -v, --verbose                        Log progress to the console

Commands:
  show                                 League, draft status and rosters
  rename-league NAME
  add-team [NAME]
  rename-team TEAM_ID NAME
  remove-team TEAM_ID
  add-player NAME ROLE REGION [PROTEAM]
  bulk-add FILE                        Lines of Name,Role,ProTeam,Region
  scoring KILL ASSIST DEATH CS         Points per kill/assist/death/CS
  randomize                            Reshuffle draft order (before start)
  start
  available [ROLE|REGION ...]          Undrafted players
  pick PLAYER_ID                       Draft to the team on the clock
  undo                                 Revert the last pick
  stats PLAYER_ID KILLS DEATHS ASSISTS CS
  players                              Player leaderboard
  standings                            Team standings
  roster TEAM_ID
  export PATH
  import PATH
  reset                                Delete everything and start over
"""


class CommandError(Exception):
    """Raised for malformed command-line arguments."""


def _require_args(args: List[str], count: int, usage: str):
    if len(args) < count:
        raise CommandError(f"usage: {usage}")


def _number(value: str, what: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise CommandError(f"{what} must be a number, got '{value}'") from None
    return int(number) if number.is_integer() else number


def _print_frame(df) -> None:
    if df.empty:
        print("(none)")
    else:
        print(df.to_string(index=False))


# ── Setup commands ───────────────────────────────────────────────────


def _cmd_rename_league(league: League, args: List[str]) -> Result:
    return rename_league(league, " ".join(args)), None


def _cmd_add_team(league: League, args: List[str]) -> Result:
    updated = add_team(league, " ".join(args) or None)
    team = updated.teams[-1]
    print(f"Added {team.name} ({team.team_id})")
    return updated, None


def _cmd_rename_team(league: League, args: List[str]) -> Result:
    _require_args(args, 2, "rename-team TEAM_ID NAME")
    return rename_team(league, args[0], " ".join(args[1:])), None


def _cmd_remove_team(league: League, args: List[str]) -> Result:
    _require_args(args, 1, "remove-team TEAM_ID")
    return remove_team(league, args[0]), None


def _cmd_add_player(league: League, args: List[str]) -> Result:
    _require_args(args, 3, "add-player NAME ROLE REGION [PROTEAM]")
    pro_team = " ".join(args[3:]) or None
    updated = add_player(league, args[0], args[1], args[2], pro_team)
    player = updated.players[-1]
    print(f"Added {player.name} ({player.player_id})")
    return updated, None


def _cmd_bulk_add(league: League, args: List[str]) -> Result:
    _require_args(args, 1, "bulk-add FILE")
    players = players_from_frame(read_player_file(args[0]))
    if not players:
        return league, "No valid player lines found"
    print(f"Added {len(players)} players")
    return add_players(league, players), None


def _cmd_scoring(league: League, args: List[str]) -> Result:
    _require_args(args, 4, "scoring KILL ASSIST DEATH CS")
    kill, assist, death, cs = (
        _number(v, name) for v, name in zip(args, ("KILL", "ASSIST", "DEATH", "CS"))
    )
    updated = set_scoring(
        league, kill=kill, assist=assist, death=death, creep_score=cs
    )
    return updated, None


def _cmd_reset(league: League, args: List[str]) -> Result:
    return reset_league(), None


def _cmd_export(league: League, args: List[str]) -> Result:
    _require_args(args, 1, "export PATH")
    path = StatePersistence.export_league(league, args[0])
    print(f"Exported to {path}")
    return league, None


def _cmd_import(league: League, args: List[str]) -> Result:
    _require_args(args, 1, "import PATH")
    imported = StatePersistence.import_league(args[0])
    print(
        f"Imported '{imported.name}': {len(imported.teams)} teams, "
        f"{len(imported.players)} players"
    )
    return imported, None


# ── Draft commands ───────────────────────────────────────────────────


def _cmd_randomize(league: League, args: List[str]) -> Result:
    controller = DraftController(league)
    rejection = controller.randomize_order()
    if rejection is None:
        print("Round 1 order: " + ", ".join(t.name for t in controller.get_round_order()))
    return controller.league, rejection


def _cmd_start(league: League, args: List[str]) -> Result:
    controller = DraftController(league)
    rejection = controller.start_draft()
    if rejection is None:
        print("Draft started. Round 1 order: "
              + ", ".join(t.name for t in controller.get_round_order()))
    return controller.league, rejection


def _cmd_pick(league: League, args: List[str]) -> Result:
    _require_args(args, 1, "pick PLAYER_ID")
    controller = DraftController(league)
    team = controller.get_current_team()
    rejection = controller.make_pick(args[0])
    if rejection is None:
        player = controller.league.get_player(args[0])
        print(f"{team.name} drafts {player.name} ({player.role}, {player.region})")
        _print_clock(controller)
    return controller.league, rejection


def _cmd_undo(league: League, args: List[str]) -> Result:
    controller = DraftController(league)
    rejection = controller.undo_last_pick()
    if rejection is None:
        print("Last pick undone")
        _print_clock(controller)
    return controller.league, rejection


def _cmd_available(league: League, args: List[str]) -> Result:
    role = region = None
    for value in (a.upper() for a in args):
        if value in ROLES:
            role = value
        elif value in REGIONS:
            region = value
        else:
            raise CommandError(f"'{value}' is neither a role nor a region")
    controller = DraftController(league)
    for player in controller.get_available_players(role=role, region=region):
        pro_team = f" [{player.pro_team}]" if player.pro_team else ""
        print(f"{player.player_id}  {player.name}{pro_team}  {player.role}  {player.region}")
    return league, None


# ── Stats and tables ─────────────────────────────────────────────────


def _cmd_stats(league: League, args: List[str]) -> Result:
    _require_args(args, 5, "stats PLAYER_ID KILLS DEATHS ASSISTS CS")
    kills, deaths, assists, cs = (
        _number(v, name)
        for v, name in zip(args[1:5], ("KILLS", "DEATHS", "ASSISTS", "CS"))
    )
    return record_game_stats(league, args[0], kills, deaths, assists, cs)


def _cmd_players(league: League, args: List[str]) -> Result:
    _print_frame(player_table(league))
    return league, None


def _cmd_standings(league: League, args: List[str]) -> Result:
    _print_frame(team_standings(league))
    return league, None


def _cmd_roster(league: League, args: List[str]) -> Result:
    _require_args(args, 1, "roster TEAM_ID")
    if league.get_team(args[0]) is None:
        return league, f"Team {args[0]} not found"
    _print_frame(team_roster_table(league, args[0]))
    progress = DraftController(league).get_region_progress(args[0])
    print("Regions: " + "  ".join(
        f"{region} {'x' if filled else '-'}" for region, filled in progress.items()
    ))
    return league, None


def _print_clock(controller: DraftController) -> None:
    draft = controller.league.draft
    if controller.is_complete:
        print("Draft complete")
        return
    team = controller.get_current_team()
    if team is None:
        return
    missing = RosterValidator(controller.league).missing_regions(team)
    print(
        f"Round {draft.current_round}/{draft.total_rounds} - on the clock: "
        f"{team.name} (needs {', '.join(missing) or 'nothing'})"
    )


def _cmd_show(league: League, args: List[str]) -> Result:
    controller = DraftController(league)
    draft = league.draft
    print(league.name)
    if not draft.started:
        print("Draft not started")
    else:
        _print_clock(controller)
    print()
    _print_frame(team_standings(league))
    return league, None


COMMANDS: Dict[str, Callable[[League, List[str]], Result]] = {
    "show": _cmd_show,
    "rename-league": _cmd_rename_league,
    "add-team": _cmd_add_team,
    "rename-team": _cmd_rename_team,
    "remove-team": _cmd_remove_team,
    "add-player": _cmd_add_player,
    "bulk-add": _cmd_bulk_add,
    "scoring": _cmd_scoring,
    "randomize": _cmd_randomize,
    "start": _cmd_start,
    "available": _cmd_available,
    "pick": _cmd_pick,
    "undo": _cmd_undo,
    "stats": _cmd_stats,
    "players": _cmd_players,
    "standings": _cmd_standings,
    "roster": _cmd_roster,
    "export": _cmd_export,
    "import": _cmd_import,
    "reset": _cmd_reset,
}


def run_command(
    argv: List[str], persistence: Optional[StatePersistence] = None
) -> int:
    """Run one command against the stored league.

    Returns:
        Process exit status: 0 on success, 1 on a rejected or invalid
        operation, 2 on unknown command.
    """
    if not argv or argv[0] not in COMMANDS:
        print(USAGE)
        return 2

    persistence = persistence or StatePersistence()
    command, args = argv[0], argv[1:]

    try:
        league = persistence.load_league()
        updated, rejection = COMMANDS[command](league, args)
    except (CommandError, LeagueSetupError, LeagueImportError, FileNotFoundError) as e:
        logger.warning("%s failed: %s", command, e)
        print(f"Error: {e}")
        return 1

    if rejection is not None:
        print(f"Rejected: {rejection}")
        return 1

    if updated is not league:
        persistence.save_league(updated)
    return 0


def main() -> int:
    argv = sys.argv[1:]
    verbose = bool(argv) and argv[0] in ("-v", "--verbose")
    setup_logging("INFO" if verbose else "WARNING")
    return run_command(argv[1:] if verbose else argv)


if __name__ == "__main__":
    sys.exit(main())
