from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_engine import (
    DraftOutcome,
    make_pick,
    randomize_order,
    start_draft,
    undo_last_pick,
)
from src.draft_manager.draft_order import order_for_round, shuffle_order
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.roster_validator import RosterValidator

__all__ = [
    "DraftController",
    "DraftOutcome",
    "DraftRules",
    "RosterValidator",
    "make_pick",
    "order_for_round",
    "randomize_order",
    "shuffle_order",
    "start_draft",
    "undo_last_pick",
]
