"""Draft state transitions - start, pick and undo.

Every transition takes a League and returns a DraftOutcome holding the next
League. A rejected transition returns the input league untouched together
with the reason, so callers never observe a half-applied pick.
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Tuple

from src.draft_manager.draft_order import is_valid_order, order_for_round, shuffle_order
from src.draft_manager.draft_rules import DraftRules
from src.league.models import DraftState, League

Shuffler = Callable[[Iterable[str]], Tuple[str, ...]]

NOTHING_TO_UNDO = "Nothing to undo"


@dataclass(frozen=True)
class DraftOutcome:
    """Result of a draft transition."""

    league: League
    rejection: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None


def start_draft(league: League, shuffle: Shuffler = shuffle_order) -> DraftOutcome:
    """Open round 1.

    Keeps an existing order when it still covers exactly the league's teams,
    otherwise asks *shuffle* for a fresh one.
    """
    ok, error = DraftRules(league).validate_start()
    if not ok:
        return DraftOutcome(league, error)

    draft = league.draft
    team_ids = league.team_ids()
    if draft.order and is_valid_order(draft.order, team_ids):
        order = tuple(draft.order)
    else:
        order = tuple(shuffle(team_ids))

    started = replace(
        draft,
        started=True,
        finished=False,
        order=order,
        current_round=1,
        current_pick_index=0,
        total_rounds=league.roster_size,
    )
    return DraftOutcome(replace(league, draft=started))


def randomize_order(league: League, shuffle: Shuffler = shuffle_order) -> DraftOutcome:
    """Replace the base order with a fresh shuffle. Pre-start only."""
    ok, error = DraftRules(league).validate_randomize()
    if not ok:
        return DraftOutcome(league, error)
    order = tuple(shuffle(league.team_ids()))
    return DraftOutcome(replace(league, draft=replace(league.draft, order=order)))


def _advance(league: League) -> DraftState:
    """Move the pointer past the pick that was just made."""
    draft = league.draft
    if DraftRules(league).is_draft_complete():
        return replace(draft, finished=True)

    round_order = order_for_round(draft.order, draft.current_round, draft.snake)
    if draft.current_pick_index + 1 >= len(round_order):
        return replace(
            draft, current_round=draft.current_round + 1, current_pick_index=0
        )
    return replace(draft, current_pick_index=draft.current_pick_index + 1)


def make_pick(league: League, player_id: str) -> DraftOutcome:
    """Draft *player_id* to the team on the clock and advance the pointer."""
    rules = DraftRules(league)
    ok, error = rules.validate_pick(player_id)
    if not ok:
        return DraftOutcome(league, error)

    team = rules.current_team()
    player = league.get_player(player_id)

    picked = league.with_team(team.add_player(player.player_id)).with_player(
        replace(player, drafted_by=team.team_id)
    )
    return DraftOutcome(replace(picked, draft=_advance(picked)))


def _previous_slot(draft: DraftState) -> Optional[Tuple[int, int]]:
    """(round, index) one step behind the pointer, or None at the very start."""
    round_ = draft.current_round
    index = draft.current_pick_index - 1
    if index < 0:
        round_ -= 1
        if round_ < 1:
            return None
        index = len(order_for_round(draft.order, round_, draft.snake)) - 1
    return round_, index


def undo_last_pick(league: League) -> DraftOutcome:
    """Revert the most recent pick.

    The last pick of a draft does not advance the pointer, so undoing it
    reopens the draft and reverts the slot under the pointer. Any other undo
    steps the pointer back one slot first.
    """
    draft = league.draft
    if not draft.started:
        return DraftOutcome(league, NOTHING_TO_UNDO)

    if draft.finished:
        slot = (draft.current_round, draft.current_pick_index)
    else:
        slot = _previous_slot(draft)
    if slot is None:
        return DraftOutcome(league, NOTHING_TO_UNDO)

    round_, index = slot
    order = order_for_round(draft.order, round_, draft.snake)
    team = league.get_team(order[index]) if 0 <= index < len(order) else None
    if team is None or not team.roster:
        return DraftOutcome(league, NOTHING_TO_UNDO)

    player = league.get_player(team.roster[-1])
    if player is None:
        return DraftOutcome(league, NOTHING_TO_UNDO)

    reverted = league.with_team(team.remove_last_player()).with_player(
        replace(player, drafted_by=None)
    )
    rewound = replace(
        draft, finished=False, current_round=round_, current_pick_index=index
    )
    return DraftOutcome(replace(reverted, draft=rewound))
