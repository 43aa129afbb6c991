"""Draft turn order - base order shuffling and per-round sequencing."""

import random
from typing import Iterable, Optional, Sequence, Tuple


def order_for_round(
    base_order: Sequence[str], round: int, snake: bool
) -> Tuple[str, ...]:
    """Team ids in the order they pick during *round* (1-indexed).

    Snake drafts run the base order in odd rounds and reverse it in even
    rounds. Linear drafts always use the base order.
    """
    if not snake or round % 2 == 1:
        return tuple(base_order)
    return tuple(reversed(base_order))


def shuffle_order(
    team_ids: Iterable[str], rng: Optional[random.Random] = None
) -> Tuple[str, ...]:
    """Uniformly random permutation of *team_ids*."""
    ids = list(team_ids)
    (rng or random).shuffle(ids)
    return tuple(ids)


def is_valid_order(order: Sequence[str], team_ids: Iterable[str]) -> bool:
    """Whether *order* is a permutation of *team_ids*."""
    ids = list(team_ids)
    return len(order) == len(ids) and sorted(order) == sorted(ids)
