"""Seat rotation for snake and linear drafts.

Every function here answers the same question: given how many picks have
already been made, which seat picks *next*? Seats are 0-based indexes into
the league's participant list.
"""

from typing import Callable, Dict, List


def snake_draft(total_picks: int, number_of_drafters: int) -> int:
    """Return the next seat in a snake draft.

    The pool is passed down the table and back again. The drafter at each
    end of the table picks twice in a row when the direction turns:
    0, 1, ..., n-1, n-1, ..., 1, 0, 0, 1, ...
    """
    _check_arguments(total_picks, number_of_drafters)

    next_seat = 0
    for i in range(total_picks + 2):
        # Turn-around: the end seat keeps the pool for a second pick
        if i % number_of_drafters == 0:
            continue
        if i % (2 * number_of_drafters) <= number_of_drafters:
            next_seat += 1
        else:
            next_seat -= 1
    return next_seat


def linear_draft(total_picks: int, number_of_drafters: int) -> int:
    """Return the next seat in a linear draft (0, 1, ..., n-1, 0, 1, ...)."""
    _check_arguments(total_picks, number_of_drafters)
    return (total_picks + 1) % number_of_drafters


DRAFT_TYPES: Dict[str, Callable[[int, int], int]] = {
    "snake": snake_draft,
    "linear": linear_draft,
}


def next_seat(draft_type: str, total_picks: int, number_of_drafters: int) -> int:
    """Dispatch to the rotation function registered for *draft_type*."""
    try:
        rotation = DRAFT_TYPES[draft_type]
    except KeyError:
        raise ValueError(
            f"Invalid draft type '{draft_type}'. "
            f"Must be one of: {sorted(DRAFT_TYPES)}"
        ) from None
    return rotation(total_picks, number_of_drafters)


def pick_order(draft_type: str, number_of_drafters: int, rounds: int) -> List[int]:
    """Full seat sequence for a draft of *rounds* rounds, first pick included."""
    _check_arguments(0, number_of_drafters)
    if rounds < 0:
        raise ValueError(f"rounds must be non-negative (got {rounds})")
    total = number_of_drafters * rounds
    if total == 0:
        return []

    order = [0]
    for picks_made in range(total - 1):
        order.append(next_seat(draft_type, picks_made, number_of_drafters))
    return order


def _check_arguments(total_picks: int, number_of_drafters: int):
    if number_of_drafters <= 0:
        raise ValueError(
            f"number_of_drafters must be positive (got {number_of_drafters})"
        )
    if total_picks < 0:
        raise ValueError(f"total_picks must be non-negative (got {total_picks})")
