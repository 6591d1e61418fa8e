"""Fixed move sequences for sorting three and five numbers."""

from __future__ import annotations

from typing import Callable, Sequence

from pushswap.parsing import assign_indices
from pushswap.stack import Stacks

_Move = Callable[[Stacks], None]

# Moves that put three items ranked 0, 1 and 2 into order, keyed by their ranks top first.
_THREE_MOVES: dict[tuple[int, int, int], Sequence[_Move]] = {
    (1, 0, 2): (Stacks.swap_a,),
    (2, 1, 0): (Stacks.swap_a, Stacks.reverse_a),
    (2, 0, 1): (Stacks.rotate_a,),
    (0, 2, 1): (Stacks.swap_a, Stacks.rotate_a),
    (1, 2, 0): (Stacks.reverse_a,),
}

# Moves that bring the two items waiting on ``b`` back into ``a``, keyed by
# their ranks among all five numbers, top of ``b`` first.
_PAIR_MOVES: dict[tuple[int, int], Sequence[_Move]] = {
    (1, 0): (Stacks.push_a, Stacks.push_a),
    (2, 0): (Stacks.push_a, Stacks.swap_a, Stacks.push_a),
    (3, 0): (
        Stacks.reverse_a,
        Stacks.push_a,
        Stacks.reverse_a,
        Stacks.reverse_a,
        Stacks.push_a,
    ),
    (4, 0): (Stacks.push_a, Stacks.rotate_a, Stacks.push_a),
    (2, 1): (Stacks.rotate_a, Stacks.push_a, Stacks.push_a, Stacks.reverse_a),
    (3, 1): (
        Stacks.rotate_a,
        Stacks.push_a,
        Stacks.reverse_a,
        Stacks.push_a,
        Stacks.reverse_a,
    ),
    (4, 1): (Stacks.push_a, Stacks.rotate_a, Stacks.push_a, Stacks.swap_a),
    (3, 2): (
        Stacks.reverse_a,
        Stacks.reverse_a,
        Stacks.push_a,
        Stacks.push_a,
        Stacks.reverse_a,
        Stacks.reverse_a,
    ),
    (4, 2): (
        Stacks.push_a,
        Stacks.rotate_a,
        Stacks.rotate_a,
        Stacks.push_a,
        Stacks.swap_a,
        Stacks.reverse_a,
    ),
    (4, 3): (
        Stacks.swap_b,
        Stacks.push_a,
        Stacks.rotate_a,
        Stacks.push_a,
        Stacks.rotate_a,
    ),
}


def _play(stacks: Stacks, moves: Sequence[_Move]) -> None:
    for move in moves:
        move(stacks)


def sort_three(stacks: Stacks) -> None:
    """Order the top three items of ``a``, whose ranks must be 0, 1 and 2."""
    if len(stacks.a) < 3:
        raise ValueError("stack a holds fewer than three items")
    key = tuple(item.index for item in stacks.a[:3])
    _play(stacks, _THREE_MOVES.get(key, ()))


def insert_pair(stacks: Stacks) -> None:
    """Bring the two items on ``b`` back into the three sorted items on ``a``."""
    if len(stacks.b) < 2:
        raise ValueError("stack b holds fewer than two items")
    if stacks.b[0].index < stacks.b[1].index:
        stacks.swap_b()
    key = (stacks.b[0].index, stacks.b[1].index)
    _play(stacks, _PAIR_MOVES.get(key, ()))


def sort_five(stacks: Stacks) -> None:
    """Sort five numbers: park two on ``b``, sort three, then bring the two back."""
    assign_indices(stacks.a)
    stacks.push_b()
    stacks.push_b()
    assign_indices(stacks.a)
    sort_three(stacks)
    insert_pair(stacks)