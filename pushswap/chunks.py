"""Chunk-based moves for larger inputs."""

from __future__ import annotations

from typing import Callable, Sequence

from pushswap.stack import Item, Stacks


def needs_sorting(items: Sequence[Item]) -> bool:
    """True when some item ranks below the item right after it."""
    return any(first.index < second.index for first, second in zip(items, items[1:]))


def _chunk_threshold(items: Sequence[Item]) -> int:
    if not items:
        raise ValueError("empty stack")
    step = len(items) // 5
    lowest = min(item.index for item in items)
    threshold = step
    if lowest > threshold:
        if step == 0:
            raise ValueError("no item falls in any chunk")
        threshold += -(-(lowest - threshold) // step) * step
    return threshold


def scan_from_top(items: Sequence[Item]) -> int:
    """The first number, from the top, in the lowest non-empty chunk of ranks.

    Chunks are a fifth of the stack's size wide.
    """
    threshold = _chunk_threshold(items)
    return next(item.nbr for item in items if item.index <= threshold)


def scan_from_bottom(items: Sequence[Item]) -> int:
    """The last number, from the top, in the lowest non-empty chunk of ranks."""
    threshold = _chunk_threshold(items)
    return next(item.nbr for item in reversed(items) if item.index <= threshold)


def _within_size(items: Sequence[Item]) -> list[Item]:
    if not items:
        raise ValueError("empty stack")
    found = [item for item in items if item.index <= len(items)]
    if not found:
        raise ValueError("no item ranks within the stack size")
    return found


def scan_from_top_b(items: Sequence[Item]) -> int:
    """The first number whose rank is at most the stack's size."""
    return _within_size(items)[0].nbr


def scan_from_bottom_b(items: Sequence[Item]) -> int:
    """The last number whose rank is at most the stack's size."""
    return _within_size(items)[-1].nbr


def _lift(
    stack: list[Item],
    top: int,
    bottom: int,
    rotate: Callable[[], None],
    reverse: Callable[[], None],
) -> None:
    count = len(stack)
    for pos, item in enumerate(stack):
        item.pos = pos
    for item in stack:
        if item.nbr == top:
            top = item.pos
        if item.nbr == bottom:
            bottom = count - item.pos
    if count < 2:
        return
    if bottom >= top:
        for _ in range(top):
            rotate()
    else:
        for _ in range(bottom):
            reverse()


def move_to_top(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way to bring a low-chunk number to its top."""
    a = stacks.a
    _lift(a, scan_from_top(a), scan_from_bottom(a), stacks.rotate_a, stacks.reverse_a)


def move_to_top_b(stacks: Stacks) -> None:
    """Rotate ``b`` the shorter way to bring a number ranked within its size to its top."""
    b = stacks.b
    _lift(
        b, scan_from_top_b(b), scan_from_bottom_b(b), stacks.rotate_b, stacks.reverse_b
    )


def bring_max_to_top_b(stacks: Stacks) -> None:
    """Rotate ``b`` the shorter way until the item ranked ``len(b) - 1`` is on top."""
    size = len(stacks.b)
    place = next(
        (pos for pos, item in enumerate(stacks.b) if item.index == size - 1), size
    )
    if place < size // 2:
        for _ in range(place):
            stacks.rotate_b()
    else:
        for _ in range(size - place):
            stacks.reverse_b()


def _position(stack: list[Item], target: Item) -> int:
    return next(pos for pos, item in enumerate(stack) if item is target)


def check_and_push_b(stacks: Stacks) -> None:
    """Push from ``a`` to ``b``, fixing the first inverted pair met while walking ``b``."""
    if len(stacks.b) < 2:
        stacks.push_b()
        return
    current = stacks.b[0]
    while _position(stacks.b, current) + 2 < len(stacks.b):
        place = _position(stacks.b, current)
        if current.index < stacks.b[place + 1].index:
            stacks.swap_b()
            stacks.reverse_b()
            stacks.push_b()
            return
        if not stacks.a:
            break
        current = stacks.b[0]
        stacks.push_b()
        current = stacks.b[_position(stacks.b, current) + 1]
    stacks.push_b()


def organise_rest_a(stacks: Stacks) -> None:
    """Keep lifting low-chunk numbers in ``a`` while it has an inverted pair.

    Stops as soon as a lift leaves ``a`` unchanged.
    """
    while any(x.index > y.index for x, y in zip(stacks.a, stacks.a[1:])):
        before = list(stacks.a)
        move_to_top(stacks)
        if all(x is y for x, y in zip(before, stacks.a)):
            break