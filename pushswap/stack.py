"""The two stacks and the operations that move numbers between them."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, TextIO


@dataclass
class Item:
    """One number on a stack, with its rank among all numbers and its position."""

    nbr: int
    index: int = -1
    pos: int = 0


def _renumber(stack: list[Item]) -> None:
    for pos, item in enumerate(stack):
        item.pos = pos


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is element 0.

    Every operation that changes a stack writes its name, one per line, to
    ``out`` (standard error when none is given).
    """

    def __init__(self, items: Iterable[Item] = (), out: TextIO | None = None) -> None:
        self.a: list[Item] = list(items)
        self.b: list[Item] = []
        self._out = out

    def _emit(self, name: str) -> None:
        stream = self._out if self._out is not None else sys.stderr
        stream.write(name + "\n")

    @staticmethod
    def _swap(stack: list[Item]) -> bool:
        # The top two are only exchanged when the stack holds at least three items.
        if len(stack) < 3:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack.append(stack.pop(0))
        return True

    @staticmethod
    def _reverse(stack: list[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack.insert(0, stack.pop())
        return True

    def swap_a(self) -> None:
        """Exchange the top two items of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def swap_b(self) -> None:
        """Exchange the top two items of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def swap_both(self) -> None:
        """Swap on both stacks."""
        self.swap_a()
        self.swap_b()
        self._emit("sr")

    def rotate_a(self) -> None:
        """Move the top item of ``a`` to its bottom."""
        if self._rotate(self.a):
            self._emit("ra")

    def rotate_b(self) -> None:
        """Move the top item of ``b`` to its bottom."""
        if self._rotate(self.b):
            self._emit("rb")

    def rotate_both(self) -> None:
        """Rotate both stacks."""
        self.rotate_a()
        self.rotate_b()
        self._emit("rr")

    def reverse_a(self) -> None:
        """Move the bottom item of ``a`` to its top."""
        if self._reverse(self.a):
            self._emit("rra")

    def reverse_b(self) -> None:
        """Move the bottom item of ``b`` to its top."""
        if self._reverse(self.b):
            self._emit("rrb")

    def reverse_both(self) -> None:
        """Reverse-rotate both stacks."""
        self.reverse_a()
        self.reverse_b()
        self._emit("rrr")

    def push_a(self) -> None:
        """Move the top item of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        _renumber(self.a)
        _renumber(self.b)
        self._emit("pa")

    def push_b(self) -> None:
        """Move the top item of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        _renumber(self.a)
        _renumber(self.b)
        self._emit("pb")

    def values_a(self) -> list[int]:
        """The numbers on ``a``, top first."""
        return [item.nbr for item in self.a]

    def values_b(self) -> list[int]:
        """The numbers on ``b``, top first."""
        return [item.nbr for item in self.b]