"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from typing import TextIO


class Stacks:
    """Stacks ``a`` and ``b``, each with its top at index 0.

    Every move that changes the stacks is appended to ``moves`` and its
    name is written, one per line, to ``stream`` (standard output when
    ``stream`` is None). A move that cannot apply changes nothing and is
    not recorded.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.moves: list[str] = []
        self.stream: TextIO | None = None

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        (self.stream if self.stream is not None else sys.stdout).write(name + "\n")

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two of both stacks; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top element becomes the bottom one."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top element becomes the bottom one."""
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks up; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom element becomes the top one."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom element becomes the top one."""
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(1)
        self.b.rotate(1)
        self._emit("rrr")