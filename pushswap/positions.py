"""Where a value sits, or belongs, in a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def index_of(stack: Iterable[int], value: int) -> int:
    """Return the index of the first ``value`` in ``stack``, or 0 if absent."""
    for index, item in enumerate(stack):
        if item == value:
            return index
    return 0


def position_a(stack: Sequence[int], value: int) -> int:
    """Return the index in ``stack`` at which ``value`` should be inserted.

    ``stack`` is expected to be ascending up to a rotation. A value that
    falls between the bottom and the top goes to the top; a value beyond
    either end of the range goes just before the smallest element.
    """
    if not stack:
        raise ValueError("no position in an empty stack")
    if stack[-1] < value < stack[0]:
        return 0
    lowest = min(stack)
    if value > max(stack) or value < lowest:
        return index_of(stack, lowest)
    for position, (current, following) in enumerate(pairwise(stack), start=1):
        if current <= value <= following:
            return position
    raise ValueError(f"no place for {value} in a stack that is not rotated ascending")


def position_b(stack: Sequence[int], value: int) -> int:
    """Return the index in ``stack`` at which ``value`` should be inserted.

    ``stack`` is expected to be descending up to a rotation. A value beyond
    either end of the range goes just before the largest element. An empty
    stack gives 0.
    """
    if not stack:
        return 0
    highest = max(stack)
    if value > highest or value < min(stack):
        return index_of(stack, highest)
    for position, (current, following) in enumerate(pairwise(stack), start=1):
        if following < value < current:
            return position
    if stack[0] < value < stack[-1]:
        return 0
    return len(stack) - 1


def has_numbers_below(stack: Iterable[int], limit: int) -> bool:
    """True if any element of ``stack`` is at most ``limit``."""
    return any(item <= limit for item in stack)