"""Selecting the largest values of a sequence in a single pass."""

from __future__ import annotations


def find_two_largest(values):
    """Return ``(largest, second_largest)`` of ``values`` in one pass.

    Equal values count separately, so ``[5, 5]`` gives ``(5, 5)``.
    Raises ValueError when fewer than two values are given.
    """
    iterator = iter(values)
    try:
        first = next(iterator)
        second = next(iterator)
    except StopIteration:
        raise ValueError("at least two values are required") from None
    best, runner_up = (first, second) if first >= second else (second, first)
    for value in iterator:
        if value > best:
            best, runner_up = value, best
        elif value > runner_up:
            runner_up = value
    return best, runner_up