"""
Internal helpers for tests (not imported by app).
"""
from __future__ import annotations
from itertools import cycle
from typing import Iterable, List


class ScriptedRandom:
    """Stand-in for numpy.random.Generator that replays a fixed list of picks."""

    def __init__(self, picks: Iterable[int]):
        self.picks: List[int] = list(picks)
        self._it = cycle(self.picks)
        self.calls: List[int] = []  # bound passed on each call

    def integers(self, high: int) -> int:
        self.calls.append(high)
        return next(self._it) % high


def is_derangement(assignment, participants) -> bool:
    return (
        sorted(assignment) == sorted(participants)
        and sorted(assignment.values()) == sorted(participants)
        and all(g != r for g, r in assignment.items())
    )
