"""
Best-score stores injected into a game session.
"""

from collections.abc import MutableMapping
from math import isfinite
from typing import Protocol

DEFAULT_STORAGE_KEY = 'base4096_best'


class ScoreStore(Protocol):
    """Where a session reads and writes its best score."""

    def read(self) -> int:
        ...

    def write(self, score: int) -> None:
        ...


class MemoryScoreStore:
    """
    Best score kept in memory, lost when the process exits.

    Parameters
    ----------
    initial : int, optional
        The starting best score (default is 0).
    """

    def __init__(self, initial: int = 0):
        self._score = initial

    def read(self) -> int:
        return self._score

    def write(self, score: int) -> None:
        self._score = score


class MappingScoreStore:
    """
    Best score kept as text under a fixed key of a string key/value storage.

    Parameters
    ----------
    storage : MutableMapping[str, str]
        The backing storage, for instance a ``dict`` or a ``shelve`` shelf.
    key : str, optional
        Key of the best score (default is ``'base4096_best'``).

    Notes
    -----
    A missing, non-numeric or non-finite stored value reads as 0.
    """

    def __init__(self, storage: MutableMapping[str, str], key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self.key = key

    def read(self) -> int:
        raw = self._storage.get(self.key)
        if not raw:
            return 0

        try:
            value = float(raw)
        except (TypeError, ValueError):
            return 0
        return int(value) if isfinite(value) else 0

    def write(self, score: int) -> None:
        self._storage[self.key] = str(score)
