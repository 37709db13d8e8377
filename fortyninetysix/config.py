"""
Configuration for a 4096 game session.
"""

from dataclasses import dataclass

from fortyninetysix.utils.store import DEFAULT_STORAGE_KEY


@dataclass(frozen=True)
class GameConfig:
    """
    Settings of a game session.

    The board size and spawn probabilities are fixed by the engine and are not configurable.
    """

    # ##>: Tile value that flags the game as won (play may continue).
    target: int = 4096

    # ##>: Tiles spawned on a fresh board.
    initial_tiles: int = 2

    # ##>: Key under which the best score is kept in a key/value store.
    storage_key: str = DEFAULT_STORAGE_KEY

    # ##>: Window title.
    title: str = '4096'
