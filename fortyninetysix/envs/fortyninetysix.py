"""4096 game session: drives the board engine and keeps score, best score and game status."""

import logging
from typing import Callable

from numpy import ndarray

from fortyninetysix.config import GameConfig
from fortyninetysix.core.gameboard import Direction, apply_move, fill_board, has_won, spawn_tile
from fortyninetysix.core.gamemove import has_any_move
from fortyninetysix.utils.store import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)


class FortyNinetySix:
    """
    4096 game session.

    This class plays one turn at a time against its current board: it moves, spawns a tile after a
    successful move, adds the merge score, keeps the best score in an injected store and tracks the
    won and game-over flags.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: ScoreStore | None = None,
        on_ready: Callable[[], None] | None = None,
    ):
        """
        Initialize the game session and deal a fresh board.

        Parameters
        ----------
        config : GameConfig, optional
            Session settings (default is ``GameConfig()``).
        store : ScoreStore, optional
            Where the best score is read and written (default is an in-memory store).
        on_ready : Callable, optional
            Notification sent once to an embedding host by :meth:`announce_ready`.
        """
        self.config = config or GameConfig()
        self._store = store if store is not None else MemoryScoreStore()
        self._on_ready = on_ready
        self._announced = False

        self._best = self._load_best()
        self.reset()

    @property
    def board(self) -> ndarray:
        """Copy of the current board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        return self._score

    @property
    def best(self) -> int:
        return self._best

    @property
    def won(self) -> bool:
        """True once a tile reached the target. The game goes on."""
        return self._won

    @property
    def is_finished(self) -> bool:
        """True when no move is left."""
        return self._over

    @property
    def status(self) -> str:
        if self._over:
            return 'game over'
        if self._won:
            return f'you hit {self.config.target}'
        return f'reach {self.config.target}'

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on a board holding the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Random number generator seed for reproducibility.

        Returns
        -------
        ndarray
            The new game board.

        Notes
        -----
        The score and the flags are cleared; the best score is kept.
        """
        self._board = fill_board(self.config.initial_tiles, seed=seed)
        self._score = 0
        self._won = False
        self._over = False
        logger.debug('New game with %d tiles', self.config.initial_tiles)
        return self.board

    def step(self, direction: Direction | str, seed: int | None = None) -> tuple[ndarray, int, bool]:
        """
        Play one turn in the given direction.

        Parameters
        ----------
        direction : Direction or str
            The direction to move.
        seed : int, optional
            Seed for the spawned tile.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The board after the turn (ndarray)
            - The score gained this turn (int)
            - Whether the game is over (bool)

        Notes
        -----
        - A finished game, or a move that changes nothing, leaves the session untouched and gains 0.
        - A new tile (2 or 4) is added only after a move that changed the board.
        """
        if self._over:
            return self.board, 0, True

        result = apply_move(self._board, direction)
        if not result.moved:
            logger.debug('Move %s changed nothing', Direction(direction).value)
            return self.board, 0, False

        self._board = spawn_tile(result.board, seed=seed)
        self._score += result.gained
        logger.debug('Move %s gained %d, score %d', Direction(direction).value, result.gained, self._score)

        if self._score > self._best:
            self._best = self._score
            self._save_best()

        if not self._won and has_won(self._board, self.config.target):
            self._won = True
            logger.info('Reached %d with score %d', self.config.target, self._score)

        if not has_any_move(self._board):
            self._over = True
            logger.info('Game over with score %d', self._score)

        return self.board, result.gained, self._over

    def announce_ready(self) -> None:
        """
        Tell the embedding host, once, that the game is ready.

        Failures are ignored so the game stays playable without a host.
        """
        if self._announced or self._on_ready is None:
            return
        self._announced = True

        try:
            self._on_ready()
        except Exception as error:
            logger.debug('Ready notification ignored: %s', error)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))

    def _load_best(self) -> int:
        try:
            return self._store.read()
        except OSError as error:
            logger.warning('Could not read best score, starting from 0: %s', error)
            return 0

    def _save_best(self) -> None:
        try:
            self._store.write(self._best)
        except OSError as error:
            logger.warning('Could not save best score %d: %s', self._best, error)
