"""
Core functionality for simulating the 4096 game: line reduction, direction handling, moves and tile spawning.

Every function here treats its input board as read-only and returns a new array.
"""

from collections.abc import Iterable
from enum import Enum
from functools import partial
from typing import NamedTuple

from numpy import argwhere, array, array_equal, asarray, fliplr, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

# ##>: Boards are always 4x4.
BOARD_SIZE = 4

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = [2, 4]
_TILE_PROBS = [0.9, 0.1]

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


class Direction(str, Enum):
    """Direction of travel for a move."""

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


class MoveResult(NamedTuple):
    """Outcome of a single move: the new board, the score gained and whether any cell changed."""

    board: ndarray
    gained: int
    moved: bool


class InvalidBoardError(ValueError):
    """Raised when a grid cannot be used as a 4x4 board of power-of-two tiles."""


def new_board() -> ndarray:
    """Return an empty board."""
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def as_board(cells: Iterable) -> ndarray:
    """
    Build a board from a nested sequence of tile values.

    Parameters
    ----------
    cells : Iterable
        Rows of tile values, 0 for an empty cell.

    Returns
    -------
    ndarray
        A new 4x4 int64 board.

    Raises
    ------
    InvalidBoardError
        If the grid is not 4x4 or holds a negative or non power-of-two tile.
    """
    try:
        board = array(cells, dtype=int64)
    except (TypeError, ValueError) as error:
        raise InvalidBoardError(f'Cannot build a board from {cells!r}') from error

    if board.shape != (BOARD_SIZE, BOARD_SIZE):
        raise InvalidBoardError(f'Board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {board.shape}')

    # ##>: A positive power of two has a single bit set.
    tiles = board[board != 0]
    if (tiles < 0).any() or (tiles & (tiles - 1)).any():
        raise InvalidBoardError(f'Tiles must be 0 or a power of two, got {sorted(set(tiles.tolist()))}')
    return board


def merge_line(line: ndarray) -> tuple[ndarray, int]:
    """
    Slide one line towards its start and merge adjacent equal tiles.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row of the board, read in the direction of travel.

    Returns
    -------
    merged_line : ndarray
        The new line, left-packed and padded with zeros to the original length.
    score : int
        The sum of the tiles produced by merges.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each tile can only be merged once per call: ``[2, 2, 2, 0]`` gives ``[4, 2, 0, 0]``.
    """
    line = asarray(line)
    non_zero = line[line != 0]
    result = zeros_like(line)
    score = 0

    # ##: Iterate over the compacted line and merge pairs.
    i, j = 0, 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result[j] = merged
            score += int(merged)
            i += 2
        else:
            result[j] = non_zero[i]
            i += 1
        j += 1

    return result, score


def slide_and_merge(board: ndarray) -> tuple[ndarray, int]:
    """
    Slide the board to the left, merging each row independently.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    updated_board : ndarray
        The board after sliding and merging.
    score : int
        The total score obtained from all merges.

    Notes
    -----
    - Merges never cross row boundaries.
    - For other directions, orient the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        merged_row, score_row = merge_line(row)
        result[i] = merged_row
        score += score_row

    return result, score


# ##>: (pre-transform, post-transform) bringing each direction to "slide left" and back.
_TRANSFORMS = {
    Direction.LEFT: (lambda board: board, lambda board: board),
    Direction.RIGHT: (fliplr, fliplr),
    Direction.UP: (partial(rot90, k=1), partial(rot90, k=-1)),
    Direction.DOWN: (partial(rot90, k=-1), partial(rot90, k=1)),
}


def orient(board: ndarray, direction: Direction | str) -> ndarray:
    """
    Transform the board so that sliding its rows left moves tiles towards ``direction``.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction or str
        The direction of travel.

    Returns
    -------
    ndarray
        A new, transformed board.
    """
    pre, _ = _TRANSFORMS[Direction(direction)]
    return pre(board).copy()


def restore(board: ndarray, direction: Direction | str) -> ndarray:
    """
    Undo :func:`orient` for the same direction.

    Parameters
    ----------
    board : ndarray
        A board previously produced by ``orient(..., direction)``.
    direction : Direction or str
        The direction of travel.

    Returns
    -------
    ndarray
        A new board in the original orientation.
    """
    _, post = _TRANSFORMS[Direction(direction)]
    return post(board).copy()


def apply_move(board: ndarray, direction: Direction | str) -> MoveResult:
    """
    Apply a move to the board without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.
    direction : Direction or str
        The direction to move.

    Returns
    -------
    MoveResult
        The new board, the score gained and whether any cell changed.

    Notes
    -----
    ``moved`` compares every cell, so a slide without a merge still counts as a move.
    """
    updated_board, score = slide_and_merge(orient(board, direction))
    updated_board = restore(updated_board, direction)
    return MoveResult(updated_board, score, not array_equal(board, updated_board))


def _select_generator(seed: int | None, generator: Generator | None) -> Generator:
    if generator is not None:
        return generator
    return default_rng(seed) if seed is not None else _GENERATOR


def spawn_tile(board: ndarray, seed: int | None = None, generator: Generator | None = None) -> ndarray:
    """
    Place one new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    seed : int, optional
        Random number generator seed for reproducibility.
    generator : Generator, optional
        Generator to draw from; takes precedence over ``seed``.

    Returns
    -------
    ndarray
        A new board with the tile added, or an unchanged copy if the board is full.

    Notes
    -----
    - Empty cells are enumerated row-major and one is chosen uniformly.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    """
    state = board.copy()
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state

    rng = _select_generator(seed, generator)
    cell = available_cells[rng.integers(len(available_cells))]
    state[tuple(cell)] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return state


def spawn_outcomes(board: ndarray) -> list[tuple[ndarray, float]]:
    """
    Enumerate every board :func:`spawn_tile` can produce, with its probability.

    Parameters
    ----------
    board : ndarray
        The board after a move, before a tile is spawned.

    Returns
    -------
    list of tuple
        Pairs of (possible board, probability). A full board gives a single copy with probability 1.
    """
    empty_cells = argwhere(board == 0)
    num_empty_cells = len(empty_cells)
    if num_empty_cells == 0:
        return [(board.copy(), 1.0)]

    outcomes = []
    for cell in empty_cells:
        for value in _TILE_VALUES:
            state = board.copy()
            state[tuple(cell)] = value
            outcomes.append((state, TILE_SPAWN_PROBS[value] / num_empty_cells))
    return outcomes


def fill_board(number_tile: int, seed: int | None = None, generator: Generator | None = None) -> ndarray:
    """
    Create a board holding ``number_tile`` spawned tiles, as at the start of a game.

    Parameters
    ----------
    number_tile : int
        Number of tiles to spawn.
    seed : int, optional
        Random number generator seed for reproducibility.
    generator : Generator, optional
        Generator to draw from; takes precedence over ``seed``.

    Returns
    -------
    ndarray
        The new board.
    """
    rng = _select_generator(seed, generator)
    state = new_board()
    for _ in range(number_tile):
        state = spawn_tile(state, generator=rng)
    return state


def max_tile(board: ndarray) -> int:
    """Return the highest tile on the board (0 for an empty board)."""
    return int(board.max())


def has_won(board: ndarray, target: int = 4096) -> bool:
    """Check whether the board holds a tile of at least ``target``."""
    return max_tile(board) >= target
