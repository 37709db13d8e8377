"""
Move utilities for the 4096 game: terminal detection and per-direction legality.
"""

from numpy import ndarray

from fortyninetysix.core.gameboard import Direction, orient


def has_any_move(board: ndarray) -> bool:
    """
    Check whether at least one direction can still change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        False only when the board is full and no two orthogonally adjacent tiles are equal.

    Notes
    -----
    Each cell is only compared with its right and down neighbours. Adjacency is symmetric, so this
    finds every mergeable pair.
    """
    if not board.all():
        return True

    # ##>: Right neighbours, then down neighbours.
    if (board[:, :-1] == board[:, 1:]).any():
        return True
    return bool((board[:-1, :] == board[1:, :]).any())


def can_slide_left(board: ndarray) -> bool:
    """
    Check whether a left move would change the board.

    Parameters
    ----------
    board : ndarray
        The game board, already oriented with :func:`orient`.

    Returns
    -------
    bool
        True if some tile has an empty cell on its left or an equal tile next to it.
    """
    near, far = board[:, :-1], board[:, 1:]
    if ((near == 0) & (far != 0)).any():
        return True
    return bool(((near != 0) & (near == far)).any())


def legal_directions_mask(board: ndarray) -> dict[Direction, bool]:
    """
    Compute, for every direction, whether moving would change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    dict[Direction, bool]
        True for each direction that would move at least one tile, in the order left, up, right, down.
    """
    return {direction: can_slide_left(orient(board, direction)) for direction in Direction}


def legal_directions(board: ndarray) -> list[Direction]:
    """Directions that would change the board, in the order left, up, right, down."""
    return [direction for direction, legal in legal_directions_mask(board).items() if legal]


def illegal_directions(board: ndarray) -> list[Direction]:
    """Directions that would leave the board unchanged, in the order left, up, right, down."""
    return [direction for direction, legal in legal_directions_mask(board).items() if not legal]
