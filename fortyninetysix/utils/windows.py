# -*- coding: utf-8 -*-
"""
Graphical window for the 4096 game.

This module draws the game board with Matplotlib and forwards keyboard events to a handler.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


def tile_color(value: int) -> str:
    """
    Background color of a tile, by value band.

    Parameters
    ----------
    value : int
        The tile value, 0 for an empty cell.

    Returns
    -------
    str
        A Matplotlib color.
    """
    if value == 0:
        return "#1A2130"
    if value <= 8:
        return "#3A4150"
    if value <= 32:
        return "#4E5564"
    if value <= 128:
        return "#5C7FA8"
    if value <= 512:
        return "#5CA886"
    if value <= 2048:
        return "#C9AE62"
    return "#C96A86"


class WindowBoard:
    """
    Render the game board in a Matplotlib figure and capture key presses.

    Notes
    -----
    - The score, best score and status are shown in the window title.
    - The window can be updated in real-time as the game progresses.
    """

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (4 for a 4x4 board).
        """
        self.title = title
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Create one cell per tile, without ticks or labels.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.fig.patch.set_facecolor("#0B1220")
        self.axe.set_axis_off()

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(
                0.5, 0.5, "", ha="center", va="center", color="white", fontsize="x-large", fontweight="heavy"
            )
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """Mark the window as closed when Matplotlib closes it."""
        self.closed = True

    def show_image(self, board: ndarray):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_fontsize("large" if value >= 1024 else "x-large")
            ax.set_facecolor(tile_color(value))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def set_status(self, text: str):
        """
        Show a status line in the window title.

        Parameters
        ----------
        text : str
            Score, best score and game status.
        """
        self.fig.canvas.manager.set_window_title(f"{self.title} | {text}")

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with every key press event of the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
