# -*- coding: utf-8 -*-
"""
Graphical window for playing 2048.

This module draws a game state with Matplotlib and forwards keyboard events to a handler. It reads the
engine state and never changes it.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from game2048.core.state import GameState
from game2048.core.types import Status
from game2048.utils.keys import KEY_BINDINGS

# ##: Keys handled by the game on top of the moves.
CONTROL_KEYS = ("backspace", "escape")


def release_keymaps(keys) -> None:
    """
    Remove keys from Matplotlib's default shortcuts.

    Parameters
    ----------
    keys : Iterable[str]
        Key names the window handles itself (case-insensitive).

    Notes
    -----
    Without this, "s" opens the save dialog, "k" and "l" switch to log scale, "h" resets the view and
    backspace or the arrows navigate the view history.
    """
    keys = {key.lower() for key in keys}
    for name in [name for name in plt.rcParams if name.startswith("keymap.")]:
        plt.rcParams[name] = [key for key in plt.rcParams[name] if key.lower() not in keys]


class WindowBoard:
    """
    Matplotlib window showing a 2048 board, its score and its status.

    Notes
    -----
    - One subplot per cell; the figure title carries the score and the end-of-game message.
    - Keyboard events are passed to the handler given to `register_key_handler`.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#F2B179",
        16: "#F59563",
        32: "#F67C5F",
        64: "#F65E3B",
        128: "#EDCF72",
        256: "#EDCC61",
        512: "#EDC850",
        1024: "#EDC53F",
        2048: "#EDC22E",
    }

    # ##: Color of tiles above 2048.
    SUPER_TILE_COLOR = "#3C3A32"

    MESSAGES = {
        Status.IN_PROGRESS: "",
        Status.WON: "You win! (backspace for a new game)",
        Status.LOST: "Game over! (backspace for a new game)",
    }

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        release_keymaps([*KEY_BINDINGS, *CONTROL_KEYS])
        self.fig = plt.figure()
        self.fig.canvas.manager.set_window_title(title)
        self.fig.patch.set_facecolor("#BBADA0")
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)

        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        self.texts = []
        for ax in self.axes:
            self.texts.append(ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="bold"))
            ax.set_xticks([])
            ax.set_yticks([])

        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_state(self, state: GameState):
        """
        Show or update the game state.

        Parameters
        ----------
        state : GameState
            The game state to display.
        """
        for ax, text, value in zip(self.axes, self.texts, state.board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color("#776E65" if value in (2, 4) else "#F9F6F2")
            ax.set_facecolor(self.COLORS.get(value, self.SUPER_TILE_COLOR))

        self.fig.suptitle(f"Score: {state.score}   {self.MESSAGES[state.status]}")
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

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
