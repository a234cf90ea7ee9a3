# -*- coding: utf-8 -*-
"""
Display a game board in a window.
"""
import numpy as np
from matplotlib import pyplot as plt


class WindowBoard:
    """
    Window drawing the board with Matplotlib, one coloured cell per tile.
    """

    # ##: Colors
    COLORS = {
        0: "#CDC1B4",
        2: "#EEE4DA",
        4: "#EDE0C8",
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
    HIGH_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int):
        # ## ----> Free the arrow keys and WASD from the default Matplotlib shortcuts.
        for keymap in [name for name in plt.rcParams if name.startswith("keymap.")]:
            plt.rcParams[keymap] = []

        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.1, hspace=0.1)
        self.fig.patch.set_facecolor("#BBADA0")
        self.fig.canvas.manager.set_window_title(title)
        self.axe.set_axis_off()

        # ## ----> Add cell for board.
        self.size = size
        self.axes = [self.fig.add_subplot(size, size, index) for index in range(1, size * size + 1)]
        self.textes = []
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
            )
            self.textes.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def show_image(self, board: np.ndarray, caption: str = ""):
        """
        Update the tiles being shown.

        Parameters
        ----------
        board: np.ndarray
            Board to draw, of shape (size, size)
        caption: str
            Text shown above the board (score, status)
        """
        # ## ----> Update the tiles.
        values = np.reshape(board, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            value = int(value)
            text.set_text(str(value) if value else "")
            text.set_color("#776E65" if value in (2, 4) else "#F9F6F2")
            _ax.set_facecolor(self.COLORS.get(value, self.HIGH_COLOR))
        self.fig.suptitle(caption)

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Any
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
