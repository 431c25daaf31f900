# ~/Apps/navipod/orchestrator.py
import curses
import logging

from frame_painter import FramePainter
from key_bindings import QUIT
from navigation import NavigationController
from renderer import render
from screen_layout import ScreenLayout


logger = logging.getLogger(__name__)

RUNNING = "running"
STOPPED = "stopped"


class Orchestrator:
    """Render, block for one key, apply it, repeat until quit.

    Every applied transition is followed by a redraw before the next key is
    read, so the screen always shows the latest state.
    """

    def __init__(self, stdscr, store, layout_factory=ScreenLayout, painter=None):
        self.stdscr = stdscr
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(-1)

        self.store = store
        self.nav = NavigationController(store)
        self.layout_factory = layout_factory
        self.layout = layout_factory(stdscr)
        self.painter = painter if painter is not None else FramePainter()

        self.loop_state = RUNNING
        self.last_frame = None

    # ---------------- UI ----------------

    def redraw(self):
        frame = render(self.store, self.nav.state, self.layout.dashboard_h, self.layout.W)
        self.painter.paint(self.layout, frame)
        self.last_frame = frame

    def _resize(self):
        self.layout = self.layout_factory(self.stdscr)
        logger.debug("resized to %sx%s", self.layout.W, self.layout.H)

    # ---------------- input ----------------

    def handle_key(self, ch):
        if ch == -1:
            return
        if ch == curses.KEY_RESIZE:
            self._resize()
            return
        if self.nav.handle_key(ch) == QUIT:
            logger.info("quit requested")
            self.loop_state = STOPPED

    # ---------------- main loop ----------------

    def run(self):
        self.loop_state = RUNNING
        while self.loop_state == RUNNING:
            self.redraw()
            ch = self.stdscr.getch()
            self.handle_key(ch)
