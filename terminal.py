import curses
import logging
import sys

from errors import TerminalInitFailure, TerminalResetFailure


logger = logging.getLogger(__name__)


class TerminalSession:
    """Scoped ownership of the terminal's exclusive display mode.

    Use as a context manager. The prior mode is restored exactly once, on
    normal exit, on an exception leaving the block, or from the process-wide
    excepthook installed while the session is active.
    """

    def __init__(self):
        self.stdscr = None
        self._restored = False
        self._prev_hook = None

    def __enter__(self):
        try:
            self.stdscr = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
        except curses.error as exc:
            logger.error("terminal init failed: %s", exc)
            self._undo_partial_init()
            raise TerminalInitFailure(f"cannot initialise terminal: {exc}") from exc

        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self._install_hook()
        return self.stdscr

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.restore()
            return False
        try:
            self.restore()
        except TerminalResetFailure:
            logger.exception("terminal reset failed while handling %s", exc_type.__name__)
        return False

    def _undo_partial_init(self):
        self._restored = True
        if self.stdscr is None:
            return
        try:
            curses.endwin()
        except curses.error:
            pass

    def restore(self):
        if self._restored:
            return
        self._restored = True
        self._uninstall_hook()
        if self.stdscr is None:
            return
        failure = None
        for step in (
            lambda: self.stdscr.keypad(False),
            curses.echo,
            curses.nocbreak,
        ):
            try:
                step()
            except curses.error as exc:
                failure = failure or exc
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        try:
            curses.endwin()
        except curses.error as exc:
            failure = failure or exc
        if failure is not None:
            logger.error("terminal reset failed: %s", failure)
            raise TerminalResetFailure(f"cannot restore terminal: {failure}") from failure

    # ---------------- failure handler ----------------

    def _install_hook(self):
        self._prev_hook = sys.excepthook
        sys.excepthook = self._excepthook

    def _uninstall_hook(self):
        if self._prev_hook is not None and sys.excepthook == self._excepthook:
            sys.excepthook = self._prev_hook

    def _excepthook(self, exc_type, exc, tb):
        prev = self._prev_hook or sys.__excepthook__
        try:
            self.restore()
        except TerminalResetFailure:
            logger.exception("terminal reset failed in excepthook")
        prev(exc_type, exc, tb)
