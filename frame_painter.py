import curses

from renderer import (
    STYLE_BORDER,
    STYLE_FOCUS_BORDER,
    STYLE_HEADER,
    STYLE_MUTED,
    STYLE_NORMAL,
    STYLE_SELECTED,
)


class FramePainter:
    PAIR_FOCUS_BORDER = 1
    PAIR_HEADER = 2
    PAIR_STATUS = 3

    def __init__(self):
        self.attrs = {
            STYLE_NORMAL: curses.A_NORMAL,
            STYLE_BORDER: curses.A_NORMAL,
            STYLE_FOCUS_BORDER: curses.A_BOLD,
            STYLE_HEADER: curses.A_BOLD,
            STYLE_SELECTED: curses.A_REVERSE,
            STYLE_MUTED: curses.A_DIM,
        }
        self.status_attr = curses.A_REVERSE
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_FOCUS_BORDER, curses.COLOR_YELLOW, -1)
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_RED, -1)
            curses.init_pair(self.PAIR_STATUS, curses.COLOR_BLACK, curses.COLOR_WHITE)
            self.attrs[STYLE_FOCUS_BORDER] = curses.color_pair(self.PAIR_FOCUS_BORDER) | curses.A_BOLD
            self.attrs[STYLE_HEADER] = curses.color_pair(self.PAIR_HEADER)
            self.status_attr = curses.color_pair(self.PAIR_STATUS)
        except curses.error:
            pass

    def attr_for(self, style):
        return self.attrs.get(style, curses.A_NORMAL)

    @staticmethod
    def _put(win, y, x, text, attr):
        h, w = win.getmaxyx()
        if y < 0 or y >= h or x < 0 or x >= w:
            return
        try:
            win.addnstr(y, x, text, w - x, attr)
        except curses.error:
            # writing the bottom-right cell moves the cursor off-window
            pass

    def paint(self, layout, frame):
        """Write one frame to the layout windows and publish it in a single update."""
        win = layout.dashboard_win
        win.erase()
        for span in frame.spans:
            self._put(win, span.y, span.x, span.text, self.attr_for(span.style))
        win.noutrefresh()

        sw = layout.status_win
        if sw is not None:
            sw.erase()
            self._put(sw, 0, 0, frame.status, self.status_attr)
            sw.noutrefresh()

        curses.doupdate()
