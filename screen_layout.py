import curses
from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    index: int
    y: int
    height: int


def _grow(heights, extra):
    # share extra lines in proportion to heights; largest remainder, ties to the earlier section
    total = sum(heights)
    shares = [extra * h // total for h in heights]
    left = extra - sum(shares)
    order = sorted(range(len(heights)), key=lambda i: (-(extra * heights[i] % total), i))
    for i in order[:left]:
        shares[i] += 1
    return [h + s for h, s in zip(heights, shares)]


def partition_sections(heights, avail, focus=None):
    """Split `avail` lines into one Region per visible section.

    Declared heights are minimums and weights. When they do not all fit, the
    window starts at the first section that still lets `focus` fit and the
    last visible section is cut to the lines that remain.
    """
    heights = [max(1, int(h)) for h in heights]
    if not heights or avail <= 0:
        return []

    total = sum(heights)
    if total <= avail:
        regions = []
        y = 0
        for i, h in enumerate(_grow(heights, avail - total)):
            regions.append(Region(i, y, h))
            y += h
        return regions

    start = 0
    if focus is not None and 0 <= focus < len(heights):
        while start < focus and sum(heights[start : focus + 1]) > avail:
            start += 1

    regions = []
    y = 0
    for i in range(start, len(heights)):
        remaining = avail - y
        if remaining <= 0:
            break
        h = min(heights[i], remaining)
        regions.append(Region(i, y, h))
        y += h
    return regions


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: dashboard (main), status bar (1 line)
        self.status_h = 1 if self.H >= 2 else 0
        self.dashboard_h = max(1, self.H - self.status_h)

        self.dashboard_win = curses.newwin(self.dashboard_h, self.W, 0, 0)
        # dashboard must never own cursor
        self.dashboard_win.leaveok(True)

        self.status_win = None
        if self.status_h:
            self.status_win = curses.newwin(self.status_h, self.W, self.dashboard_h, 0)
            self.status_win.leaveok(True)
