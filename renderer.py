"""Turns the section store and navigation state into one composed Frame.

`render` is pure: it reads the store and the cursors and returns an immutable
value describing every piece of text on screen together with a style name.
Painting that value onto curses windows is FramePainter's job.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from errors import OutOfRange
from screen_layout import partition_sections
from status_bar import render_status, status_context


logger = logging.getLogger(__name__)

APP_TITLE = "Navipod"
HIGHLIGHT_SYMBOL = ">>"
MAX_COL_WIDTH = 40

STYLE_NORMAL = "normal"
STYLE_BORDER = "border"
STYLE_FOCUS_BORDER = "focus_border"
STYLE_HEADER = "header"
STYLE_SELECTED = "selected"
STYLE_MUTED = "muted"


@dataclass(frozen=True)
class Span:
    y: int
    x: int
    text: str
    style: str = STYLE_NORMAL


@dataclass(frozen=True)
class Frame:
    height: int
    width: int
    spans: tuple = ()
    status: str = ""
    outer_selected: Optional[int] = None

    def text_at(self, y: int) -> str:
        """Plain text of line `y` as it would appear on screen."""
        line = [" "] * self.width
        for span in self.spans:
            if span.y != y:
                continue
            for i, ch in enumerate(span.text):
                if 0 <= span.x + i < self.width:
                    line[span.x + i] = ch
        return "".join(line)

    def spans_with_style(self, style: str):
        return [s for s in self.spans if s.style == style]


def resolve_focus(store, navigation_state) -> Optional[int]:
    idx = navigation_state.outer_selected
    if idx is None:
        return None
    try:
        store.get(idx)
    except OutOfRange:
        logger.warning("outer selection %r outside %d sections; rendering without focus", idx, len(store))
        return None
    return idx


def column_widths(columns, rows):
    widths = []
    for c, col in enumerate(columns):
        max_len = len(str(col))
        for row in rows:
            if c < len(row):
                max_len = max(max_len, len(row[c]))
        widths.append(min(MAX_COL_WIDTH, max_len + 2))
    return widths


def row_offset(selected, visible):
    if selected is None or visible <= 0:
        return 0
    return max(0, selected - visible + 1)


def _format_cells(cells, widths):
    out = []
    for i, w in enumerate(widths):
        text = str(cells[i]) if i < len(cells) else ""
        out.append(text[:w].ljust(w))
    return " ".join(out)


def _fit(text, width):
    return text[:width].ljust(width)


def _box(y, x, h, w, title, style):
    if h < 1 or w < 2:
        return []
    spans = [Span(y, x, ("┌" + title[: w - 2]).ljust(w - 1, "─") + "┐", style)]
    for i in range(1, h - 1):
        spans.append(Span(y + i, x, "│", style))
        spans.append(Span(y + i, x + w - 1, "│", style))
    if h >= 2:
        spans.append(Span(y + h - 1, x, "└" + "─" * (w - 2) + "┘", style))
    return spans


def _render_section(section, y, x, h, w, focused):
    if h < 4:
        label = f"▸ {section.title} ({len(section.rows)} rows)"
        return [Span(y, x, _fit(label, w), STYLE_FOCUS_BORDER if focused else STYLE_MUTED)]

    spans = _box(y, x, h, w, section.title, STYLE_FOCUS_BORDER if focused else STYLE_BORDER)
    inner_w = w - 2
    if inner_w <= 0:
        return spans

    widths = column_widths(section.columns, section.rows)
    pad = " " * len(HIGHLIGHT_SYMBOL)
    spans.append(Span(y + 1, x + 1, _fit(pad + _format_cells(section.columns, widths), inner_w), STYLE_HEADER))

    visible = h - 3
    selected = section.inner_selected if focused else None
    if selected is not None and not (0 <= selected < len(section.rows)):
        selected = None
    offset = row_offset(selected, visible)
    for i, row in enumerate(section.rows[offset : offset + visible]):
        if offset + i == selected:
            text, style = HIGHLIGHT_SYMBOL + _format_cells(row, widths), STYLE_SELECTED
        else:
            text, style = pad + _format_cells(row, widths), (STYLE_NORMAL if focused else STYLE_MUTED)
        spans.append(Span(y + 2 + i, x + 1, _fit(text, inner_w), style))
    return spans


def render(store, navigation_state, height, width) -> Frame:
    focus = resolve_focus(store, navigation_state)
    status = render_status(status_context(store, focus), width) if width > 0 else ""
    if height < 3 or width < 4:
        return Frame(height, width, (), status, focus)

    spans = _box(0, 0, height, width, APP_TITLE, STYLE_BORDER)
    for region in partition_sections(store.display_heights(), height - 2, focus):
        section = store.get(region.index)
        spans.extend(
            _render_section(section, 1 + region.y, 1, region.height, width - 2, region.index == focus)
        )
    return Frame(height, width, tuple(spans), status, focus)
