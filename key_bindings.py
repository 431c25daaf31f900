import curses

QUIT = "quit"
OUTER_NEXT = "outer_next"
OUTER_PREV = "outer_prev"
INNER_NEXT = "inner_next"
INNER_PREV = "inner_prev"

KEY_TAB = 9

KEY_ACTIONS = {
    ord("q"): QUIT,
    KEY_TAB: OUTER_NEXT,
    curses.KEY_BTAB: OUTER_PREV,  # Shift+Tab
    curses.KEY_DOWN: INNER_NEXT,
    ord("j"): INNER_NEXT,
    curses.KEY_UP: INNER_PREV,
    ord("k"): INNER_PREV,
}

HINTS = "Tab/S-Tab section  j/k row  q quit"


def action_for_key(ch):
    """Map a getch() code to an action name, or None for unbound keys."""
    return KEY_ACTIONS.get(ch)
