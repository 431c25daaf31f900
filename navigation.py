import logging
from dataclasses import dataclass
from typing import Optional

from key_bindings import (
    INNER_NEXT,
    INNER_PREV,
    OUTER_NEXT,
    OUTER_PREV,
    QUIT,
    action_for_key,
)


logger = logging.getLogger(__name__)


@dataclass
class NavigationState:
    outer_selected: Optional[int] = None


class NavigationController:
    """Owns the outer cursor and drives the inner cursor of the focused section.

    All four moves wrap around. Moves that have nothing to act on (no sections,
    no focus, an empty focused section) leave the state untouched.
    """

    def __init__(self, store, state: Optional[NavigationState] = None):
        self.store = store
        self.state = state if state is not None else NavigationState()

    def focused_section(self):
        idx = self.state.outer_selected
        if idx is None or not (0 <= idx < len(self.store)):
            return None
        return self.store.get(idx)

    # ---------- outer cursor ----------
    def next_section(self):
        total = len(self.store)
        if total == 0:
            return
        current = -1 if self.state.outer_selected is None else self.state.outer_selected
        self.state.outer_selected = (current + 1) % total

    def previous_section(self):
        total = len(self.store)
        if total == 0:
            return
        current = 0 if self.state.outer_selected is None else self.state.outer_selected
        self.state.outer_selected = (current - 1 + total) % total

    # ---------- inner cursor ----------
    def next_row(self):
        section = self.focused_section()
        if section is not None:
            section.next_row()

    def previous_row(self):
        section = self.focused_section()
        if section is not None:
            section.previous_row()

    def apply(self, action):
        """Apply one action; returns QUIT when the loop should stop."""
        if action == QUIT:
            return QUIT
        if action == OUTER_NEXT:
            self.next_section()
        elif action == OUTER_PREV:
            self.previous_section()
        elif action == INNER_NEXT:
            self.next_row()
        elif action == INNER_PREV:
            self.previous_row()
        else:
            return None

        section = self.focused_section()
        logger.debug(
            "%s -> outer=%s inner=%s",
            action,
            self.state.outer_selected,
            section.inner_selected if section is not None else None,
        )
        return None

    def handle_key(self, ch):
        return self.apply(action_for_key(ch))
