import curses
import unittest
from unittest import mock

from key_bindings import KEY_TAB
from orchestrator import RUNNING, STOPPED, Orchestrator
from section_store import Section, SectionStore


class FakeScreen:
    def __init__(self, keys, on_read=None):
        self.keys = list(keys)
        self.reads = 0
        self.on_read = on_read

    def keypad(self, flag):
        pass

    def nodelay(self, flag):
        pass

    def timeout(self, ms):
        pass

    def getch(self):
        self.reads += 1
        if self.on_read is not None:
            self.on_read()
        if not self.keys:
            return ord("q")
        return self.keys.pop(0)


class FakeLayout:
    created = 0

    def __init__(self, stdscr):
        FakeLayout.created += 1
        self.H = 24
        self.W = 80
        self.dashboard_h = 23
        self.dashboard_win = None
        self.status_win = None


class RecordingPainter:
    def __init__(self):
        self.frames = []

    def paint(self, layout, frame):
        self.frames.append(frame)


def _store():
    return SectionStore(
        [
            Section("First", [("a",), ("b",), ("c",)], display_height=6),
            Section("Second", [("z",)], display_height=4),
        ]
    )


class OrchestratorTests(unittest.TestCase):
    def _orch(self, keys, on_read=None):
        FakeLayout.created = 0
        screen = FakeScreen(keys, on_read)
        painter = RecordingPainter()
        orch = Orchestrator(screen, _store(), layout_factory=FakeLayout, painter=painter)
        return orch, screen, painter

    def test_first_frame_is_drawn_before_first_read(self):
        painter_ref = {}

        def check():
            self.assertGreaterEqual(len(painter_ref["p"].frames), painter_ref["s"].reads)

        orch, screen, painter = self._orch([KEY_TAB, curses.KEY_DOWN], on_read=check)
        painter_ref["p"] = painter
        painter_ref["s"] = screen
        orch.run()
        self.assertEqual(len(painter.frames), screen.reads)

    def test_scenario_drives_both_cursors(self):
        keys = [KEY_TAB, curses.KEY_DOWN] + [curses.KEY_DOWN] * 3 + [KEY_TAB, curses.KEY_DOWN, curses.KEY_DOWN, ord("q")]
        orch, screen, painter = self._orch(keys)
        orch.run()
        self.assertEqual(orch.loop_state, STOPPED)
        self.assertEqual(orch.nav.state.outer_selected, 1)
        self.assertEqual(orch.store.get(0).inner_selected, 0)
        self.assertEqual(orch.store.get(1).inner_selected, 0)
        self.assertEqual(screen.reads, len(keys))

    def test_each_frame_reflects_preceding_key(self):
        orch, _, painter = self._orch([KEY_TAB, KEY_TAB, curses.KEY_BTAB, ord("q")])
        orch.run()
        self.assertEqual([f.outer_selected for f in painter.frames], [None, 0, 1, 0])

    def test_quit_stops_without_reading_more_keys(self):
        orch, screen, _ = self._orch([ord("q"), KEY_TAB, KEY_TAB])
        orch.run()
        self.assertEqual(screen.reads, 1)
        self.assertEqual(screen.keys, [KEY_TAB, KEY_TAB])
        self.assertIsNone(orch.nav.state.outer_selected)

    def test_no_key_and_unbound_keys_are_ignored(self):
        orch, _, _ = self._orch([KEY_TAB, -1, ord("x"), curses.KEY_LEFT, ord("q")])
        orch.run()
        self.assertEqual(orch.nav.state.outer_selected, 0)
        self.assertIsNone(orch.store.get(0).inner_selected)

    def test_resize_rebuilds_layout(self):
        orch, _, painter = self._orch([curses.KEY_RESIZE, ord("q")])
        orch.run()
        self.assertEqual(FakeLayout.created, 2)
        self.assertEqual(len(painter.frames), 2)

    def test_cursor_visibility_is_left_to_terminal_session(self):
        seen = []
        with mock.patch.object(curses, "curs_set", lambda flag: seen.append(flag)):
            orch, _, _ = self._orch([ord("q")])
            orch.run()
        self.assertEqual(seen, [])

    def test_starts_running(self):
        orch, _, _ = self._orch([])
        self.assertEqual(orch.loop_state, RUNNING)
        self.assertIsNone(orch.last_frame)


if __name__ == "__main__":
    unittest.main()
