"""Tests for ops.editing - cursor-level copy/cut/paste with undo.

Drives the global editor state the same way a UI would, with the status
callback captured so messages can be checked.
"""
import sys
import os
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from constants import ROWS, CHANNELS
from config import EditorConfig
from clipboard import ClipType
from data_model import ArrayPattern
from state import state
from ui_callbacks_interface import UICallbacks
import ops


def _setup_state(config=None):
    """Fresh state with a filled pattern; returns the list status messages land in."""
    state.reset(config or EditorConfig())
    for r in range(ROWS):
        for ch in range(CHANNELS):
            cell = state.pattern.get_note(r, ch)
            cell.note = r + 1
            cell.instrument = ch + 1
    messages = []
    ops.set_ui_callbacks(UICallbacks(show_status=messages.append))
    return messages


class TestCopyOps(unittest.TestCase):

    def setUp(self):
        self.msgs = _setup_state()

    def tearDown(self):
        ops.set_ui_callbacks(UICallbacks())

    def test_copy_does_not_touch_history(self):
        ops.copy_row()
        self.assertFalse(state.undo.can_undo())
        self.assertFalse(state.modified)
        self.assertEqual(state.clipboard.get_type(), ClipType.ROW)

    def test_copy_row_status(self):
        state.set_cursor(0x1A, 0)
        ops.copy_row()
        self.assertEqual(self.msgs[-1], "Copied row 1A")

    def test_copy_channel_uses_config_length(self):
        _setup_state(EditorConfig(channel_copy_rows=4))
        ops.set_ui_callbacks(UICallbacks(show_status=self.msgs.append))
        state.set_cursor(10, 2)
        ops.copy_channel()
        self.assertEqual(state.clipboard.num_rows, 4)
        self.assertEqual(self.msgs[-1], "Copied 4 rows of channel 3")

    def test_copy_channel_near_bottom(self):
        state.set_cursor(ROWS - 2, 0)
        ops.copy_channel()
        self.assertEqual(self.msgs[-1], "Copied 2 rows of channel 1")


class TestCutPaste(unittest.TestCase):

    def setUp(self):
        self.msgs = _setup_state()

    def tearDown(self):
        ops.set_ui_callbacks(UICallbacks())

    def test_cut_cell_then_paste_elsewhere(self):
        state.set_cursor(3, 1)
        ops.cut_cell()
        self.assertTrue(state.pattern.get_note(3, 1).is_empty())
        self.assertTrue(state.modified)
        state.set_cursor(20, 0)
        ops.paste()
        cell = state.pattern.get_note(20, 0)
        self.assertEqual((cell.note, cell.instrument), (4, 2))
        self.assertEqual(self.msgs[-1], "Pasted cell at row 14")

    def test_cut_channel_clears_only_copied_run(self):
        _setup_state(EditorConfig(channel_copy_rows=3))
        state.set_cursor(5, 2)
        ops.cut_channel()
        for r in (5, 6, 7):
            self.assertTrue(state.pattern.get_note(r, 2).is_empty())
        self.assertFalse(state.pattern.get_note(8, 2).is_empty())
        self.assertFalse(state.pattern.get_note(5, 1).is_empty())

    def test_cut_pattern_and_undo(self):
        ops.cut_pattern()
        self.assertTrue(state.pattern.is_empty())
        ops.undo()
        self.assertEqual(state.pattern.get_note(31, 3).note, ROWS)
        self.assertEqual(self.msgs[-1], "Undo: Cut pattern")

    def test_paste_empty_clipboard(self):
        ops.paste()
        self.assertEqual(self.msgs[-1], "Clipboard empty")
        self.assertFalse(state.undo.can_undo())
        self.assertFalse(state.modified)

    def test_paste_pattern_status(self):
        ops.copy_pattern()
        ops.paste()
        self.assertEqual(self.msgs[-1], "Pasted pattern")

    def test_paste_is_undoable(self):
        ops.copy_row()
        state.set_cursor(9, 3)
        ops.paste()
        self.assertEqual(state.pattern.get_note(9, 0).note, 1)
        ops.undo()
        self.assertEqual(state.pattern.get_note(9, 0).note, 10)
        ops.redo()
        self.assertEqual(state.pattern.get_note(9, 0).note, 1)
        self.assertEqual(self.msgs[-1], "Redo: Paste")

    def test_refresh_called_after_edit(self):
        refreshed = []
        ops.set_ui_callbacks(UICallbacks(refresh_editor=lambda: refreshed.append(1)))
        ops.clear_cell()
        self.assertEqual(refreshed, [1])


class TestShiftOps(unittest.TestCase):

    def setUp(self):
        self.msgs = _setup_state()

    def tearDown(self):
        ops.set_ui_callbacks(UICallbacks())

    def test_insert_row(self):
        state.set_cursor(5, 0)
        ops.insert_row()
        self.assertTrue(state.pattern.get_note(5, 3).is_empty())
        self.assertEqual(state.pattern.get_note(6, 0).note, 6)
        self.assertEqual(state.undo.undo_stack[-1][1], "Insert")

    def test_delete_row_then_undo(self):
        state.set_cursor(5, 0)
        ops.delete_row()
        self.assertEqual(state.pattern.get_note(5, 0).note, 7)
        self.assertTrue(state.pattern.get_note(ROWS - 1, 0).is_empty())
        ops.undo()
        self.assertEqual(state.pattern.get_note(5, 0).note, 6)
        self.assertEqual(state.pattern.get_note(ROWS - 1, 0).note, ROWS)

    def test_clear_row_and_pattern(self):
        state.set_cursor(2, 0)
        ops.clear_row()
        self.assertTrue(all(state.pattern.get_note(2, ch).is_empty()
                            for ch in range(CHANNELS)))
        ops.clear_pattern()
        self.assertTrue(state.pattern.is_empty())
        self.assertEqual(self.msgs[-1], "Pattern cleared")

    def test_nothing_to_undo_or_redo(self):
        ops.undo()
        self.assertEqual(self.msgs[-1], "Nothing to undo")
        ops.redo()
        self.assertEqual(self.msgs[-1], "Nothing to redo")

    def test_ops_on_array_grid(self):
        state.set_pattern(ArrayPattern())
        state.pattern.get_note(0, 0).note = 12
        state.set_cursor(0, 0)
        ops.insert_row()
        self.assertEqual(state.pattern.get_note(1, 0).note, 12)
        ops.undo()
        self.assertEqual(state.pattern.get_note(0, 0).note, 12)


if __name__ == '__main__':
    unittest.main()
