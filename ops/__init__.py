"""TinyTracker - Operations Package

- ops.base    : Shared callback access, undo helper
- ops.editing : Copy/cut/paste, clear, insert/delete rows, undo/redo

All public functions are re-exported here so callers can do:
    import ops
    ops.paste()
"""

from ops.base import ui, set_ui_callbacks, save_undo

from ops.editing import (
    copy_cell, copy_row, copy_channel, copy_pattern,
    cut_cell, cut_row, cut_channel, cut_pattern,
    paste,
    clear_cell, clear_row, clear_pattern,
    insert_row, delete_row,
    undo, redo,
)
