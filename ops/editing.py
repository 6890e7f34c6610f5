"""TinyTracker - Editing Operations

Copy/cut/paste, clearing, row insert/delete and undo/redo at the cursor.
"""
import logging

from clipboard import ClipType
from state import state
from ops.base import ui, save_undo

logger = logging.getLogger("tracker.ops.editing")


# =============================================================================
# COPY
# =============================================================================

def copy_cell():
    """Copy the cell under the cursor."""
    state.clipboard.copy_cell(state.pattern, state.row, state.channel)
    ui.show_status("Copied cell")


def copy_row():
    """Copy the cursor row (all channels)."""
    state.clipboard.copy_row(state.pattern, state.row)
    ui.show_status(f"Copied row {state.row:02X}")


def copy_channel():
    """Copy the cursor channel from the cursor row down."""
    count = state.clipboard.copy_channel(state.pattern, state.row, state.channel,
                                         state.config.channel_copy_rows)
    ui.show_status(f"Copied {count} rows of channel {state.channel + 1}")


def copy_pattern():
    """Copy the whole pattern."""
    state.clipboard.copy_pattern(state.pattern)
    ui.show_status("Copied pattern")


# =============================================================================
# CUT
# =============================================================================

def cut_cell():
    """Copy the cursor cell, then clear it."""
    state.clipboard.copy_cell(state.pattern, state.row, state.channel)
    save_undo("Cut cell")
    state.clipboard.clear_cell(state.pattern, state.row, state.channel)
    ui.refresh_editor()
    ui.show_status("Cut cell")


def cut_row():
    """Copy the cursor row, then clear it."""
    state.clipboard.copy_row(state.pattern, state.row)
    save_undo("Cut row")
    state.clipboard.clear_row(state.pattern, state.row)
    ui.refresh_editor()
    ui.show_status(f"Cut row {state.row:02X}")


def cut_channel():
    """Copy the cursor channel run, then clear the copied cells."""
    clip = state.clipboard
    count = clip.copy_channel(state.pattern, state.row, state.channel,
                              state.config.channel_copy_rows)
    save_undo("Cut channel")
    for r in range(state.row, state.row + count):
        clip.clear_cell(state.pattern, r, state.channel)
    ui.refresh_editor()
    ui.show_status(f"Cut {count} rows of channel {state.channel + 1}")


def cut_pattern():
    """Copy the whole pattern, then clear it."""
    state.clipboard.copy_pattern(state.pattern)
    save_undo("Cut pattern")
    state.clipboard.clear_pattern(state.pattern)
    ui.refresh_editor()
    ui.show_status("Cut pattern")


# =============================================================================
# PASTE
# =============================================================================

def paste():
    """Paste clipboard at the cursor."""
    clip = state.clipboard
    if not clip.has_data():
        ui.show_status("Clipboard empty")
        return
    kind = clip.get_type()
    save_undo("Paste")
    clip.paste(state.pattern, state.row, state.channel)
    ui.refresh_editor()
    if kind == ClipType.PATTERN:
        ui.show_status("Pasted pattern")
    else:
        ui.show_status(f"Pasted {kind.value} at row {state.row:02X}")
    logger.debug(f"Paste {kind.value} at ({state.row}, {state.channel})")


# =============================================================================
# CLEAR / SHIFT
# =============================================================================

def clear_cell():
    """Clear the cell under the cursor."""
    save_undo("Clear")
    state.clipboard.clear_cell(state.pattern, state.row, state.channel)
    ui.refresh_editor()


def clear_row():
    """Clear entire row."""
    save_undo("Clear row")
    state.clipboard.clear_row(state.pattern, state.row)
    ui.refresh_editor()


def clear_pattern():
    """Clear every cell in the pattern."""
    save_undo("Clear pattern")
    state.clipboard.clear_pattern(state.pattern)
    ui.refresh_editor()
    ui.show_status("Pattern cleared")


def insert_row():
    """Insert blank row at cursor. The last row is pushed off."""
    save_undo("Insert")
    state.clipboard.insert_row(state.pattern, state.row)
    ui.refresh_editor()


def delete_row():
    """Delete row at cursor, pulling rows below up."""
    save_undo("Delete row")
    state.clipboard.delete_row(state.pattern, state.row)
    ui.refresh_editor()


# =============================================================================
# UNDO / REDO
# =============================================================================

def undo():
    desc = state.undo.undo(state.pattern)
    if desc is None:
        ui.show_status("Nothing to undo")
        return
    state.modified = True
    ui.refresh_editor()
    ui.show_status(f"Undo: {desc}")


def redo():
    desc = state.undo.redo(state.pattern)
    if desc is None:
        ui.show_status("Nothing to redo")
        return
    state.modified = True
    ui.refresh_editor()
    ui.show_status(f"Redo: {desc}")
