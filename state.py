"""TinyTracker - Editor State"""
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from constants import ROWS, CHANNELS
from data_model import Pattern, NoteGrid, Snapshot, capture_grid, apply_grid
from clipboard import PatternClipboard
from config import EditorConfig, load_config, apply_log_level

logger = logging.getLogger("tracker.state")


class UndoManager:
    """Manages undo/redo history as whole-grid snapshots."""

    def __init__(self, max_size: int = 100):
        self.max_size = max_size
        self.undo_stack: List[Tuple[Snapshot, str]] = []  # (cells, desc)
        self.redo_stack: List[Tuple[Snapshot, str]] = []

    def save(self, pattern: NoteGrid, desc: str = ""):
        """Save state before modification."""
        self.undo_stack.append((capture_grid(pattern), desc))
        self.redo_stack.clear()
        while len(self.undo_stack) > self.max_size:
            self.undo_stack.pop(0)

    def undo(self, pattern: NoteGrid) -> Optional[str]:
        """Undo last action. Returns its description, or None."""
        if not self.undo_stack:
            return None
        cells, desc = self.undo_stack.pop()
        self.redo_stack.append((capture_grid(pattern), desc))
        apply_grid(pattern, cells)
        logger.debug(f"Undo: {desc}")
        return desc

    def redo(self, pattern: NoteGrid) -> Optional[str]:
        """Redo last undone action. Returns its description, or None."""
        if not self.redo_stack:
            return None
        cells, desc = self.redo_stack.pop()
        self.undo_stack.append((capture_grid(pattern), desc))
        apply_grid(pattern, cells)
        logger.debug(f"Redo: {desc}")
        return desc

    def can_undo(self) -> bool:
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self.redo_stack) > 0

    def clear(self):
        self.undo_stack.clear()
        self.redo_stack.clear()


class EditorState:
    """Pattern being edited plus cursor, clipboard and history."""

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.pattern: NoteGrid = Pattern()
        self.clipboard = PatternClipboard()
        self.undo = UndoManager(self.config.undo_limit)
        self.row = 0
        self.channel = 0
        self.modified = False

    def reset(self, config: Optional[EditorConfig] = None):
        """Start over with an empty pattern (keeps config unless given)."""
        if config is not None:
            self.config = config
        self.pattern = Pattern()
        self.clipboard = PatternClipboard()
        self.undo = UndoManager(self.config.undo_limit)
        self.row = 0
        self.channel = 0
        self.modified = False

    def init_from_config(self, path: Optional[Union[str, Path]] = None) -> EditorConfig:
        """Startup hook: load tracker_config.json, apply its log level, reset.

        The global `state` starts on defaults; the embedding app calls this
        once before editing.
        """
        config = load_config(path)
        apply_log_level(config)
        self.reset(config)
        logger.debug(f"Editor state initialised from {config.source}")
        return config

    def set_pattern(self, pattern: NoteGrid):
        """Edit a different grid. History belongs to the old one, so drop it."""
        self.pattern = pattern
        self.undo.clear()
        self.modified = False
        self.set_cursor(self.row, self.channel)

    def set_cursor(self, row: int, channel: int):
        """Move cursor, clamped to the grid."""
        self.row = max(0, min(ROWS - 1, row))
        self.channel = max(0, min(CHANNELS - 1, channel))


# Global state instance (defaults until init_from_config is called)
state = EditorState()
