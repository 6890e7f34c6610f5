"""TinyTracker - Operations Base

Shared utilities used by the operation modules:
- UICallbacks instance access
- Undo helper
"""
import logging

from state import state
from ui_callbacks_interface import UICallbacks

logger = logging.getLogger("tracker.ops")

# =============================================================================
# UI CALLBACKS INSTANCE
# =============================================================================
# Initialized with no-ops; the UI wires it up via set_ui_callbacks().
ui = UICallbacks()


def set_ui_callbacks(callbacks: UICallbacks):
    """Update the global UICallbacks instance in-place.

    Operation modules hold `ui` from `from ops.base import ui`, so the object
    is mutated rather than replaced to keep those references live.
    """
    from dataclasses import fields
    for f in fields(UICallbacks):
        setattr(ui, f.name, getattr(callbacks, f.name))


# =============================================================================
# UNDO HELPER
# =============================================================================

def save_undo(desc: str = ""):
    """Save state for undo. Call BEFORE modifying the pattern."""
    state.undo.save(state.pattern, desc)
    state.modified = True
