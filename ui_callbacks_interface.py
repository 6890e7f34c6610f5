"""TinyTracker - UI Callbacks Interface

Typed container for the callbacks the editing operations use to talk to
whatever UI drives them. Every callback defaults to a no-op so the editing
layer works headless (tests, scripting) before a UI is wired up.
"""
from dataclasses import dataclass, field
from typing import Callable


RefreshFn = Callable[[], None]
StatusFn = Callable[[str], None]


def _noop(*args, **kwargs):
    """Default no-op callback for unset functions."""
    pass


@dataclass
class UICallbacks:
    """Callbacks the editing layer invokes after changing state.

    Usage:
        callbacks = UICallbacks()
        callbacks.refresh_editor = my_redraw
        ops.set_ui_callbacks(callbacks)
    """
    refresh_editor: RefreshFn = field(default=_noop)
    show_status: StatusFn = field(default=_noop)
