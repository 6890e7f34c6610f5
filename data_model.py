"""TinyTracker - Data Model

Note cells and the two pattern grids the editor works on:
- Pattern      : list-of-lists of Note objects
- ArrayPattern : NumPy struct-of-arrays, cells exposed through NoteView handles

Editing code only relies on the NoteGrid protocol (get_note), so any grid
that hands out mutable handles with note/instrument/effect/param works.
"""
from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

import numpy as np

from constants import ROWS, CHANNELS, note_to_str

NOTE_FIELDS = ('note', 'instrument', 'effect', 'param')


class PatternIndexError(IndexError):
    """Raised when a grid is accessed outside ROWS x CHANNELS."""

    def __init__(self, row: int, channel: int):
        super().__init__(f"cell ({row}, {channel}) outside {ROWS}x{CHANNELS} pattern")
        self.row = row
        self.channel = channel


def check_cell(row: int, channel: int):
    """Raise PatternIndexError unless (row, channel) is inside the grid."""
    if not (0 <= row < ROWS and 0 <= channel < CHANNELS):
        raise PatternIndexError(row, channel)


class NoteHandle(Protocol):
    """Mutable view of one cell."""
    note: int
    instrument: int
    effect: int
    param: int


class NoteGrid(Protocol):
    """Anything the clipboard and undo history can read and write."""

    def get_note(self, row: int, channel: int) -> NoteHandle:
        ...


@dataclass
class Note:
    """Single cell in a pattern."""
    note: int = 0
    instrument: int = 0
    effect: int = 0
    param: int = 0

    def clear(self):
        self.note = self.instrument = self.effect = self.param = 0

    def copy(self) -> 'Note':
        return Note(self.note, self.instrument, self.effect, self.param)

    def is_empty(self) -> bool:
        return not (self.note or self.instrument or self.effect or self.param)

    @classmethod
    def capture(cls, handle: NoteHandle) -> 'Note':
        """Copy a cell field by field. Never keeps a reference to the handle."""
        return cls(handle.note, handle.instrument, handle.effect, handle.param)

    def apply_to(self, handle: NoteHandle):
        """Write this note's fields into a cell."""
        handle.note = self.note
        handle.instrument = self.instrument
        handle.effect = self.effect
        handle.param = self.param

    def __str__(self) -> str:
        if self.note == 0:
            inst = "--"
        else:
            inst = f"{self.instrument:02X}"
        if self.effect == 0 and self.param == 0:
            fx = "..."
        else:
            fx = f"{self.effect:X}{self.param:02X}"
        return f"{note_to_str(self.note)} {inst} {fx}"


EMPTY_NOTE = Note()

Snapshot = Tuple[Tuple[Note, ...], ...]


def capture_grid(grid: NoteGrid) -> Snapshot:
    """Copy every cell of a grid, row-major."""
    return tuple(
        tuple(Note.capture(grid.get_note(r, ch)) for ch in range(CHANNELS))
        for r in range(ROWS)
    )


def apply_grid(grid: NoteGrid, snapshot: Snapshot):
    """Write a captured snapshot back into a grid."""
    for r in range(ROWS):
        for ch in range(CHANNELS):
            snapshot[r][ch].apply_to(grid.get_note(r, ch))


# =============================================================================
# LIST-BACKED GRID
# =============================================================================

@dataclass
class Pattern:
    """Fixed ROWS x CHANNELS grid of notes."""
    rows: List[List[Note]] = field(default_factory=list)

    def __post_init__(self):
        # Fresh storage: caller's lists and Note objects are never shared
        rows = []
        for row in self.rows[:ROWS]:
            cells = [n.copy() for n in row[:CHANNELS]]
            cells.extend(Note() for _ in range(CHANNELS - len(cells)))
            rows.append(cells)
        while len(rows) < ROWS:
            rows.append([Note() for _ in range(CHANNELS)])
        self.rows = rows

    def get_note(self, row: int, channel: int) -> Note:
        check_cell(row, channel)
        return self.rows[row][channel]

    def clear(self):
        for row in self.rows:
            for note in row:
                note.clear()

    def copy(self) -> 'Pattern':
        return Pattern(rows=self.rows)

    def is_empty(self) -> bool:
        return all(n.is_empty() for row in self.rows for n in row)


# =============================================================================
# ARRAY-BACKED GRID
# =============================================================================

class NoteView:
    """Handle onto one cell of an ArrayPattern.

    Reads and writes go straight to the grid's arrays, so two views of the
    same cell always agree.
    """
    __slots__ = ('_grid', 'row', 'channel')

    def __init__(self, grid: 'ArrayPattern', row: int, channel: int):
        self._grid = grid
        self.row = row
        self.channel = channel

    def _get(self, name: str) -> int:
        return int(getattr(self._grid, name)[self.row, self.channel])

    def _set(self, name: str, value: int):
        getattr(self._grid, name)[self.row, self.channel] = value

    note = property(lambda self: self._get('note'),
                    lambda self, v: self._set('note', v))
    instrument = property(lambda self: self._get('instrument'),
                          lambda self, v: self._set('instrument', v))
    effect = property(lambda self: self._get('effect'),
                      lambda self, v: self._set('effect', v))
    param = property(lambda self: self._get('param'),
                     lambda self, v: self._set('param', v))

    def clear(self):
        for name in NOTE_FIELDS:
            self._set(name, 0)

    def is_empty(self) -> bool:
        return not any(self._get(name) for name in NOTE_FIELDS)

    def __repr__(self) -> str:
        return f"NoteView({self.row}, {self.channel}, {Note.capture(self)!r})"


class ArrayPattern:
    """ROWS x CHANNELS grid stored as one int array per note field."""

    def __init__(self):
        self.note = np.zeros((ROWS, CHANNELS), dtype=np.int32)
        self.instrument = np.zeros((ROWS, CHANNELS), dtype=np.int32)
        self.effect = np.zeros((ROWS, CHANNELS), dtype=np.int32)
        self.param = np.zeros((ROWS, CHANNELS), dtype=np.int32)

    def get_note(self, row: int, channel: int) -> NoteView:
        # Negative indices would silently wrap in numpy
        check_cell(row, channel)
        return NoteView(self, row, channel)

    def clear(self):
        for name in NOTE_FIELDS:
            getattr(self, name).fill(0)

    def is_empty(self) -> bool:
        return not any(getattr(self, name).any() for name in NOTE_FIELDS)

    @classmethod
    def from_pattern(cls, pattern: NoteGrid) -> 'ArrayPattern':
        grid = cls()
        apply_grid(grid, capture_grid(pattern))
        return grid

    def to_pattern(self) -> Pattern:
        return Pattern(rows=[list(row) for row in capture_grid(self)])
