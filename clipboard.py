"""TinyTracker - Pattern Clipboard

Holds one snapshot of note data at a time and applies copy / paste / clear /
insert / delete against any NoteGrid.

Buffer shapes:
    CELL     one Note
    ROW      CHANNELS notes, channel order
    CHANNEL  1..ROWS notes down one channel, row order
    PATTERN  ROWS x CHANNELS notes, row-major

Every copy stores fresh Note values, never grid handles, so later edits to
the source grid do not leak into the clipboard.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from constants import ROWS, CHANNELS
from data_model import Note, NoteGrid, EMPTY_NOTE, capture_grid

logger = logging.getLogger("tracker.clipboard")


class ClipType(Enum):
    EMPTY = "empty"
    CELL = "cell"
    ROW = "row"
    CHANNEL = "channel"
    PATTERN = "pattern"


@dataclass(frozen=True)
class CellClip:
    note: Note


@dataclass(frozen=True)
class RowClip:
    notes: Tuple[Note, ...]


@dataclass(frozen=True)
class ChannelClip:
    notes: Tuple[Note, ...]


@dataclass(frozen=True)
class PatternClip:
    rows: Tuple[Tuple[Note, ...], ...]


Clip = Union[CellClip, RowClip, ChannelClip, PatternClip]


class PatternClipboard:
    """Copy/paste clipboard for pattern cells, rows, channel runs and patterns."""

    def __init__(self):
        self._buffer: Optional[Clip] = None

    # =========================================================================
    # COPY
    # =========================================================================

    def copy_cell(self, pattern: NoteGrid, row: int, channel: int):
        self._buffer = CellClip(Note.capture(pattern.get_note(row, channel)))
        logger.debug(f"Copied cell ({row}, {channel})")

    def copy_row(self, pattern: NoteGrid, row: int):
        self._buffer = RowClip(tuple(
            Note.capture(pattern.get_note(row, ch)) for ch in range(CHANNELS)))
        logger.debug(f"Copied row {row}")

    def copy_pattern(self, pattern: NoteGrid):
        self._buffer = PatternClip(capture_grid(pattern))
        logger.debug("Copied pattern")

    def copy_channel(self, pattern: NoteGrid, row: int, channel: int,
                     num_rows: int = ROWS) -> int:
        """Copy a vertical run of cells starting at (row, channel).

        The run is cut short at the bottom of the grid instead of failing.
        Returns the number of cells actually copied.
        """
        if num_rows < 1:
            raise ValueError(f"num_rows must be positive, got {num_rows}")
        # At least one read, so a row past the grid surfaces as an index error
        count = max(1, min(num_rows, ROWS - row))
        self._buffer = ChannelClip(tuple(
            Note.capture(pattern.get_note(row + i, channel)) for i in range(count)))
        if count < num_rows:
            logger.debug(f"Channel copy truncated: {num_rows} -> {count} rows")
        logger.debug(f"Copied {count} rows of channel {channel} from row {row}")
        return count

    # =========================================================================
    # PASTE
    # =========================================================================

    def paste(self, pattern: NoteGrid, row: int, channel: int = 0):
        """Write the buffer into a grid.

        ROW ignores channel, PATTERN always lands on rows 0..ROWS-1 and
        ignores both coordinates. CHANNEL stops at the bottom of the grid.
        Pasting an empty clipboard does nothing.
        """
        buf = self._buffer
        if buf is None:
            return
        if isinstance(buf, RowClip):
            for ch, note in enumerate(buf.notes):
                note.apply_to(pattern.get_note(row, ch))
        elif isinstance(buf, PatternClip):
            for r, notes in enumerate(buf.rows):
                for ch, note in enumerate(notes):
                    note.apply_to(pattern.get_note(r, ch))
        elif isinstance(buf, ChannelClip):
            for i, note in enumerate(buf.notes):
                if row + i >= ROWS:
                    break
                note.apply_to(pattern.get_note(row + i, channel))
        else:
            buf.note.apply_to(pattern.get_note(row, channel))

    # =========================================================================
    # CLEAR / SHIFT
    # =========================================================================

    def clear_cell(self, pattern: NoteGrid, row: int, channel: int):
        EMPTY_NOTE.apply_to(pattern.get_note(row, channel))

    def clear_row(self, pattern: NoteGrid, row: int):
        for ch in range(CHANNELS):
            EMPTY_NOTE.apply_to(pattern.get_note(row, ch))

    def clear_pattern(self, pattern: NoteGrid):
        for r in range(ROWS):
            self.clear_row(pattern, r)

    def insert_row(self, pattern: NoteGrid, row: int):
        """Insert a blank row at `row`. The bottom row falls off the grid."""
        pattern.get_note(row, 0)
        for r in range(ROWS - 1, row, -1):
            self._copy_row_within(pattern, r - 1, r)
        self.clear_row(pattern, row)

    def delete_row(self, pattern: NoteGrid, row: int):
        """Remove `row`, pulling everything below up. The last row becomes blank."""
        pattern.get_note(row, 0)
        for r in range(row, ROWS - 1):
            self._copy_row_within(pattern, r + 1, r)
        self.clear_row(pattern, ROWS - 1)

    @staticmethod
    def _copy_row_within(pattern: NoteGrid, src: int, dst: int):
        for ch in range(CHANNELS):
            Note.capture(pattern.get_note(src, ch)).apply_to(pattern.get_note(dst, ch))

    # =========================================================================
    # STATE
    # =========================================================================

    def has_data(self) -> bool:
        return self._buffer is not None

    def get_type(self) -> ClipType:
        buf = self._buffer
        if buf is None:
            return ClipType.EMPTY
        if isinstance(buf, CellClip):
            return ClipType.CELL
        if isinstance(buf, RowClip):
            return ClipType.ROW
        if isinstance(buf, ChannelClip):
            return ClipType.CHANNEL
        return ClipType.PATTERN

    @property
    def num_rows(self) -> int:
        buf = self._buffer
        if buf is None:
            return 0
        if isinstance(buf, ChannelClip):
            return len(buf.notes)
        if isinstance(buf, PatternClip):
            return len(buf.rows)
        return 1

    @property
    def num_channels(self) -> int:
        buf = self._buffer
        if buf is None:
            return 0
        if isinstance(buf, (RowClip, PatternClip)):
            return CHANNELS
        return 1

    def clear(self):
        """Drop the buffer."""
        self._buffer = None
