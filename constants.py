"""TinyTracker - Constants"""

APP_NAME = "TinyTracker"
APP_VERSION = "1.0.0"

# === GRID ===
ROWS = 32
CHANNELS = 4

# === FIELD LIMITS ===
MAX_OCTAVES = 8
MAX_NOTE = MAX_OCTAVES * 12 - 1  # 0-95, 0 = empty
MAX_INSTRUMENT = 15
MAX_EFFECT = 0xF   # one hex digit
MAX_PARAM = 0xFF   # one byte

# === NOTE NAMES ===
NOTE_NAMES = ['C-', 'C#', 'D-', 'D#', 'E-', 'F-', 'F#', 'G-', 'G#', 'A-', 'A#', 'B-']


def note_to_str(note: int) -> str:
    """Convert note number to string (e.g. 48 -> 'C-4').

    0 is the empty cell ('---').
    """
    if note == 0:
        return "---"
    return f"{NOTE_NAMES[note % 12]}{note // 12}"
