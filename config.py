"""TinyTracker - Editor Configuration

Loads editor settings from tracker_config.json, validates them, and applies
the log level to the "tracker" logger.

On load errors: falls back to defaults and logs warnings. Loading never
raises, a broken file only costs the user their custom settings.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from constants import APP_NAME, APP_VERSION, ROWS

logger = logging.getLogger("tracker.config")

CONFIG_FILENAME = "tracker_config.json"
APP_DIR = Path(__file__).parent

DEFAULT_UNDO_LIMIT = 100
MAX_UNDO_LIMIT = 1000
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EditorConfig:
    """Loaded and validated editor configuration."""
    undo_limit: int = DEFAULT_UNDO_LIMIT
    channel_copy_rows: int = ROWS
    log_level: str = DEFAULT_LOG_LEVEL
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    source: str = "defaults"    # "defaults" or path

    def to_dict(self) -> dict:
        return {
            'undo_limit': self.undo_limit,
            'channel_copy_rows': self.channel_copy_rows,
            'log_level': self.log_level,
        }


def get_config_path() -> Path:
    """Get path to tracker_config.json (next to the tracker modules)."""
    return APP_DIR / CONFIG_FILENAME


# =============================================================================
# VALIDATION
# =============================================================================

def _int_setting(config: EditorConfig, data: dict, key: str,
                 lo: int, hi: int, default: int) -> int:
    val = data.get(key, default)
    # bool is an int subclass; "true" is not a row count
    if isinstance(val, bool) or not isinstance(val, int):
        config.warnings.append(
            f"'{key}': expected an integer, got {type(val).__name__} - using {default}")
        return default
    if not (lo <= val <= hi):
        config.warnings.append(
            f"'{key}': {val} outside {lo}..{hi} - using {default}")
        return default
    return val


def _level_setting(config: EditorConfig, data: dict) -> str:
    val = data.get('log_level', DEFAULT_LOG_LEVEL)
    if not isinstance(val, str) or val.upper() not in LOG_LEVELS:
        config.warnings.append(
            f"'log_level': {val!r} is not one of {', '.join(LOG_LEVELS)} "
            f"- using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return val.upper()


# =============================================================================
# LOADING AND SAVING
# =============================================================================

def load_config(path: Optional[Union[str, Path]] = None) -> EditorConfig:
    """Load editor configuration.

    If the file doesn't exist, uses defaults silently.
    If the file has errors, uses defaults for broken entries and reports warnings.
    Always returns a valid EditorConfig.
    """
    config = EditorConfig()
    config_path = Path(path) if path is not None else get_config_path()

    if not config_path.exists():
        logger.debug(f"Config file not found: {config_path}")
        return config

    config.source = str(config_path)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        config.errors.append(f"{config_path.name}: JSON parse error: {e}")
        config.source = f"defaults ({config_path.name} has errors)"
        data = {}
    except (OSError, UnicodeDecodeError) as e:
        config.errors.append(f"{config_path.name}: read error: {e}")
        config.source = f"defaults ({config_path.name} unreadable)"
        data = {}

    if not isinstance(data, dict):
        config.errors.append(f"{config_path.name}: root must be a JSON object {{}}")
        data = {}

    for key in data:
        if key.startswith("_"):
            continue  # Skip comments
        if key not in EditorConfig().to_dict():
            config.warnings.append(f"Unknown setting '{key}' - ignored")

    config.undo_limit = _int_setting(
        config, data, 'undo_limit', 1, MAX_UNDO_LIMIT, DEFAULT_UNDO_LIMIT)
    config.channel_copy_rows = _int_setting(
        config, data, 'channel_copy_rows', 1, ROWS, ROWS)
    config.log_level = _level_setting(config, data)

    for e in config.errors:
        logger.error(f"[CONFIG] {e}")
    for w in config.warnings:
        logger.warning(f"[CONFIG] {w}")
    logger.info(f"Config loaded from {config.source}")
    return config


def generate_default_config() -> str:
    """Generate default tracker_config.json content."""
    data = {"_comment": f"{APP_NAME} {APP_VERSION} - Editor Configuration"}
    data.update(EditorConfig().to_dict())
    return json.dumps(data, indent=2)


def save_config(config: EditorConfig, path: Optional[Union[str, Path]] = None) -> bool:
    """Write settings to disk. Returns False (and logs) on failure."""
    config_path = Path(path) if path is not None else get_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        logger.debug(f"Config saved to {config_path}")
        return True
    except OSError as e:
        logger.error(f"Config save error: {e}")
        return False


def apply_log_level(config: EditorConfig):
    """Set the level of the "tracker" logger hierarchy.

    An unknown level name (possible when EditorConfig is built directly
    rather than through load_config) falls back to DEFAULT_LOG_LEVEL.
    """
    level = str(config.log_level).upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown log level {config.log_level!r} - using {DEFAULT_LOG_LEVEL}")
        level = DEFAULT_LOG_LEVEL
    logging.getLogger("tracker").setLevel(getattr(logging, level))


def ensure_config_file(path: Optional[Union[str, Path]] = None):
    """Create tracker_config.json with defaults if it doesn't exist."""
    config_path = Path(path) if path is not None else get_config_path()
    if config_path.exists():
        return
    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(generate_default_config())
        logger.info(f"Created default {config_path.name}")
    except OSError as e:
        logger.warning(f"Could not create {config_path.name}: {e}")
