from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_LOG_LEVEL = "INFO"


def data_directory() -> Path | None:
    """Data directory from GOURMAND_DATA_DIR, or None to use the packaged dataset."""
    directory = os.getenv("GOURMAND_DATA_DIR")

    if not directory:
        return None

    return Path(directory).expanduser()


def log_level() -> int:
    name = os.getenv("GOURMAND_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"GOURMAND_LOG_LEVEL has an unknown level: {name}")

    return level
