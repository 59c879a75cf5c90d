"""Locate coolstore.toml.

The file is found by walking up from the working directory, the way git
finds ``.git/``.  ``COOLSTORE_CONFIG`` pins an explicit file and disables
the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "coolstore.toml"
CONFIG_ENV_VAR = "COOLSTORE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest coolstore.toml at or above *start*, or None."""
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
