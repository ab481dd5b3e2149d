"""Save document and sidecar file I/O.

This module handles the two kinds of files the tool touches:
- The save document (JSON), read once and written back after pack
- Sidecar scripts and UI files, moved as verbatim UTF-8 text

Sidecars are opened with newline="" so Windows line endings written by
Tabletop Simulator survive a round trip byte for byte.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tts_scripts.config import SIDECAR_ENCODING

logger = logging.getLogger(__name__)


def load_save_file(path: Path) -> Any:
    """Parse a save document.

    Args:
        path: Path to the <save-name>.json file

    Returns:
        Parsed Python object (a dict for any real save), key order preserved

    Raises:
        FileNotFoundError: If the save doesn't exist
        json.JSONDecodeError: If the save is not valid JSON
        UnicodeDecodeError: If the save is not valid UTF-8
    """
    raw = path.read_text(encoding="utf-8")
    logger.debug("Loaded save %s (%d bytes)", path, len(raw))
    return json.loads(raw)


def write_save_file(path: Path, payload: Any) -> None:
    """Write a save document atomically.

    Uses a write-then-rename pattern:
    1. Write to a temporary file (path.tmp)
    2. Rename temp file to target path

    Invariants:
        - Output is indented by 2 spaces, keys in insertion order
        - Non-ASCII text is written as-is rather than \\u-escaped
        - Original file is not corrupted if serialization fails partway
    """
    temp_path = path.with_suffix(f"{path.suffix}.tmp")
    serialized = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    temp_path.write_text(serialized, encoding="utf-8")
    temp_path.replace(path)
    logger.debug("Wrote save %s", path)


def read_sidecar(path: Path) -> str:
    """Read a sidecar file verbatim."""
    with open(path, "r", encoding=SIDECAR_ENCODING, newline="") as handle:
        return handle.read()


def write_sidecar(path: Path, text: str) -> None:
    """Create or overwrite a sidecar file with exactly ``text``."""
    with open(path, "w", encoding=SIDECAR_ENCODING, newline="") as handle:
        handle.write(text)
    logger.debug("Wrote %s", path)
