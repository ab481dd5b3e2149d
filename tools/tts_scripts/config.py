"""Configuration constants for Tabletop Simulator script syncing.

This module centralizes the save-format field names, sidecar naming rules,
and exit codes used across the CLI. Supporting another scriptable field
requires updating only this file and the node model.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Final, FrozenSet

# -----------------------------------------------------------------------------
# Save Format Fields
# -----------------------------------------------------------------------------

SAVE_NAME_KEY: Final[str] = "SaveName"
OBJECT_STATES_KEY: Final[str] = "ObjectStates"
CONTAINED_OBJECTS_KEY: Final[str] = "ContainedObjects"
NAME_KEY: Final[str] = "Name"
GUID_KEY: Final[str] = "GUID"
LUA_SCRIPT_KEY: Final[str] = "LuaScript"
LUA_SCRIPT_STATE_KEY: Final[str] = "LuaScriptState"
XML_UI_KEY: Final[str] = "XmlUI"


# -----------------------------------------------------------------------------
# Sidecar Files
# -----------------------------------------------------------------------------

GLOBAL_BASENAME: Final[str] = "global"
"""Base name reserved for the save's own Global script and UI."""

SCRIPT_SUFFIX: Final[str] = ".lua"
UI_SUFFIX: Final[str] = ".xml"

SIDECAR_SUFFIXES: Final[FrozenSet[str]] = frozenset({SCRIPT_SUFFIX, UI_SUFFIX})
"""Suffixes owned by this tool inside a script directory (used by --prune)."""

SIDECAR_ENCODING: Final[str] = "utf-8"


# -----------------------------------------------------------------------------
# Locations
# -----------------------------------------------------------------------------

SAVES_SUBPATH: Final[PurePath] = PurePath(
    "Documents", "My Games", "Tabletop Simulator", "Saves"
)
"""Saves root relative to the user's home directory."""

SAVE_FILE_SUFFIX: Final[str] = ".json"


# -----------------------------------------------------------------------------
# Modes and Exit Codes
# -----------------------------------------------------------------------------

MODE_EXTRACT: Final[str] = "extract"
MODE_PACK: Final[str] = "pack"
MODES: Final[tuple[str, ...]] = (MODE_EXTRACT, MODE_PACK)

EXIT_OK: Final[int] = 0
EXIT_USAGE: Final[int] = 1
EXIT_INVALID_MODE: Final[int] = 2
EXIT_INVALID_SAVE: Final[int] = 3
"""Save rejected before any sidecar or document write happened."""
