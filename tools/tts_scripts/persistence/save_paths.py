"""Save and sidecar path resolution.

This module locates a save file under the Tabletop Simulator saves root and
computes where each node's sidecar files live inside the script directory.
Everything here is pure path arithmetic; nothing touches the filesystem
except Path.home() in default_saves_dir().
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tts_scripts.config import SAVE_FILE_SUFFIX, SAVES_SUBPATH
from tts_scripts.errors import UnsafeNameError
from tts_scripts.models import ScriptableNode

_PATH_SEPARATORS = ("/", "\\")


@dataclass(frozen=True, slots=True)
class SavePaths:
    """Resolved paths for one save.

    Invariants:
        - save_file is <saves_dir>/<save-name>.json
        - script_dir is <saves_dir>/<save-name>, a sibling of save_file
    """
    saves_dir: Path
    save_file: Path
    script_dir: Path


def default_saves_dir() -> Path:
    """Return the saves root under the current user's home directory."""
    return Path.home() / SAVES_SUBPATH


def resolve_save_paths(save_name: str, saves_dir: Path | None = None) -> SavePaths:
    """Resolve the save file and script directory for a save name.

    Args:
        save_name: Save name as typed on the command line (no extension)
        saves_dir: Saves root; defaults to default_saves_dir()

    Returns:
        SavePaths for the save
    """
    root = saves_dir if saves_dir is not None else default_saves_dir()
    return SavePaths(
        saves_dir=root,
        save_file=root / f"{save_name}{SAVE_FILE_SUFFIX}",
        script_dir=root / save_name,
    )


def check_safe_stem(stem: str) -> str:
    """Reject stems that would not name a plain file inside the script directory.

    Raises:
        UnsafeNameError: If the stem contains a path separator or is "." / ".."
    """
    if stem in ("", ".", "..") or any(sep in stem for sep in _PATH_SEPARATORS):
        raise UnsafeNameError(stem)
    return stem


def object_base_path(base_dir: Path, node: ScriptableNode) -> Path:
    """Compute the extensionless sidecar path for a node.

    The document resolves to <base_dir>/global; every object resolves to
    <base_dir>/<Name>.<GUID>.

    Raises:
        MissingFieldError: If an object lacks Name or GUID
        UnsafeNameError: If the resulting stem is not a plain file name
    """
    return base_dir / check_safe_stem(node.base_name())


def sidecar_path(base_path: Path, suffix: str) -> Path:
    """Append a sidecar suffix to a base path.

    Object stems already contain a dot ("Bag.abc123"), so Path.with_suffix
    would replace the GUID instead of appending.
    """
    return base_path.with_name(f"{base_path.name}{suffix}")
