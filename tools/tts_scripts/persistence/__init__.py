"""Persistence layer for saves and sidecar files.

This module exports file I/O and path components:
- Save document parsing and atomic writes
- Verbatim sidecar reads and writes
- SavePaths and per-node sidecar path resolution
"""

from tts_scripts.persistence.json_io import (
    load_save_file,
    read_sidecar,
    write_save_file,
    write_sidecar,
)
from tts_scripts.persistence.save_paths import (
    SavePaths,
    check_safe_stem,
    default_saves_dir,
    object_base_path,
    resolve_save_paths,
    sidecar_path,
)

__all__ = [
    # JSON I/O
    "load_save_file",
    "write_save_file",
    "read_sidecar",
    "write_sidecar",
    # Paths
    "SavePaths",
    "check_safe_stem",
    "default_saves_dir",
    "object_base_path",
    "resolve_save_paths",
    "sidecar_path",
]
