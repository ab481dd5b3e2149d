"""Pack command: sidecar files -> save document.

Reads <Name>.<GUID>.lua / .xml (and global.*) back into the loaded save and
writes the save in place. A missing sidecar leaves its field untouched; it
never clears a script. Objects sharing a sidecar name (duplicate GUIDs) are
left untouched too, since one file cannot hold both of their scripts.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tts_scripts.commands.common import SyncSummary, load_document
from tts_scripts.config import EXIT_OK, SCRIPT_SUFFIX, UI_SUFFIX
from tts_scripts.errors import ScriptDirNotFoundError
from tts_scripts.models import ScriptableNode
from tts_scripts.persistence import (
    object_base_path,
    read_sidecar,
    sidecar_path,
    write_save_file,
)
from tts_scripts.persistence.save_paths import SavePaths
from tts_scripts.validation import find_shared_stems

logger = logging.getLogger(__name__)


def pack_node(
    source_dir: Path,
    node: ScriptableNode,
    summary: SyncSummary,
    *,
    shared_stems: frozenset[str] = frozenset(),
) -> None:
    """Load a node's sidecar files into it, then recurse into its children.

    Every read of the subtree has completed when this returns, so the
    caller can serialize the document straight afterwards.

    Args:
        source_dir: Existing script directory
        node: Document or object to pack
        summary: Collects counts and touched paths
        shared_stems: Stems used by several objects; those objects are skipped
    """
    base_path = object_base_path(source_dir, node)

    if base_path.name in shared_stems:
        logger.warning("Skipped %s: sidecar name is shared by several objects", base_path.name)
    else:
        script_path = sidecar_path(base_path, SCRIPT_SUFFIX)
        if script_path.is_file():
            node.lua_script = read_sidecar(script_path)
            summary.record(script_path)

        ui_path = sidecar_path(base_path, UI_SUFFIX)
        if ui_path.is_file():
            node.xml_ui = read_sidecar(ui_path)
            summary.record(ui_path)

    for child in node.children:
        pack_node(source_dir, child, summary, shared_stems=shared_stems)


def cmd_pack(paths: SavePaths, _args: argparse.Namespace) -> int:
    """Pack the script directory back into the save.

    Args:
        paths: Resolved save paths
        _args: CLI arguments (unused)

    Returns:
        0 on success

    Raises:
        ScriptDirNotFoundError: If the script directory doesn't exist;
            the save is left unmodified

    Output:
        "Packed N scripts and M UI files into <save>"
    """
    document = load_document(paths)
    if not paths.script_dir.is_dir():
        raise ScriptDirNotFoundError(str(paths.script_dir))

    summary = SyncSummary()
    pack_node(
        paths.script_dir,
        document,
        summary,
        shared_stems=find_shared_stems(document),
    )
    write_save_file(paths.save_file, document.data)

    print(
        f"Packed {summary.scripts} scripts and {summary.ui_files} UI files "
        f"into {paths.save_file}"
    )
    return EXIT_OK
