"""Extract command: save document -> sidecar files.

Writes every node's Lua script and XML UI to
<script-dir>/<Name>.<GUID>.lua / .xml, plus global.lua / global.xml for the
save itself. The save document is never modified.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tts_scripts.commands.common import SyncSummary, load_document
from tts_scripts.config import EXIT_OK, SCRIPT_SUFFIX, SIDECAR_SUFFIXES, UI_SUFFIX
from tts_scripts.models import ScriptableNode
from tts_scripts.persistence import object_base_path, sidecar_path, write_sidecar
from tts_scripts.persistence.save_paths import SavePaths

logger = logging.getLogger(__name__)


def extract_node(
    target_dir: Path,
    node: ScriptableNode,
    summary: SyncSummary,
    *,
    skip_empty: bool = False,
) -> None:
    """Write a node's sidecar files, then recurse into its children.

    Any string value is written, including "", unless skip_empty is set.
    Existing files are overwritten. Children are visited in document order.

    Args:
        target_dir: Existing script directory
        node: Document or object to extract
        summary: Collects counts and touched paths
        skip_empty: Skip fields whose text is the empty string
    """
    base_path = object_base_path(target_dir, node)

    for suffix, text in ((SCRIPT_SUFFIX, node.lua_script), (UI_SUFFIX, node.xml_ui)):
        if text is None or (skip_empty and text == ""):
            continue
        path = sidecar_path(base_path, suffix)
        write_sidecar(path, text)
        summary.record(path)

    for child in node.children:
        extract_node(target_dir, child, summary, skip_empty=skip_empty)


def prune_stale_sidecars(script_dir: Path, keep: set[Path]) -> list[Path]:
    """Delete .lua/.xml files in script_dir that are not in keep.

    Only regular files directly inside script_dir with a sidecar suffix are
    considered; anything else the user keeps there is left alone.

    Returns:
        Deleted paths, sorted by name
    """
    removed: list[Path] = []
    for entry in sorted(script_dir.iterdir()):
        if entry.suffix not in SIDECAR_SUFFIXES or not entry.is_file():
            continue
        if entry in keep:
            continue
        entry.unlink()
        logger.debug("Removed stale %s", entry)
        removed.append(entry)
    return removed


def cmd_extract(paths: SavePaths, args: argparse.Namespace) -> int:
    """Extract all scripts and UI from a save.

    Args:
        paths: Resolved save paths
        args: CLI arguments (skip_empty, prune)

    Returns:
        0 on success

    Output:
        "Extracted N scripts and M UI files to <dir>"
        "Removed K stale files" when --prune deleted anything
    """
    document = load_document(paths)
    paths.script_dir.mkdir(parents=True, exist_ok=True)

    summary = SyncSummary()
    extract_node(
        paths.script_dir,
        document,
        summary,
        skip_empty=getattr(args, "skip_empty", False),
    )
    if getattr(args, "prune", False):
        summary.pruned = prune_stale_sidecars(paths.script_dir, summary.touched)

    print(
        f"Extracted {summary.scripts} scripts and {summary.ui_files} UI files "
        f"to {paths.script_dir}"
    )
    if summary.pruned:
        print(f"Removed {len(summary.pruned)} stale files")
    return EXIT_OK
