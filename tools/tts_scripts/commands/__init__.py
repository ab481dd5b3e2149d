"""CLI commands for syncing save scripts.

This module exports the two command handlers and their walkers:
- extract: save -> sidecar files
- pack: sidecar files -> save
"""

from tts_scripts.commands.common import SyncSummary, load_document
from tts_scripts.commands.extract import cmd_extract, extract_node, prune_stale_sidecars
from tts_scripts.commands.pack import cmd_pack, pack_node

__all__ = [
    # Shared
    "SyncSummary",
    "load_document",
    # Extract
    "cmd_extract",
    "extract_node",
    "prune_stale_sidecars",
    # Pack
    "cmd_pack",
    "pack_node",
]
