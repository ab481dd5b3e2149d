"""Helpers shared by the extract and pack commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tts_scripts.config import SCRIPT_SUFFIX
from tts_scripts.errors import ValidationError
from tts_scripts.models import SaveDocument
from tts_scripts.persistence import SavePaths, load_save_file
from tts_scripts.validation import validate_tree

logger = logging.getLogger(__name__)


@dataclass
class SyncSummary:
    """Sidecar files moved during one walk.

    Invariants:
        - touched holds every distinct sidecar path written or read this run
        - scripts + ui_files == len(touched)
    """
    touched: set[Path] = field(default_factory=set)
    pruned: list[Path] = field(default_factory=list)

    def record(self, path: Path) -> None:
        """Record one sidecar file; recording a path again is a no-op."""
        self.touched.add(path)

    @property
    def scripts(self) -> int:
        return sum(1 for path in self.touched if path.name.endswith(SCRIPT_SUFFIX))

    @property
    def ui_files(self) -> int:
        return len(self.touched) - self.scripts


def load_document(paths: SavePaths) -> SaveDocument:
    """Load and validate a save before any sidecar is touched.

    Raises:
        FileNotFoundError: If the save doesn't exist (not translated)
        json.JSONDecodeError: If the save is malformed (not translated)
        ValidationError: If the tree has objects that cannot be named
    """
    payload = load_save_file(paths.save_file)
    if not isinstance(payload, dict):
        raise ValidationError([f"$: save root in {paths.save_file} is not an object"])

    document = SaveDocument(payload)
    result = validate_tree(document)
    for issue in result.warnings:
        logger.warning("%s", issue)
    if not result:
        raise result.to_error()
    return document
