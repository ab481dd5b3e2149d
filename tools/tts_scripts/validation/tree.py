"""Pre-walk validation of the save object tree.

The walkers name files from each object's Name and GUID, so a malformed
object would otherwise fail halfway through a run and leave a partially
written script directory. This pass checks the whole tree first.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from tts_scripts.config import (
    CONTAINED_OBJECTS_KEY,
    GUID_KEY,
    NAME_KEY,
    OBJECT_STATES_KEY,
    SAVE_NAME_KEY,
)
from tts_scripts.errors import UnsafeNameError, ValidationResult
from tts_scripts.models import ObjectState, SaveDocument
from tts_scripts.persistence.save_paths import check_safe_stem


def validate_tree(document: SaveDocument) -> ValidationResult:
    """Check every object in a save for the fields sidecar naming needs.

    Errors (block the run):
        - object without a string Name
        - object without a non-empty string GUID
        - Name/GUID that would not form a plain file name

    Warnings (reported, run continues):
        - save root without SaveName
        - entries in an object list that are not objects
        - two objects resolving to the same sidecar name

    Args:
        document: The parsed save

    Returns:
        ValidationResult with issues in tree walk order
    """
    result = ValidationResult()
    if document.save_name is None:
        result.add("$", f"missing {SAVE_NAME_KEY}", severity="warning")

    seen: dict[str, str] = {}
    _validate_children(document.data, OBJECT_STATES_KEY, "$", result, seen)
    return result


def _validate_children(
    parent: dict[str, Any],
    key: str,
    parent_path: str,
    result: ValidationResult,
    seen: dict[str, str],
) -> None:
    entries = parent.get(key)
    if not isinstance(entries, list):
        return
    for index, entry in enumerate(entries):
        path = f"{parent_path}.{key}[{index}]"
        if not isinstance(entry, dict):
            result.add(path, "entry is not an object; skipped", severity="warning")
            continue
        _validate_object(ObjectState(entry), path, result, seen)
        _validate_children(entry, CONTAINED_OBJECTS_KEY, path, result, seen)


def _validate_object(
    node: ObjectState,
    path: str,
    result: ValidationResult,
    seen: dict[str, str],
) -> None:
    if node.name is None:
        result.add(path, f"missing or non-string {NAME_KEY}")
    if node.guid is None:
        result.add(path, f"missing or empty {GUID_KEY}")
    if node.name is None or node.guid is None:
        return

    stem = node.base_name()
    try:
        check_safe_stem(stem)
    except UnsafeNameError as error:
        result.add(path, str(error))
        return

    if stem in seen:
        result.add(
            path,
            f"sidecar name '{stem}' already used by {seen[stem]}; "
            "pack leaves both objects unchanged",
            severity="warning",
        )
    else:
        seen[stem] = path


def find_shared_stems(document: SaveDocument) -> frozenset[str]:
    """Return sidecar stems that more than one object resolves to.

    Objects without a Name or GUID are ignored; validate_tree reports them.
    """
    counts = Counter(
        node.base_name()
        for node in document.iter_tree()
        if isinstance(node, ObjectState) and node.name is not None and node.guid is not None
    )
    return frozenset(stem for stem, count in counts.items() if count > 1)
