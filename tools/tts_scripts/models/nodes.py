"""Scriptable node models for Tabletop Simulator saves.

A save is a tree: the document owns ``ObjectStates`` and any object may own
``ContainedObjects`` (bags, decks, infinite containers). Both the document
and its objects can carry a Lua script and an XML UI, so they share one
model with two variants that differ only in how they are named on disk and
where their children live.

The models wrap the live parsed dictionaries instead of copying them.
Assigning ``lua_script`` or ``xml_ui`` mutates the loaded save in place,
which keeps every other key, and the original key order, intact when the
save is written back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator

from tts_scripts.config import (
    CONTAINED_OBJECTS_KEY,
    GLOBAL_BASENAME,
    GUID_KEY,
    LUA_SCRIPT_KEY,
    LUA_SCRIPT_STATE_KEY,
    NAME_KEY,
    OBJECT_STATES_KEY,
    SAVE_NAME_KEY,
    XML_UI_KEY,
)
from tts_scripts.errors import MissingFieldError


def _string_field(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


@dataclass(eq=False)
class ScriptableNode:
    """A save tree element that may carry a script and a UI.

    Invariants:
        - data is the dictionary owned by the parsed save, never a copy
        - children are yielded in document order
    """
    data: dict[str, Any]

    children_key: ClassVar[str] = ""

    @property
    def lua_script(self) -> str | None:
        """Lua script text, or None when absent or not a string."""
        return _string_field(self.data, LUA_SCRIPT_KEY)

    @lua_script.setter
    def lua_script(self, value: str) -> None:
        self.data[LUA_SCRIPT_KEY] = value

    @property
    def xml_ui(self) -> str | None:
        """XML UI markup, or None when absent or not a string."""
        return _string_field(self.data, XML_UI_KEY)

    @xml_ui.setter
    def xml_ui(self, value: str) -> None:
        self.data[XML_UI_KEY] = value

    @property
    def lua_script_state(self) -> str | None:
        """Serialized script state. Carried through untouched."""
        return _string_field(self.data, LUA_SCRIPT_STATE_KEY)

    @property
    def children(self) -> list[ObjectState]:
        """Direct child objects, or an empty list when the node has none."""
        raw = self.data.get(self.children_key)
        if not isinstance(raw, list):
            return []
        return [ObjectState(child) for child in raw if isinstance(child, dict)]

    def base_name(self) -> str:
        """Extensionless file name shared by this node's sidecar files."""
        raise NotImplementedError

    def iter_tree(self) -> Iterator[ScriptableNode]:
        """Yield this node and all descendants, depth first, in document order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()


@dataclass(eq=False)
class SaveDocument(ScriptableNode):
    """The save itself. Its Global script and UI are stored as ``global.*``."""

    children_key: ClassVar[str] = OBJECT_STATES_KEY

    @property
    def save_name(self) -> str | None:
        return _string_field(self.data, SAVE_NAME_KEY)

    def base_name(self) -> str:
        return GLOBAL_BASENAME


@dataclass(eq=False)
class ObjectState(ScriptableNode):
    """An object on the table or inside a container."""

    children_key: ClassVar[str] = CONTAINED_OBJECTS_KEY

    @property
    def name(self) -> str | None:
        return _string_field(self.data, NAME_KEY)

    @property
    def guid(self) -> str | None:
        """Identifier, or None when absent, not a string, or empty."""
        return _string_field(self.data, GUID_KEY) or None

    def base_name(self) -> str:
        """Return ``<Name>.<GUID>``.

        Raises:
            MissingFieldError: If Name or GUID is missing
        """
        name = self.name
        if name is None:
            raise MissingFieldError(NAME_KEY)
        guid = self.guid
        if guid is None:
            raise MissingFieldError(GUID_KEY)
        return f"{name}.{guid}"
