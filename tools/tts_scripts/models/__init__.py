"""Domain models for Tabletop Simulator saves.

This module exports the scriptable node types shared by both walkers:
- ScriptableNode: common script/UI/children accessors
- SaveDocument and ObjectState: the two node variants
"""

from tts_scripts.models.nodes import ObjectState, SaveDocument, ScriptableNode

__all__ = [
    "ScriptableNode",
    "SaveDocument",
    "ObjectState",
]
