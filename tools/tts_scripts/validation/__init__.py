"""Validation layer for save object trees."""

from tts_scripts.validation.tree import find_shared_stems, validate_tree

__all__ = ["find_shared_stems", "validate_tree"]
