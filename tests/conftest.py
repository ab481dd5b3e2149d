import json
from pathlib import Path

import pytest


@pytest.fixture
def sample_save():
    """Return a save with global scripts, a nested bag and a script-less card."""
    return {
        "SaveName": "Test",
        "GameMode": "Test Game",
        "LuaScript": "function onLoad() end",
        "LuaScriptState": "",
        "XmlUI": "<Panel/>",
        "ObjectStates": [
            {
                "Name": "Bag",
                "GUID": "abc123",
                "Nickname": "Loot",
                "LuaScript": "print(1)",
                "ContainedObjects": [
                    {
                        "Name": "Card",
                        "GUID": "c0ffee",
                        "LuaScript": "print('card')",
                        "XmlUI": "<Text>hi</Text>",
                    },
                ],
            },
            {
                "Name": "Bag",
                "GUID": "def456",
                "LuaScript": "print(2)",
            },
            {
                "Name": "Card",
                "GUID": "b00b00",
            },
        ],
    }


@pytest.fixture
def saves_dir(tmp_path: Path):
    """Return an empty saves root."""
    root = tmp_path / "Saves"
    root.mkdir()
    return root


@pytest.fixture
def write_save(saves_dir: Path):
    """Write a save dict as <saves_dir>/<name>.json and return its path."""

    def _write(payload, name: str = "Test") -> Path:
        path = saves_dir / f"{name}.json"
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write
