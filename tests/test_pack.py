"""
Unit Tests for the Pack Walker
"""

import copy

from tts_scripts.commands import SyncSummary, extract_node, pack_node
from tts_scripts.models import SaveDocument


class TestPackNode:
    """Tests for pack_node()."""

    def test_pack_when_files_edited_then_fields_updated(self, tmp_path, sample_save):
        extract_node(tmp_path, SaveDocument(sample_save), SyncSummary())
        (tmp_path / "Card.c0ffee.lua").write_text("print('edited')", encoding="utf-8")
        (tmp_path / "global.xml").write_text("<Panel id='x'/>", encoding="utf-8")

        pack_node(tmp_path, SaveDocument(sample_save), SyncSummary())

        card = sample_save["ObjectStates"][0]["ContainedObjects"][0]
        assert card["LuaScript"] == "print('edited')"
        assert sample_save["XmlUI"] == "<Panel id='x'/>"

    def test_pack_when_roundtrip_then_fields_identical(self, tmp_path, sample_save):
        original = copy.deepcopy(sample_save)
        extract_node(tmp_path, SaveDocument(sample_save), SyncSummary())
        pack_node(tmp_path, SaveDocument(sample_save), SyncSummary())
        assert sample_save == original

    def test_pack_when_sidecar_deleted_then_field_kept(self, tmp_path, sample_save):
        """Deleting a file skips the update; it never clears the script."""
        extract_node(tmp_path, SaveDocument(sample_save), SyncSummary())
        (tmp_path / "Bag.def456.lua").unlink()

        summary = SyncSummary()
        pack_node(tmp_path, SaveDocument(sample_save), summary)

        assert sample_save["ObjectStates"][1]["LuaScript"] == "print(2)"
        assert summary.scripts == 3

    def test_pack_when_new_file_for_scriptless_object_then_field_added(self, tmp_path, sample_save):
        (tmp_path / "Card.b00b00.lua").write_text("print(3)", encoding="utf-8")
        pack_node(tmp_path, SaveDocument(sample_save), SyncSummary())
        assert sample_save["ObjectStates"][2]["LuaScript"] == "print(3)"

    def test_pack_when_crlf_then_preserved(self, tmp_path):
        document = SaveDocument({"SaveName": "T"})
        (tmp_path / "global.lua").write_bytes(b"a\r\nb\r\n")
        pack_node(tmp_path, document, SyncSummary())
        assert document.lua_script == "a\r\nb\r\n"

    def test_pack_when_directory_empty_then_nothing_changes(self, tmp_path, sample_save):
        original = copy.deepcopy(sample_save)
        summary = SyncSummary()
        pack_node(tmp_path, SaveDocument(sample_save), summary)
        assert sample_save == original
        assert summary.touched == set()

    def test_pack_when_stem_shared_then_node_skipped_children_visited(self, tmp_path):
        data = {"SaveName": "T", "ObjectStates": [
            {"Name": "Bag", "GUID": "aaa", "LuaScript": "old", "ContainedObjects": [
                {"Name": "Card", "GUID": "bbb", "LuaScript": "old"},
            ]},
        ]}
        (tmp_path / "Bag.aaa.lua").write_text("new", encoding="utf-8")
        (tmp_path / "Card.bbb.lua").write_text("new", encoding="utf-8")

        summary = SyncSummary()
        pack_node(tmp_path, SaveDocument(data), summary, shared_stems=frozenset({"Bag.aaa"}))

        bag = data["ObjectStates"][0]
        assert bag["LuaScript"] == "old"
        assert bag["ContainedObjects"][0]["LuaScript"] == "new"
        assert summary.scripts == 1
