"""Tests for progress persistence and found-word records."""

import json

import pytest
from wordjam.game import (
    FoundWords,
    GameConfig,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    ProgressStore,
    level_identity,
    reset_progress,
    share_text,
    WordJam,
)


IDENTITY = level_identity(["CRANE", "PLATE", "GRAPE", "STONE", "FLAME"])


class TestLevelIdentity:
    def test_sorted_and_normalized(self):
        assert level_identity(["stone", " Crane "]) == "CRANE,STONE"

    def test_order_independent(self):
        assert level_identity(["B", "A"]) == level_identity(["A", "B"])

    def test_different_words_differ(self):
        assert level_identity(["CAT", "DOG"]) != level_identity(["CAT", "BOG"])


class TestFoundWords:
    """Test cases for the found-word record."""

    def test_record_partitions_by_kind(self):
        found = FoundWords()
        assert found.record("crane", "level") is True
        assert found.record("CRATE", "other") is True
        assert found.level_words == ["CRANE"]
        assert found.other_words == ["CRATE"]
        assert found.total == 2

    def test_record_deduplicates(self):
        found = FoundWords()
        found.record("CRANE", "level")
        assert found.record("crane", "level") is False
        assert found.record("CRANE", "other") is False
        assert found.level_words == ["CRANE"]
        assert found.other_words == []

    def test_normalizes_on_load(self):
        """Duplicates and words in both lists are cleaned up."""
        found = FoundWords(level_words=["crane", "CRANE", "plate"], other_words=["Plate", "crate"])
        assert found.level_words == ["CRANE", "PLATE"]
        assert found.other_words == ["CRATE"]


class TestFoundWordsPersistence:
    """Test cases for saving and loading found words."""

    def test_round_trip(self):
        store = ProgressStore(MemoryStore())
        record = FoundWords(level_words=["CRANE", "STONE"], other_words=["CRATE"])

        store.save_found_words(IDENTITY, record)
        assert store.load_found_words(IDENTITY) == record

    def test_round_trip_json_file(self, tmp_path):
        path = tmp_path / "progress.json"
        store = ProgressStore(JsonFileStore(path))
        record = FoundWords(level_words=["FLAME"], other_words=[])

        store.save_found_words(IDENTITY, record)
        assert ProgressStore(JsonFileStore(path)).load_found_words(IDENTITY) == record
        assert f"wordjam_foundWords_{IDENTITY}" in json.loads(path.read_text())

    def test_missing_record(self):
        assert ProgressStore().load_found_words(IDENTITY) == FoundWords()

    def test_legacy_list_is_level_words(self):
        backend = MemoryStore({f"wordjam_foundWords_{IDENTITY}": json.dumps(["crane", "plate"])})
        found = ProgressStore(backend).load_found_words(IDENTITY)
        assert found.level_words == ["CRANE", "PLATE"]
        assert found.other_words == []

    def test_camel_case_record(self):
        value = json.dumps({"levelWords": ["CRANE"], "otherWords": ["CRATE"]})
        backend = MemoryStore({f"wordjam_foundWords_{IDENTITY}": value})
        found = ProgressStore(backend).load_found_words(IDENTITY)
        assert found == FoundWords(level_words=["CRANE"], other_words=["CRATE"])

    @pytest.mark.parametrize("value", [
        "{not json",
        "42",
        '"CRANE"',
        "[1, 2, 3]",
        '{"level_words": "CRANE"}',
    ])
    def test_malformed_record_is_empty(self, value):
        backend = MemoryStore({f"wordjam_foundWords_{IDENTITY}": value})
        assert ProgressStore(backend).load_found_words(IDENTITY) == FoundWords()

    def test_clear_found_words_keeps_highscore(self):
        store = ProgressStore()
        store.save_found_words(IDENTITY, FoundWords(level_words=["CRANE"]))
        store.save_found_words("CAT,DOG", FoundWords(level_words=["CAT"]))
        store.update_highscore(7)

        store.clear_found_words()
        assert store.load_found_words(IDENTITY) == FoundWords()
        assert store.load_found_words("CAT,DOG") == FoundWords()
        assert store.load_highscore() == 7

    def test_prefix_namespaces_keys(self):
        backend = MemoryStore()
        ProgressStore(backend, prefix="other_").save_found_words(IDENTITY, FoundWords(level_words=["CRANE"]))
        assert ProgressStore(backend).load_found_words(IDENTITY) == FoundWords()


class TestHighscoreAndTries:
    """Test cases for the global counters."""

    def test_highscore_defaults_to_zero(self):
        assert ProgressStore().load_highscore() == 0

    def test_highscore_only_increases(self):
        store = ProgressStore()
        assert store.update_highscore(5) == 5
        assert store.update_highscore(3) == 5
        assert store.update_highscore(5) == 5
        assert store.load_highscore() == 5
        assert store.update_highscore(6) == 6

    def test_malformed_highscore(self):
        backend = MemoryStore({"wordjam_highscore": "abc"})
        assert ProgressStore(backend).load_highscore() == 0

    def test_tries_round_trip(self):
        store = ProgressStore()
        assert store.load_tries() == 1
        store.save_tries(3)
        assert store.load_tries() == 3

    def test_reset_progress(self):
        store = ProgressStore()
        store.save_tries(4)
        store.save_found_words(IDENTITY, FoundWords(level_words=["CRANE"]))
        store.update_highscore(9)

        reset_progress(store)
        assert store.load_tries() == 1
        assert store.load_found_words(IDENTITY) == FoundWords()
        assert store.load_highscore() == 9


class TestJsonFileStore:
    def test_unreadable_file_is_empty(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_text("{broken")
        store = JsonFileStore(path)
        assert store.get("anything") is None
        assert store.keys() == []

    def test_set_and_delete(self, tmp_path):
        store = JsonFileStore(tmp_path / "nested" / "progress.json")
        store.set("a", "1")
        assert store.get("a") == "1"
        store.delete("a")
        assert store.get("a") is None

    def test_undecodable_file_is_empty(self, tmp_path):
        """Bytes that are not UTF-8 are ignored instead of raised."""
        path = tmp_path / "progress.json"
        path.write_bytes(b'{"wordjam_highscore": "\xff\xfe"}')

        store = ProgressStore(JsonFileStore(path))
        assert store.load_highscore() == 0
        assert store.load_tries() == 1

    def test_undecodable_file_does_not_stop_a_game(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_bytes(b'{"wordjam_highscore": "\xff\xfe"}')

        game = WordJam.create(config=GameConfig(seed=1), store=ProgressStore(JsonFileStore(path)))
        game.start()
        assert game.phase == "PLAYING"
        assert game.highscore == 0

    def test_write_replaces_file_whole(self, tmp_path):
        """Writes go through a temporary file that is swapped into place."""
        path = tmp_path / "progress.json"
        store = JsonFileStore(path)
        store.set("a", "1")
        store.set("b", "2")

        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": "2"}
        assert [p.name for p in tmp_path.iterdir()] == ["progress.json"]

    def test_backend_must_implement_interface(self):
        class GetOnly(KeyValueStore):
            def get(self, key):
                return None

        with pytest.raises(TypeError):
            GetOnly()


class TestShareText:
    def test_single_try(self):
        assert share_text(1) == "I have completed today's WordJam puzzle in 1 try"

    def test_multiple_tries_with_url(self):
        assert share_text(3, "https://example.com/") == (
            "I have completed today's WordJam puzzle in 3 tries https://example.com/"
        )
