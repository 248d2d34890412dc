"""
Unit tests for key/value stores.
"""

import json

import pytest

from simlab.core.exceptions import SimLabStorageError
from simlab.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore


class TestInMemoryKeyValueStore:
    """Tests for the dict-backed store."""
    
    def test_get_unset(self, kv_store):
        """Test unset keys return the default."""
        assert kv_store.get("missing") is None
        assert kv_store.get("missing", "fallback") == "fallback"
    
    def test_set_replaces(self, kv_store):
        """Test set overwrites earlier values."""
        kv_store.set("k", "one")
        kv_store.set("k", "two")
        
        assert kv_store.get("k") == "two"
    
    def test_initial_values_copied(self):
        """Test the initial mapping is not shared with the store."""
        initial = {"a": "1"}
        store = InMemoryKeyValueStore(initial)
        store.set("a", "2")
        
        assert initial["a"] == "1"


class TestJsonFileKeyValueStore:
    """Tests for the JSON file store."""
    
    def test_missing_file_reads_empty(self, tmp_path):
        """Test a store with no file yet returns defaults."""
        store = JsonFileKeyValueStore(tmp_path / "kv.json")
        
        assert store.get("rag-best") is None
    
    def test_set_creates_file(self, tmp_path):
        """Test writing creates parent directories and the file."""
        path = tmp_path / "nested" / "kv.json"
        store = JsonFileKeyValueStore(path)
        
        store.set("pipeline-match", "Banana")
        
        assert json.loads(path.read_text(encoding="utf-8")) == {"pipeline-match": "Banana"}
    
    def test_visible_across_instances(self, tmp_path):
        """Test a second store on the same file sees earlier writes."""
        path = tmp_path / "kv.json"
        JsonFileKeyValueStore(path).set("rag-best", "text")
        
        assert JsonFileKeyValueStore(path, pretty_print=False).get("rag-best") == "text"
    
    def test_keys_are_merged(self, tmp_path):
        """Test setting one key keeps the others."""
        store = JsonFileKeyValueStore(tmp_path / "kv.json")
        store.set("a", "1")
        store.set("b", "2")
        
        assert store.get("a") == "1"
        assert store.get("b") == "2"
    
    def test_corrupt_file(self, tmp_path):
        """Test unreadable JSON raises a storage error."""
        path = tmp_path / "kv.json"
        path.write_text("{not json", encoding="utf-8")
        
        with pytest.raises(SimLabStorageError, match="Cannot read"):
            JsonFileKeyValueStore(path).get("a")
    
    def test_non_object_file(self, tmp_path):
        """Test a JSON file that is not an object raises a storage error."""
        path = tmp_path / "kv.json"
        path.write_text("[1, 2]", encoding="utf-8")
        
        with pytest.raises(SimLabStorageError, match="not a JSON object"):
            JsonFileKeyValueStore(path).get("a")
