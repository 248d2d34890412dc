"""
Unit tests for the SimulationEngine facade and the CLI.
"""

import json
import random

import pytest

from simlab.catalog.models import BIGRAM
from simlab.cli import main
from simlab.core.types import Point2D
from simlab.engine import SimulationEngine
from simlab.generation.sessions import PIPELINE_MATCH_KEY, RAG_BEST_KEY
from simlab.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore


@pytest.fixture
def engine(kv_store) -> SimulationEngine:
    """Engine with a fixed random source and an in-memory store."""
    return SimulationEngine(rng=random.Random(42), store=kv_store)


class TestSimulationEngine:
    """Tests for the engine facade."""
    
    def test_chunk_uses_policy_defaults(self, engine):
        """Test the default window is 25 characters with no overlap."""
        assert [len(c) for c in engine.chunk("a" * 60)] == [25, 25, 10]
    
    def test_chunk_overrides(self, engine):
        """Test per-call parameters override the policy."""
        assert engine.chunk("abcdefghij", size=4, overlap=2) == ["abcd", "cdef", "efgh", "ghij"]
    
    def test_chunk_records(self, engine):
        """Test record offsets index into the source text."""
        text = "abcdefghij"
        for record in engine.chunk_records(text, size=4):
            assert text[record.start_offset:record.end_offset] == record.content
    
    def test_chunk_size_from_env(self, monkeypatch):
        """Test the chunking policy follows configuration."""
        monkeypatch.setenv("SIMLAB_CHUNK_SIZE", "10")
        
        assert SimulationEngine().chunk("a" * 20) == ["a" * 10, "a" * 10]
    
    def test_search(self, engine):
        """Test vector search against the reference knowledge base."""
        result = engine.search("How long is battery life?")
        
        assert result.best.id == 2
        assert result.is_match is True
        assert sorted(engine.knowledge_base.snapshot()) == [1, 2, 3, 4]
    
    def test_keyword_search(self, engine):
        """Test keyword ranking against the reference knowledge base."""
        assert engine.keyword_search("is lunch on time?").best.id == 3
    
    def test_tokenize_and_usage(self, engine):
        """Test model tokenization and usage estimates."""
        assert engine.tokenize_for_model("Hi there", "ollama") == ["<s>", "Hi", " ", "there"]
        assert engine.usage("Hi there", "gpt4o").token_count == 2
    
    def test_embed_and_cosine(self, engine):
        """Test the embedding and similarity pass-throughs."""
        vec = engine.embed("apple")
        
        assert engine.cosine_similarity(vec, vec) == pytest.approx(1.0)
    
    def test_quantize(self, engine):
        """Test quantization and profiles."""
        assert [q.display_value for q in engine.quantize([0.5], "int8")] == ["0.50"]
        assert engine.quantization_profile(3).label == "INT4"
    
    def test_predict(self, engine):
        """Test prediction uses the bigram table."""
        prediction = engine.predict("hello", temperature=0.0)
        
        assert prediction.selected.word in BIGRAM["hello"]
    
    def test_nearest_concept_records_match(self, engine, kv_store):
        """Test a match is handed to the pipeline session."""
        result = engine.nearest_concept(Point2D(21, 21))
        
        assert result.is_match is True
        assert kv_store.get(PIPELINE_MATCH_KEY) == "Banana"
        assert engine.pipeline_session().compose().output == (
            "Based on the context provided, a Banana is categorized as Organic."
        )
    
    def test_nearest_concept_miss(self, engine, kv_store):
        """Test a miss leaves the store alone."""
        result = engine.nearest_concept(Point2D(30, 70))
        
        assert result.is_match is False
        assert kv_store.get(PIPELINE_MATCH_KEY) is None
    
    def test_route_tool(self, engine):
        """Test tool routing through the engine."""
        assert engine.route_tool("any new email?").tool == "send_email('Admin')"
    
    def test_scan_document(self, engine):
        """Test document scanning through the engine."""
        assert engine.scan_document("note", "vision").data["metadata"] == {"has_title": False}
    
    def test_persona_chat(self, engine):
        """Test persona chat through the engine."""
        assert engine.persona_chat("pirate").send("hi") == "Aye matey! That be a fine thing to say."
    
    def test_ping_uses_engine_rng(self):
        """Test equal engine seeds give equal latencies."""
        first = SimulationEngine(rng=random.Random(3)).ping()
        second = SimulationEngine(rng=random.Random(3)).ping()
        
        assert first == second
        assert 100 <= first.cloud_ms <= 149
    
    def test_rag_session(self, engine, kv_store):
        """Test the RAG session shares the engine store."""
        engine.rag_session().retrieve("battery")
        
        assert kv_store.get(RAG_BEST_KEY) == "Battery lasts 24 hours on eco mode."
    
    def test_default_store_in_memory(self):
        """Test an in-memory store is used without a kv path."""
        assert isinstance(SimulationEngine().store, InMemoryKeyValueStore)
    
    def test_file_store_from_config(self, tmp_path, monkeypatch):
        """Test a configured kv path persists across engines."""
        monkeypatch.setenv("SIMLAB_KV_PATH", str(tmp_path / "kv.json"))
        
        first = SimulationEngine()
        first.rag_session().retrieve("battery")
        second = SimulationEngine()
        
        assert isinstance(second.store, JsonFileKeyValueStore)
        assert second.rag_session().answer() == "Based on the manual, Battery lasts 24 hours on eco mode."


class TestCli:
    """Tests for CLI commands."""
    
    def test_no_command(self, capsys):
        """Test running without a command prints help."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out
    
    def test_chunk_json(self, capsys):
        """Test chunk output as JSON records."""
        assert main(["chunk", "abcdefghij", "--size", "4", "--overlap", "2", "--json"]) == 0
        
        records = json.loads(capsys.readouterr().out)
        assert [r["content"] for r in records] == ["abcd", "cdef", "efgh", "ghij"]
        assert records[1]["start_offset"] == 2
    
    def test_chunk_text(self, capsys):
        """Test chunk output as text."""
        assert main(["chunk", "Hello world. Goodbye world.", "--size", "15", "--smart"]) == 0
        
        assert "2 chunks" in capsys.readouterr().out
    
    def test_chunk_invalid(self, capsys):
        """Test invalid parameters exit with an error."""
        assert main(["chunk", "abc", "--size", "0"]) == 2
        
        assert "chunk_size must be positive" in capsys.readouterr().err
    
    def test_tokenize_json(self, capsys):
        """Test tokenize output as JSON."""
        assert main(["tokenize", "Hi there", "--model", "ollama", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["tokens"] == ["<s>", "Hi", " ", "there"]
        assert data["usage"]["token_count"] == 4
    
    def test_embed_json(self, capsys):
        """Test embed output as JSON."""
        assert main(["embed", "xyz", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["vector"] == pytest.approx([0.63, 0.26, 0.89, 0.52, 0.15, 0.78])
    
    def test_search_json(self, capsys):
        """Test vector search output as JSON."""
        assert main(["search", "How long is battery life?", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["best"]["id"] == 2
        assert data["is_match"] is True
    
    def test_keyword_search_text(self, capsys):
        """Test keyword search prints the templated answer."""
        assert main(["search", "what about the battery?", "--keyword"]) == 0
        
        out = capsys.readouterr().out
        assert "MATCH FOUND" in out
        assert "Based on the manual, Battery lasts 24 hours on eco mode." in out
    
    def test_keyword_search_no_match(self, capsys):
        """Test keyword misses are reported."""
        assert main(["search", "xyz", "--keyword"]) == 0
        
        assert "NO MATCH FOUND" in capsys.readouterr().out
    
    def test_quantize_json(self, capsys):
        """Test quantize output as JSON."""
        assert main(["quantize", "--level", "int4", "--weights", "0.5", "-0.5", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["weights"] == ["1", "0"]
        assert data["model_size"] == "3.5 GB"
    
    def test_predict_json(self, capsys):
        """Test predict output as JSON."""
        assert main(["predict", "hello", "--temperature", "0", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["last_word"] == "hello"
        assert data["selected"] in BIGRAM["hello"]
    
    def test_quantize_non_finite_weights(self, capsys):
        """Test INT8 renders non-finite weights instead of failing."""
        assert main(["quantize", "--level", "int8", "--weights", "inf", "nan", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["weights"] == ["inf", "nan"]
    
    def test_tool_json(self, capsys):
        """Test tool routing output as JSON."""
        assert main(["tool", "Check the weather in London", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["tool"] == "get_weather('London')"
        assert data["result"] == "Temp: 15°C, Rain: None"
    
    def test_tool_text_no_match(self, capsys):
        """Test an unroutable command prints the no-tool thought."""
        assert main(["tool", "tell me a joke"]) == 0
        
        out = capsys.readouterr().out
        assert "No tools required for this query." in out
        assert "I don't understand that command." in out
    
    def test_ocr_legacy_text(self, capsys):
        """Test legacy OCR prints the upper-cased dump."""
        assert main(["ocr", "invoice", "--mode", "legacy"]) == 0
        
        assert "INVOICE #99\nITEM: JETPACK\nCOST: $9000" in capsys.readouterr().out
    
    def test_ocr_vision_json(self, capsys):
        """Test vision OCR output as JSON."""
        assert main(["ocr", "idcard", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["mode"] == "vision"
        assert data["data"]["detected_text"] == ["Name: Alice", "Role: Pilot"]
    
    def test_chat_json(self, capsys):
        """Test persona chat output as JSON."""
        assert main(["chat", "beep", "--persona", "robot", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["system_prompt"] == "Output only JSON."
        assert json.loads(data["response"]) == {"user_input": "beep", "status": "received"}
    
    def test_ping_json(self, capsys):
        """Test ping output as JSON."""
        assert main(["ping", "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["local"] == "< 1 ms"
        assert 100 <= data["cloud_ms"] <= 149
