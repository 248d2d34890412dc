"""
Unit tests for the embedding generator.
"""

import random

import pytest

from simlab.catalog.vocabulary import DEFAULT_VECTOR, VOCABULARY
from simlab.contracts.retrieval_contracts import EmbeddingPolicy
from simlab.embedding.generator import (
    EmbeddingGenerator,
    embed,
    hash_vector,
    normalize_word,
)


class TestNormalization:
    """Tests for word normalization."""
    
    def test_lowercases_and_strips(self):
        """Test case folding and removal of non-letters."""
        assert normalize_word("Hello, World 42") == "helloworld"
    
    def test_accented_letters_removed(self):
        """Test only a-z survive after lowercasing."""
        assert normalize_word("Café") == "caf"


class TestExactAndDefault:
    """Tests for the deterministic lookup paths."""
    
    def test_vocabulary_word(self, generator):
        """Test vocabulary words map to their table vector."""
        assert generator.embed("banana") == list(VOCABULARY["banana"])
    
    def test_vocabulary_word_normalized(self, generator):
        """Test case and punctuation do not change the lookup."""
        assert generator.embed("Server!") == list(VOCABULARY["server"])
    
    def test_default_key_is_exact(self, generator):
        """Test the reserved 'default' key is an ordinary exact match."""
        assert generator.embed("default") == list(DEFAULT_VECTOR)
    
    @pytest.mark.parametrize("word", ["", "123", "?!", "   "])
    def test_empty_after_normalization(self, generator, word):
        """Test words with no letters get the default vector."""
        assert generator.embed(word) == [0.5] * 6
    
    def test_returns_fresh_list(self, generator):
        """Test callers cannot mutate the vocabulary through a result."""
        vec = generator.embed("apple")
        vec[0] = 99.0
        
        assert generator.embed("apple")[0] == 0.1
    
    def test_module_level_embed(self):
        """Test the convenience function uses the built-in table."""
        assert embed("computer") == list(VOCABULARY["computer"])
    
    def test_module_level_embed_keeps_no_state(self, monkeypatch):
        """Test each call builds its own generator."""
        import simlab.embedding.generator as generator_module
        
        built = []
        original_init = EmbeddingGenerator.__init__
        
        def counting_init(self, *args, **kwargs):
            built.append(self)
            original_init(self, *args, **kwargs)
        
        monkeypatch.setattr(EmbeddingGenerator, "__init__", counting_init)
        
        embed("computer")
        embed("computer")
        
        assert len(built) == 2
        assert built[0] is not built[1]
        assert not hasattr(generator_module, "_default_generator")


class TestFuzzyMatch:
    """Tests for substring matching with jitter."""
    
    def test_fuzzy_key_word_contains_key(self, generator):
        """Test a word containing a vocabulary key resolves to it."""
        assert generator.fuzzy_key("apples") == "apple"
        assert generator.fuzzy_key("servers") == "server"
    
    def test_fuzzy_key_key_contains_word(self, generator):
        """Test a word contained in a key resolves to the first such key."""
        assert generator.fuzzy_key("a") == "ai"
    
    def test_fuzzy_key_none(self, generator):
        """Test unrelated words have no fuzzy key."""
        assert generator.fuzzy_key("battery") is None
    
    def test_jitter_bounded(self, generator):
        """Test jittered components stay within the amplitude."""
        base = VOCABULARY["apple"]
        
        for _ in range(20):
            vec = generator.embed("apples")
            assert len(vec) == 6
            for got, expected in zip(vec, base):
                assert abs(got - expected) <= 0.05
    
    def test_zero_jitter_is_exact(self, exact_generator):
        """Test jitter can be disabled for deterministic fuzzy output."""
        assert exact_generator.embed("apples") == list(VOCABULARY["apple"])
    
    def test_seeded_reproducible(self):
        """Test equal seeds give equal fuzzy vectors."""
        first = EmbeddingGenerator(rng=random.Random(5)).embed("rockets")
        second = EmbeddingGenerator(rng=random.Random(5)).embed("rockets")
        
        assert first == second
    
    def test_policy_seed(self):
        """Test the policy seed is used when no rng is given."""
        policy = EmbeddingPolicy(seed=3)
        
        assert EmbeddingGenerator(policy=policy).embed("stars") == EmbeddingGenerator(policy=policy).embed("stars")


class TestHashFallback:
    """Tests for the character-code hash path."""
    
    def test_hash_vector(self):
        """Test the hash formula on a known sum (x+y+z = 363)."""
        assert hash_vector("xyz") == pytest.approx([0.63, 0.26, 0.89, 0.52, 0.15, 0.78])
    
    def test_digits_ignored_before_hash(self, generator):
        """Test digits are stripped before hashing."""
        assert generator.embed("xyz123") == pytest.approx([0.63, 0.26, 0.89, 0.52, 0.15, 0.78])
    
    def test_hash_deterministic(self, generator):
        """Test unknown words always embed the same way."""
        assert generator.embed("battery") == generator.embed("Battery")
        assert all(0 <= v < 1 for v in generator.embed("battery"))
    
    def test_custom_vocabulary(self):
        """Test the vocabulary table is injectable."""
        gen = EmbeddingGenerator(vocabulary={"zebra": (1, 0, 0, 0, 0, 0)})
        
        assert gen.embed("zebra") == [1, 0, 0, 0, 0, 0]
        assert gen.embed("apple") == hash_vector("apple")
