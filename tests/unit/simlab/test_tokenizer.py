"""
Unit tests for the mock tokenizers.

Tests for:
- Standard family whitespace attachment and subword decomposition
- Open-vocabulary family splitting and start marker
- Model catalog lookup and usage estimates
"""

import pytest

from simlab.core.exceptions import UnknownModelError
from simlab.core.types import ModelFamily
from simlab.tokenization.tokenizer import (
    Tokenizer,
    estimate_usage,
    get_model,
    tokenize,
    tokenize_for_model,
)


class TestStandardFamily:
    """Tests for the whitespace-attaching subword tokenizer."""
    
    def test_empty_text(self):
        """Test empty input yields no tokens."""
        assert tokenize("") == []
    
    def test_whitespace_attaches_to_next_word(self):
        """Test whitespace is never its own token between words."""
        assert tokenize("What is a Banana?") == ["What", " is", " a", " Banana?"]
    
    def test_multiple_spaces_attach(self):
        """Test a whitespace run attaches whole to the following word."""
        assert tokenize("a  b") == ["a", "  b"]
    
    def test_leading_whitespace(self):
        """Test leading whitespace attaches to the first word."""
        assert tokenize("  hi") == ["  hi"]
    
    def test_trailing_whitespace(self):
        """Test trailing whitespace is emitted as a final token."""
        assert tokenize("word  ") == ["word", "  "]
    
    def test_prefix_then_suffix(self):
        """Test prefix split keeps the whitespace and recurses into the rest."""
        assert tokenize(" preheating") == [" pre", "heat", "ing"]
    
    def test_prefix_recurses(self):
        """Test consecutive prefixes are all split off."""
        assert tokenize("unprebio") == ["un", "pre", "bio"]
    
    def test_suffix_is_terminal(self):
        """Test the stem left by a suffix match is not decomposed again."""
        assert tokenize("walkeding") == ["walked", "ing"]
    
    def test_suffix_carries_no_whitespace(self):
        """Test whitespace stays on the stem for suffix splits."""
        assert tokenize("I walked") == ["I", " walk", "ed"]
    
    def test_matching_is_case_insensitive(self):
        """Test uppercase words match subwords but keep their case."""
        assert tokenize("Unhappiness") == ["Un", "happi", "ness"]
    
    def test_fragment_equal_to_subword_not_split(self):
        """Test a fragment must be strictly longer than the subword."""
        assert tokenize("reing") == ["re", "ing"]
        assert tokenize("ing") == ["ing"]
    
    @pytest.mark.parametrize("text", [
        "Artificial intelligence is transforming the world of data science.",
        "  Preprocessing, unbelievable interesting  bioengineering!  ",
        "What is a Banana?",
        "antitechnology   geotagged\nrestatement",
    ])
    def test_round_trip(self, text):
        """Test concatenated tokens reproduce the source exactly."""
        assert "".join(tokenize(text)) == text
    
    def test_custom_subwords(self):
        """Test the subword list is injectable."""
        tokenizer = Tokenizer(subwords=["xyz"])
        
        assert tokenizer.tokenize("xyzabc") == ["xyz", "abc"]
        assert tokenizer.tokenize("preheating") == ["preheating"]


class TestOpenVocabularyFamily:
    """Tests for the whitespace-preserving tokenizer."""
    
    def test_marker_prepended(self):
        """Test the start marker is the first token."""
        assert tokenize("Hello  world", ModelFamily.OPEN_VOCABULARY) == ["<s>", "Hello", "  ", "world"]
    
    def test_empty_text_still_has_marker(self):
        """Test empty input yields only the start marker."""
        assert tokenize("", ModelFamily.OPEN_VOCABULARY) == ["<s>"]
    
    def test_no_subword_splitting(self):
        """Test words are not decomposed."""
        assert tokenize("preheating", ModelFamily.OPEN_VOCABULARY) == ["<s>", "preheating"]
    
    def test_family_by_value(self):
        """Test the family can be passed as its string value."""
        assert Tokenizer().tokenize("a b", "open_vocabulary") == ["<s>", "a", " ", "b"]


class TestModelCatalog:
    """Tests for catalog lookup and usage estimation."""
    
    def test_model_families(self):
        """Test each catalog model maps to the right family."""
        assert get_model("ollama").family is ModelFamily.OPEN_VOCABULARY
        assert get_model("gpt4o").family is ModelFamily.STANDARD
    
    def test_tokenize_for_model(self):
        """Test model keys select the tokenizer family."""
        assert tokenize_for_model("Hi there", "ollama") == ["<s>", "Hi", " ", "there"]
        assert tokenize_for_model("Hi there", "claude35") == ["Hi", " there"]
    
    def test_unknown_model(self):
        """Test unknown keys raise UnknownModelError (a KeyError)."""
        with pytest.raises(UnknownModelError, match="Unknown model: bert"):
            get_model("bert")
        
        with pytest.raises(KeyError):
            tokenize_for_model("x", "bert")
    
    def test_unknown_model_lists_known_keys(self):
        """Test the error carries the catalog keys."""
        with pytest.raises(UnknownModelError) as exc_info:
            get_model("bert")
        
        assert exc_info.value.model_key == "bert"
        assert exc_info.value.known == ["claude35", "gemini15", "gpt4o", "ollama"]
    
    def test_estimate_usage(self):
        """Test cost and context usage arithmetic."""
        usage = estimate_usage(["a", "b", "c", "d"], "gpt4o")
        
        assert usage.token_count == 4
        assert usage.input_cost == pytest.approx(4 / 1_000_000 * 5.00)
        assert usage.context_usage_pct == pytest.approx(4 / 128000 * 100)
        assert usage.max_output == 4096
    
    def test_free_model_costs_nothing(self):
        """Test the local model has zero cost."""
        usage = estimate_usage(tokenize_for_model("some text", "ollama"), "ollama")
        
        assert usage.input_cost == 0
        assert usage.token_count == 4
