"""
Tokenizer model catalog, bigram table and inference engine speeds.
"""

from typing import Dict, Tuple

from ..core.types import ModelFamily, ModelSpec

MODEL_CATALOG: Dict[str, ModelSpec] = {
    "gpt4o": ModelSpec("gpt4o", "GPT-4o", ModelFamily.STANDARD, 5.00, 15.00, "128k", 128000, 4096),
    "claude35": ModelSpec("claude35", "Claude 3.5", ModelFamily.STANDARD, 3.00, 15.00, "200k", 200000, 8192),
    "gemini15": ModelSpec("gemini15", "Gemini 1.5", ModelFamily.STANDARD, 3.50, 10.50, "1M+", 1000000, 8192),
    "ollama": ModelSpec("ollama", "Llama 3", ModelFamily.OPEN_VOCABULARY, 0.0, 0.0, "8k", 8192, 8192),
}

DEFAULT_MODEL = "gpt4o"

BIGRAM: Dict[str, Tuple[str, ...]] = {
    "the": ("quick", "artificial", "future", "data"),
    "artificial": ("intelligence", "neural", "reality"),
    "hello": ("world", "user", "there"),
    "data": ("base", "science", "privacy"),
    "quick": ("brown", "response", "fix"),
    "brown": ("fox", "box", "note"),
}

FALLBACK_CANDIDATES: Tuple[str, ...] = ("is", "the", "a", "unknown")

# Characters per second for the typing simulation.
ENGINE_SPEEDS: Dict[str, int] = {
    "llama": 40,
    "vllm": 100,
}

DEFAULT_ENGINE_SPEED = 10
