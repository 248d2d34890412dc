"""
simlab - Text Simulation Engine

Deterministic stand-ins for the stages of a retrieval pipeline, built for
teaching: chunking, tokenization, embedding, nearest-neighbour search and
precision quantization. No model inference or network access is involved.

Key components:
- retrieval/: chunker, vector math, knowledge base and ranking
- tokenization/: mock subword tokenizers and cost estimates
- embedding/: word → 6-dimensional vector mapping
- quantization/: simulated precision tiers
- generation/: next-token prediction and wizard hand-off sessions
- catalog/: static tables (vocabulary, knowledge base, model catalog)
- core/: types, exceptions and logging utilities
"""

__version__ = "0.1.0"

from .core.types import ModelFamily, QuantizationLevel
from .embedding.generator import embed
from .quantization.quantizer import quantize
from .retrieval.chunker import chunk
from .retrieval.search import keyword_search, search
from .retrieval.vector_math import cosine_similarity, euclidean_distance
from .tokenization.tokenizer import tokenize

__all__ = [
    "ModelFamily",
    "QuantizationLevel",
    "chunk",
    "cosine_similarity",
    "embed",
    "euclidean_distance",
    "keyword_search",
    "quantize",
    "search",
    "tokenize",
]
