"""
Embedding module: deterministic word vectors for the search demo.
"""

from .generator import EmbeddingGenerator, embed, hash_vector, normalize_word

__all__ = [
    "EmbeddingGenerator",
    "embed",
    "hash_vector",
    "normalize_word",
]
