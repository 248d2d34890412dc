"""
Contracts for the simulation engine: policies and result records.
"""

from .retrieval_contracts import (
    ChunkingPolicy,
    ChunkRecord,
    EmbeddingPolicy,
    RetrievalPolicy,
    compute_content_hash,
)

__all__ = [
    "ChunkingPolicy",
    "ChunkRecord",
    "EmbeddingPolicy",
    "RetrievalPolicy",
    "compute_content_hash",
]
