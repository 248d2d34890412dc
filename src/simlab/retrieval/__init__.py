"""
Retrieval module for the simulated RAG pipeline.

This module provides:
- Chunking: Split text into ordered, optionally overlapping units
- Vector math: Cosine similarity and Euclidean distance
- Search: Rank a small knowledge base against queries
"""

from .chunker import Chunker, chunk, clamp_overlap, split_text
from .knowledge_base import KnowledgeBase
from .search import RetrievalRanker, keyword_search, search, subject_word
from .spatial import nearest_point, point_distance
from .vector_math import cosine_similarity, euclidean_distance, mean_vector

__all__ = [
    "Chunker",
    "KnowledgeBase",
    "RetrievalRanker",
    "chunk",
    "clamp_overlap",
    "cosine_similarity",
    "euclidean_distance",
    "keyword_search",
    "mean_vector",
    "nearest_point",
    "point_distance",
    "search",
    "split_text",
    "subject_word",
]
