"""
Vector math for the retrieval demo.

Both functions are total: they never return NaN and never raise for
in-domain input. Non-numeric elements raise TypeError from the arithmetic.
"""

import logging
import math
from typing import List, Sequence

logger = logging.getLogger(__name__)


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.
    
    Args:
        vec_a: First vector
        vec_b: Second vector
        
    Returns:
        Cosine similarity in [-1, 1]; 0.0 when either vector is empty or has
        zero norm, or when the dimensions differ
    """
    if not vec_a or not vec_b:
        return 0.0
    
    if len(vec_a) != len(vec_b):
        logger.warning(f"Vector dimensions differ: {len(vec_a)} != {len(vec_b)}; similarity is 0")
        return 0.0
    
    dot_product = sum(a * b for a, b in zip(vec_a, vec_b))
    magnitude_a = math.sqrt(sum(a * a for a in vec_a))
    magnitude_b = math.sqrt(sum(b * b for b in vec_b))
    
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0
    
    return dot_product / (magnitude_a * magnitude_b)


def euclidean_distance(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Standard L2 distance.
    
    Raises:
        ValueError: If the vectors have different dimensions
    """
    if len(vec_a) != len(vec_b):
        raise ValueError(f"Vector dimensions must match: {len(vec_a)} != {len(vec_b)}")
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(vec_a, vec_b)))


def mean_vector(vectors: Sequence[Sequence[float]]) -> List[float]:
    """
    Component-wise mean of equal-length vectors.
    
    Raises:
        ValueError: If no vectors are given
    """
    if not vectors:
        raise ValueError("Cannot average zero vectors")
    dim = len(vectors[0])
    totals = [0.0] * dim
    for vec in vectors:
        for k in range(dim):
            totals[k] += vec[k]
    return [t / len(vectors) for t in totals]
