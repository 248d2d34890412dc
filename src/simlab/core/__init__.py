"""
Core subpackage for the text simulation engine.

Contains types, exceptions, and logging utilities.
"""

from .types import (
    VECTOR_DIM,
    Candidate,
    KnowledgeEntry,
    ModelFamily,
    ModelSpec,
    NearestPoint,
    Point2D,
    Prediction,
    QuantizationLevel,
    QuantizationProfile,
    QuantizedWeight,
    SearchResult,
    TokenUsage,
    Vector,
)
from .exceptions import (
    SimLabError,
    SimLabConfigError,
    SimLabStorageError,
    UnknownModelError,
)

__all__ = [
    # Types
    "VECTOR_DIM",
    "Candidate",
    "KnowledgeEntry",
    "ModelFamily",
    "ModelSpec",
    "NearestPoint",
    "Point2D",
    "Prediction",
    "QuantizationLevel",
    "QuantizationProfile",
    "QuantizedWeight",
    "SearchResult",
    "TokenUsage",
    "Vector",
    # Exceptions
    "SimLabError",
    "SimLabConfigError",
    "SimLabStorageError",
    "UnknownModelError",
]
