"""
Static configuration tables.

These are read-only data handed to the engine components at construction
time; nothing in the engine mutates them.
"""

from .agents import (
    CLOUD_LATENCY_MS,
    DEFAULT_PERSONA,
    DEFAULT_REPLY,
    LOCAL_LATENCY_LABEL,
    NO_TOOL,
    NO_TOOL_RESULT,
    NO_TOOL_THOUGHT,
    OCR_CONFIDENCE,
    OCR_DOCUMENTS,
    PERSONA_REPLIES,
    PERSONAS,
    TOOL_ROUTES,
    TOOL_THOUGHT,
)
from .knowledge import CONCEPT_POINTS, DISTRACTOR_CONTEXTS, REFERENCE_ENTRIES
from .models import (
    BIGRAM,
    DEFAULT_ENGINE_SPEED,
    DEFAULT_MODEL,
    ENGINE_SPEEDS,
    FALLBACK_CANDIDATES,
    MODEL_CATALOG,
)
from .quantization import QUANTIZATION_PROFILES, SAMPLE_WEIGHTS
from .vocabulary import (
    DEFAULT_VECTOR,
    DIMENSION_DESCRIPTIONS,
    DIMENSION_LABELS,
    START_OF_SEQUENCE,
    SUBWORDS,
    VOCABULARY,
)

__all__ = [
    "BIGRAM",
    "CLOUD_LATENCY_MS",
    "CONCEPT_POINTS",
    "DEFAULT_ENGINE_SPEED",
    "DEFAULT_MODEL",
    "DEFAULT_PERSONA",
    "DEFAULT_REPLY",
    "DEFAULT_VECTOR",
    "DIMENSION_DESCRIPTIONS",
    "DIMENSION_LABELS",
    "DISTRACTOR_CONTEXTS",
    "ENGINE_SPEEDS",
    "FALLBACK_CANDIDATES",
    "LOCAL_LATENCY_LABEL",
    "MODEL_CATALOG",
    "NO_TOOL",
    "NO_TOOL_RESULT",
    "NO_TOOL_THOUGHT",
    "OCR_CONFIDENCE",
    "OCR_DOCUMENTS",
    "PERSONA_REPLIES",
    "PERSONAS",
    "QUANTIZATION_PROFILES",
    "REFERENCE_ENTRIES",
    "SAMPLE_WEIGHTS",
    "START_OF_SEQUENCE",
    "SUBWORDS",
    "TOOL_ROUTES",
    "TOOL_THOUGHT",
    "VOCABULARY",
]
