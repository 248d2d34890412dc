"""
Core data types for the text simulation engine.

Vectors, tokens and chunks are plain value types created fresh on every
call. The dataclasses below describe the few structured results the
engine hands back to its callers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

# Fixed-length numeric vector. Every vector in the engine has VECTOR_DIM entries.
Vector = List[float]

VECTOR_DIM = 6


class ModelFamily(str, Enum):
    """Tokenizer family used to split text."""
    STANDARD = "standard"
    OPEN_VOCABULARY = "open_vocabulary"


class QuantizationLevel(str, Enum):
    """
    Simulated numeric precision tiers, ordered from most to least precise.
    
    The declaration order is significant: ``position`` mirrors the index of
    the compression slider (0 = FP32 ... 3 = INT4).
    """
    FULL_PRECISION = "fp32"
    HALF = "fp16"
    INT8 = "int8"
    INT4 = "int4"

    @property
    def position(self) -> int:
        return list(QuantizationLevel).index(self)

    @classmethod
    def coerce(cls, value: Union["QuantizationLevel", str, int]) -> "QuantizationLevel":
        """
        Resolve a level from an enum member, its string value or its slider index.
        
        Raises:
            ValueError: If the value does not name a level
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; a True/False level is a caller bug
        if isinstance(value, int) and not isinstance(value, bool):
            levels = list(cls)
            if 0 <= value < len(levels):
                return levels[value]
            raise ValueError(f"Quantization index out of range: {value}")
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown quantization level: {value!r}")


@dataclass(frozen=True)
class KnowledgeEntry:
    """
    A retrievable entry in the knowledge base.
    
    Attributes:
        id: Unique, stable identifier
        text: Text shown when the entry is retrieved
        tags: Ordered keywords; the entry vector is the mean of their embeddings
    """
    id: int
    text: str
    tags: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"id": self.id, "text": self.text, "tags": list(self.tags)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeEntry":
        """Create from dictionary."""
        return cls(
            id=int(data["id"]),
            text=data["text"],
            tags=tuple(data.get("tags", [])),
        )


@dataclass
class SearchResult:
    """
    Outcome of ranking a query against the knowledge base.
    
    ``best`` is the top-scoring entry even when ``is_match`` is False; the
    caller decides whether to present a "no match" outcome.
    
    Attributes:
        best: Highest scoring entry (None for an empty knowledge base)
        score: Best score (-1 for an empty knowledge base in vector mode)
        is_match: Whether the score clears the configured match threshold
        subject: The word that was embedded for the query (vector mode)
    """
    best: Optional[KnowledgeEntry]
    score: float
    is_match: bool = False
    subject: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "best": self.best.to_dict() if self.best else None,
            "score": self.score,
            "is_match": self.is_match,
            "subject": self.subject,
        }


@dataclass(frozen=True)
class QuantizedWeight:
    """A single weight after simulated precision reduction."""
    display_value: str
    style_tag: str


@dataclass(frozen=True)
class QuantizationProfile:
    """
    Static display metadata for a quantization level.
    
    None of these values are computed from weights; they are narrative
    figures for a 7B parameter model.
    """
    label: str
    memory_size: str
    ram_required: str
    precision_loss: str
    recommended_hardware: str
    style_tag: str


@dataclass(frozen=True)
class Point2D:
    """A labelled concept in the 2-D drag demo (percentage coordinates)."""
    x: float
    y: float
    name: str = ""
    category: str = ""


@dataclass(frozen=True)
class NearestPoint:
    """Nearest concept to a dragged query point."""
    point: Optional[Point2D]
    distance: float
    is_match: bool


@dataclass(frozen=True)
class ModelSpec:
    """Tokenizer model catalog entry. Prices are USD per 1M tokens."""
    key: str
    name: str
    family: ModelFamily
    input_price: float
    output_price: float
    context_label: str
    context_window: int
    max_output: int


@dataclass
class TokenUsage:
    """Token count and cost/context estimate for one model."""
    model_key: str
    token_count: int
    input_cost: float
    context_usage_pct: float
    max_output: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "model_key": self.model_key,
            "token_count": self.token_count,
            "input_cost": self.input_cost,
            "context_usage_pct": self.context_usage_pct,
            "max_output": self.max_output,
        }


@dataclass
class Candidate:
    """A next-token candidate with its raw weight and display percentage."""
    word: str
    weight: int
    pct: int


@dataclass
class Prediction:
    """Result of a next-token prediction."""
    last_word: str
    candidates: List[Candidate] = field(default_factory=list)
    selected: Optional[Candidate] = None
