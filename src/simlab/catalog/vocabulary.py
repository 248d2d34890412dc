"""
Static vocabulary and subword tables.

Vocabulary vectors have six dimensions:
[Tech, Organic, Space, Abstract, Action, Positive]
"""

from typing import Dict, Tuple

DIMENSION_LABELS = ("Tech", "Org", "Space", "Abst", "Act", "Pos")

DIMENSION_DESCRIPTIONS = (
    "Technical vs Non-technical context",
    "Organic/Living vs Artificial",
    "Cosmic/Physical Scale",
    "Abstract Concepts vs Concrete Objects",
    "Action/Verb intensity",
    "Positive vs Negative Sentiment",
)

DEFAULT_VECTOR: Tuple[float, ...] = (0.5, 0.5, 0.5, 0.5, 0.5, 0.5)

# Insertion order is the fuzzy-match search order.
VOCABULARY: Dict[str, Tuple[float, ...]] = {
    # Tech cluster
    "computer": (0.9, 0.1, 0.2, 0.8, 0.5, 0.5),
    "server": (0.95, 0.1, 0.1, 0.7, 0.6, 0.5),
    "code": (0.8, 0.1, 0.3, 0.9, 0.7, 0.5),
    "linux": (0.9, 0.1, 0.1, 0.8, 0.5, 0.6),
    "ai": (0.9, 0.1, 0.4, 0.9, 0.8, 0.6),

    # Organic/food cluster
    "apple": (0.1, 0.9, 0.1, 0.1, 0.2, 0.7),
    "banana": (0.1, 0.95, 0.1, 0.1, 0.1, 0.8),
    "fruit": (0.1, 0.9, 0.1, 0.3, 0.1, 0.6),
    "lunch": (0.2, 0.8, 0.1, 0.4, 0.5, 0.9),

    # Space cluster
    "star": (0.3, 0.1, 0.9, 0.6, 0.2, 0.8),
    "planet": (0.2, 0.4, 0.9, 0.5, 0.1, 0.7),
    "rocket": (0.8, 0.1, 0.9, 0.2, 0.9, 0.6),
    "mars": (0.4, 0.2, 0.95, 0.3, 0.1, 0.5),

    # General
    "king": (0.2, 0.6, 0.1, 0.5, 0.8, 0.7),
    "man": (0.2, 0.7, 0.1, 0.4, 0.6, 0.5),
    "woman": (0.2, 0.7, 0.1, 0.4, 0.6, 0.5),
    "queen": (0.2, 0.6, 0.1, 0.5, 0.8, 0.8),

    "default": DEFAULT_VECTOR,
}

# Checked in list order, for prefixes first and then suffixes.
SUBWORDS: Tuple[str, ...] = (
    "ing", "ed", "tion", "ness", "ment", "pre", "un", "re",
    "inter", "anti", "geo", "bio", "tech",
)

START_OF_SEQUENCE = "<s>"
