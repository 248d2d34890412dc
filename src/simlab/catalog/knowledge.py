"""
Reference knowledge base and demo concept points.
"""

from typing import Tuple

from ..core.types import KnowledgeEntry, Point2D

REFERENCE_ENTRIES: Tuple[KnowledgeEntry, ...] = (
    KnowledgeEntry(1, "To turn on, press button for 3s.", ("turn", "on", "button", "power")),
    KnowledgeEntry(2, "Battery lasts 24 hours on eco mode.", ("battery", "life", "hours", "eco")),
    KnowledgeEntry(3, "Lunch is served at 12:00 PM.", ("lunch", "food", "time")),
    KnowledgeEntry(4, "Warning: Do not submerge in water.", ("water", "warning", "danger")),
)

CONCEPT_POINTS: Tuple[Point2D, ...] = (
    Point2D(20, 20, "Banana", "Organic"),
    Point2D(80, 20, "Server", "Tech"),
    Point2D(50, 80, "Rocket", "Space"),
    Point2D(30, 50, "Apple", "Organic"),
    Point2D(70, 30, "Laptop", "Tech"),
    Point2D(60, 90, "Mars", "Space"),
)

# Low-relevance snippets shown next to the retrieved context in the pipeline wizard.
DISTRACTOR_CONTEXTS: Tuple[str, ...] = (
    "The weather in Mars is dusty today.",
    "System error: 404 not found.",
)
