"""
Wizard sessions that pass a selection between steps through a key/value store.

Each session only holds a reference to the injected store; all state lives
in the store under fixed keys.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from ..catalog.knowledge import DISTRACTOR_CONTEXTS, REFERENCE_ENTRIES
from ..core.logging import log_with_context
from ..core.types import KnowledgeEntry, Point2D, SearchResult
from ..retrieval.search import keyword_search
from ..storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

RAG_BEST_KEY = "rag-best"
PIPELINE_MATCH_KEY = "pipeline-match"
PIPELINE_CATEGORY_KEY = "pipeline-cat"

DEFAULT_MATCH = "Nothing"
DEFAULT_CATEGORY = "Unknown"


class RagSession:
    """
    Keyword retrieval followed by a templated answer.
    
    Example:
        >>> session = RagSession(InMemoryKeyValueStore())
        >>> session.retrieve("what about the battery?").is_match
        True
        >>> session.answer()
        'Based on the manual, Battery lasts 24 hours on eco mode.'
    """
    
    def __init__(self, store: KeyValueStore, entries: Optional[Iterable[KnowledgeEntry]] = None):
        self.store = store
        self.entries: Sequence[KnowledgeEntry] = tuple(entries) if entries is not None else REFERENCE_ENTRIES
    
    def retrieve(self, query: str) -> SearchResult:
        """Run keyword search and remember the best entry text on a match."""
        result = keyword_search(query, self.entries)
        if result.is_match:
            self.store.set(RAG_BEST_KEY, result.best.text)
            log_with_context(logger, logging.INFO, f"Stored retrieval context (score {result.score})")
        return result
    
    def answer(self) -> Optional[str]:
        """Answer from the stored context, or None if nothing was retrieved."""
        context = self.store.get(RAG_BEST_KEY)
        if context is None:
            return None
        return f"Based on the manual, {context}"


@dataclass
class PipelineAnswer:
    query: str
    contexts: List[Tuple[str, str]] = field(default_factory=list)
    output: str = ""


class PipelineSession:
    """
    Carries the concept picked in the drag step into the generation step.
    """
    
    def __init__(self, store: KeyValueStore):
        self.store = store
    
    def record_match(self, point: Point2D) -> None:
        """Remember a matched concept point."""
        self.store.set(PIPELINE_MATCH_KEY, point.name)
        self.store.set(PIPELINE_CATEGORY_KEY, point.category)
    
    def compose(self) -> PipelineAnswer:
        """
        Build the final wizard step from the stored match.
        
        Returns:
            Query, (relevance, text) context pairs and the generated answer
        """
        match = self.store.get(PIPELINE_MATCH_KEY) or DEFAULT_MATCH
        category = self.store.get(PIPELINE_CATEGORY_KEY) or DEFAULT_CATEGORY
        
        contexts = [("High", f"{match} belongs to category {category}.")]
        contexts.extend(("Low", text) for text in DISTRACTOR_CONTEXTS)
        
        return PipelineAnswer(
            query=f"What is a {match}?",
            contexts=contexts,
            output=f"Based on the context provided, a {match} is categorized as {category}.",
        )
