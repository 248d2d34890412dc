"""
Retrieval Search - rank knowledge entries for a query.

Implements:
- Vector ranking: embed the query's subject word, best cosine score wins
- Keyword ranking: count tags contained in the lowercased query
- Match threshold policy applied on top of either ranking
"""

import logging
from typing import Iterable, Optional, Sequence, Union

from ..contracts.retrieval_contracts import RetrievalPolicy
from ..core.types import KnowledgeEntry, SearchResult
from ..embedding.generator import EmbeddingGenerator
from .knowledge_base import KnowledgeBase
from .vector_math import cosine_similarity

logger = logging.getLogger(__name__)

NO_RESULT_SCORE = -1.0


def subject_word(query: str) -> str:
    """
    Pick the word that represents a query.
    
    Splits on single spaces and returns the longest word; ties go to the
    last occurrence.
    """
    best = ""
    for word in query.split(" "):
        if len(word) >= len(best):
            best = word
    return best


class RetrievalRanker:
    """
    Ranks a knowledge base against free-text queries.
    
    Example:
        >>> ranker = RetrievalRanker()
        >>> result = ranker.search("How long is battery life?", KnowledgeBase.reference())
        >>> result.best.id
        2
    """
    
    def __init__(
        self,
        generator: Optional[EmbeddingGenerator] = None,
        policy: Optional[RetrievalPolicy] = None,
    ):
        self.generator = generator or EmbeddingGenerator()
        self.policy = policy or RetrievalPolicy()
    
    def search(
        self,
        query: str,
        db: Union[KnowledgeBase, Sequence[KnowledgeEntry]],
    ) -> SearchResult:
        """
        Find the entry with the highest cosine similarity to the query subject.
        
        Args:
            query: Free-text query
            db: Knowledge base, or a plain entry sequence (vectors are then
                computed for this call only)
            
        Returns:
            SearchResult; an empty database yields best=None and score=-1
        """
        kb = db if isinstance(db, KnowledgeBase) else KnowledgeBase(db, generator=self.generator)
        subject = subject_word(query)
        query_vector = self.generator.embed(subject)
        
        best: Optional[KnowledgeEntry] = None
        max_score = NO_RESULT_SCORE
        
        for entry in kb:
            score = cosine_similarity(query_vector, kb.vector_for(entry))
            if score > max_score:
                max_score = score
                best = entry
        
        is_match = best is not None and max_score > self.policy.match_threshold
        logger.debug(
            f"Vector search subject='{subject}' best={best.id if best else None} "
            f"score={max_score:.3f} match={is_match}"
        )
        return SearchResult(best=best, score=max_score, is_match=is_match, subject=subject)
    

def keyword_search(query: str, db: Iterable[KnowledgeEntry]) -> SearchResult:
    """
    Keyword-overlap ranking for the no-embedding path.
    
    Args:
        query: Free-text query (compared lowercased)
        db: Entries in display order
        
    Returns:
        SearchResult whose score is the integer tag count
    """
    lowered = query.lower()
    best: Optional[KnowledgeEntry] = None
    max_score = 0
    
    for entry in db:
        score = sum(1 for tag in entry.tags if tag in lowered)
        if score > max_score:
            max_score = score
            best = entry
    
    return SearchResult(best=best, score=max_score, is_match=best is not None)


def search(
    query: str,
    db: Union[KnowledgeBase, Sequence[KnowledgeEntry], None] = None,
    policy: Optional[RetrievalPolicy] = None,
) -> SearchResult:
    """
    Vector search with default components.
    
    Args:
        query: Free-text query
        db: Knowledge base or entries (reference knowledge base if omitted)
        policy: Retrieval policy (default match threshold 0.6)
    """
    ranker = RetrievalRanker(policy=policy)
    if db is None:
        db = KnowledgeBase.reference(generator=ranker.generator)
    return ranker.search(query, db)
