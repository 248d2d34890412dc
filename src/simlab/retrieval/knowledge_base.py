"""
Knowledge Base - read-only entries with lazily computed, memoized vectors.
"""

import logging
from typing import Dict, Iterator, MutableMapping, Optional, Sequence

from ..catalog.knowledge import REFERENCE_ENTRIES
from ..core.types import KnowledgeEntry, Vector
from ..embedding.generator import EmbeddingGenerator
from .vector_math import mean_vector

logger = logging.getLogger(__name__)


class KnowledgeBase:
    """
    A small fixed set of retrievable entries.
    
    Each entry's vector is the mean of its tags' embeddings. It is computed
    on first use and cached for the lifetime of this object (or of the
    injected cache mapping), never recomputed afterwards.
    
    Example:
        >>> kb = KnowledgeBase.reference()
        >>> len(kb)
        4
    """
    
    def __init__(
        self,
        entries: Sequence[KnowledgeEntry],
        generator: Optional[EmbeddingGenerator] = None,
        cache: Optional[MutableMapping[int, Vector]] = None,
    ):
        """
        Initialize the knowledge base.
        
        Args:
            entries: Entries with unique ids
            generator: Embedding generator used for tag vectors
            cache: Optional external id → vector cache slot
            
        Raises:
            ValueError: If two entries share an id
        """
        ids = [e.id for e in entries]
        if len(set(ids)) != len(ids):
            raise ValueError("Knowledge entry ids must be unique")
        
        self._entries = tuple(entries)
        self.generator = generator or EmbeddingGenerator()
        self._cache: MutableMapping[int, Vector] = cache if cache is not None else {}
    
    @classmethod
    def reference(
        cls,
        generator: Optional[EmbeddingGenerator] = None,
        cache: Optional[MutableMapping[int, Vector]] = None,
    ) -> "KnowledgeBase":
        """Build the 4-entry reference knowledge base."""
        return cls(REFERENCE_ENTRIES, generator=generator, cache=cache)
    
    @property
    def entries(self) -> Sequence[KnowledgeEntry]:
        return self._entries
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __iter__(self) -> Iterator[KnowledgeEntry]:
        return iter(self._entries)
    
    def vector_for(self, entry: KnowledgeEntry) -> Vector:
        """Return the cached vector for an entry, computing it on first use."""
        cached = self._cache.get(entry.id)
        if cached is None:
            cached = self._compute_vector(entry)
            self._cache[entry.id] = cached
        return list(cached)
    
    def _compute_vector(self, entry: KnowledgeEntry) -> Vector:
        if not entry.tags:
            logger.debug(f"Entry {entry.id} has no tags; using default vector")
            return list(self.generator.default_vector)
        logger.debug(f"Computing vector for entry {entry.id} from {len(entry.tags)} tags")
        return mean_vector(self.generator.embed_many(entry.tags))
    
    def snapshot(self) -> Dict[int, Vector]:
        """Copy of every vector computed so far."""
        return {k: list(v) for k, v in self._cache.items()}
