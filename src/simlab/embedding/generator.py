"""
Embedding Generator - deterministic word → vector mapping.

Resolution order (first match wins):
1. Normalize (lowercase, letters only); empty → default vector
2. Exact vocabulary match
3. Fuzzy match: substring containment either way, plus random jitter
4. Character-code hash fallback
"""

import logging
import random
import re
from typing import List, Mapping, Optional, Sequence

from ..catalog.vocabulary import DEFAULT_VECTOR, VOCABULARY
from ..contracts.retrieval_contracts import EmbeddingPolicy
from ..core.types import VECTOR_DIM, Vector

logger = logging.getLogger(__name__)

_NON_ALPHA = re.compile(r"[^a-z]")


def normalize_word(word: str) -> str:
    """Lowercase and strip every character outside a-z."""
    return _NON_ALPHA.sub("", word.lower())


def hash_vector(word: str, dim: int = VECTOR_DIM) -> Vector:
    """
    Deterministic vector from the sum of character codes.
    
    Component k (1-based) is ``(val * k mod 100) / 100``.
    """
    val = sum(ord(ch) for ch in word)
    return [((val * k) % 100) / 100 for k in range(1, dim + 1)]


class EmbeddingGenerator:
    """
    Maps words to 6-dimensional vectors.
    
    The vocabulary table and the random source are injected so tests can fix
    the seed or disable jitter entirely.
    
    Example:
        >>> gen = EmbeddingGenerator(rng=random.Random(7))
        >>> gen.embed("apple")
        [0.1, 0.9, 0.1, 0.1, 0.2, 0.7]
    """
    
    def __init__(
        self,
        vocabulary: Optional[Mapping[str, Sequence[float]]] = None,
        default_vector: Sequence[float] = DEFAULT_VECTOR,
        policy: Optional[EmbeddingPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the generator.
        
        Args:
            vocabulary: Word → vector table (uses the built-in table if not provided)
            default_vector: Vector returned for words that normalize to ""
            policy: Embedding policy (jitter amplitude and seed)
            rng: Random source for fuzzy-match jitter; overrides policy.seed
        """
        self.vocabulary = vocabulary if vocabulary is not None else VOCABULARY
        self.default_vector = tuple(default_vector)
        self.policy = policy or EmbeddingPolicy()
        self._rng = rng if rng is not None else random.Random(self.policy.seed)
    
    def embed(self, word: str) -> Vector:
        """
        Embed a single word.
        
        Args:
            word: Raw word; punctuation and digits are ignored
            
        Returns:
            A new list of VECTOR_DIM floats. Components are in [0, 1) except
            on the fuzzy path, where jitter may push them slightly outside.
        """
        normalized = normalize_word(word)
        if not normalized:
            return list(self.default_vector)
        
        exact = self.vocabulary.get(normalized)
        if exact is not None:
            return list(exact)
        
        fuzzy_key = self.fuzzy_key(normalized)
        if fuzzy_key is not None:
            logger.debug(f"Fuzzy embedding for '{normalized}' via '{fuzzy_key}'")
            return self._jittered(self.vocabulary[fuzzy_key])
        
        return hash_vector(normalized, len(self.default_vector))
    
    def fuzzy_key(self, normalized: str) -> Optional[str]:
        """Return the first vocabulary key containing, or contained in, the word."""
        for key in self.vocabulary:
            if key in normalized or normalized in key:
                return key
        return None
    
    def embed_many(self, words: Sequence[str]) -> List[Vector]:
        """Embed each word in order."""
        return [self.embed(w) for w in words]
    
    def _jittered(self, base: Sequence[float]) -> Vector:
        amplitude = self.policy.jitter
        if amplitude <= 0:
            return list(base)
        # uniform over [-amplitude, +amplitude)
        return [v + (self._rng.random() * 2 * amplitude - amplitude) for v in base]


def embed(word: str) -> Vector:
    """Embed a word with a fresh default generator.
    
    Each call builds its own generator, so no random state is shared
    between callers. Use an EmbeddingGenerator with an injected rng for
    reproducible fuzzy jitter.
    """
    return EmbeddingGenerator().embed(word)
