"""
Next-token predictor backed by a bigram table.

Probabilities are randomized on every call so the demo looks alive; the
random source is injected for reproducible tests.
"""

import logging
import math
import random
from typing import Mapping, Optional, Sequence

from ..catalog.models import BIGRAM, FALLBACK_CANDIDATES
from ..core.types import Candidate, Prediction

logger = logging.getLogger(__name__)

MIN_WEIGHT = 10
MAX_WEIGHT = 89

# Below this temperature the top candidate is always selected.
GREEDY_TEMPERATURE = 0.5


class NextTokenPredictor:
    """
    Predicts the next word after the last word of a prompt.
    
    Example:
        >>> predictor = NextTokenPredictor(rng=random.Random(1))
        >>> predictor.predict("Hello", temperature=0.0).selected.word in ("world", "user", "there")
        True
    """
    
    def __init__(
        self,
        bigram: Optional[Mapping[str, Sequence[str]]] = None,
        fallback: Sequence[str] = FALLBACK_CANDIDATES,
        rng: Optional[random.Random] = None,
    ):
        self.bigram = bigram if bigram is not None else BIGRAM
        self.fallback = tuple(fallback)
        self._rng = rng or random.Random()
    
    def candidates_for(self, word: str) -> Sequence[str]:
        return self.bigram.get(word, self.fallback)
    
    def predict(self, text: str, temperature: float = 0.7) -> Prediction:
        """
        Score candidates for the word after ``text`` and pick one.
        
        Args:
            text: Prompt; only its last space-separated word is used
            temperature: < 0.5 picks the top candidate, otherwise a random one
            
        Returns:
            Prediction with candidates sorted by descending weight
        """
        last_word = text.lower().strip().split(" ")[-1]
        words = self.candidates_for(last_word)
        
        weighted = [(w, self._rng.randint(MIN_WEIGHT, MAX_WEIGHT)) for w in words]
        weighted.sort(key=lambda item: -item[1])
        total = sum(weight for _, weight in weighted)
        
        candidates = [
            Candidate(word=w, weight=weight, pct=math.floor(weight / total * 100))
            for w, weight in weighted
        ]
        
        if not candidates:
            return Prediction(last_word=last_word)
        
        if temperature < GREEDY_TEMPERATURE:
            idx = 0
        else:
            idx = self._rng.randrange(len(candidates))
        
        logger.debug(f"Predicted '{candidates[idx].word}' after '{last_word}' (temperature={temperature})")
        return Prediction(last_word=last_word, candidates=candidates, selected=candidates[idx])
