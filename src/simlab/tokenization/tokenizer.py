"""
Tokenizer - mock subword tokenization for two model families.

OPEN_VOCABULARY: whitespace runs become their own tokens and a
start-of-sequence marker is prepended (even for empty input).

STANDARD: whitespace attaches to the following word, then each word is
greedily decomposed against a static subword list. Prefix matches recurse
on the remainder; a suffix match ends decomposition of that word.
Concatenating STANDARD tokens reproduces the input exactly.
"""

import logging
import re
from typing import List, Optional, Sequence

from ..catalog.models import DEFAULT_MODEL, MODEL_CATALOG
from ..catalog.vocabulary import START_OF_SEQUENCE, SUBWORDS
from ..core.exceptions import UnknownModelError
from ..core.types import ModelFamily, ModelSpec, TokenUsage

logger = logging.getLogger(__name__)

_WHITESPACE_SPLIT = re.compile(r"(\s+)")


class Tokenizer:
    """
    Splits text into an ordered list of token strings.
    
    Example:
        >>> Tokenizer().tokenize(" preheating")
        [' pre', 'heat', 'ing']
    """
    
    def __init__(
        self,
        subwords: Optional[Sequence[str]] = None,
        start_marker: str = START_OF_SEQUENCE,
    ):
        self.subwords = tuple(subwords) if subwords is not None else SUBWORDS
        self.start_marker = start_marker
    
    def tokenize(self, text: str, family: ModelFamily = ModelFamily.STANDARD) -> List[str]:
        """
        Tokenize text.
        
        Args:
            text: Source text
            family: Model family deciding the split rules
            
        Returns:
            Tokens in source order
        """
        family = ModelFamily(family)
        if family is ModelFamily.OPEN_VOCABULARY:
            tokens = self._split_open_vocabulary(text)
        else:
            tokens = self._split_standard(text)
        logger.debug(f"Tokenized {len(text)} chars into {len(tokens)} tokens ({family.value})")
        return tokens
    
    def _split_open_vocabulary(self, text: str) -> List[str]:
        tokens = [part for part in _WHITESPACE_SPLIT.split(text) if part]
        tokens.insert(0, self.start_marker)
        return tokens
    
    def _split_standard(self, text: str) -> List[str]:
        tokens: List[str] = []
        buffer = ""
        
        for part in _WHITESPACE_SPLIT.split(text):
            if not part:
                continue
            if not part.strip():
                buffer += part
                continue
            tokens.extend(self.decompose(buffer + part))
            buffer = ""
        
        if buffer:
            tokens.append(buffer)
        
        return tokens
    
    def decompose(self, word: str) -> List[str]:
        """
        Greedily split one word (optionally with leading whitespace) into subwords.
        
        Matching is case-insensitive; emitted tokens keep the source case.
        """
        pieces: List[str] = []
        fragment = word
        
        while fragment:
            check = fragment.lstrip()
            leading = fragment[:len(fragment) - len(check)]
            lowered = check.lower()
            
            prefix = self._first_match(lowered, prefix=True)
            if prefix is not None:
                pieces.append(leading + check[:len(prefix)])
                fragment = check[len(prefix):]
                continue
            
            suffix = self._first_match(lowered, prefix=False)
            if suffix is not None:
                stem_len = len(check) - len(suffix)
                pieces.append(leading + check[:stem_len])
                pieces.append(check[stem_len:])
                break
            
            pieces.append(fragment)
            break
        
        return pieces
    
    def _first_match(self, lowered: str, prefix: bool) -> Optional[str]:
        for sub in self.subwords:
            if len(lowered) <= len(sub):
                continue
            if prefix and lowered.startswith(sub):
                return sub
            if not prefix and lowered.endswith(sub):
                return sub
        return None


def get_model(model_key: str) -> ModelSpec:
    """
    Look up a model in the catalog.
    
    Raises:
        UnknownModelError: If the key is not in the catalog
    """
    try:
        return MODEL_CATALOG[model_key]
    except KeyError:
        raise UnknownModelError(model_key, known=sorted(MODEL_CATALOG)) from None


def tokenize(text: str, family: ModelFamily = ModelFamily.STANDARD) -> List[str]:
    """Tokenize text with the built-in subword list."""
    return Tokenizer().tokenize(text, family)


def tokenize_for_model(text: str, model_key: str = DEFAULT_MODEL) -> List[str]:
    """Tokenize text using the family of a catalog model."""
    return tokenize(text, get_model(model_key).family)


def estimate_usage(tokens: Sequence[str], model_key: str = DEFAULT_MODEL) -> TokenUsage:
    """
    Estimate input cost and context window usage for a token list.
    
    Args:
        tokens: Tokens produced for the model
        model_key: Catalog key of the model
        
    Returns:
        TokenUsage with cost in USD and context usage in percent
    """
    spec = get_model(model_key)
    count = len(tokens)
    return TokenUsage(
        model_key=spec.key,
        token_count=count,
        input_cost=(count / 1_000_000) * spec.input_price,
        context_usage_pct=(count / spec.context_window) * 100,
        max_output=spec.max_output,
    )
