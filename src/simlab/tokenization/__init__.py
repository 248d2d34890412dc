"""
Tokenization module: mock subword tokenizers and usage estimates.
"""

from .tokenizer import (
    Tokenizer,
    estimate_usage,
    get_model,
    tokenize,
    tokenize_for_model,
)

__all__ = [
    "Tokenizer",
    "estimate_usage",
    "get_model",
    "tokenize",
    "tokenize_for_model",
]
