"""
Custom exceptions for the text simulation engine.
"""

from typing import List, Optional


class SimLabError(Exception):
    """Base exception for all simlab errors."""
    pass


class SimLabConfigError(SimLabError):
    """
    Error in simlab configuration.
    
    Raised when:
    - Configuration file cannot be parsed
    - Configuration values have the wrong type
    - Configuration values are out of valid range
    """
    pass


class SimLabStorageError(SimLabError):
    """
    Error persisting or reading the wizard hand-off slot.
    
    Raised when:
    - The key/value file cannot be written
    - The key/value file exists but is not a JSON object
    """
    pass


class UnknownModelError(SimLabError, KeyError):
    """
    Requested tokenizer model is not in the catalog.
    """
    
    def __init__(self, model_key: str, known: Optional[List[str]] = None):
        super().__init__(f"Unknown model: {model_key}")
        self.model_key = model_key
        self.known = known or []

    def __str__(self) -> str:
        return self.args[0]
