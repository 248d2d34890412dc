"""
Key/Value Store - the hand-off slot between otherwise independent wizard views.

The engine never touches these; sessions in ``simlab.generation`` receive a
store explicitly.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.exceptions import SimLabStorageError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Minimal string key/value interface."""
    
    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value for key, or default when unset."""
    
    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store backed by a dict."""
    
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
    
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)
    
    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore(KeyValueStore):
    """
    Store persisted as a single JSON object file.
    
    The file is re-read on every ``get`` so separate processes (e.g. two
    CLI invocations) see each other's writes.
    
    Example:
        >>> store = JsonFileKeyValueStore(Path("local/simlab_kv.json"))
        >>> store.set("rag-best", "Battery lasts 24 hours on eco mode.")
    """
    
    def __init__(self, path: Path, pretty_print: bool = True):
        """
        Initialize the store.
        
        Args:
            path: JSON file location (created on first write)
            pretty_print: Whether to indent the JSON file
        """
        self.path = Path(path)
        self.pretty_print = pretty_print
    
    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SimLabStorageError(f"Cannot read key/value file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SimLabStorageError(f"Key/value file {self.path} is not a JSON object")
        return data
    
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._read().get(key, default)
    
    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty_print else None)
        except OSError as e:
            raise SimLabStorageError(f"Cannot write key/value file {self.path}: {e}") from e
        logger.debug(f"Stored key '{key}' in {self.path}")
