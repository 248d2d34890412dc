"""
Configuration loader for the simulation engine.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from ..contracts.retrieval_contracts import ChunkingPolicy, EmbeddingPolicy, RetrievalPolicy
from ..core.exceptions import SimLabConfigError


logger = logging.getLogger(__name__)


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


# env var → (dotted config key, parser)
ENV_OVERRIDES: Dict[str, tuple] = {
    "SIMLAB_CHUNK_SIZE": ("chunking.chunk_size", int),
    "SIMLAB_CHUNK_OVERLAP": ("chunking.overlap", int),
    "SIMLAB_SMART_CHUNKING": ("chunking.smart", _parse_bool),
    "SIMLAB_MATCH_THRESHOLD": ("retrieval.match_threshold", float),
    "SIMLAB_RANDOM_SEED": ("embedding.seed", int),
    "SIMLAB_EMBED_JITTER": ("embedding.jitter", float),
    "SIMLAB_LOG_LEVEL": ("logging.level", str),
    "SIMLAB_KV_PATH": ("storage.kv_path", str),
}


class SimLabConfig:
    """
    Configuration for the simulation engine.
    
    Loads a YAML configuration file (or built-in defaults) and applies
    ``SIMLAB_*`` environment overrides on top.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.
        
        Args:
            config_path: Path to YAML config file (optional)
        """
        self.config_path = Path(config_path) if config_path else None
        self.config = self._default_config()
        if self.config_path:
            _deep_merge(self.config, self._load_config())
        self._apply_env_overrides()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")
        
        logger.info(f"Loading config from: {self.config_path}")
        
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SimLabConfigError(f"Invalid YAML in {self.config_path}: {e}") from e
        
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise SimLabConfigError(f"Config root must be a mapping: {self.config_path}")
        return config

    def _default_config(self) -> Dict[str, Any]:
        """Return default configuration."""
        return {
            "chunking": {
                "chunk_size": 25,
                "overlap": 0,
                "smart": False,
            },
            "retrieval": {
                "match_threshold": 0.6,
            },
            "embedding": {
                "jitter": 0.05,
                "seed": None,
            },
            "drag": {
                "match_distance": 2.9,
            },
            "logging": {
                "level": "INFO",
                "structured": False,
            },
            "storage": {
                "kv_path": None,
            },
        }

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides to loaded config."""
        for env_var, (key, parser) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_var)
            if raw is None or raw == "":
                continue
            try:
                value = parser(raw)
            except ValueError as e:
                raise SimLabConfigError(f"Invalid value for {env_var}: {e}") from e
            self.set(key, value)
            logger.debug(f"Config override from {env_var}: {key}={value!r}")

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dotted key."""
        keys = key.split(".")
        node = self.config
        for k in keys[:-1]:
            node = node.setdefault(k, {})
        node[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key."""
        keys = key.split(".")
        value = self.config
        
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        
        return value if value is not None else default

    def _typed(self, key: str, cast: Callable[[Any], Any]) -> Any:
        value = self.get(key)
        try:
            return cast(value) if value is not None else None
        except (TypeError, ValueError) as e:
            raise SimLabConfigError(f"Invalid config value for {key}: {value!r}") from e

    def get_chunking_policy(self) -> ChunkingPolicy:
        """Get the chunking policy."""
        return ChunkingPolicy(
            chunk_size=self._typed("chunking.chunk_size", int),
            overlap=self._typed("chunking.overlap", int),
            smart=bool(self.get("chunking.smart", False)),
        )

    def get_retrieval_policy(self) -> RetrievalPolicy:
        """Get the retrieval policy."""
        return RetrievalPolicy(match_threshold=self._typed("retrieval.match_threshold", float))

    def get_embedding_policy(self) -> EmbeddingPolicy:
        """Get the embedding policy."""
        return EmbeddingPolicy(
            jitter=self._typed("embedding.jitter", float),
            seed=self._typed("embedding.seed", int),
        )

    def get_match_distance(self) -> float:
        """Get the drag demo match distance."""
        return self._typed("drag.match_distance", float)

    def get_log_level(self) -> int:
        """Get the logging level as a logging module constant."""
        name = str(self.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise SimLabConfigError(f"Unknown log level: {name}")
        return level

    def get_kv_path(self) -> Optional[Path]:
        """Get the key/value file path, if configured."""
        path = self.get("storage.kv_path")
        return Path(path) if path else None


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
