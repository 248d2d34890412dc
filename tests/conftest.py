"""
Shared test fixtures and configuration for pytest.
"""

import logging
import os
import random
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from simlab.contracts.retrieval_contracts import EmbeddingPolicy  # noqa: E402
from simlab.embedding.generator import EmbeddingGenerator  # noqa: E402
from simlab.retrieval.knowledge_base import KnowledgeBase  # noqa: E402
from simlab.storage.kv_store import InMemoryKeyValueStore  # noqa: E402


logger = logging.getLogger(__name__)


# ============================================================================
# Pytest hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_simlab_env(monkeypatch):
    """Keep SIMLAB_* variables from the developer shell out of every test."""
    for key in list(os.environ):
        if key.startswith("SIMLAB_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_simlab_logging():
    """Drop handlers attached by configure_logging so streams do not leak between tests."""
    yield
    pkg_logger = logging.getLogger("simlab")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def generator(seeded_rng) -> EmbeddingGenerator:
    """Embedding generator with a fixed seed."""
    return EmbeddingGenerator(rng=seeded_rng)


@pytest.fixture
def exact_generator() -> EmbeddingGenerator:
    """Embedding generator with jitter disabled."""
    return EmbeddingGenerator(policy=EmbeddingPolicy(jitter=0.0))


@pytest.fixture
def reference_kb(generator) -> KnowledgeBase:
    """The 4-entry reference knowledge base."""
    return KnowledgeBase.reference(generator=generator)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    """Empty in-memory key/value store."""
    return InMemoryKeyValueStore()
