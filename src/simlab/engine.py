"""
Simulation Engine - one construction point for every engine component.

Static tables, policies and the random source are wired here from a
SimLabConfig so callers (UI, CLI, tests) never touch module globals.
"""

import logging
import random
from typing import List, Optional, Sequence, Union

from .catalog.agents import DEFAULT_PERSONA
from .catalog.knowledge import CONCEPT_POINTS
from .config.config_loader import SimLabConfig
from .contracts.retrieval_contracts import ChunkRecord, ChunkingPolicy
from .core.types import (
    ModelFamily,
    NearestPoint,
    Point2D,
    Prediction,
    QuantizationProfile,
    QuantizedWeight,
    SearchResult,
    TokenUsage,
    Vector,
)
from .embedding.generator import EmbeddingGenerator
from .generation.inference import LatencyReport, simulate_ping
from .generation.personas import PersonaChat
from .generation.predictor import NextTokenPredictor
from .generation.sessions import PipelineSession, RagSession
from .generation.tools import ToolCall, ToolRouter
from .generation.vision import DocumentScanner, ScanMode, ScanResult
from .quantization.quantizer import LevelLike, Quantizer
from .retrieval.chunker import Chunker, split_text
from .retrieval.knowledge_base import KnowledgeBase
from .retrieval.search import RetrievalRanker, keyword_search
from .retrieval.spatial import nearest_point
from .retrieval.vector_math import cosine_similarity
from .storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .tokenization.tokenizer import Tokenizer, estimate_usage, get_model

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Facade over the chunker, tokenizer, embedder, ranker, quantizer and
    the generation demos.
    
    Example:
        >>> engine = SimulationEngine()
        >>> engine.search("How long is battery life?").best.id
        2
    """
    
    def __init__(
        self,
        config: Optional[SimLabConfig] = None,
        rng: Optional[random.Random] = None,
        store: Optional[KeyValueStore] = None,
    ):
        """
        Initialize the engine.
        
        Args:
            config: Configuration (defaults + environment if not provided)
            rng: Random source shared by jitter and prediction; seeded from
                config when not provided
            store: Key/value store for wizard hand-off; a JSON file store when
                storage.kv_path is configured, else in-memory
        """
        self.config = config or SimLabConfig()
        embedding_policy = self.config.get_embedding_policy()
        self.rng = rng if rng is not None else random.Random(embedding_policy.seed)
        
        self.chunking_policy = self.config.get_chunking_policy()
        self.generator = EmbeddingGenerator(policy=embedding_policy, rng=self.rng)
        self.tokenizer = Tokenizer()
        self.ranker = RetrievalRanker(self.generator, self.config.get_retrieval_policy())
        self.quantizer = Quantizer()
        self.predictor = NextTokenPredictor(rng=self.rng)
        self.router = ToolRouter()
        self.scanner = DocumentScanner()
        self.knowledge_base = KnowledgeBase.reference(generator=self.generator)
        
        if store is None:
            kv_path = self.config.get_kv_path()
            store = JsonFileKeyValueStore(kv_path) if kv_path else InMemoryKeyValueStore()
        self.store = store
        
        logger.debug(f"SimulationEngine ready (chunking={self.chunking_policy.to_dict()})")
    
    def chunk(
        self,
        text: str,
        size: Optional[int] = None,
        overlap: Optional[int] = None,
        smart: Optional[bool] = None,
    ) -> List[str]:
        """Chunk text; omitted parameters come from the chunking policy."""
        policy = self._policy(size, overlap, smart)
        return [c for c, _, _ in split_text(text, policy.chunk_size, policy.overlap, policy.smart)]
    
    def chunk_records(
        self,
        text: str,
        size: Optional[int] = None,
        overlap: Optional[int] = None,
        smart: Optional[bool] = None,
    ) -> List[ChunkRecord]:
        """Chunk text into records with offsets and hashes."""
        return Chunker(self._policy(size, overlap, smart)).chunk(text)
    
    def _policy(self, size, overlap, smart) -> ChunkingPolicy:
        base = self.chunking_policy
        return ChunkingPolicy(
            chunk_size=base.chunk_size if size is None else size,
            overlap=base.overlap if overlap is None else overlap,
            smart=base.smart if smart is None else smart,
        )
    
    def tokenize(self, text: str, family: ModelFamily = ModelFamily.STANDARD) -> List[str]:
        return self.tokenizer.tokenize(text, family)
    
    def tokenize_for_model(self, text: str, model_key: str) -> List[str]:
        return self.tokenizer.tokenize(text, get_model(model_key).family)
    
    def usage(self, text: str, model_key: str) -> TokenUsage:
        """Tokenize for a catalog model and estimate cost/context usage."""
        return estimate_usage(self.tokenize_for_model(text, model_key), model_key)
    
    def embed(self, word: str) -> Vector:
        return self.generator.embed(word)
    
    def cosine_similarity(self, vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
        return cosine_similarity(vec_a, vec_b)
    
    def search(self, query: str, db: Optional[KnowledgeBase] = None) -> SearchResult:
        """Vector search against the engine's knowledge base (vectors memoized)."""
        return self.ranker.search(query, db if db is not None else self.knowledge_base)
    
    def keyword_search(self, query: str) -> SearchResult:
        return keyword_search(query, self.knowledge_base)
    
    def quantize(self, weights: Sequence[float], level: LevelLike) -> List[QuantizedWeight]:
        return self.quantizer.quantize(weights, level)
    
    def quantization_profile(self, level: LevelLike) -> QuantizationProfile:
        return self.quantizer.profile(level)
    
    def nearest_concept(
        self,
        query: Point2D,
        points: Sequence[Point2D] = CONCEPT_POINTS,
    ) -> NearestPoint:
        """Nearest concept point; a match is recorded for the pipeline wizard."""
        result = nearest_point(query, points, self.config.get_match_distance())
        if result.is_match:
            PipelineSession(self.store).record_match(result.point)
        return result
    
    def predict(self, text: str, temperature: float = 0.7) -> Prediction:
        return self.predictor.predict(text, temperature)
    
    def rag_session(self) -> RagSession:
        return RagSession(self.store, self.knowledge_base)
    
    def pipeline_session(self) -> PipelineSession:
        return PipelineSession(self.store)
    
    def route_tool(self, query: str) -> ToolCall:
        return self.router.route(query)
    
    def scan_document(self, doc_type: str, mode: Union[ScanMode, str] = ScanMode.VISION) -> ScanResult:
        return self.scanner.scan(doc_type, mode)
    
    def persona_chat(self, persona: str = DEFAULT_PERSONA) -> PersonaChat:
        """Start a chat under one of the catalog personas."""
        return PersonaChat(persona)
    
    def ping(self) -> LatencyReport:
        """Simulated local versus cloud latency, drawn from the engine rng."""
        return simulate_ping(self.rng)
