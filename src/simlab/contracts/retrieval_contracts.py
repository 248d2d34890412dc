"""
Retrieval Contracts - policy and record models for the simulation engine.

Policies are plain dataclasses so they can be loaded from configuration,
serialized next to results, and passed explicitly into the engine.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import hashlib


def compute_content_hash(content: str) -> str:
    """
    Compute SHA256 hash of text content.
    
    Args:
        content: Text content to hash
        
    Returns:
        Hex-encoded SHA256 hash (64 characters)
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


@dataclass
class ChunkingPolicy:
    """
    Policy for splitting text into chunks.
    
    Attributes:
        chunk_size: Window width in characters
        overlap: Characters shared between neighbouring chunks
        smart: Prefer paragraph/line/sentence/comma/space boundaries
        max_chunks: Optional cap on emitted chunks
        version: Policy version identifier
    """
    chunk_size: int = 25
    overlap: int = 0
    smart: bool = False
    max_chunks: Optional[int] = None
    version: str = "1.0"
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "chunk_size": self.chunk_size,
            "overlap": self.overlap,
            "smart": self.smart,
            "max_chunks": self.max_chunks,
            "version": self.version,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChunkingPolicy":
        """Create from dictionary."""
        return cls(
            chunk_size=data.get("chunk_size", 25),
            overlap=data.get("overlap", 0),
            smart=data.get("smart", False),
            max_chunks=data.get("max_chunks"),
            version=data.get("version", "1.0"),
        )


@dataclass
class ChunkRecord:
    """
    A single chunk of source text with its position.
    
    Attributes:
        chunk_index: Position of the chunk in the output sequence
        start_offset: Character offset of the chunk start in the source
        end_offset: Character offset one past the chunk end
        content: Chunk text (trimmed in smart mode)
        content_sha256: SHA256 hash of content
    """
    chunk_index: int
    start_offset: int
    end_offset: int
    content: str
    content_sha256: str
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "chunk_index": self.chunk_index,
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "content": self.content,
            "content_sha256": self.content_sha256,
        }


@dataclass
class RetrievalPolicy:
    """
    Policy for ranking queries against the knowledge base.
    
    Attributes:
        match_threshold: Minimum cosine score presented as a match
        version: Policy version identifier
    """
    match_threshold: float = 0.6
    version: str = "1.0"
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "match_threshold": self.match_threshold,
            "version": self.version,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RetrievalPolicy":
        """Create from dictionary."""
        return cls(
            match_threshold=data.get("match_threshold", 0.6),
            version=data.get("version", "1.0"),
        )


@dataclass
class EmbeddingPolicy:
    """
    Policy for the word embedding generator.
    
    Attributes:
        jitter: Half-width of the random noise added on fuzzy matches (0 disables)
        seed: Seed for the jitter random source (None = unseeded)
    """
    jitter: float = 0.05
    seed: Optional[int] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"jitter": self.jitter, "seed": self.seed}
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmbeddingPolicy":
        """Create from dictionary."""
        return cls(
            jitter=data.get("jitter", 0.05),
            seed=data.get("seed"),
        )
