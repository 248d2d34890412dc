"""
Chunker - Split text into ordered, possibly overlapping chunks.

Two modes:
- Fixed stride: raw windows of ``chunk_size`` advanced by
  ``chunk_size - overlap``; a short tail after the first chunk is dropped.
- Smart: each window is pulled back to the nearest paragraph, line,
  sentence, comma or space boundary found in its second half, then trimmed.

Fixed-stride output has at most ceil(len / stride) + 1 chunks and keeps
whitespace-only text as raw slices. Smart mode only guarantees strictly
increasing starts (so at most len(text) chunks): when the overlap back-up
lands next to the previous start, the window advances one character.
"""

import logging
from typing import List, Optional, Tuple

from ..contracts.retrieval_contracts import (
    ChunkRecord,
    ChunkingPolicy,
    compute_content_hash,
)

logger = logging.getLogger(__name__)

# Boundary delimiters in priority order. The window ends right after the delimiter.
SMART_DELIMITERS: Tuple[str, ...] = ("\n\n", "\n", ". ", "! ", "? ", ", ", " ")

# Fixed-stride tails shorter than this (after trimming) are dropped.
MIN_TAIL_CHARS = 5

# A boundary is only accepted this far into the window.
MIN_BOUNDARY_RATIO = 0.5


class Chunker:
    """
    Chunks text into ChunkRecord objects.
    
    Example:
        >>> chunker = Chunker(ChunkingPolicy(chunk_size=4, overlap=2))
        >>> [c.content for c in chunker.chunk("abcdefghij")]
        ['abcd', 'cdef', 'efgh', 'ghij']
    """
    
    def __init__(self, policy: Optional[ChunkingPolicy] = None):
        """
        Initialize the chunker.
        
        Args:
            policy: Chunking policy (uses default if not provided)
        """
        self.policy = policy or ChunkingPolicy()
    
    def chunk(self, content: str) -> List[ChunkRecord]:
        """
        Split content into chunk records.
        
        Args:
            content: Text content to chunk
            
        Returns:
            List of ChunkRecord objects in source order
        """
        raw_chunks = split_text(
            content,
            chunk_size=self.policy.chunk_size,
            overlap=self.policy.overlap,
            smart=self.policy.smart,
        )
        
        max_chunks = self.policy.max_chunks
        if max_chunks is not None and len(raw_chunks) > max_chunks:
            logger.warning(
                f"Text produced {len(raw_chunks)} chunks, limiting to {max_chunks}"
            )
            raw_chunks = raw_chunks[:max_chunks]
        
        records = [
            ChunkRecord(
                chunk_index=i,
                start_offset=start,
                end_offset=end,
                content=chunk_content,
                content_sha256=compute_content_hash(chunk_content),
            )
            for i, (chunk_content, start, end) in enumerate(raw_chunks)
        ]
        
        logger.debug(f"Created {len(records)} chunks (policy={self.policy.to_dict()})")
        return records


def clamp_overlap(chunk_size: int, overlap: int) -> int:
    """Clamp an overlap slider value into [0, chunk_size - 1]."""
    if overlap >= chunk_size:
        return max(0, chunk_size - 1)
    return max(0, overlap)


def _validate(chunk_size: int, overlap: int) -> None:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    
    if overlap < 0:
        raise ValueError("overlap must be non-negative")
    
    if overlap >= chunk_size:
        raise ValueError("overlap must be less than chunk_size")


def split_text(
    text: str,
    chunk_size: int = 25,
    overlap: int = 0,
    smart: bool = False,
) -> List[Tuple[str, int, int]]:
    """
    Split text into chunks with their character offsets.
    
    Args:
        text: Text content to chunk
        chunk_size: Window width in characters
        overlap: Characters shared between consecutive windows
        smart: Prefer natural boundaries and trim each chunk
        
    Returns:
        List of tuples: (chunk_content, start_offset, end_offset)
        
    Raises:
        ValueError: If chunk_size <= 0, overlap < 0 or overlap >= chunk_size
    """
    _validate(chunk_size, overlap)
    
    if not smart:
        return _split_fixed(text, chunk_size, overlap)
    
    if not text.strip():
        return []
    return _split_smart(text, chunk_size, overlap)


def _split_fixed(text: str, chunk_size: int, overlap: int) -> List[Tuple[str, int, int]]:
    chunks = []
    step = chunk_size - overlap
    
    for start in range(0, len(text), step):
        end = min(start + chunk_size, len(text))
        chunk_content = text[start:end]
        
        if start > 0 and len(chunk_content) < chunk_size and len(chunk_content.strip()) < MIN_TAIL_CHARS:
            break
        
        chunks.append((chunk_content, start, end))
    
    return chunks


def find_boundary(window: str, chunk_size: int) -> Optional[int]:
    """
    Find where a smart chunk should end inside ``window``.
    
    Returns:
        Offset just past the highest-priority delimiter that starts no earlier
        than half the chunk size, or None if there is none
    """
    min_pos = chunk_size * MIN_BOUNDARY_RATIO
    for delimiter in SMART_DELIMITERS:
        pos = window.rfind(delimiter)
        if pos != -1 and pos >= min_pos:
            return pos + len(delimiter)
    return None


def _split_smart(text: str, chunk_size: int, overlap: int) -> List[Tuple[str, int, int]]:
    chunks = []
    text_len = len(text)
    start = 0
    
    while start < text_len:
        end = min(start + chunk_size, text_len)
        
        if end < text_len:
            boundary = find_boundary(text[start:end], chunk_size)
            if boundary is not None:
                end = start + boundary
        
        raw = text[start:end]
        chunk_content = raw.strip()
        if chunk_content:
            chunk_start = start + (len(raw) - len(raw.lstrip()))
            chunks.append((chunk_content, chunk_start, chunk_start + len(chunk_content)))
        
        if end >= text_len:
            break
        
        if overlap > 0:
            next_start = end - overlap
        else:
            next_start = end
            while next_start < text_len and text[next_start].isspace():
                next_start += 1
        
        # Monotonic advance guarantees termination.
        start = max(next_start, start + 1)
    
    return chunks


def chunk(text: str, size: int, overlap: int = 0, smart: bool = False) -> List[str]:
    """
    Split text into chunk strings.
    
    Args:
        text: Source text
        size: Window width in characters (> 0)
        overlap: Characters shared by neighbours (0 <= overlap < size)
        smart: Use boundary-aware splitting
        
    Returns:
        Chunk strings in source order
    """
    return [content for content, _, _ in split_text(text, size, overlap, smart)]
