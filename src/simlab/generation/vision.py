"""
Document scanning demo: plain OCR versus a structure-aware vision model.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..catalog.agents import OCR_CONFIDENCE, OCR_DOCUMENTS


class ScanMode(str, Enum):
    """How a document is read."""
    LEGACY = "legacy"
    VISION = "vision"


@dataclass(frozen=True)
class ScanResult:
    """
    Output of one scan.
    
    ``text`` is the upper-cased raw dump for legacy OCR and the pretty JSON
    rendering of ``data`` for the vision model.
    """
    doc_type: str
    mode: ScanMode
    text: str
    data: Dict[str, Any] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc_type": self.doc_type,
            "mode": self.mode.value,
            "text": self.text,
            "data": self.data,
        }


class DocumentScanner:
    """
    Reads the sample documents in either scan mode.
    
    Args:
        documents: doc type -> (title, content); defaults to the built-in samples
    """
    
    def __init__(self, documents: Optional[Mapping[str, Tuple[str, str]]] = None):
        self.documents = documents if documents is not None else OCR_DOCUMENTS
    
    def _document(self, doc_type: str) -> Tuple[str, str]:
        try:
            return self.documents[doc_type]
        except KeyError:
            raise ValueError(
                f"Unknown document type: {doc_type} (expected one of {', '.join(sorted(self.documents))})"
            ) from None
    
    def legacy(self, doc_type: str) -> str:
        """Title and content as one upper-cased block."""
        title, content = self._document(doc_type)
        return f"{title}\n{content}".upper()
    
    def vision(self, doc_type: str) -> Dict[str, Any]:
        """Content split into lines with a confidence and title flag."""
        title, content = self._document(doc_type)
        return {
            "type": doc_type,
            "detected_text": content.split("\n"),
            "confidence": OCR_CONFIDENCE,
            "metadata": {"has_title": bool(title)},
        }
    
    def scan(self, doc_type: str, mode: Union[ScanMode, str] = ScanMode.VISION) -> ScanResult:
        """
        Scan a document.
        
        Raises:
            ValueError: If the document type or mode is unknown
        """
        mode = ScanMode(mode)
        if mode is ScanMode.LEGACY:
            return ScanResult(doc_type=doc_type, mode=mode, text=self.legacy(doc_type))
        data = self.vision(doc_type)
        return ScanResult(doc_type=doc_type, mode=mode, text=json.dumps(data, indent=2), data=data)


def scan_document(doc_type: str, mode: Union[ScanMode, str] = ScanMode.VISION) -> ScanResult:
    """Scan one of the built-in sample documents."""
    return DocumentScanner().scan(doc_type, mode)
