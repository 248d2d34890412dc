"""
Generation module: next-token prediction, inference timing, wizard sessions
and the agent demos (tool routing, document scanning, personas).
"""

from .inference import InferenceStats, LatencyReport, simulate_inference, simulate_ping
from .personas import PersonaChat, persona_reply, system_prompt
from .predictor import NextTokenPredictor
from .sessions import (
    PIPELINE_CATEGORY_KEY,
    PIPELINE_MATCH_KEY,
    RAG_BEST_KEY,
    PipelineAnswer,
    PipelineSession,
    RagSession,
)
from .tools import ToolCall, ToolRouter, route_tool
from .vision import DocumentScanner, ScanMode, ScanResult, scan_document

__all__ = [
    "DocumentScanner",
    "InferenceStats",
    "LatencyReport",
    "NextTokenPredictor",
    "PIPELINE_CATEGORY_KEY",
    "PIPELINE_MATCH_KEY",
    "PersonaChat",
    "PipelineAnswer",
    "PipelineSession",
    "RAG_BEST_KEY",
    "RagSession",
    "ScanMode",
    "ScanResult",
    "ToolCall",
    "ToolRouter",
    "persona_reply",
    "route_tool",
    "scan_document",
    "simulate_inference",
    "simulate_ping",
    "system_prompt",
]
