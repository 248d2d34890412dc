"""
Keyword tool routing for the agent demo.

A query is matched against a route table; the first route whose keyword
appears in the lowercased query is "called" and its canned result returned.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from ..catalog.agents import (
    NO_TOOL,
    NO_TOOL_RESULT,
    NO_TOOL_THOUGHT,
    TOOL_ROUTES,
    TOOL_THOUGHT,
)

logger = logging.getLogger(__name__)

Route = Tuple[Tuple[str, ...], str, str]


@dataclass(frozen=True)
class ToolCall:
    """Outcome of routing one query."""
    query: str
    tool: str
    result: str
    thought: str
    
    @property
    def is_tool_call(self) -> bool:
        return self.tool != NO_TOOL
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "tool": self.tool,
            "result": self.result,
            "thought": self.thought,
            "is_tool_call": self.is_tool_call,
        }


class ToolRouter:
    """
    Routes free-text commands to simulated tools.
    
    Example:
        >>> ToolRouter().route("Check the weather in London").tool
        "get_weather('London')"
    """
    
    def __init__(self, routes: Optional[Sequence[Route]] = None):
        self.routes: Sequence[Route] = tuple(routes) if routes is not None else TOOL_ROUTES
    
    def route(self, query: str) -> ToolCall:
        """Pick the first matching route, or the no-tool reply."""
        lower = query.lower()
        for keywords, tool, result in self.routes:
            if any(k in lower for k in keywords):
                logger.debug(f"Routed query to {tool}")
                return ToolCall(query=query, tool=tool, result=result, thought=TOOL_THOUGHT)
        return ToolCall(query=query, tool=NO_TOOL, result=NO_TOOL_RESULT, thought=NO_TOOL_THOUGHT)


def route_tool(query: str) -> ToolCall:
    """Route a query with the built-in route table."""
    return ToolRouter().route(query)
