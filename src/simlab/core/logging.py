"""
Logging utilities for the text simulation engine.

Provides structured logging with session context so that the calls made
on behalf of one wizard session (chunk → tokenize → embed → search) can be
traced together.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TextIO

ROOT_LOGGER_NAME = "simlab"

# Record attributes copied into every formatted line when set.
SESSION_FIELDS = ("session_id", "step", "operation")

_BASE_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def session_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Session attributes attached to a record through ``extra``."""
    fields = {}
    for name in SESSION_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            fields[name] = value
    return fields


class StructuredFormatter(logging.Formatter):
    """
    One JSON object per line: level, logger, message, optional UTC
    timestamp, any session fields and a formatted exception.
    """
    
    def __init__(self, include_timestamp: bool = True):
        super().__init__()
        self.include_timestamp = include_timestamp
    
    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.include_timestamp:
            created = datetime.fromtimestamp(record.created, tz=timezone.utc)
            entry["timestamp"] = created.isoformat()
        entry.update(session_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Plain text lines with session fields appended.
    
    Format: TIMESTAMP - LOGGER - LEVEL - MESSAGE [session_id=X step=Y]
    """
    
    def __init__(self, include_timestamp: bool = True):
        fmt = f"%(asctime)s - {_BASE_FORMAT}" if include_timestamp else _BASE_FORMAT
        super().__init__(fmt)
    
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = session_fields(record)
        if not fields:
            return line
        suffix = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{line} [{suffix}]"


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    include_timestamp: bool = True,
    structured: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure logging for the simlab package.
    
    Attaches a single stream handler to the ``simlab`` logger. Calling it
    again only adjusts the level. Logs go to stderr by default so CLI
    output on stdout stays machine-readable.
    
    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (ignored if structured=True)
        include_timestamp: Whether to include timestamp in log messages
        structured: If True, output JSON lines; if False, human-readable
        stream: Output stream (default: sys.stderr)
        
    Example:
        >>> from simlab.core.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG, structured=True)
    """
    pkg_logger = logging.getLogger(ROOT_LOGGER_NAME)
    pkg_logger.setLevel(level)
    
    if pkg_logger.handlers:
        for handler in pkg_logger.handlers:
            handler.setLevel(level)
        return
    
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    
    if structured:
        formatter = StructuredFormatter(include_timestamp=include_timestamp)
    elif format_string:
        formatter = logging.Formatter(format_string)
    else:
        formatter = HumanReadableFormatter(include_timestamp=include_timestamp)
    
    handler.setFormatter(formatter)
    pkg_logger.addHandler(handler)


class SessionContext:
    """
    Tags log records emitted through ``log_with_context`` with a wizard
    session. Contexts nest; leaving one restores the enclosing context.
    
    Example:
        >>> with SessionContext(session_id="abc", step=3):
        ...     log_with_context(logger, logging.INFO, "Searching")
    """
    
    _stack: List["SessionContext"] = []
    
    def __init__(
        self,
        session_id: Optional[str] = None,
        step: Optional[int] = None,
        **extra: Any,
    ):
        fields = dict(extra, session_id=session_id, step=step)
        self.context = {k: v for k, v in fields.items() if v is not None}
    
    def __enter__(self) -> "SessionContext":
        SessionContext._stack.append(self)
        return self
    
    def __exit__(self, *args) -> None:
        SessionContext._stack.remove(self)
    
    @classmethod
    def get_current(cls) -> Dict[str, Any]:
        """Fields of the innermost active context (empty outside any context)."""
        if not cls._stack:
            return {}
        return dict(cls._stack[-1].context)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """
    Log ``message`` with the active session fields plus ``extra``.
    
    Args:
        logger: The logger to use
        level: Log level (e.g., logging.INFO)
        message: Log message
        **extra: Additional fields; these win over session fields
    """
    logger.log(level, message, extra={**SessionContext.get_current(), **extra})
