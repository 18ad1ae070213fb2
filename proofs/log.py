"""Structured logging for the verifier CLI and service.

Logs go to stderr so the CLI can keep stdout for verdict JSON.

Usage:
    from proofs.log import configure_logging
    configure_logging()                  # level / format from settings
    configure_logging(level="DEBUG")     # explicit override

    log = structlog.get_logger(__name__)
    log.info("verdict", scheme="cardano", ok=True)
"""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

import structlog
from structlog.typing import Processor

from proofs.config import load_settings

def _level_number(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)

def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """Configure structlog once at process start."""
    settings = load_settings()
    level = level or settings.log_level
    if json_output is None:
        json_output = settings.log_json

    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
