"""structlog setup for the API process and the register-case CLI.

The deployment environment picks the renderer:

    production   one JSON object per line, tracebacks as structured dicts
    development  colored console lines
    test         plain console lines (no ANSI codes in captured output)

The level comes from the log_level argument, else LOG_LEVEL, else INFO.
Unknown level names fall back to INFO rather than failing startup.
"""

from __future__ import annotations

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from case_registry.infrastructure.observability.correlation import (
    add_correlation_id,
)

LOG_LEVEL_ENV = "LOG_LEVEL"


def resolve_log_level(log_level: str | None = None) -> int:
    name = (log_level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _renderer_for(environment: str) -> list[Processor]:
    if environment == "production":
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=environment == "development")]


def configure_structlog(environment: str, log_level: str | None = None) -> None:
    """Install the process-wide structlog configuration.

    Called once from the API lifespan or the CLI entry point.

    Args:
        environment: production, development or test.
        log_level: Level name overriding LOG_LEVEL.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        cast(Processor, add_correlation_id),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        *_renderer_for(environment),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_log_level(log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # Tests reconfigure between cases
        cache_logger_on_first_use=environment != "test",
    )
