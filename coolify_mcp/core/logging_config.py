"""Structlog logging configuration writing plain text to stderr.

stdout belongs to the MCP stdio transport, so nothing here may write to it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

from .config import get_settings
from .exceptions import ConfigurationError

_CONFIGURED = False
_FALLBACK_LEVEL = "INFO"


def _plain_text_renderer(_: Any, event_name: str, event_dict: dict[str, Any]) -> str:
    """Render events as ``timestamp [LEVEL] event key=value ...``."""

    timestamp = event_dict.pop("timestamp", datetime.now(tz=timezone.utc).isoformat())
    level = str(event_dict.pop("level", "info")).upper()
    event = event_dict.pop("event", "") or event_name

    extras = " ".join(f"{key}={value}" for key, value in event_dict.items() if value is not None)
    return " ".join(part for part in (timestamp, f"[{level}]", event, extras) if part)


def _handlers(log_file: str, level: str) -> list[logging.Handler]:
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _plain_text_renderer,
        ],
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def configure_logging() -> None:
    """Configure application-wide logging once.

    Invalid settings do not stop logging from coming up: INFO to stderr is
    used instead, and the configuration error surfaces where settings are
    loaded for real.
    """

    global _CONFIGURED
    if _CONFIGURED and logging.getLogger().handlers:
        return

    try:
        settings = get_settings()
        level, log_file = settings.log_level, (settings.log_file or "").strip()
    except ConfigurationError:
        level, log_file = _FALLBACK_LEVEL, ""

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]
    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(handlers=_handlers(log_file, level), level=level, format="%(message)s")

    # httpx logs every request at INFO; the client already logs its own calls.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Return a configured structlog logger."""

    configure_logging()
    return structlog.get_logger(*args, **kwargs)
