from __future__ import annotations

import logging
from typing import Any, Dict

# LogRecord attributes that an ``extra`` mapping must not overwrite.
RESERVED_LOG_KEYS = frozenset(
    {
        "name",
        "msg",
        "message",
        "args",
        "asctime",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}


def log_event(event: str, logger: logging.Logger | None = None, **fields: Any) -> None:
    """
    Emit a structured INFO event.
    - fields travel as ``extra`` so LogfmtFormatter can render them
    - reserved LogRecord attributes are dropped instead of raising KeyError
    """
    log = logger or logging.getLogger("gerrit_rest.observability")
    log.info(event, extra={"event": event, **_clean_fields(fields)})


__all__ = ["log_event", "RESERVED_LOG_KEYS"]
