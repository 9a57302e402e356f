import logging
import os
from typing import Any, Optional
from urllib.parse import urlsplit, urlunsplit

LOG_LEVEL_ENV = "GERRIT_LOG_LEVEL"

# Extras emitted by the client: op.request (method..attempt), auth negotiation
# and digest preflight (scheme, realm, algorithm), events-log polling (line).
LOG_EXTRA_FIELDS = (
    "method",
    "url",
    "status",
    "duration_ms",
    "attempt",
    "scheme",
    "realm",
    "algorithm",
    "line",
)

# httpx logs every request at INFO; op.request already covers it.
QUIET_LOGGERS = ("httpx", "httpcore")


def redact_url(url: str) -> str:
    """Drop ``user:password@`` from a URL built by ``GerritClient.from_url``."""
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    return urlunsplit(parts._replace(netloc=parts.netloc.rpartition("@")[2]))


class LogfmtFormatter(logging.Formatter):
    """logfmt-style formatter; extras that a record lacks are skipped."""

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            if key == "url":
                val = redact_url(str(val))
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info and record.exc_info[0] is not None:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if " " in s or "=" in s or '"' in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: Optional[str] = None) -> None:
    """
    Install a single logfmt handler on the root logger.

    level defaults to $GERRIT_LOG_LEVEL, then INFO.
    """

    level = level or os.getenv(LOG_LEVEL_ENV) or "INFO"
    root = logging.getLogger()
    # Calling twice must not duplicate output.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = [
    "setup_logging",
    "LogfmtFormatter",
    "LOG_EXTRA_FIELDS",
    "LOG_LEVEL_ENV",
    "redact_url",
]
