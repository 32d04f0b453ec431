"""JSON log output for the scraper.

Every entry is one JSON object per line with ``timestamp``, ``level``,
``logger`` and ``message``.  Scrape context travels through ``extra``:

* runs: ``scraper_session_id``, ``profile_url``, ``duration_ms``
* sections: ``section``, ``records_extracted``, ``records_skipped``
* failures: ``error_reason``

Session cookies must never show up in logs, so all free text is scrubbed of
``key=value`` pairs whose key looks like a credential.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import IO

_SECRET_PAIR_RE = re.compile(
    r"(li_at|cookie|session.cookie.value|secret|password|token|credential|authorization)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)

_CONTEXT_FIELDS = (
    "scraper_session_id",
    "profile_url",
    "section",
    "records_extracted",
    "records_skipped",
    "duration_ms",
)


def redact(text: str) -> str:
    """Replace credential-looking ``key=value`` pairs with ``[REDACTED]``."""
    return _SECRET_PAIR_RE.sub("[REDACTED]", text)


class JsonFormatter(logging.Formatter):
    """Renders a log record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
        }

        attrs = record.__dict__
        entry.update((name, attrs[name]) for name in _CONTEXT_FIELDS if name in attrs)

        if "error_reason" in attrs:
            entry["error_reason"] = redact(str(attrs["error_reason"]))

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = redact(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO", stream: IO[str] | None = None) -> None:
    """Send all log output through ``JsonFormatter``.

    Replaces any handlers already on the root logger.  *stream* defaults to
    stderr.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
