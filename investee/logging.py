"""Logging setup for investee.

Logs go to stderr so command line output on stdout stays parseable JSON.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from investee.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")

# Attributes passed through ``extra=`` that the JSON formatter emits
CONTEXT_FIELDS = ("operation", "property_id", "deal_id", "product_type")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger with a single console handler.

    Parameters
    ----------
    level : str
        Log level name. Unknown names fall back to INFO.
    format_type : str
        ``"standard"`` for human-readable lines or ``"json"`` for one JSON
        object per line.
    stream : TextIO | None
        Output stream, stderr when omitted.

    Raises
    ------
    ConfigurationError
        If ``format_type`` is not a known format.
    """
    if format_type not in LOG_FORMATS:
        raise ConfigurationError(f"Unknown log format {format_type!r}")

    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("investee").setLevel(log_level)
    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with lending context fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                data[name] = getattr(record, name)
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)
