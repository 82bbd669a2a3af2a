"""Loguru-based logging configuration.

Human-readable logs go to stderr; an optional file sink receives JSON lines.
"""

import json
import sys

from loguru import logger

_configured = False


def _serialize(record) -> str:
    """Format record as a single JSON line.
    Returns a format template; we inject _json into record for output.
    """
    out = {
        "time": str(record["time"]),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }
    record["_json"] = json.dumps(out, default=str)
    return "{_json}\n"


def configure_logging(
    level: str = "INFO", log_file: str | None = None, *, force: bool = False
) -> None:
    """Configure loguru sinks.

    Idempotent: skips if already configured.
    Use force=True to reconfigure (e.g. in tests with a different log path).
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    # Remove default loguru handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )

    if log_file:
        logger.add(
            log_file,
            level=level,
            format=_serialize,
            encoding="utf-8",
            mode="a",
        )

