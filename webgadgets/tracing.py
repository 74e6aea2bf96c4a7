"""Structured logging helpers for rendering and serving gadgets."""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

__all__ = ["log_event", "safe_json", "trace"]


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into a JSON-serialisable structure."""

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (list, tuple, set, frozenset)):
        return [safe_json(item) for item in value]

    if isinstance(value, dict):
        return {str(key): safe_json(val) for key, val in value.items()}

    return repr(value)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc_info: bool | BaseException | None = None,
    **fields: Any,
) -> None:
    """Emit a structured log line encoded as JSON."""

    if not logger.isEnabledFor(level):
        return

    payload: Dict[str, Any] = {"event": event}
    payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})

    message = json.dumps(payload, ensure_ascii=False, sort_keys=True)
    logger.log(level, message, exc_info=exc_info)


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[None]:
    """Log ``<name>.start`` / ``<name>.end`` events with the elapsed time."""

    logger = logger or logging.getLogger("webgadgets.trace")
    start_time = time.perf_counter()
    log_event(logger, logging.DEBUG, f"{name}.start", **fields)
    try:
        yield
    except Exception as exc:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log_event(
            logger,
            logging.ERROR,
            f"{name}.error",
            exc_info=True,
            duration_ms=duration_ms,
            error=repr(exc),
            **fields,
        )
        raise
    duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
    log_event(logger, logging.DEBUG, f"{name}.end", duration_ms=duration_ms, **fields)
