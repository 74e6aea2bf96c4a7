"""Logging setup for gadget applications and the command line."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union


_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Translate ``"debug"``/``"INFO"``/``10`` into a numeric logging level."""

    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[logging.Handler] = None,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Level name or number applied to the root logger.
    stream:
        Optional handler. When omitted a handler writing to ``sys.stderr`` is
        used so that rendered HTML written to stdout stays clean.
    """

    root_logger = logging.getLogger()
    handler: logging.Handler = stream if stream is not None else logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # Repeated calls (tests, run_gadget after CLI setup) must not duplicate lines.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(resolve_level(level))
    root_logger.addHandler(handler)


__all__ = ["configure_logging", "resolve_level"]
