"""Runtime settings for serving gadgets."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "gadget.json"

_ENV_PREFIX = "WEBGADGETS_"
_ALLOWED_VIEWERS = {"pane", "dialog", "browser"}


@dataclass(slots=True)
class GadgetSettings:
    """Where and how gadgets are served.

    ``port`` 0 means "pick a free port"; ``theme`` is an alternative
    Bootstrap stylesheet URL.
    """

    host: str = "127.0.0.1"
    port: int = 0
    viewer: str = "pane"
    theme: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.viewer = self.viewer.strip().lower()
        if self.viewer not in _ALLOWED_VIEWERS:
            raise ValueError(
                f"Unsupported viewer '{self.viewer}'. Expected one of: {', '.join(sorted(_ALLOWED_VIEWERS))}."
            )
        if not 0 <= self.port <= 65535:
            raise ValueError(f"Port out of range: {self.port}")
        self.log_level = self.log_level.strip().upper()

    @classmethod
    def load(cls, path: Path | None = None) -> "GadgetSettings":
        """Load settings from a JSON file, then apply ``WEBGADGETS_*`` environment overrides."""

        config_path = path or _DEFAULT_CONFIG_PATH
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning("Unable to decode gadget config at %s: %s", config_path, exc)

        for key in ("host", "port", "viewer", "theme", "log_level"):
            env_value = os.environ.get(f"{_ENV_PREFIX}{key.upper()}")
            if env_value is not None:
                data[key] = env_value

        filtered: Dict[str, Any] = {}
        for key in ("host", "viewer", "theme", "log_level"):
            if data.get(key) is not None:
                filtered[key] = str(data[key])
        if data.get("port") is not None:
            try:
                filtered["port"] = int(data["port"])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Invalid port setting: {data['port']!r}") from exc

        return cls(**filtered)


def load_settings(path: Path | None = None) -> GadgetSettings:
    """Helper to load the gadget settings."""

    return GadgetSettings.load(path)


__all__ = ["GadgetSettings", "load_settings"]
