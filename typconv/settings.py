from __future__ import annotations

"""Layout configuration for TypConv.

Loads optional JSON configuration from a user-scoped configuration directory,
platform-appropriate for Windows, macOS, and Linux. Form values are never
stored here; the application only reads this file.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)

APP_NAME = "TypConv"
CONFIG_DIR_ENV = "TYPCONV_CONFIG_DIR"


def get_config_dir() -> Path:
    """Return the platform-appropriate configuration directory for the app."""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_NAME
    if sys_platform() == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    # Linux and others
    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else (Path.home() / ".config")
    return base / APP_NAME


def sys_platform() -> str:
    # Isolated for easier testing/mocking
    return sys.platform


@dataclass
class UIConfig:
    """Window geometry and logging options."""

    window_width: int = 320
    settings_height: int = 280
    button_height: int = 20
    padding: int = 12
    spacing: int = 15
    field_width: int = 280
    password_width: int = 150
    window_title: str = APP_NAME
    log_level: str = "WARNING"


class ConfigManager:
    """Reads config.json under the app config dir."""

    def __init__(self, filename: str = "config.json", config_dir: Optional[Path] = None) -> None:
        self.config_dir = config_dir if config_dir is not None else get_config_dir()
        self.path = self.config_dir / filename
        self._config = UIConfig()

    @property
    def config(self) -> UIConfig:
        return self._config

    def load(self) -> UIConfig:
        self._config = UIConfig()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return self._config
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", self.path, exc)
            return self._config
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level must be an object", self.path)
            return self._config
        self._config = UIConfig(**self._known_values(data))
        return self._config

    def _known_values(self, data: Dict[str, Any]) -> Dict[str, Any]:
        defaults = UIConfig()
        known: Dict[str, Any] = {}
        types = {f.name: type(getattr(defaults, f.name)) for f in fields(UIConfig)}
        for key, value in data.items():
            expected = types.get(key)
            if expected is None:
                logger.debug("Ignoring unknown config key %r", key)
                continue
            # bool is an int subclass; don't let true/false stand in for sizes
            if isinstance(value, bool) or not isinstance(value, expected):
                logger.warning("Config key %r has invalid value %r; using default", key, value)
                continue
            known[key] = value
        return known
