from __future__ import annotations

"""TypConv application entrypoint."""

import logging
import sys
from PyQt5.QtWidgets import QApplication

from .settings import ConfigManager
from .state import FormState
from .ui import ConversionSettingsWindow


def resolve_log_level(name: str) -> int:
    """Map a configured level name to a logging level, defaulting to WARNING."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main() -> int:
    app = QApplication(sys.argv)
    manager = ConfigManager()
    config = manager.load()
    logging.basicConfig(
        level=resolve_log_level(config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    win = ConversionSettingsWindow(config, FormState())
    win.show()
    return app.exec_()


if __name__ == "__main__":
    raise SystemExit(main())
