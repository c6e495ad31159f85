from __future__ import annotations

import json
import tempfile
from pathlib import Path

from typconv.settings import CONFIG_DIR_ENV, ConfigManager, UIConfig, get_config_dir


def test_missing_file_gives_defaults() -> None:
    with tempfile.TemporaryDirectory() as td:
        cfg = ConfigManager(config_dir=Path(td)).load()
        assert cfg == UIConfig()
        assert cfg.window_width == 320
        assert cfg.settings_height == 280


def test_partial_file_overrides_named_keys() -> None:
    with tempfile.TemporaryDirectory() as td:
        td = Path(td)
        (td / "config.json").write_text(json.dumps({"window_width": 400, "log_level": "DEBUG"}), encoding="utf-8")
        manager = ConfigManager(config_dir=td)
        manager.load()
        assert manager.config.window_width == 400
        assert manager.config.log_level == "DEBUG"
        assert manager.config.spacing == 15


def test_malformed_file_gives_defaults() -> None:
    with tempfile.TemporaryDirectory() as td:
        td = Path(td)
        (td / "config.json").write_text("{not json", encoding="utf-8")
        assert ConfigManager(config_dir=td).load() == UIConfig()
        (td / "config.json").write_text("[1, 2]", encoding="utf-8")
        assert ConfigManager(config_dir=td).load() == UIConfig()


def test_unknown_and_mistyped_keys_ignored() -> None:
    with tempfile.TemporaryDirectory() as td:
        td = Path(td)
        data = {"theme": "dark", "padding": "wide", "spacing": True, "button_height": 30}
        (td / "config.json").write_text(json.dumps(data), encoding="utf-8")
        cfg = ConfigManager(config_dir=td).load()
        assert cfg.padding == 12
        assert cfg.spacing == 15
        assert cfg.button_height == 30


def test_config_dir_env_override(monkeypatch) -> None:
    with tempfile.TemporaryDirectory() as td:
        monkeypatch.setenv(CONFIG_DIR_ENV, td)
        assert get_config_dir() == Path(td)


def test_permission_denied_gives_defaults(monkeypatch) -> None:
    def deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    with tempfile.TemporaryDirectory() as td:
        monkeypatch.setattr(Path, "open", deny)
        assert ConfigManager(config_dir=Path(td)).load() == UIConfig()


def test_config_path_is_directory_gives_defaults() -> None:
    with tempfile.TemporaryDirectory() as td:
        td = Path(td)
        (td / "config.json").mkdir()
        assert ConfigManager(config_dir=td).load() == UIConfig()
