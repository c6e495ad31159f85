from __future__ import annotations

import logging

from typconv.main import resolve_log_level


def test_level_names_resolve() -> None:
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level(" Info ") == logging.INFO
    assert resolve_log_level("WARNING") == logging.WARNING


def test_non_level_names_fall_back_to_warning() -> None:
    assert resolve_log_level("basic_format") == logging.WARNING
    assert resolve_log_level("loud") == logging.WARNING
    assert resolve_log_level("") == logging.WARNING
