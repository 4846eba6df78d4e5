from __future__ import annotations

import logging

from attendance_engine import build_engine
from attendance_engine.common.logging_utils import LOG_FORMAT, ROOT_LOGGER_NAME, configure_logging, get_handler
from attendance_engine.config import EngineSettings, get_settings_module, load_settings
from attendance_engine.core.enums import Branch


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "attendance_engine.config.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "attendance_engine.config.testing"

    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "attendance_engine.config.development"


def test_testing_settings():
    settings = load_settings("attendance_engine.config.testing")

    assert settings.log_level == "DEBUG"
    assert settings.honor_configured_weights is False
    assert settings.default_branch == Branch.OFFICE


def test_build_engine_wires_settings_into_components():
    engine = build_engine(settings=EngineSettings(honor_configured_weights=True))
    config = engine.resolver.resolve({"weightOvertime": 0.5, "weightCommitment": 0.25, "weightAbsence": 0.25})

    assert engine.ranking.weights_for(config).overtime == 50


def test_configure_logging_installs_one_handler():
    logger = configure_logging("warning")
    configure_logging("warning")

    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.WARNING
    assert logger.handlers.count(get_handler()) == 1
    assert get_handler().formatter._fmt == LOG_FORMAT
