"""Pytest configuration and fixtures for coloursum tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees coloursum records.

    The root "coloursum" logger is created with propagate=False in
    production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("coloursum"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the user's settings, logs and terminal."""
    monkeypatch.setenv("COLOURSUM_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("COLOURSUM_LOG_DIR", str(tmp_path / "logs"))
    for name in ("NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TERM"):
        monkeypatch.delenv(name, raising=False)
