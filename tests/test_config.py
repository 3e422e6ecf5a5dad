"""
Tests for environment configuration
"""

import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under patched env, then restore the original module state"""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_service_port_from_env(monkeypatch, reload_config):
    monkeypatch.setenv("SERVICE_PORT", "8081")

    assert reload_config().SERVICE_PORT == 8081


def test_invalid_service_port_raises(monkeypatch, reload_config):
    monkeypatch.setenv("SERVICE_PORT", "not-a-port")

    with pytest.raises(ValueError, match="SERVICE_PORT must be an integer, got 'not-a-port'"):
        reload_config()


def test_log_level_is_upper_cased(monkeypatch, reload_config):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert reload_config().LOG_LEVEL == "DEBUG"
