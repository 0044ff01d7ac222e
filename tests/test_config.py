"""Unit tests for the config module.

WHY: The log level is the only environment-driven setting; a typo in the
variable name would silently ignore the user's choice.

HOW: Sets the environment with monkeypatch and reloads the module, then
reloads it again afterwards so other tests see the defaults.
"""

import importlib

import pytest

from framburdur import config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestLogLevel:

    def test_default_is_warning(self, monkeypatch, reload_config):
        monkeypatch.delenv("FRAMBURDUR_LOG_LEVEL", raising=False)
        assert reload_config().LOG_LEVEL == "WARNING"

    def test_environment_override_is_uppercased(self, monkeypatch, reload_config):
        monkeypatch.setenv("FRAMBURDUR_LOG_LEVEL", "debug")
        assert reload_config().LOG_LEVEL == "DEBUG"
