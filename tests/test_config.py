"""
Tests for environment overrides and logging setup in graphwalk.config.
"""

import importlib
import logging

import pytest

import graphwalk.config as config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under patched env, restoring the real values afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


@pytest.fixture
def root_level():
    """Restore the root logger level after a test changes it."""
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


class TestEnvironmentOverrides:
    """Test GRAPHWALK_* variables."""

    def test_defaults(self, monkeypatch, reload_config):
        """Without overrides the documented defaults apply."""
        for name in (
            "GRAPHWALK_MAX_LIST_VERTICES",
            "GRAPHWALK_QUEUE_CAPACITY",
            "GRAPHWALK_MAX_MATRIX_VERTICES",
            "GRAPHWALK_STACK_CAPACITY",
            "GRAPHWALK_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        reload_config()
        assert config.MAX_LIST_VERTICES == 40
        assert config.DEFAULT_QUEUE_CAPACITY == 40
        assert config.MAX_MATRIX_VERTICES == 5
        assert config.DEFAULT_STACK_CAPACITY == 5
        assert config.LOG_LEVEL == "INFO"

    def test_override(self, monkeypatch, reload_config):
        """A variable replaces its default, and derived defaults follow."""
        monkeypatch.delenv("GRAPHWALK_STACK_CAPACITY", raising=False)
        monkeypatch.setenv("GRAPHWALK_MAX_MATRIX_VERTICES", "8")
        monkeypatch.setenv("GRAPHWALK_QUEUE_CAPACITY", "12")
        reload_config()
        assert config.MAX_MATRIX_VERTICES == 8
        assert config.DEFAULT_STACK_CAPACITY == 8
        assert config.DEFAULT_QUEUE_CAPACITY == 12

    def test_empty_value_uses_default(self, monkeypatch, reload_config):
        """An empty variable counts as unset."""
        monkeypatch.setenv("GRAPHWALK_MAX_LIST_VERTICES", "")
        monkeypatch.delenv("GRAPHWALK_QUEUE_CAPACITY", raising=False)
        reload_config()
        assert config.MAX_LIST_VERTICES == 40

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_non_positive_rejected(self, monkeypatch, reload_config, value):
        """Zero and negative capacities fail at import."""
        monkeypatch.setenv("GRAPHWALK_STACK_CAPACITY", value)
        with pytest.raises(ValueError, match="GRAPHWALK_STACK_CAPACITY must be positive"):
            reload_config()

    def test_non_numeric_rejected(self, monkeypatch, reload_config):
        """Non-numeric capacities fail at import."""
        monkeypatch.setenv("GRAPHWALK_MAX_LIST_VERTICES", "lots")
        with pytest.raises(ValueError):
            reload_config()


class TestConfigureLogging:
    """Test the level chosen by configure_logging()."""

    def test_verbose_is_debug(self, root_level):
        """verbose=True forces DEBUG on the root logger."""
        assert config.configure_logging(verbose=True) == logging.DEBUG
        assert root_level.level == logging.DEBUG

    def test_level_from_environment(self, monkeypatch, reload_config, root_level):
        """GRAPHWALK_LOG_LEVEL sets the non-verbose level."""
        monkeypatch.setenv("GRAPHWALK_LOG_LEVEL", "warning")
        reload_config()
        assert config.configure_logging() == logging.WARNING
        assert root_level.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, monkeypatch, reload_config, root_level):
        """An unrecognized level name means INFO."""
        monkeypatch.setenv("GRAPHWALK_LOG_LEVEL", "chatty")
        reload_config()
        assert config.configure_logging() == logging.INFO
