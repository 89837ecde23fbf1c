"""Tests for configuration and initialization."""

from __future__ import annotations

import logging

import pytest

from switchyard import SwitchyardConfig, get_config, init
from switchyard._config import _detect_json_logs, _detect_log_level


class TestSwitchyardConfig:
    """Tests for the SwitchyardConfig dataclass."""

    def test_default_values(self) -> None:
        config = SwitchyardConfig()
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = SwitchyardConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


@pytest.mark.usefixtures('reset_config')
class TestEnvDetection:
    """Tests for reading settings from the environment."""

    def test_log_level_unset(self) -> None:
        assert _detect_log_level() is None

    def test_log_level_normalized(self, monkeypatch) -> None:
        monkeypatch.setenv('SWITCHYARD_LOG_LEVEL', ' debug ')
        assert _detect_log_level() == 'DEBUG'

    def test_log_format_console(self, monkeypatch) -> None:
        monkeypatch.setenv('SWITCHYARD_LOG_FORMAT', 'console')
        assert _detect_json_logs() is False

    def test_log_format_defaults_to_json(self) -> None:
        assert _detect_json_logs() is True

    def test_unknown_log_format_warns(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv('SWITCHYARD_LOG_FORMAT', 'xml')
        with caplog.at_level(logging.WARNING):
            assert _detect_json_logs() is True
        assert 'SWITCHYARD_LOG_FORMAT' in caplog.text


@pytest.mark.usefixtures('reset_config', 'restore_logging')
class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_defaults(self) -> None:
        config = init()
        assert config == SwitchyardConfig()
        assert get_config() is config

    def test_init_explicit_values(self) -> None:
        config = init(log_level='DEBUG', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert logging.getLogger().level == logging.DEBUG

    def test_init_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv('SWITCHYARD_LOG_LEVEL', 'warning')
        monkeypatch.setenv('SWITCHYARD_LOG_FORMAT', 'console')
        config = init()
        assert config.log_level == 'WARNING'
        assert config.json_logs is False

    def test_explicit_overrides_environment(self, monkeypatch) -> None:
        monkeypatch.setenv('SWITCHYARD_LOG_LEVEL', 'warning')
        assert init(log_level='ERROR').log_level == 'ERROR'
