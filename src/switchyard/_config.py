"""Library configuration: SwitchyardConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from switchyard._logging import configure_logging

__all__ = [
    'SwitchyardConfig',
    'get_config',
    'init',
]

_LOG_FORMATS = ('json', 'console')


@dataclass(frozen=True)
class SwitchyardConfig:
    """Configuration for switchyard's logging.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON when True, human-readable console output when False.
    """

    log_level: str | None = None
    json_logs: bool = True


# Set by init()
_config: SwitchyardConfig | None = None


def _detect_log_level() -> str | None:
    """Read SWITCHYARD_LOG_LEVEL; empty or unset means no level."""
    level = os.environ.get('SWITCHYARD_LOG_LEVEL', '').strip().upper()
    return level or None


def _detect_json_logs() -> bool:
    """Read SWITCHYARD_LOG_FORMAT ("json" or "console"); defaults to json."""
    log_format = os.environ.get('SWITCHYARD_LOG_FORMAT', '').strip().lower()
    if log_format and log_format not in _LOG_FORMATS:
        logging.warning("Unknown SWITCHYARD_LOG_FORMAT value '%s', defaulting to json", log_format)
    return log_format != 'console'


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
) -> SwitchyardConfig:
    """Initialize switchyard's configuration.

    Unset arguments are read from the environment
    (SWITCHYARD_LOG_LEVEL, SWITCHYARD_LOG_FORMAT).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from env, else silent.
        json_logs: JSON (True) or console (False) output. None = from env.

    Returns:
        The SwitchyardConfig that was set.

    Example:
        ```python
        from switchyard import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = SwitchyardConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> SwitchyardConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'switchyard not initialized. Call switchyard.init() first.'
        raise RuntimeError(msg)
    return _config
