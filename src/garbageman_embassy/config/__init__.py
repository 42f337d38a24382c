"""Configuration module for garbageman-embassy.

Runtime settings, logging setup, and the protocol constants fixed by the host.
"""

from .constants import (
    ProcedureName,
    REDACTED_PLACEHOLDER,
    RESTART_SIGNAL,
    PROPERTIES_FORMAT_VERSION,
    DEFAULT_HEALTH_TIMEOUT_SECONDS,
    PASSWORD_ALPHABET,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

from .settings import (
    EmbassySettings,
    get_settings,
)

__all__ = [
    # Constants
    "ProcedureName",
    "REDACTED_PLACEHOLDER",
    "RESTART_SIGNAL",
    "PROPERTIES_FORMAT_VERSION",
    "DEFAULT_HEALTH_TIMEOUT_SECONDS",
    "PASSWORD_ALPHABET",

    # Logging
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "EmbassySettings",
    "get_settings",
]
