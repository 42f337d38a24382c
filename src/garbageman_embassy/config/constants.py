"""
Protocol constants shared between the package and the host.

Values here are fixed by the host's contract and should only change together
with the host SDK version.
"""
from enum import Enum


class ProcedureName(str, Enum):
    """Hook names the host invokes on the package."""
    DESCRIBE_SCHEMA = "describeSchema"
    GET_CONFIG = "getConfig"
    SET_CONFIG = "setConfig"
    PROPERTIES = "properties"
    HEALTH = "health"
    MIGRATION = "migration"


# Placeholder rendered in place of any sensitive value
REDACTED_PLACEHOLDER = "********"

# Advisory signal returned after a successful configuration change
RESTART_SIGNAL = "SIGTERM"

# Format version of the properties payload understood by the host
PROPERTIES_FORMAT_VERSION = 2

# Default budget for a single health probe, in seconds
DEFAULT_HEALTH_TIMEOUT_SECONDS = 5.0

# Characters used for generated convenience passwords
PASSWORD_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
