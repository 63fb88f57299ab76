"""
Constants and enums for the Vault database connectivity check.

This module centralizes the environment variable names, default endpoint
values and fixed console messages used throughout the package.
"""

from enum import Enum, IntEnum

DEFAULT_CONFIG_PATH = "config.json"
DEFAULT_VAULT_HOST = "dynamic-secrets-vault"
DEFAULT_VAULT_PORT = 8200
DEFAULT_APPROLE_MOUNT = "approle"
DEFAULT_DATABASE_MOUNT = "database"


class LogLevel(str, Enum):
    """Standard logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvironmentVariable(str, Enum):
    """Standard environment variable names."""

    APPROLE_ROLE_ID = "APPROLE_ROLE_ID"
    APPROLE_SECRET_ID = "APPROLE_SECRET_ID"
    VAULT_HOST = "VAULT_HOST"
    VAULT_PORT = "VAULT_PORT"
    VAULT_TLS_ENABLED = "VAULT_TLS_ENABLED"
    VAULT_DATABASE_MOUNT = "VAULT_DATABASE_MOUNT"
    CONFIG_PATH = "DB_CHECK_CONFIG_PATH"
    LOG_LEVEL = "LOG_LEVEL"


class ConsoleMessage(str, Enum):
    """Fixed lines printed to stdout."""

    MISSING_APPROLE = (
        "APPROLE_ROLE_ID and APPROLE_SECRET_ID environment variables must be set"
    )
    VAULT_AUTH_FAILED = "Unable to authenticate to Vault"
    CONNECTED = "Connected"
    NOT_CONNECTED = "Could not connect"


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    # exit(-1) as seen by the shell
    MISSING_APPROLE_CREDENTIALS = 255
