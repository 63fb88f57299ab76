"""
Centralized configuration management for the connectivity check.

Configuration is read once at startup from an environment mapping so that
tests can substitute a fake environment:
- Vault endpoint (host, port, TLS policy, mount points)
- Logging
- Location of the database config file
- AppRole identifiers
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator

from .constants import (
    DEFAULT_APPROLE_MOUNT,
    DEFAULT_CONFIG_PATH,
    DEFAULT_DATABASE_MOUNT,
    DEFAULT_VAULT_HOST,
    DEFAULT_VAULT_PORT,
    EnvironmentVariable,
    LogLevel,
)


def _env_flag(value: Optional[str]) -> bool:
    return (value or "false").lower() == "true"


class VaultConfig(BaseModel):
    """Vault endpoint configuration."""

    host: str = Field(default=DEFAULT_VAULT_HOST, description="Vault server host")
    port: int = Field(default=DEFAULT_VAULT_PORT, description="Vault server port")
    tls_enabled: bool = Field(default=False, description="Use https and verify certificates")
    approle_mount: str = Field(
        default=DEFAULT_APPROLE_MOUNT, description="Mount path of the AppRole auth method"
    )
    database_mount: str = Field(
        default=DEFAULT_DATABASE_MOUNT, description="Mount path of the database secrets engine"
    )

    @property
    def base_url(self) -> str:
        scheme = "https" if self.tls_enabled else "http"
        return f"{scheme}://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "VaultConfig":
        """Create Vault configuration from an environment mapping."""
        return cls(
            host=environ.get(EnvironmentVariable.VAULT_HOST.value, DEFAULT_VAULT_HOST),
            port=environ.get(EnvironmentVariable.VAULT_PORT.value, DEFAULT_VAULT_PORT),
            tls_enabled=_env_flag(environ.get(EnvironmentVariable.VAULT_TLS_ENABLED.value)),
            database_mount=environ.get(
                EnvironmentVariable.VAULT_DATABASE_MOUNT.value, DEFAULT_DATABASE_MOUNT
            ),
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default=LogLevel.INFO.value, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )

    @field_validator("level")
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {level.value for level in LogLevel}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "LoggingConfig":
        """Create logging configuration from an environment mapping."""
        return cls(level=environ.get(EnvironmentVariable.LOG_LEVEL.value, LogLevel.INFO.value))


class AppRoleCredentials(BaseModel):
    """AppRole role and secret identifiers. Never logged."""

    role_id: Optional[SecretStr] = None
    secret_id: Optional[SecretStr] = None

    @property
    def is_missing(self) -> bool:
        """True when neither identifier is present."""
        return self.role_id is None and self.secret_id is None

    @property
    def is_partial(self) -> bool:
        """True when exactly one identifier is present."""
        return (self.role_id is None) != (self.secret_id is None)

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "AppRoleCredentials":
        """Read the identifiers; an empty string still counts as set."""
        return cls(
            role_id=environ.get(EnvironmentVariable.APPROLE_ROLE_ID.value),
            secret_id=environ.get(EnvironmentVariable.APPROLE_SECRET_ID.value),
        )


class AppConfig(BaseModel):
    """Main application configuration."""

    config_path: str = Field(
        default=DEFAULT_CONFIG_PATH, description="Path of the JSON database config file"
    )

    # Sub-configurations
    vault: VaultConfig = Field(default_factory=VaultConfig, description="Vault configuration")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Create configuration from environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            config_path=env.get(EnvironmentVariable.CONFIG_PATH.value, DEFAULT_CONFIG_PATH),
            vault=VaultConfig.from_env(env),
            logging=LoggingConfig.from_env(env),
        )


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
