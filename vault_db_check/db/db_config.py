"""
Database connection parameters and the JSON config file they come from.

The file holds host, port, database name and the Vault role to request
credentials for. Username and password are filled in later from Vault.
"""

import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError, ErrorCode
from ..utils import get_logger


class DatabaseConfig(BaseModel):
    port: int
    host: str
    database: str
    secret_role: str
    username: str = ""
    password: str = ""

    # No coercion: "5432" is not a port.
    model_config = ConfigDict(strict=True, validate_assignment=True)

    def get_connection_string(self) -> str:
        """libpq key/value connection string."""
        return (
            f"host={self.host} "
            f"port={self.port} "
            f"user={self.username} "
            f"password={self.password} "
            f"dbname={self.database}"
        )

    def has_credentials(self) -> bool:
        return bool(self.username) and bool(self.password)

    def __repr__(self) -> str:
        """String representation with masked password for security."""
        return (
            f"DatabaseConfig("
            f"host='{self.host}', "
            f"port={self.port}, "
            f"database='{self.database}', "
            f"secret_role='{self.secret_role}', "
            f"username='{self.username}', "
            f"password='***')"
        )

    __str__ = __repr__


def read_database_config(path: Union[str, Path]) -> DatabaseConfig:
    """
    Read the ``database`` section of a JSON config file.

    Args:
        path: Location of the config file

    Returns:
        DatabaseConfig without credentials

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON, or
            its ``database`` section is missing or invalid
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(str(e), path=str(path), cause=e) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            str(e), error_code=ErrorCode.INVALID_FORMAT, path=str(path), cause=e
        ) from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            str(e), error_code=ErrorCode.INVALID_FORMAT, path=str(path), cause=e
        ) from e

    if not isinstance(payload, dict) or not isinstance(payload.get("database"), dict):
        raise ConfigurationError(
            f"{path}: missing 'database' section",
            error_code=ErrorCode.MISSING_REQUIRED,
            path=str(path),
        )

    try:
        config = DatabaseConfig.model_validate(payload["database"])
    except PydanticValidationError as e:
        raise ConfigurationError(
            str(e), error_code=ErrorCode.VALIDATION_FAILED, path=str(path), cause=e
        ) from e

    get_logger().debug(
        "Loaded database config",
        extra={"path": str(path), "db_host": config.host, "secret_role": config.secret_role},
    )
    return config
