"""
Result objects for the pipeline stages.

Each stage (config load, credential enrichment, connection check) reports
its outcome as a value instead of raising, and ``main`` matches on these
once to decide what to print.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .db.db_config import DatabaseConfig


class ConfigLoadResult(BaseModel):
    """Outcome of reading and validating the database config file."""

    success: bool = Field(description="Whether the config was loaded")
    config: Optional[DatabaseConfig] = Field(default=None, description="Loaded config")
    error_message: Optional[str] = Field(default=None, description="IO or parser message")
    error_code: Optional[str] = Field(default=None, description="Error code if loading failed")

    @classmethod
    def success_result(cls, config: DatabaseConfig) -> "ConfigLoadResult":
        return cls(success=True, config=config)

    @classmethod
    def failure_result(
        cls, error_message: str, error_code: Optional[str] = None
    ) -> "ConfigLoadResult":
        return cls(success=False, error_message=error_message, error_code=error_code)


class EnrichmentOutcome(str, Enum):
    """Whether Vault credentials were applied to the config."""

    SUCCEEDED_WITH_CREDENTIALS = "succeeded_with_credentials"
    FAILED_UNCHANGED = "failed_unchanged"


class EnrichmentResult(BaseModel):
    """
    Outcome of requesting dynamic credentials.

    ``config`` is the same record that was passed in; on failure its
    username and password are exactly what they were before the request.
    """

    outcome: EnrichmentOutcome
    config: DatabaseConfig
    lease_id: Optional[str] = None
    lease_duration: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == EnrichmentOutcome.SUCCEEDED_WITH_CREDENTIALS


class ConnectionStatus(str, Enum):
    """Result of the single connection attempt."""

    CONNECTED = "connected"
    NOT_CONNECTED = "not_connected"
    ERROR = "error"


class ConnectionCheckResult(BaseModel):
    """Outcome of opening one database connection."""

    status: ConnectionStatus
    error_message: Optional[str] = None

    @property
    def connected(self) -> bool:
        return self.status == ConnectionStatus.CONNECTED
