"""
Shared test fixtures.

Provides a temporary config file, a fake environment, and helpers for
building fake Vault HTTP responses and database connections. No network
or database is needed.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest

from vault_db_check.config import reset_config
from vault_db_check.db import DatabaseConfig
from vault_db_check.utils import reset_logging


@pytest.fixture(autouse=True)
def reset_globals():
    """Isolate the global config and logger between tests."""
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


@pytest.fixture
def database_section() -> Dict[str, Any]:
    """The ``database`` object of a well-formed config file."""
    return {"port": 5432, "host": "db", "database": "app", "secret_role": "app-role"}


@pytest.fixture
def config_file(tmp_path, database_section):
    """Well-formed config.json in a temporary directory."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"database": database_section}), encoding="utf-8")
    return path


@pytest.fixture
def approle_env(config_file) -> Dict[str, str]:
    """Environment with both AppRole identifiers and the temporary config file."""
    return {
        "APPROLE_ROLE_ID": "role-123",
        "APPROLE_SECRET_ID": "secret-456",
        "DB_CHECK_CONFIG_PATH": str(config_file),
        "VAULT_HOST": "vault.test",
    }


@pytest.fixture
def database_config() -> DatabaseConfig:
    """Config as loaded from file, before credentials are added."""
    return DatabaseConfig(port=5432, host="db", database="app", secret_role="app-role")


@pytest.fixture
def vault_response():
    """Factory for fake ``requests.Response`` objects."""

    def _make(status_code: int = 200, json_body: Optional[Any] = None, reason: str = "OK"):
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        response.reason = reason
        if json_body is None:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.json.return_value = json_body
        return response

    return _make


@pytest.fixture
def open_connection():
    """Fake psycopg2 connection that reports itself open."""
    connection = Mock()
    connection.closed = 0
    return connection
