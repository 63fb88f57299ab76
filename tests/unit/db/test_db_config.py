"""Tests for DatabaseConfig and the config file reader."""

import json

import pytest
from pydantic import ValidationError

from vault_db_check.db import DatabaseConfig, read_database_config
from vault_db_check.exceptions import ConfigurationError, ErrorCode


class TestDatabaseConfig:
    """Test the DatabaseConfig record."""

    def test_credentials_start_empty(self, database_config):
        assert database_config.username == ""
        assert database_config.password == ""
        assert database_config.has_credentials() is False

    def test_connection_string(self, database_config):
        database_config.username = "u1"
        database_config.password = "p1"

        assert (
            database_config.get_connection_string()
            == "host=db port=5432 user=u1 password=p1 dbname=app"
        )

    def test_connection_string_without_credentials(self, database_config):
        assert (
            database_config.get_connection_string()
            == "host=db port=5432 user= password= dbname=app"
        )

    def test_repr_masks_password(self, database_config):
        database_config.password = "super-secret"

        assert "super-secret" not in repr(database_config)
        assert "super-secret" not in str(database_config)
        assert "password='***'" in repr(database_config)

    def test_port_is_not_coerced(self):
        with pytest.raises(ValidationError):
            DatabaseConfig(port="5432", host="db", database="app", secret_role="r")

    def test_assignment_is_validated(self, database_config):
        with pytest.raises(ValidationError):
            database_config.username = 42


class TestReadDatabaseConfig:
    """Test reading the JSON config file."""

    def test_reads_database_section(self, config_file):
        config = read_database_config(config_file)

        assert config.port == 5432
        assert config.host == "db"
        assert config.database == "app"
        assert config.secret_role == "app-role"
        assert config.username == ""
        assert config.password == ""

    def test_extra_keys_are_ignored(self, tmp_path, database_section):
        path = tmp_path / "config.json"
        database_section["sslmode"] = "require"
        path.write_text(
            json.dumps({"database": database_section, "logging": {"level": "debug"}}),
            encoding="utf-8",
        )

        config = read_database_config(path)

        assert config.host == "db"
        assert not hasattr(config, "sslmode")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            read_database_config(tmp_path / "missing.json")

        assert exc_info.value.error_code == ErrorCode.CONFIGURATION_ERROR
        assert "missing.json" in exc_info.value.message

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"database": {"port": 5432,', encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            read_database_config(path)

        assert exc_info.value.error_code == ErrorCode.INVALID_FORMAT
        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    @pytest.mark.parametrize("payload", [{"databases": {}}, [], {"database": "postgres"}])
    def test_missing_database_section(self, tmp_path, payload):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            read_database_config(path)

        assert exc_info.value.error_code == ErrorCode.MISSING_REQUIRED

    @pytest.mark.parametrize("missing_key", ["port", "host", "database", "secret_role"])
    def test_missing_required_key(self, tmp_path, database_section, missing_key):
        del database_section[missing_key]
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"database": database_section}), encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            read_database_config(path)

        assert exc_info.value.error_code == ErrorCode.VALIDATION_FAILED
        assert missing_key in exc_info.value.message

    def test_mistyped_port(self, tmp_path, database_section):
        database_section["port"] = "5432"
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"database": database_section}), encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            read_database_config(path)

        assert exc_info.value.error_code == ErrorCode.VALIDATION_FAILED

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"database": {"host": "\xff"}}')

        with pytest.raises(ConfigurationError) as exc_info:
            read_database_config(path)

        assert exc_info.value.error_code == ErrorCode.INVALID_FORMAT
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)
        assert "can't decode byte 0xff" in exc_info.value.message
