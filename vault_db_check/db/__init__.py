"""Database configuration record and config file reader."""

from .db_config import DatabaseConfig, read_database_config

__all__ = ["DatabaseConfig", "read_database_config"]
