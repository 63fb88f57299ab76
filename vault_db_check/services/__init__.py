"""Pipeline stages: load config, enrich with credentials, verify connection."""

from .config_service import load_database_config
from .connection_service import verify_connection
from .credential_service import enrich_with_secrets

__all__ = ["enrich_with_secrets", "load_database_config", "verify_connection"]
