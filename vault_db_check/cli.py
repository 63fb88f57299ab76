"""
Entry point for the connectivity check.

Runs once, top to bottom:

1. Read the AppRole identifiers; exit 255 if both are missing. Invalid
   settings (log level, Vault port) are reported after this check.
2. Log in to Vault; stop if not authenticated.
3. Load the database config file.
4. Overlay dynamic credentials from Vault.
5. Open one database connection and report the outcome.

Console lines go to stdout, logs to stderr.
"""

import os
import sys
from typing import Callable, Mapping, Optional

import psycopg2
from pydantic import ValidationError as PydanticValidationError

from .config import AppConfig, AppRoleCredentials, VaultConfig, set_config
from .constants import ConsoleMessage, ExitCode
from .exceptions import ConfigurationError, ErrorCode, MissingAppRoleCredentialsError
from .results import ConnectionStatus
from .services import enrich_with_secrets, load_database_config, verify_connection
from .services.connection_service import Connect
from .utils import configure_logging
from .vault import VaultClient, create_vault_client, load_approle_credentials

VaultClientFactory = Callable[[VaultConfig, AppRoleCredentials], VaultClient]


def main(
    environ: Optional[Mapping[str, str]] = None,
    vault_client_factory: VaultClientFactory = create_vault_client,
    connect: Connect = psycopg2.connect,
) -> int:
    """
    Run the check and return the process exit code.

    Args:
        environ: Environment mapping (default: os.environ)
        vault_client_factory: Builds and logs in the Vault client
        connect: Database driver entry point

    Returns:
        0 unless both AppRole identifiers are missing
    """
    env = os.environ if environ is None else environ

    # Fall back to defaults so logging and the AppRole gate still run
    try:
        app_config = AppConfig.from_env(env)
        settings_error = None
    except PydanticValidationError as e:
        app_config = AppConfig()
        settings_error = e
    set_config(app_config)
    logger = configure_logging("cli")

    try:
        credentials = load_approle_credentials(env)
    except MissingAppRoleCredentialsError as e:
        print(e.message)
        return ExitCode.MISSING_APPROLE_CREDENTIALS

    if settings_error is not None:
        error = ConfigurationError(
            str(settings_error), error_code=ErrorCode.VALIDATION_FAILED, cause=settings_error
        )
        print(error.message)
        return ExitCode.SUCCESS

    vault_client = vault_client_factory(app_config.vault, credentials)
    if not vault_client.is_authenticated():
        print(ConsoleMessage.VAULT_AUTH_FAILED.value)
        return ExitCode.SUCCESS

    loaded = load_database_config(app_config.config_path)
    if not loaded.success:
        print(loaded.error_message)
        return ExitCode.SUCCESS

    enriched = enrich_with_secrets(loaded.config, vault_client)
    if not enriched.config.has_credentials():
        logger.warning(
            "Database credentials incomplete, connecting anyway",
            extra={"secret_role": enriched.config.secret_role},
        )

    checked = verify_connection(enriched.config, connect=connect)
    if checked.status == ConnectionStatus.CONNECTED:
        print(ConsoleMessage.CONNECTED.value)
    elif checked.status == ConnectionStatus.NOT_CONNECTED:
        print(ConsoleMessage.NOT_CONNECTED.value)
    else:
        print(checked.error_message)

    return ExitCode.SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
