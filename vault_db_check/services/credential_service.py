"""
Credential enrichment stage.

Requests dynamic credentials for the config's ``secret_role`` and writes the
returned username and password onto the config. Any failure leaves the
config untouched and is reported through the result, not raised.
"""

from typing import Any, Dict, Tuple

from ..db.db_config import DatabaseConfig
from ..exceptions import ErrorCode, VaultError
from ..results import EnrichmentOutcome, EnrichmentResult
from ..utils import get_logger
from ..vault.client import VaultClient


def _extract_credentials(response: Dict[str, Any], role: str) -> Tuple[str, str]:
    data = response.get("data")
    if not isinstance(data, dict):
        raise VaultError(
            f"Credential response for role '{role}' has no data",
            error_code=ErrorCode.MISSING_REQUIRED,
            role=role,
        )

    username = data.get("username")
    password = data.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        raise VaultError(
            f"Credential response for role '{role}' lacks username or password",
            error_code=ErrorCode.MISSING_REQUIRED,
            role=role,
        )
    return username, password


def enrich_with_secrets(config: DatabaseConfig, vault_client: VaultClient) -> EnrichmentResult:
    """
    Overlay Vault-issued credentials onto the database config.

    Args:
        config: Config loaded from file; updated in place on success
        vault_client: Authenticated Vault client

    Returns:
        EnrichmentResult carrying the (possibly updated) config
    """
    logger = get_logger()
    role = config.secret_role

    try:
        response = vault_client.generate_database_credentials(role)
        username, password = _extract_credentials(response, role)
    except VaultError as e:
        logger.warning(
            "Continuing without dynamic credentials",
            extra={"secret_role": role, "error_id": e.error_id},
        )
        return EnrichmentResult(
            outcome=EnrichmentOutcome.FAILED_UNCHANGED,
            config=config,
            error_message=e.message,
        )

    config.username = username
    config.password = password

    lease_id = response.get("lease_id")
    lease_duration = response.get("lease_duration")
    result = EnrichmentResult(
        outcome=EnrichmentOutcome.SUCCEEDED_WITH_CREDENTIALS,
        config=config,
        lease_id=lease_id if isinstance(lease_id, str) else None,
        lease_duration=lease_duration if isinstance(lease_duration, int) else None,
    )
    logger.info(
        "Issued dynamic database credentials",
        extra={"secret_role": role, "db_user": username, "lease_duration": result.lease_duration},
    )
    return result
