"""
Minimal Vault HTTP client.

Covers the two calls the connectivity check needs: AppRole login and
generation of dynamic database credentials. Leases are neither renewed
nor revoked.
"""

from typing import Any, Dict, Optional

import requests

from ..config import AppRoleCredentials, VaultConfig
from ..exceptions import ErrorCode, VaultError
from ..utils import get_logger
from .approle import AppRoleStrategy


def _error_detail(response: requests.Response) -> str:
    """Vault reports failures as {"errors": [...]}."""
    try:
        errors = response.json().get("errors")
    except ValueError:
        errors = None
    if errors:
        return "; ".join(str(e) for e in errors)
    return response.reason or f"HTTP {response.status_code}"


class VaultClient:
    """
    Vault client authenticated through an AppRole strategy.

    A failed login does not raise; ``is_authenticated()`` stays false and
    the caller decides what to do.
    """

    def __init__(self, config: VaultConfig, strategy: AppRoleStrategy):
        """Initialize with configuration."""
        self.config = config
        self.strategy = strategy
        self.base_url = config.base_url
        self.verify_ssl = config.tls_enabled
        self._token: Optional[str] = None

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers."""
        headers = {"Accept": "application/json"}
        if self._token:
            headers["X-Vault-Token"] = self._token
        return headers

    def authenticate(self) -> bool:
        """
        Log in with the AppRole strategy.

        Returns:
            True if Vault issued a client token
        """
        url = f"{self.base_url}{self.strategy.login_path}"
        logger = get_logger()

        try:
            response = requests.post(
                url,
                headers=self._get_headers(),
                json=self.strategy.login_payload(),
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            logger.warning(
                "Vault login request failed",
                extra={"vault_url": self.base_url, "error_type": type(e).__name__},
            )
            self._token = None
            return False

        if not response.ok:
            logger.warning(
                "Vault rejected AppRole login",
                extra={"vault_url": self.base_url, "status_code": response.status_code},
            )
            self._token = None
            return False

        try:
            token = (response.json().get("auth") or {}).get("client_token")
        except (ValueError, AttributeError):
            token = None

        if not token:
            logger.warning(
                "Vault login response has no client token", extra={"vault_url": self.base_url}
            )
            self._token = None
            return False

        self._token = token
        logger.info("Authenticated to Vault", extra={"vault_url": self.base_url})
        return True

    def is_authenticated(self) -> bool:
        return self._token is not None

    def generate_database_credentials(self, role: str) -> Dict[str, Any]:
        """
        Request dynamic database credentials for a role.

        Args:
            role: Name of the role configured on the database secrets engine

        Returns:
            The parsed response body; credentials are under ``data``

        Raises:
            VaultError: If the client is not authenticated, the request fails,
                or the response is not a JSON object
        """
        if not self.is_authenticated():
            raise VaultError(
                "Vault client is not authenticated",
                error_code=ErrorCode.AUTHENTICATION_FAILED,
                role=role,
            )

        url = f"{self.base_url}/v1/{self.config.database_mount}/creds/{role}"

        try:
            response = requests.get(url, headers=self._get_headers(), verify=self.verify_ssl)
        except requests.RequestException as e:
            raise VaultError(
                f"Credential request for role '{role}' failed: {e}", role=role, cause=e
            ) from e

        if not response.ok:
            raise VaultError(
                f"Credential request for role '{role}' failed: {_error_detail(response)}",
                status_code=response.status_code,
                role=role,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise VaultError(
                f"Credential response for role '{role}' is not JSON",
                error_code=ErrorCode.INVALID_FORMAT,
                role=role,
                cause=e,
            ) from e

        if not isinstance(body, dict):
            raise VaultError(
                f"Credential response for role '{role}' is not an object",
                error_code=ErrorCode.INVALID_FORMAT,
                role=role,
            )

        return body

    def __repr__(self) -> str:
        return (
            f"VaultClient(base_url='{self.base_url}', "
            f"authenticated={self.is_authenticated()})"
        )


def create_vault_client(config: VaultConfig, credentials: AppRoleCredentials) -> VaultClient:
    """Build a client for the configured endpoint and attempt the AppRole login."""
    client = VaultClient(config, AppRoleStrategy(credentials, mount=config.approle_mount))
    client.authenticate()
    return client
