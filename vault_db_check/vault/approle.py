"""
AppRole machine authentication.

The role and secret identifiers come from the environment. Only the case
where both are missing is treated as fatal; with exactly one present the
login is still attempted and Vault decides.
"""

import os
from typing import Any, Dict, Mapping, Optional

from ..config import AppRoleCredentials
from ..constants import DEFAULT_APPROLE_MOUNT, ConsoleMessage, EnvironmentVariable
from ..exceptions import MissingAppRoleCredentialsError
from ..utils import get_logger


class AppRoleStrategy:
    """Builds the AppRole login request."""

    def __init__(self, credentials: AppRoleCredentials, mount: str = DEFAULT_APPROLE_MOUNT):
        self.credentials = credentials
        self.mount = mount

    @property
    def login_path(self) -> str:
        return f"/v1/auth/{self.mount}/login"

    def login_payload(self) -> Dict[str, Any]:
        """Request body; an absent identifier is sent as null."""
        role_id = self.credentials.role_id
        secret_id = self.credentials.secret_id
        return {
            "role_id": role_id.get_secret_value() if role_id is not None else None,
            "secret_id": secret_id.get_secret_value() if secret_id is not None else None,
        }

    def __repr__(self) -> str:
        return f"AppRoleStrategy(mount='{self.mount}')"


def load_approle_credentials(
    environ: Optional[Mapping[str, str]] = None,
) -> AppRoleCredentials:
    """
    Read the AppRole identifiers from the environment.

    Raises:
        MissingAppRoleCredentialsError: If neither identifier is set
    """
    env = os.environ if environ is None else environ
    credentials = AppRoleCredentials.from_env(env)

    if credentials.is_missing:
        raise MissingAppRoleCredentialsError(ConsoleMessage.MISSING_APPROLE.value)

    if credentials.is_partial:
        missing = (
            EnvironmentVariable.APPROLE_ROLE_ID
            if credentials.role_id is None
            else EnvironmentVariable.APPROLE_SECRET_ID
        )
        get_logger().warning(
            "AppRole identifier not set, attempting login without it",
            extra={"missing_variable": missing.value},
        )

    return credentials
