"""Vault AppRole authentication and dynamic credential client."""

from .approle import AppRoleStrategy, load_approle_credentials
from .client import VaultClient, create_vault_client

__all__ = [
    "AppRoleStrategy",
    "VaultClient",
    "create_vault_client",
    "load_approle_credentials",
]
