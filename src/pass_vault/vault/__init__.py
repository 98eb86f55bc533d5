"""Vault management — multiple password-stores behind one symlink."""
from .manager import VaultManager, DEFAULT_VAULT_NAME, validate_name
from .store import CredentialStore, PassStore

__all__ = ["VaultManager", "DEFAULT_VAULT_NAME", "validate_name", "CredentialStore", "PassStore"]
