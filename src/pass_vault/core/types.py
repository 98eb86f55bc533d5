"""Shared types and data structures for pass-vault."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Message(Enum):
    """User-facing texts. Error identity lives in the exception class, wording lives here."""

    ALREADY_INITIALIZED = "The directory {subject} already exists, aborting!"
    NOT_INITIALIZED = "vault-store not initialized! Try: 'pass vault init'"
    EMPTY_NAME = "Please specify the vault's name!"
    MISSING_ARGUMENT = "Please try: `pass vault mv <old-name> <new-name>`"
    NAME_HAS_SPACES = "Please do not use spaces in your vault name!"
    INVALID_NAME = "Invalid vault name (no slashes, spaces or leading dot):"
    ALREADY_EXISTS = "A vault has already been created with the name:"
    NOT_FOUND = "No vault has been created with the name:"
    CANNOT_DELETE_ACTIVE = "Only inactive vaults can be deleted! Please activate a different vault, first."
    SYMLINK_CONFLICT = "Creating symlink `{subject}` would overwrite a real file, aborting!"
    IDENTITY_MISSING = "Could not read a gpg-id from the active vault:"
    PROVISION_FAILED = "Could not initialize the password-store for vault:"
    BUSY = "Another pass-vault command is running (lock held on {subject}), try again."
    CONFIG_ERROR = "Invalid configuration file:"
    REMOVE_FAILED = "Could not delete the vault:"
    USAGE_ERROR = "{subject} (see `pass vault help`)"

    VAULTS_INITIALIZED = "Password vaults initialized."
    DELETE_WARNING = "Deleting a vault will permanently delete all secrets it contains!"
    DELETE_CONFIRM = "Are you absolutely sure you want to delete the vault:"
    ABORTING = "Aborting."

    def render(self, subject: str = "") -> str:
        if "{subject}" in self.value:
            return self.value.format(subject=subject)
        if subject:
            return f"{self.value} {subject}"
        return self.value


@dataclass
class VaultInfo:
    """One row of `pass vault list`."""
    name: str
    path: Path
    active: bool = False
