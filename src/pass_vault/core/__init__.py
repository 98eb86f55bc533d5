"""Core abstractions for pass-vault."""

from .types import Message, VaultInfo
from .errors import (
    AlreadyExists,
    AlreadyInitialized,
    Busy,
    CannotDeleteActive,
    ConfigError,
    EmptyName,
    IdentityMissing,
    InvalidName,
    MissingArgument,
    NameHasSpaces,
    NotFound,
    NotInitialized,
    ProvisionFailed,
    RemoveFailed,
    SymlinkConflict,
    UsageError,
    VaultError,
)

__all__ = [
    "Message",
    "VaultInfo",
    "VaultError",
    "AlreadyExists",
    "AlreadyInitialized",
    "Busy",
    "CannotDeleteActive",
    "ConfigError",
    "EmptyName",
    "IdentityMissing",
    "InvalidName",
    "MissingArgument",
    "NameHasSpaces",
    "NotFound",
    "NotInitialized",
    "ProvisionFailed",
    "RemoveFailed",
    "SymlinkConflict",
    "UsageError",
]
