"""
Error hierarchy for vault operations.

Every error is user-facing and ends the invocation with exit status 1.
Tests match on the class; the printed text comes from `Message`.
"""

from typing import Optional

from .types import Message


class VaultError(Exception):
    message: Message

    def __init__(self, subject: str = "", message: Optional[Message] = None):
        if message is not None:
            self.message = message
        self.subject = str(subject) if subject else ""
        super().__init__(self.message.render(self.subject))


class AlreadyInitialized(VaultError):
    message = Message.ALREADY_INITIALIZED


class NotInitialized(VaultError):
    message = Message.NOT_INITIALIZED


class EmptyName(VaultError):
    message = Message.EMPTY_NAME


class MissingArgument(VaultError):
    message = Message.MISSING_ARGUMENT


class NameHasSpaces(VaultError):
    message = Message.NAME_HAS_SPACES


class InvalidName(VaultError):
    message = Message.INVALID_NAME


class AlreadyExists(VaultError):
    message = Message.ALREADY_EXISTS


class NotFound(VaultError):
    message = Message.NOT_FOUND


class CannotDeleteActive(VaultError):
    message = Message.CANNOT_DELETE_ACTIVE


class SymlinkConflict(VaultError):
    message = Message.SYMLINK_CONFLICT


class IdentityMissing(VaultError):
    message = Message.IDENTITY_MISSING


class ProvisionFailed(VaultError):
    message = Message.PROVISION_FAILED


class Busy(VaultError):
    message = Message.BUSY


class ConfigError(VaultError):
    message = Message.CONFIG_ERROR


class RemoveFailed(VaultError):
    message = Message.REMOVE_FAILED


class UsageError(VaultError):
    message = Message.USAGE_ERROR
