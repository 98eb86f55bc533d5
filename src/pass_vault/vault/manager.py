"""
VaultManager — vault lifecycle and activation.

Layout:
  ~/.password-vaults/
    .extensions/          shared extension scripts
    main/                 one directory per vault
      .extensions -> ~/.password-vaults/.extensions
  ~/.password-store -> ~/.password-vaults/main
"""

import os
import re
import shutil
from pathlib import Path
from typing import Callable, List, Optional

from pass_vault.config import EXTENSIONS_DIRNAME, IDENTITY_FILENAME, Settings, load_settings
from pass_vault.core.errors import (
    AlreadyExists,
    AlreadyInitialized,
    CannotDeleteActive,
    EmptyName,
    InvalidName,
    MissingArgument,
    NotFound,
    NotInitialized,
    RemoveFailed,
    SymlinkConflict,
)
from pass_vault.core.types import VaultInfo
from pass_vault.utils import echo
from . import pointer
from .lock import exclusive_lock
from .store import CredentialStore, PassStore

DEFAULT_VAULT_NAME = "main"

_BAD_NAME = re.compile(r"[\s/\\]")

Confirm = Callable[[str], bool]


def validate_name(name: Optional[str]) -> str:
    """Same rule for every command: non-empty, no separators or whitespace, no leading dot."""
    if not name:
        raise EmptyName()
    if _BAD_NAME.search(name) or name.startswith("."):
        raise InvalidName(name)
    return name


class VaultManager:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[CredentialStore] = None,
        confirm: Optional[Confirm] = None,
    ):
        self.settings = settings or load_settings()
        self.store = store or PassStore()
        self._confirm = confirm

    @property
    def root(self) -> Path:
        return self.settings.vault_dir

    @property
    def store_dir(self) -> Path:
        return self.settings.store_dir

    @property
    def verbose(self) -> bool:
        return self.settings.verbose

    def vault_path(self, name: str) -> Path:
        return self.root / name

    def is_initialized(self) -> bool:
        return self.root.exists()

    def exists(self, name: str) -> bool:
        """A vault is a real directory in the root; symlinked entries are not vaults."""
        path = self.vault_path(name)
        return path.is_dir() and not path.is_symlink()

    def is_active(self, name: str) -> bool:
        return pointer.is_active(self.store_dir, self.vault_path(name))

    # -- helpers -------------------------------------------------------

    def _require_initialized(self) -> None:
        if not self.is_initialized():
            raise NotInitialized()

    def _move(self, src: Path, dest: Path) -> None:
        shutil.move(str(src), str(dest))
        echo(self.verbose, "mv", f"'{src}' -> '{dest}'")

    def _link_extensions(self, name: str) -> None:
        link = self.vault_path(name) / EXTENSIONS_DIRNAME
        os.symlink(self.settings.extensions_dir, link)
        echo(self.verbose, "ln", f"'{link}' -> '{self.settings.extensions_dir}'")

    def _activate(self, name: str) -> None:
        pointer.activate(self.store_dir, self.vault_path(name), self.verbose)

    def _legacy_source(self) -> Optional[Path]:
        """
        The pre-vault store to migrate into `main`, if any.

        A symlinked store counts when its target is a directory holding a
        .gpg-id; the target tree is what gets moved.
        """
        legacy = self.store_dir
        if legacy.is_symlink():
            if legacy.is_dir() and (legacy / IDENTITY_FILENAME).is_file():
                return Path(os.path.realpath(legacy))
            return None
        if legacy.is_dir():
            return legacy
        return None

    # -- operations ----------------------------------------------------

    def init(self) -> Path:
        """
        Create the vault root and turn the existing store into the `main` vault.

        Raises:
            AlreadyInitialized: the vault root already exists
            SymlinkConflict: a regular file sits at the store path
        """
        if self.is_initialized():
            raise AlreadyInitialized(str(self.root))
        store = self.store_dir
        if os.path.lexists(store) and not store.is_symlink() and not store.is_dir():
            raise SymlinkConflict(str(store))

        with exclusive_lock(self.settings.lock_file):
            self.root.mkdir(parents=True)
            echo(self.verbose, "mkdir", f"created directory '{self.root}'")

            main = self.vault_path(DEFAULT_VAULT_NAME)
            legacy = self._legacy_source()
            if legacy is not None:
                legacy_ext = legacy / EXTENSIONS_DIRNAME
                if legacy_ext.is_dir() and not legacy_ext.is_symlink():
                    self._move(legacy_ext, self.settings.extensions_dir)
                self._move(legacy, main)
            else:
                main.mkdir()
                echo(self.verbose, "mkdir", f"created directory '{main}'")

            if not self.settings.extensions_dir.exists():
                self.settings.extensions_dir.mkdir()
                echo(self.verbose, "mkdir", f"created directory '{self.settings.extensions_dir}'")

            self._link_extensions(DEFAULT_VAULT_NAME)
            self._activate(DEFAULT_VAULT_NAME)
        return main

    def add(self, name: str) -> Path:
        """Create a new vault with the active vault's gpg-id and switch to it."""
        self._require_initialized()
        validate_name(name)
        vault_dir = self.vault_path(name)
        if os.path.lexists(vault_dir):
            raise AlreadyExists(name)

        with exclusive_lock(self.settings.lock_file):
            pointer.ensure_replaceable(self.store_dir)
            identity = self.store.read_identity(self.store_dir)
            try:
                self.store.provision(vault_dir, identity)
            except Exception:
                # Only a directory this call created is ours to clean up.
                if vault_dir.is_dir() and not vault_dir.is_symlink():
                    shutil.rmtree(vault_dir)
                raise
            self._link_extensions(name)
            self._activate(name)
        return vault_dir

    def list_vaults(self) -> List[VaultInfo]:
        self._require_initialized()
        result = []
        for entry in sorted(self.root.iterdir(), key=lambda p: p.name):
            if entry.name.startswith(".") or entry.is_symlink() or not entry.is_dir():
                continue
            result.append(VaultInfo(
                name=entry.name,
                path=entry,
                active=pointer.is_active(self.store_dir, entry),
            ))
        return result

    def switch(self, name: str) -> Path:
        validate_name(name)
        if not self.exists(name):
            raise NotFound(name)
        with exclusive_lock(self.settings.lock_file):
            self._activate(name)
        return self.vault_path(name)

    def rename(self, old_name: str, new_name: str) -> Path:
        """
        Rename a vault and activate it under the new name.

        The renamed vault becomes active even if it was not active before,
        matching `pass vault mv` in the shell extension.
        """
        if not old_name or not new_name:
            raise MissingArgument()
        validate_name(old_name)
        validate_name(new_name)
        src = self.vault_path(old_name)
        dest = self.vault_path(new_name)
        if not self.exists(old_name):
            raise NotFound(old_name)
        if os.path.lexists(dest):
            raise AlreadyExists(new_name)

        with exclusive_lock(self.settings.lock_file):
            pointer.ensure_replaceable(self.store_dir)
            os.rename(src, dest)
            echo(self.verbose, "mv", f"'{src}' -> '{dest}'")
            self._activate(new_name)
        return dest

    def remove(self, name: str, confirm: Optional[Confirm] = None) -> bool:
        """
        Permanently delete an inactive vault.

        Returns:
            True if deleted, False if the user declined.
        """
        validate_name(name)
        vault_dir = self.vault_path(name)
        if self.is_active(name):
            raise CannotDeleteActive(name)
        if not self.exists(name):
            raise NotFound(name)

        ask = confirm or self._confirm
        if ask is None:
            from pass_vault.tui import confirm_delete as ask
        if not ask(name):
            return False

        with exclusive_lock(self.settings.lock_file):
            if self.is_active(name):
                raise CannotDeleteActive(name)
            try:
                shutil.rmtree(vault_dir)
            except OSError as e:
                raise RemoveFailed(f"{name} ({e})")
            echo(self.verbose, "rm", f"removed directory '{vault_dir}'")
        return True
