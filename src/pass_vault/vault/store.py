"""
Credential store backends (Strategy pattern).

The manager only needs two things from a store: provision a fresh one for a
given identity, and tell which identity an existing one uses.
"""

import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pass_vault.config import IDENTITY_FILENAME
from pass_vault.core.errors import IdentityMissing, ProvisionFailed


class CredentialStore(ABC):
    @abstractmethod
    def provision(self, target: Path, identity: str) -> None: ...

    def read_identity(self, store_dir: Path) -> str:
        """First line of the store's identity file."""
        id_file = store_dir / IDENTITY_FILENAME
        try:
            with id_file.open(encoding="utf-8") as f:
                identity = f.readline().strip()
        except OSError:
            raise IdentityMissing(str(id_file))
        if not identity:
            raise IdentityMissing(str(id_file))
        return identity


class PassStore(CredentialStore):
    """Provision stores by running `pass init <gpg-id>` against a target directory."""

    def __init__(self, executable: Optional[str] = None):
        self.executable = executable or shutil.which("pass") or "pass"

    def provision(self, target: Path, identity: str) -> None:
        env = dict(os.environ, PASSWORD_STORE_DIR=str(target))
        try:
            result = subprocess.run(
                [self.executable, "init", identity],
                env=env,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            raise ProvisionFailed(f"{target.name} ({self.executable} not found)")
        except subprocess.CalledProcessError as e:
            raise ProvisionFailed(f"{target.name} ({(e.stderr or '').strip()})")
        if result.stdout:
            print(result.stdout.rstrip())
