"""Shared fixtures: an isolated home with a legacy pass store and a fake `pass init`."""

import os
from pathlib import Path

import pytest

from pass_vault.config import Settings
from pass_vault.vault import VaultManager
from pass_vault.vault import manager as manager_mod
from pass_vault.vault.store import CredentialStore

GPG_ID = "0xDEADBEEF"


class FakeStore(CredentialStore):
    """Stands in for `pass init`: creates the dir and writes .gpg-id."""

    def __init__(self, *args, **kwargs):
        self.calls = []

    def provision(self, target: Path, identity: str) -> None:
        self.calls.append((target, identity))
        target.mkdir(parents=True)
        (target / ".gpg-id").write_text(identity + "\n", encoding="utf-8")


def snapshot_tree(root: Path) -> dict:
    """Relative path -> bytes for every regular file, symlinks by target."""
    result = {}
    for p in sorted(root.rglob("*")):
        rel = str(p.relative_to(root))
        if p.is_symlink():
            result[rel] = ("link", os.readlink(p))
        elif p.is_file():
            result[rel] = p.read_bytes()
    return result


@pytest.fixture
def home(tmp_path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def settings(home) -> Settings:
    return Settings(
        store_dir=home / ".password-store",
        vault_dir=home / ".password-vaults",
        verbose=False,
    )


@pytest.fixture
def legacy_store(settings) -> Path:
    """A plain pass store the way it looks before `pass vault init`."""
    store = settings.store_dir
    (store / "web").mkdir(parents=True)
    (store / ".gpg-id").write_text(GPG_ID + "\n", encoding="utf-8")
    (store / "web" / "github.gpg").write_bytes(b"\x85\x02secret")
    (store / ".extensions").mkdir()
    (store / ".extensions" / "otp.bash").write_text("#!/bin/bash\n", encoding="utf-8")
    return store


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def vm(settings, fake_store) -> VaultManager:
    return VaultManager(settings=settings, store=fake_store, confirm=lambda name: True)


@pytest.fixture
def initialized(vm, legacy_store) -> VaultManager:
    vm.init()
    return vm


@pytest.fixture
def cli_env(settings, monkeypatch, tmp_path):
    """Point the CLI at the isolated home and swap `pass init` for FakeStore."""
    monkeypatch.setenv("PASSWORD_STORE_DIR", str(settings.store_dir))
    monkeypatch.setenv("PASSWORD_STORE_VAULT_DIR", str(settings.vault_dir))
    monkeypatch.setenv("PASS_VAULT_CONFIG", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv("PASSWORD_STORE_ENABLE_EXTENSIONS", raising=False)
    monkeypatch.setattr(manager_mod, "PassStore", FakeStore)
    return settings
