"""Tests for the `pass` credential store backend and the advisory lock."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from pass_vault.core.errors import Busy, IdentityMissing, ProvisionFailed
from pass_vault.vault.lock import exclusive_lock
from pass_vault.vault.store import PassStore


def test_read_identity_first_line(tmp_path):
    (tmp_path / ".gpg-id").write_text("ABC123\nDEF456\n", encoding="utf-8")
    assert PassStore("pass").read_identity(tmp_path) == "ABC123"


def test_read_identity_missing_or_blank(tmp_path):
    with pytest.raises(IdentityMissing):
        PassStore("pass").read_identity(tmp_path)
    (tmp_path / ".gpg-id").write_text("\n", encoding="utf-8")
    with pytest.raises(IdentityMissing):
        PassStore("pass").read_identity(tmp_path)


def test_provision_runs_pass_init_against_target(tmp_path):
    target = tmp_path / "work"
    with patch("pass_vault.vault.store.subprocess.run") as run:
        run.return_value = MagicMock(stdout="")
        PassStore("/usr/bin/pass").provision(target, "ABC123")

    args, kwargs = run.call_args
    assert args[0] == ["/usr/bin/pass", "init", "ABC123"]
    assert kwargs["env"]["PASSWORD_STORE_DIR"] == str(target)
    assert kwargs["check"] is True


def test_provision_failure(tmp_path):
    err = subprocess.CalledProcessError(1, ["pass"], stderr="gpg: no public key")
    with patch("pass_vault.vault.store.subprocess.run", side_effect=err):
        with pytest.raises(ProvisionFailed) as exc:
            PassStore("pass").provision(tmp_path / "work", "ABC123")
    assert "no public key" in str(exc.value)


def test_provision_without_pass_binary(tmp_path):
    with patch("pass_vault.vault.store.subprocess.run", side_effect=FileNotFoundError()):
        with pytest.raises(ProvisionFailed):
            PassStore("missing-pass").provision(tmp_path / "work", "ABC123")


def test_lock_is_exclusive(tmp_path):
    lock_file = tmp_path / "vaults.lock"
    with exclusive_lock(lock_file):
        with pytest.raises(Busy):
            with exclusive_lock(lock_file):
                pass
    # Released afterwards
    with exclusive_lock(lock_file):
        pass
