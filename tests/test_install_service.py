"""Tests for the pass extension shim installer."""

import os

from pass_vault.cli import main
from pass_vault.services.install_service import SHIM_NAME, run_install


def test_install_before_init_targets_store(settings, legacy_store):
    shim = run_install(settings, executable="/opt/bin/pass-vault")

    assert shim == legacy_store / ".extensions" / SHIM_NAME
    assert os.access(shim, os.X_OK)
    text = shim.read_text()
    assert text.startswith("#!/bin/bash\n")
    assert 'exec /opt/bin/pass-vault "$@"' in text


def test_install_after_init_targets_shared_dir(initialized, settings):
    shim = run_install(settings, executable="/opt/bin/pass-vault")

    assert shim == settings.vault_dir / ".extensions" / SHIM_NAME
    # Visible from every vault through its .extensions link
    assert (settings.store_dir / ".extensions" / SHIM_NAME).exists()


def test_install_quotes_executable(settings):
    shim = run_install(settings, executable="/opt/my tools/pass-vault")
    assert "exec '/opt/my tools/pass-vault' \"$@\"" in shim.read_text()


def test_cli_install_prints_gate_hint(cli_env, capsys):
    main(["install", "--executable", "/opt/bin/pass-vault"])
    out = capsys.readouterr().out
    assert "PASSWORD_STORE_ENABLE_EXTENSIONS=true" in out


def test_cli_install_no_hint_when_enabled(cli_env, monkeypatch, capsys):
    monkeypatch.setenv("PASSWORD_STORE_ENABLE_EXTENSIONS", "true")
    main(["install", "--executable", "/opt/bin/pass-vault"])
    out = capsys.readouterr().out
    assert "Installed" in out
    assert "export PASSWORD_STORE_ENABLE_EXTENSIONS" not in out


def test_cli_install_hint_for_values_pass_ignores(cli_env, monkeypatch, capsys):
    monkeypatch.setenv("PASSWORD_STORE_ENABLE_EXTENSIONS", "1")
    main(["install", "--executable", "/opt/bin/pass-vault"])
    assert "export PASSWORD_STORE_ENABLE_EXTENSIONS=true" in capsys.readouterr().out
