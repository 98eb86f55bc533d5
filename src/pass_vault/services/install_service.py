"""
Business logic cho lenh 'pass-vault install'.

Drops a `vault.bash` shim into the pass extensions directory so that
`pass vault ...` forwards to this program.
"""

import shlex
import shutil
import sys
from pathlib import Path

from pass_vault.config import EXTENSIONS_DIRNAME, Settings
from pass_vault.utils import echo

SHIM_NAME = "vault.bash"


def render_shim(command: str) -> str:
    return (
        "#!/bin/bash\n"
        "# pass extension: forwards `pass vault ...` to pass-vault\n"
        f'exec {command} "$@"\n'
    )


def extensions_target(settings: Settings) -> Path:
    """Shared extensions dir once vaults exist, the plain store's one before that."""
    if settings.vault_dir.exists():
        return settings.extensions_dir
    return settings.store_dir / EXTENSIONS_DIRNAME


def run_install(settings: Settings, executable: str = "") -> Path:
    """
    Install the shim.

    Args:
        settings: Resolved settings
        executable: Program the shim execs; defaults to the `pass-vault` on PATH

    Returns:
        Path of the written shim
    """
    executable = executable or shutil.which("pass-vault")
    if executable:
        command = shlex.quote(executable)
    else:
        command = shlex.join([sys.executable, "-m", "pass_vault"])
    target_dir = extensions_target(settings)
    target_dir.mkdir(parents=True, exist_ok=True)

    shim = target_dir / SHIM_NAME
    shim.write_text(render_shim(command), encoding="utf-8")
    shim.chmod(0o755)
    echo(settings.verbose, "install", f"'{shim}'")
    return shim
