"""
Active Pointer — the symlink at the store's working path.

Only this module reads or writes the pointer. Nothing is cached: every
question about the active vault goes back to the filesystem.
"""

import os
from pathlib import Path
from typing import Optional

from pass_vault.core.errors import SymlinkConflict
from pass_vault.utils import echo


def read_target(store_dir: Path) -> Optional[Path]:
    """Where the pointer leads, one level deep and made absolute. None if unset."""
    if not store_dir.is_symlink():
        return None
    target = os.readlink(store_dir)
    if not os.path.isabs(target):
        target = os.path.join(os.path.dirname(store_dir), target)
    return Path(os.path.normpath(target))


def is_active(store_dir: Path, vault_path: Path) -> bool:
    target = read_target(store_dir)
    if target is None:
        return False
    return os.path.realpath(target) == os.path.realpath(vault_path)


def ensure_replaceable(store_dir: Path) -> None:
    """Refuse to touch anything at the working path that is not a symlink."""
    if os.path.lexists(store_dir) and not store_dir.is_symlink():
        raise SymlinkConflict(str(store_dir))


def activate(store_dir: Path, vault_path: Path, verbose: bool = True) -> None:
    """
    Point the store's working path at `vault_path`.

    A temporary link is created beside the working path and renamed over it,
    so the pointer goes from old to new in one step.
    """
    ensure_replaceable(store_dir)
    target = os.path.abspath(vault_path)
    tmp = store_dir.with_name(f".{store_dir.name}.{os.getpid()}.tmp")
    if os.path.lexists(tmp):
        os.unlink(tmp)
    os.symlink(target, tmp)
    try:
        os.replace(tmp, store_dir)
    except OSError:
        os.unlink(tmp)
        raise
    echo(verbose, "ln", f"'{store_dir}' -> '{target}'")
