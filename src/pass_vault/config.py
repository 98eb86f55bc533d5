"""
Settings — where the active store and the vaults live.

Resolution order (later wins):
  1. built-in defaults
  2. ~/.config/pass-vault/config.yaml (or $PASS_VAULT_CONFIG)
  3. PASSWORD_STORE_DIR / PASSWORD_STORE_VAULT_DIR / PASSWORD_STORE_ENABLE_EXTENSIONS
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from pass_vault.core.errors import ConfigError

CONFIG_DIR = Path.home() / ".config" / "pass-vault"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_STORE_DIR = "~/.password-store"
DEFAULT_VAULT_DIR = "~/.password-vaults"

EXTENSIONS_DIRNAME = ".extensions"
IDENTITY_FILENAME = ".gpg-id"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _expand(value: Any) -> Path:
    return Path(os.path.abspath(os.path.expanduser(str(value))))


def _extensions_enabled(value: Optional[str]) -> bool:
    # pass itself only loads extensions for the literal "true".
    return value == "true"


def _as_bool(value: Any, key: str, path: Path, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ConfigError(f"{path} ({key}: expected true or false, got {value!r})")


@dataclass
class Settings:
    store_dir: Path
    vault_dir: Path
    extensions_enabled: bool = False
    verbose: bool = True

    @property
    def extensions_dir(self) -> Path:
        return self.vault_dir / EXTENSIONS_DIRNAME

    @property
    def lock_file(self) -> Path:
        # Sibling of the vault root: the root itself does not exist before init.
        return self.vault_dir.with_name(self.vault_dir.name + ".lock")


def load_config_file(path: Path) -> Dict[str, Any]:
    """Read the optional YAML config. Missing file -> {}."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"{path} ({e})")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} (expected a mapping)")
    return data


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    config_path = Path(env["PASS_VAULT_CONFIG"]) if env.get("PASS_VAULT_CONFIG") else CONFIG_FILE
    file_conf = load_config_file(config_path)

    store_dir = env.get("PASSWORD_STORE_DIR") or file_conf.get("store_dir") or DEFAULT_STORE_DIR
    vault_dir = env.get("PASSWORD_STORE_VAULT_DIR") or file_conf.get("vault_dir") or DEFAULT_VAULT_DIR

    return Settings(
        store_dir=_expand(store_dir),
        vault_dir=_expand(vault_dir),
        extensions_enabled=_extensions_enabled(env.get("PASSWORD_STORE_ENABLE_EXTENSIONS")),
        verbose=_as_bool(file_conf.get("verbose"), "verbose", config_path),
    )
