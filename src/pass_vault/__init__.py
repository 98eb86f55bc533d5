"""
pass-vault - multiple password-stores for `pass`, switched by symlink.

Each vault lives in ~/.password-vaults/<name>/ and the active one is
exposed at ~/.password-store.
"""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "core",
    "vault",
    "services",
    "tui",
    "utils",
]
