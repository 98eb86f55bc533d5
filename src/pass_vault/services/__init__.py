"""
Services — business logic tach khoi CLI.
"""

from pass_vault.services.install_service import run_install

__all__ = ["run_install"]
