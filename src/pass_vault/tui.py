"""
Interactive prompts for pass-vault.

All questionary usage lives here so the manager stays non-interactive.
"""

import questionary
from questionary import Style

from pass_vault.core.types import Message
from pass_vault.utils import Colors

# Cau hinh style cho Questionary
CUSTOM_STYLE = Style(
    [
        ("qmark", "fg:#ff5f5f bold"),
        ("question", "bold"),
        ("answer", "fg:#00d4ff bold"),
    ]
)


def confirm_delete(name: str) -> bool:
    """
    Double confirmation before a vault is wiped.

    A single keypress answers; only y/Y confirms. Ctrl-C counts as no.
    """
    print(f"{Colors.YELLOW}{Message.DELETE_WARNING.value}{Colors.ENDC}")
    answer = questionary.confirm(
        Message.DELETE_CONFIRM.render(name),
        default=False,
        auto_enter=True,
        style=CUSTOM_STYLE,
    ).ask()
    return bool(answer)
