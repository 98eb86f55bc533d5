"""
CLI entry point — thin dispatcher only.

Parse args -> goi VaultManager -> in ket qua.
A first argument that is not a known command is a vault name to switch to.
"""

import argparse
import sys
from typing import List, Optional

from pass_vault import __version__
from pass_vault.core.errors import MissingArgument, NameHasSpaces, UsageError, VaultError
from pass_vault.core.types import Message
from pass_vault.utils import Colors, print_error

COMMANDS = {
    "init": ["i"],
    "add": ["a"],
    "list": ["l"],
    "mv": ["m", "move"],
    "rm": ["r", "d", "remove", "del", "delete"],
    "help": ["h"],
    "version": ["v"],
    "install": [],
}

VERSION_BANNER = f"""
============================================
= Extension: vault                         =
= Multiple password-stores with ease!      =
=                                          =
=                  v{__version__:<23}=
============================================
"""

USAGE = """Usage:
    pass vault <name>
        Switch to the VAULT with the given name.
    pass vault [list]
        List all available VAULTS.
    pass vault init
        Initialize a new VAULT.
    pass vault add <name>
        Add a new VAULT with the given name.
    pass vault mv <old-name> <new-name>
        Rename a VAULT and activate it.
    pass vault rm <name>
        Permanently delete an inactive VAULT.
    pass vault install
        Install the `pass vault` extension shim.
    pass vault help
        Display usage information.
    pass vault version
        Display the version of the currently install VAULT extension.
"""


def main(argv: Optional[List[str]] = None):
    try:
        _main(argv)
    except VaultError as e:
        print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Cancelled.{Colors.ENDC}")
        sys.exit(130)


class VaultArgumentParser(argparse.ArgumentParser):
    """Usage mistakes are vault errors too: one message on stderr, exit status 1."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = VaultArgumentParser(
        prog="pass-vault",
        description="Manage multiple password-stores (vaults)",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("init", aliases=COMMANDS["init"], help="Move the current store into vault 'main'")

    p_add = sub.add_parser("add", aliases=COMMANDS["add"], help="Create a vault and activate it")
    p_add.add_argument("name", nargs="?", default="", help="Vault name")

    sub.add_parser("list", aliases=COMMANDS["list"], help="List vaults")

    p_mv = sub.add_parser("mv", aliases=COMMANDS["mv"], help="Rename a vault")
    p_mv.add_argument("names", nargs="*", help="<old-name> <new-name>")

    p_rm = sub.add_parser("rm", aliases=COMMANDS["rm"], help="Delete an inactive vault")
    p_rm.add_argument("name", nargs="?", default="", help="Vault name")
    p_rm.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    sub.add_parser("help", aliases=COMMANDS["help"], help="Show usage")
    sub.add_parser("version", aliases=COMMANDS["version"], help="Show version")

    p_install = sub.add_parser("install", help="Install the pass extension shim")
    p_install.add_argument("--executable", default="", help="Program the shim should run")
    return parser


def _canonical(command: str) -> Optional[str]:
    for name, aliases in COMMANDS.items():
        if command == name or command in aliases:
            return name
    return None


def _main(argv: Optional[List[str]] = None):
    from pass_vault.vault import VaultManager

    argv = sys.argv[1:] if argv is None else list(argv)

    if argv and not argv[0].startswith("-") and _canonical(argv[0]) is None:
        vm = VaultManager()
        vm.switch(argv[0])
        return

    args = build_parser().parse_args(argv)
    command = _canonical(args.command) if args.command else "list"

    if command == "help":
        print(VERSION_BANNER)
        print(USAGE)
        return
    if command == "version":
        print(VERSION_BANNER)
        return
    if command == "install":
        _handle_install(args)
        return

    vm = VaultManager()
    if command == "init":
        vm.init()
        print(f"{Colors.GREEN}{Message.VAULTS_INITIALIZED.value}{Colors.ENDC}")
    elif command == "add":
        vm.add(args.name)
    elif command == "list":
        _handle_list(vm)
    elif command == "mv":
        _handle_mv(vm, args.names)
    elif command == "rm":
        _handle_rm(vm, args)


def _handle_list(vm):
    print(f"{Colors.HEADER}Vaults:{Colors.ENDC}")
    for v in vm.list_vaults():
        if v.active:
            print(f"{Colors.GREEN}*{Colors.ENDC} {Colors.BOLD}{v.name}{Colors.ENDC}")
        else:
            print(f"  {v.name}")


def _handle_mv(vm, names: List[str]):
    if len(names) > 2:
        raise NameHasSpaces()
    if len(names) < 2:
        raise MissingArgument()
    vm.rename(names[0], names[1])


def _handle_rm(vm, args):
    confirm = (lambda name: True) if args.yes else None
    if not vm.remove(args.name, confirm=confirm):
        print(Message.ABORTING.value)


def _handle_install(args):
    from pass_vault.config import load_settings
    from pass_vault.services import run_install

    settings = load_settings()
    shim = run_install(settings, executable=args.executable)
    print(f"{Colors.GREEN}Installed {shim}{Colors.ENDC}")
    if not settings.extensions_enabled:
        print()
        print("Complete the installation with the following commands:")
        print("    export PASSWORD_STORE_ENABLE_EXTENSIONS=true")
        print("    echo 'export PASSWORD_STORE_ENABLE_EXTENSIONS=true' >> ~/.bashrc")
        print()
        print("See `pass vault help` for usage information.")


if __name__ == "__main__":
    main()
