import sys

# ANSI colors
class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    ENDC = '\033[0m'


def echo(verbose: bool, tool: str, text: str) -> None:
    """Audit line in the style of `mv -v` / `ln -v`, e.g. "mv: 'a' -> 'b'"."""
    if verbose:
        print(f"{Colors.CYAN}{tool}:{Colors.ENDC} {text}")


def print_error(text: str) -> None:
    print(f"{Colors.RED}Error:{Colors.ENDC} {text}", file=sys.stderr)
