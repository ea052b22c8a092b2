"""CLI Argument Parsing"""

import argparse
import argcomplete

from aicommit import __version__


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='aicommit',
        description='Draft a conventional commit message from staged changes, confirm, and commit',
        epilog='Example: git add -p && aicommit --lang ua'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Generation options
    parser.add_argument('-l', '--lang', type=str, metavar='{en,ua}', help='Message language, case-insensitive (COMMIT_LANG takes precedence)')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Claude API model')
    parser.add_argument('--agent', type=str, metavar='CMD', help='Local agent executable (default: claude)')
    parser.add_argument('--max-diff-chars', type=_positive_int, metavar='N', help='Characters of diff sent to the model (default: 6000)')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (backend, prompt size, fallbacks)')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
