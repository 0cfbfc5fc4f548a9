"""CLI Argument Parsing"""

import argparse
import argcomplete

from aicommit import __version__


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""
    pass


class UnknownOptionError(UsageError):
    """Raised for a token the CLI does not recognise."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Unknown option: {option}")


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def _positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError("timeout must be greater than zero")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog='aicommit',
        description='Commit staged changes with an AI-generated Conventional Commits message.',
        epilog=(
            'By default only already staged changes are committed. '
            'Use --auto-add to stage all changes first.\n\n'
            'Examples:\n'
            '  aicommit                # commit staged changes with a generated message\n'
            '  aicommit --auto-add     # add all changes, then commit\n'
            '  aicommit --help         # show this help message'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--auto-add', action='store_true', default=None, help='Stage all changes before generating the message (git add .)')

    # Generator options
    parser.add_argument('--command', type=str, metavar='NAME', help='AI command-line tool to run (default: gemini)')
    parser.add_argument('--timeout', type=_positive_float, metavar='SECONDS', help='Give up on the AI tool after SECONDS (default: wait forever)')

    # Output / config
    parser.add_argument('--verbose', action='store_true', help='Log every command that is run')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')

    argcomplete.autocomplete(parser)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse argv, raising UnknownOptionError for the first unrecognised token."""
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if extras:
        raise UnknownOptionError(extras[0])
    return args
