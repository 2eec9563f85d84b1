"""CLI Argument Parsing"""

import argparse
import argcomplete

from conventional_commits_ai import __version__


class ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit 1 with a single line, like every other failure."""

    def error(self, message: str):
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='conventional-commits-ai',
        description='Generate conventional commit messages with AI',
        epilog='Example: git commit -m "$(conventional-commits-ai)"'
    )
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    # Positional arguments are accepted and ignored
    parser.add_argument('args', nargs='*', help=argparse.SUPPRESS)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
