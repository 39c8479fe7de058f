"""CLI Argument Parsing"""

import argparse
import sys

import argcomplete

from gitpilotai import __version__


class ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with 1, like every other fatal error."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog='gitpilotai',
        description='Generate commit messages and branch names from your git diff, then commit and push',
        epilog='Example: gitpilotai generate "fixes the login redirect"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')

    generate = subparsers.add_parser('generate', help='Stage, commit with a generated message, and push')
    generate.add_argument('message', nargs='*', help='Extra context for the model, or "m" to type it interactively')

    branch = subparsers.add_parser('branch', help='Create a new branch from main/master, commit, and push')
    branch.add_argument('message', nargs='*', help='Extra context for the model, or "m" to type it interactively')

    subparsers.add_parser('pr', help='Open a pull request page for the current branch')
    subparsers.add_parser('config', help='Initialize and show the API key configuration')
    subparsers.add_parser('version', help='Show the version')

    argcomplete.autocomplete(parser)
    return parser
