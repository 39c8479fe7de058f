"""Command Line Interface Package"""

from gitpilotai.cli.main import main, run

__all__ = ["main", "run"]
