"""Allow running as `python -m gitpilotai`."""

from gitpilotai.cli import run

run()
