"""Command Runner - Execute git as a subprocess."""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass


class GitError(Exception):
    """Raised when git operations fail."""
    pass


@dataclass
class CommandResult:
    """Raw outcome of one git invocation."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout and stderr combined, for error reports."""
        return "\n".join(part for part in (self.stdout.strip(), self.stderr.strip()) if part)


class CommandRunner(ABC):
    """Runs `git <args>` and reports the result without judging it."""

    @abstractmethod
    def run(self, *args: str) -> CommandResult:
        pass


class SubprocessRunner(CommandRunner):
    """Runs the real git binary in the current directory."""

    def __init__(self, executable: str = 'git', cwd: str | None = None):
        self.executable = executable
        self.cwd = cwd

    def run(self, *args: str) -> CommandResult:
        try:
            result = subprocess.run(
                [self.executable, *args],
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                cwd=self.cwd,
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git: {e}")
        return CommandResult(result.returncode, result.stdout, result.stderr)
