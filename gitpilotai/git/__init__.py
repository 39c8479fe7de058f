"""Git Operations Package"""

from gitpilotai.git.runner import CommandResult, CommandRunner, GitError, SubprocessRunner
from gitpilotai.git.repo import Git, compare_url, normalize_remote_url

__all__ = [
    "Git",
    "GitError",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    "compare_url",
    "normalize_remote_url",
]
