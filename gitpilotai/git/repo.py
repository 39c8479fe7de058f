"""Git Repository - The git operations gitpilotai performs."""

import re
from urllib.parse import quote

from gitpilotai.git.runner import CommandResult, CommandRunner, GitError, SubprocessRunner

_SCP_LIKE = re.compile(r'^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?!//)(?P<path>.+)$')
_URL_LIKE = re.compile(r'^(?P<scheme>[a-z][a-z0-9+.-]*)://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/(?P<path>.+)$', re.IGNORECASE)


def normalize_remote_url(url: str) -> str:
    """Turn a clone URL into the repository's HTTPS web URL.

    git@github.com:owner/repo.git      -> https://github.com/owner/repo
    ssh://git@github.com/owner/repo    -> https://github.com/owner/repo
    https://user@github.com/owner/repo -> https://github.com/owner/repo
    """
    url = url.strip()
    if url.endswith('/'):
        url = url[:-1]
    if url.endswith('.git'):
        url = url[:-len('.git')]

    match = _URL_LIKE.match(url)
    if match:
        return f"https://{match.group('host')}/{match.group('path')}"

    match = _SCP_LIKE.match(url)
    if match:
        return f"https://{match.group('host')}/{match.group('path').lstrip('/')}"

    return url


def compare_url(remote_url: str, branch: str) -> str:
    """Web page for opening a pull request from `branch`."""
    return f"{remote_url}/compare/{quote(branch, safe='/')}?expand=1"


class Git:
    """Thin wrapper over the git commands used by the CLI.

    Every failing command raises GitError. Nothing is rolled back: a commit
    that succeeded stays in place when a later push fails.
    """

    def __init__(self, runner: CommandRunner | None = None):
        self.runner = runner or SubprocessRunner()

    def _run(self, *args: str) -> CommandResult:
        return self.runner.run(*args)

    def _check(self, *args: str) -> str:
        """Run a git command and return stdout, raising on non-zero exit."""
        result = self._run(*args)
        if not result.ok:
            details = result.output
            message = f"Git command failed: git {' '.join(args)}"
            raise GitError(f"{message}\n{details}" if details else message)
        return result.stdout

    def has_changes(self) -> bool:
        return bool(self._check('status', '--porcelain'))

    def stage_all(self) -> None:
        self._check('add', '.')

    def diff(self) -> str:
        """Staged and unstaged diff text joined together."""
        staged = self._check('diff', '--staged').strip()
        unstaged = self._check('diff').strip()
        return f"{staged}\n{unstaged}".strip()

    def status_summary(self) -> str:
        """Short status listing shown before staging."""
        return self._check('status', '--short').rstrip()

    def current_branch(self) -> str:
        return self._check('rev-parse', '--abbrev-ref', 'HEAD').strip()

    def commit(self, message: str) -> None:
        self._check('commit', '-m', message)

    def branch_exists(self, name: str) -> bool:
        return self._run('rev-parse', '--verify', name).ok

    def remote_branch_exists(self, name: str) -> bool:
        return self._run('ls-remote', '--exit-code', '--heads', 'origin', name).ok

    def push(self, branch: str) -> bool:
        """Push `branch` to origin.

        Returns True when the upstream had to be set (first push of the branch).
        """
        if not self.branch_exists(branch):
            raise GitError(f"Branch {branch} does not exist locally")

        set_upstream = not self.remote_branch_exists(branch)
        if set_upstream:
            self._check('push', '--set-upstream', 'origin', branch)
        else:
            self._check('push', 'origin', branch)
        return set_upstream

    def checkout_new_branch(self, name: str) -> None:
        self._check('checkout', '-b', name)

    def remote_url(self) -> str:
        raw = self._check('config', '--get', 'remote.origin.url').strip()
        return normalize_remote_url(raw)
