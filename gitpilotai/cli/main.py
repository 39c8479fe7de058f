"""CLI Main Entry Point"""

import sys
from pathlib import Path
from typing import Mapping

from gitpilotai import BASE_BRANCHES
from gitpilotai.config import Config, ConfigError, ConfigManager
from gitpilotai.git import CommandRunner, Git, GitError
from gitpilotai.llm import CompletionClient, EmptyResponse, LLMError, get_client
from gitpilotai.prompts import build_branch_prompt, build_commit_prompt, slugify, strip_quotes
from gitpilotai.output import (
    ARROW,
    Spinner,
    colorize_branch,
    dim,
    print_box,
    print_error,
    print_success,
    print_warning,
)

from gitpilotai.cli.args import build_parser
from gitpilotai.cli.commands import display_config, display_version, open_pull_request
from gitpilotai.cli.utils import confirm, resolve_context

# Commands that fail without an API key. The others only bootstrap the dotfile.
NEEDS_CREDENTIAL = ('generate', 'branch', 'config')


def _stage_changes(git: Git, config: Config) -> bool:
    """Stage everything, after a preview and confirmation when configured.

    Returns False when the user declined.
    """
    if config.confirm_staging:
        print(dim("Changes to be staged:"))
        print(git.status_summary())
        if not confirm("Stage all changes?"):
            print_warning("Nothing staged.")
            return False

    git.stage_all()
    print_success("Files staged successfully.")
    return True


def _prepare_diff(git: Git, config: Config) -> str | None:
    """Check for changes, stage them and return the diff.

    Returns None for the benign exits: clean tree, declined staging, empty diff.
    """
    if not git.has_changes():
        print_warning("No changes detected in the Git repository.")
        return None

    if not _stage_changes(git, config):
        return None

    diff = git.diff()
    if not diff:
        print_warning("No diff found.")
        return None
    return diff


def _generate_commit_message(client: CompletionClient, diff: str, context: str | None) -> str:
    prompt = build_commit_prompt(diff, context)
    with Spinner(f"Writing commit message with {client.name}..."):
        reply = client.complete(prompt)
    message = strip_quotes(reply)
    if not message:
        raise EmptyResponse("The model returned an empty commit message")
    return message


def _generate_branch_name(client: CompletionClient, config: Config, commit_message: str) -> str:
    """Branch name for the commit: the model's reply verbatim, or a local slug."""
    if config.branch_style == "slug":
        name = slugify(commit_message)
    else:
        with Spinner("Naming branch..."):
            name = client.complete(build_branch_prompt(commit_message)).strip()
    if not name:
        raise EmptyResponse("Could not derive a branch name from the commit message")
    return name


def _display_message(message: str) -> None:
    print()
    print_box(message)
    print()


def _push(git: Git, branch: str) -> None:
    upstream_set = git.push(branch)
    suffix = dim(" (upstream set)") if upstream_set else ""
    print_success(f"Changes pushed successfully to branch {colorize_branch(branch)}.{suffix}")


def run_generate(args, config: Config, git: Git, client: CompletionClient) -> int:
    """Stage, commit with a generated message, and push the current branch."""
    diff = _prepare_diff(git, config)
    if diff is None:
        return 0

    context = resolve_context(args.message)
    message = _generate_commit_message(client, diff, context)
    _display_message(message)

    git.commit(message)
    print_success("Changes committed successfully.")

    branch = git.current_branch()
    _push(git, branch)
    return 0


def run_branch(args, config: Config, git: Git, client: CompletionClient) -> int:
    """Branch off main/master, commit with a generated message, and push."""
    current = git.current_branch()
    if current not in BASE_BRANCHES:
        print_error(f"You must be on {' or '.join(BASE_BRANCHES)} to create a new branch (currently on {current}).")
        return 1

    diff = _prepare_diff(git, config)
    if diff is None:
        return 0

    context = resolve_context(args.message)
    message = _generate_commit_message(client, diff, context)
    _display_message(message)

    branch = _generate_branch_name(client, config, message)
    git.checkout_new_branch(branch)
    print_success(f"Switched to new branch {colorize_branch(branch)} {dim(ARROW + ' from ' + current)}")

    git.commit(message)
    print_success("Changes committed successfully.")

    _push(git, branch)
    return 0


def main(
    argv: list[str] | None = None,
    *,
    runner: CommandRunner | None = None,
    client: CompletionClient | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> int:
    """Main entry point for the CLI.

    The git runner, completion client, environment and home directory can be
    injected; by default the real git binary and the OpenAI API are used.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        manager = ConfigManager(environ=environ, home=home)
        git = Git(runner)

        if args.command not in NEEDS_CREDENTIAL:
            manager.bootstrap()
            if args.command == 'version':
                return display_version()
            return open_pull_request(git)

        config = manager.load()
        if args.command == 'config':
            return display_config(config)

        client = client or get_client(config)
        if args.command == 'generate':
            return run_generate(args, config, git, client)
        if args.command == 'branch':
            return run_branch(args, config, git, client)
    except (ConfigError, GitError, LLMError) as e:
        print_error(str(e))
        return 1

    parser.print_help()
    return 1


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print()
        print_error("Interrupted.")
        sys.exit(130)
