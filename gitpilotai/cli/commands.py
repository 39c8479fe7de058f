"""CLI Commands that make no API call"""

from gitpilotai import __version__
from gitpilotai.config import Config
from gitpilotai.git import Git, compare_url
from gitpilotai.output import bold, dim, info, print_success, print_warning
from gitpilotai.cli.utils import open_in_browser


def display_config(config: Config) -> int:
    """Confirm the credential is in place and show the effective settings."""
    print_success("Config initialized.")
    print()
    print(f"  {bold('Settings:')}")
    print(f"    api key:          {info(config.masked_key)}")
    print(f"    model:            {info(config.model)}")
    print(f"    max tokens:       {info(str(config.max_tokens))}")
    print(f"    branch style:     {info(config.branch_style)}")
    print(f"    confirm staging:  {info(str(config.confirm_staging).lower())}")
    if config.env_file:
        print(f"\n  {dim('Loaded from:')} {config.env_file}")
    print(f"  {dim('Environment variables override the file.')}\n")
    return 0


def display_version() -> int:
    print(f"gitpilotai {__version__}")
    return 0


def open_pull_request(git: Git) -> int:
    """Open the compare page for the current branch in the browser."""
    remote = git.remote_url()
    branch = git.current_branch()
    url = compare_url(remote, branch)

    print(f"Opening pull request page for {bold(branch)}:")
    print(f"  {info(url)}")
    if not open_in_browser(url):
        print_warning("Could not open a browser. Visit the URL above.")
    return 0
