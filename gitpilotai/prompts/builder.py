"""Prompt Builder - Construct LLM prompts for commit messages and branch names."""

import re

from gitpilotai import BRANCH_PREFIXES

COMMIT_INSTRUCTIONS = (
    "Generate a git commit message based on the output of a diff command. "
    "The commit message should be a detailed but brief overview of the changes. "
    "Return only the text for the commit message."
)

BRANCH_INSTRUCTIONS = (
    "Generate a git branch name from a commit message. "
    "The branch name must start with one of these prefixes:\n\n{prefixes}\n\n"
    "After the prefix use lowercase words separated by hyphens, "
    "e.g. feat/branch-name-of-feature. Return only the branch name."
)

_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def strip_quotes(text: str) -> str:
    """Remove every double quote the model wrapped around or inside its reply."""
    return text.replace('"', '').strip()


def slugify(text: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to single hyphens, trim hyphens."""
    return _NON_ALNUM.sub('-', text.lower()).strip('-')


class PromptBuilder:
    """Constructs the two prompts gitpilotai sends."""

    def build_commit(self, diff: str, context: str | None = None) -> str:
        sections = [
            COMMIT_INSTRUCTIONS,
            self._build_diff_section(diff),
            self._build_context_section(context),
            "Commit message:",
        ]
        return "\n\n".join(filter(None, sections))

    def build_branch(self, commit_message: str) -> str:
        prefixes = "\n".join(f"- {name}/: {desc}" for name, desc in BRANCH_PREFIXES.items())
        return (
            f"{BRANCH_INSTRUCTIONS.format(prefixes=prefixes)}\n\n"
            f"Here is the commit message:\n\n{commit_message}\n\n"
            "Branch name:"
        )

    def _build_diff_section(self, diff: str) -> str:
        return f"Here is the diff output:\n\n{diff}"

    def _build_context_section(self, context: str | None) -> str:
        if not context or not context.strip():
            return ""
        return f"Additional context from the author (use it to explain why):\n\n{context.strip()}"


def build_commit_prompt(diff: str, context: str | None = None) -> str:
    return PromptBuilder().build_commit(diff, context)


def build_branch_prompt(commit_message: str) -> str:
    return PromptBuilder().build_branch(commit_message)
