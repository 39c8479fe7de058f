"""Prompt Construction Package"""

from gitpilotai.prompts.builder import (
    PromptBuilder,
    build_branch_prompt,
    build_commit_prompt,
    slugify,
    strip_quotes,
)

__all__ = [
    "PromptBuilder",
    "build_commit_prompt",
    "build_branch_prompt",
    "slugify",
    "strip_quotes",
]
