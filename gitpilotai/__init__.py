"""
GitPilotAI

AI-drafted commit messages and branch names, committed and pushed for you.
"""

__version__ = "1.2.0"

# Branch name tags the model is asked to prefix with
# Used by: prompts/builder.py, output (branch coloring)
BRANCH_PREFIXES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'perf': 'Performance improvement',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'test': 'Adding or updating tests',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'bug': 'Investigating or working around a bug',
}

BRANCH_PREFIX_NAMES = list(BRANCH_PREFIXES.keys())

# Branches `gitpilotai branch` is allowed to start from
BASE_BRANCHES = ('main', 'master')
