"""
Conventional Commits AI

Generate conventional commit messages from the working tree with an LLM.
"""

__version__ = "0.1.0"

# Centralized commit types - single source of truth
# Used by: prompts/builder.py (system prompt), cli/main.py (format check)
COMMIT_TYPES = {
    'feat': 'A new feature',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Changes that do not affect the meaning of the code (white-space, formatting, missing semi-colons, etc)',
    'refactor': 'A code change that neither fixes a bug nor adds a feature',
    'perf': 'A code change that improves performance',
    'test': 'Adding missing tests or correcting existing tests',
    'build': 'Changes that affect the build system or external dependencies (example scopes: gulp, broccoli, npm)',
    'ci': 'Changes to our CI configuration files and scripts (example scopes: Travis, Circle, BrowserStack, SauceLabs)',
    'chore': "Other changes that don't modify src or test files",
    'revert': 'Reverts a previous commit',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
