"""Git Operations Package"""

from conventional_commits_ai.git.inspector import GitInspector, GitError, DEFAULT_LOG_COUNT

__all__ = [
    "GitInspector",
    "GitError",
    "DEFAULT_LOG_COUNT",
]
