"""Git Inspector - Read the diff, recent log and branch of the current repository."""

import logging
import subprocess

logger = logging.getLogger(__name__)

DEFAULT_LOG_COUNT = 30


class GitError(Exception):
    """Raised when one of the repository queries fails."""

    def __init__(self, stage: str, cause: str):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Failed to run git {stage}: {cause}")


def _collapse(text: str) -> str:
    """Fold multi-line git stderr into a single diagnostic line."""
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    return "; ".join(lines)


class GitInspector:
    """Read-only queries against the repository containing `cwd`."""

    def __init__(self, cwd: str | None = None):
        self.cwd = cwd

    def _run_git(self, stage: str, *args: str) -> str:
        """Run a git command and return stdout, tagging failures with `stage`."""
        logger.debug("Running git %s", " ".join(args))
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
        except subprocess.CalledProcessError as e:
            cause = _collapse(e.stderr or "") or f"exit status {e.returncode}"
            raise GitError(stage, cause) from e
        except FileNotFoundError as e:
            raise GitError(stage, "git is not installed or not in PATH") from e

        logger.debug("git %s returned %d chars", args[0], len(result.stdout))
        return result.stdout

    def get_working_diff(self) -> str:
        """Unified diff of the working tree against HEAD. Empty when clean."""
        return self._run_git('diff', 'diff', 'HEAD')

    def get_recent_log(self, n: int = DEFAULT_LOG_COUNT) -> str:
        """Subject lines of the last `n` commits, newest first."""
        if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
            raise ValueError(f"n must be a positive integer, got {n!r}")
        return self._run_git('log', 'log', '--pretty=format:%s', '-n', str(n))

    def get_current_branch(self) -> str:
        """Checked-out branch name, or "" on a detached HEAD."""
        return self._run_git('branch', 'branch', '--show-current').strip()
