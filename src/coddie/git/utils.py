"""Git helpers for coddie.

Only what the scaffolder needs: run a git command, set up the first commit
of a fresh project, and read back the branch it landed on. Commands go
through :func:`coddie.core.process.run_command`; the git exceptions are
members of its :class:`CommandError` family.
"""

import subprocess
from pathlib import Path
from typing import Optional

from coddie.core.errors import (
    CommandError,
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from coddie.core.process import run_command

# Default timeout for git operations (seconds)
DEFAULT_GIT_TIMEOUT = 60


# =============================================================================
# Exceptions
# =============================================================================

class GitError(CommandError):
    """Base exception for Git operations."""
    pass


class GitNotInstalledError(GitError, CommandNotFoundError):
    """Git is not installed or not in PATH."""
    pass


class GitTimeoutError(GitError, CommandTimeoutError):
    """Git command timed out."""
    pass


class GitCommandError(GitError, CommandFailedError):
    """Git command failed with non-zero exit code."""
    pass


# =============================================================================
# Core Functions
# =============================================================================

def run_git(
    *args,
    cwd: Optional[Path] = None,
    check: bool = False,
    timeout: int = DEFAULT_GIT_TIMEOUT
) -> subprocess.CompletedProcess:
    """Run a git command with standard options.

    Args:
        *args: Git command arguments
        cwd: Working directory
        check: Raise exception on failure
        timeout: Command timeout in seconds

    Returns:
        CompletedProcess result

    Raises:
        GitNotInstalledError: If git is not installed
        GitTimeoutError: If command times out
        GitCommandError: If check=True and command fails
    """
    cmd = ["git"] + list(args)
    cmd_str = " ".join(cmd)

    try:
        return run_command(cmd, cwd=cwd, check=check, timeout=timeout)
    except CommandNotFoundError:
        raise GitNotInstalledError(
            "Git is not installed or not in PATH. "
            "Please install git: https://git-scm.com/downloads"
        )
    except CommandTimeoutError:
        raise GitTimeoutError(
            f"Git command timed out after {timeout}s: {cmd_str}",
            timeout=timeout
        )
    except CommandFailedError as e:
        raise GitCommandError(
            f"Git command failed: {cmd_str}\n{e.stderr}",
            returncode=e.returncode,
            stderr=e.stderr
        )


def get_current_branch(path: Optional[Path] = None) -> str:
    """Get current Git branch name.

    Raises:
        GitNotInstalledError: If git is not installed
        GitTimeoutError: If command times out
    """
    result = run_git("rev-parse", "--abbrev-ref", "HEAD", cwd=path)
    return result.stdout.strip()


def init_repository(
    path: Path,
    message: str,
    timeout: int = DEFAULT_GIT_TIMEOUT,
) -> str:
    """Initialize a repository at ``path`` and commit everything in it.

    Runs ``git init``, ``git add .`` and ``git commit`` in that order and stops
    at the first failure.

    Args:
        path: Project directory
        message: Commit message for the first commit
        timeout: Per-command timeout in seconds

    Returns:
        Name of the branch holding the commit

    Raises:
        GitError: If any of the three commands fails
    """
    run_git("init", cwd=path, check=True, timeout=timeout)
    run_git("add", ".", cwd=path, check=True, timeout=timeout)
    run_git("commit", "-m", message, cwd=path, check=True, timeout=timeout)
    return get_current_branch(path) or "main"
