"""Git utilities for coddie."""

from coddie.git.utils import (
    get_current_branch,
    init_repository,
    run_git,
    GitError,
    GitCommandError,
    GitNotInstalledError,
    GitTimeoutError,
)

__all__ = [
    "get_current_branch",
    "init_repository",
    "run_git",
    "GitError",
    "GitCommandError",
    "GitNotInstalledError",
    "GitTimeoutError",
]
