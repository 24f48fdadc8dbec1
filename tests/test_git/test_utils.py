"""Tests for coddie.git.utils module."""

import subprocess

import pytest

from coddie.core.errors import (
    CoddieError,
    CommandError,
    CommandFailedError,
    CommandNotFoundError,
)
from coddie.git.utils import (
    get_current_branch,
    init_repository,
    run_git,
    GitError,
    GitCommandError,
    GitNotInstalledError,
    GitTimeoutError,
)


class TestRunGit:
    """Tests for run_git()."""

    def test_runs_command(self, git_workspace):
        result = run_git("status", "--porcelain", cwd=git_workspace)
        assert result.returncode == 0

    def test_check_raises_on_failure(self, tmp_path):
        with pytest.raises(GitCommandError) as exc_info:
            run_git("rev-parse", "HEAD", cwd=tmp_path, check=True)
        assert exc_info.value.returncode != 0
        assert exc_info.value.stderr
        assert str(exc_info.value).startswith("Git command failed: git rev-parse HEAD")

    def test_no_check_returns_result(self, tmp_path):
        result = run_git("rev-parse", "HEAD", cwd=tmp_path)
        assert result.returncode != 0

    def test_not_installed(self, monkeypatch, tmp_path):
        def fake_run(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(GitNotInstalledError):
            run_git("status", cwd=tmp_path)

    def test_timeout(self, monkeypatch, tmp_path):
        def fake_run(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd="git", timeout=1)

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(GitTimeoutError) as exc_info:
            run_git("status", cwd=tmp_path, timeout=1)
        assert exc_info.value.timeout == 1


class TestGetCurrentBranch:
    """Tests for get_current_branch()."""

    def test_returns_branch_name(self, git_workspace):
        branch = get_current_branch(git_workspace)
        # Git init creates "main" or "master" depending on config
        assert branch in ("main", "master")


class TestInitRepository:
    """Tests for init_repository()."""

    def test_creates_first_commit(self, tmp_path, git_identity):
        (tmp_path / "package.json").write_text("{}\n")
        (tmp_path / "app").mkdir()
        (tmp_path / "app" / "page.tsx").write_text("export {}\n")

        branch = init_repository(tmp_path, "Initial commit from Coddie CLI")

        assert branch in ("main", "master")
        log = run_git("log", "--format=%s", cwd=tmp_path, check=True)
        assert log.stdout.strip() == "Initial commit from Coddie CLI"
        status = run_git("status", "--porcelain", cwd=tmp_path, check=True)
        assert status.stdout == ""

    def test_nothing_to_commit_fails(self, tmp_path, git_identity):
        with pytest.raises(GitCommandError):
            init_repository(tmp_path, "empty")

    def test_errors_are_coddie_errors(self):
        assert issubclass(GitError, CoddieError)

    def test_errors_share_the_command_family(self):
        assert issubclass(GitError, CommandError)
        assert issubclass(GitNotInstalledError, CommandNotFoundError)
        assert issubclass(GitCommandError, CommandFailedError)
