"""Shared test fixtures for coddie.

Provides:
- base_project: Directory standing in for a fresh create-next-app output
- fake_templates: Small template tree with env fragments and colliding paths
- git_identity: Commit identity for tests that run real git
- cli_runner: Click CliRunner
- scripted_prompter: Prompter factory that replays canned answers
"""

import subprocess

import click
import pytest
from click.testing import CliRunner


BASE_ENV = "NEXT_PUBLIC_APP_NAME=coddie\n"


class ScriptedPrompter:
    """Prompter returning queued answers in order.

    A queued ``click.Abort`` instance is raised instead of returned.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self, message):
        self.asked.append(message)
        answer = self.answers.pop(0)
        if isinstance(answer, click.Abort):
            raise answer
        return answer

    def text(self, message, default, validate=None):
        answer = self._next(message)
        if answer is None:
            answer = default
        if validate is not None:
            error = validate(answer)
            assert error is None, error
        return answer

    def confirm(self, message, default=False):
        return self._next(message)

    def select(self, message, options):
        answer = self._next(message)
        assert answer in [value for value, _ in options]
        return answer


@pytest.fixture
def base_project(tmp_path):
    """A generated Next.js base project with an .env.example."""
    project = tmp_path / "my-app"
    (project / "app").mkdir(parents=True)
    (project / "app" / "page.tsx").write_text("export default function Home() {}\n")
    (project / ".env.example").write_text(BASE_ENV)
    return project


@pytest.fixture
def fake_templates(tmp_path):
    """Template tree where clerk and stripe both ship lib/shared.ts."""
    root = tmp_path / "templates"

    clerk = root / "auth" / "clerk"
    (clerk / "lib").mkdir(parents=True)
    (clerk / "middleware.ts").write_text("// clerk middleware\n")
    (clerk / "app").mkdir()
    (clerk / "app" / "page.tsx").write_text("// clerk home\n")
    (clerk / "lib" / "shared.ts").write_text("// from clerk\n")
    (clerk / "env.clerk.example").write_text("\nCLERK_SECRET_KEY=sk_test\n\n")

    supabase = root / "auth" / "supabase"
    (supabase / "app" / "(auth)").mkdir(parents=True)
    (supabase / "app" / "(auth)" / "layout.tsx").write_text("// supabase layout\n")
    (supabase / "env.supabase.example").write_text("NEXT_PUBLIC_SUPABASE_URL=url\n")

    stripe = root / "payments" / "stripe"
    (stripe / "lib").mkdir(parents=True)
    (stripe / "lib" / "shared.ts").write_text("// from stripe\n")
    (stripe / "lib" / "stripe.ts").write_text("// stripe client\n")
    (stripe / "env.stripe.example").write_text("STRIPE_SECRET_KEY=sk_test\n")

    for editor in ("vscode", "cursor", "windsurf"):
        config_dir = root / "editor-configs" / editor / f".{editor}"
        config_dir.mkdir(parents=True)
        (config_dir / "rules.md").write_text(f"# {editor} rules\n")

    return root


@pytest.fixture
def git_identity(monkeypatch):
    """Let real git commit without a global user config."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")


@pytest.fixture
def git_workspace(tmp_path, git_identity):
    """A real git repo with one commit."""
    subprocess.run(["git", "init"], cwd=tmp_path, capture_output=True)
    (tmp_path / "README.md").write_text("# Test Project\n")
    subprocess.run(["git", "add", "-A"], cwd=tmp_path, capture_output=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"],
        cwd=tmp_path,
        capture_output=True,
    )
    return tmp_path


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def scripted_prompter():
    """Factory building a ScriptedPrompter from canned answers."""
    return ScriptedPrompter
