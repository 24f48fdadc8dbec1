"""Tests for coddie.core.selection."""

import dataclasses

import pytest

from coddie.core.selection import AuthProvider, Editor, Selection


class TestSelection:
    """Tests for the Selection record."""

    def test_defaults(self):
        selection = Selection(path="app")
        assert selection.auth is AuthProvider.NONE
        assert selection.editor is Editor.VSCODE
        assert selection.framework is True
        assert selection.has_auth is False

    def test_accepts_raw_values(self):
        selection = Selection(path="app", auth="clerk", editor="windsurf")
        assert selection.auth is AuthProvider.CLERK
        assert selection.editor is Editor.WINDSURF
        assert selection.has_auth is True

    def test_rejects_unknown_provider(self):
        with pytest.raises(ValueError):
            Selection(path="app", auth="auth0")

    def test_is_immutable(self):
        selection = Selection(path="app")
        with pytest.raises(dataclasses.FrozenInstanceError):
            selection.payments = True

    def test_describe_everything(self):
        selection = Selection(
            path="app", auth="supabase", ui=True, monitoring=True,
            payments=True, editor="cursor",
        )
        assert selection.describe() == [
            "Next.js with TypeScript & Tailwind CSS",
            "Auth: supabase",
            "ShadCN UI",
            "Sentry monitoring",
            "Stripe payments",
            "Editor: cursor",
        ]

    def test_describe_minimal(self):
        assert Selection(path="app").describe() == [
            "Next.js with TypeScript & Tailwind CSS",
            "Editor: vscode",
        ]

    def test_project_dir_is_relative_to_cwd(self, tmp_path):
        assert Selection(path="web").project_dir(tmp_path) == (tmp_path / "web").resolve()

    def test_project_dir_expands_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        selection = Selection(path="~/web")
        assert selection.project_dir(tmp_path / "work") == (tmp_path / "home" / "web").resolve()


class TestLabels:
    """Human labels used by the select prompts."""

    def test_auth_labels(self):
        assert [p.label for p in AuthProvider] == ["None", "Supabase Auth", "Clerk"]

    def test_editor_labels(self):
        assert [e.label for e in Editor] == ["VS Code", "Cursor", "Windsurf"]
