"""The user's answers, captured once and shared read-only by every stage."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional


class AuthProvider(str, Enum):
    """Authentication providers a project can be generated with."""
    NONE = "none"
    SUPABASE = "supabase"
    CLERK = "clerk"

    @property
    def label(self) -> str:
        return {
            AuthProvider.NONE: "None",
            AuthProvider.SUPABASE: "Supabase Auth",
            AuthProvider.CLERK: "Clerk",
        }[self]


class Editor(str, Enum):
    """Editors with bundled project rules."""
    VSCODE = "vscode"
    CURSOR = "cursor"
    WINDSURF = "windsurf"

    @property
    def label(self) -> str:
        return {
            Editor.VSCODE: "VS Code",
            Editor.CURSOR: "Cursor",
            Editor.WINDSURF: "Windsurf",
        }[self]


@dataclass(frozen=True)
class Selection:
    """Everything the pipeline needs to know about the project to build."""
    path: str
    framework: bool = True
    auth: AuthProvider = AuthProvider.NONE
    ui: bool = False
    monitoring: bool = False
    payments: bool = False
    editor: Editor = Editor.VSCODE

    def __post_init__(self):
        # Accept raw values ("clerk", "cursor") as well as enum members
        object.__setattr__(self, "auth", AuthProvider(self.auth))
        object.__setattr__(self, "editor", Editor(self.editor))

    @property
    def has_auth(self) -> bool:
        return self.auth is not AuthProvider.NONE

    def project_dir(self, cwd: Optional[Path] = None) -> Path:
        """Absolute directory the project is built in.

        ``~`` is expanded and relative paths are taken from ``cwd`` (default:
        the current directory). Every stage works from this one value.
        """
        base = Path(cwd) if cwd is not None else Path.cwd()
        return (base / Path(self.path).expanduser()).resolve()

    def describe(self) -> List[str]:
        """Bullet lines describing what will be created."""
        lines = ["Next.js with TypeScript & Tailwind CSS"]
        if self.has_auth:
            lines.append(f"Auth: {self.auth.value}")
        if self.ui:
            lines.append("ShadCN UI")
        if self.monitoring:
            lines.append("Sentry monitoring")
        if self.payments:
            lines.append("Stripe payments")
        lines.append(f"Editor: {self.editor.value}")
        return lines
