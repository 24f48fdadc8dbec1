"""The scaffolding pipeline.

Stages run strictly in order::

    generate -> apply features -> install -> shadcn -> sentry -> editor -> git

Fatal stages raise :class:`StageError` and nothing is rolled back; the
feature overlay and the shadcn wizard only warn.
"""

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from coddie.core.config import CoddieConfig
from coddie.core.errors import CoddieError, StageError
from coddie.core.overlay import OverlayReport, apply_features, selected_features
from coddie.core.process import run_command
from coddie.core.selection import Selection
from coddie.core.templates import copy_template, templates_root
from coddie.git.utils import init_repository

logger = logging.getLogger(__name__)

SHADCN_COMPONENTS = ["button", "card", "input", "label"]


def generator_command(config: CoddieConfig, path: str) -> List[str]:
    """The create-next-app invocation for ``path``."""
    return [
        config.npx,
        config.generator_package,
        path,
        "--typescript",
        "--tailwind",
        "--eslint",
        "--app",
        "--yes",
    ]


def install_commands(config: CoddieConfig, selection: Selection) -> List[List[str]]:
    """Base install first, then one install per feature that needs packages."""
    commands = [[config.package_manager, "install"]]
    for feature in selected_features(selection):
        if feature.packages:
            commands.append([config.package_manager, "install", *feature.packages])
    return commands


class ScaffoldPipeline:
    """Build one project from a :class:`Selection`."""

    def __init__(
        self,
        selection: Selection,
        config: Optional[CoddieConfig] = None,
        console: Optional[Console] = None,
        cwd: Optional[Path] = None,
    ):
        self.selection = selection
        self.config = config or CoddieConfig()
        self.console = console or Console()
        self.cwd = cwd or Path.cwd()
        self.project_dir = selection.project_dir(self.cwd)
        self.templates_dir = templates_root(self.config.templates_dir)
        self.report = OverlayReport()
        self.branch = "main"

    def run(self) -> OverlayReport:
        """Run every stage.

        Returns:
            Feature report (warnings from the overlay/merge stage)

        Raises:
            StageError: If a fatal stage fails
        """
        self.generate_base_project()
        self.apply_features()
        self.install_dependencies()
        if self.selection.ui:
            self.setup_ui_kit()
        if self.selection.monitoring:
            self.setup_monitoring()
        self.copy_editor_config()
        self.initialize_git()
        return self.report

    # -------------------------------------------------------------------------
    # Stages
    # -------------------------------------------------------------------------

    def generate_base_project(self) -> None:
        with self.console.status("Creating Next.js project..."):
            try:
                run_command(
                    generator_command(self.config, str(self.project_dir)),
                    cwd=self.cwd,
                    timeout=self.config.command_timeout_seconds,
                )
            except CoddieError as e:
                raise StageError("generate", f"Failed to create Next.js project.\n{e}")
        self.console.print("[green]✓[/] Next.js project created.")

    def apply_features(self) -> None:
        with self.console.status("Setting up selected features..."):
            self.report = apply_features(
                self.selection, self.project_dir, self.templates_dir
            )
        for warning in self.report.warnings:
            self.console.print(
                f"[yellow]![/] {warning.feature}: {escape(warning.reason or '')}"
            )
        self.console.print("[green]✓[/] Features configured.")

    def install_dependencies(self) -> None:
        with self.console.status("Installing dependencies..."):
            for command in install_commands(self.config, self.selection):
                try:
                    run_command(
                        command,
                        cwd=self.project_dir,
                        timeout=self.config.command_timeout_seconds,
                    )
                except CoddieError as e:
                    raise StageError("install", f"Failed to install dependencies.\n{e}")
        self.console.print("[green]✓[/] Dependencies installed.")

    def setup_ui_kit(self) -> bool:
        """Run the shadcn wizard; failures only warn."""
        npx = self.config.npx
        self.console.print("🎨 Please select your preferred base color for ShadCN UI:")
        try:
            run_command([npx, "shadcn@latest", "init"], cwd=self.project_dir, interactive=True)
            with self.console.status("Installing basic ShadCN components..."):
                run_command(
                    [npx, "shadcn@latest", "add", *SHADCN_COMPONENTS],
                    cwd=self.project_dir,
                    timeout=self.config.command_timeout_seconds,
                )
        except CoddieError as e:
            logger.warning("shadcn setup failed: %s", e)
            self.console.print(
                "[yellow]![/] Failed to setup ShadCN UI. You can run "
                f"[cyan]{npx} shadcn@latest init[/] manually later."
            )
            return False
        self.console.print("[green]✓[/] ShadCN UI configured with basic components.")
        return True

    def setup_monitoring(self) -> None:
        self.console.print("Setting up Sentry...")
        try:
            run_command(
                [self.config.npx, "@sentry/wizard@latest", "-i", "nextjs"],
                cwd=self.project_dir,
                interactive=True,
            )
        except CoddieError as e:
            raise StageError("monitoring", f"Failed to configure Sentry.\n{e}")
        self.console.print("[green]✓[/] Sentry configured.")

    def copy_editor_config(self) -> None:
        editor = self.selection.editor.value
        source = self.templates_dir / "editor-configs" / editor
        try:
            copy_template(source, self.project_dir)
        except (CoddieError, OSError) as e:
            raise StageError("editor", f"Failed to configure {editor}.\n{e}")
        self.console.print(f"[green]✓[/] {editor} configured.")

    def initialize_git(self) -> None:
        with self.console.status("Initializing Git repository..."):
            try:
                self.branch = init_repository(
                    self.project_dir,
                    self.config.commit_message,
                    timeout=self.config.git_timeout_seconds,
                )
            except CoddieError as e:
                detail = getattr(e, "stderr", "") or str(e)
                raise StageError("git", f"Failed to initialize Git repository.\n{detail}")
        self.console.print("[green]✓[/] Git repository initialized.")
