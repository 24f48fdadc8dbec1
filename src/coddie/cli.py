"""Main CLI entry point for coddie."""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from coddie import __version__
from coddie.core.config import load_config
from coddie.core.errors import SetupCancelled, StageError
from coddie.pipeline import ScaffoldPipeline
from coddie.prompts import ClickPrompter, collect_selection, confirm_monitoring_account
from coddie.summary import build_next_steps

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.command()
@click.argument("path", required=False)
@click.option(
    "--next", "use_next",
    is_flag=True,
    help="Use Next.js without asking",
)
@click.version_option(version=__version__, prog_name="coddie")
def main(path: str, use_next: bool):
    """coddie - Scaffold a Next.js app with auth, payments and tooling.

    PATH is where the project is created (asked interactively if omitted).

    \b
    Features:
      Auth         Supabase or Clerk
      UI           ShadCN UI
      Monitoring   Sentry
      Payments     Stripe
      Editor       VS Code, Cursor or Windsurf project rules
    """
    config = load_config()
    _setup_logging(config.log_level)

    console.print(Panel.fit("[bold black on cyan] Coddie App [/]", border_style="cyan"))
    console.print("[bold]Create a new project[/]")

    prompter = ClickPrompter(console)
    try:
        selection = collect_selection(
            prompter,
            default_path=path or config.default_project_path,
            ask_framework=not use_next,
        )
        console.print(f"\nCreating [cyan]{escape(selection.path)}[/] with:")
        for line in selection.describe():
            console.print(f"  • {line}")
        if selection.monitoring:
            confirm_monitoring_account(prompter, console)
    except SetupCancelled as e:
        console.print(f"[yellow]{e}[/]")
        sys.exit(0)

    pipeline = ScaffoldPipeline(selection, config=config, console=console)
    try:
        pipeline.run()
    except StageError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    console.print(Panel(
        escape(build_next_steps(selection, branch=pipeline.branch)),
        title="Project created successfully! 🎉",
        border_style="green",
    ))


if __name__ == "__main__":
    main()
