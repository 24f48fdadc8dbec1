"""Answer collector - asks the questions and builds a :class:`Selection`.

The questions run as one group: interrupting any of them (Ctrl-C or EOF)
cancels the whole run before anything is written to disk.
"""

from typing import Callable, List, Optional, Protocol, Sequence, Tuple, TypeVar

import click
from rich.console import Console

from coddie.core.errors import SetupCancelled
from coddie.core.selection import AuthProvider, Editor, Selection

T = TypeVar("T")

CANCELLED_MESSAGE = "Operation cancelled."
FRAMEWORK_MESSAGE = "Other frameworks coming soon! Use --next flag for now."
SENTRY_MESSAGE = "Setup cancelled. Create a Sentry account and run the command again."


class Prompter(Protocol):
    """The three kinds of question the collector asks."""

    def text(
        self,
        message: str,
        default: str,
        validate: Optional[Callable[[str], Optional[str]]] = None,
    ) -> str:
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        ...

    def select(self, message: str, options: Sequence[Tuple[T, str]]) -> T:
        ...


class ClickPrompter:
    """Terminal prompts backed by click."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def text(self, message, default, validate=None):
        def check(value: str) -> str:
            value = value.strip()
            if validate is not None:
                error = validate(value)
                if error:
                    raise click.UsageError(error)
            return value

        return click.prompt(message, default=default, value_proc=check)

    def confirm(self, message, default=False):
        return click.confirm(message, default=default)

    def select(self, message, options):
        self.console.print(f"[bold]{message}[/]")
        for index, (_, label) in enumerate(options, start=1):
            self.console.print(f"  [cyan]{index}[/]) {label}")
        choice = click.prompt(
            "Choose",
            type=click.IntRange(1, len(options)),
            default=1,
        )
        return options[choice - 1][0]


def validate_project_path(value: str) -> Optional[str]:
    """Return an error message if ``value`` cannot hold a new project."""
    if not value:
        return "Project path is required."
    resolved = Selection(path=value).project_dir()
    if resolved.is_dir() and any(resolved.iterdir()):
        return f"Directory at {resolved} is not empty."
    return None


def collect_selection(
    prompter: Prompter,
    default_path: str,
    ask_framework: bool = True,
) -> Selection:
    """Ask every question and return the answers.

    Args:
        prompter: Where the answers come from
        default_path: Suggested project path
        ask_framework: Ask whether to use Next.js (skipped with --next)

    Raises:
        SetupCancelled: If the user interrupts or declines Next.js
    """
    try:
        path = prompter.text(
            "Where should we create your project?",
            default=default_path,
            validate=validate_project_path,
        )
        framework = True
        if ask_framework:
            framework = prompter.confirm(
                "Use the default installation for Next.js?", default=True
            )
        auth = prompter.select(
            "Select an Authentication provider",
            _options(AuthProvider),
        )
        ui = prompter.confirm("Install ShadCN UI?")
        monitoring = prompter.confirm("Install Sentry for error logging?")
        payments = prompter.confirm("Install Stripe for payments?")
        editor = prompter.select(
            "What is your current editor (For Project Rules)",
            _options(Editor),
        )
    except (click.Abort, EOFError, KeyboardInterrupt):
        raise SetupCancelled(CANCELLED_MESSAGE)

    if not framework:
        raise SetupCancelled(FRAMEWORK_MESSAGE)

    return Selection(
        path=path,
        framework=framework,
        auth=auth,
        ui=ui,
        monitoring=monitoring,
        payments=payments,
        editor=editor,
    )


def confirm_monitoring_account(prompter: Prompter, console: Console) -> None:
    """Make sure the user has a Sentry account before the wizard needs one.

    Raises:
        SetupCancelled: If the user says no or interrupts
    """
    console.print(
        "[yellow]![/] Sentry setup requires a Sentry account. Make sure you have "
        "one at https://sentry.io before proceeding."
    )
    try:
        proceed = prompter.confirm(
            "Do you have a Sentry account and want to continue?"
        )
    except (click.Abort, EOFError, KeyboardInterrupt):
        raise SetupCancelled(CANCELLED_MESSAGE)
    if not proceed:
        raise SetupCancelled(SENTRY_MESSAGE)


def _options(enum_cls) -> List[Tuple]:
    return [(member, member.label) for member in enum_cls]
