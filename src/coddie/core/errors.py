"""Exceptions shared across coddie.

Fatal pipeline stages raise :class:`StageError`; external tools raise the
:class:`CommandError` family; the prompt group raises :class:`SetupCancelled`.
"""

from typing import Optional


class CoddieError(Exception):
    """Base exception for coddie."""
    pass


class SetupCancelled(CoddieError):
    """The user backed out before anything touched the filesystem."""
    pass


class TemplateNotFoundError(CoddieError):
    """A bundled template directory is missing or is not a directory."""
    pass


# =============================================================================
# External commands
# =============================================================================

class CommandError(CoddieError):
    """Base exception for external command invocations."""
    pass


class CommandNotFoundError(CommandError):
    """The executable is not installed or not in PATH."""
    pass


class CommandTimeoutError(CommandError):
    """The command did not finish in time."""

    def __init__(self, message: str, timeout: Optional[int]):
        super().__init__(message)
        self.timeout = timeout


class CommandFailedError(CommandError):
    """The command exited with a non-zero code."""

    def __init__(self, message: str, returncode: int, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


# =============================================================================
# Pipeline
# =============================================================================

class StageError(CoddieError):
    """A fatal pipeline stage failed; the run must stop."""

    def __init__(self, stage: str, message: str):
        super().__init__(message)
        self.stage = stage
