"""Running external tools (npx, npm, wizards).

Every stage that shells out goes through :func:`run_command`, so failures
surface as one exception family regardless of the tool involved.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from coddie.core.errors import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)

logger = logging.getLogger(__name__)


def run_command(
    args: Sequence[str],
    cwd: Optional[Path] = None,
    interactive: bool = False,
    check: bool = True,
    timeout: Optional[int] = None,
) -> subprocess.CompletedProcess:
    """Run an external command.

    Args:
        args: Command and its arguments
        cwd: Working directory (defaults to cwd)
        interactive: Hand the terminal to the command instead of capturing output
        check: Raise when the command exits non-zero
        timeout: Seconds before the command is killed (None waits forever)

    Returns:
        CompletedProcess result (stdout/stderr are None when interactive)

    Raises:
        CommandNotFoundError: If the executable is not in PATH
        CommandTimeoutError: If the command times out
        CommandFailedError: If check=True and the command fails
    """
    cmd = list(args)
    cmd_str = " ".join(cmd)
    logger.debug("Running %s (cwd=%s, interactive=%s)", cmd_str, cwd, interactive)

    try:
        if interactive:
            result = subprocess.run(cmd, cwd=cwd or Path.cwd(), timeout=timeout)
        else:
            result = subprocess.run(
                cmd,
                cwd=cwd or Path.cwd(),
                capture_output=True,
                text=True,
                timeout=timeout,
            )
    except FileNotFoundError:
        raise CommandNotFoundError(f"{cmd[0]} is not installed or not in PATH")
    except subprocess.TimeoutExpired:
        raise CommandTimeoutError(
            f"Command timed out after {timeout}s: {cmd_str}",
            timeout=timeout,
        )

    if check and result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise CommandFailedError(
            stderr or f"Command failed with exit code {result.returncode}: {cmd_str}",
            returncode=result.returncode,
            stderr=stderr,
        )
    return result
