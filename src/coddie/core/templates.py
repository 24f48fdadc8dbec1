"""Locating and copying the template directories bundled with coddie."""

import logging
import shutil
from importlib.resources import files
from pathlib import Path
from typing import Optional

from coddie.core.errors import TemplateNotFoundError

logger = logging.getLogger(__name__)


def templates_root(override: Optional[str] = None) -> Path:
    """Return the directory holding the feature templates.

    Args:
        override: Alternative root (``templates_dir`` from the config)
    """
    if override:
        return Path(override).expanduser().resolve()
    return Path(str(files("coddie").joinpath("templates")))


def copy_template(source: Path, target: Path) -> None:
    """Copy ``source`` recursively into ``target``.

    Files already present in ``target`` at the same relative path are
    overwritten; everything else in ``target`` is left alone.

    Raises:
        TemplateNotFoundError: If ``source`` is not a directory
        OSError: If copying fails part way
    """
    if not source.is_dir():
        raise TemplateNotFoundError(f"Template directory not found: {source}")

    logger.debug("Copying template %s -> %s", source, target)
    shutil.copytree(source, target, dirs_exist_ok=True)
