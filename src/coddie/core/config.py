"""User configuration for coddie.

Configuration lives in ``~/.coddie/config.json`` (or the file named by the
``CODDIE_CONFIG`` environment variable). Every key is optional; unknown keys
are ignored so older binaries keep working with newer files.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CODDIE_CONFIG"
LOG_LEVEL_ENV_VAR = "CODDIE_LOG_LEVEL"
DEFAULT_CONFIG_PATH = Path.home() / ".coddie" / "config.json"


@dataclass
class CoddieConfig:
    """Tunable values used by the scaffolding pipeline."""
    # Answer collector
    default_project_path: str = "./coddie-app"

    # External tools
    package_manager: str = "npm"
    npx: str = "npx"
    generator_package: str = "create-next-app@latest"
    command_timeout_seconds: int = 600  # 10 minutes per install/generator run

    # Git
    commit_message: str = "Initial commit from Coddie CLI"
    git_timeout_seconds: int = 60

    # Overrides the bundled templates (mostly for template authors)
    templates_dir: Optional[str] = None

    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict) -> "CoddieConfig":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })


def config_path() -> Path:
    """Return the configuration file path, honouring ``CODDIE_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> CoddieConfig:
    """Load configuration, falling back to defaults.

    Args:
        path: Config file to read (defaults to :func:`config_path`)

    Returns:
        Loaded configuration. A missing or corrupt file yields defaults.
    """
    path = path or config_path()
    config = CoddieConfig()

    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            config = CoddieConfig.from_dict(data)
        except (json.JSONDecodeError, TypeError, AttributeError) as e:
            logger.warning("Config file %s is invalid (%s); using defaults", path, e)

    level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level:
        config.log_level = level.upper()

    return config
