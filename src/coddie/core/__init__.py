"""Core modules for coddie.

This package contains the pieces the pipeline is built from:
- selection: The user's answers
- overlay: Feature template overlay and .env.example merge
- templates: Bundled template lookup and copying
- process: External command runner
- config: User configuration
"""

from coddie.core.selection import AuthProvider, Editor, Selection

from coddie.core.overlay import (
    FEATURES,
    Feature,
    FeatureOutcome,
    OverlayReport,
    apply_features,
    merge_env_content,
    merge_environment_files,
    overlay,
    selected_features,
)

from coddie.core.errors import (
    CoddieError,
    CommandError,
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
    SetupCancelled,
    StageError,
    TemplateNotFoundError,
)

__all__ = [
    # Selection
    "AuthProvider",
    "Editor",
    "Selection",
    # Overlay
    "FEATURES",
    "Feature",
    "FeatureOutcome",
    "OverlayReport",
    "apply_features",
    "merge_env_content",
    "merge_environment_files",
    "overlay",
    "selected_features",
    # Errors
    "CoddieError",
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "CommandTimeoutError",
    "SetupCancelled",
    "StageError",
    "TemplateNotFoundError",
]
