"""Feature overlay engine.

Turns a freshly generated base project into the finished tree:

1. ``overlay`` copies each selected feature's template directory on top of
   the project, auth first and payments second, so payments wins whenever both
   ship a file at the same path.
2. ``merge_environment_files`` folds each feature's ``env.<name>.example``
   fragment into the project's ``.env.example`` and deletes the fragment.

Both steps are best effort per feature. A broken template or fragment becomes
a warning in the returned :class:`OverlayReport` and the remaining features
are still processed.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from coddie.core.errors import TemplateNotFoundError
from coddie.core.selection import AuthProvider, Selection
from coddie.core.templates import copy_template, templates_root

logger = logging.getLogger(__name__)

ENV_EXAMPLE = ".env.example"

STAGE_OVERLAY = "overlay"
STAGE_ENV = "env"


# =============================================================================
# Features
# =============================================================================

@dataclass(frozen=True)
class Feature:
    """A template-backed feature that can be layered onto a project."""
    name: str
    template: str  # relative to the templates root
    packages: Tuple[str, ...] = ()

    @property
    def fragment_name(self) -> str:
        return f"env.{self.name}.example"


FEATURES: Dict[str, Feature] = {
    "supabase": Feature(
        "supabase", "auth/supabase", ("@supabase/supabase-js", "@supabase/ssr")
    ),
    "clerk": Feature("clerk", "auth/clerk", ("@clerk/nextjs",)),
    "stripe": Feature("stripe", "payments/stripe", ("stripe",)),
}


def selected_features(selection: Selection) -> List[Feature]:
    """Features implied by ``selection``, in overlay order (auth, payments)."""
    features = []
    if selection.auth is not AuthProvider.NONE:
        features.append(FEATURES[selection.auth.value])
    if selection.payments:
        features.append(FEATURES["stripe"])
    return features


# =============================================================================
# Report
# =============================================================================

@dataclass(frozen=True)
class FeatureOutcome:
    """Result of processing one feature in one stage."""
    feature: str
    stage: str
    ok: bool = True
    reason: Optional[str] = None


@dataclass
class OverlayReport:
    """Outcomes collected while overlaying and merging features."""
    outcomes: List[FeatureOutcome] = field(default_factory=list)
    env_written: bool = False

    @property
    def warnings(self) -> List[FeatureOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.warnings

    def succeeded(self, feature: str, stage: str) -> None:
        self.outcomes.append(FeatureOutcome(feature, stage))

    def warn(self, feature: str, stage: str, reason: str) -> None:
        logger.warning("%s (%s): %s", feature, stage, reason)
        self.outcomes.append(FeatureOutcome(feature, stage, ok=False, reason=reason))

    def extend(self, other: "OverlayReport") -> None:
        self.outcomes.extend(other.outcomes)
        self.env_written = self.env_written or other.env_written


# =============================================================================
# Overlay
# =============================================================================

def overlay(
    selection: Selection,
    target_dir: Path,
    templates_dir: Optional[Path] = None,
) -> OverlayReport:
    """Copy every selected feature's template directory into ``target_dir``.

    Args:
        selection: The user's answers
        target_dir: An already generated project
        templates_dir: Templates root (defaults to the bundled templates)

    Returns:
        Report with one overlay outcome per selected feature
    """
    root = templates_dir or templates_root()
    report = OverlayReport()

    for feature in selected_features(selection):
        try:
            copy_template(root / feature.template, target_dir)
        except (TemplateNotFoundError, OSError) as e:
            report.warn(feature.name, STAGE_OVERLAY, str(e))
            continue
        report.succeeded(feature.name, STAGE_OVERLAY)

    return report


# =============================================================================
# Environment merge
# =============================================================================

def merge_env_content(base: str, fragments: Sequence[str]) -> str:
    """Join ``base`` and ``fragments`` with one blank line between pieces.

    Each piece is trimmed and empty pieces are dropped, so the result is
    trimmed too and empty when there is nothing to write.
    """
    pieces = [piece.strip() for piece in [base, *fragments]]
    return "\n\n".join(piece for piece in pieces if piece)


def merge_environment_files(target_dir: Path, selection: Selection) -> OverlayReport:
    """Fold the selected features' env fragments into ``.env.example``.

    Each fragment that is read successfully is removed from ``target_dir``
    once the merged file has been written. The merged file is only written
    when at least one fragment was read, so a project without features keeps
    whatever ``.env.example`` it had (or none).

    Nothing here raises: an unreadable base file counts as empty and a failed
    write leaves the fragments in place, both recorded as warnings.

    Args:
        target_dir: Project directory the templates were overlaid onto
        selection: The user's answers

    Returns:
        Report with env outcomes for the selected features
    """
    report = OverlayReport()
    env_path = target_dir / ENV_EXAMPLE

    try:
        base = env_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        base = ""
    except (OSError, UnicodeDecodeError) as e:
        report.warn(ENV_EXAMPLE, STAGE_ENV, f"Could not read {ENV_EXAMPLE}: {e}")
        base = ""

    fragments = []
    merged_from: List[Tuple[Feature, Path]] = []
    for feature in selected_features(selection):
        fragment_path = target_dir / feature.fragment_name
        try:
            fragments.append(fragment_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            report.warn(
                feature.name, STAGE_ENV, f"Failed to process {feature.name} env: {e}"
            )
            continue
        merged_from.append((feature, fragment_path))

    if not merged_from:
        return report

    merged = merge_env_content(base, fragments)
    if merged:
        try:
            env_path.write_text(merged, encoding="utf-8")
        except OSError as e:
            for feature, _ in merged_from:
                report.warn(
                    feature.name, STAGE_ENV, f"Could not write {ENV_EXAMPLE}: {e}"
                )
            return report
        report.env_written = True

    for feature, fragment_path in merged_from:
        try:
            fragment_path.unlink()
        except OSError as e:
            report.warn(
                feature.name, STAGE_ENV, f"Could not remove {feature.fragment_name}: {e}"
            )
            continue
        logger.debug("Merged %s into %s", fragment_path, env_path)
        report.succeeded(feature.name, STAGE_ENV)
    return report


def apply_features(
    selection: Selection,
    target_dir: Path,
    templates_dir: Optional[Path] = None,
) -> OverlayReport:
    """Overlay the selected templates, then merge their env fragments."""
    report = overlay(selection, target_dir, templates_dir)
    report.extend(merge_environment_files(target_dir, selection))
    return report
