"""
Feature Workspace

Creates the numbered feature directory, its branch and its spec.md.
"""

import json
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from speckit_feature.config import Settings
from speckit_feature.exceptions import WorkspaceError
from speckit_feature.logging_config import get_logger
from speckit_feature.naming import build_branch_name
from speckit_feature.numbering import (
    existing_feature_names,
    find_numbered,
    format_feature_number,
    next_feature_number,
)
from speckit_feature.vcs import VersionControl

logger = get_logger(__name__)

SPEC_FILENAME = "spec.md"


@dataclass
class FeatureResult:
    """Values reported after a feature has been created."""
    branch_name: str
    spec_file: Path
    feature_num: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "BRANCH_NAME": self.branch_name,
            "SPEC_FILE": str(self.spec_file),
            "FEATURE_NUM": self.feature_num,
        }

    def to_json(self) -> str:
        """Single-line JSON object with string values."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def to_lines(self) -> List[str]:
        return [f"{key}: {value}" for key, value in self.to_dict().items()]


class FeatureWorkspace:
    """Feature bootstrapper bound to one repository."""

    def __init__(self, settings: Settings, vcs: VersionControl):
        """Initialize the workspace.

        Args:
            settings: Resolved settings (repository root, specs dir, template)
            vcs: Version control used for branch creation
        """
        self.settings = settings
        self.vcs = vcs

    @property
    def specs_root(self) -> Path:
        return self.settings.specs_root

    @property
    def template_path(self) -> Path:
        return self.settings.template_path

    def ensure_specs_root(self) -> Path:
        """Create the specs root if it is missing."""
        try:
            self.specs_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WorkspaceError(
                f"Could not create specs directory {self.specs_root}",
                path=str(self.specs_root),
                details=str(e),
            ) from e
        return self.specs_root

    def next_number(self) -> int:
        """Next auto-incremented feature number for this specs root."""
        return next_feature_number(existing_feature_names(self.specs_root))

    def create(self, description: str, feature_num: Optional[int] = None) -> FeatureResult:
        """Create a new feature.

        Picks the feature number, derives the branch name, creates the branch
        (when under version control), the feature directory and spec.md.
        Nothing is rolled back if a later step fails.

        Args:
            description: Free-text feature description
            feature_num: Explicit feature number, or None to auto-increment

        Returns:
            FeatureResult describing what was created
        """
        self.ensure_specs_root()

        if feature_num is None:
            number = self.next_number()
        else:
            number = feature_num
            self._warn_on_collision(number)

        formatted = format_feature_number(number)
        branch_name = build_branch_name(formatted, description, self.settings.branch_words)
        logger.debug("Feature %s -> branch %s", formatted, branch_name)

        self.vcs.create_branch(branch_name)

        feature_dir = self.specs_root / branch_name
        spec_file = feature_dir / SPEC_FILENAME
        try:
            feature_dir.mkdir(parents=True, exist_ok=True)
            self._write_spec(spec_file)
        except OSError as e:
            raise WorkspaceError(
                f"Could not create {spec_file}",
                path=str(feature_dir),
                details=str(e),
            ) from e

        return FeatureResult(branch_name=branch_name, spec_file=spec_file, feature_num=formatted)

    def _write_spec(self, spec_file: Path) -> None:
        if self.template_path.is_file():
            shutil.copyfile(self.template_path, spec_file)
            logger.debug("Copied template %s", self.template_path)
        else:
            spec_file.touch()
            logger.debug("No template at %s; created empty spec", self.template_path)

    def _warn_on_collision(self, number: int) -> None:
        taken = find_numbered(existing_feature_names(self.specs_root), number)
        if taken:
            logger.warning(
                "[specify] Warning: feature number %s already used by %s",
                format_feature_number(number),
                ", ".join(taken),
            )
