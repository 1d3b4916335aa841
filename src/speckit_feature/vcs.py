"""
Version Control Capability

Small interface over the version-control operations the bootstrapper needs:
discovering the repository root and creating a branch. Git is driven through
its command-line interface; a no-op implementation covers directories that
are not under version control.
"""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from speckit_feature.exceptions import VersionControlError
from speckit_feature.logging_config import get_logger

logger = get_logger(__name__)

DISCOVERY_TIMEOUT = 5


class VersionControl(ABC):
    """Capability interface for branch creation and root discovery."""

    @property
    @abstractmethod
    def available(self) -> bool:
        """True when branches can actually be created."""

    @abstractmethod
    def discover_root(self) -> Optional[Path]:
        """Return the repository top-level directory, or None."""

    @abstractmethod
    def create_branch(self, name: str) -> None:
        """Create and switch to a new branch."""


class GitVersionControl(VersionControl):
    """Git-backed implementation using the ``git`` executable."""

    def __init__(self, cwd: Optional[Path] = None, executable: str = "git"):
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.executable = executable

    @property
    def available(self) -> bool:
        return self.discover_root() is not None

    def _run(self, args: List[str], timeout: Optional[int] = None) -> subprocess.CompletedProcess:
        return subprocess.run(
            [self.executable, *args],
            cwd=self.cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )

    def discover_root(self) -> Optional[Path]:
        """Get the work tree top-level via ``git rev-parse --show-toplevel``.

        Returns:
            Top-level path, or None if git is missing or cwd is not a work tree
        """
        try:
            result = self._run(["rev-parse", "--show-toplevel"], timeout=DISCOVERY_TIMEOUT)
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
            # git not installed, not in PATH, or timed out
            return None
        if result.returncode == 0 and result.stdout.strip():
            return Path(result.stdout.strip())
        return None

    def create_branch(self, name: str) -> None:
        """Run ``git checkout -b <name>``.

        Raises:
            VersionControlError: With git's exit code if the checkout fails
        """
        command = ["checkout", "-b", name]
        try:
            result = self._run(command)
        except OSError as e:
            raise VersionControlError(
                f"Could not run git to create branch {name}",
                command=" ".join([self.executable, *command]),
                details=str(e),
            ) from e

        if result.returncode != 0:
            raise VersionControlError(
                f"Failed to create branch {name}",
                returncode=result.returncode,
                command=" ".join([self.executable, *command]),
                details=result.stderr.strip() or None,
                remediation="Pick another --feature-num or delete the existing branch",
            )

        message = result.stderr.strip() or result.stdout.strip()
        if message:
            logger.debug(message)
        logger.debug("Created branch %s", name)


class NullVersionControl(VersionControl):
    """Stand-in for directories without version control."""

    @property
    def available(self) -> bool:
        return False

    def discover_root(self) -> Optional[Path]:
        return None

    def create_branch(self, name: str) -> None:
        logger.warning(
            "[specify] Warning: Git repository not detected; skipped branch creation for %s",
            name,
        )


def detect_version_control(root: Path) -> VersionControl:
    """Pick git when ``root`` is inside a work tree, else the no-op."""
    git = GitVersionControl(root)
    if git.discover_root() is not None:
        return git
    logger.debug("No git work tree at %s", root)
    return NullVersionControl()


def is_git_available() -> bool:
    """Check if git is available on the system.

    Returns:
        True if git command is available
    """
    try:
        result = subprocess.run(
            ["git", "--version"],
            capture_output=True,
            text=True,
            timeout=DISCOVERY_TIMEOUT
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return False
