"""
Feature Bootstrap Exceptions

Custom exception types carrying remediation hints and CLI exit codes.
"""

from typing import Optional


class FeatureError(Exception):
    """Base exception for all feature bootstrap errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        """Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix for the user
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class UsageError(FeatureError):
    """Bad command-line input (missing description, invalid flag value)."""

    def __init__(
        self,
        message: str,
        option: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.option = option
        super().__init__(message, remediation, details)


class ConfigError(FeatureError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.config_key = config_key
        if not remediation and config_key:
            remediation = f"Check '{config_key}' in .specify/config.yaml or the matching SPECIFY_* variable"
        super().__init__(message, remediation, details)


class WorkspaceError(FeatureError):
    """Filesystem errors while creating the feature directory or spec file."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.path = path
        if not remediation and path:
            remediation = f"Check that {path} is writable"
        super().__init__(message, remediation, details)


class VersionControlError(FeatureError):
    """Git command failures. Carries git's own exit code."""

    def __init__(
        self,
        message: str,
        returncode: int = 1,
        command: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.returncode = returncode
        self.command = command
        super().__init__(message, remediation, details)


# Error code mapping for CLI exit codes
ERROR_CODES = {
    UsageError: 1,
    ConfigError: 1,
    WorkspaceError: 1,
    FeatureError: 1,
}


def get_error_code(error: Exception) -> int:
    """Get the exit code for an error type."""
    if isinstance(error, VersionControlError):
        return error.returncode or 1
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1
