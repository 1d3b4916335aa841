"""
Feature Bootstrap Validators

Input validation for command-line values.
"""

from typing import Optional, Sequence, Tuple

from speckit_feature.numbering import MAX_FEATURE_NUM, MIN_FEATURE_NUM


def validate_feature_num(value: Optional[str]) -> Tuple[bool, str]:
    """Validate an explicit --feature-num value.

    Args:
        value: Raw option value, None when the option had no argument

    Returns:
        Tuple of (is_valid, message)
    """
    if not value or value.startswith("-"):
        return False, f"--feature-num requires a number ({MIN_FEATURE_NUM}-{MAX_FEATURE_NUM})"

    if not (value.isascii() and value.isdigit()):
        return False, "--feature-num must be a positive integer"

    number = int(value, 10)
    if number < MIN_FEATURE_NUM or number > MAX_FEATURE_NUM:
        return False, f"--feature-num must be between {MIN_FEATURE_NUM} and {MAX_FEATURE_NUM}"

    return True, "Valid feature number"


def validate_branch_words(value: object) -> Tuple[bool, str]:
    """Validate the configured number of slug words."""
    if isinstance(value, bool):
        return False, "branch_words must be a positive integer"
    try:
        words = int(value)
    except (TypeError, ValueError):
        return False, "branch_words must be a positive integer"
    if words < 1:
        return False, "branch_words must be at least 1"
    return True, "Valid word count"


def join_description(tokens: Sequence[str]) -> str:
    """Join positional tokens into one description, like a shell "$*"."""
    return " ".join(tokens)


def validate_description(description: str) -> Tuple[bool, str]:
    """Validate a feature description.

    Args:
        description: Joined description text

    Returns:
        Tuple of (is_valid, message)
    """
    if not description:
        return False, "Feature description is required"
    return True, "Valid description"
