"""
Feature Numbering

Computes sequential feature numbers from the names already present under the
specs root. The functions here take plain collections of names so they can be
used without touching the filesystem.
"""

import re
from pathlib import Path
from typing import Iterable, List, Set


LEADING_DIGITS = re.compile(r"^[0-9]+")

MIN_FEATURE_NUM = 1
MAX_FEATURE_NUM = 999


def extract_number(name: str) -> int:
    """Return the leading digit run of a directory name as an integer.

    Digits are parsed as base 10, so "010" is ten. Names without a leading
    digit count as 0.
    """
    match = LEADING_DIGITS.match(name)
    if not match:
        return 0
    return int(match.group(0), 10)


def next_feature_number(names: Iterable[str]) -> int:
    """Get the next feature number after the highest existing prefix.

    Args:
        names: Existing feature directory names

    Returns:
        Highest leading number plus one (1 when there are no numbered names)
    """
    highest = 0
    for name in names:
        number = extract_number(name)
        if number > highest:
            highest = number
    return highest + 1


def format_feature_number(number: int) -> str:
    """Zero-pad a feature number to three digits."""
    return f"{number:03d}"


def existing_feature_names(specs_root: Path) -> Set[str]:
    """Names of the immediate subdirectories of the specs root.

    Regular files are ignored. A missing root yields an empty set.
    """
    if not specs_root.is_dir():
        return set()
    return {entry.name for entry in specs_root.iterdir() if entry.is_dir()}


def find_numbered(names: Iterable[str], number: int) -> List[str]:
    """Names whose leading number equals ``number``, sorted."""
    return sorted(
        name for name in names
        if LEADING_DIGITS.match(name) and extract_number(name) == number
    )
