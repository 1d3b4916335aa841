"""
Branch Naming

Turns a free-text feature description into a short branch slug.
"""

import re

DEFAULT_BRANCH_WORDS = 3

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_HYPHEN_RUN = re.compile(r"-+")


def slugify(description: str, max_words: int = DEFAULT_BRANCH_WORDS) -> str:
    """Normalize a description into a lowercase, hyphen-delimited slug.

    Every character outside ``[a-z0-9]`` (after lowercasing) becomes a
    hyphen, hyphen runs collapse, and only the first ``max_words`` words
    are kept.

    Args:
        description: Free-text feature description
        max_words: Number of words to keep

    Returns:
        Slug such as "user-authentication-system"
    """
    normalized = _NON_ALNUM.sub("-", description.lower())
    normalized = _HYPHEN_RUN.sub("-", normalized).strip("-")
    words = [word for word in normalized.split("-") if word]
    return "-".join(words[:max_words])


def build_branch_name(
    feature_num: str,
    description: str,
    max_words: int = DEFAULT_BRANCH_WORDS
) -> str:
    """Combine a formatted feature number with the description slug.

    Args:
        feature_num: Zero-padded feature number, e.g. "004"
        description: Free-text feature description
        max_words: Number of description words to keep

    Returns:
        Branch name such as "004-user-authentication-system"
    """
    return f"{feature_num}-{slugify(description, max_words)}"
