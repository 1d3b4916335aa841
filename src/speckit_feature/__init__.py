"""
speckit-feature: bootstrap numbered feature workspaces

Creates the branch, specs directory and spec.md for a new feature in a
spec-driven development workflow.
"""

try:
    from importlib.metadata import version
    __version__ = version("speckit-feature")
except Exception:
    __version__ = "0.0.0"  # Fallback for development

__all__ = ["__version__"]
