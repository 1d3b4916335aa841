"""
Feature Bootstrap Command Line Interface

Main entry point for the create-new-feature command.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from speckit_feature.config import ENV_REPO_ROOT, load_settings
from speckit_feature.exceptions import FeatureError, UsageError, get_error_code
from speckit_feature.logging_config import get_logger, setup_logging
from speckit_feature.validators import (
    join_description,
    validate_description,
    validate_feature_num,
)
from speckit_feature.vcs import GitVersionControl, detect_version_control
from speckit_feature.workspace import FeatureWorkspace

logger = get_logger(__name__)

console = Console(stderr=True)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}


class FeatureCommand(click.Command):
    """Command that reports every usage error with exit status 1."""

    def main(self, args=None, prog_name=None, complete_var=None, standalone_mode=True, **extra):
        try:
            rv = super().main(
                args=args,
                prog_name=prog_name,
                complete_var=complete_var,
                standalone_mode=False,
                **extra,
            )
        except click.ClickException as e:
            e.show()
            sys.exit(1)
        except click.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)

        if not standalone_mode:
            return rv
        sys.exit(rv if isinstance(rv, int) else 0)


def fallback_root(anchor: Optional[Path] = None, cwd: Optional[Path] = None) -> Path:
    """Root to use when neither an explicit path nor git gives one.

    For a source checkout (``src/speckit_feature/cli.py``) this is the
    checkout root, two levels above the package directory. An installed
    copy lives under site-packages, so the current directory is used.
    """
    anchor = (Path(anchor) if anchor else Path(__file__)).resolve()
    parents = anchor.parents
    if len(parents) > 2 and parents[1].name == "src":
        return parents[2]
    return (Path(cwd) if cwd else Path.cwd()).resolve()


def resolve_repo_root(explicit: Optional[str] = None, cwd: Optional[Path] = None) -> Path:
    """Pick the repository root.

    Order: explicit path, git top-level of ``cwd``, then :func:`fallback_root`.
    """
    if explicit:
        return Path(explicit).expanduser().resolve()

    discovered = GitVersionControl(cwd or Path.cwd()).discover_root()
    if discovered is not None:
        return discovered

    return fallback_root(cwd=cwd)


def parse_feature_num(value: Optional[str]) -> Optional[int]:
    """Validate --feature-num and convert it, None when not given."""
    if value is None:
        return None
    valid, message = validate_feature_num(value)
    if not valid:
        raise UsageError(f"Error: {message}", option="--feature-num")
    return int(value, 10)


@click.command(cls=FeatureCommand, context_settings=CONTEXT_SETTINGS)
@click.option("--json", "json_output", is_flag=True, help="Output results as a single-line JSON object")
@click.option("--feature-num", "feature_num", metavar="NUMBER(1-999)", help="Use this feature number instead of auto-incrementing")
@click.option(
    "--repo-root",
    type=click.Path(file_okay=False),
    envvar=ENV_REPO_ROOT,
    help="Repository root (default: git top-level)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.argument("description", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(
    ctx: click.Context,
    json_output: bool,
    feature_num: Optional[str],
    repo_root: Optional[str],
    verbose: bool,
    description: Tuple[str, ...],
):
    """Create a numbered feature branch and spec directory.

    DESCRIPTION is free text; its first three words name the branch.

    Examples:
        create-new-feature "User Authentication System"
        create-new-feature --json "Payment Processing Integration"
        create-new-feature --feature-num 7 "Advanced Search"
    """
    setup_logging(level=logging.DEBUG if verbose else None)

    try:
        number = parse_feature_num(feature_num)
    except UsageError as e:
        console.print(escape(str(e)), style="red")
        sys.exit(get_error_code(e))

    text = join_description(description)
    valid, _ = validate_description(text)
    if not valid:
        click.echo(ctx.get_usage(), err=True)
        sys.exit(1)

    try:
        root = resolve_repo_root(repo_root)
        settings = load_settings(root)
        logger.debug("Repository root: %s", root)
        logger.debug("Config file: %s", settings.config_path or "none (defaults)")
        workspace = FeatureWorkspace(settings, detect_version_control(root))
        result = workspace.create(text, feature_num=number)
    except FeatureError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(get_error_code(e))

    if json_output:
        click.echo(result.to_json())
    else:
        for line in result.to_lines():
            click.echo(line)


if __name__ == "__main__":
    main()
