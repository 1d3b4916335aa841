"""
Feature Bootstrap Configuration

Resolves settings from built-in defaults, an optional
``.specify/config.yaml`` at the repository root and SPECIFY_* environment
variables, in that order.

Usage:
    from speckit_feature.config import load_settings

    settings = load_settings(repo_root)
    print(settings.specs_root)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from speckit_feature.exceptions import ConfigError
from speckit_feature.logging_config import get_logger
from speckit_feature.naming import DEFAULT_BRANCH_WORDS
from speckit_feature.validators import validate_branch_words

logger = get_logger(__name__)

CONFIG_FILE = Path(".specify") / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "specs_dir": "specs",
    "template": "templates/spec-template.md",
    "branch_words": DEFAULT_BRANCH_WORDS,
}

# Environment variable -> settings key
ENV_OVERRIDES = {
    "SPECIFY_SPECS_DIR": "specs_dir",
    "SPECIFY_TEMPLATE": "template",
    "SPECIFY_BRANCH_WORDS": "branch_words",
}

ENV_REPO_ROOT = "SPECIFY_REPO_ROOT"


@dataclass
class Settings:
    """Resolved settings for one invocation."""

    repo_root: Path
    specs_dir: str = DEFAULTS["specs_dir"]
    template: str = DEFAULTS["template"]
    branch_words: int = DEFAULTS["branch_words"]
    config_path: Optional[Path] = None

    @property
    def specs_root(self) -> Path:
        return self._resolve(self.specs_dir)

    @property
    def template_path(self) -> Path:
        return self._resolve(self.template)

    def _resolve(self, value: str) -> Path:
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return self.repo_root / path


def read_config_file(config_path: Path) -> Dict[str, Any]:
    """Read the YAML config file.

    Args:
        config_path: Path to config.yaml

    Returns:
        Mapping of settings (empty for an empty file)

    Raises:
        ConfigError: If the file cannot be read or is not a mapping
    """
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in {config_path}",
            details=str(e),
            remediation="Fix the YAML syntax or remove the file"
        ) from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}", details=str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration in {config_path} must be a mapping",
            details=f"Got {type(data).__name__}"
        )

    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        logger.debug("Ignoring unknown config keys: %s", ", ".join(unknown))
    return {key: data[key] for key in DEFAULTS if key in data}


def load_settings(
    repo_root: Path,
    environ: Optional[Mapping[str, str]] = None
) -> Settings:
    """Build settings for a repository root.

    Args:
        repo_root: Resolved repository root
        environ: Environment mapping (default: os.environ)

    Returns:
        Settings with file and environment overrides applied
    """
    if environ is None:
        environ = os.environ

    values: Dict[str, Any] = dict(DEFAULTS)
    config_path: Optional[Path] = repo_root / CONFIG_FILE
    if config_path.is_file():
        logger.debug("Loading config from %s", config_path)
        values.update(read_config_file(config_path))
    else:
        config_path = None

    for env_key, key in ENV_OVERRIDES.items():
        if environ.get(env_key):
            values[key] = environ[env_key]

    valid, message = validate_branch_words(values["branch_words"])
    if not valid:
        raise ConfigError(message, config_key="branch_words")

    for key in ("specs_dir", "template"):
        if not isinstance(values[key], str) or not values[key]:
            raise ConfigError(f"{key} must be a non-empty path", config_key=key)

    return Settings(
        repo_root=repo_root,
        specs_dir=values["specs_dir"],
        template=values["template"],
        branch_words=int(values["branch_words"]),
        config_path=config_path,
    )
