"""Tests for settings resolution."""

import pytest

from speckit_feature.config import CONFIG_FILE, load_settings, read_config_file
from speckit_feature.exceptions import ConfigError


def write_config(root, text):
    path = root / CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestLoadSettings:
    """Test defaults and overrides."""

    def test_defaults(self, repo_dir):
        settings = load_settings(repo_dir, environ={})

        assert settings.specs_root == repo_dir / "specs"
        assert settings.template_path == repo_dir / "templates" / "spec-template.md"
        assert settings.branch_words == 3
        assert settings.config_path is None

    def test_config_file(self, repo_dir):
        path = write_config(repo_dir, "specs_dir: docs/features\nbranch_words: 4\n")

        settings = load_settings(repo_dir, environ={})

        assert settings.specs_root == repo_dir / "docs" / "features"
        assert settings.branch_words == 4
        assert settings.config_path == path

    def test_env_overrides_file(self, repo_dir):
        write_config(repo_dir, "specs_dir: docs/features\n")
        environ = {"SPECIFY_SPECS_DIR": "other", "SPECIFY_BRANCH_WORDS": "2"}

        settings = load_settings(repo_dir, environ=environ)

        assert settings.specs_root == repo_dir / "other"
        assert settings.branch_words == 2

    def test_absolute_template(self, repo_dir, tmp_path):
        template = tmp_path / "shared" / "tpl.md"
        settings = load_settings(repo_dir, environ={"SPECIFY_TEMPLATE": str(template)})

        assert settings.template_path == template

    def test_reads_os_environ(self, repo_dir, monkeypatch):
        monkeypatch.setenv("SPECIFY_SPECS_DIR", "from-env")

        settings = load_settings(repo_dir)

        assert settings.specs_root == repo_dir / "from-env"

    def test_invalid_branch_words(self, repo_dir):
        with pytest.raises(ConfigError) as exc_info:
            load_settings(repo_dir, environ={"SPECIFY_BRANCH_WORDS": "zero"})
        assert exc_info.value.config_key == "branch_words"

    def test_invalid_specs_dir_type(self, repo_dir):
        write_config(repo_dir, "specs_dir: [a, b]\n")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(repo_dir, environ={})
        assert exc_info.value.config_key == "specs_dir"


class TestReadConfigFile:
    """Test YAML config parsing."""

    def test_empty_file(self, repo_dir):
        path = write_config(repo_dir, "")
        assert read_config_file(path) == {}

    def test_unknown_keys_dropped(self, repo_dir):
        path = write_config(repo_dir, "template: t.md\ncolour: blue\n")
        assert read_config_file(path) == {"template": "t.md"}

    def test_invalid_yaml(self, repo_dir):
        path = write_config(repo_dir, "specs_dir: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            read_config_file(path)
        assert "Invalid YAML" in exc_info.value.message

    def test_not_a_mapping(self, repo_dir):
        path = write_config(repo_dir, "- just\n- a list\n")

        with pytest.raises(ConfigError) as exc_info:
            read_config_file(path)
        assert "mapping" in exc_info.value.message
