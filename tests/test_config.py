"""Unit tests for the Config model (skelgen.config).

Tests cover:
- Default values
- Field validation
- from_env() with and without environment variables
- Keyword overrides taking precedence over the environment
- target_dir / validate_output_dir
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from skelgen.config import Config

pytestmark = pytest.mark.unit

_ENV_VARS = (
    "SKELGEN_OUTPUT_DIR",
    "SKELGEN_VALUES_FILE",
    "SKELGEN_INIT_REPO",
    "SKELGEN_GIT",
    "SKELGEN_GO",
    "SKELGEN_COMMAND_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    def test_default_values(self):
        config = Config()
        assert config.output_dir == Path(".")
        assert config.values_file is None
        assert config.init_repo is True
        assert config.git_command == "git"
        assert config.go_command == "go"
        assert config.command_timeout == 300

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(command_timeout=0)

    def test_string_paths_are_coerced(self):
        config = Config(output_dir="/tmp/projects", values_file="values.yml")
        assert config.output_dir == Path("/tmp/projects")
        assert config.values_file == Path("values.yml")


# ---------------------------------------------------------------------------
# from_env
# ---------------------------------------------------------------------------


class TestFromEnv:
    def test_without_environment(self, clean_env):
        assert Config.from_env() == Config()

    def test_reads_every_variable(self, clean_env):
        clean_env.setenv("SKELGEN_OUTPUT_DIR", "/srv/out")
        clean_env.setenv("SKELGEN_VALUES_FILE", "answers.yml")
        clean_env.setenv("SKELGEN_INIT_REPO", "false")
        clean_env.setenv("SKELGEN_GIT", "/usr/local/bin/git")
        clean_env.setenv("SKELGEN_GO", "go1.21")
        clean_env.setenv("SKELGEN_COMMAND_TIMEOUT", "42")

        config = Config.from_env()

        assert config.output_dir == Path("/srv/out")
        assert config.values_file == Path("answers.yml")
        assert config.init_repo is False
        assert config.git_command == "/usr/local/bin/git"
        assert config.go_command == "go1.21"
        assert config.command_timeout == 42

    @pytest.mark.parametrize("raw, expected", [
        ("0", False),
        ("no", False),
        ("OFF", False),
        ("1", True),
        ("yes", True),
    ])
    def test_init_repo_parsing(self, clean_env, raw, expected):
        clean_env.setenv("SKELGEN_INIT_REPO", raw)
        assert Config.from_env().init_repo is expected

    def test_overrides_win(self, clean_env):
        clean_env.setenv("SKELGEN_OUTPUT_DIR", "/from/env")
        config = Config.from_env(output_dir=Path("/from/cli"), init_repo=False)
        assert config.output_dir == Path("/from/cli")
        assert config.init_repo is False

    def test_none_overrides_are_ignored(self, clean_env):
        clean_env.setenv("SKELGEN_OUTPUT_DIR", "/from/env")
        config = Config.from_env(output_dir=None, values_file=None)
        assert config.output_dir == Path("/from/env")
        assert config.values_file is None


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


class TestPaths:
    def test_target_dir(self, tmp_path):
        config = Config(output_dir=tmp_path)
        assert config.target_dir("my-project") == tmp_path / "my-project"

    def test_validate_existing_dir(self, tmp_path):
        Config(output_dir=tmp_path).validate_output_dir()

    def test_validate_missing_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(output_dir=tmp_path / "missing").validate_output_dir()

    def test_validate_file_instead_of_dir(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(NotADirectoryError):
            Config(output_dir=path).validate_output_dir()
