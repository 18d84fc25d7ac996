"""Tests for the command line entry point (skelgen.cli)."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest

from skelgen import __version__
from skelgen.cli import build_parser, main
from skelgen.options.models import OptionValues

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SKELGEN_OUTPUT_DIR", "SKELGEN_VALUES_FILE", "SKELGEN_INIT_REPO"):
        monkeypatch.delenv(name, raising=False)


class TestParser:
    def test_new_arguments(self, tmp_path):
        args = build_parser().parse_args(
            ["new", "-c", str(tmp_path / "v.yml"), "-o", str(tmp_path), "--no-init"]
        )
        assert args.command == "new"
        assert args.config == tmp_path / "v.yml"
        assert args.output == tmp_path
        assert args.no_init is True

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_new_from_file(self, values_file, output_dir, capsys):
        code = main(["new", "-c", str(values_file), "-o", str(output_dir), "--no-init"])

        assert code == 0
        assert (output_dir / "test-project" / "Makefile").is_file()
        assert "Project created" in capsys.readouterr().out

    def test_new_interactive(self, output_dir, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main(["new", "-o", str(output_dir), "--no-init"]) == 0
        assert (output_dir / "awesome-go-project" / "README.md").is_file()

    def test_save_values_round_trip(self, tmp_path, output_dir, monkeypatch):
        saved = tmp_path / "answers.yml"
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main(["new", "-o", str(output_dir), "--no-init", "--save-values", str(saved)]) == 0

        values = OptionValues.from_yaml(saved)
        assert values.base["projectSlug"] == "awesome-go-project"
        assert values.extensions["grpc"] == {"grpc": False}

        again = tmp_path / "again"
        again.mkdir()
        assert main(["new", "-c", str(saved), "-o", str(again), "--no-init"]) == 0
        assert sorted(p.name for p in (again / "awesome-go-project").iterdir()) == sorted(
            p.name for p in (output_dir / "awesome-go-project").iterdir()
        )

    def test_runs_bootstrap_by_default(self, values_file, output_dir):
        with patch("skelgen.scaffolder.generator.init_repository") as init:
            assert main(["new", "-c", str(values_file), "-o", str(output_dir)]) == 0
        init.assert_called_once()

    def test_invalid_values_file(self, tmp_path, output_dir, capsys):
        path = tmp_path / "values.yml"
        path.write_text("base:\n  projectName: Only a name\n")

        assert main(["new", "-c", str(path), "-o", str(output_dir)]) == 1
        assert "parameter not set: projectSlug" in capsys.readouterr().out
        assert list(output_dir.iterdir()) == []

    def test_malformed_yaml(self, tmp_path, output_dir, capsys):
        path = tmp_path / "values.yml"
        path.write_text("base: [unclosed\n")
        assert main(["new", "-c", str(path), "-o", str(output_dir)]) == 1
        assert "Error" in capsys.readouterr().out

    def test_missing_values_file(self, tmp_path, output_dir):
        assert main(["new", "-c", str(tmp_path / "absent.yml"), "-o", str(output_dir)]) == 1

    def test_missing_output_dir(self, values_file, tmp_path):
        assert main(["new", "-c", str(values_file), "-o", str(tmp_path / "absent"), "--no-init"]) == 1

    def test_existing_project(self, values_file, output_dir, capsys):
        (output_dir / "test-project").mkdir()
        assert main(["new", "-c", str(values_file), "-o", str(output_dir), "--no-init"]) == 1
        assert "already exists" in capsys.readouterr().out

    def test_keyboard_interrupt(self, output_dir):
        with patch("skelgen.cli._handle_new", side_effect=KeyboardInterrupt):
            assert main(["new", "-o", str(output_dir)]) == 130
