"""Tests for the ``scaffold`` command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from react_scaffold import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def recording(monkeypatch: pytest.MonkeyPatch, make_runner):
    """Replace the subprocess runner used by the CLI; return the instances created."""
    created = []

    def factory():
        fake = make_runner()
        created.append(fake)
        return fake

    monkeypatch.setattr(cli, "SubprocessRunner", factory)
    return created


def test_cli_without_argument_exits_1(runner: CliRunner, in_tmp: Path, recording) -> None:
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 1
    assert "Please supply a project name" in result.output
    assert list(in_tmp.iterdir()) == []


def test_cli_existing_directory_exits_1(runner: CliRunner, in_tmp: Path, recording) -> None:
    (in_tmp / "myapp").mkdir()
    result = runner.invoke(cli.app, ["myapp"])
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert list((in_tmp / "myapp").iterdir()) == []
    assert recording[0].calls == []


def test_cli_success(runner: CliRunner, in_tmp: Path, recording) -> None:
    result = runner.invoke(cli.app, ["myapp"])
    assert result.exit_code == 0, result.output
    assert "Welcome to the Project Setup CLI!" in result.output
    assert "Project setup completed!" in result.output
    assert (in_tmp / "myapp" / "src" / "components" / "atoms" / "Button.tsx").is_file()


def test_cli_command_failure_exits_1(runner: CliRunner, in_tmp: Path, monkeypatch: pytest.MonkeyPatch,
                                     make_runner) -> None:
    monkeypatch.setattr(cli, "SubprocessRunner", lambda: make_runner(fail_at = 1))
    result = runner.invoke(cli.app, ["myapp"])
    assert result.exit_code == 1
    assert "Error executing git init" in result.output
    assert "Project setup completed!" not in result.output


def test_cli_twice(runner: CliRunner, in_tmp: Path, recording) -> None:
    assert runner.invoke(cli.app, ["myapp"]).exit_code == 0
    second = runner.invoke(cli.app, ["myapp"])
    assert second.exit_code == 1
    assert "already exists" in second.output


def test_cli_padded_name_matching_existing_entry_exits_1(runner: CliRunner, in_tmp: Path, recording) -> None:
    (in_tmp / " myapp").mkdir()
    result = runner.invoke(cli.app, [" myapp"])
    assert result.exit_code == 1
    assert sorted(p.name for p in in_tmp.iterdir()) == [" myapp"]
    assert recording[0].calls == []


def test_cli_ignores_extra_arguments(runner: CliRunner, in_tmp: Path, recording) -> None:
    result = runner.invoke(cli.app, ["myapp", "extra"])
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in in_tmp.iterdir()) == ["myapp"]
    assert recording[0].calls[0].argv[3] == "myapp"


def test_cli_dash_leading_name_is_a_project_name(runner: CliRunner, in_tmp: Path, recording) -> None:
    result = runner.invoke(cli.app, ["-app"])
    assert result.exit_code == 0, result.output
    assert (in_tmp / "-app" / "src" / "index.css").is_file()
    assert recording[0].calls[0].argv[3] == "-app"
