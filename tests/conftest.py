"""Shared fixtures: a recording command runner that never touches npm."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from react_scaffold.exceptions import ExternalCommandError
from react_scaffold.runner import CommandSpec

BASE_MANIFEST = {"name": "demo", "private": True, "version": "0.0.0", "type": "module",
                 "scripts": {"dev": "vite", "build": "tsc && vite build", "lint": "eslint ."},
                 "dependencies": {"react": "^18.2.0", "react-dom": "^18.2.0"},
                 "devDependencies": {"vite": "^4.4.5"}, }


class FakeRunner:
    """Record every command; optionally fail at a given call index.

    The bootstrap command (``npm init ...``) is simulated by creating the
    project directory with ``src/`` and a ``package.json``.
    """

    def __init__(self, fail_at: int | None = None, returncode: int = 1) -> None:
        self.fail_at = fail_at
        self.returncode = returncode
        self.calls: list[CommandSpec] = []

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [c.argv for c in self.calls]

    def run(self, spec: CommandSpec) -> None:
        assert spec.cwd.is_dir(), f"cwd {spec.cwd} must exist before running {spec.display}"
        index = len(self.calls)
        self.calls.append(spec)
        if index == self.fail_at:
            raise ExternalCommandError(spec.display, spec.cwd, self.returncode)
        if spec.argv[:2] == ("npm", "init"):
            project = spec.cwd / spec.argv[3]
            (project / "src").mkdir(parents = True)
            (project / "package.json").write_text(json.dumps(BASE_MANIFEST, indent = 2), encoding = "utf-8")


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def console() -> Console:
    """A console that writes to memory instead of the terminal."""
    return Console(file = io.StringIO(), width = 120, color_system = None)


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every entry under *root* to its bytes (``None`` for directories)."""
    return {p.relative_to(root).as_posix(): (None if p.is_dir() else p.read_bytes()) for p in sorted(root.rglob("*"))}


@pytest.fixture
def make_runner():
    """Factory for :class:`FakeRunner` with custom failure settings."""
    return FakeRunner


@pytest.fixture
def tree_snapshot():
    return snapshot
