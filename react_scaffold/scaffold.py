"""
Project scaffold orchestrator.

Bootstraps a React + TypeScript project with Vite, installs the tooling,
writes lint/format/test configuration, patches ``package.json`` and lays
out an atomic‑design component tree.  Strictly linear: the first failing
step raises and nothing after it runs.  Partially created trees are left
in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from .config import ScaffoldConfig
from .exceptions import MissingArgumentError, ScaffoldError, TargetExistsError
from .file_generator import ensure_dir, write_file
from .manifest import patch_manifest
from .runner import CommandRunner, SubprocessRunner
from .steps import MakeDirectory, PatchManifest, RunCommand, Step, WriteFile, build_plan, describe_step

__all__ = ["Scaffolder", "validate_project_name", "create_react_project", ]

log = logging.getLogger(__name__)


def validate_project_name(project_name: str | None) -> str:
    """Return *project_name* unchanged, or raise if it is missing or blank.

    The name is used verbatim as the directory name and the `npm init`
    argument, so surrounding whitespace is not trimmed.
    """
    if project_name is None or not project_name.strip():
        raise MissingArgumentError()
    return project_name


class Scaffolder:
    """Drive one scaffolding run.

    Parameters
    ----------
    runner:
        Executes external commands.  Tests pass a recording fake.
    console:
        Where progress and messages are printed.
    config:
        Generator, manifest and presentation settings.
    root:
        Directory the project is created in.
    """

    def __init__(
            self, runner: CommandRunner | None = None, console: Console | None = None,
            config: ScaffoldConfig | None = None, root: Path | str = ".", ) -> None:
        self.runner = runner or SubprocessRunner()
        self.console = console or Console()
        self.config = config or ScaffoldConfig()
        self.root = Path(root)

    # ------------------------------------------------------------------
    # Procedure
    # ------------------------------------------------------------------

    def check_target(self, project_name: str) -> Path:
        target = self.root / project_name
        if target.exists() or target.is_symlink():
            raise TargetExistsError(target)
        return target

    def run(self, project_name: str | None) -> Path:
        """Scaffold *project_name* under :attr:`root` and return its path."""
        name = validate_project_name(project_name)
        target = self.check_target(name)
        plan = build_plan(name, self.root, self.config)
        log.info("Scaffolding %s (%d steps)", target, len(plan))

        for index, step in enumerate(plan, start = 1):
            label = describe_step(step)
            self.console.print(
                    f"[{index}/{len(plan)}] {label}", style = self.config.presentation.step_style, markup = False,
                    highlight = False, )
            try:
                self.execute(step)
            except ScaffoldError:
                log.error("Step %d/%d failed: %s", index, len(plan), label)
                raise

        return target

    def execute(self, step: Step) -> None:
        """Carry out a single step."""
        if isinstance(step, RunCommand):
            self.runner.run(step.command)
        elif isinstance(step, MakeDirectory):
            ensure_dir(step.path)
        elif isinstance(step, WriteFile):
            write_file(step.path, step.content)
        elif isinstance(step, PatchManifest):
            patch_manifest(
                    step.path, step.patch, timeout = self.config.manifest_timeout,
                    interval = self.config.manifest_poll_interval, )
        else:
            raise ScaffoldError(f"Unknown step: {step!r}")


def create_react_project(
        project_name: str, root: Path | str = ".", runner: CommandRunner | None = None,
        console: Console | None = None, config: ScaffoldConfig | None = None, ) -> Path:
    """
    Create a React project named *project_name* inside *root*.
    """
    return Scaffolder(runner = runner, console = console, config = config, root = root).run(project_name)
