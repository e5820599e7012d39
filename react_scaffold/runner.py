"""Synchronous execution of external commands.

Commands inherit the parent's stdin, stdout and stderr so that npm and
git output is shown live.  A non‑zero exit status is raised as
:class:`~react_scaffold.exceptions.ExternalCommandError` and ends the run.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ExternalCommandError

__all__ = ["CommandSpec", "CommandRunner", "SubprocessRunner", ]

log = logging.getLogger(__name__)


class CommandSpec(BaseModel):
    """One external invocation: an argument vector and its working directory."""

    argv: tuple[str, ...] = Field(..., min_length = 1, description = "Program and its arguments.")
    cwd: Path = Field(..., description = "Directory the command runs in. Must exist.")

    model_config = ConfigDict(frozen = True)

    @property
    def display(self) -> str:
        return shlex.join(self.argv)


class CommandRunner(Protocol):
    def run(self, spec: CommandSpec) -> None:
        ...


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`, one at a time."""

    def run(self, spec: CommandSpec) -> None:
        """Run *spec* to completion.

        Raises
        ------
        ExternalCommandError
            If the working directory is missing, the program cannot be
            found, or the process exits with a non‑zero status.
        """
        if not spec.cwd.is_dir():
            raise ExternalCommandError(
                    spec.display, spec.cwd, None, reason = "working directory does not exist"
                    )

        # shutil.which picks up npm.cmd / npx.cmd shims on Windows.
        program = shutil.which(spec.argv[0])
        if program is None:
            raise ExternalCommandError(
                    spec.display, spec.cwd, 127, reason = f"command not found: {spec.argv[0]}"
                    )

        log.debug("Running %s in %s", spec.display, spec.cwd)
        try:
            result = subprocess.run([program, *spec.argv[1:]], cwd = spec.cwd, check = False)
        except OSError as exc:
            raise ExternalCommandError(spec.display, spec.cwd, None, reason = str(exc)) from exc

        if result.returncode != 0:
            log.debug("%s exited with status %s", spec.display, result.returncode)
            raise ExternalCommandError(spec.display, spec.cwd, result.returncode)
