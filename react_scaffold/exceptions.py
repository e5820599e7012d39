"""Custom exception hierarchy for the react_scaffold package.

Every failure raises :class:`ScaffoldError` (or a subclass) so that the
CLI can catch a single exception type, print a user-friendly message and
exit with status 1.  Nothing is retried: the first error ends the run.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base exception for all scaffolding errors."""


class MissingArgumentError(ScaffoldError):
    """Raised when no project name was supplied."""

    def __init__(self, message: str = "Please supply a project name") -> None:
        super().__init__(message)


class TargetExistsError(ScaffoldError):
    """Raised when the target directory already exists."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(
                f"Directory {self.path} already exists. Choose a different name."
                )


class ExternalCommandError(ScaffoldError):
    """Raised when an external command cannot run or exits non-zero."""

    def __init__(
            self, command: str, cwd: Path | str, returncode: int | None, reason: str | None = None, ) -> None:
        self.command = command
        self.cwd = Path(cwd)
        self.returncode = returncode
        detail = reason or f"exit status {returncode}"
        super().__init__(f"Error executing {command} in {self.cwd}: {detail}")


class FileWriteError(ScaffoldError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Failed to write {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ManifestError(ScaffoldError):
    """Raised when the generated manifest is missing or cannot be parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Manifest {self.path}: {reason}")


class ConfigError(ScaffoldError):
    """Raised when a configuration file cannot be parsed or validated."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid config {self.path}: {reason}")
