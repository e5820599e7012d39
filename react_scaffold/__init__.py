"""Top‑level package for *react_scaffold*."""

from __future__ import annotations

from .config import Presentation, ScaffoldConfig, load_config
from .exceptions import (ConfigError, ExternalCommandError, FileWriteError, ManifestError, MissingArgumentError,
                         ScaffoldError, TargetExistsError, )
from .file_generator import ensure_dir, write_file
from .manifest import ManifestPatch, patch_manifest, wait_for_manifest
from .runner import CommandSpec, SubprocessRunner
from .scaffold import Scaffolder, create_react_project, validate_project_name
from .steps import build_plan

# Explicitly expose the public API members
__all__ = ["Presentation", "ScaffoldConfig", "load_config", "ScaffoldError", "ConfigError", "MissingArgumentError",
           "TargetExistsError", "ExternalCommandError", "FileWriteError", "ManifestError", "ensure_dir", "write_file",
           "ManifestPatch", "patch_manifest", "wait_for_manifest", "CommandSpec", "SubprocessRunner", "Scaffolder",
           "create_react_project", "validate_project_name", "build_plan", ]
