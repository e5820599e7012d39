"""The scaffolding procedure as an ordered list of declarative steps.

Each step is one of four variants tagged by ``kind``.  The orchestrator
only walks the list and dispatches on the variant; all ordering lives in
:func:`build_plan`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import ScaffoldConfig
from .manifest import ManifestPatch
from .runner import CommandSpec
from .templates import (APP_DIR, ATOMIC_TIERS, BOOTSTRAP_TOOL, COMPONENTS_DIR, FEATURES_DIR, HOOK_COMMANDS,
                        SETUP_COMMANDS, SOURCE_TEMPLATE_FILES, STATIC_CONFIG_FILES, )

__all__ = ["RunCommand", "MakeDirectory", "WriteFile", "PatchManifest", "Step", "build_plan", "describe_step", ]


class _Step(BaseModel):
    model_config = ConfigDict(frozen = True)


class RunCommand(_Step):
    kind: Literal["run"] = "run"
    command: CommandSpec
    label: str = ""


class MakeDirectory(_Step):
    kind: Literal["mkdir"] = "mkdir"
    path: Path


class WriteFile(_Step):
    kind: Literal["write"] = "write"
    path: Path
    content: str


class PatchManifest(_Step):
    kind: Literal["patch"] = "patch"
    path: Path
    patch: ManifestPatch = Field(default_factory = ManifestPatch)


Step = Union[RunCommand, MakeDirectory, WriteFile, PatchManifest]


def build_plan(project_name: str, root: Path | str, config: ScaffoldConfig | None = None) -> list[Step]:
    """Return every step of a run, in execution order.

    The project name only appears in the bootstrap command and in the
    target paths; file contents are never substituted.

    Args:
        project_name: Name of the directory to create under *root*.
        root: Directory the bootstrap command runs in.
        config: Generator and template selection; defaults if omitted.

    Returns:
        The ordered plan.
    """
    config = config or ScaffoldConfig()
    root = Path(root)
    project = root / project_name

    plan: list[Step] = [RunCommand(
            command = CommandSpec(
                    argv = (BOOTSTRAP_TOOL, "init", config.generator, project_name, "--", "--template",
                            config.template), cwd = root, ), label = "bootstrap", )]

    plan.extend(
            RunCommand(command = CommandSpec(argv = argv, cwd = project), label = "install") for argv in SETUP_COMMANDS
            )

    plan.extend(WriteFile(path = project / t.path, content = t.content) for t in STATIC_CONFIG_FILES)

    plan.append(PatchManifest(path = project / config.manifest_name))
    plan.extend(
            RunCommand(command = CommandSpec(argv = argv, cwd = project), label = "git hook") for argv in HOOK_COMMANDS
            )

    components = project / COMPONENTS_DIR
    plan.extend(MakeDirectory(path = components / tier) for tier in ATOMIC_TIERS)
    plan.append(MakeDirectory(path = project / FEATURES_DIR))
    plan.append(MakeDirectory(path = project / APP_DIR))

    plan.extend(WriteFile(path = project / t.path, content = t.content) for t in SOURCE_TEMPLATE_FILES)
    return plan


def describe_step(step: Step) -> str:
    """One‑line label for console progress."""
    if isinstance(step, RunCommand):
        if step.label:
            return f"{step.label}: {step.command.display}"
        return step.command.display
    if isinstance(step, MakeDirectory):
        return f"mkdir {step.path}"
    if isinstance(step, WriteFile):
        return f"write {step.path}"
    return f"patch {step.path}"
