"""Configuration for the scaffolder.

Presentation (banner, colours, messages) and tuning knobs are plain
pydantic models that the CLI builds once and passes to the
:class:`~react_scaffold.scaffold.Scaffolder`.  Nothing here is a global.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError

__all__ = ["BANNER", "Presentation", "ScaffoldConfig", "load_config", "CONFIG_FILENAME", ]

log = logging.getLogger(__name__)

CONFIG_FILENAME = "scaffold_config.json"

BANNER = """
  ██████╗ ██████╗ ██████╗ ██████╗ ███████╗██████╗ 
  ██╔══██╗██╔══██╗██╔══██╗██╔══██╗██╔════╝██╔══██╗
  ██║  ██║██████╔╝██████╔╝██║  ██║█████╗  ██████╔╝
  ██║  ██║██╔═══╝ ██╔═══╝ ██║  ██║██╔══╝  ██╔══██╗
  ██████╔╝██║     ██║     ██████╔╝███████╗██║  ██║
  ╚═════╝ ╚═╝     ╚═╝     ╚═════╝ ╚══════╝╚═╝  ╚═╝
"""


class Presentation(BaseModel):
    """Console look and feel. Styles are rich style strings."""

    banner: str = BANNER
    show_banner: bool = True
    welcome: str = "Welcome to the Project Setup CLI!"
    completed: str = "Project setup completed!"
    banner_style: str = "bold green"
    welcome_style: str = "bold blue"
    step_style: str = "cyan"
    success_style: str = "green"
    error_style: str = "yellow"


class ScaffoldConfig(BaseModel):
    """Tuning knobs for a scaffolding run."""

    generator: str = Field(default = "vite@latest", description = "Package passed to `npm init`.")
    template: str = Field(default = "react-ts", description = "Template selector for the generator.")
    manifest_name: str = Field(default = "package.json")
    manifest_timeout: float = Field(
            default = 10.0, gt = 0, description = "Seconds to wait for the manifest to become readable."
            )
    manifest_poll_interval: float = Field(default = 0.1, gt = 0)
    log_level: str = Field(default = "WARNING")
    presentation: Presentation = Field(default_factory = Presentation)


def load_config(config_path: Path | str | None = None) -> ScaffoldConfig:
    """Load a :class:`ScaffoldConfig`, tolerant to a missing file.

    Parameters
    ----------
    config_path:
        Path to a JSON file.  If it points to a directory,
        ``scaffold_config.json`` inside it is used.  ``None`` or a path
        that does not exist yields the defaults.

    Returns
    -------
    ScaffoldConfig
        Validated configuration.

    Raises
    ------
    ConfigError
        If the file is unreadable, not JSON, or fails validation.
    """
    if config_path is None:
        return ScaffoldConfig()

    cfg_file = Path(config_path)
    if cfg_file.is_dir():
        cfg_file = cfg_file / CONFIG_FILENAME

    if not cfg_file.exists():
        log.debug("No config at %s, using defaults", cfg_file)
        return ScaffoldConfig()

    try:
        with cfg_file.open("r", encoding = "utf-8") as f:
            return ScaffoldConfig.model_validate(json.load(f))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(cfg_file, str(exc)) from exc
