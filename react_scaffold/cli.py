"""Command‑line interface for the **react_scaffold** package.

``scaffold <project-name>`` creates a new React + TypeScript project in
the current directory.  There is exactly one positional argument and no
options (Typer's ``--help`` aside).

Exit codes
----------
* ``0`` – the project was created.
* ``1`` – no project name, the directory already exists, or any step
  failed.  The partially created tree is left in place.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from react_scaffold.config import ScaffoldConfig
from react_scaffold.exceptions import ScaffoldError
from react_scaffold.runner import SubprocessRunner
from react_scaffold.scaffold import Scaffolder

log = logging.getLogger(__name__)

app = typer.Typer(name = "scaffold", help = "Scaffold a React + TypeScript project.", add_completion = False)


def _setup_logging(level: str) -> None:
    """Configure root logging at *level* (a ``logging`` level name)."""
    logging.basicConfig(
            level = getattr(logging, level.upper(), logging.WARNING),
            format = "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt = "%H:%M:%S", )


def _show_banner(console: Console, config: ScaffoldConfig) -> None:
    presentation = config.presentation
    if presentation.show_banner:
        console.print(presentation.banner, style = presentation.banner_style, markup = False, highlight = False)
    console.print(presentation.welcome + "\n", style = presentation.welcome_style, markup = False, highlight = False)


# Extra arguments are ignored and a dash-leading name is taken as the project name.
@app.command(
        help = "Create PROJECT_NAME with Vite, Tailwind, Redux, ESLint, Prettier, Husky and Jest.",
        context_settings = {"ignore_unknown_options": True, "allow_extra_args": True}, )
def scaffold(
        project_name: Optional[str] = typer.Argument(
                None, help = "Name of the project directory to create.", show_default = False, ), ) -> None:
    """Run the whole scaffolding procedure for ``project_name``."""

    config = ScaffoldConfig()
    _setup_logging(config.log_level)
    console = Console(highlight = False, soft_wrap = True)
    err_console = Console(stderr = True, highlight = False, soft_wrap = True)
    _show_banner(console, config)

    scaffolder = Scaffolder(runner = SubprocessRunner(), console = console, config = config, root = Path.cwd())
    try:
        target = scaffolder.run(project_name)
    except ScaffoldError as exc:
        err_console.print(f"❌ {exc}", style = config.presentation.error_style, markup = False)
        raise typer.Exit(code = 1) from exc

    log.info("Created %s", target)
    console.print(f"✅ {config.presentation.completed}\n", style = config.presentation.success_style, markup = False)


def main() -> None:  # pragma: no cover – thin wrapper
    """Entry point used by the ``scaffold`` console script."""
    app()


if __name__ == "__main__":
    main()
