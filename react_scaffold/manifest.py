"""Read‑modify‑write patching of the generated ``package.json``."""

from __future__ import annotations

import copy
import json
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ManifestError
from .file_generator import read_json, write_json

__all__ = ["ManifestPatch", "wait_for_manifest", "patch_manifest", ]

log = logging.getLogger(__name__)


def _default_scripts() -> dict[str, str]:
    return {"prepare": "husky install", "lint": "eslint --fix .", "format": "prettier --write .", }


def _default_top_level() -> dict[str, Any]:
    return {"husky": {"hooks": {"pre-commit": "lint-staged"}},
            "lint-staged": {"*.{js,jsx,ts,tsx}": ["npm run lint", "npm run format"]}, }


class ManifestPatch(BaseModel):
    """Additions merged into an existing manifest.

    ``scripts`` entries are merged into the manifest's ``scripts`` table;
    ``top_level`` keys replace same‑named top‑level keys wholesale.
    """

    scripts: dict[str, str] = Field(default_factory = _default_scripts)
    top_level: dict[str, Any] = Field(default_factory = _default_top_level)

    model_config = ConfigDict(frozen = True)

    def apply(self, data: dict[str, Any]) -> dict[str, Any]:
        """Return a patched copy of *data*; the input is left untouched."""
        patched = copy.deepcopy(data)
        existing = patched.get("scripts")
        scripts = dict(existing) if isinstance(existing, dict) else {}
        scripts.update(self.scripts)
        patched["scripts"] = scripts
        for key, value in self.top_level.items():
            patched[key] = copy.deepcopy(value)
        return patched


def wait_for_manifest(
        path: Path | str, *, timeout: float = 10.0, interval: float = 0.1,
        sleep: Callable[[float], None] = time.sleep, clock: Callable[[], float] = time.monotonic, ) -> dict[str, Any]:
    """Poll until *path* exists and parses as a JSON object.

    Parameters
    ----------
    path:
        Manifest to wait for.
    timeout:
        Seconds to keep polling.
    interval:
        Seconds between attempts.
    sleep, clock:
        Injected for tests.

    Returns
    -------
    dict
        The parsed manifest.
    """
    path = Path(path)
    deadline = clock() + timeout
    last_error = "file not found"
    while True:
        try:
            data = read_json(path)
        except FileNotFoundError:
            last_error = "file not found"
        except (OSError, json.JSONDecodeError) as exc:
            last_error = str(exc)
        else:
            if isinstance(data, dict):
                return data
            raise ManifestError(path, "top-level JSON value is not an object")

        if clock() >= deadline:
            raise ManifestError(path, f"not readable after {timeout}s ({last_error})")
        log.debug("Waiting for %s: %s", path, last_error)
        sleep(interval)


def patch_manifest(
        path: Path | str, patch: ManifestPatch, *, timeout: float = 10.0, interval: float = 0.1,
        sleep: Callable[[float], None] = time.sleep, ) -> dict[str, Any]:
    """Wait for the manifest, merge *patch* into it and write it back."""
    data = wait_for_manifest(path, timeout = timeout, interval = interval, sleep = sleep)
    patched = patch.apply(data)
    write_json(path, patched)
    log.debug("Patched %s with scripts %s", path, sorted(patch.scripts))
    return patched
