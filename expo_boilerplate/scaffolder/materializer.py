"""Writes a file-tree plan into the project directory.

The materializer is the only part of the engine with side effects.  Writes
happen one at a time in plan order; the first failure aborts the rest of the
plan and leaves already-written files in place.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Callable, Optional

from jinja2 import TemplateError

from expo_boilerplate.errors import ManifestError, MaterializationError

from .models import Configuration, FileTreePlan, ProjectContext
from .templates import TemplateRenderer


APP_MANIFEST = "app.json"
PACKAGE_MANIFEST = "package.json"
ENTRY_POINT = "./app/_layout.tsx"


class Materializer:
    """Creates directories and files for a plan under a project root."""

    def __init__(
        self,
        project: ProjectContext,
        on_write: Optional[Callable[[Path], None]] = None,
    ) -> None:
        self.project = project
        self.on_write = on_write

    # -- Plan --------------------------------------------------------------

    async def apply(self, plan: FileTreePlan, renderer: TemplateRenderer) -> list[Path]:
        """Ensure the plan's directories, then render and write every entry.

        Existing files are overwritten without backup.

        Returns:
            Written file paths in plan order.

        Raises:
            MaterializationError: On the first directory or file that
                cannot be rendered or written.
        """
        for directory in plan.directories:
            await asyncio.to_thread(_ensure_dir, self.project.resolve(directory))

        written: list[Path] = []
        for entry in plan.entries:
            path = self.project.resolve(entry.relative_path)
            try:
                content = renderer.render(entry.template_id, entry.context)
            except TemplateError as exc:
                raise MaterializationError(
                    path, f"template {entry.template_id} failed to render ({exc})"
                ) from exc
            await asyncio.to_thread(_write_file, path, content)
            written.append(path)
            if self.on_write is not None:
                self.on_write(path)
        return written

    # -- Manifests ---------------------------------------------------------

    async def update_manifests(self, config: Configuration) -> dict[str, Path]:
        """Apply the two manifest edits required by Expo Router.

        * ``app.json``: ``expo.scheme`` set to the app's deep-link scheme.
        * ``package.json``: ``main`` pointed at the root layout.

        Both manifests are produced by ``create-expo-app`` and must exist.
        """
        app_path = self.project.resolve(APP_MANIFEST)
        app_json = await asyncio.to_thread(_read_manifest, app_path)
        expo = app_json.setdefault("expo", {})
        if not isinstance(expo, dict):
            raise ManifestError(app_path, '"expo" is not an object')
        expo["scheme"] = config.scheme
        await asyncio.to_thread(_write_manifest, app_path, app_json)

        package_path = self.project.resolve(PACKAGE_MANIFEST)
        package_json = await asyncio.to_thread(_read_manifest, package_path)
        package_json["main"] = ENTRY_POINT
        await asyncio.to_thread(_write_manifest, package_path, package_json)

        return {"app": app_path, "package": package_path}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise MaterializationError(path, exc.strerror or str(exc)) from exc


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    _ensure_dir(path.parent)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise MaterializationError(path, exc.strerror or str(exc)) from exc


def _read_manifest(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(path, "file not found") from exc
    except OSError as exc:
        raise ManifestError(path, exc.strerror or str(exc)) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(path, f"not valid JSON ({exc.msg})") from exc
    if not isinstance(data, dict):
        raise ManifestError(path, "top level is not an object")
    return data


def _write_manifest(path: Path, data: dict[str, Any]) -> None:
    try:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        raise MaterializationError(path, exc.strerror or str(exc)) from exc
