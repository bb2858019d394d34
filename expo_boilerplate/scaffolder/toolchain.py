"""External tools invoked around the generation engine.

``create-expo-app`` produces the base project (with ``package.json`` and
``app.json``) and ``npm install`` adds the packages the generated files
import.  Both are blocking, run-to-completion steps whose failure ends the
run.  They are expressed as protocols so the pipeline can be driven with
fakes in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from expo_boilerplate.errors import ExternalToolError
from expo_boilerplate.utils import run_command


class ScaffoldTool(Protocol):
    """Creates ``<output_dir>/<app_name>`` with the base Expo project."""

    async def create(self, app_name: str, output_dir: Path) -> None: ...


class DependencyInstaller(Protocol):
    """Installs npm packages into an existing project."""

    async def install(self, packages: list[str], project_root: Path) -> None: ...


class CreateExpoApp:
    """Runs ``npx create-expo-app <name> --template <template>``."""

    def __init__(
        self,
        command: list[str] | None = None,
        template: str = "blank-typescript",
        timeout: int = 600,
    ) -> None:
        self.command = command or ["npx", "create-expo-app"]
        self.template = template
        self.timeout = timeout

    def build_command(self, app_name: str) -> list[str]:
        return [*self.command, app_name, "--template", self.template]

    async def create(self, app_name: str, output_dir: Path) -> None:
        cmd = self.build_command(app_name)
        await _run_tool(cmd, output_dir, self.timeout)


class NpmInstaller:
    """Runs ``npm install <packages...>`` in the project root."""

    def __init__(self, command: list[str] | None = None, timeout: int = 900) -> None:
        self.command = command or ["npm", "install"]
        self.timeout = timeout

    def build_command(self, packages: list[str]) -> list[str]:
        return [*self.command, *packages]

    async def install(self, packages: list[str], project_root: Path) -> None:
        cmd = self.build_command(packages)
        await _run_tool(cmd, project_root, self.timeout)


async def _run_tool(cmd: list[str], cwd: Path, timeout: int) -> None:
    """Run *cmd* with inherited output; raise on any kind of failure."""
    try:
        returncode, _, stderr = await run_command(
            cmd, cwd=cwd, timeout=timeout, capture=False
        )
    except OSError as exc:
        raise ExternalToolError(cmd, 127, str(exc)) from exc
    if returncode != 0:
        raise ExternalToolError(cmd, returncode, stderr)
