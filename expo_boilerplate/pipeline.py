"""Expo boilerplate generation pipeline.

Runs one generation from validated answers to a ready-to-start project:

Step 1: SCAFFOLD -- ``create-expo-app`` creates the base project.
Step 2: INSTALL  -- ``npm install`` adds NativeWind, Expo Router, fonts, ...
Step 3: PLAN     -- compute the file tree for the chosen options.
Step 4: WRITE    -- render every planned file into the project.
Step 5: MANIFEST -- point ``app.json`` / ``package.json`` at Expo Router.

Usage::

    python -m expo_boilerplate
    python -m expo_boilerplate --name my-app --font Roboto --auth --tabs
    python -m expo_boilerplate --name my-app --dry-run
"""

from __future__ import annotations

import asyncio
import posixpath
import sys
import time
from pathlib import Path
from typing import Any, Callable, Optional

from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from expo_boilerplate.config import Settings
from expo_boilerplate.errors import ConfigValidationError, DirectoryAccessError, GeneratorError
from expo_boilerplate.scaffolder import (
    Configuration,
    CreateExpoApp,
    DependencyInstaller,
    FileTreePlan,
    Materializer,
    NavigationMode,
    NpmInstaller,
    ProjectContext,
    ScaffoldTool,
    TemplateRenderer,
    Theme,
    plan_project,
    resolve_theme,
)
from expo_boilerplate.scaffolder.models import DEFAULT_APP_NAME, FontFamily
from expo_boilerplate.utils import (
    console,
    format_duration,
    print_error,
    print_step,
    print_summary_table,
    print_success,
    print_warning,
)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives a single generation run.

    The external tools are injectable; by default they are the real
    ``npx create-expo-app`` and ``npm install`` invocations built from
    *settings*.

    Attributes:
        settings: Run settings (output directory, tool commands, timeouts).
        scaffold_tool: Creates the base Expo project.
        installer: Installs npm dependencies.
        renderer: Renders the project templates.
    """

    def __init__(
        self,
        settings: Settings,
        scaffold_tool: Optional[ScaffoldTool] = None,
        installer: Optional[DependencyInstaller] = None,
        renderer: Optional[TemplateRenderer] = None,
        verbose: bool = False,
    ) -> None:
        self.settings = settings
        self.scaffold_tool = scaffold_tool or CreateExpoApp(
            command=settings.scaffold_command,
            template=settings.scaffold_template,
            timeout=settings.scaffold_timeout,
        )
        self.installer = installer or NpmInstaller(
            command=settings.install_command,
            timeout=settings.install_timeout,
        )
        self.renderer = renderer or TemplateRenderer()
        self.verbose = verbose

    def plan(self, config: Configuration) -> tuple[Theme, FileTreePlan]:
        """Resolve the theme and compute the file-tree plan, without side effects."""
        theme = resolve_theme(config)
        plan = plan_project(
            config, theme, font_package_prefix=self.settings.font_package_prefix
        )
        return theme, plan

    async def run(self, config: Configuration) -> dict[str, Any]:
        """Generate the project described by *config*.

        Returns:
            A summary dict with ``project_root``, ``files`` (written paths),
            ``manifests`` and ``duration_seconds``.

        Raises:
            ExternalToolError: If scaffolding or installation fails.
            DirectoryAccessError: If the scaffolded project root is unusable.
            MaterializationError: If a planned file cannot be rendered or written.
            ManifestError: If ``app.json`` or ``package.json`` is unusable.
        """
        started = time.monotonic()
        output_dir = self.settings.output_dir

        console.print(
            Panel(
                f"[bold bright_cyan]Expo Boilerplate Generator[/bold bright_cyan]\n"
                f"App    : {config.app_name}\n"
                f"Font   : {config.font.value}\n"
                f"Output : {escape(str(output_dir.resolve() / config.app_name))}",
                title="[bold]Creating Expo App[/bold]",
                border_style="bright_cyan",
            )
        )
        if config.tabs_ignored:
            print_warning(
                "Bottom tabs are only generated together with authentication pages; "
                "creating a single home screen instead."
            )

        print_step(1, f"Creating Expo app {config.app_name}")
        await self.scaffold_tool.create(config.app_name, output_dir)
        project = enter_project(output_dir / config.app_name)

        if self.settings.skip_install:
            print_step(2, "Skipping dependency installation")
        else:
            packages = self.settings.dependencies_for(config)
            print_step(2, f"Installing {len(packages)} packages")
            await self.installer.install(packages, project.root_path)

        print_step(3, "Planning project structure")
        theme, plan = self.plan(config)

        print_step(4, f"Writing {len(plan)} files")
        on_write = self._echo_written(project) if self.verbose else None
        materializer = Materializer(project, on_write=on_write)
        files = await materializer.apply(plan, self.renderer)

        print_step(5, "Configuring Expo Router")
        manifests = await materializer.update_manifests(config)

        duration = time.monotonic() - started
        print_success(f"\nModern Expo boilerplate created successfully in {format_duration(duration)}!")
        print_project_summary(config, theme, plan)

        return {
            "project_root": str(project.root_path),
            "files": [str(path) for path in files],
            "manifests": {name: str(path) for name, path in manifests.items()},
            "duration_seconds": round(duration, 2),
        }

    @staticmethod
    def _echo_written(project: ProjectContext) -> Callable[[Path], None]:
        def _echo(path: Path) -> None:
            console.print(f"  [green]+[/green] {path.relative_to(project.root_path).as_posix()}")
        return _echo


def enter_project(root: Path) -> ProjectContext:
    """Return the context for the scaffolded project at *root*.

    Raises:
        DirectoryAccessError: If *root* is missing or not a directory.
    """
    if not root.is_dir():
        raise DirectoryAccessError(root)
    return ProjectContext(root_path=root.resolve())


# ---------------------------------------------------------------------------
# Summary output
# ---------------------------------------------------------------------------

_PATH_NOTES: dict[str, str] = {
    "app": "Expo Router pages",
    "app/login.tsx": "Login page",
    "app/signup.tsx": "Signup page",
    "app/index.tsx": "Home screen",
    "app/(tabs)": "Bottom tab navigation",
    "app/(tabs)/index.tsx": "Home tab",
    "app/(tabs)/explore.tsx": "Explore tab",
    "app/(tabs)/notifications.tsx": "Notifications tab",
    "app/(tabs)/profile.tsx": "Profile tab",
    "components/ui": "Reusable UI components",
    "constants/theme.ts": "App theme configuration",
    "hooks": "Custom React hooks",
    "utils": "Utility functions",
    "features": "Feature modules",
}


def build_structure_tree(plan: FileTreePlan, root_label: str) -> Tree:
    """Render the plan's directories and files as a Rich tree."""
    tree = Tree(f"[bold]{root_label}/[/bold]")
    nodes: dict[str, Tree] = {"": tree}

    def _node(directory: str) -> Tree:
        if directory not in nodes:
            parent = _node(posixpath.dirname(directory))
            nodes[directory] = parent.add(_label(directory, is_dir=True))
        return nodes[directory]

    for directory in plan.directories:
        _node(directory)
    for path in plan.paths:
        _node(posixpath.dirname(path)).add(_label(path, is_dir=False))
    return tree


def _label(path: str, *, is_dir: bool) -> str:
    name = posixpath.basename(path) + ("/" if is_dir else "")
    note = _PATH_NOTES.get(path)
    if note:
        return f"{name}  [dim]# {note}[/dim]"
    return name


def _swatch(color: str) -> str:
    # Rich only understands six-digit hex styles.
    if len(color) == 7:
        return f"[{color}]■[/] {color}"
    return color


def print_project_summary(config: Configuration, theme: Theme, plan: FileTreePlan) -> None:
    """Print the generated structure, theme, features and next steps."""
    console.print("\n[cyan]Project Structure:[/cyan]")
    console.print(build_structure_tree(plan, config.app_name))

    print_summary_table(
        {
            "Primary": _swatch(theme.primary),
            "Secondary": _swatch(theme.secondary),
            "Font": theme.font_family,
        },
        title="Theme",
        columns=("Slot", "Value"),
    )

    features = [
        "Modern reusable UI components (Text, Button, TextField)",
        "Layout components (SafeAreaLayout, FullScreenLayout)",
        "Expo Router navigation",
        "TailwindCSS with NativeWind",
        "React Hook Form integration",
        "Custom theme system",
    ]
    if config.needs_auth:
        features.append("Authentication pages")
    if config.navigation_mode is NavigationMode.AUTH_TABS:
        features.append("Bottom tab navigation")

    console.print("\n[cyan]Features Included:[/cyan]")
    for feature in features:
        console.print(f"  [green]+[/green] {feature}")

    console.print("\n[cyan]Next steps:[/cyan]")
    console.print(f"  cd {config.app_name}")
    console.print("  npm start")
    console.print("\n[cyan]Start editing your components in the components/ui/ folder![/cyan]")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _answers_from_args(args: Any) -> dict[str, Any]:
    return {
        "appName": args.name or DEFAULT_APP_NAME,
        "font": args.font,
        "primaryColor": args.primary_color,
        "secondaryColor": args.secondary_color,
        "needsAuth": args.auth,
        "needsBottomTabs": args.tabs,
    }


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``python -m expo_boilerplate``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="expo-boilerplate",
        description="Expo Boilerplate Generator -- Expo Router + NativeWind app skeletons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  expo-boilerplate\n"
            "  expo-boilerplate --name my-app --font Poppins --auth --tabs\n"
            "  expo-boilerplate --name my-app --primary-color '#0EA5E9' --dry-run\n"
        ),
    )
    parser.add_argument("--name", default=None, help="App name (skips the interactive prompts)")
    parser.add_argument(
        "--font",
        default=None,
        choices=[font.value for font in FontFamily],
        help="Default font family (default: Inter)",
    )
    parser.add_argument("--primary-color", default=None, help="Primary color hex code")
    parser.add_argument("--secondary-color", default=None, help="Secondary color hex code")
    parser.add_argument(
        "--auth",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate login and signup pages (default: no)",
    )
    parser.add_argument(
        "--tabs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate bottom tab navigation, requires --auth (default: yes)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the app folder is created in (default: current directory)",
    )
    parser.add_argument("--skip-install", action="store_true", help="Do not run npm install")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the planned files and exit"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="List every written file")
    parser.add_argument(
        "--yes", "-y", action="store_true", help="Never prompt; use defaults for missing options"
    )

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.output:
        settings = settings.model_copy(update={"output_dir": Path(args.output)})
    if args.skip_install:
        settings = settings.model_copy(update={"skip_install": True})

    console.print("[cyan]Welcome to Modern Expo Boilerplate CLI[/cyan]")

    try:
        if args.name is not None or args.yes:
            config = Configuration.build(_answers_from_args(args))
        else:
            from expo_boilerplate.prompts import collect_answers

            config = Configuration.build(collect_answers())
    except ConfigValidationError as exc:
        print_error(f"Error: {exc.message}")
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("\nAborted.")
        sys.exit(130)

    pipeline = Pipeline(settings, verbose=args.verbose)

    if args.dry_run:
        _, plan = pipeline.plan(config)
        console.print(f"[bold]{len(plan)} files would be generated:[/bold]")
        console.print(build_structure_tree(plan, config.app_name))
        return

    try:
        asyncio.run(pipeline.run(config))
    except DirectoryAccessError as exc:
        print_error(f"\nError: {exc}")
        print_error("Please ensure the app name doesn't contain spaces or special characters.")
        sys.exit(1)
    except GeneratorError as exc:
        print_error(f"\nError: {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("\nAborted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
