"""Expo boilerplate generation engine.

Turns a validated :class:`Configuration` into a file-tree plan and writes it
into a project created by ``create-expo-app``.

Quick usage::

    from expo_boilerplate.scaffolder import (
        Configuration, Materializer, ProjectContext, TemplateRenderer,
        plan_project, resolve_theme,
    )

    config = Configuration.build({"appName": "my-app", "needsAuth": True})
    plan = plan_project(config, resolve_theme(config))
    materializer = Materializer(ProjectContext(root_path=Path("my-app")))
    await materializer.apply(plan, TemplateRenderer())
"""

from expo_boilerplate.scaffolder.materializer import Materializer
from expo_boilerplate.scaffolder.models import (
    Configuration,
    FileTreePlan,
    FontFamily,
    NavigationMode,
    PlanEntry,
    ProjectContext,
    RenderContext,
    Theme,
)
from expo_boilerplate.scaffolder.planner import navigation_files, plan_project
from expo_boilerplate.scaffolder.templates import TemplateRenderer
from expo_boilerplate.scaffolder.theme import resolve_theme
from expo_boilerplate.scaffolder.toolchain import (
    CreateExpoApp,
    DependencyInstaller,
    NpmInstaller,
    ScaffoldTool,
)

__all__ = [
    "Configuration",
    "CreateExpoApp",
    "DependencyInstaller",
    "FileTreePlan",
    "FontFamily",
    "Materializer",
    "NavigationMode",
    "NpmInstaller",
    "PlanEntry",
    "ProjectContext",
    "RenderContext",
    "ScaffoldTool",
    "TemplateRenderer",
    "Theme",
    "navigation_files",
    "plan_project",
    "resolve_theme",
]
