"""File-tree planning.

Turns a :class:`Configuration` and its :class:`Theme` into the ordered list of
files to generate.  The plan depends only on the configuration; nothing here
touches the filesystem.
"""

from __future__ import annotations

import posixpath

from .models import (
    DEFAULT_FONT_PACKAGE_PREFIX,
    Configuration,
    FileTreePlan,
    NavigationMode,
    PlanEntry,
    RenderContext,
    Theme,
)


# ---------------------------------------------------------------------------
# File tables: (relative output path, template id)
# ---------------------------------------------------------------------------

CORE_FILES: tuple[tuple[str, str], ...] = (
    ("constants/theme.ts", "constants/theme.ts.j2"),
    ("components/ui/Text.tsx", "components/ui/Text.tsx.j2"),
    ("components/ui/Button.tsx", "components/ui/Button.tsx.j2"),
    ("components/ui/TextField.tsx", "components/ui/TextField.tsx.j2"),
    ("components/ui/SafeAreaLayout.tsx", "components/ui/SafeAreaLayout.tsx.j2"),
    ("components/ui/FullScreenLayout.tsx", "components/ui/FullScreenLayout.tsx.j2"),
    ("components/ui/index.ts", "components/ui/index.ts.j2"),
    ("tailwind.config.js", "tailwind.config.js.j2"),
    ("global.css", "global.css.j2"),
    ("metro.config.js", "metro.config.js.j2"),
    ("hooks/useTheme.ts", "hooks/useTheme.ts.j2"),
    ("utils/validation.ts", "utils/validation.ts.j2"),
)

ROOT_LAYOUT: tuple[str, str] = ("app/_layout.tsx", "app/_layout.tsx.j2")

AUTH_FILES: tuple[tuple[str, str], ...] = (
    ("app/login.tsx", "app/login.tsx.j2"),
    ("app/signup.tsx", "app/signup.tsx.j2"),
)

TAB_FILES: tuple[tuple[str, str], ...] = (
    ("app/(tabs)/_layout.tsx", "app/tabs/_layout.tsx.j2"),
    ("app/(tabs)/index.tsx", "app/tabs/index.tsx.j2"),
    ("app/(tabs)/explore.tsx", "app/tabs/explore.tsx.j2"),
    ("app/(tabs)/notifications.tsx", "app/tabs/notifications.tsx.j2"),
    ("app/(tabs)/profile.tsx", "app/tabs/profile.tsx.j2"),
)

HOME_SCREEN: tuple[str, str] = ("app/index.tsx", "app/index.tsx.j2")

# Directories that exist even when no file is generated into them.
SUPPORT_DIRECTORIES: tuple[str, ...] = ("features",)

TABS_ROUTE = "/(tabs)"
HOME_ROUTE = "/"


def navigation_files(mode: NavigationMode) -> tuple[tuple[str, str], ...]:
    """Route files generated for each navigation mode."""
    if mode is NavigationMode.AUTH_TABS:
        return AUTH_FILES + TAB_FILES
    if mode is NavigationMode.AUTH_STACK:
        return AUTH_FILES + (HOME_SCREEN,)
    return (HOME_SCREEN,)


def plan_project(
    config: Configuration,
    theme: Theme,
    *,
    font_package_prefix: str = DEFAULT_FONT_PACKAGE_PREFIX,
) -> FileTreePlan:
    """Compute the ordered file-tree plan for *config*.

    Shared files come first, then the route files for the configuration's
    navigation mode, then the root layout that wires the routes together.
    """
    mode = config.navigation_mode
    files = CORE_FILES + navigation_files(mode) + (ROOT_LAYOUT,)
    after_auth_route = TABS_ROUTE if mode is NavigationMode.AUTH_TABS else HOME_ROUTE

    entries: list[PlanEntry] = []
    for relative_path, template_id in files:
        context = RenderContext(
            app_name=config.app_name,
            font=config.font.value,
            font_package=config.font_package(font_package_prefix),
            theme=theme,
            needs_auth=config.needs_auth,
            needs_bottom_tabs=config.needs_bottom_tabs,
            navigation=mode,
            ui_import=_relative_import(relative_path, "components/ui"),
            theme_import=_relative_import(relative_path, "constants/theme"),
            after_auth_route=after_auth_route,
        )
        entries.append(
            PlanEntry(
                relative_path=relative_path,
                template_id=template_id,
                context=context,
            )
        )

    return FileTreePlan(
        entries=tuple(entries),
        directories=_collect_directories(entries),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _relative_import(from_file: str, target: str) -> str:
    """Module specifier for *target* as seen from *from_file*.

    E.g. ``("app/(tabs)/index.tsx", "components/ui")`` -> ``"../../components/ui"``.
    """
    start = posixpath.dirname(from_file) or "."
    rel = posixpath.relpath(target, start)
    if not rel.startswith("."):
        rel = f"./{rel}"
    return rel


def _collect_directories(entries: list[PlanEntry]) -> tuple[str, ...]:
    """Parent directories of every entry plus the support directories, in first-seen order."""
    seen: dict[str, None] = {}
    for entry in entries:
        parent = posixpath.dirname(entry.relative_path)
        if parent:
            seen.setdefault(parent, None)
    for directory in SUPPORT_DIRECTORIES:
        seen.setdefault(directory, None)
    return tuple(seen)
