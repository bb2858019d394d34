"""Shared pytest fixtures for the Expo boilerplate test suite.

Provides reusable fixtures for:
- Configurations covering every navigation mode
- Fake ``create-expo-app`` / ``npm install`` tools
- A scaffolded project directory with its manifests
- Settings that never touch the network
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from expo_boilerplate.config import Settings
from expo_boilerplate.scaffolder import Configuration, ProjectContext, TemplateRenderer


# ---------------------------------------------------------------------------
# Fake external tools
# ---------------------------------------------------------------------------

BASE_APP_JSON: dict[str, Any] = {
    "expo": {
        "name": "placeholder",
        "slug": "placeholder",
        "version": "1.0.0",
        "orientation": "portrait",
    }
}

BASE_PACKAGE_JSON: dict[str, Any] = {
    "name": "placeholder",
    "version": "1.0.0",
    "main": "index.ts",
    "scripts": {"start": "expo start"},
    "dependencies": {"expo": "~52.0.0"},
}


def write_base_project(root: Path, app_name: str) -> Path:
    """Create what ``create-expo-app`` leaves behind: a dir with two manifests."""
    root.mkdir(parents=True, exist_ok=True)
    app_json = json.loads(json.dumps(BASE_APP_JSON))
    app_json["expo"]["name"] = app_name
    app_json["expo"]["slug"] = app_name
    package_json = dict(BASE_PACKAGE_JSON, name=app_name)
    (root / "app.json").write_text(json.dumps(app_json, indent=2), encoding="utf-8")
    (root / "package.json").write_text(json.dumps(package_json, indent=2), encoding="utf-8")
    return root


class FakeScaffoldTool:
    """Records calls and writes a minimal base project instead of running npx."""

    def __init__(self, create_dir: bool = True) -> None:
        self.create_dir = create_dir
        self.calls: list[tuple[str, Path]] = []

    async def create(self, app_name: str, output_dir: Path) -> None:
        self.calls.append((app_name, output_dir))
        if self.create_dir:
            write_base_project(output_dir / app_name, app_name)


class FakeInstaller:
    """Records the requested packages instead of running npm."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path]] = []

    async def install(self, packages: list[str], project_root: Path) -> None:
        self.calls.append((list(packages), project_root))


@pytest.fixture
def fake_scaffold_tool() -> FakeScaffoldTool:
    return FakeScaffoldTool()


@pytest.fixture
def dirless_scaffold_tool() -> FakeScaffoldTool:
    """Reports success without creating the project directory."""
    return FakeScaffoldTool(create_dir=False)


@pytest.fixture
def fake_installer() -> FakeInstaller:
    return FakeInstaller()


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> Configuration:
    """No auth, tabs left at the default: a single home screen."""
    return Configuration.build({"appName": "my-app", "font": "Inter", "needsAuth": False})


@pytest.fixture
def auth_tabs_config() -> Configuration:
    """Auth pages plus bottom tabs, with a custom primary color."""
    return Configuration.build(
        {
            "appName": "shop_app",
            "font": "Roboto",
            "primaryColor": "#FF0000",
            "secondaryColor": "",
            "needsAuth": True,
            "needsBottomTabs": True,
        }
    )


@pytest.fixture
def auth_stack_config() -> Configuration:
    """Auth pages without tabs."""
    return Configuration.build(
        {
            "appName": "Notes",
            "font": "Poppins",
            "needsAuth": True,
            "needsBottomTabs": False,
        }
    )


@pytest.fixture
def tabs_without_auth_config() -> Configuration:
    """Tabs requested without auth; generated as a single screen."""
    return Configuration.build(
        {"appName": "lonely-tabs", "needsAuth": False, "needsBottomTabs": True}
    )


# ---------------------------------------------------------------------------
# Projects & settings
# ---------------------------------------------------------------------------

@pytest.fixture
def project(tmp_path: Path) -> ProjectContext:
    """A scaffolded base project named ``my-app`` under ``tmp_path``."""
    root = write_base_project(tmp_path / "my-app", "my-app")
    return ProjectContext(root_path=root)


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings that generate into ``tmp_path``."""
    return Settings(output_dir=tmp_path)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``EXPO_BP_*`` variable for the duration of the test."""
    for name in (
        "EXPO_BP_OUTPUT_DIR",
        "EXPO_BP_TEMPLATE",
        "EXPO_BP_FONT_PREFIX",
        "EXPO_BP_SCAFFOLD_TIMEOUT",
        "EXPO_BP_INSTALL_TIMEOUT",
        "EXPO_BP_SKIP_INSTALL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
