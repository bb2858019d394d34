"""Expo boilerplate generator configuration.

Typed run settings that are independent of the user's answers: where to
generate, which external tools to call, and how long to wait for them.  Uses
Pydantic v2 so values are validated at construction time and can be built
from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from expo_boilerplate.scaffolder.models import DEFAULT_FONT_PACKAGE_PREFIX, Configuration


BASE_DEPENDENCIES: list[str] = [
    "nativewind",
    "tailwindcss",
    "react-hook-form",
    "expo-font",
    "expo-router",
    "expo-splash-screen",
    "expo-status-bar",
    "react-native-safe-area-context",
    "react-native-screens",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Global generator settings.

    Instances are typically created once by the CLI entry point and passed
    to :class:`~expo_boilerplate.pipeline.Pipeline`.
    """

    output_dir: Path = Field(default=Path("."), description="Directory the app folder is created in")
    scaffold_command: list[str] = Field(
        default_factory=lambda: ["npx", "create-expo-app"],
        description="Program (and leading args) that creates the base Expo project",
    )
    scaffold_template: str = Field(default="blank-typescript")
    install_command: list[str] = Field(default_factory=lambda: ["npm", "install"])
    base_dependencies: list[str] = Field(default_factory=lambda: list(BASE_DEPENDENCIES))
    font_package_prefix: str = Field(default=DEFAULT_FONT_PACKAGE_PREFIX)
    scaffold_timeout: int = Field(default=600, ge=30, description="create-expo-app timeout in seconds")
    install_timeout: int = Field(default=900, ge=30, description="npm install timeout in seconds")
    skip_install: bool = Field(default=False, description="Do not run the package installer")

    def dependencies_for(self, config: Configuration) -> list[str]:
        """Packages to install for *config*: the base set plus its font."""
        return [*self.base_dependencies, config.font_package(self.font_package_prefix)]

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            EXPO_BP_OUTPUT_DIR, EXPO_BP_TEMPLATE, EXPO_BP_FONT_PREFIX,
            EXPO_BP_SCAFFOLD_TIMEOUT, EXPO_BP_INSTALL_TIMEOUT,
            EXPO_BP_SKIP_INSTALL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPO_BP_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["EXPO_BP_OUTPUT_DIR"])
        if os.environ.get("EXPO_BP_TEMPLATE"):
            kwargs["scaffold_template"] = os.environ["EXPO_BP_TEMPLATE"]
        if os.environ.get("EXPO_BP_FONT_PREFIX"):
            kwargs["font_package_prefix"] = os.environ["EXPO_BP_FONT_PREFIX"]
        if os.environ.get("EXPO_BP_SCAFFOLD_TIMEOUT"):
            kwargs["scaffold_timeout"] = int(os.environ["EXPO_BP_SCAFFOLD_TIMEOUT"])
        if os.environ.get("EXPO_BP_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["EXPO_BP_INSTALL_TIMEOUT"])
        if os.environ.get("EXPO_BP_SKIP_INSTALL"):
            kwargs["skip_install"] = os.environ["EXPO_BP_SKIP_INSTALL"].strip().lower() in _TRUE_VALUES

        return cls(**kwargs)
