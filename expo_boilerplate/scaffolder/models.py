"""Pydantic v2 models for the project generation engine.

Defines the validated user configuration, the derived theme, and the
file-tree plan consumed by the materializer.  Every model is frozen: a run
builds each of them once and never mutates them afterwards.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from expo_boilerplate.errors import ConfigValidationError


APP_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
HEX_COLOR_PATTERN = re.compile(
    r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$"
)

DEFAULT_APP_NAME = "my-expo-app"
DEFAULT_FONT_PACKAGE_PREFIX = "expo-google-fonts"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FontFamily(str, Enum):
    """Fonts offered by the generator, spelled as the typography key."""
    INTER = "Inter"
    POPPINS = "Poppins"
    MONTSERRAT = "Montserrat"
    ROBOTO = "Roboto"
    LATO = "Lato"


class NavigationMode(str, Enum):
    """Route layout generated under ``app/``."""
    AUTH_TABS = "auth_tabs"
    AUTH_STACK = "auth_stack"
    SINGLE_SCREEN = "single_screen"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class Configuration(BaseModel):
    """Canonical, validated record of the user's choices.

    Accepts either the prompt keys (``appName``, ``needsAuth``, ...) or the
    Python field names.  Use :meth:`build` to get a
    :class:`ConfigValidationError` instead of pydantic's error type.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    app_name: str = Field(..., alias="appName", description="Project directory and display name")
    font: FontFamily = Field(default=FontFamily.INTER, description="Default font family")
    primary_color: Optional[str] = Field(
        default=None, alias="primaryColor", description="Primary color override (hex)"
    )
    secondary_color: Optional[str] = Field(
        default=None, alias="secondaryColor", description="Secondary color override (hex)"
    )
    needs_auth: bool = Field(default=False, alias="needsAuth", description="Generate login/signup")
    needs_bottom_tabs: bool = Field(
        default=True, alias="needsBottomTabs", description="Generate bottom tab navigation"
    )

    @field_validator("app_name", mode="before")
    @classmethod
    def _check_app_name(cls, value: Any) -> str:
        return validate_app_name(value)

    @field_validator("font", mode="before")
    @classmethod
    def _check_font(cls, value: Any) -> Any:
        if value is None or value == "":
            return FontFamily.INTER
        if isinstance(value, str):
            for font in FontFamily:
                if font.value.lower() == value.strip().lower():
                    return font
            choices = ", ".join(f.value for f in FontFamily)
            raise ValueError(f"Unknown font {value!r}; choose one of {choices}")
        return value

    @field_validator("primary_color", "secondary_color", mode="before")
    @classmethod
    def _check_color(cls, value: Any) -> Optional[str]:
        return normalize_color(value)

    @field_validator("needs_auth", "needs_bottom_tabs", mode="before")
    @classmethod
    def _default_unanswered(cls, value: Any, info: ValidationInfo) -> Any:
        # A skipped prompt arrives as None.
        if value is None:
            return info.field_name == "needs_bottom_tabs"
        return value

    # -- Construction ------------------------------------------------------

    @classmethod
    def build(cls, raw_answers: Mapping[str, Any]) -> "Configuration":
        """Build a configuration from raw prompt answers.

        The app name is validated first so that an invalid name is reported
        even when other answers are also malformed.

        Raises:
            ConfigValidationError: If any answer is invalid.
        """
        raw = dict(raw_answers)
        name = raw.get("appName", raw.get("app_name"))
        try:
            validate_app_name(name)
        except ValueError as exc:
            raise ConfigValidationError("app_name", str(exc)) from exc

        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error.get("loc") else "configuration"
            message = str(error.get("msg", "invalid value"))
            message = message.removeprefix("Value error, ")
            raise ConfigValidationError(_FIELD_NAMES.get(field, field), message) from exc

    # -- Derived values ----------------------------------------------------

    @property
    def scheme(self) -> str:
        """Deep-link scheme: the app name lowercased, alphanumerics only."""
        return re.sub(r"[^a-z0-9]", "", self.app_name.lower())

    @property
    def navigation_mode(self) -> NavigationMode:
        """Total mapping of (needs_auth, needs_bottom_tabs) to a route layout.

        Tab navigation is only offered behind authentication, so tabs
        without auth fall back to a single screen.
        """
        if not self.needs_auth:
            return NavigationMode.SINGLE_SCREEN
        if self.needs_bottom_tabs:
            return NavigationMode.AUTH_TABS
        return NavigationMode.AUTH_STACK

    @property
    def tabs_ignored(self) -> bool:
        """True when tabs were requested but cannot be generated."""
        return self.needs_bottom_tabs and not self.needs_auth

    def font_package(self, prefix: str = DEFAULT_FONT_PACKAGE_PREFIX) -> str:
        """npm package that ships the chosen font."""
        return f"{prefix}-{self.font.value.lower()}"


_FIELD_NAMES: dict[str, str] = {
    "appName": "app_name",
    "primaryColor": "primary_color",
    "secondaryColor": "secondary_color",
    "needsAuth": "needs_auth",
    "needsBottomTabs": "needs_bottom_tabs",
}


def validate_app_name(value: Any) -> str:
    """Return *value* unchanged if it is a usable app name.

    Raises:
        ValueError: With a user-facing message otherwise.
    """
    if not isinstance(value, str) or not value:
        raise ValueError("App name is required.")
    if any(ch.isspace() for ch in value):
        raise ValueError(
            "App name cannot contain spaces. Use hyphens or underscores instead."
        )
    if not APP_NAME_PATTERN.match(value):
        raise ValueError(
            "App name can only contain letters, numbers, hyphens, and underscores."
        )
    return value


def normalize_color(value: Any) -> Optional[str]:
    """Turn a raw color answer into a hex string or ``None``.

    Empty answers mean "use the default".  Non-empty answers must be hex
    literals because they are written into generated source verbatim.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("Color must be a string such as #3B82F6.")
    value = value.strip()
    if not value:
        return None
    if not HEX_COLOR_PATTERN.match(value):
        raise ValueError(f"{value!r} is not a hex color such as #3B82F6.")
    return value


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

class Theme(BaseModel):
    """Fully resolved palette written into ``constants/theme.ts``.

    The color, spacing and radius tables are read-only views, so a theme
    shared by every render context of a plan cannot be changed through any
    one of them.
    """

    model_config = ConfigDict(frozen=True)

    colors: Mapping[str, str] = Field(..., description="Color slots in display order")
    font_family: str = Field(..., description="Typography key, the font name verbatim")
    spacing: Mapping[str, int] = Field(..., description="Spacing scale xs..xxl")
    border_radius: Mapping[str, int] = Field(..., description="Border-radius scale sm..xl")

    @field_validator("colors", "spacing", "border_radius", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("colors", "spacing", "border_radius")
    def _plain_dict(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @property
    def primary(self) -> str:
        return self.colors["primary"]

    @property
    def secondary(self) -> str:
        return self.colors["secondary"]


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

class ProjectContext(BaseModel):
    """Explicit project root; every generated path is resolved against it."""

    model_config = ConfigDict(frozen=True)

    root_path: Path

    def resolve(self, relative_path: str | Path) -> Path:
        return self.root_path / relative_path


class RenderContext(BaseModel):
    """Typed input of a single template render."""

    model_config = ConfigDict(frozen=True)

    app_name: str
    font: str
    font_package: str
    theme: Theme
    needs_auth: bool
    needs_bottom_tabs: bool
    navigation: NavigationMode
    ui_import: str = Field(default="../components/ui", description="Import path of components/ui")
    theme_import: str = Field(default="../constants/theme", description="Import path of the theme")
    after_auth_route: str = Field(default="/", description="Route opened after login/signup")

    def as_template_vars(self) -> dict[str, Any]:
        """Flatten into the variables visible inside a template."""
        data = self.model_dump(exclude={"theme", "navigation"})
        data.update(
            theme=self.theme,
            colors=self.theme.colors,
            navigation=self.navigation.value,
        )
        return data


class PlanEntry(BaseModel):
    """A single file to generate."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., description="POSIX path relative to the project root")
    template_id: str = Field(..., description="Template path relative to the template root")
    context: RenderContext


class FileTreePlan(BaseModel):
    """Ordered files to generate plus directories that must exist."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[PlanEntry, ...] = ()
    directories: tuple[str, ...] = ()

    @property
    def paths(self) -> list[str]:
        return [entry.relative_path for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, relative_path: object) -> bool:
        return relative_path in self.paths
