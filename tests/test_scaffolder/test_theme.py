"""Tests for theme resolution."""

from __future__ import annotations

import pytest

from expo_boilerplate.scaffolder.models import Configuration, Theme
from expo_boilerplate.scaffolder.planner import plan_project
from expo_boilerplate.scaffolder.theme import (
    BORDER_RADIUS,
    DEFAULT_COLORS,
    SPACING,
    resolve_theme,
)


pytestmark = pytest.mark.unit


class TestResolveTheme:
    def test_defaults(self, default_config: Configuration):
        theme = resolve_theme(default_config)
        assert theme.colors == DEFAULT_COLORS
        assert theme.primary == "#3B82F6"
        assert theme.secondary == "#6B7280"
        assert theme.font_family == "Inter"

    def test_primary_override(self, auth_tabs_config: Configuration):
        theme = resolve_theme(auth_tabs_config)
        assert theme.primary == "#FF0000"
        # Empty secondary answer keeps the default.
        assert theme.secondary == DEFAULT_COLORS["secondary"]

    def test_both_overrides(self):
        config = Configuration.build(
            {"appName": "a", "primaryColor": "#111", "secondaryColor": "#22222222"}
        )
        theme = resolve_theme(config)
        assert theme.primary == "#111"
        assert theme.secondary == "#22222222"

    def test_other_slots_never_change(self, auth_tabs_config: Configuration):
        theme = resolve_theme(auth_tabs_config)
        for slot, value in DEFAULT_COLORS.items():
            if slot not in ("primary", "secondary"):
                assert theme.colors[slot] == value

    def test_slot_order(self, default_config: Configuration):
        assert list(resolve_theme(default_config).colors) == [
            "primary",
            "secondary",
            "success",
            "warning",
            "error",
            "background",
            "surface",
            "text",
            "textSecondary",
            "border",
        ]

    def test_scales(self, default_config: Configuration):
        theme = resolve_theme(default_config)
        assert theme.spacing == {"xs": 4, "sm": 8, "md": 16, "lg": 24, "xl": 32, "xxl": 48}
        assert theme.border_radius == {"sm": 8, "md": 12, "lg": 16, "xl": 24}

    def test_module_defaults_not_mutated(self, auth_tabs_config: Configuration):
        resolve_theme(auth_tabs_config)
        assert DEFAULT_COLORS["primary"] == "#3B82F6"
        assert SPACING["md"] == 16
        assert BORDER_RADIUS["xl"] == 24

    def test_font_family_follows_config(self, auth_stack_config: Configuration):
        assert resolve_theme(auth_stack_config).font_family == "Poppins"

    def test_black_primary_with_empty_secondary(self):
        config = Configuration.build(
            {"appName": "demo", "primaryColor": "#000000", "secondaryColor": ""}
        )
        theme = resolve_theme(config)
        assert theme.primary == "#000000"
        assert theme.secondary == "#6B7280"

    def test_equal_configs_equal_themes(self, auth_tabs_config: Configuration):
        assert resolve_theme(auth_tabs_config) == resolve_theme(auth_tabs_config)


class TestThemeImmutability:
    def test_color_table_is_read_only(self, default_config: Configuration):
        theme = resolve_theme(default_config)
        with pytest.raises(TypeError):
            theme.colors["primary"] = "#BAD"

    def test_scales_are_read_only(self, default_config: Configuration):
        theme = resolve_theme(default_config)
        with pytest.raises(TypeError):
            theme.spacing["md"] = 0
        with pytest.raises(TypeError):
            theme.border_radius["xl"] = 0

    def test_shared_theme_cannot_drift_across_plan(self, auth_tabs_config: Configuration):
        plan = plan_project(auth_tabs_config, resolve_theme(auth_tabs_config))
        with pytest.raises(TypeError):
            plan.entries[0].context.theme.colors["primary"] = "#BAD"
        assert plan.entries[-1].context.theme.colors["primary"] == "#FF0000"

    def test_caller_dict_changes_do_not_leak(self):
        colors = dict(DEFAULT_COLORS)
        rebuilt = Theme(
            colors=colors,
            font_family="Inter",
            spacing=dict(SPACING),
            border_radius=dict(BORDER_RADIUS),
        )
        colors["primary"] = "#BAD"
        assert rebuilt.primary == "#3B82F6"

    def test_dump_gives_plain_dicts(self, default_config: Configuration):
        dumped = resolve_theme(default_config).model_dump()
        assert type(dumped["colors"]) is dict
        assert dumped["spacing"]["xxl"] == 48
