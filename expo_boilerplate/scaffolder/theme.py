"""Theme resolution: user overrides on top of the fixed default palette."""

from __future__ import annotations

from .models import Configuration, Theme


DEFAULT_COLORS: dict[str, str] = {
    "primary": "#3B82F6",
    "secondary": "#6B7280",
    "success": "#10B981",
    "warning": "#F59E0B",
    "error": "#EF4444",
    "background": "#F9FAFB",
    "surface": "#FFFFFF",
    "text": "#111827",
    "textSecondary": "#6B7280",
    "border": "#E5E7EB",
}

SPACING: dict[str, int] = {
    "xs": 4,
    "sm": 8,
    "md": 16,
    "lg": 24,
    "xl": 32,
    "xxl": 48,
}

BORDER_RADIUS: dict[str, int] = {
    "sm": 8,
    "md": 12,
    "lg": 16,
    "xl": 24,
}


def resolve_theme(config: Configuration) -> Theme:
    """Derive the complete theme for *config*.

    Only ``primary`` and ``secondary`` can be overridden, and only by a
    non-empty value.  Never fails for a valid configuration.
    """
    colors = dict(DEFAULT_COLORS)
    if config.primary_color:
        colors["primary"] = config.primary_color
    if config.secondary_color:
        colors["secondary"] = config.secondary_color

    return Theme(
        colors=colors,
        font_family=config.font.value,
        spacing=dict(SPACING),
        border_radius=dict(BORDER_RADIUS),
    )
