"""Interactive collection of the user's answers.

Asks for the app name, font, brand colors and navigation options using Rich
prompts.  Answers are validated as they are typed, so the returned
mapping always builds into a :class:`Configuration`.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from expo_boilerplate.scaffolder.models import (
    DEFAULT_APP_NAME,
    FontFamily,
    normalize_color,
    validate_app_name,
)
from expo_boilerplate.scaffolder.theme import DEFAULT_COLORS
from expo_boilerplate.utils import console as default_console


def collect_answers(console: Optional[Console] = None) -> dict[str, Any]:
    """Ask every question and return the raw answers.

    The bottom-tabs question is only asked when authentication pages are
    requested; otherwise ``needsBottomTabs`` is left out and the
    configuration default applies.
    """
    console = console or default_console

    answers: dict[str, Any] = {}
    answers["appName"] = _ask_until_valid(
        console,
        "What is your app name?",
        validate_app_name,
        default=DEFAULT_APP_NAME,
    )
    answers["font"] = Prompt.ask(
        "Choose a default font family",
        choices=[font.value for font in FontFamily],
        default=FontFamily.INTER.value,
        console=console,
    )
    answers["primaryColor"] = _ask_until_valid(
        console,
        f"Enter primary color (hex code, leave empty for default {DEFAULT_COLORS['primary']})",
        _color_or_empty,
        default="",
    )
    answers["secondaryColor"] = _ask_until_valid(
        console,
        f"Enter secondary color (hex code, leave empty for default {DEFAULT_COLORS['secondary']})",
        _color_or_empty,
        default="",
    )
    answers["needsAuth"] = Confirm.ask(
        "Do you need authentication pages?", default=False, console=console
    )
    if answers["needsAuth"]:
        answers["needsBottomTabs"] = Confirm.ask(
            "Do you want bottom tab navigation for home?", default=True, console=console
        )
    return answers


def _color_or_empty(value: str) -> str:
    return normalize_color(value) or ""


def _ask_until_valid(
    console: Console,
    question: str,
    validate: Callable[[str], str],
    default: str,
) -> str:
    """Re-ask *question* until *validate* accepts the answer."""
    while True:
        value = Prompt.ask(question, default=default, show_default=bool(default), console=console)
        try:
            return validate(value)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
