"""Jinja2 template rendering for the generated Expo project.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``expo_boilerplate/scaffolder/templates/`` directory and renders them with a
typed :class:`RenderContext`.

The generated files are TSX/JS, where ``{{ ... }}`` is an ordinary object
literal inside a JSX attribute.  Variables therefore use ``[[ ... ]]``
delimiters; statements keep the usual ``{% ... %}`` syntax.  Values never
reach the output raw: templates pass them through ``js_string`` (string
literal) or ``jsx_text`` (JSX text node).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .models import RenderContext


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the ``.j2`` templates that make up the Expo boilerplate.

    Rendering is a pure function of the template id and the context: the
    renderer holds no per-run state and never touches the output tree.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            variable_start_string="[[",
            variable_end_string="]]",
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["js_string"] = js_string
        self.env.filters["jsx_text"] = jsx_text

    def render(self, template_id: str, context: RenderContext) -> str:
        """Render a single template.

        Args:
            template_id: Path relative to the template directory (e.g.
                ``"app/login.tsx.j2"``).
            context: Values available to the template.

        Returns:
            The rendered file content.

        Raises:
            jinja2.TemplateNotFound: If *template_id* does not exist.
        """
        template = self.env.get_template(template_id)
        return template.render(**context.as_template_vars())

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template ids under *prefix*."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# Escaping filters
# ---------------------------------------------------------------------------

_JSX_TEXT_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "{": "&#123;",
    "}": "&#125;",
}


def js_string(value: Any) -> str:
    """Quote *value* as a double-quoted JavaScript string literal."""
    return json.dumps(str(value))


def jsx_text(value: Any) -> str:
    """Escape *value* for use as literal text between JSX tags."""
    return "".join(_JSX_TEXT_ESCAPES.get(ch, ch) for ch in str(value))
