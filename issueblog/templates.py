"""Theme template rendering using Jinja2."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from issueblog.config import RepositoryConfig, SiteConfig, ThemeConfig
from issueblog.errors import RenderError
from issueblog.models import Issue, Label


@dataclass
class TemplateContext:
    """Variables available to every theme template.

    ``issues`` is the page's issue list (all issues on the index, one label's
    issues on a label page); ``issue`` is only set on single-issue pages and
    ``selected_label`` only on label pages. ``custom`` merges the theme's
    custom values with the site's, the site winning.
    """

    site: SiteConfig
    repository: RepositoryConfig
    today: datetime
    theme: ThemeConfig
    issues: list[Issue] = field(default_factory=list)
    issue: Optional[Issue] = None
    selected_label: Optional[Label] = None
    custom: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "site": self.site,
            "repository": self.repository,
            "today": self.today,
            "theme": self.theme,
            "issues": self.issues,
            "issue": self.issue,
            "selected_label": self.selected_label,
            "custom": self.custom,
        }


class TemplateRenderer:
    """Renders theme templates from a theme directory.

    Issue content and summaries are HTML already; themes output them with
    ``{{ issue.content | safe }}``.
    """

    def __init__(self, theme_dir: Path):
        self.theme_dir = Path(theme_dir)
        self.env = Environment(
            loader=FileSystemLoader(self.theme_dir),
            autoescape=select_autoescape(["html", "htm", "xml"]),
        )

    def render(
        self,
        source: str,
        context: TemplateContext,
        layout: Optional[str] = None,
    ) -> str:
        """Render ``source``; with a layout, the result is passed to it as ``content``.

        Raises:
            RenderError: If a template is missing or fails to render.
        """
        variables = context.as_dict()
        page = self._render_one(source, variables)
        if layout is None:
            return page
        return self._render_one(layout, {**variables, "content": Markup(page)})

    def _render_one(self, name: str, variables: dict[str, Any]) -> str:
        try:
            template = self.env.get_template(name)
        except (TemplateError, UnicodeDecodeError, OSError) as exc:
            raise RenderError(f"Cannot load template {name!r}: {exc}") from exc
        try:
            return template.render(variables)
        except Exception as exc:
            # Theme expressions and filters may raise anything.
            raise RenderError(f"Template {name!r} failed: {exc}") from exc


__all__ = ["TemplateContext", "TemplateRenderer"]
