"""Atom feed for the published issues."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Optional

from jinja2 import DictLoader, Environment, TemplateError, select_autoescape

from issueblog.config import BlogConfig
from issueblog.errors import RenderError
from issueblog.models import Issue

ATOM_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>{{ site.title }}</title>
  <id>{{ site_url }}/</id>
  <link href="{{ site_url }}/"></link>
  {%- if site.description %}
  <subtitle>{{ site.description }}</subtitle>
  {%- endif %}
  <updated>{{ updated | atom_date }}</updated>
  <author>
    <name>{{ site.author or site.title }}</name>
    {%- if site.mail %}
    <email>{{ site.mail }}</email>
    {%- endif %}
  </author>
  {%- for entry in entries %}
  <entry>
    <title>{{ entry.title }}</title>
    <id>{{ entry.url }}</id>
    <link href="{{ entry.url }}" rel="alternate"></link>
    <updated>{{ entry.updated | atom_date }}</updated>
    <author>
      <name>{{ site.author or site.title }}</name>
      {%- if site.mail %}
      <email>{{ site.mail }}</email>
      {%- endif %}
    </author>
    <summary type="html">{{ entry.summary }}</summary>
  </entry>
  {%- endfor %}
</feed>
"""


def _atom_date(value: Optional[datetime]) -> str:
    """RFC 3339 timestamp; naive datetimes are taken as UTC."""
    if value is None:
        value = datetime.fromtimestamp(0, tz=timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


_env = Environment(
    loader=DictLoader({"atom.xml": ATOM_TEMPLATE}),
    autoescape=select_autoescape(["xml"]),
)
_env.filters["atom_date"] = _atom_date


def build_feed(
    issues: Sequence[Issue],
    config: BlogConfig,
    now: Optional[datetime] = None,
) -> str:
    """Render the Atom feed, one entry per issue in the given order.

    Entry summaries are the issues' HTML summaries, escaped as
    ``type="html"`` text.

    Raises:
        RenderError: If the feed cannot be rendered.
    """
    site_url = config.site_url
    entries = [
        {
            "title": issue.title,
            "url": f"{site_url}/{issue.link}",
            "summary": issue.summary,
            "updated": issue.created,
        }
        for issue in issues
    ]
    try:
        return _env.get_template("atom.xml").render(
            site=config.site,
            site_url=site_url,
            updated=now or datetime.now(timezone.utc),
            entries=entries,
        )
    except TemplateError as exc:
        raise RenderError(f"Feed rendering failed: {exc}") from exc


__all__ = ["build_feed"]
