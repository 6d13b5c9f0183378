from __future__ import annotations

import json
from pathlib import Path

import pytest

from issueblog.config import BlogConfig, RepositoryConfig, SiteConfig
from issueblog.lib.log import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging(verbose=False)


LAYOUT_TEMPLATE = """<html><head><title>{{ site.title }}</title></head>
<body>{{ content }}</body></html>
"""

ISSUE_TEMPLATE = """<article data-number="{{ issue.number }}">
<h1>{{ issue.title }}</h1>
{% for label in issue.labels %}<a class="label" href="{{ label.link }}">{{ label.name }}</a>{% endfor %}
<div class="content">{{ issue.content | safe }}</div>
<a class="source" href="{{ issue.github_link }}">source</a>
</article>
"""

INDEX_TEMPLATE = """{% if selected_label %}<h1 class="label">{{ selected_label.name }}</h1>{% endif %}
<ul>
{% for issue in issues %}<li><a href="{{ issue.link }}">{{ issue.title }}</a> {{ issue.summary | safe }}</li>
{% endfor %}</ul>
<footer>{{ custom.footer }} {{ today.year }}</footer>
"""

ABOUT_TEMPLATE = """<p class="about">{{ repository.owner }}/{{ repository.name }} has {{ issues | length }} posts</p>
"""


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    theme = tmp_path / "theme"
    theme.mkdir()
    (theme / "layout.html").write_text(LAYOUT_TEMPLATE, encoding="utf-8")
    (theme / "issue.html").write_text(ISSUE_TEMPLATE, encoding="utf-8")
    (theme / "index.html").write_text(INDEX_TEMPLATE, encoding="utf-8")
    (theme / "about.html").write_text(ABOUT_TEMPLATE, encoding="utf-8")
    (theme / "theme.json").write_text(
        json.dumps({
            "name": "plain",
            "other_templates": [{"source": "about.html", "layout": "layout.html", "target": "about.html"}],
            "custom": {"footer": "theme footer"},
        }),
        encoding="utf-8",
    )
    return theme


@pytest.fixture
def blog_config(tmp_path: Path, theme_dir: Path) -> BlogConfig:
    return BlogConfig(
        site=SiteConfig(title="Notes", author="Jo", mail="jo@example.com", description="Issue notes"),
        repository=RepositoryConfig(owner="o", name="r"),
        custom={"footer": "site footer"},
        output_dir=tmp_path / "public",
        theme_dir=theme_dir,
    )
