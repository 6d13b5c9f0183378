"""issueblog - publish a GitHub repository's issues as a static blog.

Example:
    from issueblog import SiteBuilder, load_config, load_theme
    from issueblog.github import GitHubIssueSource

    config = load_config(Path("issueblog.json"))
    with GitHubIssueSource(config.repository.owner, config.repository.name) as source:
        raw_issues = source.fetch()

    result = SiteBuilder(config, load_theme(config.theme_dir)).build(raw_issues)
    print(f"Published {result.issues} issues")
"""

from issueblog.config import BlogConfig, ThemeConfig, load_config, load_theme
from issueblog.errors import (
    ConfigError,
    IssueBlogError,
    ParseError,
    RenderError,
    SourceError,
    WriteError,
)
from issueblog.models import Issue, Label, RawIssue, RawLabel
from issueblog.site import BuildResult, SiteBuilder

__all__ = [
    "BlogConfig",
    "BuildResult",
    "ConfigError",
    "Issue",
    "IssueBlogError",
    "Label",
    "ParseError",
    "RawIssue",
    "RawLabel",
    "RenderError",
    "SiteBuilder",
    "SourceError",
    "ThemeConfig",
    "WriteError",
    "load_config",
    "load_theme",
]
