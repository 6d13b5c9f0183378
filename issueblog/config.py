"""Site and theme configuration.

The site configuration (``issueblog.json``) describes the blog and the
repository it is built from; the theme configuration (``theme.json``, inside
the theme directory) names the templates used for each kind of page.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from issueblog.errors import ConfigError

CONFIG_ENV = "ISSUEBLOG_CONFIG"
DEFAULT_CONFIG_NAME = "issueblog.json"
THEME_CONFIG_NAME = "theme.json"
DEFAULT_FEED_FILE = "atom.xml"


class SiteConfig(BaseModel):
    title: str = "Issue Blog"
    author: str = ""
    mail: str = ""
    description: str = ""
    base_url: Optional[str] = None


class RepositoryConfig(BaseModel):
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def pages_url(self) -> str:
        """GitHub Pages address of the repository."""
        return f"https://{self.owner}.github.io/{self.name}"


class BlogConfig(BaseSettings):
    """Everything a build needs besides the issues and the theme."""

    site: SiteConfig = Field(default_factory=SiteConfig)
    repository: RepositoryConfig
    custom: dict[str, Any] = Field(default_factory=dict)
    output_dir: Path = Field(default=Path("public"))
    theme_dir: Path = Field(default=Path("theme"))
    feed_file: str = DEFAULT_FEED_FILE

    @field_validator("output_dir", "theme_dir", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @property
    def site_url(self) -> str:
        return (self.site.base_url or self.repository.pages_url).rstrip("/")

    model_config = SettingsConfigDict(
        env_prefix="ISSUEBLOG_",
        env_nested_delimiter="__",
    )


class TemplateSpec(BaseModel):
    """One theme template: its source file, optional layout, and output name."""

    source: str
    layout: Optional[str] = None
    target: Optional[str] = None


class ThemeConfig(BaseModel):
    name: str = ""
    issue_template: TemplateSpec = Field(
        default_factory=lambda: TemplateSpec(source="issue.html", layout="layout.html")
    )
    index_template: TemplateSpec = Field(
        default_factory=lambda: TemplateSpec(
            source="index.html", layout="layout.html", target="index.html"
        )
    )
    other_templates: list[TemplateSpec] = Field(default_factory=list)
    custom: dict[str, Any] = Field(default_factory=dict)

    @field_validator("other_templates")
    @classmethod
    def require_targets(cls, v: list[TemplateSpec]) -> list[TemplateSpec]:
        for template in v:
            if not template.target:
                raise ValueError(f"template '{template.source}' has no target")
        return v


def _read_json(path: Path, what: str) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"{what} not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read {what} {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{what} {path} must contain a JSON object")
    return data


def config_path(explicit: Optional[Path] = None) -> Path:
    if explicit:
        return explicit.expanduser()
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path(DEFAULT_CONFIG_NAME)


def load_config(path: Optional[Path] = None) -> BlogConfig:
    """Load the site configuration.

    Relative ``output_dir`` and ``theme_dir`` are resolved against the
    directory holding the config file.
    """
    resolved = config_path(path)
    data = _read_json(resolved, "config")
    try:
        config = BlogConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {resolved}: {exc}") from exc
    base = resolved.parent
    if not config.output_dir.is_absolute():
        config.output_dir = base / config.output_dir
    if not config.theme_dir.is_absolute():
        config.theme_dir = base / config.theme_dir
    return config


def load_theme(theme_dir: Path) -> ThemeConfig:
    """Load ``theme.json`` from ``theme_dir``; a theme without one uses the defaults."""
    path = theme_dir / THEME_CONFIG_NAME
    if not path.exists():
        return ThemeConfig()
    data = _read_json(path, "theme config")
    try:
        return ThemeConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid theme config {path}: {exc}") from exc


__all__ = [
    "BlogConfig",
    "ConfigError",
    "RepositoryConfig",
    "SiteConfig",
    "TemplateSpec",
    "ThemeConfig",
    "config_path",
    "load_config",
    "load_theme",
]
