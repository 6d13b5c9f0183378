"""Issue models: raw tracker records in, renderable blog entries out."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from slugify import slugify


class RawLabel(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class RawIssue(BaseModel):
    """An issue exactly as the tracker reported it. Never mutated."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str = ""
    body: str = ""
    created_at: datetime
    html_url: str = ""
    labels: tuple[RawLabel, ...] = ()

    @field_validator("title", "body", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> RawIssue:
        """Build from a GitHub REST ``issue`` object."""
        labels = []
        for label in payload.get("labels") or []:
            # Entries are label objects, or bare names in hand-written fixtures.
            name = label.get("name") if isinstance(label, dict) else label
            if name is not None:
                labels.append(RawLabel(name=str(name)))
        return cls(
            number=payload["number"],
            title=payload.get("title"),
            body=payload.get("body"),
            created_at=payload["created_at"],
            html_url=payload.get("html_url") or "",
            labels=tuple(labels),
        )


@dataclass(frozen=True)
class Label:
    name: str
    link: str = field(compare=False)

    @classmethod
    def for_name(cls, name: str) -> Label:
        return cls(name=name, link=f"label-{name}.html")


@dataclass
class Issue:
    """A published blog entry derived from one raw issue.

    ``content`` is the only field changed after construction (by the
    cross-link rewriter); everything else is fixed at transform time.
    """

    number: int
    title: str
    link: str
    content: str = ""
    summary: str = ""
    labels: list[Label] = field(default_factory=list)
    github_link: str = ""
    created: datetime | None = None


def issue_link(number: int, title: str) -> str:
    """Page name for an issue: ``<number>-<slug>.html``."""
    return f"{number}-{slugify(title)}.html"


__all__ = ["RawLabel", "RawIssue", "Label", "Issue", "issue_link"]
