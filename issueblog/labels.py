"""Group published issues by label for the per-label index pages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from issueblog.models import Issue, Label


@dataclass
class LabelIndex:
    """Labels in order of first appearance, and the issues carrying each."""

    labels: dict[str, Label] = field(default_factory=dict)
    issues_by_label: dict[str, list[Issue]] = field(default_factory=dict)


@dataclass
class LabelPage:
    label: Label
    issues: list[Issue]

    @property
    def target(self) -> str:
        return self.label.link


def group_by_label(issues: Iterable[Issue]) -> LabelIndex:
    index = LabelIndex()
    for issue in issues:
        seen: set[str] = set()
        for label in issue.labels:
            # An issue lists a label once per page even if the tracker repeated it.
            if label.name in seen:
                continue
            seen.add(label.name)
            index.labels.setdefault(label.name, label)
            index.issues_by_label.setdefault(label.name, []).append(issue)
    return index


def label_pages(issues: Iterable[Issue]) -> list[LabelPage]:
    index = group_by_label(issues)
    return [
        LabelPage(label=index.labels[name], issues=grouped)
        for name, grouped in index.issues_by_label.items()
    ]


__all__ = ["LabelIndex", "LabelPage", "group_by_label", "label_pages"]
