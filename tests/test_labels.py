"""Tests for grouping issues by label."""

from __future__ import annotations

from issueblog.labels import group_by_label, label_pages
from issueblog.models import Issue, Label


def _issue(number: int, *labels: str) -> Issue:
    return Issue(
        number=number,
        title=f"Post {number}",
        link=f"{number}-post.html",
        labels=[Label.for_name(name) for name in labels],
    )


def test_two_issues_share_a_label():
    first, second = _issue(1, "bug"), _issue(2, "bug")
    index = group_by_label([first, second])
    assert index.issues_by_label["bug"] == [first, second]
    pages = label_pages([first, second])
    assert len(pages) == 1
    assert pages[0].target == "label-bug.html"
    assert pages[0].issues == [first, second]


def test_issue_appears_once_per_label():
    issue = _issue(1, "a", "b", "c")
    index = group_by_label([issue])
    assert list(index.issues_by_label) == ["a", "b", "c"]
    assert all(grouped == [issue] for grouped in index.issues_by_label.values())


def test_relative_order_within_group():
    issues = [_issue(3, "x"), _issue(1, "y"), _issue(2, "x", "y")]
    index = group_by_label(issues)
    assert [i.number for i in index.issues_by_label["x"]] == [3, 2]
    assert [i.number for i in index.issues_by_label["y"]] == [1, 2]


def test_labels_in_order_of_first_appearance():
    index = group_by_label([_issue(1, "b"), _issue(2, "a", "b"), _issue(3, "c")])
    assert list(index.labels) == ["b", "a", "c"]
    assert index.labels["a"] == Label.for_name("a")
    assert index.labels["a"].link == "label-a.html"


def test_repeated_label_on_one_issue_counts_once():
    issue = _issue(1, "dup", "dup")
    assert group_by_label([issue]).issues_by_label["dup"] == [issue]


def test_unlabelled_issues_produce_no_pages():
    assert label_pages([_issue(1), _issue(2)]) == []


def test_label_equality_by_name():
    assert Label(name="a", link="one.html") == Label(name="a", link="other.html")
    assert len({Label.for_name("a"), Label(name="a", link="x")}) == 1
