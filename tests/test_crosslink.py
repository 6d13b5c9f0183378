"""Tests for rewriting intra-repository issue links."""

from __future__ import annotations

import pytest

from issueblog.crosslink import (
    issue_base_url,
    parse_issue_number,
    rewrite_cross_links,
    rewrite_links,
)
from issueblog.errors import ParseError
from issueblog.models import Issue

BASE = "https://github.com/o/r/issues/"


def _issue(number: int, content: str = "", link: str | None = None) -> Issue:
    return Issue(number=number, title=f"Post {number}", link=link or f"{number}-post-{number}.html", content=content)


def test_issue_base_url():
    assert issue_base_url("o", "r") == BASE


@pytest.mark.parametrize(
    "href,expected",
    [
        (BASE + "2", 2),
        (BASE + "2/", 2),
        (BASE + "/2/", 2),
        (BASE + " 42 ", 42),
        (BASE + "2#issuecomment-1", None),
        (BASE + "2/comments", None),
        (BASE + "abc", None),
        (BASE, None),
        (BASE + "1_0", None),
        ("https://github.com/o/other/issues/2", None),
        ("https://github.com/o/r/pull/2", None),
        ("http://github.com/o/r/issues/2", None),
        ("2-post.html", None),
    ],
)
def test_parse_issue_number(href, expected):
    assert parse_issue_number(href, BASE) == expected


class TestRewriteLinks:
    def test_known_issue_link_is_rewritten(self):
        html = f'<p>See <a href="{BASE}2">two</a></p>'
        out = rewrite_links(html, {2: "2-two.html"}, BASE)
        assert out == '<p>See <a href="2-two.html">two</a></p>'

    def test_unknown_number_is_kept(self):
        html = f'<p><a href="{BASE}99">gone</a></p>'
        assert rewrite_links(html, {2: "2-two.html"}, BASE) == html

    def test_other_links_are_kept(self):
        html = (
            '<p><a href="https://example.com/">ext</a> '
            '<a href="https://github.com/o/r/pull/2">pr</a> '
            f'<a href="{BASE}2#issuecomment-5">comment</a></p>'
        )
        assert rewrite_links(html, {2: "2-two.html"}, BASE) == html

    def test_anchor_without_href_is_untouched(self):
        html = '<p><a name="top">top</a></p>'
        assert rewrite_links(html, {2: "2-two.html"}, BASE) == html

    def test_rewrites_all_matching_anchors(self):
        html = f'<ul><li><a href="{BASE}1">a</a></li><li><a href="{BASE}3/">b</a></li></ul>'
        out = rewrite_links(html, {1: "1-a.html", 3: "3-b.html"}, BASE)
        assert 'href="1-a.html"' in out
        assert 'href="3-b.html"' in out
        assert BASE not in out

    def test_other_attributes_preserved(self):
        html = f'<p><a class="x" href="{BASE}2" title="t">two</a></p>'
        out = rewrite_links(html, {2: "2-two.html"}, BASE)
        assert out == '<p><a class="x" href="2-two.html" title="t">two</a></p>'

    def test_parse_error_propagates(self, monkeypatch):
        def reject(html):
            raise ParseError("nope")

        monkeypatch.setattr("issueblog.crosslink.parse_html", reject)
        with pytest.raises(ParseError):
            rewrite_links("<p></p>", {}, BASE)


class TestRewriteCrossLinks:
    def test_rewrites_in_place(self):
        one = _issue(1, f'<p><a href="{BASE}2">next</a></p>')
        two = _issue(2, f'<p><a href="{BASE}1">prev</a></p>')
        rewrite_cross_links([one, two], BASE)
        assert one.content == '<p><a href="2-post-2.html">next</a></p>'
        assert two.content == '<p><a href="1-post-1.html">prev</a></p>'

    def test_self_link(self):
        one = _issue(1, f'<p><a href="{BASE}1">me</a></p>')
        rewrite_cross_links([one], BASE)
        assert one.content == '<p><a href="1-post-1.html">me</a></p>'

    def test_idempotent(self):
        issues = [
            _issue(1, f'<p><a href="{BASE}2">n</a> <a href="https://x.org">x</a></p><br/>'),
            _issue(2, f'<p><a href="{BASE}1/">p</a> <a href="{BASE}7">missing</a></p>'),
        ]
        rewrite_cross_links(issues, BASE)
        once = [issue.content for issue in issues]
        rewrite_cross_links(issues, BASE)
        assert [issue.content for issue in issues] == once

    def test_parse_failure_keeps_content(self, monkeypatch):
        def reject(html):
            raise ParseError("nope")

        monkeypatch.setattr("issueblog.crosslink.parse_html", reject)
        original = f'<p><a href="{BASE}2">n</a></p>'
        issues = [_issue(1, original), _issue(2)]
        rewrite_cross_links(issues, BASE)
        assert issues[0].content == original

    def test_only_content_changes(self):
        issue = _issue(1, f'<p><a href="{BASE}1">me</a></p>')
        issue.summary = f'<a href="{BASE}1">me</a>'
        rewrite_cross_links([issue], BASE)
        assert issue.summary == f'<a href="{BASE}1">me</a>'


def test_deeply_nested_content_is_rewritten():
    depth = 2000
    html = "<div>" * depth + f'<a href="{BASE}2">two</a>' + "</div>" * depth
    out = rewrite_links(html, {2: "2-two.html"}, BASE)
    assert '<a href="2-two.html">two</a>' in out
    assert out.count("<div>") == depth
