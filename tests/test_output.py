"""Tests for the output directory writer."""

from __future__ import annotations

import pytest

from issueblog.errors import WriteError
from issueblog.output import OutputSink


def test_creates_root_and_writes(tmp_path):
    sink = OutputSink(tmp_path / "out" / "site")
    path = sink.write("1-post.html", "<p>é</p>")
    assert path.read_text(encoding="utf-8") == "<p>é</p>"
    assert sink.written == [path]


def test_overwrites_silently(tmp_path):
    sink = OutputSink(tmp_path)
    sink.write("index.html", "old")
    sink.write("index.html", b"new")
    assert (tmp_path / "index.html").read_text() == "new"


def test_refuses_escaping_root(tmp_path):
    sink = OutputSink(tmp_path / "site")
    with pytest.raises(WriteError):
        sink.write("../evil.html", "x")
    assert not (tmp_path / "evil.html").exists()


def test_os_error_is_write_error(tmp_path):
    (tmp_path / "index.html").mkdir()
    with pytest.raises(WriteError):
        OutputSink(tmp_path).write("index.html", "x")
