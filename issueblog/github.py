"""Fetch issues from the GitHub REST API."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from issueblog.errors import SourceError
from issueblog.lib.log import get_logger
from issueblog.models import RawIssue

logger = get_logger(__name__)

API_BASE = "https://api.github.com"
PER_PAGE = 100


def _raise_for_status(resp: httpx.Response) -> None:
    if resp.status_code < 400:
        return
    message = f"HTTP {resp.status_code}"
    try:
        payload = resp.json()
        msg = payload.get("message")
        if isinstance(msg, str) and msg.strip():
            message = f"{message}: {msg}"
    except (ValueError, AttributeError):
        text = resp.text.strip()
        if text:
            message = f"{message}: {text}"
    raise SourceError(message, resp.status_code)


def parse_issues(payload: Any) -> List[RawIssue]:
    """Convert a JSON array of GitHub issue objects, skipping pull requests."""
    if not isinstance(payload, list):
        raise SourceError("Expected a JSON array of issues")
    issues: List[RawIssue] = []
    for item in payload:
        if not isinstance(item, dict):
            raise SourceError(f"Expected an issue object, got {type(item).__name__}")
        if "pull_request" in item:
            continue
        try:
            issues.append(RawIssue.from_api(item))
        except (KeyError, ValueError) as exc:
            raise SourceError(f"Malformed issue object: {exc}") from exc
    return issues


def load_issues_file(path: Path) -> List[RawIssue]:
    """Read issues previously saved from the API (``gh api ... > issues.json``)."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SourceError(f"Cannot read issues file {path}: {exc}") from exc
    return parse_issues(payload)


class GitHubIssueSource:
    """Issues of one repository, oldest first.

    Only the first page of up to ``PER_PAGE`` issues is requested.
    """

    def __init__(
        self,
        owner: str,
        name: str,
        token: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.owner = owner
        self.name = name
        self.token = token
        self.client = client or httpx.Client(base_url=API_BASE, timeout=30.0)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "issueblog",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def fetch(self) -> List[RawIssue]:
        """Fetch the repository's open issues.

        Raises:
            SourceError: On transport failure or an error response.
        """
        url = f"/repos/{self.owner}/{self.name}/issues"
        params = {"state": "open", "per_page": PER_PAGE, "direction": "asc"}
        try:
            resp = self.client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as exc:
            raise SourceError(f"Request to {url} failed: {exc}") from exc
        _raise_for_status(resp)
        try:
            payload = resp.json()
        except ValueError as exc:
            raise SourceError(f"Invalid JSON from {url}: {exc}") from exc
        issues = parse_issues(payload)
        logger.info("issues_fetched", repository=f"{self.owner}/{self.name}", count=len(issues))
        return issues

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


__all__ = ["GitHubIssueSource", "load_issues_file", "parse_issues"]
