from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as metadata_version


def _resolve_version() -> str:
    """Installed distribution version, or "unknown" when running from a bare checkout."""
    try:
        return metadata_version("issueblog")
    except PackageNotFoundError:
        return "unknown"


ISSUEBLOG_VERSION = _resolve_version()

__all__ = ["ISSUEBLOG_VERSION"]
