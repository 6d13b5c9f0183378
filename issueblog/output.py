"""Output directory writer."""

from __future__ import annotations

from pathlib import Path

from issueblog.errors import WriteError
from issueblog.lib.log import get_logger

logger = get_logger(__name__)


def is_within_root(path: Path, root: Path) -> bool:
    """Return True if path resolves within root."""
    try:
        path.resolve(strict=False).relative_to(root.resolve(strict=False))
    except ValueError:
        return False
    return True


class OutputSink:
    """Writes generated files below one root directory, overwriting silently."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.written: list[Path] = []

    def write(self, relative_path: str, content: str | bytes) -> Path:
        """Write ``content`` to ``root/relative_path``.

        Raises:
            WriteError: If the path leaves the root or the write fails.
        """
        target = self.root / relative_path
        if not is_within_root(target, self.root):
            raise WriteError(f"Refusing to write outside {self.root}: {relative_path}")
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise WriteError(f"Cannot write {target}: {exc}") from exc
        self.written.append(target)
        logger.debug("file_written", path=str(target), size=len(data))
        return target


__all__ = ["OutputSink", "is_within_root"]
