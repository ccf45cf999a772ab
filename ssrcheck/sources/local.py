"""Source backed by a directory on local disk."""

import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Optional

import structlog

from ssrcheck.sources.base import SKIPPED_DIRS, SOURCE_EXTENSIONS, Source

logger = structlog.get_logger(__name__)


class LocalSource(Source):
    """Reads a project straight from the filesystem.

    Nothing here raises for a missing or unreadable path: a root that does
    not exist simply lists as empty, and unreadable files read as None.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        # Several detectors need the listing; walk the tree once per source.
        self._entries: Optional[list[str]] = None

    def __repr__(self) -> str:
        return f"LocalSource({str(self.root)!r})"

    async def list_entries(self) -> list[str]:
        if self._entries is None:
            self._entries = self._walk()
        return list(self._entries)

    def _walk(self) -> list[str]:
        """Walk the tree depth-first in name order, skipping SKIPPED_DIRS."""
        if not self.root.is_dir():
            logger.warning("local_root_missing", root=str(self.root))
            return []

        entries: list[str] = []
        pending: list[Path] = [self.root]
        while pending:
            directory = pending.pop()
            try:
                children = sorted(directory.iterdir(), key=lambda p: p.name)
            except OSError as exc:
                logger.warning("local_list_failed", path=str(directory), error=str(exc))
                continue

            subdirs: list[Path] = []
            for child in children:
                if child.name in SKIPPED_DIRS:
                    continue
                entries.append(child.relative_to(self.root).as_posix())
                if child.is_dir() and not child.is_symlink():
                    subdirs.append(child)
            # Reversed so the alphabetically first subdirectory is walked first.
            pending.extend(reversed(subdirs))
        return entries

    async def read_file(self, relative_path: str) -> Optional[str]:
        path = self.root / relative_path
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("local_read_failed", path=str(path), error=str(exc))
            return None

    async def contains_any(
        self,
        tokens: Sequence[str],
        under: Optional[str] = None,
    ) -> bool:
        base = self.root / under if under else self.root
        if not base.is_dir():
            return False

        for path in _iter_source_files(base):
            try:
                content = path.read_text(encoding="utf-8", errors="replace")
            except OSError:
                continue
            if any(token in content for token in tokens):
                logger.debug("local_token_hit", path=str(path))
                return True
        return False


def _iter_source_files(base: Path) -> Iterator[Path]:
    """Yield JS/TS source files under `base` in a stable order."""
    for dirpath, dirnames, filenames in os.walk(base):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIPPED_DIRS)
        for filename in sorted(filenames):
            if filename.endswith(SOURCE_EXTENSIONS):
                yield Path(dirpath) / filename
