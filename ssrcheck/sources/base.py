"""Uniform read-only view over a project tree.

Detectors never touch the filesystem or the network directly. They ask a
Source for its entries, for a file's text, or whether any file contains a
literal token, and the Source decides how to answer: from local disk or
from the GitHub API.

Entries are paths relative to the project root, `/`-separated, covering
both files and directories. A listing's own entries are collected before
its subdirectories are descended into, so root-level names always come
first. `node_modules` and `.git` subtrees are never listed or searched.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

SKIPPED_DIRS = frozenset({"node_modules", ".git"})
SOURCE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")


class Source(ABC):
    """A project tree that can be listed, read and searched."""

    @abstractmethod
    async def list_entries(self) -> list[str]:
        """Return every descendant path under the root."""

    @abstractmethod
    async def read_file(self, relative_path: str) -> Optional[str]:
        """Return the file's text, or None when it is absent or unreadable."""

    @abstractmethod
    async def contains_any(
        self,
        tokens: Sequence[str],
        under: Optional[str] = None,
    ) -> bool:
        """Return True when a source file (optionally under `under`) contains any token."""
