"""Source backed by the GitHub REST API.

Inspects a hosted repository without cloning it: the tree is walked through
the Contents API, files are fetched one at a time, and token searches are
delegated to GitHub code search.

Every remote failure (non-2xx status, timeout, rate limiting, unexpected
payload) degrades to an empty listing, a missing file or a search miss.
A partial, evidence-light report is preferred over a failed analysis.
"""

from collections.abc import Sequence
from typing import Optional

import structlog

from ssrcheck.github import client as github_client
from ssrcheck.sources.base import SKIPPED_DIRS, Source

logger = structlog.get_logger(__name__)

# Upper bound on collected paths; each directory costs one API call. The cap
# also applies to the root listing: in a repository with more than 100 root
# entries, root files past the 100th (next.config.js, say) are never seen.
MAX_REMOTE_ENTRIES = 100


class GitHubSource(Source):
    """A repository addressed by owner and name on github.com."""

    def __init__(self, owner: str, repo: str, token: Optional[str] = None) -> None:
        self.owner = owner
        self.repo = repo
        self.token = token or None
        # Several detectors need the listing; walk the tree once per source.
        self._entries: Optional[list[str]] = None

    def __repr__(self) -> str:
        return f"GitHubSource({self.owner!r}, {self.repo!r})"

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    async def list_entries(self) -> list[str]:
        if self._entries is None:
            self._entries = await self._walk()
        return list(self._entries)

    async def _walk(self) -> list[str]:
        """Walk the tree depth-first, stopping at MAX_REMOTE_ENTRIES paths."""
        entries: list[str] = []
        pending: list[str] = [""]
        while pending and len(entries) < MAX_REMOTE_ENTRIES:
            directory = pending.pop()
            try:
                items = await github_client.list_directory(
                    self.owner, self.repo, directory, self.token
                )
            except Exception as exc:
                logger.warning(
                    "github_list_failed",
                    repo=self.full_name,
                    path=directory or "/",
                    error=str(exc),
                )
                continue

            subdirs: list[str] = []
            for item in items:
                if len(entries) >= MAX_REMOTE_ENTRIES:
                    break
                if not isinstance(item, dict):
                    continue
                name = item.get("name", "")
                path = item.get("path") or name
                if not path or name in SKIPPED_DIRS:
                    continue
                entries.append(path)
                if item.get("type") == "dir":
                    subdirs.append(path)
            pending.extend(reversed(subdirs))

        logger.debug("github_listed", repo=self.full_name, entries=len(entries))
        return entries

    async def read_file(self, relative_path: str) -> Optional[str]:
        try:
            return await github_client.get_file_content(
                self.owner, self.repo, relative_path, self.token
            )
        except Exception as exc:
            logger.warning(
                "github_read_failed",
                repo=self.full_name,
                path=relative_path,
                error=str(exc),
            )
            return None

    async def contains_any(
        self,
        tokens: Sequence[str],
        under: Optional[str] = None,
    ) -> bool:
        query = build_search_query(self.owner, self.repo, tokens, under)
        try:
            total = await github_client.search_code(query, self.token)
        except Exception as exc:
            logger.warning(
                "github_search_failed",
                repo=self.full_name,
                query=query,
                error=str(exc),
            )
            return False
        return total > 0


def build_search_query(
    owner: str,
    repo: str,
    tokens: Sequence[str],
    under: Optional[str] = None,
) -> str:
    """Build a code search query matching any of `tokens` as literal phrases."""
    phrases = " OR ".join(f'"{token}"' for token in tokens)
    query = f"{phrases} repo:{owner}/{repo}"
    if under:
        query += f" path:{under.strip('/')}"
    return query
