"""Sources: a uniform listing/reading/searching view over a project tree.

Public API:
    resolve_source(target, github_token) -> Resolution
"""

from ssrcheck.sources.base import Source
from ssrcheck.sources.github import MAX_REMOTE_ENTRIES, GitHubSource
from ssrcheck.sources.local import LocalSource
from ssrcheck.sources.resolver import Resolution, parse_github_target, resolve_source

__all__ = [
    "Source",
    "GitHubSource",
    "LocalSource",
    "MAX_REMOTE_ENTRIES",
    "Resolution",
    "parse_github_target",
    "resolve_source",
]
