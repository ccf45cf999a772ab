"""Decide which Source backs an analysis.

A target matching `github.com/<owner>/<repo>` is inspected through the
GitHub API; anything else is treated as a local directory. The decision
is final for the run; there is no fallback from one mode to the other.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from ssrcheck.sources.base import Source
from ssrcheck.sources.github import GitHubSource
from ssrcheck.sources.local import LocalSource

GITHUB_URL_RE = re.compile(r"github\.com/([^/]+)/([^/]+)")


@dataclass
class Resolution:
    """The Source chosen for a target plus evidence lines the choice produced."""

    source: Source
    evidence: list[str] = field(default_factory=list)


def parse_github_target(target: str) -> Optional[tuple[str, str]]:
    """Extract (owner, repo) from a GitHub URL, or None for anything else.

    A trailing ".git" is stripped from the repository name.
    """
    match = GITHUB_URL_RE.search(target)
    if not match:
        return None
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    return owner, repo


def resolve_source(target: str, github_token: Optional[str] = None) -> Resolution:
    parsed = parse_github_target(target)
    if parsed is None:
        return Resolution(source=LocalSource(target))

    owner, repo = parsed
    return Resolution(
        source=GitHubSource(owner, repo, github_token),
        evidence=[f"Analyzing GitHub repository: {owner}/{repo}"],
    )
