"""GitHub REST API client for read-only repository inspection.

Uses httpx for async HTTP calls. A token is optional: without one the
calls are unauthenticated and subject to GitHub's tighter rate limits
(and the code search endpoint refuses them).

Three operations are needed to inspect a repository without cloning it:
1. List a directory through the Contents API
2. Fetch and decode a single file through the Contents API
3. Run a code search query scoped to the repository

Errors are raised as httpx exceptions; callers decide how to degrade.
"""

import base64

import httpx

from ssrcheck.core.config import get_settings


async def list_directory(
    owner: str,
    repo: str,
    path: str = "",
    token: str | None = None,
) -> list[dict]:
    """GET /repos/{owner}/{repo}/contents/{path}

    Returns the raw directory listing (dicts with name, path, type).
    A path that points at a file yields a single-item list.
    """
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.github_timeout_seconds) as client:
        response = await client.get(
            f"{settings.github_api_base}/repos/{owner}/{repo}/contents/{path}",
            headers=_auth_headers(token),
        )
        response.raise_for_status()
        data = response.json()
        if isinstance(data, dict):
            return [data]
        return data


async def get_file_content(
    owner: str,
    repo: str,
    path: str,
    token: str | None = None,
) -> str | None:
    """GET /repos/{owner}/{repo}/contents/{path}

    Returns the decoded text content, or None when the file does not
    exist (404).
    """
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.github_timeout_seconds) as client:
        response = await client.get(
            f"{settings.github_api_base}/repos/{owner}/{repo}/contents/{path}",
            headers=_auth_headers(token),
        )
        if response.status_code == 404:
            return None
        response.raise_for_status()
        data = response.json()
        return base64.b64decode(data["content"].replace("\n", "")).decode("utf-8", errors="replace")


async def search_code(query: str, token: str | None = None) -> int:
    """GET /search/code?q={query}

    Returns the total_count of matches. Only the count is needed, so a
    single result per page is requested.
    """
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.github_timeout_seconds) as client:
        response = await client.get(
            f"{settings.github_api_base}/search/code",
            headers=_auth_headers(token),
            params={"q": query, "per_page": 1},
        )
        response.raise_for_status()
        return int(response.json().get("total_count", 0))


def _auth_headers(token: str | None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers
