"""Check endpoints for the SSR check server.

GET /health      liveness probe
GET /check-repo  run one SSR analysis for a local path or GitHub URL

Errors are returned as `{"error": ...}` bodies rather than FastAPI's
default `{"detail": ...}` shape.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from ssrcheck.checks.schemas import (
    AnalysisReportSchema,
    CheckRepoResponse,
    ErrorResponse,
    HealthResponse,
)
from ssrcheck.core.config import Settings, get_settings
from ssrcheck.core.limiter import limiter
from ssrcheck.detector.aggregator import detect_ssr
from ssrcheck.detector.pipeline import get_detectors

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["checks"])


def _check_rate_limit() -> str:
    return get_settings().check_rate_limit


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="Alive!")


@router.get(
    "/check-repo",
    response_model=CheckRepoResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
@limiter.limit(_check_rate_limit)
async def check_repo(
    request: Request,
    repo_path: Optional[str] = Query(default=None, alias="repoPath"),
    github_token: Optional[str] = Query(default=None, alias="githubToken"),
    profile: Optional[str] = Query(default=None),
    settings: Settings = Depends(get_settings),
):
    """Analyze a repository and report whether it needs server-side rendering.

    `githubToken` falls back to the server's configured GITHUB_TOKEN.
    `profile` selects the detector list ("minimal" or "extended").
    """
    if not repo_path:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "repoPath is required"},
        )

    try:
        detectors = get_detectors(profile or settings.detection_profile)
    except ValueError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc)},
        )

    token = github_token or settings.github_token or None
    try:
        report = await detect_ssr(repo_path, token, detectors=detectors)
    except Exception as exc:
        logger.exception("check_repo_failed", repo_path=repo_path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to analyze repository", "details": str(exc)},
        )

    return CheckRepoResponse(results=AnalysisReportSchema.from_report(report))
