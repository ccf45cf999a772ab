import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from ssrcheck import __version__
from ssrcheck.checks.router import router as checks_router
from ssrcheck.core.config import get_settings
from ssrcheck.core.limiter import limiter
from ssrcheck.core.middleware import RequestIdMiddleware


def create_app() -> FastAPI:
    settings = get_settings()

    _app = FastAPI(
        title="SSR Check API",
        description="Heuristic detection of projects that need server-side rendering",
        version=__version__,
    )

    # ---------------------------------------------------------------------------
    # Rate limiter state: SlowAPI reads limiter from app.state
    # ---------------------------------------------------------------------------
    _app.state.limiter = limiter
    _app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # ---------------------------------------------------------------------------
    # Middleware (registered outermost → innermost; executed innermost → outermost)
    # ---------------------------------------------------------------------------
    _app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    _app.add_middleware(SlowAPIMiddleware)
    _app.add_middleware(RequestIdMiddleware)

    # ---------------------------------------------------------------------------
    # Sentry is initialised here so it captures startup errors too
    # ---------------------------------------------------------------------------
    from ssrcheck.core.sentry import init_sentry

    init_sentry(
        dsn=settings.sentry_dsn,
        environment="development" if settings.debug else "production",
    )

    # ---------------------------------------------------------------------------
    # Logging: configure structlog before any routers log anything
    # ---------------------------------------------------------------------------
    from ssrcheck.core.logging import configure_structlog

    configure_structlog(debug=settings.debug)

    _app.include_router(checks_router)

    return _app


def run() -> None:
    """Console entry point: serve the API with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(
        "ssrcheck.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
