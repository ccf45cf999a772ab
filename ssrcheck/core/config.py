import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DETECTION_PROFILES = ("minimal", "extended")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Shared by the CLI and the HTTP server. Every field can be set through
    the upper-case environment variable of the same name (``GITHUB_TOKEN``,
    ``PORT``, ``DETECTION_PROFILE`` ...) or a local ``.env`` file.

    The GitHub token is optional. Unauthenticated calls work for public
    repositories but hit a much lower rate limit, and the code search
    endpoint rejects them outright, so remote code-pattern detection
    only produces evidence when a token is configured.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub
    github_token: str = ""
    github_api_base: str = "https://api.github.com"
    github_timeout_seconds: float = 10.0

    # Detection: "extended" runs every detector, "minimal" only the
    # manifest framework table and the config file table.
    detection_profile: str = "extended"

    @field_validator("detection_profile", mode="before")
    @classmethod
    def validate_detection_profile(cls, v: str) -> str:
        value = str(v).strip().lower()
        if value not in DETECTION_PROFILES:
            raise ValueError(
                f"detection_profile must be one of {', '.join(DETECTION_PROFILES)}"
            )
        return value

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 9002

    # CORS: comma-separated list of allowed origins, or a JSON array.
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v):
        if isinstance(v, str):
            value = v.strip()
            if value.startswith("["):
                return json.loads(value)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return v

    # Rate limiting in SlowAPI format, e.g. "10/minute", "100/hour".
    check_rate_limit: str = "30/minute"

    # Sentry: leave blank to disable error capture.
    sentry_dsn: str = ""

    # App
    debug: bool = False


def get_settings() -> Settings:
    return Settings()
