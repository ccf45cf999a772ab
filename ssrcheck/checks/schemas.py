"""Pydantic schemas for the check endpoints.

Field names are snake_case in Python and camelCase on the wire, matching
the JSON shape existing clients of /check-repo consume.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ssrcheck.detector.types import AnalysisReport


class AnalysisReportSchema(BaseModel):
    """Serialized AnalysisReport."""

    model_config = ConfigDict(populate_by_name=True)

    needs_ssr: bool = Field(..., alias="needsSSR")
    evidence: list[str] = Field(default_factory=list)
    framework_detected: Optional[str] = Field(default=None, alias="frameworkDetected")
    confidence: int = Field(
        default=0,
        description="Additive evidence score. Not clamped to 100.",
    )

    @classmethod
    def from_report(cls, report: AnalysisReport) -> "AnalysisReportSchema":
        return cls(
            needs_ssr=report.needs_ssr,
            evidence=list(report.evidence),
            framework_detected=report.framework_detected,
            confidence=report.confidence,
        )


class CheckRepoResponse(BaseModel):
    """Response schema for GET /check-repo."""

    results: AnalysisReportSchema


class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    """Error body for 400 and 500 responses. `details` is set on 500 only."""

    error: str
    details: Optional[str] = None
