"""Shared types for the detector module.

Every detector emits Findings; the aggregator folds an ordered sequence of
Findings into one AnalysisReport.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Finding:
    """One piece of evidence produced by a detector.

    `framework` is only used when no earlier finding named one.
    `forces_needs_ssr` marks evidence strong enough to decide the verdict
    on its own, regardless of the accumulated confidence.
    """

    evidence: str
    confidence: int = 0
    framework: Optional[str] = None
    forces_needs_ssr: bool = False


@dataclass(frozen=True)
class AnalysisReport:
    """Complete SSR analysis output for one project.

    Confidence is a raw additive score and is not clamped at 100.
    Evidence is the audit trail, in the order the findings were produced.
    """

    needs_ssr: bool = False
    evidence: tuple[str, ...] = ()
    framework_detected: Optional[str] = None
    confidence: int = 0

    def to_dict(self) -> dict:
        return {
            "needsSSR": self.needs_ssr,
            "evidence": list(self.evidence),
            "frameworkDetected": self.framework_detected,
            "confidence": self.confidence,
        }
