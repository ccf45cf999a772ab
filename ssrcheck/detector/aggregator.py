"""Evidence aggregation: run detectors and fold their findings into a report.

Detection flow:
1. Resolve the target into exactly one Source (local directory or GitHub).
2. Run each detector of the chosen list against it, one after another.
3. Fold the ordered findings into a single AnalysisReport.

Folding rules:
  - evidence is appended in order, confidence is summed (never clamped)
  - the first finding that names a framework names the project
  - any finding that forces the verdict sets needs_ssr
  - finally, a total confidence above SSR_CONFIDENCE_THRESHOLD sets needs_ssr

The analysis never raises to its caller. A failing detector contributes
nothing; any other failure becomes one "Error analyzing repository" line in
an otherwise partial report.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

import structlog

from ssrcheck.detector.pipeline import EXTENDED_DETECTORS, Detector, detector_name
from ssrcheck.detector.types import AnalysisReport, Finding
from ssrcheck.sources.base import Source
from ssrcheck.sources.resolver import resolve_source

logger = structlog.get_logger(__name__)

SSR_CONFIDENCE_THRESHOLD = 30


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

async def detect_ssr(
    target: str,
    github_token: Optional[str] = None,
    *,
    detectors: Sequence[Detector] = EXTENDED_DETECTORS,
) -> AnalysisReport:
    """Analyze a local path or GitHub URL and report whether it needs SSR."""
    findings: list[Finding] = []
    try:
        resolution = resolve_source(target, github_token)
        findings.extend(Finding(evidence=line) for line in resolution.evidence)
        logger.info("analysis_started", target=target, source=repr(resolution.source))
        await run_detectors(resolution.source, detectors, into=findings)
    except Exception as exc:
        logger.exception("analysis_failed", target=target)
        findings.append(Finding(evidence=f"Error analyzing repository: {exc}"))

    report = fold_findings(findings)
    logger.info(
        "analysis_complete",
        target=target,
        needs_ssr=report.needs_ssr,
        framework=report.framework_detected,
        confidence=report.confidence,
    )
    return report


# ---------------------------------------------------------------------------
# Detector execution
# ---------------------------------------------------------------------------

async def run_detectors(
    source: Source,
    detectors: Sequence[Detector],
    into: Optional[list[Finding]] = None,
) -> list[Finding]:
    """Run detectors sequentially and collect their findings in order.

    Findings are appended to `into` as each detector finishes, so a caller
    that is interrupted still holds everything gathered so far.
    """
    findings = into if into is not None else []
    for detector in detectors:
        name = detector_name(detector)
        try:
            produced = await detector(source)
        except Exception as exc:
            logger.warning("detector_failed", detector=name, error=str(exc))
            continue
        logger.debug("detector_finished", detector=name, findings=len(produced))
        findings.extend(produced)
    return findings


# ---------------------------------------------------------------------------
# Folding
# ---------------------------------------------------------------------------

def fold_findings(findings: Iterable[Finding]) -> AnalysisReport:
    """Fold an ordered sequence of findings into an AnalysisReport."""
    evidence: list[str] = []
    confidence = 0
    framework: Optional[str] = None
    needs_ssr = False

    for finding in findings:
        evidence.append(finding.evidence)
        confidence += finding.confidence
        if framework is None and finding.framework:
            framework = finding.framework
        if finding.forces_needs_ssr:
            needs_ssr = True

    if confidence > SSR_CONFIDENCE_THRESHOLD:
        needs_ssr = True

    return AnalysisReport(
        needs_ssr=needs_ssr,
        evidence=tuple(evidence),
        framework_detected=framework,
        confidence=confidence,
    )
