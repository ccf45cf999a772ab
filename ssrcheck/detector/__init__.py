"""Detector module for judging whether a project needs server-side rendering.

Public API:
    detect_ssr(target, github_token) -> AnalysisReport
"""

from ssrcheck.detector.types import AnalysisReport, Finding
from ssrcheck.detector.aggregator import detect_ssr, fold_findings
from ssrcheck.detector.pipeline import EXTENDED_DETECTORS, MINIMAL_DETECTORS, get_detectors

__all__ = [
    "detect_ssr",
    "fold_findings",
    "get_detectors",
    "AnalysisReport",
    "Finding",
    "EXTENDED_DETECTORS",
    "MINIMAL_DETECTORS",
]
