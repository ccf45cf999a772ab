"""Ordered detector lists.

Each detector takes a Source and returns Findings. The order of a list is
the order evidence is reported in, and decides which framework names the
project when several are found. Adding or removing a detection strategy
only touches these lists, never the aggregation.

Profiles:
  minimal   manifest framework table + config files
  extended  adds rendering/server libraries, directory layout and code
            patterns (default)
"""

from collections.abc import Awaitable, Callable
from functools import partial

from ssrcheck.detector.code_patterns import detect_code_patterns
from ssrcheck.detector.config_files import detect_config_files
from ssrcheck.detector.manifest import detect_manifest
from ssrcheck.detector.structure import detect_directories
from ssrcheck.detector.types import Finding
from ssrcheck.sources.base import Source

Detector = Callable[[Source], Awaitable[list[Finding]]]

MINIMAL_DETECTORS: tuple[Detector, ...] = (
    partial(detect_manifest, extended=False),
    detect_config_files,
)

EXTENDED_DETECTORS: tuple[Detector, ...] = (
    detect_manifest,
    detect_config_files,
    detect_directories,
    detect_code_patterns,
)

_PROFILES: dict[str, tuple[Detector, ...]] = {
    "minimal": MINIMAL_DETECTORS,
    "extended": EXTENDED_DETECTORS,
}


def get_detectors(profile: str) -> tuple[Detector, ...]:
    """Return the detector list for a profile name."""
    try:
        return _PROFILES[profile.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown detection profile {profile!r}; expected one of {', '.join(_PROFILES)}"
        ) from None


def detector_name(detector: Detector) -> str:
    func = detector.func if isinstance(detector, partial) else detector
    return getattr(func, "__name__", repr(func))
