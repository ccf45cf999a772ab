"""package.json dependency detection.

Reads the project manifest and looks for dependencies that imply server
rendering. Both dependencies and devDependencies are considered.

Three passes over the merged dependency names:
1. SSR frameworks: decisive (+30, names the framework, forces the verdict)
2. SSR-capable rendering libraries: supporting (+10)
3. Generic Node.js server packages: weak (+5)
Passes 2 and 3 only run in extended mode.
"""

import json
from typing import Optional

import structlog

from ssrcheck.detector.types import Finding
from ssrcheck.sources.base import Source

logger = structlog.get_logger(__name__)

# Order matters: frameworks are reported in this order, and the first one
# reported names the project.
SSR_FRAMEWORKS: list[tuple[str, str]] = [
    ("next", "Next.js"),
    ("nuxt", "Nuxt.js"),
    ("@nuxt/core", "Nuxt.js"),
    ("@sveltejs/kit", "SvelteKit"),
    ("@remix-run/react", "Remix"),
    ("gatsby", "Gatsby"),
    ("angular-universal", "Angular Universal"),
    ("@angular/platform-server", "Angular Universal"),
    ("@nestjs/ng-universal", "Nest.js with Angular Universal"),
]

# Matched as name prefixes: "svelte" also covers "svelte-preprocess".
SSR_LIBRARY_PREFIXES: list[str] = [
    "react-dom",
    "vue-server-renderer",
    "preact-render-to-string",
    "svelte",
    "express-react-views",
]

SERVER_PACKAGES: list[str] = [
    "express",
    "koa",
    "fastify",
    "hapi",
    "@nestjs/core",
]

FRAMEWORK_CONFIDENCE = 30
LIBRARY_CONFIDENCE = 10
SERVER_CONFIDENCE = 5


async def detect_manifest(source: Source, *, extended: bool = True) -> list[Finding]:
    """Detect SSR signals from package.json dependencies.

    A missing or malformed manifest yields no findings.
    """
    data = await load_manifest(source)
    if data is None:
        return []

    deps = merged_dependency_names(data)
    findings: list[Finding] = []

    for package, framework in SSR_FRAMEWORKS:
        if package in deps:
            findings.append(
                Finding(
                    evidence=f"Found SSR framework: {framework} ({package})",
                    confidence=FRAMEWORK_CONFIDENCE,
                    framework=framework,
                    forces_needs_ssr=True,
                )
            )

    if not extended:
        return findings

    for prefix in SSR_LIBRARY_PREFIXES:
        if any(_matches_prefix(dep, prefix) for dep in deps):
            findings.append(
                Finding(
                    evidence=f"Found SSR-capable library: {prefix}",
                    confidence=LIBRARY_CONFIDENCE,
                )
            )

    for package in SERVER_PACKAGES:
        if package in deps:
            findings.append(
                Finding(
                    evidence=f"Found server framework: {package}",
                    confidence=SERVER_CONFIDENCE,
                )
            )

    return findings


async def load_manifest(source: Source) -> Optional[dict]:
    """Read and parse package.json, returning None when absent or malformed."""
    raw = await source.read_file("package.json")
    if raw is None:
        return None

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("manifest_parse_failed", source=repr(source), error=str(exc))
        return None

    if not isinstance(data, dict):
        logger.warning("manifest_not_an_object", source=repr(source))
        return None
    return data


def merged_dependency_names(data: dict) -> dict[str, str]:
    """Merge devDependencies and dependencies; dependencies win on clashes."""
    merged: dict[str, str] = {}
    for section in ("devDependencies", "dependencies"):
        block = data.get(section)
        if isinstance(block, dict):
            merged.update(block)
    return merged


def _matches_prefix(dep: str, prefix: str) -> bool:
    return dep == prefix or dep.startswith(f"{prefix}/") or dep.startswith(f"{prefix}-")
