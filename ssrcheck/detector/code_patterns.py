"""Source code pattern detection.

A literal substring search, not a parse: any JS/TS file mentioning
`renderToString` is taken as hand-rolled React server rendering.
"""

from ssrcheck.detector.types import Finding
from ssrcheck.sources.base import Source

RENDER_TO_STRING = "renderToString"
CODE_PATTERN_CONFIDENCE = 15


async def detect_code_patterns(source: Source) -> list[Finding]:
    if not await source.contains_any([RENDER_TO_STRING]):
        return []
    return [
        Finding(
            evidence="Found renderToString calls (React SSR)",
            confidence=CODE_PATTERN_CONFIDENCE,
            forces_needs_ssr=True,
        )
    ]
