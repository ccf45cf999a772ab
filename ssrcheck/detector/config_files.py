"""Framework configuration file detection.

A framework's config file at the project root is decisive evidence: the
project is built with that framework even when the manifest is missing or
unreadable.
"""

from ssrcheck.detector.types import Finding
from ssrcheck.sources.base import Source

CONFIG_FILES: list[tuple[str, str]] = [
    ("next.config.js", "Next.js"),
    ("nuxt.config.js", "Nuxt.js"),
    ("svelte.config.js", "SvelteKit"),
    ("remix.config.js", "Remix"),
    ("gatsby-config.js", "Gatsby"),
    ("angular.json", "Angular"),
]

CONFIG_CONFIDENCE = 20


async def detect_config_files(source: Source) -> list[Finding]:
    """Report each known config file present at the root of the listing."""
    entries = set(await source.list_entries())

    return [
        Finding(
            evidence=f"Found configuration file for {framework}: {filename}",
            confidence=CONFIG_CONFIDENCE,
            framework=framework,
            forces_needs_ssr=True,
        )
        for filename, framework in CONFIG_FILES
        if filename in entries
    ]
