"""Directory layout detection.

Conventional directories (pages/, app/, server/, api/ ...) hint at server
code. They add confidence but never decide the verdict on their own, except
when a Next.js-style pages/ or app/ directory also contains data-fetching
functions that only run on the server.
"""

from ssrcheck.detector.types import Finding
from ssrcheck.sources.base import Source

# Directory → what its presence suggests.
SERVER_DIRECTORIES: list[tuple[str, str]] = [
    ("pages", "Next.js pages router"),
    ("pages/api", "Next.js API routes"),
    ("app", "Next.js app router"),
    ("server", "custom server"),
    ("serverless", "serverless functions"),
    ("api", "API routes"),
    ("functions", "serverless functions"),
    ("lambda", "AWS Lambda functions"),
]

# Directories whose files are searched for SSR data-fetching functions.
ROUTE_DIRECTORIES = frozenset({"pages", "app"})

SSR_FUNCTION_TOKENS: list[str] = [
    "getServerSideProps",
    "getInitialProps",
    "getStaticProps",
    "export async function generateMetadata",
    "export const generateMetadata",
]

DIRECTORY_CONFIDENCE = 10
SSR_FUNCTION_CONFIDENCE = 15


async def detect_directories(source: Source) -> list[Finding]:
    entries = await source.list_entries()
    findings: list[Finding] = []

    for directory, label in SERVER_DIRECTORIES:
        if not directory_exists(entries, directory):
            continue

        findings.append(
            Finding(
                evidence=f"Found {label} directory: {directory}/",
                confidence=DIRECTORY_CONFIDENCE,
            )
        )

        if directory in ROUTE_DIRECTORIES and await source.contains_any(
            SSR_FUNCTION_TOKENS, under=directory
        ):
            findings.append(
                Finding(
                    evidence=(
                        "Found SSR functions (getServerSideProps, getInitialProps, "
                        f"getStaticProps or generateMetadata) in {directory}/"
                    ),
                    confidence=SSR_FUNCTION_CONFIDENCE,
                    forces_needs_ssr=True,
                )
            )

    return findings


def directory_exists(entries: list[str], directory: str) -> bool:
    """True when an entry is the directory itself or lies beneath it."""
    prefix = f"{directory}/"
    return any(entry == directory or entry.startswith(prefix) for entry in entries)
