"""``ssrcheck``: one-shot SSR check from the command line.

    ssrcheck [TARGET] [--profile minimal|extended] [--json] [--verbose]

TARGET is a local directory (default: the current one) or a GitHub URL.
The GitHub token is read from GITHUB_TOKEN.
"""

import asyncio
import json
import logging
import sys
from typing import Optional

import typer

from ssrcheck.core.config import get_settings
from ssrcheck.core.logging import configure_structlog
from ssrcheck.detector.aggregator import detect_ssr
from ssrcheck.detector.pipeline import get_detectors
from ssrcheck.detector.types import AnalysisReport

app = typer.Typer(
    name="ssrcheck",
    help="Detect whether a project needs server-side rendering.",
    add_completion=False,
)


def format_report(report: AnalysisReport) -> str:
    """Render a report as the human-readable block printed by the CLI."""
    lines = [
        "=== SSR DETECTION RESULTS ===",
        f"Needs SSR: {'YES' if report.needs_ssr else 'NO'}",
        f"Framework Detected: {report.framework_detected or 'None'}",
        f"Confidence: {report.confidence}%",
        "",
        "Evidence:",
    ]
    lines.extend(f"{index}. {item}" for index, item in enumerate(report.evidence, start=1))
    return "\n".join(lines)


@app.command()
def main(
    target: str = typer.Argument(".", help="Local directory or GitHub repository URL"),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Detector list to run: minimal or extended (default from DETECTION_PROFILE)",
    ),
    github_token: Optional[str] = typer.Option(
        None,
        "--github-token",
        envvar="GITHUB_TOKEN",
        help="GitHub API token for remote repositories",
        show_default=False,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Analyze TARGET and print whether it needs server-side rendering."""
    configure_structlog(
        debug=True,
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
    )

    try:
        settings = get_settings()
        detectors = get_detectors(profile or settings.detection_profile)
        token = github_token or settings.github_token or None

        if not as_json:
            typer.echo(f"Analyzing repository: {target}...")
        report = asyncio.run(detect_ssr(target, token, detectors=detectors))
    except Exception as exc:
        typer.echo(f"Fatal error: {exc}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        typer.echo("")
        typer.echo(format_report(report))


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
