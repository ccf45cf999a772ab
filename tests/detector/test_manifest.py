"""Unit tests for the package.json dependency detector."""

import json

import pytest

from ssrcheck.detector.manifest import (
    detect_manifest,
    load_manifest,
    merged_dependency_names,
)


def _pkg(deps: dict | None = None, dev_deps: dict | None = None) -> dict[str, str]:
    payload: dict = {"name": "app"}
    if deps is not None:
        payload["dependencies"] = deps
    if dev_deps is not None:
        payload["devDependencies"] = dev_deps
    return {"package.json": json.dumps(payload)}


class TestSsrFrameworks:
    @pytest.mark.asyncio
    async def test_nextjs(self, make_source):
        findings = await detect_manifest(make_source(_pkg({"next": "13.0.0"})))
        assert findings[0].evidence == "Found SSR framework: Next.js (next)"
        assert findings[0].confidence == 30
        assert findings[0].framework == "Next.js"
        assert findings[0].forces_needs_ssr is True

    @pytest.mark.parametrize(
        "package,framework",
        [
            ("nuxt", "Nuxt.js"),
            ("@nuxt/core", "Nuxt.js"),
            ("@sveltejs/kit", "SvelteKit"),
            ("@remix-run/react", "Remix"),
            ("gatsby", "Gatsby"),
            ("angular-universal", "Angular Universal"),
            ("@angular/platform-server", "Angular Universal"),
            ("@nestjs/ng-universal", "Nest.js with Angular Universal"),
        ],
    )
    @pytest.mark.asyncio
    async def test_every_known_framework(self, make_source, package, framework):
        findings = await detect_manifest(make_source(_pkg({package: "1.0.0"})), extended=False)
        assert len(findings) == 1
        assert findings[0].evidence == f"Found SSR framework: {framework} ({package})"
        assert findings[0].framework == framework

    @pytest.mark.asyncio
    async def test_dev_dependencies_are_considered(self, make_source):
        findings = await detect_manifest(make_source(_pkg({}, {"gatsby": "5.0.0"})), extended=False)
        assert [f.framework for f in findings] == ["Gatsby"]

    @pytest.mark.asyncio
    async def test_frameworks_reported_in_table_order(self, make_source):
        source = make_source(_pkg({"gatsby": "5", "next": "14"}))
        findings = await detect_manifest(source, extended=False)
        assert [f.framework for f in findings] == ["Next.js", "Gatsby"]


class TestExtendedPasses:
    @pytest.mark.asyncio
    async def test_rendering_library_adds_ten(self, make_source):
        findings = await detect_manifest(make_source(_pkg({"react-dom": "18.2.0"})))
        assert len(findings) == 1
        assert findings[0].evidence == "Found SSR-capable library: react-dom"
        assert findings[0].confidence == 10
        assert findings[0].framework is None
        assert findings[0].forces_needs_ssr is False

    @pytest.mark.asyncio
    async def test_library_prefix_matches_related_packages(self, make_source):
        findings = await detect_manifest(make_source(_pkg({"svelte-preprocess": "5"})))
        assert [f.evidence for f in findings] == ["Found SSR-capable library: svelte"]

    @pytest.mark.asyncio
    async def test_library_prefix_does_not_match_unrelated_names(self, make_source):
        findings = await detect_manifest(make_source(_pkg({"sveltekit-like": "1"})))
        assert findings == []

    @pytest.mark.asyncio
    async def test_server_package_adds_five(self, make_source):
        findings = await detect_manifest(make_source(_pkg({"express": "4.18.0"})))
        assert len(findings) == 1
        assert findings[0].evidence == "Found server framework: express"
        assert findings[0].confidence == 5
        assert findings[0].forces_needs_ssr is False

    @pytest.mark.asyncio
    async def test_minimal_mode_skips_extra_passes(self, make_source):
        source = make_source(_pkg({"react-dom": "18", "express": "4"}))
        assert await detect_manifest(source, extended=False) == []

    @pytest.mark.asyncio
    async def test_passes_run_in_order(self, make_source):
        source = make_source(_pkg({"express": "4", "react-dom": "18", "next": "14"}))
        evidence = [f.evidence for f in await detect_manifest(source)]
        assert evidence == [
            "Found SSR framework: Next.js (next)",
            "Found SSR-capable library: react-dom",
            "Found server framework: express",
        ]


class TestMissingOrBrokenManifest:
    @pytest.mark.asyncio
    async def test_no_manifest(self, make_source):
        assert await detect_manifest(make_source({})) == []

    @pytest.mark.asyncio
    async def test_invalid_json(self, make_source):
        assert await detect_manifest(make_source({"package.json": "not json {{"})) == []

    @pytest.mark.asyncio
    async def test_manifest_not_an_object(self, make_source):
        assert await load_manifest(make_source({"package.json": "[1, 2]"})) is None

    @pytest.mark.asyncio
    async def test_non_dict_sections_ignored(self, make_source):
        source = make_source({"package.json": json.dumps({"dependencies": ["next"]})})
        assert await detect_manifest(source) == []


class TestMergedDependencyNames:
    def test_both_sections_contribute(self):
        merged = merged_dependency_names(
            {"dependencies": {"next": "14"}, "devDependencies": {"jest": "29"}}
        )
        assert set(merged) == {"next", "jest"}

    def test_dependencies_win_over_dev_dependencies(self):
        merged = merged_dependency_names(
            {"dependencies": {"next": "14"}, "devDependencies": {"next": "13"}}
        )
        assert merged["next"] == "14"
