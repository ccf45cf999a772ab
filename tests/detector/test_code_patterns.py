"""Unit tests for the renderToString code pattern detector."""

import pytest

from ssrcheck.detector.code_patterns import detect_code_patterns


class TestDetectCodePatterns:
    @pytest.mark.asyncio
    async def test_render_to_string_found(self, make_source):
        source = make_source(
            {"server/render.js": "const html = ReactDOMServer.renderToString(<App />);"}
        )
        findings = await detect_code_patterns(source)
        assert len(findings) == 1
        assert findings[0].evidence == "Found renderToString calls (React SSR)"
        assert findings[0].confidence == 15
        assert findings[0].forces_needs_ssr is True

    @pytest.mark.asyncio
    async def test_searches_whole_project(self, make_source):
        source = make_source({"src/a.ts": ""})
        await detect_code_patterns(source)
        assert source.searches == [(("renderToString",), None)]

    @pytest.mark.asyncio
    async def test_non_source_files_ignored(self, make_source):
        source = make_source({"docs/ssr.md": "Call renderToString on the server."})
        assert await detect_code_patterns(source) == []

    @pytest.mark.asyncio
    async def test_no_match(self, make_source):
        source = make_source({"src/index.js": "ReactDOM.createRoot(el).render(<App />)"})
        assert await detect_code_patterns(source) == []
