"""Tests for choosing between the local and GitHub sources."""

import pytest

from ssrcheck.sources.github import GitHubSource
from ssrcheck.sources.local import LocalSource
from ssrcheck.sources.resolver import parse_github_target, resolve_source


class TestParseGithubTarget:
    def test_strips_dot_git(self):
        assert parse_github_target("https://github.com/acme/widgets.git") == ("acme", "widgets")

    @pytest.mark.parametrize(
        "target",
        [
            "https://github.com/acme/widgets",
            "http://github.com/acme/widgets/",
            "github.com/acme/widgets",
            "https://github.com/acme/widgets/tree/main/packages",
        ],
    )
    def test_url_forms(self, target):
        assert parse_github_target(target) == ("acme", "widgets")

    def test_only_trailing_dot_git_is_stripped(self):
        assert parse_github_target("https://github.com/acme/widgets.github.io") == (
            "acme",
            "widgets.github.io",
        )

    @pytest.mark.parametrize(
        "target",
        [".", "/srv/app", "https://gitlab.com/acme/widgets", "github.com/acme"],
    )
    def test_non_github_targets(self, target):
        assert parse_github_target(target) is None


class TestResolveSource:
    def test_github_url(self):
        resolution = resolve_source("https://github.com/acme/widgets.git", "tok")
        assert isinstance(resolution.source, GitHubSource)
        assert resolution.source.owner == "acme"
        assert resolution.source.repo == "widgets"
        assert resolution.source.token == "tok"
        assert resolution.evidence == ["Analyzing GitHub repository: acme/widgets"]

    def test_local_path(self, tmp_path):
        resolution = resolve_source(str(tmp_path))
        assert isinstance(resolution.source, LocalSource)
        assert resolution.source.root == tmp_path
        assert resolution.evidence == []

    def test_empty_token_means_unauthenticated(self):
        resolution = resolve_source("github.com/acme/widgets", "")
        assert resolution.source.token is None
