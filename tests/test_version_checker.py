"""Tests for version comparison and lookup failure handling."""

import logging
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from gha_outdated.application.version_checker import VersionChecker
from gha_outdated.domain.action import ActionReference, VersionCheckResult
from gha_outdated.infrastructure.github_client import (
    GitHubReleasesClient,
    RateLimitExceeded,
    ReleaseLookupError,
    RepositoryNotFound,
)


def _checker(make_config, latest=None, error=None, major_only=False):
    client = MagicMock(spec=GitHubReleasesClient)
    if error is not None:
        client.get_latest_tag.side_effect = error
    else:
        client.get_latest_tag.return_value = latest
    return VersionChecker(client, make_config(major_only=major_only)), client


class TestVersionChecker:
    def test_up_to_date(self, make_config):
        checker, client = _checker(make_config, latest="v2")
        assert checker.check(ActionReference.parse("actions/checkout@v2")) is None
        client.get_latest_tag.assert_called_once_with("actions", "checkout")

    def test_major_update(self, make_config):
        checker, _ = _checker(make_config, latest="v4")
        ref = ActionReference.parse("actions/checkout@v2")

        result = checker.check(ref)

        assert result == VersionCheckResult(reference=ref, latest_version="v4", is_major_update=True)
        assert result.current_version == "v2"
        assert result.action == "actions/checkout@v2"

    def test_major_update_in_major_only_mode(self, make_config):
        checker, _ = _checker(make_config, latest="v4", major_only=True)
        result = checker.check(ActionReference.parse("actions/checkout@v2"))
        assert result is not None and result.is_major_update

    def test_minor_update(self, make_config):
        checker, _ = _checker(make_config, latest="1.3.0")
        result = checker.check(ActionReference.parse("sliteteam/github-action-git-crypt-unlock@1.2.0"))
        assert result is not None
        assert result.is_major_update is False
        assert result.latest_version == "1.3.0"

    def test_minor_update_suppressed_in_major_only_mode(self, make_config):
        checker, _ = _checker(make_config, latest="1.3.0", major_only=True)
        assert checker.check(ActionReference.parse("sliteteam/github-action-git-crypt-unlock@1.2.0")) is None

    def test_unparseable_versions_are_minor(self, make_config):
        checker, _ = _checker(make_config, latest="v4")
        result = checker.check(ActionReference.parse("actions/checkout@main"))
        assert result is not None and result.is_major_update is False

    def test_each_call_hits_the_api(self, make_config):
        checker, client = _checker(make_config, latest="v4")
        ref = ActionReference.parse("actions/checkout@v2")
        checker.check(ref)
        checker.check(ref)
        assert client.get_latest_tag.call_count == 2


class TestLookupFailures:
    def test_not_found(self, make_config, caplog):
        checker, _ = _checker(make_config, error=RepositoryNotFound("Repository not found: acme/gone"))
        with caplog.at_level(logging.WARNING):
            assert checker.check(ActionReference.parse("acme/gone@v1")) is None
        assert "Repository not found: acme/gone" in caplog.text

    def test_rate_limited(self, make_config, caplog):
        checker, _ = _checker(make_config, error=RateLimitExceeded("rate limited"))
        with caplog.at_level(logging.WARNING):
            assert checker.check(ActionReference.parse("actions/checkout@v2")) is None
        assert "rate limit exceeded: actions/checkout" in caplog.text
        assert "wait 60 minutes" in caplog.text

    def test_rate_limited_with_reset_time(self, make_config, caplog):
        reset_at = datetime(2026, 10, 17, 12, 30, tzinfo=timezone.utc)
        checker, _ = _checker(make_config, error=RateLimitExceeded("rate limited", reset_at=reset_at))
        with caplog.at_level(logging.WARNING):
            assert checker.check(ActionReference.parse("actions/checkout@v2")) is None
        assert "wait until 2026-10-17 12:30:00 UTC" in caplog.text

    @pytest.mark.parametrize("error", [ReleaseLookupError("API error for a/b: 500"), ReleaseLookupError("boom")])
    def test_other_failure(self, make_config, caplog, error):
        checker, _ = _checker(make_config, error=error)
        with caplog.at_level(logging.WARNING):
            assert checker.check(ActionReference.parse("a/b@v1")) is None
        assert "Error checking a/b@v1" in caplog.text
