"""Tests for GitHubAuthManager."""

import logging

from gh_installer.core.github.auth import GitHubAuthManager


def test_apply_auth_with_token():
    """Test that the Bearer header is applied."""
    auth = GitHubAuthManager(" token123 ")

    headers = auth.apply_auth({"Accept": "x"})

    assert headers == {"Accept": "x", "Authorization": "Bearer token123"}


def test_apply_auth_without_token_notifies_once(caplog):
    """Test that anonymous use is reported only once."""
    auth = GitHubAuthManager()

    with caplog.at_level(logging.INFO):
        auth.apply_auth({})
        auth.apply_auth({})

    notices = [r for r in caplog.records if "No GitHub token" in r.message]
    assert len(notices) == 1


def test_rate_limit_info_recorded():
    """Test that rate limit headers are parsed."""
    auth = GitHubAuthManager()

    auth.update_rate_limit_info(
        {"X-RateLimit-Remaining": "4000", "X-RateLimit-Reset": "9999999999"}
    )

    assert auth.remaining_requests == 4000
    assert auth.rate_limit_reset == 9999999999


def test_low_rate_limit_warns(caplog):
    """Test the warning when few requests remain."""
    auth = GitHubAuthManager()

    with caplog.at_level(logging.WARNING):
        auth.update_rate_limit_info({"X-RateLimit-Remaining": "3"})

    assert "rate limit nearly exhausted" in caplog.text
    assert "resets at an unknown time" in caplog.text


def test_invalid_rate_limit_headers(caplog):
    """Test that garbage headers are logged, not raised."""
    auth = GitHubAuthManager()

    with caplog.at_level(logging.WARNING):
        auth.update_rate_limit_info({"X-RateLimit-Remaining": "lots"})

    assert "Invalid rate limit headers" in caplog.text
    assert auth.remaining_requests is None


def test_missing_headers_ignored():
    """Test that responses without rate limit headers change nothing."""
    auth = GitHubAuthManager()

    auth.update_rate_limit_info({})

    assert auth.remaining_requests is None
