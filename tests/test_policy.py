# This project was developed with assistance from AI tools.
"""Tests for the route admission policy."""

import pytest
from pydantic import ValidationError

from problem_details.services.policy import ROOT_PATH, RoutePolicy


def test_root_sentinel_includes_everything():
    """Including '/' admits every path."""
    policy = RoutePolicy(include_paths=[ROOT_PATH])
    assert policy.can_intercept("/api/x")
    assert policy.can_intercept("/")
    assert policy.can_intercept("/health")


def test_include_and_exclude():
    """Exclusions win over inclusions."""
    policy = RoutePolicy(include_paths=["/api"], exclude_paths=["/api/internal"])
    assert policy.can_intercept("/api/x")
    assert not policy.can_intercept("/health")
    assert not policy.can_intercept("/api/internal/y")
    assert not policy.can_intercept("/api/internal")


def test_prefix_match_respects_segments():
    """Prefixes match whole path segments only."""
    policy = RoutePolicy(include_paths=["/ab"])
    assert policy.can_intercept("/ab")
    assert policy.can_intercept("/ab/c")
    assert not policy.can_intercept("/abc")


def test_match_ignores_case():
    """Path matching is case-insensitive."""
    policy = RoutePolicy(include_paths=["/API"])
    assert policy.can_intercept("/api/items")


def test_trailing_slash_normalised():
    """Trailing slashes on prefixes are ignored."""
    policy = RoutePolicy(include_paths=["/api/"])
    assert policy.include_paths == ("/api",)
    assert policy.can_intercept("/api/items")
    assert not policy.can_intercept("/apiary")


def test_no_includes_fails_closed():
    """With no include paths nothing is admitted."""
    assert not RoutePolicy().can_intercept("/api/x")
    assert not RoutePolicy(exclude_paths=["/health"]).can_intercept("/api/x")


def test_root_exclude_excludes_everything():
    """Excluding '/' rejects every path."""
    policy = RoutePolicy(include_paths=["/"], exclude_paths=["/"])
    assert not policy.can_intercept("/api/x")


def test_single_string_accepted():
    """A single string is accepted as a one-item list."""
    assert RoutePolicy(include_paths="/api").include_paths == ("/api",)


def test_relative_prefix_rejected():
    """Prefixes without a leading slash are rejected."""
    with pytest.raises(ValidationError):
        RoutePolicy(include_paths=["api"])


def test_policy_is_immutable():
    """A RoutePolicy cannot be modified after creation."""
    policy = RoutePolicy(include_paths=["/api"])
    with pytest.raises(ValidationError):
        policy.include_paths = ("/other",)
